"""SQL Server dialect."""

from typing import Any, Callable, ClassVar

from .base import Dialect


class SqlserverDialect(Dialect):
    """Dialect for SQL Server (schemes mssql, sqlserver)."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("mssql", "sqlserver")

    F: ClassVar[dict[str, Callable[..., Any]]] = {
        # LIKE has no default escape character on SQL Server
        "escape_for_like": lambda s: s.replace("[", "[[]").replace("%", "[%]").replace("_", "[_]"),
    }

    def escape_word(self, word: str) -> str:
        return "[" + word.replace("]", "]]") + "]"

    def quote_string(self, value: str) -> str:
        return "N'" + value.replace("'", "''") + "'"
