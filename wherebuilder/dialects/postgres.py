"""PostgreSQL dialect."""

from typing import Any, Callable, ClassVar

from .base import Dialect


class PostgresDialect(Dialect):
    """Dialect for PostgreSQL (scheme postgresql); psycopg2 uses the ``format`` paramstyle."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("postgresql", "postgres")

    PLACEHOLDER: ClassVar[str] = "%s"

    F: ClassVar[dict[str, Callable[..., Any]]] = {
        "escape_for_like": lambda s: s.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_"),
    }

    def escape_word(self, word: str) -> str:
        return '"' + word.replace('"', '""') + '"'

    def literal(self, value: Any) -> str:
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        return super().literal(value)
