"""MySQL dialect."""

from typing import Any, Callable, ClassVar

from .base import Dialect


class MysqlDialect(Dialect):
    """Dialect for MySQL (scheme mysql); pymysql uses the ``format`` paramstyle."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("mysql", "mariadb")

    PLACEHOLDER: ClassVar[str] = "%s"

    F: ClassVar[dict[str, Callable[..., Any]]] = {
        "escape_for_like": lambda s: s.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_"),
    }

    def escape_word(self, word: str) -> str:
        return "`" + word.replace("`", "``") + "`"

    def quote_string(self, value: str) -> str:
        # backslash is an escape character in MySQL string literals
        return "'" + value.replace("\\", "\\\\").replace("'", "''") + "'"
