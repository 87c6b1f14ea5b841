"""SQLite dialect."""

from typing import ClassVar

from .base import Dialect


class SqliteDialect(Dialect):
    """Dialect for SQLite (scheme sqlite)."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("sqlite",)

    def escape_word(self, word: str) -> str:
        return "`" + word.replace("`", "``") + "`"
