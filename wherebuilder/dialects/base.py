"""Base Dialect type: subclasses decide identifier quoting, placeholders and literals."""

import math
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Callable, ClassVar

from pydantic import BaseModel


class _DialectF:
    """Helper for dialect.f: __getattr__ returns the callable from the dialect's F config."""

    __slots__ = ("_dialect",)

    def __init__(self, dialect: "Dialect") -> None:
        self._dialect = dialect

    def __getattr__(self, name: str) -> Callable[..., Any]:
        F = type(self._dialect).F  # pylint: disable=invalid-name
        if name in F:
            return F[name]
        raise AttributeError(name)


class Dialect(BaseModel, ABC):
    """Base for SQL dialects; renders the dialect-specific pieces of a leaf clause.

    Instances carry the rendering options: ``quote_identifiers`` escapes every
    column name, ``inline_literals`` writes simple values (numbers, booleans,
    strings) into the SQL text instead of binding them.
    """

    model_config = {"frozen": True}

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ()
    """URL schemes this dialect handles (e.g. ('sqlite',), ('mssql', 'sqlserver'))."""

    PLACEHOLDER: ClassVar[str] = "?"
    """Positional bind parameter marker of the driver."""

    OPERATORS: ClassVar[dict[str, str]] = {
        "eq": "=",
        "ne": "<>",
        "gt": ">",
        "ge": ">=",
        "lt": "<",
        "le": "<=",
        "like": "LIKE",
        "between": "BETWEEN",
        "in": "IN",
        "is_null": "IS NULL",
        "is_not_null": "IS NOT NULL",
        "and": "AND",
        "or": "OR",
        "not": "NOT",
    }
    """SQL token per clause kind; subclasses override single entries by merging."""

    F: ClassVar[dict[str, Callable[..., Any]]] = {}
    """Dialect-specific helpers (e.g. escape_for_like). Access via dialect.f.escape_for_like(s)."""

    quote_identifiers: bool = False
    inline_literals: bool = False

    @property
    def f(self) -> _DialectF:
        """Access dialect-specific helpers by name (e.g. self.f.escape_for_like(s))."""
        return _DialectF(self)

    @abstractmethod
    def escape_word(self, word: str) -> str:
        """Return the word quoted as an identifier for this engine."""
        ...  # pylint: disable=unnecessary-ellipsis

    def escape_column_name(self, column_name: str) -> str:
        """Column name as written in SQL, quoted when ``quote_identifiers`` is set."""
        if self.quote_identifiers:
            return self.escape_word(column_name)
        return column_name

    def operator(self, kind: str) -> str:
        """SQL token for a clause kind (e.g. ``ne`` -> ``<>``)."""
        try:
            return type(self).OPERATORS[kind]
        except KeyError:
            raise ValueError(f"Unknown clause kind: {kind!r}") from None

    def can_inline(self, value: Any) -> bool:
        """True if ``value`` may be written as a literal (only when ``inline_literals`` is set).

        NaN and infinities have no portable literal and are always bound.
        """
        if not self.inline_literals or not isinstance(value, (bool, int, float, Decimal, str)):
            return False
        if isinstance(value, float):
            return math.isfinite(value)
        if isinstance(value, Decimal):
            return value.is_finite()
        return True

    def literal(self, value: Any) -> str:
        """Render a value accepted by ``can_inline`` as SQL literal text."""
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, (int, float, Decimal)):
            return str(value)
        if isinstance(value, str):
            return self.quote_string(value)
        raise TypeError(f"Cannot render {type(value).__name__} as a SQL literal")

    def quote_string(self, value: str) -> str:
        return "'" + value.replace("'", "''") + "'"
