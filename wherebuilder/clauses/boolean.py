"""Boolean combinators: AND, OR (two children) and NOT (one child)."""

from typing import Any, Literal, TextIO

from ..dialects.base import Dialect
from ._bases import ClauseBase


class BinaryClause(ClauseBase):
    """Combinator over two fully resolved children, rendered as ``(left OP right)``."""

    left: "Clause"
    right: "Clause"

    def append_sql(self, dialect: Dialect, buffer: TextIO, arguments: list[Any]) -> None:
        buffer.write("(")
        self.left.append_sql(dialect, buffer, arguments)
        buffer.write(f" {dialect.operator(self.kind)} ")
        self.right.append_sql(dialect, buffer, arguments)
        buffer.write(")")

    def __str__(self) -> str:
        return f"{self.left} {self._operator} {self.right}"


class And(BinaryClause):
    kind: Literal["and"] = "and"


class Or(BinaryClause):
    kind: Literal["or"] = "or"


class Not(ClauseBase):
    """Negation of a child clause, rendered as ``NOT (child)``."""

    kind: Literal["not"] = "not"
    child: "Clause"

    def append_sql(self, dialect: Dialect, buffer: TextIO, arguments: list[Any]) -> None:
        buffer.write(f"{dialect.operator(self.kind)} (")
        self.child.append_sql(dialect, buffer, arguments)
        buffer.write(")")

    def __str__(self) -> str:
        return f"NOT {self.child}"
