"""Base clause types for WHERE expression trees."""

from typing import Any, TextIO

from pydantic import BaseModel, ConfigDict

from ..arguments import ColumnArg, SelectArg
from ..column_type import ColumnType
from ..dialects.base import Dialect


class ClauseBase(BaseModel):
    """Base type for all clause nodes.

    Subclasses implement ``append_sql``, which writes the clause's SQL text to
    ``buffer`` and appends its bind arguments to ``arguments`` in placeholder order.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: str

    def append_sql(self, dialect: Dialect, buffer: TextIO, arguments: list[Any]) -> None:
        raise NotImplementedError("Subclasses must implement `append_sql`")

    @property
    def _operator(self) -> str:
        """Default SQL token for this clause, used in diagnostic strings."""
        return Dialect.OPERATORS[self.kind]


class LeafClause(ClauseBase):
    """A comparison on a single column."""

    column_name: str
    column_type: ColumnType

    def _append_column(self, dialect: Dialect, buffer: TextIO) -> None:
        buffer.write(dialect.escape_column_name(self.column_name))

    @staticmethod
    def _append_operand(dialect: Dialect, buffer: TextIO, arguments: list[Any], operand: Any) -> None:
        """Write one operand: another column, an inline literal, or a placeholder plus its bind argument."""
        if isinstance(operand, ColumnArg):
            buffer.write(dialect.escape_column_name(operand.column_name))
        elif not isinstance(operand, SelectArg) and dialect.can_inline(operand):
            buffer.write(dialect.literal(operand))
        else:
            buffer.write(dialect.PLACEHOLDER)
            arguments.append(operand)


def convert_operand(column_type: ColumnType, operand: Any) -> Any:
    """Validate an operand against the column type; argument holders pass through."""
    if isinstance(operand, (SelectArg, ColumnArg)):
        return operand
    return column_type.convert(operand)
