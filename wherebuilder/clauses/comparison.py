"""Leaf clauses: column comparisons, BETWEEN, IN and NULL checks."""

from typing import Any, Iterable, Literal, TextIO

from ..column_type import ColumnType
from ..dialects.base import Dialect
from ..errors import InvalidArgumentError
from ._bases import LeafClause, convert_operand

ComparisonKind = Literal["eq", "ne", "gt", "ge", "lt", "le", "like"]


class Comparison(LeafClause):
    """Binary comparison between a column and one operand (e.g. ``name = ?``)."""

    kind: ComparisonKind
    value: Any

    @classmethod
    def create(cls, kind: str, column_type: ColumnType, value: Any) -> "Comparison":
        if kind == "like" and isinstance(value, str):
            # patterns are text whatever the column type
            converted = value
        else:
            converted = convert_operand(column_type, value)
        return cls(kind=kind, column_name=column_type.name, column_type=column_type, value=converted)

    def append_sql(self, dialect: Dialect, buffer: TextIO, arguments: list[Any]) -> None:
        self._append_column(dialect, buffer)
        buffer.write(f" {dialect.operator(self.kind)} ")
        self._append_operand(dialect, buffer, arguments, self.value)

    def __str__(self) -> str:
        return f"{self.column_name} {self._operator} {self.value}"


class Between(LeafClause):
    """Inclusive range: ``column BETWEEN low AND high``."""

    kind: Literal["between"] = "between"
    low: Any
    high: Any

    @classmethod
    def create(cls, column_type: ColumnType, low: Any, high: Any) -> "Between":
        return cls(
            column_name=column_type.name,
            column_type=column_type,
            low=convert_operand(column_type, low),
            high=convert_operand(column_type, high),
        )

    def append_sql(self, dialect: Dialect, buffer: TextIO, arguments: list[Any]) -> None:
        self._append_column(dialect, buffer)
        buffer.write(f" {dialect.operator('between')} ")
        self._append_operand(dialect, buffer, arguments, self.low)
        buffer.write(f" {dialect.operator('and')} ")
        self._append_operand(dialect, buffer, arguments, self.high)

    def __str__(self) -> str:
        return f"{self.column_name} BETWEEN {self.low} AND {self.high}"


class In(LeafClause):
    """Membership in a list of values: ``column IN (?,?,?)``."""

    kind: Literal["in"] = "in"
    values: tuple[Any, ...]

    @classmethod
    def create(cls, column_type: ColumnType, values: Iterable[Any]) -> "In":
        """Build an IN clause; an empty list is rejected since ``IN ()`` is not valid SQL."""
        values = tuple(values)
        if not values:
            raise InvalidArgumentError(f"IN list for column '{column_type.name}' is empty")
        return cls(
            column_name=column_type.name,
            column_type=column_type,
            values=tuple(convert_operand(column_type, value) for value in values),
        )

    def append_sql(self, dialect: Dialect, buffer: TextIO, arguments: list[Any]) -> None:
        self._append_column(dialect, buffer)
        buffer.write(f" {dialect.operator('in')} (")
        for index, value in enumerate(self.values):
            if index:
                buffer.write(",")
            self._append_operand(dialect, buffer, arguments, value)
        buffer.write(")")

    def __str__(self) -> str:
        return f"{self.column_name} IN ({', '.join(map(str, self.values))})"


class IsNull(LeafClause):
    """``column IS NULL``; ``= NULL`` does not work in SQL."""

    kind: Literal["is_null"] = "is_null"

    @classmethod
    def create(cls, column_type: ColumnType) -> "IsNull":
        return cls(column_name=column_type.name, column_type=column_type)

    def append_sql(self, dialect: Dialect, buffer: TextIO, arguments: list[Any]) -> None:
        self._append_column(dialect, buffer)
        buffer.write(f" {dialect.operator(self.kind)}")

    def __str__(self) -> str:
        return f"{self.column_name} {self._operator}"


class IsNotNull(IsNull):
    """``column IS NOT NULL``."""

    kind: Literal["is_not_null"] = "is_not_null"
