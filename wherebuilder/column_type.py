"""Column metadata for entity models.

An entity type is a Pydantic model: each field is a column whose name is the
field alias when one is set, otherwise the field name. ``resolve_column`` is
the lookup every leaf-introducing builder call goes through; it returns a
ColumnType that leaf clauses carry and use to validate their operands.
"""

from __future__ import annotations

import inspect
from functools import cache, cached_property
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.fields import FieldInfo as PydanticFieldInfo

from .errors import InvalidArgumentError, UnknownColumnError
from .utils.get_base_type import get_base_type


class ColumnType(BaseModel):
    """Resolved type descriptor for a single column of an entity."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    entity_type: Any  # type[BaseModel]
    name: str
    """Column name as it appears in SQL."""
    field_name: str
    """Attribute name on the entity model."""
    annotation: Any
    base_type: Any
    nullable: bool

    @classmethod
    def from_pydantic_info(cls, entity_type: type[BaseModel], field_name: str,
                           info: PydanticFieldInfo) -> ColumnType:
        """Build a ColumnType from Pydantic field info."""
        base_type, nullable = get_base_type(info.annotation)
        return cls(
            entity_type=entity_type,
            name=info.alias or field_name,
            field_name=field_name,
            annotation=info.annotation,
            base_type=base_type,
            nullable=nullable,
        )

    @cached_property
    def _adapter(self) -> TypeAdapter:
        if inspect.isclass(self.base_type) and issubclass(self.base_type, BaseModel):
            return TypeAdapter(self.annotation)
        return TypeAdapter(self.annotation, config=ConfigDict(arbitrary_types_allowed=True))

    def convert(self, value: Any) -> Any:
        """Validate an operand against this column's type and return the value to bind."""
        if value is None:
            raise InvalidArgumentError(
                f"argument for '{self.name}' is None, use is_null() or is_not_null() instead"
            )
        try:
            return self._adapter.validate_python(value)
        except ValidationError as error:
            raise InvalidArgumentError(
                f"argument {value!r} is not a valid value for column '{self.name}' "
                f"of type {self.annotation!r}"
            ) from error

    def __str__(self) -> str:
        return f"{get_table_name(self.entity_type)}.{self.name}"


def get_table_name(entity_type: type) -> str:
    """Table name of an entity: its ``_get_table_name()`` when defined, else the lowercased class name."""
    getter = getattr(entity_type, "_get_table_name", None)
    if callable(getter):
        return getter()
    return entity_type.__name__.lower()


@cache
def get_columns(entity_type: type[BaseModel]) -> dict[str, ColumnType]:
    """Return the columns of an entity, keyed by lowercased column name."""
    if not (inspect.isclass(entity_type) and issubclass(entity_type, BaseModel)):
        raise TypeError(f"Entity type must be a pydantic model class, got {entity_type!r}")
    columns = {}
    for field_name, info in entity_type.model_fields.items():
        column = ColumnType.from_pydantic_info(entity_type, field_name, info)
        columns[column.name.lower()] = column
    return columns


def resolve_column(entity_type: type[BaseModel], column_name: str) -> ColumnType:
    """Look up a column by name (case-insensitive) on the given entity type.

    Raises:
        UnknownColumnError: no such column. When the name matches the field
            name of an aliased column, the message points at the column name.
    """
    columns = get_columns(entity_type)
    column = columns.get(column_name.lower())
    if column is not None:
        return column
    table_name = get_table_name(entity_type)
    for candidate in columns.values():
        if candidate.field_name == column_name:
            raise UnknownColumnError(
                f"You should use column name '{candidate.name}' for table {table_name} "
                f"instead of field name '{candidate.field_name}'",
                column_name=column_name,
                table_name=table_name,
            )
    raise UnknownColumnError(
        f"Unknown column name '{column_name}' in table {table_name}",
        column_name=column_name,
        table_name=table_name,
    )
