"""Special operands: values supplied later, and references to other columns."""

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict

from .errors import InvalidArgumentError

_UNSET = object()


class SelectArg:
    """A bind argument whose value is set after the predicate is built.

    The holder itself goes into the argument list, so the same rendered SQL can
    be executed again after calling ``set_value`` with a new value.
    """

    def __init__(self, value: Any = _UNSET, column_name: str = None):
        self._value = value
        self.column_name = column_name

    @property
    def is_set(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> Any:
        if self._value is _UNSET:
            label = f" for column '{self.column_name}'" if self.column_name else ""
            raise InvalidArgumentError(f"SelectArg{label} has not been set")
        return self._value

    def set_value(self, value: Any) -> None:
        self._value = value

    def __repr__(self) -> str:
        if self._value is _UNSET:
            return "SelectArg(<unset>)"
        return f"SelectArg({self._value!r})"

    __str__ = __repr__


class ColumnArg(BaseModel):
    """Compare against another column of the same entity instead of a value."""

    model_config = ConfigDict(frozen=True)

    column_name: str

    def __str__(self) -> str:
        return self.column_name


def resolve_arguments(arguments: Iterable[Any]) -> list[Any]:
    """Replace SelectArg holders by their current values, for binding to a statement."""
    return [argument.value if isinstance(argument, SelectArg) else argument
            for argument in arguments]
