"""Tests for wherebuilder.arguments: SelectArg, ColumnArg, resolve_arguments."""

import pytest

from wherebuilder.arguments import ColumnArg, SelectArg, resolve_arguments
from wherebuilder.errors import InvalidArgumentError


def test_select_arg_unset():
    holder = SelectArg(column_name="name")
    assert holder.is_set is False
    assert repr(holder) == "SelectArg(<unset>)"
    with pytest.raises(InvalidArgumentError, match="SelectArg for column 'name' has not been set"):
        _ = holder.value


def test_select_arg_set_value():
    holder = SelectArg()
    holder.set_value(None)
    assert holder.is_set
    assert holder.value is None
    holder.set_value(5)
    assert str(holder) == "SelectArg(5)"


def test_resolve_arguments():
    holder = SelectArg("x")
    assert resolve_arguments([1, holder, "y"]) == [1, "x", "y"]


def test_column_arg():
    arg = ColumnArg(column_name="age")
    assert str(arg) == "age"
    assert arg == ColumnArg(column_name="age")
