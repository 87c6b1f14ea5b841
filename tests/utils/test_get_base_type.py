"""Tests for wherebuilder.utils.get_base_type."""

from typing import Optional

import pytest

from wherebuilder.utils.get_base_type import get_base_type


def test_get_base_type_plain():
    assert get_base_type(int) == (int, False)


def test_get_base_type_union_with_none():
    assert get_base_type(Optional[int]) == (int, True)
    assert get_base_type(str | None) == (str, True)


def test_get_base_type_generic():
    assert get_base_type(list[str]) == (list, False)
    assert get_base_type(dict[str, int] | None) == (dict, True)


def test_get_base_type_union_without_none_raises():
    with pytest.raises(TypeError, match="union with None only"):
        get_base_type(int | str)
    with pytest.raises(TypeError, match="union with None only"):
        get_base_type(int | str | None)


def test_get_base_type_none_raises():
    with pytest.raises(TypeError, match="cannot be typed as None"):
        get_base_type(None)
