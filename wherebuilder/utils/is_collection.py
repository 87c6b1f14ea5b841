"""Detect values that would be mistaken for a single operand."""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

_SCALAR_ITERABLES = (str, bytes, bytearray, memoryview)


def is_collection(value: Any) -> bool:
    """Return True for lists, tuples, sets, generators and other non-text iterables."""
    if isinstance(value, _SCALAR_ITERABLES) or isinstance(value, BaseModel):
        return False
    return isinstance(value, Iterable)
