"""Reduce a field annotation to its base type and nullability."""

import types
from typing import Any, Union, get_args, get_origin

_NONE_TYPE = type(None)


def get_base_type(annotation: Any) -> tuple[Any, bool]:
    """Return ``(base_type, nullable)`` for a field annotation.

    ``Optional[int]`` and ``int | None`` give ``(int, True)``; ``list[str]``
    gives ``(list, False)``. Unions other than ``X | None`` are rejected.
    """
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = get_args(annotation)
        non_none = tuple(arg for arg in args if arg is not _NONE_TYPE)
        if len(non_none) != 1 or len(non_none) == len(args):
            raise TypeError(f"Column types may be a union with None only, got {annotation!r}")
        base_type, _ = get_base_type(non_none[0])
        return base_type, True
    if annotation is None or annotation is _NONE_TYPE:
        raise TypeError("A column cannot be typed as None")
    return (origin or annotation), False
