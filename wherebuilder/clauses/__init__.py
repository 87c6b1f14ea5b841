"""Clause types for WHERE predicates.

``Clause`` is the closed union of every node kind, discriminated on ``kind``.
Leaves compare one column; ``And``, ``Or`` and ``Not`` combine other clauses.
Every clause writes itself with ``append_sql(dialect, buffer, arguments)``.
"""

from typing import Annotated, Union

from pydantic import Field as PydanticField

from ._bases import ClauseBase, LeafClause, convert_operand
from .boolean import And, BinaryClause, Not, Or
from .comparison import Between, Comparison, ComparisonKind, In, IsNotNull, IsNull

Clause = Annotated[
    Union[Comparison, Between, In, IsNull, IsNotNull, And, Or, Not],
    PydanticField(discriminator="kind"),
]

# Resolve the recursive "Clause" references of the combinators
BinaryClause.model_rebuild()
And.model_rebuild()
Or.model_rebuild()
Not.model_rebuild()

__all__ = [
    "And",
    "Between",
    "BinaryClause",
    "Clause",
    "ClauseBase",
    "Comparison",
    "ComparisonKind",
    "In",
    "IsNotNull",
    "IsNull",
    "LeafClause",
    "Not",
    "Or",
    "convert_operand",
]
