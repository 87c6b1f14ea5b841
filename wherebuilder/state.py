"""Combinator slot of a builder: either idle, or holding a combinator that waits for its next operand."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict

from .clauses import And, Clause, Not, Or

CombinatorKind = Literal["and", "or", "not"]

_COMBINATORS = {"and": And, "or": Or}


class Idle(BaseModel):
    """No combinator is waiting."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "idle"


class PendingCombinator(BaseModel):
    """A combinator registered by ``and_()``, ``or_()`` or ``not_()`` before its (right) operand exists.

    ``left`` is None for NOT, which only takes the upcoming clause.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: CombinatorKind
    left: Optional[Clause] = None

    def complete(self, clause: Any):
        """Return the finished combinator clause, using ``clause`` as the missing operand."""
        if self.kind == "not":
            return Not(child=clause)
        return _COMBINATORS[self.kind](left=self.left, right=clause)

    def __str__(self) -> str:
        if self.kind == "not":
            return "NOT ..."
        return f"{self.left} {self.kind.upper()} ..."


IDLE = Idle()

CombinatorState = Idle | PendingCombinator
