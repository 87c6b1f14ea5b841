"""Fluent builder for the WHERE part of a SQL statement.

Every leaf call (``eq``, ``between``, ``in_``...) pushes a clause onto the
builder's stack. Combinators can be used in two styles, which produce the
same SQL::

    where = ExpressionBuilder(Account)
    # chained: AND takes the previous clause and the next one
    where.eq("name", "foo").and_().eq("passwd", "_secret")

    # nested: AND takes the two most recent clauses
    where.and_(where.eq("name", "foo"), where.eq("passwd", "_secret"))

Both render as ``(name = ? AND passwd = ?)`` with arguments ``["foo", "_secret"]``.
The nested style is needed to group mixed ANDs and ORs::

    where.or_(
        where.and_(where.eq("name", "foo"), where.eq("passwd", "_secret")),
        where.and_(where.eq("name", "bar"), where.eq("passwd", "qwerty")),
    )

Rendering never pops the stack, so a finished builder can be rendered again
each time its statement is prepared.
"""

from __future__ import annotations

import io
import logging
from typing import Any, Callable, Iterable, TextIO

from pydantic import BaseModel, ConfigDict

from .arguments import ColumnArg, resolve_arguments
from .clauses import (
    And,
    Between,
    Clause,
    Comparison,
    In,
    IsNotNull,
    IsNull,
    Not,
    Or,
)
from .column_type import ColumnType, resolve_column
from .dialects import Dialect, SqliteDialect
from .errors import (
    CombinatorAlreadyPendingError,
    InvalidArgumentError,
    MissingOperandError,
    NoClauseDefinedError,
    UnresolvedBinaryOperatorError,
)
from .stack import ClauseStack
from .state import IDLE, CombinatorState, PendingCombinator
from .utils.is_collection import is_collection

logger = logging.getLogger("wherebuilder")

ColumnResolver = Callable[[type, str], ColumnType]


class RenderedPredicate(BaseModel):
    """SQL text of a predicate and its bind arguments, in placeholder order."""

    model_config = ConfigDict(frozen=True)

    sql: str
    arguments: tuple[Any, ...] = ()

    @property
    def values(self) -> list[Any]:
        """Arguments with SelectArg holders replaced by their current values."""
        return resolve_arguments(self.arguments)


class ExpressionBuilder:
    """Builds one WHERE predicate for one entity type through a sequence of calls.

    Args:
        entity_type: Pydantic model whose fields are the columns that may be referenced.
        column_resolver: Lookup returning the ColumnType of a column; defaults
            to ``resolve_column`` on the model's fields.

    A builder is not safe to share between threads.
    """

    def __init__(self, entity_type: type, column_resolver: ColumnResolver = resolve_column):
        self.entity_type = entity_type
        self._column_resolver = column_resolver
        self._stack: ClauseStack[Clause] = ClauseStack()
        self._state: CombinatorState = IDLE

    # boolean combinators

    def and_(self, left: ExpressionBuilder = None, right: ExpressionBuilder = None) -> ExpressionBuilder:
        """AND the previous clause with the next one, or, given two builders, AND their latest clauses."""
        return self._binary("and", And, left, right)

    def or_(self, left: ExpressionBuilder = None, right: ExpressionBuilder = None) -> ExpressionBuilder:
        """OR the previous clause with the next one, or, given two builders, OR their latest clauses."""
        return self._binary("or", Or, left, right)

    def not_(self, comparison: ExpressionBuilder = None) -> ExpressionBuilder:
        """NOT the next clause, or, given a builder, NOT its latest clause."""
        if comparison is None:
            self._arm(PendingCombinator(kind="not"))
        else:
            self._push(Not(child=self._pop_clause(comparison, "NOT")))
        return self

    # comparisons

    def eq(self, column_name: str, value: Any) -> ExpressionBuilder:
        """Add a '=' clause so the column must be equal to the value."""
        return self._compare("eq", column_name, value)

    def ne(self, column_name: str, value: Any) -> ExpressionBuilder:
        """Add a '<>' clause so the column must be not-equal-to the value."""
        return self._compare("ne", column_name, value)

    def gt(self, column_name: str, value: Any) -> ExpressionBuilder:
        """Add a '>' clause so the column must be greater-than the value."""
        return self._compare("gt", column_name, value)

    def ge(self, column_name: str, value: Any) -> ExpressionBuilder:
        """Add a '>=' clause so the column must be greater-than or equal-to the value."""
        return self._compare("ge", column_name, value)

    def lt(self, column_name: str, value: Any) -> ExpressionBuilder:
        """Add a '<' clause so the column must be less-than the value."""
        return self._compare("lt", column_name, value)

    def le(self, column_name: str, value: Any) -> ExpressionBuilder:
        """Add a '<=' clause so the column must be less-than or equal-to the value."""
        return self._compare("le", column_name, value)

    def like(self, column_name: str, pattern: Any) -> ExpressionBuilder:
        """Add a LIKE clause; ``%`` and ``_`` in the pattern are wildcards."""
        return self._compare("like", column_name, pattern)

    def between(self, column_name: str, low: Any, high: Any) -> ExpressionBuilder:
        """Add a BETWEEN clause so the column must be between low and high, inclusive."""
        column_type = self._find_column(column_name)
        self._push(Between.create(column_type, self._operand(low), self._operand(high)))
        return self

    def in_(self, column_name: str, *values: Any) -> ExpressionBuilder:
        """Add an IN clause so the column must be equal to one of the values passed in.

        Pass the values themselves (``in_("id", 1, 2, 3)``); use ``in_iterable``
        for a list.
        """
        if len(values) == 1 and is_collection(values[0]):
            raise InvalidArgumentError(
                "in_(column_name, *values) seems to be a collection within the values, "
                "use in_iterable() or unpack it"
            )
        return self.in_iterable(column_name, values)

    def in_iterable(self, column_name: str, values: Iterable[Any]) -> ExpressionBuilder:
        """Add an IN clause so the column must be equal to one of the items of the iterable."""
        if not is_collection(values):
            raise InvalidArgumentError(
                f"in_iterable() expects a collection of values for '{column_name}', got {type(values).__name__}"
            )
        column_type = self._find_column(column_name)
        self._push(In.create(column_type, [self._operand(value) for value in values]))
        return self

    def is_null(self, column_name: str) -> ExpressionBuilder:
        """Add an 'IS NULL' clause so the column must be null; '= NULL' does not work."""
        self._push(IsNull.create(self._find_column(column_name)))
        return self

    def is_not_null(self, column_name: str) -> ExpressionBuilder:
        """Add an 'IS NOT NULL' clause so the column must not be null; '<> NULL' does not work."""
        self._push(IsNotNull.create(self._find_column(column_name)))
        return self

    # state

    def reset(self) -> ExpressionBuilder:
        """Forget every clause, so the builder can be used for a new predicate."""
        self._stack.clear()
        self._state = IDLE
        return self

    @property
    def clause(self) -> Clause:
        """The finished predicate; raises the same errors as ``append_sql`` when unfinished."""
        outstanding = len(self._stack) + (0 if self._state is IDLE else 1)
        if outstanding == 0:
            raise NoClauseDefinedError("No where clauses defined. Did you miss a where operation?")
        if outstanding != 1:
            raise UnresolvedBinaryOperatorError(
                'Both the "left-hand" and "right-hand" clauses have been defined. Did you miss an AND or OR?'
            )
        if isinstance(self._state, PendingCombinator):
            raise MissingOperandError(f"{self._state.kind.upper()} is still waiting for a clause to combine")
        # we don't pop here because we may want to render the predicate multiple times
        return self._stack.peek()

    # rendering

    def append_sql(self, dialect: Dialect, buffer: TextIO, arguments: list[Any]) -> None:
        """Write the predicate's SQL to ``buffer`` and append its bind arguments to ``arguments``.

        Nothing is written when an error is raised.
        """
        clause = self.clause
        sql = io.StringIO()
        clause_arguments: list[Any] = []
        clause.append_sql(dialect, sql, clause_arguments)
        logger.debug("WHERE %s %r", sql.getvalue(), clause_arguments)
        buffer.write(sql.getvalue())
        arguments.extend(clause_arguments)

    def render(self, dialect: Dialect = None) -> RenderedPredicate:
        """Render the predicate on its own (SQLite placeholders by default)."""
        buffer = io.StringIO()
        arguments: list[Any] = []
        self.append_sql(dialect or SqliteDialect(), buffer, arguments)
        return RenderedPredicate(sql=buffer.getvalue(), arguments=tuple(arguments))

    def __str__(self) -> str:
        if isinstance(self._state, PendingCombinator):
            return f"where clause: {self._state}"
        if not self._stack:
            return "empty where clause"
        return f"where clause: {self._stack.peek()}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.entity_type.__name__}: {self}>"

    # internals

    def _find_column(self, column_name: str) -> ColumnType:
        return self._column_resolver(self.entity_type, column_name)

    def _operand(self, value: Any) -> Any:
        if isinstance(value, ColumnArg):
            return ColumnArg(column_name=self._find_column(value.column_name).name)
        return value

    def _compare(self, kind: str, column_name: str, value: Any) -> ExpressionBuilder:
        column_type = self._find_column(column_name)
        self._push(Comparison.create(kind, column_type, self._operand(value)))
        return self

    def _binary(self, kind: str, combinator: type, left: ExpressionBuilder,
                right: ExpressionBuilder) -> ExpressionBuilder:
        label = kind.upper()
        if left is None and right is None:
            self._ensure_idle(label)
            self._arm(PendingCombinator(kind=kind, left=self._pop_clause(self, label)))
        elif left is None or right is None:
            raise TypeError(f"{kind}_() takes either no arguments or two builders")
        else:
            right_clause = self._pop_clause(right, label)
            left_clause = self._pop_clause(left, label)
            self._push(combinator(left=left_clause, right=right_clause))
        return self

    def _ensure_idle(self, label: str) -> None:
        if isinstance(self._state, PendingCombinator):
            raise CombinatorAlreadyPendingError(
                f"{self._state} is already waiting for a future clause, can't add: {label}"
            )

    def _arm(self, pending: PendingCombinator) -> None:
        self._ensure_idle(pending.kind.upper())
        logger.debug("%s waiting for a future clause", pending.kind.upper())
        self._state = pending

    def _push(self, clause: Clause) -> None:
        if isinstance(self._state, PendingCombinator):
            # a combinator was called before its right-hand clause was defined
            clause = self._state.complete(clause)
            self._state = IDLE
        logger.debug("push %s", clause)
        self._stack.push(clause)

    @staticmethod
    def _pop_clause(builder: ExpressionBuilder, label: str) -> Clause:
        if not isinstance(builder, ExpressionBuilder):
            raise TypeError(f"{label} operands must be ExpressionBuilder instances, got {type(builder).__name__}")
        if not builder._stack:
            raise MissingOperandError(f"Expecting there to be a clause already defined for '{label}' operation")
        return builder._stack.pop()
