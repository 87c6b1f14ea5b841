"""Exceptions raised while building or rendering a WHERE predicate.

All of them are caller-usage errors: the call sequence must be fixed and the
predicate rebuilt. Nothing here is retried.
"""


class WhereError(Exception):
    """Base class for every error raised by wherebuilder."""
    pass


class UnknownColumnError(WhereError, LookupError):
    """The column name does not exist on the target entity."""

    def __init__(self, message: str, column_name: str = None, table_name: str = None):
        super().__init__(message)
        self.column_name = column_name
        self.table_name = table_name


class InvalidArgumentError(WhereError, ValueError):
    """An operand has the wrong shape or type for its column."""
    pass


class WhereStateError(WhereError):
    """The sequence of builder calls does not form a single expression."""
    pass


class MissingOperandError(WhereStateError):
    """A combinator found no clause to consume."""
    pass


class CombinatorAlreadyPendingError(WhereStateError):
    """A chained combinator was registered while another one was still waiting."""
    pass


class NoClauseDefinedError(WhereStateError):
    """Rendering was requested before any clause was built."""
    pass


class UnresolvedBinaryOperatorError(WhereStateError):
    """More than one clause is outstanding: an AND or OR is missing."""
    pass
