"""wherebuilder: build SQL WHERE predicates call by call, render them with bind arguments."""

from .builder import ExpressionBuilder, RenderedPredicate
from .arguments import ColumnArg, SelectArg, resolve_arguments
from .column_type import ColumnType, resolve_column
from .dialects import (
    Dialect,
    SqliteDialect,
    MysqlDialect,
    PostgresDialect,
    SqlserverDialect,
    get_dialect_for_scheme,
)
from .errors import (
    WhereError,
    WhereStateError,
    UnknownColumnError,
    InvalidArgumentError,
    MissingOperandError,
    CombinatorAlreadyPendingError,
    NoClauseDefinedError,
    UnresolvedBinaryOperatorError,
)

# Shorter name matching the SQL keyword.
Where = ExpressionBuilder
