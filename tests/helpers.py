"""Shared test helpers and the sample entity."""

import datetime
import io

from pydantic import BaseModel, Field

from wherebuilder.clauses import ClauseBase
from wherebuilder.dialects import Dialect, SqliteDialect


class Account(BaseModel):
    id: int
    name: str
    password: str = Field(alias="passwd")
    email: str | None = None
    age: int | None = None
    balance: float = 0.0
    active: bool = True
    created: datetime.date | None = None
    avatar: bytes | None = None


def render_clause(clause: ClauseBase, dialect: Dialect = None) -> tuple[str, list]:
    """Render a single clause, returning its SQL and bind arguments."""
    buffer = io.StringIO()
    arguments = []
    clause.append_sql(dialect or SqliteDialect(), buffer, arguments)
    return buffer.getvalue(), arguments
