"""Tests for the chained calling style: leaf, and_()/or_()/not_(), leaf."""

import pytest

from wherebuilder import ExpressionBuilder
from tests.helpers import Account


def test_chained_and_renders_parenthesized(where):
    result = where.eq("name", "foo").and_().eq("passwd", "secret").render()
    assert result.sql == "(name = ? AND passwd = ?)"
    assert result.arguments == ("foo", "secret")


def test_chained_or(where):
    result = where.eq("name", "foo").or_().eq("name", "bar").render()
    assert result.sql == "(name = ? OR name = ?)"
    assert result.arguments == ("foo", "bar")


@pytest.mark.parametrize("method", ["and_", "or_"])
def test_chained_matches_nested(method):
    chained = ExpressionBuilder(Account)
    chained.eq("name", "foo")
    getattr(chained, method)()
    chained.gt("age", 18)

    nested = ExpressionBuilder(Account)
    getattr(nested, method)(nested.eq("name", "foo"), nested.gt("age", 18))

    assert chained.render() == nested.render()


def test_chained_not_matches_nested(where):
    chained = where.not_().eq("name", "foo").render()
    nested_where = ExpressionBuilder(Account)
    nested = nested_where.not_(nested_where.eq("name", "foo")).render()
    assert chained.sql == "NOT (name = ?)"
    assert chained == nested


def test_chain_of_three_groups_left_to_right(where):
    result = where.eq("name", "foo").and_().eq("passwd", "secret").or_().eq("id", 3).render()
    assert result.sql == "((name = ? AND passwd = ?) OR id = ?)"
    assert result.arguments == ("foo", "secret", 3)


def test_nested_argument_satisfies_pending_first(where):
    """Arguments are evaluated before the outer call, so is_null() completes the pending AND and NOT wraps the whole AND."""
    where.eq("name", "foo").and_()
    where.not_(where.is_null("email"))
    result = where.render()
    assert result.sql == "NOT ((name = ? AND email IS NULL))"
    assert result.arguments == ("foo",)


def test_chained_not_then_and(where):
    result = where.not_().eq("name", "foo").and_().eq("active", True).render()
    assert result.sql == "(NOT (name = ?) AND active = ?)"
    assert result.arguments == ("foo", True)


def test_pending_satisfied_by_nested_combinator(where):
    """A nested or_() pushes a clause, which satisfies the pending and_()."""
    where.eq("id", 1).and_()
    where.or_(ExpressionBuilder(Account).eq("name", "a"), ExpressionBuilder(Account).eq("name", "b"))
    result = where.render()
    assert result.sql == "(id = ? AND (name = ? OR name = ?))"
    assert result.arguments == (1, "a", "b")


def test_chained_returns_same_builder(where):
    assert where.eq("name", "foo") is where
    assert where.and_() is where
    assert where.eq("id", 1) is where
