import pytest

from wherebuilder import ExpressionBuilder
from tests.helpers import Account


@pytest.fixture(scope="function")
def where():
    """A fresh builder on the Account entity for each test."""
    return ExpressionBuilder(Account)
