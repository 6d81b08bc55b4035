"""Shared pytest fixtures for hdfc-st tests."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from hdfcst.domain.entities import Transaction
from hdfcst.logging_setup import reset_logging


@pytest.fixture(autouse=True)
def clean_logging():
    """Restore the package logger after tests that configure it."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_statement(fixtures_dir):
    """Path to a six-transaction statement with blank lines and a header."""
    return fixtures_dir / "sample_statement.txt"


@pytest.fixture
def sample_lines(sample_statement):
    """Lines of the sample statement."""
    return sample_statement.read_text(encoding="utf-8").splitlines()


@pytest.fixture
def make_transaction():
    """Factory for transactions with sensible defaults."""

    def _make(
        description="AMAZON PURCHASE",
        txn_date=date(2023, 3, 5),
        debit="0.00",
        credit="0.00",
    ):
        return Transaction(
            date=txn_date,
            date_display=txn_date.strftime("%d/%m/%Y"),
            description=description,
            debit=Decimal(debit),
            credit=Decimal(credit),
        )

    return _make
