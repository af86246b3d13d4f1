"""Shared pytest fixtures for bankledger tests."""

import logging
from decimal import Decimal

import pytest

from bankledger.domain.account import Account
from bankledger.logging_config import LOGGER_NAME


@pytest.fixture
def alice():
    """Account opened with 1000.00."""
    return Account("alice@example.com", Decimal("1000.00"))


@pytest.fixture
def bob():
    """Account opened with 500.00."""
    return Account("bob@example.com", Decimal("500.00"))


@pytest.fixture
def hundred():
    """Account opened with exactly 100.00."""
    return Account("b@c.com", Decimal("100.00"))


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers installed by the CLI so tests stay independent."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
