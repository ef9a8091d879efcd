"""Shared fixtures for the bank console tests."""

import logging
from decimal import Decimal

import pytest

from bank_console.logging_config import PACKAGE_LOGGER
from bank_console.models import AccountType
from bank_console.registry import AccountRegistry


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging between tests."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def registry():
    """Create an empty registry with default rates."""
    return AccountRegistry()


@pytest.fixture
def savings_account(registry):
    """Create a savings account holding 1000."""
    return registry.create(AccountType.SAVINGS, 1, "Alice Smith",
                           Decimal('1000.00'), "alice@example.com")


@pytest.fixture
def current_account(registry):
    """Create a current account holding 500."""
    return registry.create(AccountType.CURRENT, 2, "Bob Jones",
                           Decimal('500.00'), "bob@example.com")
