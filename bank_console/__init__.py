"""
Bank Console

An in-memory bank account console supporting savings and current accounts,
deposits, withdrawals, detail lookups and interest calculation.
"""

__version__ = "0.1.0"

from typing import Optional

from .config import BankConfig
from .exceptions import (AccountExistsError, AccountNotFoundError, BankError,
                         InvalidAccountTypeError, InvalidAmountError,
                         InvalidEmailError)
from .models import Account, AccountType
from .registry import AccountRegistry
from .cli import MenuController, main


def create_registry(config: Optional[BankConfig] = None) -> AccountRegistry:
    """
    Create an empty AccountRegistry.

    Args:
        config: Rates and limits for new accounts (defaults when omitted)

    Returns:
        AccountRegistry instance
    """
    return AccountRegistry(config)


__all__ = [
    "Account",
    "AccountType",
    "AccountRegistry",
    "BankConfig",
    "MenuController",
    "BankError",
    "InvalidEmailError",
    "InvalidAmountError",
    "AccountNotFoundError",
    "AccountExistsError",
    "InvalidAccountTypeError",
    "create_registry",
    "main"
]
