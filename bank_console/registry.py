"""
Account registry for the bank console.

This module owns every account created during a run and enforces
account-number uniqueness.
"""

import logging
from decimal import Decimal
from typing import Iterator, List, Optional

from .config import BankConfig
from .exceptions import AccountExistsError, AccountNotFoundError
from .models import Account, AccountType
from .validators import (Amount, normalize_email, to_decimal, validate_email,
                         validate_non_negative)


class AccountRegistry:
    """In-memory, insertion-ordered collection of accounts."""

    def __init__(self, config: Optional[BankConfig] = None):
        """Initialize an empty registry."""
        self.config = config or BankConfig()
        self.logger = logging.getLogger(__name__)
        self._accounts: List[Account] = []

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts))

    def exists(self, account_number: int) -> bool:
        """Check whether an account number is taken."""
        return self.find(account_number) is not None

    def create(self, kind, account_number: int, holder_name: str,
               balance: Amount, email: str) -> Account:
        """Create, store and return a new account."""
        if self.exists(account_number):
            raise AccountExistsError("Account already exists!")

        email = normalize_email(email)
        validate_email(email)

        balance = to_decimal(balance)
        validate_non_negative(balance, "Initial balance cannot be negative!")

        account_type = AccountType.from_choice(kind)

        if account_type is AccountType.SAVINGS:
            interest_rate = self.config.interest_rate
            overdraft_limit = Decimal('0.00')
        else:
            interest_rate = Decimal('0.00')
            overdraft_limit = self.config.overdraft_limit

        account = Account(
            account_number=account_number,
            holder_name=holder_name,
            email=email,
            account_type=account_type,
            balance=balance,
            interest_rate=interest_rate,
            overdraft_limit=overdraft_limit
        )
        self._accounts.append(account)

        self.logger.info("Created %s account %s for %s",
                         account_type.value, account_number, holder_name)
        return account

    def find(self, account_number: int) -> Optional[Account]:
        """Get account by number, or None."""
        for account in self._accounts:
            if account.account_number == account_number:
                return account
        return None

    def get(self, account_number: int) -> Account:
        """Get account by number, raising if it does not exist."""
        account = self.find(account_number)
        if account is None:
            raise AccountNotFoundError("Account not found!")
        return account

    def all_accounts(self) -> List[Account]:
        """Get all accounts in creation order."""
        return list(self._accounts)
