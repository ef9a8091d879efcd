"""
Data models for the bank console.

An account is a single dataclass tagged with its AccountType; the rules
that differ between savings and current accounts are dispatched on that tag.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, Overflow
from enum import Enum
from typing import Optional

from .exceptions import InvalidAccountTypeError, InvalidAmountError
from .validators import Amount, to_decimal, validate_positive

logger = logging.getLogger(__name__)


class AccountType(Enum):
    """Types of bank accounts."""
    SAVINGS = "savings"
    CURRENT = "current"

    @property
    def menu_code(self) -> int:
        """Number the operator types to pick this type."""
        return 1 if self is AccountType.SAVINGS else 2

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_choice(cls, value) -> "AccountType":
        """Resolve an AccountType, a menu code or a type name."""
        if isinstance(value, cls):
            return value

        if isinstance(value, int) and not isinstance(value, bool):
            for account_type in cls:
                if account_type.menu_code == value:
                    return account_type
        elif isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass

        raise InvalidAccountTypeError("Invalid account type!")


# Fields that cannot be reassigned once the account exists
IMMUTABLE_FIELDS = frozenset({'account_number', 'holder_name', 'email', 'account_type'})


@dataclass
class Account:
    """Represents a bank account."""

    account_number: int
    holder_name: str
    email: str
    account_type: AccountType = AccountType.SAVINGS
    balance: Decimal = Decimal('0.00')
    interest_rate: Decimal = Decimal('0.00')
    overdraft_limit: Decimal = Decimal('0.00')
    _initialized: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self):
        """Initialize account after creation."""
        self.balance = to_decimal(self.balance)
        self.interest_rate = to_decimal(self.interest_rate)
        self.overdraft_limit = to_decimal(self.overdraft_limit)
        self._initialized = True

    def __setattr__(self, name, value):
        if name in IMMUTABLE_FIELDS and getattr(self, '_initialized', False):
            raise AttributeError(f"{name} cannot be changed after creation")
        super().__setattr__(name, value)

    @property
    def is_savings(self) -> bool:
        return self.account_type is AccountType.SAVINGS

    def can_withdraw(self, amount: Amount) -> bool:
        """Check if withdrawal stays within balance plus overdraft."""
        amount = to_decimal(amount)
        if amount <= 0:
            return False
        return amount <= self.balance + self.overdraft_limit

    def deposit(self, amount: Amount) -> Decimal:
        """Deposit money and return the new balance."""
        amount = to_decimal(amount)
        validate_positive(amount, "Deposit amount must be positive!")

        try:
            self.balance += amount
        except Overflow:
            raise InvalidAmountError("Amount is too large!")
        logger.info("Deposited %s to account %s", amount, self.account_number)
        return self.balance

    def withdraw(self, amount: Amount) -> Decimal:
        """Withdraw money and return the new balance."""
        amount = to_decimal(amount)
        validate_positive(amount, "Withdraw amount must be positive!")

        try:
            allowed = self.can_withdraw(amount)
            new_balance = self.balance - amount
        except Overflow:
            raise InvalidAmountError("Amount is too large!")

        if not allowed:
            if self.is_savings:
                raise InvalidAmountError("Insufficient balance!")
            raise InvalidAmountError("Overdraft limit exceeded!")

        self.balance = new_balance
        logger.info("Withdrew %s from account %s", amount, self.account_number)
        return self.balance

    def calculate_interest(self) -> Optional[Decimal]:
        """
        Compute interest on the current balance.

        The balance is not credited. Current accounts earn no interest
        and return None.
        """
        if not self.is_savings:
            return None
        try:
            return self.balance * self.interest_rate
        except Overflow:
            raise InvalidAmountError("Interest is too large to compute!")

    def apply_for_loan(self, amount: Amount) -> bool:
        """Record a loan application. Always succeeds."""
        logger.info("Loan of %s applied for account %s", amount, self.account_number)
        return True

    def details(self) -> dict:
        """Identity and balance as shown to the operator."""
        return {
            'account_number': self.account_number,
            'holder_name': self.holder_name,
            'balance': self.balance,
            'email': self.email,
        }
