"""
Input validation for the bank console.

The validators return True on success and raise a BankError subclass
otherwise, so callers can either chain them or let the error propagate
up to the menu loop.
"""

import re
from decimal import Decimal, InvalidOperation, getcontext
from typing import Union

from .exceptions import InvalidAmountError, InvalidEmailError

EMAIL_PATTERN = re.compile(r"[a-z0-9+_.-]+@[a-z0-9.-]+")

Amount = Union[Decimal, int, float, str]


def _checked(value: Decimal, raw) -> Decimal:
    """Reject values decimal arithmetic cannot carry."""
    if not value.is_finite() or value.adjusted() > getcontext().Emax:
        raise InvalidAmountError(f"Invalid amount: {raw}")
    return value


def to_decimal(amount: Amount) -> Decimal:
    """Convert an amount to Decimal without binary float artifacts."""
    if isinstance(amount, Decimal):
        return amount
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise InvalidAmountError(f"Invalid amount: {amount}")
    return _checked(value, amount)


def normalize_email(text: str) -> str:
    """Lowercase an email before validation."""
    return text.lower()


def validate_email(text: str) -> bool:
    """Check the email against the accepted pattern (case-sensitive)."""
    if not EMAIL_PATTERN.fullmatch(text or ""):
        raise InvalidEmailError("Invalid Email Format!")
    return True


def validate_non_negative(amount: Amount,
                          message: str = "Amount cannot be negative!") -> bool:
    """Reject amounts below zero."""
    if to_decimal(amount) < 0:
        raise InvalidAmountError(message)
    return True


def validate_positive(amount: Amount,
                      message: str = "Amount must be positive!") -> bool:
    """Reject zero and negative amounts."""
    if to_decimal(amount) <= 0:
        raise InvalidAmountError(message)
    return True


def parse_amount(text: str) -> Decimal:
    """Parse an amount typed at the console."""
    clean = text.replace(',', '').strip()
    try:
        value = Decimal(clean)
    except (InvalidOperation, ValueError):
        raise InvalidAmountError(f"Invalid amount: {text}")
    return _checked(value, text)
