"""
Exceptions for the bank console.

Every error an operator can trigger from the menu derives from BankError,
which the menu loop catches and reports without stopping.
"""


class BankError(ValueError):
    """Base exception for all bank console errors."""


class InvalidEmailError(BankError):
    """Raised when an email does not match the accepted format."""


class InvalidAmountError(BankError):
    """Raised for negative, non-positive or uncovered amounts."""


class AccountNotFoundError(BankError):
    """Raised when no account has the requested number."""


class AccountExistsError(BankError):
    """Raised when creating an account whose number is already taken."""


class InvalidAccountTypeError(BankError):
    """Raised when the account kind is neither savings nor current."""
