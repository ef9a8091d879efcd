"""Configuration for the bank console."""

from dataclasses import dataclass
from decimal import Decimal

DEFAULT_INTEREST_RATE = Decimal('0.05')
DEFAULT_OVERDRAFT_LIMIT = Decimal('10000')


@dataclass
class BankConfig:
    """Rates and limits applied to newly created accounts."""

    interest_rate: Decimal = DEFAULT_INTEREST_RATE
    overdraft_limit: Decimal = DEFAULT_OVERDRAFT_LIMIT
    log_level: str = "WARNING"

    def __post_init__(self):
        if not isinstance(self.interest_rate, Decimal):
            self.interest_rate = Decimal(str(self.interest_rate))

        if not isinstance(self.overdraft_limit, Decimal):
            self.overdraft_limit = Decimal(str(self.overdraft_limit))

        if self.interest_rate < 0:
            raise ValueError("Interest rate cannot be negative")

        if self.overdraft_limit < 0:
            raise ValueError("Overdraft limit cannot be negative")
