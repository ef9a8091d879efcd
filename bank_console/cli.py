"""
CLI interface for the bank console.

This module runs the interactive menu loop that creates accounts and
performs deposits, withdrawals, detail lookups and interest calculations.
"""

import logging
from decimal import Decimal
from enum import IntEnum

import click

from .config import BankConfig
from .exceptions import AccountExistsError, BankError
from .logging_config import setup_logging
from .models import AccountType
from .registry import AccountRegistry
from .validators import normalize_email, parse_amount

logger = logging.getLogger(__name__)


class MenuChoice(IntEnum):
    """Options offered by the main menu."""
    CREATE_ACCOUNT = 1
    DEPOSIT = 2
    WITHDRAW = 3
    SHOW_DETAILS = 4
    CALCULATE_INTEREST = 5
    EXIT = 6


MENU_LABELS = {
    MenuChoice.CREATE_ACCOUNT: "Create Account",
    MenuChoice.DEPOSIT: "Deposit",
    MenuChoice.WITHDRAW: "Withdraw",
    MenuChoice.SHOW_DETAILS: "Show Details",
    MenuChoice.CALCULATE_INTEREST: "Calculate Interest",
    MenuChoice.EXIT: "Exit",
}


class MenuController:
    """Reads operator choices and routes them to the registry."""

    def __init__(self, registry: AccountRegistry):
        """Initialize controller with the registry it operates on."""
        self.registry = registry
        self.actions = {
            MenuChoice.CREATE_ACCOUNT: self.create_account,
            MenuChoice.DEPOSIT: self.deposit,
            MenuChoice.WITHDRAW: self.withdraw,
            MenuChoice.SHOW_DETAILS: self.show_details,
            MenuChoice.CALCULATE_INTEREST: self.calculate_interest,
        }

    def format_amount(self, amount: Decimal) -> str:
        """Format an amount for display, keeping every stored digit."""
        places = max(2, -amount.as_tuple().exponent)
        return f"{amount:,.{places}f}"

    def show_menu(self):
        click.echo("===== BANK MENU =====")
        for choice, label in MENU_LABELS.items():
            click.echo(f"{choice.value}. {label}")

    def run(self):
        """Run the menu loop until the operator chooses Exit."""
        while True:
            self.show_menu()
            choice = click.prompt("Enter choice", type=int)

            if choice == MenuChoice.EXIT:
                click.echo("Thank you!")
                return

            action = self.actions.get(choice)
            if action is None:
                click.echo("Invalid choice!")
                continue

            try:
                action()
            except BankError as e:
                logger.warning("%s failed: %s", MenuChoice(choice).name, e)
                click.echo(f"❌ Error: {e}", err=True)

    def prompt_account(self):
        """Ask for an account number and look it up."""
        account_number = click.prompt("Account Number", type=int)
        return self.registry.get(account_number)

    def create_account(self):
        """Create a new account from operator input."""
        for account_type in AccountType:
            click.echo(f"{account_type.menu_code}. {account_type.label}")
        kind = click.prompt("Account type", type=int)

        account_number = click.prompt("Account Number", type=int)
        if self.registry.exists(account_number):
            raise AccountExistsError("Account already exists!")

        holder_name = click.prompt("Name")
        email = normalize_email(click.prompt("Email"))
        balance = parse_amount(click.prompt("Initial Balance"))

        account = self.registry.create(kind, account_number, holder_name, balance, email)
        click.echo("✅ Account created successfully!")
        click.echo(f"Type: {account.account_type.label}")

    def deposit(self):
        """Deposit money to an account."""
        account = self.prompt_account()
        amount = parse_amount(click.prompt("Amount"))

        new_balance = account.deposit(amount)
        click.echo(f"✅ Amount deposited: {self.format_amount(amount)}")
        click.echo(f"New Balance: {self.format_amount(new_balance)}")

    def withdraw(self):
        """Withdraw money from an account."""
        account = self.prompt_account()
        amount = parse_amount(click.prompt("Amount"))

        new_balance = account.withdraw(amount)
        click.echo(f"✅ Amount withdrawn: {self.format_amount(amount)}")
        click.echo(f"New Balance: {self.format_amount(new_balance)}")

    def show_details(self):
        """Show account details."""
        details = self.prompt_account().details()

        click.echo(f"Account Number: {details['account_number']}")
        click.echo(f"Account Holder: {details['holder_name']}")
        click.echo(f"Balance: {self.format_amount(details['balance'])}")
        click.echo(f"Email: {details['email']}")

    def calculate_interest(self):
        """Show the interest a savings account would earn."""
        account = self.prompt_account()

        interest = account.calculate_interest()
        if interest is None:
            click.echo("No interest for Current Account.")
        else:
            click.echo(f"Interest: {self.format_amount(interest)}")


@click.command()
@click.option('--log-level', default='WARNING',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                                case_sensitive=False),
              help='Diagnostic log level (logs go to stderr)')
@click.option('--interest-rate', default='0.05', help='Savings interest rate')
@click.option('--overdraft-limit', default='10000', help='Current account overdraft limit')
def cli(log_level, interest_rate, overdraft_limit):
    """Bank Account Console"""
    try:
        config = BankConfig(
            interest_rate=parse_amount(interest_rate),
            overdraft_limit=parse_amount(overdraft_limit),
            log_level=log_level
        )
    except ValueError as e:
        raise click.BadParameter(str(e))

    setup_logging(config.log_level)
    MenuController(AccountRegistry(config)).run()


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
