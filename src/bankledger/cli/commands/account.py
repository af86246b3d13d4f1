"""Account operation commands.

Accounts live only for the duration of a command: each command opens the
accounts it is given, applies one operation and prints the resulting
balances.
"""

import click

from bankledger.cli.amount_input import parse_amount_or_exit
from bankledger.cli.error_handling import exit_on_domain_error
from bankledger.domain.account import Account


def _echo_balance(account: Account) -> None:
    click.echo(f"{account.email}: {account.balance}")


@click.group()
def account_group():
    """Apply deposits, withdrawals and transfers."""
    pass


@account_group.command("deposit")
@click.argument("email", metavar="EMAIL")
@click.argument("balance", metavar="BALANCE")
@click.argument("amount", metavar="AMOUNT")
@click.pass_context
def deposit(ctx, email: str, balance: str, amount: str):
    """Deposit AMOUNT into an account opened with BALANCE.

    Examples:
        bankledger account deposit alice@example.com 1000.00 250.50
        bankledger account deposit bob@example.com 0 0
    """
    starting_balance = parse_amount_or_exit(ctx, balance, "balance")
    value = parse_amount_or_exit(ctx, amount)

    with exit_on_domain_error(ctx):
        account = Account(email, starting_balance)
        account.deposit(value)

    _echo_balance(account)


@account_group.command("withdraw")
@click.argument("email", metavar="EMAIL")
@click.argument("balance", metavar="BALANCE")
@click.argument("amount", metavar="AMOUNT")
@click.pass_context
def withdraw(ctx, email: str, balance: str, amount: str):
    """Withdraw AMOUNT from an account opened with BALANCE.

    Withdrawing zero is an error.

    Examples:
        bankledger account withdraw alice@example.com 1250.50 100
    """
    starting_balance = parse_amount_or_exit(ctx, balance, "balance")
    value = parse_amount_or_exit(ctx, amount)

    with exit_on_domain_error(ctx):
        account = Account(email, starting_balance)
        account.withdraw(value)

    _echo_balance(account)


@account_group.command("transfer")
@click.argument("email", metavar="EMAIL")
@click.argument("balance", metavar="BALANCE")
@click.argument("target_email", metavar="TARGET_EMAIL")
@click.argument("target_balance", metavar="TARGET_BALANCE")
@click.argument("amount", metavar="AMOUNT")
@click.pass_context
def transfer(
    ctx,
    email: str,
    balance: str,
    target_email: str,
    target_balance: str,
    amount: str,
):
    """Transfer AMOUNT from one account to another.

    Both balances are printed afterwards, source first.

    Examples:
        bankledger account transfer alice@example.com 1150.50 bob@example.com 500 200
    """
    source_balance = parse_amount_or_exit(ctx, balance, "balance")
    receiving_balance = parse_amount_or_exit(ctx, target_balance, "target balance")
    value = parse_amount_or_exit(ctx, amount)

    with exit_on_domain_error(ctx):
        source = Account(email, source_balance)
        target = Account(target_email, receiving_balance)
        source.transfer(target, value)

    _echo_balance(source)
    _echo_balance(target)


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
