"""Validation commands."""

import click

from bankledger.domain.validation import is_amount_valid, is_email_valid
from bankledger.utils.amount_parser import parse_amount


def _report(ctx, is_valid: bool) -> None:
    click.echo("valid" if is_valid else "invalid")
    if not is_valid:
        ctx.exit(1)


@click.group()
def check_group():
    """Check identifiers and amounts without opening an account."""
    pass


@check_group.command("email")
@click.argument("address", metavar="ADDRESS")
@click.pass_context
def check_email(ctx, address: str):
    """Check whether ADDRESS is a usable account email.

    Exits with status 1 when it is not.

    Examples:
        bankledger check email first+last@example.co.uk
    """
    _report(ctx, is_email_valid(address))


@check_group.command("amount")
@click.argument("amount", metavar="AMOUNT")
@click.pass_context
def check_amount(ctx, amount: str):
    """Check whether AMOUNT is a non-negative value with at most two decimals.

    Exits with status 1 when it is not.

    Examples:
        bankledger check amount 1,234.50
        bankledger check amount 50.999
    """
    try:
        value = parse_amount(amount)
    except ValueError:
        _report(ctx, False)
        return

    _report(ctx, is_amount_valid(value))


def register_commands(cli):
    """Register check commands with main CLI."""
    cli.add_command(check_group, name="check")
