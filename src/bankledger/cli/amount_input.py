"""CLI helpers for reading amounts from the command line."""

from __future__ import annotations

from decimal import Decimal

import click

from bankledger.utils.amount_parser import parse_amount


def parse_amount_or_exit(ctx: click.Context, amount: str, label: str = "amount") -> Decimal:
    """Parse amount text, or exit with a CLI error.

    Only the text is checked here. Sign and precision are left to the
    domain so that its error messages reach the user unchanged.
    """
    try:
        return parse_amount(amount)
    except ValueError as exc:
        click.echo(f"Error: Invalid {label}: {exc}", err=True)
        ctx.exit(1)
