"""CLI error handling helpers."""

from contextlib import contextmanager

import click

from bankledger.domain.errors import DomainError


@contextmanager
def exit_on_domain_error(ctx: click.Context):
    """Run a block of domain calls, turning a DomainError into a CLI failure.

    The error message is written to stderr as ``Error: <message>`` and the
    command exits with status 1. Other exceptions propagate unchanged.
    """
    try:
        yield
    except DomainError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
