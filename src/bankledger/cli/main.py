"""Main CLI entry point."""

import click

from bankledger.logging_config import setup_logging

# Import and register all commands at module level
from bankledger.cli.commands import account, check

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity (overrides BANKLEDGER_LOG_LEVEL environment variable)",
    envvar="BANKLEDGER_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, log_level: str):
    """Bankledger - in-memory account ledger.

    Validate account emails and amounts, and try out deposits, withdrawals
    and transfers on accounts that exist only for a single command.
    """
    # Only configure logging when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        setup_logging(log_level)


# Register all commands
account.register_commands(cli)
check.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
