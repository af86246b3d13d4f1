"""Bankledger - in-memory account ledger with validated money operations."""

from bankledger.domain import (
    Account,
    DomainError,
    InsufficientFundsError,
    ValidationError,
    is_amount_valid,
    is_email_valid,
)

__all__ = [
    "Account",
    "DomainError",
    "InsufficientFundsError",
    "ValidationError",
    "is_amount_valid",
    "is_email_valid",
]


# Import main lazily so the CLI stack is only loaded when asked for
def __getattr__(name):
    if name == "main":
        from bankledger.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
