"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InsufficientFundsError(DomainError):
    """A valid amount exceeds the balance available to cover it."""

    def __init__(self, balance: Decimal, amount: Decimal):
        super().__init__(insufficient_funds(balance, amount))
        self.balance = balance
        self.amount = amount


def invalid_email(email: object) -> str:
    """Return message for a malformed account email."""
    return f"Invalid email: {email!r}"


def invalid_amount(amount: object) -> str:
    """Return message for a negative, non-finite or over-precise amount."""
    return f"Invalid amount: {amount!r}"


def invalid_starting_balance(amount: object) -> str:
    """Return message for a rejected opening balance."""
    return f"Invalid starting balance: {amount!r}"


def zero_withdrawal() -> str:
    """Return message for a withdrawal of exactly zero."""
    return "Cannot withdraw zero"


def invalid_transfer_target(target: object) -> str:
    """Return message when a transfer target is not an account."""
    return f"Transfer target must be an Account, got {type(target).__name__}"


def insufficient_funds(balance: Decimal, amount: Decimal) -> str:
    """Return message when an amount exceeds the available balance."""
    return f"Insufficient funds: balance {balance}, requested {amount}"
