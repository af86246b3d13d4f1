"""Domain layer for bankledger."""

from bankledger.domain.account import Account
from bankledger.domain.errors import DomainError, InsufficientFundsError, ValidationError
from bankledger.domain.validation import is_amount_valid, is_email_valid, to_amount

__all__ = [
    "Account",
    "DomainError",
    "InsufficientFundsError",
    "ValidationError",
    "is_amount_valid",
    "is_email_valid",
    "to_amount",
]
