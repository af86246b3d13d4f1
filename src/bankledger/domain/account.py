"""Account domain entity."""

import logging
from decimal import Decimal

from bankledger.domain.errors import (
    InsufficientFundsError,
    ValidationError,
    invalid_email,
    invalid_starting_balance,
    invalid_transfer_target,
    zero_withdrawal,
)
from bankledger.domain.validation import (
    MONEY_CONTEXT,
    is_amount_valid,
    is_email_valid,
    to_amount,
)

logger = logging.getLogger(__name__)


class Account:
    """In-memory account holding a single exact-decimal balance.

    The balance is only ever changed through deposit, withdraw and transfer,
    and every change is validated before anything is written, so a failed
    call leaves the account exactly as it was.
    """

    def __init__(self, email: str, starting_balance):
        """Open an account.

        Args:
            email: Account identifier, validated with is_email_valid
            starting_balance: Opening balance, validated with is_amount_valid

        Raises:
            ValidationError: If the email or the starting balance is invalid
        """
        if not is_email_valid(email):
            raise ValidationError(invalid_email(email))
        if not is_amount_valid(starting_balance):
            raise ValidationError(invalid_starting_balance(starting_balance))

        self._email = email
        self._balance = to_amount(starting_balance)
        logger.debug("Opened account %s with balance %s", email, self._balance)

    @property
    def email(self) -> str:
        return self._email

    @property
    def identifier(self) -> str:
        return self._email

    @property
    def balance(self) -> Decimal:
        return self._balance

    def get_email(self) -> str:
        """Return the account identifier."""
        return self._email

    def get_balance(self) -> Decimal:
        """Return the current balance, scaled to cents."""
        return self._balance

    def deposit(self, amount) -> None:
        """Add money to the account.

        Zero is accepted and leaves the balance unchanged.

        Args:
            amount: Amount to deposit

        Raises:
            ValidationError: If the amount is invalid
        """
        value = to_amount(amount)
        self._balance = MONEY_CONTEXT.add(self._balance, value)
        logger.debug("Deposited %s into %s, balance %s", value, self._email, self._balance)

    def withdraw(self, amount) -> None:
        """Take money out of the account.

        Args:
            amount: Amount to withdraw, must be greater than zero

        Raises:
            ValidationError: If the amount is invalid or zero
            InsufficientFundsError: If the amount exceeds the balance
        """
        value = to_amount(amount)
        if value == 0:
            raise ValidationError(zero_withdrawal())
        self._check_funds(value)

        self._balance = MONEY_CONTEXT.subtract(self._balance, value)
        logger.debug("Withdrew %s from %s, balance %s", value, self._email, self._balance)

    def transfer(self, target: "Account", amount) -> None:
        """Move money from this account to another one.

        Unlike withdraw, a zero amount is accepted and moves nothing.
        Both balances are updated together or not at all.

        Args:
            target: Receiving account
            amount: Amount to move

        Raises:
            ValidationError: If the target is not an Account or the amount is invalid
            InsufficientFundsError: If the amount exceeds this account's balance
        """
        if not isinstance(target, Account):
            raise ValidationError(invalid_transfer_target(target))
        value = to_amount(amount)
        self._check_funds(value)

        self._balance = MONEY_CONTEXT.subtract(self._balance, value)
        target._balance = MONEY_CONTEXT.add(target._balance, value)
        logger.debug("Transferred %s from %s to %s", value, self._email, target._email)

    def _check_funds(self, value: Decimal) -> None:
        if value > self._balance:
            raise InsufficientFundsError(self._balance, value)

    def __repr__(self) -> str:
        return f"Account(email={self._email!r}, balance={self._balance})"
