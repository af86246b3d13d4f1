"""Validators guarding every account mutation.

Both validators are pure, total functions: they never raise and answer
``False`` for anything they do not recognise, including ``None``.
"""

import string
from decimal import Context, Decimal, InvalidOperation, MAX_EMAX, MAX_PREC, MIN_EMIN
from typing import Optional

from bankledger.domain.errors import ValidationError, invalid_amount

CENT = Decimal("0.01")
MAX_FRACTION_DIGITS = 2
# Amounts of 10**28 or more are rejected
MAX_INTEGER_DIGITS = 28

# Wide enough that money arithmetic never rounds.
MONEY_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)

_ALNUM = frozenset(string.ascii_letters + string.digits)
PREFIX_SPECIALS = frozenset(".!$%&'*+-/=?^_`{|}~")
DOMAIN_SPECIALS = frozenset("-.")


def _as_decimal(amount: object) -> Optional[Decimal]:
    """Convert an amount to an exact Decimal, or None if it is not a number.

    Floats go through their shortest decimal text so that ``50.999`` is read
    as the literal the caller wrote, not its binary expansion.
    """
    if isinstance(amount, bool):
        return None
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, (int, float)):
        return Decimal(str(amount))
    if isinstance(amount, str):
        try:
            return Decimal(amount)
        except InvalidOperation:
            return None
    return None


def _fits_cents(amount: Decimal) -> bool:
    _, digits, exponent = amount.as_tuple()
    if exponent >= -MAX_FRACTION_DIGITS:
        return True
    # Digits past the second fractional place must all be zeros
    extra = -exponent - MAX_FRACTION_DIGITS
    return not any(digits[-extra:])


def is_amount_valid(amount: object) -> bool:
    """Check that an amount is finite, non-negative and has at most 2 decimals.

    Amounts with more than MAX_INTEGER_DIGITS digits before the decimal
    point are rejected as well.

    Args:
        amount: Decimal, int, float or decimal string

    Returns:
        True if the amount can be used as money
    """
    value = _as_decimal(amount)
    if value is None or not value.is_finite():
        return False
    if value < 0:
        return False
    if value and value.adjusted() >= MAX_INTEGER_DIGITS:
        return False
    return _fits_cents(value)


def to_amount(amount: object) -> Decimal:
    """Validate an amount and return it as a Decimal scaled to cents.

    Args:
        amount: Decimal, int, float or decimal string

    Returns:
        Decimal with exactly two fractional digits

    Raises:
        ValidationError: If the amount fails is_amount_valid
    """
    if not is_amount_valid(amount):
        raise ValidationError(invalid_amount(amount))
    # copy_abs folds a negative zero into zero
    return _as_decimal(amount).quantize(CENT, context=MONEY_CONTEXT).copy_abs()


def _is_alnum(char: str) -> bool:
    return char in _ALNUM


def _is_valid_prefix(prefix: str) -> bool:
    if not prefix or not _is_alnum(prefix[0]):
        return False

    previous = prefix[0]
    for char in prefix[1:]:
        if not (_is_alnum(char) or char in PREFIX_SPECIALS):
            return False
        # No two special characters in a row
        if not _is_alnum(previous) and not _is_alnum(char):
            return False
        previous = char
    return True


def _is_valid_domain(domain: str) -> bool:
    if not domain:
        return False

    last_dot = domain.rfind(".")
    if last_dot == -1:
        return False

    tld = domain[last_dot + 1:]
    if len(tld) < 2:
        return False

    return all(_is_alnum(char) or char in DOMAIN_SPECIALS for char in domain)


def is_email_valid(email: object) -> bool:
    """Check an account identifier against the supported email grammar.

    The grammar is a deliberately small subset of RFC 5322:

    - exactly one ``@`` with at least one ``.`` after it
    - the local part starts with an ASCII letter or digit, may contain
      ``.!$%&'*+-/=?^_`{|}~`` and never two of those in a row
    - the domain holds only letters, digits, ``-`` and ``.`` and ends in a
      label of at least two characters

    Args:
        email: Candidate identifier

    Returns:
        True if the identifier is well formed
    """
    if not isinstance(email, str) or not email.strip():
        return False

    at_index = email.find("@")
    if at_index == -1 or at_index != email.rfind("@"):
        return False

    if email.rfind(".") <= at_index:
        return False

    prefix = email[:at_index]
    domain = email[at_index + 1:]
    return _is_valid_prefix(prefix) and _is_valid_domain(domain)
