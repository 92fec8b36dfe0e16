# -*- coding: utf-8 -*-
"""
Money Handling Utilities.

Purpose:
- All monetary values are `Decimal`, never float.
- Amount limits come from config (MIN_TRANSACTION, MAX_TRANSACTION).
- Raw user input is parsed and validated here, before any balance is touched.
"""

import logging
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from .config import MAX_TRANSACTION, MIN_TRANSACTION
from .errors import AmountExceedsTransactionLimit, InvalidAmount

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

# Plain ASCII decimal literal: no digit grouping, no non-ASCII digits.
AMOUNT_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def as_money(value) -> Decimal:
    """
    Normalize any input to Decimal with 2 fractional digits.

    Floats go through str() first so 0.1 becomes Decimal("0.1"), not its
    binary expansion.
    """
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def fmt_money(value) -> str:
    return f"{as_money(value):.2f}"


def to_decimal(raw) -> Decimal:
    """
    Parse a raw amount (str, int, float or Decimal) into a finite Decimal.

    Text must be a plain ASCII decimal literal (optional sign and exponent).
    Raises InvalidAmount for anything else, including NaN and infinities.
    """
    if isinstance(raw, bool):
        raise InvalidAmount(f"Not an amount: {raw!r}")
    if isinstance(raw, Decimal):
        value = raw
    else:
        text = str(raw).strip()
        if not AMOUNT_PATTERN.fullmatch(text):
            logger.debug("Could not parse amount: %r", raw)
            raise InvalidAmount(f"Not a number: {raw!r}")
        try:
            value = Decimal(text)
        except InvalidOperation:
            logger.debug("Could not parse amount: %r", raw)
            raise InvalidAmount(f"Not a number: {raw!r}") from None
    if not value.is_finite():
        raise InvalidAmount(f"Amount must be finite, got {raw!r}")
    return value


def validate_amount_positive_in_limits(raw) -> Decimal:
    """
    Validate that the amount is within allowed limits and return it in cents.

    Rules, in order:
    - Must parse as a finite decimal, else InvalidAmount.
    - Must be > 0, else InvalidAmount.
    - Must be <= MAX_TRANSACTION, else AmountExceedsTransactionLimit.
    - Must still be >= MIN_TRANSACTION once rounded to cents, else InvalidAmount.
    """
    amount = to_decimal(raw)
    if amount <= 0:
        raise InvalidAmount(f"Amount must be positive, got {amount}")
    if amount > Decimal(MAX_TRANSACTION):
        raise AmountExceedsTransactionLimit(f"Amount must be <= {MAX_TRANSACTION}")
    amt = as_money(amount)
    if amt < Decimal(MIN_TRANSACTION):
        raise InvalidAmount(f"Amount must be >= {MIN_TRANSACTION}")
    return amt
