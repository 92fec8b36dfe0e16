# -*- coding: utf-8 -*-
"""
Core of the single-account ledger: one in-memory balance, credit and debit
rules, and the messages the CLI prints for them.

This __init__ sets the global `Decimal` context so every balance computation
runs with the same precision and rounds half-up at the cent.
"""
from decimal import getcontext, ROUND_HALF_UP

getcontext().prec = 28
getcontext().rounding = ROUND_HALF_UP

from .errors import (  # noqa: E402
    AmountExceedsTransactionLimit,
    ExceedsMaximumBalance,
    InsufficientFunds,
    InvalidAmount,
    LedgerError,
    RejectionReason,
)
from .ledger import Ledger  # noqa: E402
from .session import AccountSession  # noqa: E402
from .validator import (  # noqa: E402
    Accepted,
    Rejected,
    TransactionKind,
    TransactionOutcome,
    TransactionRequest,
    TransactionValidator,
)
