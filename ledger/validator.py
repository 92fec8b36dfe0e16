# -*- coding: utf-8 -*-
"""
Transaction Validator

Pure decision logic for balance mutations: given the current balance and a
requested credit or debit, return either the new balance or the reason the
request is refused. No state, no I/O, and no exceptions escape for bad input;
every refusal comes back as a Rejected outcome.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

from .config import MAX_BALANCE
from .errors import (
    ERRORS_BY_REASON,
    ExceedsMaximumBalance,
    InsufficientFunds,
    LedgerError,
    RejectionReason,
)
from .money import as_money, validate_amount_positive_in_limits


class TransactionKind(str, Enum):
    VIEW = "view"
    CREDIT = "credit"
    DEBIT = "debit"


@dataclass(frozen=True)
class TransactionRequest:
    """A credit or debit waiting for a decision; amount may still be raw text."""
    kind: TransactionKind
    amount: object


@dataclass(frozen=True)
class Accepted:
    new_balance: Decimal

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    reason: RejectionReason
    detail: str = ""

    @property
    def accepted(self) -> bool:
        return False

    def raise_error(self) -> None:
        """Re-raise this refusal as the matching LedgerError."""
        raise ERRORS_BY_REASON[self.reason](self.detail or self.reason.value)


TransactionOutcome = Union[Accepted, Rejected]


class TransactionValidator:
    """
    Decide credits and debits against a balance.

    Order of checks for both kinds:
    1. Amount parses as a finite decimal and is positive (InvalidAmount).
    2. Amount is within the single-transaction limit (AmountExceedsTransactionLimit).
    3. Credit: balance + amount <= MAX_BALANCE (ExceedsMaximumBalance).
       Debit: amount <= balance (InsufficientFunds). Debiting the whole
       balance is allowed and leaves exactly 0.00.
    """

    def __init__(self, max_balance=MAX_BALANCE):
        self.max_balance = as_money(max_balance)

    def validate(self, current_balance: Decimal, request: TransactionRequest) -> TransactionOutcome:
        if request.kind not in (TransactionKind.CREDIT, TransactionKind.DEBIT):
            raise ValueError(f"Not a balance mutation: {request.kind!r}")
        try:
            amt = validate_amount_positive_in_limits(request.amount)
            balance = as_money(current_balance)
            if request.kind is TransactionKind.CREDIT:
                return Accepted(self._credit(balance, amt))
            return Accepted(self._debit(balance, amt))
        except LedgerError as e:
            return Rejected(e.reason, str(e))

    def _credit(self, balance: Decimal, amt: Decimal) -> Decimal:
        candidate = balance + amt
        if candidate > self.max_balance:
            raise ExceedsMaximumBalance(f"{balance} + {amt} exceeds {self.max_balance}")
        return as_money(candidate)

    def _debit(self, balance: Decimal, amt: Decimal) -> Decimal:
        if amt > balance:
            raise InsufficientFunds(f"{amt} exceeds balance {balance}")
        return as_money(balance - amt)
