# -*- coding: utf-8 -*-
"""
Custom Exception Classes for the Ledger Domain.

Purpose:
- Name every way a credit or debit can be refused.
- Each error carries the RejectionReason the validator reports for it, so
  money helpers can raise and the validator can turn the error into an
  outcome without a lookup table.
"""
from enum import Enum


class RejectionReason(str, Enum):
    INVALID_AMOUNT = "InvalidAmount"
    AMOUNT_EXCEEDS_TRANSACTION_LIMIT = "AmountExceedsTransactionLimit"
    EXCEEDS_MAXIMUM_BALANCE = "ExceedsMaximumBalance"
    INSUFFICIENT_FUNDS = "InsufficientFunds"


class LedgerError(Exception):
    """Base class for refused ledger operations."""
    reason: RejectionReason


class InvalidAmount(LedgerError):
    """
    Raised when a transaction amount is invalid:
    - Not a finite decimal number.
    - Zero or negative (after rounding to cents).
    """
    reason = RejectionReason.INVALID_AMOUNT


class AmountExceedsTransactionLimit(LedgerError):
    """Raised when a single transaction amount is above MAX_TRANSACTION."""
    reason = RejectionReason.AMOUNT_EXCEEDS_TRANSACTION_LIMIT


class ExceedsMaximumBalance(LedgerError):
    """Raised when a credit would push the balance above MAX_BALANCE."""
    reason = RejectionReason.EXCEEDS_MAXIMUM_BALANCE


class InsufficientFunds(LedgerError):
    """
    Raised when a debit cannot be completed because the balance is
    lower than the requested amount.
    """
    reason = RejectionReason.INSUFFICIENT_FUNDS


ERRORS_BY_REASON = {
    cls.reason: cls
    for cls in (InvalidAmount, AmountExceedsTransactionLimit,
                ExceedsMaximumBalance, InsufficientFunds)
}
