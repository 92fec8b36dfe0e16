# -*- coding: utf-8 -*-
"""
User-facing message templates for ledger outcomes.

The wording is part of the CLI contract; scripted sessions compare it verbatim.
"""

from decimal import Decimal

import ledger.config as cfg
from .errors import RejectionReason
from .money import as_money, fmt_money
from .validator import TransactionKind, TransactionOutcome


def fmt_limit(value) -> str:
    """Limits are shown with the currency symbol and thousands separators."""
    return f"{cfg.CURRENCY_SYMBOL}{as_money(value):,.2f}"


REJECTION_MESSAGES = {
    RejectionReason.INVALID_AMOUNT: "Invalid amount. Please enter a positive number.",
    RejectionReason.AMOUNT_EXCEEDS_TRANSACTION_LIMIT:
        f"Amount exceeds maximum transaction limit of {fmt_limit(cfg.MAX_TRANSACTION)}",
    RejectionReason.EXCEEDS_MAXIMUM_BALANCE:
        f"Transaction would exceed maximum balance limit of {fmt_limit(cfg.MAX_BALANCE)}",
    RejectionReason.INSUFFICIENT_FUNDS: "Insufficient funds for this debit.",
}

ACCEPTED_TEMPLATES = {
    TransactionKind.CREDIT: "Amount credited. New balance: {balance}",
    TransactionKind.DEBIT: "Amount debited. New balance: {balance}",
}


def render_balance(balance: Decimal) -> str:
    return f"Current balance: {fmt_money(balance)}"


def render_outcome(kind: TransactionKind, outcome: TransactionOutcome) -> str:
    if outcome.accepted:
        return ACCEPTED_TEMPLATES[kind].format(balance=fmt_money(outcome.new_balance))
    return REJECTION_MESSAGES[outcome.reason]
