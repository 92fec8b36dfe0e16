# -*- coding: utf-8 -*-
from __future__ import annotations
"""
Ledger - single balance state holder.

- Holds exactly one balance for the lifetime of a session.
- Performs no validation; callers pass balances the validator accepted.
- A new session is a new Ledger; there is no reset.
"""

from decimal import Decimal

from .config import INITIAL_BALANCE
from .money import as_money


class Ledger:
    def __init__(self, balance=INITIAL_BALANCE):
        self._balance = as_money(balance)

    def __repr__(self) -> str:
        return f"Ledger(balance={self._balance})"

    def get_balance(self) -> Decimal:
        return self._balance

    def set_balance(self, new_value: Decimal) -> None:
        self._balance = as_money(new_value)
