# -*- coding: utf-8 -*-
from __future__ import annotations
"""
Account Session

- Owns one explicitly constructed Ledger; sessions never share a balance.
- Read, validate and write happen under one RLock, so a session handed to
  several threads still commits one operation at a time.
- Rejections leave the Ledger untouched.
"""

import logging
from decimal import Decimal
from threading import RLock

from .ledger import Ledger
from .validator import (
    TransactionKind,
    TransactionOutcome,
    TransactionRequest,
    TransactionValidator,
)

logger = logging.getLogger(__name__)


class AccountSession:
    def __init__(self, ledger: Ledger | None = None,
                 validator: TransactionValidator | None = None):
        self.ledger = ledger if ledger is not None else Ledger()
        self.validator = validator or TransactionValidator()
        self._lock = RLock()

    def __repr__(self) -> str:
        return f"AccountSession({self.ledger!r})"

    def view(self) -> Decimal:
        with self._lock:
            return self.ledger.get_balance()

    def credit(self, amount) -> TransactionOutcome:
        return self.submit(TransactionRequest(TransactionKind.CREDIT, amount))

    def debit(self, amount) -> TransactionOutcome:
        return self.submit(TransactionRequest(TransactionKind.DEBIT, amount))

    def submit(self, request: TransactionRequest) -> TransactionOutcome:
        with self._lock:
            balance = self.ledger.get_balance()
            outcome = self.validator.validate(balance, request)
            if outcome.accepted:
                self.ledger.set_balance(outcome.new_balance)
                logger.info("%s accepted: %s -> %s", request.kind.value, balance, outcome.new_balance)
            else:
                logger.info("%s rejected (%s): balance stays %s",
                            request.kind.value, outcome.reason.value, balance)
        return outcome
