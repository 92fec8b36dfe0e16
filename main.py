# -*- coding: utf-8 -*-
"""
Account Management System (interactive CLI)

Purpose:
- Keeps one account balance for the lifetime of the process.
- Menu:
  1) View Balance
  2) Credit Account
  3) Debit Account
  4) Exit

Notes:
- The balance starts at the configured initial value on every run; nothing
  is saved between sessions.
- This module only reads input and prints; all decisions live in `ledger`.
- End of input and Ctrl+C end the session like choosing Exit.
"""


from __future__ import annotations

import logging

from ledger.logger import setup_logger
from ledger.messages import render_balance, render_outcome
from ledger.session import AccountSession
from ledger.validator import TransactionKind, TransactionRequest

logger = logging.getLogger("ledger.cli")

MENU_CHOICES = {
    "1": TransactionKind.VIEW,
    "2": TransactionKind.CREDIT,
    "3": TransactionKind.DEBIT,
}
EXIT_CHOICE = "4"

AMOUNT_PROMPTS = {
    TransactionKind.CREDIT: "Enter credit amount: ",
    TransactionKind.DEBIT: "Enter debit amount: ",
}


def display_menu() -> None:
    print("--------------------------------")
    print("Account Management System")
    print("1. View Balance")
    print("2. Credit Account")
    print("3. Debit Account")
    print("4. Exit")
    print("--------------------------------")


def run_operation(session: AccountSession, kind: TransactionKind) -> None:
    """Run one menu operation; prompts for an amount for credit/debit."""
    if kind is TransactionKind.VIEW:
        print(render_balance(session.view()))
        return
    raw = input(AMOUNT_PROMPTS[kind])
    outcome = session.submit(TransactionRequest(kind, raw))
    print(render_outcome(kind, outcome))


def run_session(session: AccountSession | None = None) -> AccountSession:
    session = session or AccountSession()
    logger.debug("Session started with balance %s", session.view())

    while True:
        try:
            display_menu()
            choice = input("Enter your choice (1-4): ").strip()

            if choice == EXIT_CHOICE:
                break
            kind = MENU_CHOICES.get(choice)
            if kind is None:
                print("Invalid choice, please select 1-4.")
                continue
            run_operation(session, kind)
        except (EOFError, KeyboardInterrupt):
            print("")
            break

    print("Exiting the program. Goodbye!")
    logger.debug("Session ended with balance %s", session.view())
    return session


def main() -> int:
    setup_logger()
    run_session()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
