"""
Central Configuration File (SSOT).
"""
import os

# --- Business Rules ---
CURRENCY_SYMBOL = "$"
INITIAL_BALANCE = "1000.00"
MIN_TRANSACTION = "0.01"
MAX_TRANSACTION = "999999.99"
MAX_BALANCE = "999999.99"

# --- Logging ---
LOG_LEVEL = os.getenv("LEDGER_LOG_LEVEL", "WARNING")
LOG_FILE = os.getenv("LEDGER_LOG_FILE", "")
