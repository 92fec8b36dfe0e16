"""Logging configuration for the ledger CLI."""
import logging
import sys
from pathlib import Path

import ledger.config as cfg


def setup_logger(name: str = "ledger") -> logging.Logger:
    """
    Set up logger with a stderr console handler and an optional file handler.

    stdout is reserved for the menu and outcome messages, so console logging
    goes to stderr.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    level = getattr(logging, cfg.LOG_LEVEL.upper(), logging.WARNING)
    logger.setLevel(logging.DEBUG if cfg.LOG_FILE else level)
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

    if cfg.LOG_FILE:
        try:
            log_path = Path(cfg.LOG_FILE)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not set up file logging: {e}")

    return logger
