"""
Structured logging: timestamp, level, event_type, account context.

Importing this module does not touch the structlog configuration; the host
application calls configure_logging() once at startup. Loggers returned by
get_logger() are lazy, so module-level loggers pick up whatever configuration
is active when they first emit.

Uses only Python stdlib logging and structlog; no other solwallet imports to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, TextIO

import structlog

DEFAULT_LOG_LEVEL = "INFO"
# json or console
DEFAULT_LOG_FORMAT = "json"

ACCOUNT_LOGGER_NAME = "solwallet.accounts"


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    if isinstance(level, int):
        return level
    return getattr(logging, level.strip().upper(), logging.INFO)


def configure_logging(
    level: str | int | None = None,
    log_format: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Configure structlog for the process.

    level and log_format fall back to LOG_LEVEL and LOG_FORMAT from the
    environment. Records go to stream (stderr by default), one per line;
    with log_format="json" each line is an object carrying event_type,
    level, timestamp and logger plus the bound keyword context.
    """
    if log_format is None:
        log_format = os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT)
    if stream is None:
        stream = sys.stderr

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if log_format.strip().lower() == "json":
        processors.append(structlog.processors.EventRenamer("event_type"))
        processors.append(structlog.processors.JSONRenderer())
    else:
        isatty = getattr(stream, "isatty", None)
        processors.append(structlog.dev.ConsoleRenderer(colors=bool(isatty and isatty())))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("store_wallet_created", account_name="Account 0", address="...")
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_account(account_name: str, address: str | None = None) -> Any:
    """Return a logger with account_name (and address when known) bound to all calls."""
    logger = get_logger(ACCOUNT_LOGGER_NAME).bind(account_name=account_name)
    if address:
        logger = logger.bind(address=address)
    return logger
