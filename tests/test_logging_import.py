"""
Test that wallet_logging can be imported without circular import and logger works.
"""

from __future__ import annotations

import asyncio
import importlib
import io
import json

import pytest
import structlog

from tests.conftest import NODE_URL, VALID_WALLET, FakeRpcClient


@pytest.fixture
def log_stream():
    """Route structlog JSON output into a buffer, restoring defaults afterwards."""
    from solwallet.wallet_logging import configure_logging

    stream = io.StringIO()
    configure_logging(level="DEBUG", log_format="json", stream=stream)
    yield stream
    structlog.reset_defaults()


def _records(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


def test_logging_import():
    """Import get_logger from wallet_logging and use the logger."""
    from solwallet.wallet_logging import get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")


def test_import_does_not_configure_structlog():
    from solwallet.wallet_logging import logger as logging_module

    structlog.reset_defaults()
    importlib.reload(logging_module)

    assert structlog.is_configured() is False


def test_configure_logging_emits_json_lines(log_stream):
    from solwallet.wallet_logging import get_logger

    get_logger("solwallet.test").info("test_message", key="value")

    (record,) = _records(log_stream)
    assert record["event_type"] == "test_message"
    assert record["logger"] == "solwallet.test"
    assert record["level"] == "info"
    assert record["key"] == "value"
    assert "timestamp" in record


def test_level_filters_records():
    from solwallet.wallet_logging import configure_logging, get_logger

    stream = io.StringIO()
    configure_logging(level="WARNING", log_format="json", stream=stream)
    try:
        logger = get_logger("solwallet.test")
        logger.info("quiet")
        logger.warning("loud")
    finally:
        structlog.reset_defaults()

    assert [r["event_type"] for r in _records(stream)] == ["loud"]


def test_bind_account(log_stream):
    from solwallet.wallet_logging import bind_account

    bind_account("Account 0", address=VALID_WALLET).info("account_event")
    bind_account("Account 1").info("account_event")

    first, second = _records(log_stream)
    assert first["account_name"] == "Account 0"
    assert first["address"] == VALID_WALLET
    assert second["account_name"] == "Account 1"
    assert "address" not in second


def test_account_refresh_logs_account_context(log_stream):
    from solwallet.accounts import WatcherAccount

    client = FakeRpcClient(balances={VALID_WALLET: 1_000_000_000})
    account = WatcherAccount(name="Watch", url=NODE_URL, address=VALID_WALLET, client=client)

    asyncio.run(account.refresh_balance())

    (record,) = [r for r in _records(log_stream) if r["event_type"] == "account_balance_refreshed"]
    assert record["account_name"] == "Watch"
    assert record["address"] == VALID_WALLET
    assert record["balance"] == 1.0
    assert record["level"] == "debug"
