"""
Tests for the narrow transfer decoder (transactions.parser).
"""

from __future__ import annotations

from solwallet.transactions import Transaction, parse_transactions, parse_transfer

from tests.conftest import VALID_WALLET, VALID_WALLET_2, system_transfer, token_transfer


def test_mixed_list_keeps_length_with_hole():
    """A system transfer and an unrecognized instruction give one Transaction and one None."""
    raw = [
        system_transfer(VALID_WALLET_2, VALID_WALLET, 1_500_000_000),
        token_transfer(VALID_WALLET, VALID_WALLET_2),
    ]
    parsed = parse_transactions(raw, VALID_WALLET)
    assert len(parsed) == 2
    assert isinstance(parsed[0], Transaction)
    assert parsed[1] is None


def test_received_when_destination_is_owner():
    tx = parse_transfer(system_transfer(VALID_WALLET_2, VALID_WALLET, 1_000_000_000), VALID_WALLET)
    assert tx is not None
    assert tx.received is True
    assert tx.origin == VALID_WALLET_2
    assert tx.destination == VALID_WALLET
    assert tx.amount == 1.0


def test_sent_when_destination_is_other():
    tx = parse_transfer(system_transfer(VALID_WALLET, VALID_WALLET_2, 250_000_000), VALID_WALLET)
    assert tx is not None
    assert tx.received is False
    assert tx.amount == 0.25


def test_legacy_carats_amount_key():
    raw = system_transfer(VALID_WALLET, VALID_WALLET_2, 0)
    info = raw["transaction"]["message"]["instructions"][0]["parsed"]["info"]
    del info["lamports"]
    info["carats"] = 3_000_000_000
    tx = parse_transfer(raw, VALID_WALLET)
    assert tx is not None
    assert tx.amount == 3.0


def test_only_first_instruction_is_inspected():
    raw = token_transfer(VALID_WALLET, VALID_WALLET_2)
    transfer_ix = system_transfer(VALID_WALLET, VALID_WALLET_2, 1)["transaction"]["message"]["instructions"][0]
    raw["transaction"]["message"]["instructions"].append(transfer_ix)
    assert parse_transfer(raw, VALID_WALLET) is None


def test_non_transfer_system_instruction_is_none():
    raw = system_transfer(VALID_WALLET, VALID_WALLET_2, 1)
    raw["transaction"]["message"]["instructions"][0]["parsed"]["type"] = "createAccount"
    assert parse_transfer(raw, VALID_WALLET) is None


def test_missing_or_malformed_envelopes_are_none():
    """None envelope, missing message, empty instructions and bad info all become holes."""
    no_info = system_transfer(VALID_WALLET, VALID_WALLET_2, 1)
    no_info["transaction"]["message"]["instructions"][0]["parsed"]["info"] = "garbage"
    string_amount = system_transfer(VALID_WALLET, VALID_WALLET_2, 1)
    string_amount["transaction"]["message"]["instructions"][0]["parsed"]["info"]["lamports"] = "1"
    raw = [
        None,
        {},
        {"transaction": {}},
        {"transaction": {"message": {"instructions": []}}},
        {"transaction": {"message": {"instructions": [{"programId": "11111111111111111111111111111111"}]}}},
        no_info,
        string_amount,
    ]
    parsed = parse_transactions(raw, VALID_WALLET)
    assert parsed == [None] * len(raw)
