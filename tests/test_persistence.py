"""
Tests for JSON file persistence of AppState.
"""

from __future__ import annotations

import json

from solwallet.accounts import WalletAccount
from solwallet.state import AppState, JsonFilePersistor

from tests.conftest import NODE_URL, TEST_MNEMONIC, VALID_WALLET


def test_missing_file_loads_empty(tmp_path):
    persistor = JsonFilePersistor(tmp_path / "nope" / "state.json")
    assert persistor.load().accounts == {}


def test_corrupt_file_loads_empty(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")
    assert JsonFilePersistor(path).load().accounts == {}


def test_wrong_shape_loads_empty(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"accounts": ["x"]}), encoding="utf-8")
    assert JsonFilePersistor(path).load().accounts == {}


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "state.json"
    state = AppState()
    state.add_account(
        WalletAccount(name="Main", url=NODE_URL, address=VALID_WALLET, balance=0.5, mnemonic=TEST_MNEMONIC)
    )
    persistor = JsonFilePersistor(path)

    persistor.save(state)

    assert json.loads(path.read_text(encoding="utf-8")) == state.to_json()
    restored = persistor.load()
    assert restored.to_json() == state.to_json()
    # No temp files left next to the state file
    assert [p.name for p in path.parent.iterdir()] == ["state.json"]
