"""
JSON file persistence for AppState.

load() never fails: a missing, unreadable or malformed file restores as an
empty directory. save() replaces the file atomically.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from solwallet.state.app_state import AppState
from solwallet.wallet_logging import get_logger

logger = get_logger(__name__)


class JsonFilePersistor:
    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def load(self) -> AppState:
        if not self.path.exists():
            logger.info("state_file_missing", path=str(self.path))
            return AppState()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("state_file_unreadable", path=str(self.path), error=str(e))
            return AppState()
        state = AppState.from_json(data)
        logger.info("state_loaded", path=str(self.path), account_count=len(state.accounts))
        return state

    def save(self, state: AppState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(state.to_json(), indent=2)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("state_saved", path=str(self.path), account_count=len(state.accounts))
