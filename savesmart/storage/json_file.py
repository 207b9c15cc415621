"""
JSON File Draft Storage

Stores each draft as `<directory>/<prefix><key>.json`.

Behaviour on failure:
- Directory not writable: storage is marked unavailable once, at start.
  save() warns, load() returns None, clear() does nothing.
- Corrupt or unreadable draft: logged, load() returns None.
- Disk full on save: every draft with our prefix is deleted and the
  save is retried once. A second failure is logged, not raised.
"""

import errno
import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from savesmart.audit import get_logger
from savesmart.models.audit import FormAuditEventBuilder
from savesmart.models.profile import FormState
from savesmart.storage.interface import FormStorageInterface


KEY_PREFIX = "budgeting-profile-"


class JsonFileFormStorage(FormStorageInterface):
    """Draft storage backed by JSON files in one directory."""

    def __init__(self, directory: Path, key_prefix: str = KEY_PREFIX):
        self._directory = Path(directory)
        self._prefix = key_prefix
        self._logger = get_logger("savesmart.storage")
        self._available = self._check_availability()

        if not self._available:
            event = FormAuditEventBuilder.storage_unavailable(str(self._directory))
            self._logger.warning("audit_event", **event.to_log_dict())

    @property
    def directory(self) -> Path:
        return self._directory

    def _check_availability(self) -> bool:
        probe = self._directory / "__storage_test__"
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            probe.write_text("test", encoding="utf-8")
            probe.unlink()
            return True
        except OSError:
            return False

    def is_available(self) -> bool:
        return self._available

    def path_for(self, key: str) -> Path:
        return self._directory / f"{self._prefix}{key}.json"

    def _log_failure(self, operation: str, key: str, error: Exception) -> None:
        event = FormAuditEventBuilder.storage_failed(operation, key, str(error))
        self._logger.error("audit_event", **event.to_log_dict())

    def _write(self, key: str, serialized: str) -> None:
        self.path_for(key).write_text(serialized, encoding="utf-8")

    def save(self, key: str, state: FormState) -> None:
        if not self._available:
            self._logger.warning("storage_save_skipped", key=key, reason="unavailable")
            return

        serialized = json.dumps(state.model_dump(mode="json"))
        try:
            self._write(key, serialized)
        except OSError as e:
            if e.errno != errno.ENOSPC:
                self._log_failure("save", key, e)
                return
            self._logger.error("storage_quota_exceeded", key=key)
            self._clear_old_data()
            try:
                self._write(key, serialized)
            except OSError as retry_error:
                self._log_failure("save_retry", key, retry_error)

    def load(self, key: str) -> Optional[FormState]:
        if not self._available:
            return None

        path = self.path_for(key)
        if not path.exists():
            return None

        try:
            return FormState.model_validate(json.loads(path.read_text(encoding="utf-8")))
        except (OSError, ValidationError, ValueError) as e:
            self._log_failure("load", key, e)
            return None

    def clear(self, key: str) -> None:
        if not self._available:
            return
        try:
            self.path_for(key).unlink(missing_ok=True)
        except OSError as e:
            self._log_failure("clear", key, e)

    def _clear_old_data(self) -> None:
        """Delete every draft with our prefix to free up space."""
        try:
            for path in self._directory.glob(f"{self._prefix}*.json"):
                path.unlink(missing_ok=True)
        except OSError as e:
            self._log_failure("clear_old_data", "*", e)
