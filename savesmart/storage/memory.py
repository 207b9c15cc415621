"""In-memory draft storage, for tests and storage-less sessions."""

from typing import Optional

from savesmart.models.profile import FormState
from savesmart.storage.interface import FormStorageInterface


class InMemoryFormStorage(FormStorageInterface):

    def __init__(self, available: bool = True):
        self._available = available
        self._drafts: dict[str, dict] = {}
        self.save_count = 0

    def save(self, key: str, state: FormState) -> None:
        if not self._available:
            return
        # Store a serialized copy so later mutations don't leak in
        self._drafts[key] = state.model_dump(mode="json")
        self.save_count += 1

    def load(self, key: str) -> Optional[FormState]:
        if not self._available or key not in self._drafts:
            return None
        return FormState.model_validate(self._drafts[key])

    def clear(self, key: str) -> None:
        self._drafts.pop(key, None)

    def is_available(self) -> bool:
        return self._available

    def keys(self) -> list[str]:
        return list(self._drafts)
