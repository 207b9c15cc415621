"""
Abstract Draft Storage Interface

DESIGN DECISION: The form controller only talks to this interface.
A JSON-file implementation is used by the app, an in-memory one by tests.

The interface is intentionally small: save, load, clear a draft by key.
Implementations must not raise from save/load/clear. A storage problem
loses the draft; the form keeps working.
"""

from abc import ABC, abstractmethod
from typing import Optional

from savesmart.models.profile import FormState


class StorageError(Exception):
    """Base exception for storage errors."""
    pass


class StorageUnavailableError(StorageError):
    """Raised when storage is required but cannot be used."""
    pass


class FormStorageInterface(ABC):
    """Abstract interface for persisting in-progress form drafts."""

    @abstractmethod
    def save(self, key: str, state: FormState) -> None:
        """
        Persist the form state under `key`, replacing any previous draft.
        """
        pass

    @abstractmethod
    def load(self, key: str) -> Optional[FormState]:
        """
        Load the draft stored under `key`.

        Returns:
            The form state, or None if missing, unreadable or unavailable
        """
        pass

    @abstractmethod
    def clear(self, key: str) -> None:
        """Remove the draft stored under `key` (no-op if missing)."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Whether this storage can currently persist anything."""
        pass

    def require_available(self) -> None:
        """
        Raises:
            StorageUnavailableError: If the storage cannot be used
        """
        if not self.is_available():
            raise StorageUnavailableError(f"{type(self).__name__} is not available")
