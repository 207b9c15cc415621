"""
Storage Package

Provides the abstract draft storage interface and its implementations.
"""

from savesmart.storage.interface import (
    FormStorageInterface,
    StorageError,
    StorageUnavailableError,
)
from savesmart.storage.json_file import KEY_PREFIX, JsonFileFormStorage
from savesmart.storage.memory import InMemoryFormStorage

__all__ = [
    # Interface
    "FormStorageInterface",
    # Exceptions
    "StorageError",
    "StorageUnavailableError",
    # Implementations
    "InMemoryFormStorage",
    "JsonFileFormStorage",
    "KEY_PREFIX",
]
