"""
Storage Services Package

Provides the abstract storage interface and its implementations.
SQLite is the on-disk backend; the in-memory backend is for tests.
"""

from quoteit.services.storage.interface import (
    CorruptRecordError,
    QuoteStorageInterface,
    StorageError,
    StoreUnavailableError,
)
from quoteit.services.storage.memory import InMemoryQuoteStorage
from quoteit.services.storage.sqlite_store import (
    SQLiteQuoteStorage,
    compile_filter,
)

__all__ = [
    # Interface
    "QuoteStorageInterface",
    # Exceptions
    "CorruptRecordError",
    "StorageError",
    "StoreUnavailableError",
    # Implementations
    "InMemoryQuoteStorage",
    "SQLiteQuoteStorage",
    "compile_filter",
]
