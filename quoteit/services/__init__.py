"""
Services Package

External collaborators of the core. Currently only storage.
"""

from quoteit.services.storage import (
    CorruptRecordError,
    InMemoryQuoteStorage,
    QuoteStorageInterface,
    SQLiteQuoteStorage,
    StorageError,
    StoreUnavailableError,
)

__all__ = [
    "CorruptRecordError",
    "InMemoryQuoteStorage",
    "QuoteStorageInterface",
    "SQLiteQuoteStorage",
    "StorageError",
    "StoreUnavailableError",
]
