"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep the on-disk format out of the service layer
2. Use in-memory storage for testing
3. Swap the backend without touching filter construction

The interface is intentionally tiny. Quotes are append-only, so there is
no update, no delete, and no lookup by id.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from quoteit.models.quote import Quote

if TYPE_CHECKING:
    from quoteit.queries.filters import QuoteFilter


class QuoteStorageInterface(ABC):
    """
    Abstract interface for quote storage operations.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def insert(self, quote: Quote) -> None:
        """
        Append a quote to the store.

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def find(self, quote_filter: Optional["QuoteFilter"] = None) -> list[Quote]:
        """
        Get every quote matching a filter, in store order.

        Args:
            quote_filter: Filter to apply. None matches every quote.

        Returns:
            All matching quotes. Either every match is returned or the
            call raises; there are no partial results.

        Raises:
            StorageError: If the query fails
            CorruptRecordError: If a stored document cannot be decoded
        """
        pass

    def close(self) -> None:
        """Release the underlying resource, if any."""
        pass

    def __enter__(self) -> "QuoteStorageInterface":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StoreUnavailableError(StorageError):
    """The store could not be opened (locked, unreadable, not a store)."""
    pass


class CorruptRecordError(StorageError):
    """A stored document is not a valid quote."""
    pass
