"""
In-Memory Storage

Keeps quote documents in a list. Used for testing the service and the
query layer without touching the filesystem.

Documents are stored in their encoded form, exactly like the SQLite
backend, so decoding rules apply here too.
"""

import operator
from typing import Any, Callable, Optional

from quoteit.models.quote import Quote
from quoteit.queries.filters import (
    AtLeast,
    AtMost,
    Equals,
    Predicate,
    QuoteFilter,
    iter_predicates,
)
from quoteit.services.storage.interface import (
    CorruptRecordError,
    QuoteStorageInterface,
)


COMPARATORS: dict[type, Callable[[Any, Any], bool]] = {
    Equals: operator.eq,
    AtMost: operator.le,
    AtLeast: operator.ge,
}


def _matches(quote: Quote, predicate: Predicate) -> bool:
    """Evaluate one predicate; an absent field never matches."""
    actual = getattr(quote, predicate.field)
    if actual is None:
        return False
    return COMPARATORS[type(predicate)](actual, predicate.value)


class InMemoryQuoteStorage(QuoteStorageInterface):
    """List-backed quote storage."""

    def __init__(self, documents: Optional[list[dict[str, Any]]] = None):
        self.documents: list[dict[str, Any]] = list(documents or [])

    def insert(self, quote: Quote) -> None:
        self.documents.append(quote.to_document())

    def find(self, quote_filter: Optional[QuoteFilter] = None) -> list[Quote]:
        quotes = []
        for index, document in enumerate(self.documents):
            try:
                quotes.append(Quote.from_document(document))
            except ValueError as e:
                raise CorruptRecordError(
                    f"Stored quote #{index + 1} is malformed: {e}"
                ) from e

        if quote_filter is None:
            return quotes

        predicates = iter_predicates(quote_filter)
        return [
            quote for quote in quotes
            if all(_matches(quote, predicate) for predicate in predicates)
        ]
