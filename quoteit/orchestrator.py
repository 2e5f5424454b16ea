"""
Main Orchestrator for quote-it

This module ties the components together and defines the two flows:
1. Add (payload -> Quote -> store)
2. List (constraints -> validate -> filter -> store -> result)

DESIGN DECISION: Every collaborator is passed in. The service never
resolves paths or opens files itself, so tests can hand it an in-memory
store and a fixed clock.
"""

from datetime import date
from typing import Callable, Optional

from quoteit.audit import AuditLogger
from quoteit.config import QuoteItSettings, get_settings, resolve_store_path
from quoteit.models.quote import QueryResult, Quote, QuoteQuery
from quoteit.queries import QueryExecutor
from quoteit.services.storage import QuoteStorageInterface, SQLiteQuoteStorage


class QuoteService:
    """
    Validates input, writes quotes and runs list queries.

    Each call touches the store at most once. Errors propagate to the
    caller untouched: UsageError before any store access, StorageError
    from the store itself.
    """

    def __init__(
        self,
        storage: QuoteStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
        today: Callable[[], date] = date.today,
    ):
        self._storage = storage
        self._query_executor = QueryExecutor(storage)
        self._audit_logger = audit_logger
        self._today = today

    def add_quote(
        self,
        text: str,
        author: Optional[str] = None,
        stamp_date: bool = False,
    ) -> Quote:
        """
        Store a new quote.

        Args:
            text: The quote body (required, non-empty)
            author: Stored exactly as given
            stamp_date: Tag the quote with today's local calendar date

        Returns:
            The stored quote

        Raises:
            ValueError: If text is empty
            StorageError: If the insert fails
        """
        quote = Quote(
            text=text,
            author=author,
            date=self._today() if stamp_date else None,
        )
        self._storage.insert(quote)

        if self._audit_logger:
            self._audit_logger.log_quote_added(
                has_author=quote.author is not None,
                has_date=quote.date is not None,
            )

        return quote

    def list_quotes(self, query: Optional[QuoteQuery] = None) -> QueryResult:
        """
        Get the quotes matching a list request.

        Raises:
            UsageError: If the date constraints are inconsistent
            StorageError: If the query fails
        """
        query = query or QuoteQuery()
        result = self._query_executor.execute(query)

        if self._audit_logger:
            self._audit_logger.log_quotes_listed(
                query_description=result.query_description,
                result_count=result.result_count,
            )

        return result


def create_app_components(
    settings: Optional[QuoteItSettings] = None,
) -> tuple[QuoteService, SQLiteQuoteStorage]:
    """
    Factory function to create all application components.

    Prepares the store file (creating it if absent) and opens it once.
    The caller owns the returned storage and must close it.

    Returns:
        (quote_service, storage)

    Raises:
        EnvironmentSetupError: If the store location cannot be prepared
        StoreUnavailableError: If the store cannot be opened
    """
    settings = settings or get_settings()
    store_path = resolve_store_path(settings)
    storage = SQLiteQuoteStorage(store_path)

    quote_service = QuoteService(
        storage=storage,
        audit_logger=AuditLogger(),
    )

    return quote_service, storage
