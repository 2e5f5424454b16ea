"""
Query Execution Engine

DESIGN DECISION: The executor only builds filters and hands them to
storage. It never filters in Python, so what is listed is exactly what
the store matched.

Order of operations is fixed:
1. Validate the date constraints (no store access on failure)
2. Build the filter
3. Run it and collect every match
"""

from quoteit.models.quote import QueryResult, QuoteQuery, format_date
from quoteit.queries.filters import build_filter
from quoteit.services.storage.interface import QuoteStorageInterface


CREATE_HINT = 'Add one with: quote-it "Your quote here"'


class QueryExecutor:
    """
    Executes list requests against quote storage.

    GUARANTEES:
    - Invalid requests never reach storage
    - Either every match is returned or the call raises
    - A clear "no quotes found" description if nothing matches
    """

    def __init__(self, storage: QuoteStorageInterface):
        self._storage = storage

    def execute(self, query: QuoteQuery) -> QueryResult:
        """
        Execute a list request and return the matching quotes.

        Raises:
            UsageError: If the date constraints are inconsistent
            StorageError: If the store fails
        """
        quote_filter = build_filter(query)
        quotes = self._storage.find(quote_filter)

        return QueryResult(
            data_found=len(quotes) > 0,
            result_count=len(quotes),
            quotes=quotes,
            query_description=self._describe(query, len(quotes)),
        )

    def _describe(self, query: QuoteQuery, result_count: int) -> str:
        """Build the description; with no matches this is the message shown to the user."""
        if result_count:
            return f"Found {result_count} quote(s)" + self._constraints_str(query)

        message = "No quotes found" + self._constraints_str(query)
        if not query.has_constraints:
            message += f". {CREATE_HINT}"
        return message

    def _constraints_str(self, query: QuoteQuery) -> str:
        """Echo back every active constraint, in a fixed order."""
        parts = []
        if query.author is not None:
            parts.append(f" by {query.author}")
        if query.on is not None:
            parts.append(f" on {format_date(query.on)}")
        if query.after is not None:
            parts.append(f" after {format_date(query.after)}")
        if query.after is not None and query.before is not None:
            parts.append(" and")
        if query.before is not None:
            parts.append(f" before {format_date(query.before)}")
        return "".join(parts)
