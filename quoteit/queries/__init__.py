"""Query building and execution package."""

from quoteit.queries.filters import (
    AndFilter,
    AtLeast,
    AtMost,
    Equals,
    QuoteFilter,
    build_filter,
    iter_predicates,
)
from quoteit.queries.executor import CREATE_HINT, QueryExecutor

__all__ = [
    "AndFilter",
    "AtLeast",
    "AtMost",
    "CREATE_HINT",
    "Equals",
    "QueryExecutor",
    "QuoteFilter",
    "build_filter",
    "iter_predicates",
]
