"""
Data Models Package

This package contains all Pydantic models used in quote-it.
Everything read from or written to the store must conform to these schemas.
"""

from quoteit.models.quote import (
    DATE_FORMAT,
    DATE_PATTERN,
    QueryResult,
    Quote,
    QuoteQuery,
    format_date,
)
from quoteit.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Quote models
    "DATE_FORMAT",
    "DATE_PATTERN",
    "QueryResult",
    "Quote",
    "QuoteQuery",
    "format_date",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
