"""
Audit Models for quote-it

Every store write, every query and every failure produces one audit event.
Events are written to the local structured log only.

DESIGN DECISION: Audit events are append-only, like the quotes themselves.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Persistence
    QUOTE_ADDED = "quote_added"

    # Query operations
    QUOTES_LISTED = "quotes_listed"

    # Failures
    USAGE_ERROR = "usage_error"
    STORAGE_ERROR = "storage_error"
    ENVIRONMENT_ERROR = "environment_error"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    """

    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="When the event occurred (local time)"
    )
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )
    description: str = Field(
        ...,
        description="Human-readable description"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event details"
    )
    error_message: Optional[str] = Field(
        default=None,
        description="Error message if this is an error event"
    )

    def to_log_dict(self) -> dict[str, Any]:
        """Convert to dictionary for structured logging."""
        log_dict = {
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "description": self.description,
            "details": self.details,
        }
        if self.error_message:
            log_dict["error_message"] = self.error_message
        return log_dict


class AuditEventBuilder:
    """
    Helper class to build audit events with consistent structure.
    """

    @staticmethod
    def quote_added(
        has_author: bool,
        has_date: bool,
    ) -> AuditEvent:
        # The quote text stays out of the log on purpose.
        return AuditEvent(
            event_type=AuditEventType.QUOTE_ADDED,
            description="Quote added to the store",
            details={
                "has_author": has_author,
                "has_date": has_date,
            },
        )

    @staticmethod
    def quotes_listed(
        query_description: str,
        result_count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.QUOTES_LISTED,
            description=f"Listed {result_count} quote(s)",
            details={
                "query": query_description,
                "result_count": result_count,
            },
        )

    @staticmethod
    def usage_error(error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.USAGE_ERROR,
            severity=AuditSeverity.WARNING,
            description="Invalid command usage",
            error_message=error_message,
        )

    @staticmethod
    def storage_error(
        error_type: str,
        error_message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORAGE_ERROR,
            severity=AuditSeverity.ERROR,
            description=f"Store operation failed: {error_type}",
            details={"error_type": error_type},
            error_message=error_message,
        )

    @staticmethod
    def environment_error(error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ENVIRONMENT_ERROR,
            severity=AuditSeverity.ERROR,
            description="Could not prepare the local store",
            error_message=error_message,
        )
