"""
Audit Logger

DESIGN DECISION: Every store write, query and failure is logged.
This provides:
1. Traceability of what each run did to the store
2. Debugging capability when a run fails

Audit events go to the local structured log only (stderr). They never
touch stdout, which carries quote output.
"""

import logging
import sys

import structlog

from quoteit.models.audit import AuditEvent, AuditEventBuilder


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "WARNING") -> None:
    """Route stdlib logging (and so structlog) to stderr at the given level."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
    )


class AuditLogger:
    """Central audit logging service."""

    def __init__(self):
        self._logger = structlog.get_logger("quoteit.audit")

    def log(self, event: AuditEvent) -> None:
        """Log an audit event at the level matching its severity."""
        log_dict = event.to_log_dict()

        if event.severity.value == "error":
            self._logger.error("audit_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def log_quote_added(self, has_author: bool, has_date: bool) -> None:
        """Log a quote insert."""
        self.log(AuditEventBuilder.quote_added(
            has_author=has_author,
            has_date=has_date,
        ))

    def log_quotes_listed(self, query_description: str, result_count: int) -> None:
        """Log a completed list query."""
        self.log(AuditEventBuilder.quotes_listed(
            query_description=query_description,
            result_count=result_count,
        ))

    def log_usage_error(self, error_message: str) -> None:
        self.log(AuditEventBuilder.usage_error(error_message))

    def log_storage_error(self, error_type: str, error_message: str) -> None:
        self.log(AuditEventBuilder.storage_error(
            error_type=error_type,
            error_message=error_message,
        ))

    def log_environment_error(self, error_message: str) -> None:
        self.log(AuditEventBuilder.environment_error(error_message))
