"""Audit logging package."""

from quoteit.audit.logger import AuditLogger, configure_logging

__all__ = ["AuditLogger", "configure_logging"]
