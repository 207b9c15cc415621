"""Audit logging package."""

from savesmart.audit.logger import (
    FormAuditLogger,
    configure_logging,
    create_correlation_id,
    get_logger,
)

__all__ = ["FormAuditLogger", "configure_logging", "create_correlation_id", "get_logger"]
