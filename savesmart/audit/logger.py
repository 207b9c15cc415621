"""
Audit Logger

Form lifecycle events (draft saved/loaded, section changes, submission,
storage failures) are written as structured JSON logs.

The audit logger:
- Is synchronous, like the rest of the form
- Only records events; it holds no form state
- Supports correlation IDs to trace one onboarding session
"""

import logging
from typing import Optional
from uuid import UUID, uuid4

import structlog

from savesmart.models.audit import (
    AuditSeverity,
    FormAuditEvent,
    FormAuditEventBuilder,
)


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


def configure_logging(level: str = "INFO") -> None:
    """Route stdlib logging (and so structlog) to stderr at `level`."""
    logging.basicConfig(format="%(message)s", level=getattr(logging, level, logging.INFO))


def get_logger(name: Optional[str] = None):
    return structlog.get_logger(name)


class FormAuditLogger:
    """Central audit logging service for the onboarding form."""

    def __init__(self, correlation_id: Optional[UUID] = None):
        """
        Initialize audit logger.

        Args:
            correlation_id: Session ID attached to every event that does
                            not carry its own.
        """
        self._correlation_id = correlation_id or create_correlation_id()
        self._logger = structlog.get_logger("savesmart.audit")

    @property
    def correlation_id(self) -> UUID:
        return self._correlation_id

    def log(self, event: FormAuditEvent) -> None:
        """Log an audit event at the level matching its severity."""
        if event.correlation_id is None:
            event = event.model_copy(update={"correlation_id": self._correlation_id})
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def log_draft_loaded(self, profile_id: str, key: str) -> None:
        self.log(FormAuditEventBuilder.draft_loaded(profile_id, key, self._correlation_id))

    def log_draft_saved(self, profile_id: str, key: str, completion_percentage: int) -> None:
        self.log(FormAuditEventBuilder.draft_saved(
            profile_id, key, completion_percentage, self._correlation_id
        ))

    def log_draft_cleared(self, profile_id: str, key: str) -> None:
        self.log(FormAuditEventBuilder.draft_cleared(profile_id, key, self._correlation_id))

    def log_form_reset(self, profile_id: str) -> None:
        self.log(FormAuditEventBuilder.form_reset(profile_id, self._correlation_id))

    def log_section_changed(self, profile_id: str, from_section: str, to_section: str) -> None:
        self.log(FormAuditEventBuilder.section_changed(
            profile_id, from_section, to_section, self._correlation_id
        ))

    def log_submission_started(self, profile_id: str) -> None:
        self.log(FormAuditEventBuilder.submission_started(profile_id, self._correlation_id))

    def log_submission_finished(self, profile_id: str) -> None:
        self.log(FormAuditEventBuilder.submission_finished(profile_id, self._correlation_id))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of an onboarding session and pass it through.
    """
    return uuid4()
