"""
Audit Models for the SaveSmart Onboarding Form

Lifecycle events of the budget-profile form are logged for audit purposes:
drafts loaded and saved, sections changed, submissions, storage failures.

DESIGN DECISION: Field validation failures are NOT audit events. They are
shown inline to the user and nowhere else.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class FormAuditEventType(str, Enum):
    """Types of form events we audit."""
    # Draft lifecycle
    DRAFT_LOADED = "draft_loaded"
    DRAFT_SAVED = "draft_saved"
    DRAFT_CLEARED = "draft_cleared"
    FORM_RESET = "form_reset"

    # Navigation
    SECTION_CHANGED = "section_changed"

    # Submission
    SUBMISSION_STARTED = "submission_started"
    SUBMISSION_FINISHED = "submission_finished"

    # Storage
    STORAGE_UNAVAILABLE = "storage_unavailable"
    STORAGE_FAILED = "storage_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class FormAuditEvent(BaseModel):
    """A single audit event of the onboarding form."""

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    event_type: FormAuditEventType
    severity: AuditSeverity = AuditSeverity.INFO

    # The draft/profile this is about
    profile_id: Optional[str] = None
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate events of one onboarding session"
    )

    description: str = Field(..., max_length=500)
    details: dict[str, Any] = Field(default_factory=dict)
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """Convert to a dictionary suitable for structured logging."""
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "profile_id": self.profile_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class FormAuditEventBuilder:
    """
    Helper class to build form audit events with common patterns.

    Usage:
        event = FormAuditEventBuilder.section_changed(profile_id, 0, 1, correlation_id)
    """

    @staticmethod
    def draft_loaded(
        profile_id: str,
        key: str,
        correlation_id: Optional[UUID] = None,
    ) -> FormAuditEvent:
        return FormAuditEvent(
            event_type=FormAuditEventType.DRAFT_LOADED,
            profile_id=profile_id,
            correlation_id=correlation_id,
            description=f"Restored saved draft '{key}'",
            details={"key": key},
        )

    @staticmethod
    def draft_saved(
        profile_id: str,
        key: str,
        completion_percentage: int,
        correlation_id: Optional[UUID] = None,
    ) -> FormAuditEvent:
        return FormAuditEvent(
            event_type=FormAuditEventType.DRAFT_SAVED,
            severity=AuditSeverity.DEBUG,
            profile_id=profile_id,
            correlation_id=correlation_id,
            description=f"Draft saved at {completion_percentage}% completion",
            details={"key": key, "completion_percentage": completion_percentage},
        )

    @staticmethod
    def draft_cleared(
        profile_id: str,
        key: str,
        correlation_id: Optional[UUID] = None,
    ) -> FormAuditEvent:
        return FormAuditEvent(
            event_type=FormAuditEventType.DRAFT_CLEARED,
            profile_id=profile_id,
            correlation_id=correlation_id,
            description=f"Cleared saved draft '{key}'",
            details={"key": key},
        )

    @staticmethod
    def form_reset(
        profile_id: str,
        correlation_id: Optional[UUID] = None,
    ) -> FormAuditEvent:
        return FormAuditEvent(
            event_type=FormAuditEventType.FORM_RESET,
            profile_id=profile_id,
            correlation_id=correlation_id,
            description="Form reset to defaults",
        )

    @staticmethod
    def section_changed(
        profile_id: str,
        from_section: str,
        to_section: str,
        correlation_id: Optional[UUID] = None,
    ) -> FormAuditEvent:
        return FormAuditEvent(
            event_type=FormAuditEventType.SECTION_CHANGED,
            profile_id=profile_id,
            correlation_id=correlation_id,
            description=f"Moved from '{from_section}' to '{to_section}'",
            details={"from": from_section, "to": to_section},
        )

    @staticmethod
    def submission_started(
        profile_id: str,
        correlation_id: Optional[UUID] = None,
    ) -> FormAuditEvent:
        return FormAuditEvent(
            event_type=FormAuditEventType.SUBMISSION_STARTED,
            profile_id=profile_id,
            correlation_id=correlation_id,
            description="Profile submission started",
        )

    @staticmethod
    def submission_finished(
        profile_id: str,
        correlation_id: Optional[UUID] = None,
    ) -> FormAuditEvent:
        return FormAuditEvent(
            event_type=FormAuditEventType.SUBMISSION_FINISHED,
            profile_id=profile_id,
            correlation_id=correlation_id,
            description="Profile submission finished",
        )

    @staticmethod
    def storage_unavailable(directory: str) -> FormAuditEvent:
        return FormAuditEvent(
            event_type=FormAuditEventType.STORAGE_UNAVAILABLE,
            severity=AuditSeverity.WARNING,
            description="Draft storage is not available; data will not be persisted",
            details={"directory": directory},
        )

    @staticmethod
    def storage_failed(
        operation: str,
        key: str,
        error_message: str,
    ) -> FormAuditEvent:
        return FormAuditEvent(
            event_type=FormAuditEventType.STORAGE_FAILED,
            severity=AuditSeverity.ERROR,
            description=f"Draft storage {operation} failed",
            details={"operation": operation, "key": key},
            error_message=error_message,
        )
