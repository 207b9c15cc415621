"""
Data Models Package

This package contains all Pydantic models used by the SaveSmart onboarding form.
"""

from savesmart.models.profile import (
    BudgetGoal,
    BudgetProfile,
    ExpenseData,
    FormState,
    IncomeData,
    IncomeFrequency,
    IncomeSource,
    ProfileMetadata,
    Section,
    ValidationErrorKind,
    ValidationResult,
    default_sections,
)
from savesmart.models.audit import (
    FormAuditEvent,
    FormAuditEventBuilder,
    FormAuditEventType,
    AuditSeverity,
)

__all__ = [
    # Profile models
    "BudgetGoal",
    "BudgetProfile",
    "ExpenseData",
    "FormState",
    "IncomeData",
    "IncomeFrequency",
    "IncomeSource",
    "ProfileMetadata",
    "Section",
    "ValidationErrorKind",
    "ValidationResult",
    "default_sections",
    # Audit models
    "FormAuditEvent",
    "FormAuditEventBuilder",
    "FormAuditEventType",
    "AuditSeverity",
]
