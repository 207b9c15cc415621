"""
Core Data Models for the SaveSmart Budget Profile

These models define the schemas for everything the onboarding form holds:
income sources, expense categories, goals, and the runtime form state.

DESIGN DECISION: Draft records are deliberately lenient. While the user is
typing, an income amount can be zero, negative or NaN and a name can be
blank. Completeness is a property computed from the record, never a
constraint enforced on construction.
"""

import math
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class IncomeFrequency(str, Enum):
    """How often an income source pays out."""
    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    MONTHLY = "monthly"
    ANNUAL = "annual"


class ValidationErrorKind(str, Enum):
    """
    Kinds of validation failure a field can report.

    These are always presented inline next to the field. None of them is
    ever raised or logged.
    """
    EMPTY_FIELD = "empty_field"
    NON_POSITIVE_AMOUNT = "non_positive_amount"
    INVALID_FREQUENCY = "invalid_frequency"


# Monthly conversion factors per frequency
_MONTHLY_FACTORS: dict[IncomeFrequency, float] = {
    IncomeFrequency.WEEKLY: 52 / 12,
    IncomeFrequency.BI_WEEKLY: 26 / 12,
    IncomeFrequency.MONTHLY: 1.0,
    IncomeFrequency.ANNUAL: 1 / 12,
}


def _is_positive(value: Any) -> bool:
    """True for a real number greater than zero (NaN and bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value) and value > 0


def _coerce_missing_amount(v: Any) -> Any:
    # JSON has no NaN; drafts serialize an unparsed amount as null
    return math.nan if v is None else v


# =============================================================================
# PROFILE RECORDS
# =============================================================================

class IncomeSource(BaseModel):
    """
    A single income source with amount and frequency.

    `id` is None until the form controller assigns one.
    """

    id: Optional[str] = None
    name: str = ""
    amount: float = Field(
        default=math.nan,
        description="Amount per frequency period (NaN while not yet parseable)"
    )
    frequency: Optional[IncomeFrequency] = Field(
        default=IncomeFrequency.MONTHLY,
        description="Pay frequency"
    )

    @field_validator('amount', mode='before')
    @classmethod
    def restore_nan(cls, v: Any) -> Any:
        return _coerce_missing_amount(v)

    @property
    def is_complete(self) -> bool:
        """Named, positive and with a frequency set."""
        return (
            len(self.name.strip()) > 0
            and _is_positive(self.amount)
            and self.frequency is not None
        )

    def monthly_amount(self) -> float:
        """
        Normalize the amount to a monthly figure.

        Sources without a usable amount contribute nothing.
        """
        if math.isnan(self.amount):
            return 0.0
        factor = _MONTHLY_FACTORS.get(self.frequency, 1.0)
        return self.amount * factor


class BudgetGoal(BaseModel):
    """A financial goal with target amount and optional timeline."""

    id: Optional[str] = None
    description: str = ""
    target_amount: float = 0.0
    target_date: Optional[date] = None
    timeframe: Optional[str] = None

    @field_validator('target_amount', mode='before')
    @classmethod
    def restore_nan(cls, v: Any) -> Any:
        return _coerce_missing_amount(v)

    @property
    def is_complete(self) -> bool:
        return len(self.description.strip()) > 0 and _is_positive(self.target_amount)


class ExpenseData(BaseModel):
    """Predefined and user-defined expense categories."""

    selected_categories: list[str] = Field(default_factory=list)
    custom_categories: list[str] = Field(default_factory=list)

    @property
    def has_any(self) -> bool:
        return bool(self.selected_categories) or bool(self.custom_categories)


class IncomeData(BaseModel):
    """All income sources plus their monthly total."""

    sources: list[IncomeSource] = Field(default_factory=list)
    total_monthly: float = Field(
        default=0.0,
        description="Calculated field: sum of sources normalized to monthly"
    )


class ProfileMetadata(BaseModel):
    completion_percentage: int = Field(default=0, ge=0, le=100)
    last_section: str = "income"


class BudgetProfile(BaseModel):
    """Complete budget profile data structure."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    income: IncomeData = Field(default_factory=IncomeData)
    expenses: ExpenseData = Field(default_factory=ExpenseData)
    goals: list[BudgetGoal] = Field(default_factory=list)
    metadata: ProfileMetadata = Field(default_factory=ProfileMetadata)


# =============================================================================
# FORM STATE
# =============================================================================

class Section(BaseModel):
    """A section in the form flow."""

    id: str
    title: str
    is_complete: bool = False
    is_valid: bool = False


def default_sections() -> list[Section]:
    return [
        Section(id="income", title="Income Information"),
        Section(id="expenses", title="Expense Categories"),
        Section(id="goals", title="Financial Goals"),
        Section(id="review", title="Review & Submit"),
    ]


class FormState(BaseModel):
    """
    Runtime form state.

    Owned by the form controller; everything else only reads it.
    """

    current_section: int = 0
    sections: list[Section] = Field(default_factory=default_sections)
    data: BudgetProfile = Field(default_factory=BudgetProfile)
    errors: dict[str, list[str]] = Field(default_factory=dict)
    is_dirty: bool = False
    is_submitting: bool = False


class ValidationResult(BaseModel):
    """
    Result of a single field validation.

    Ephemeral: recomputed on every relevant change, never persisted.
    """
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error: Optional[str] = None
    kind: Optional[ValidationErrorKind] = None
