"""
Tests for SaveSmart Onboarding

Test strategy:
1. Unit tests for individual components (models, validation, inputs)
2. Controller tests against in-memory storage
3. No real filesystem outside pytest's tmp_path
"""

import math

import pytest

from savesmart.models.profile import (
    BudgetGoal,
    BudgetProfile,
    ExpenseData,
    FormState,
    IncomeFrequency,
    IncomeSource,
    ValidationResult,
)
from savesmart.models.audit import (
    AuditSeverity,
    FormAuditEvent,
    FormAuditEventBuilder,
    FormAuditEventType,
)


class TestProfileModels:
    """Tests for budget-profile Pydantic models."""

    def test_income_source_defaults(self):
        """Test a new income source is unassigned, monthly and empty."""
        source = IncomeSource()
        assert source.id is None
        assert source.name == ""
        assert math.isnan(source.amount)
        assert source.frequency == IncomeFrequency.MONTHLY

    def test_income_source_accepts_draft_values(self):
        """Test drafts may hold blank names and non-positive amounts."""
        source = IncomeSource(name="   ", amount=-5)
        assert source.amount == -5
        assert source.is_complete is False

    def test_income_source_complete(self):
        """Test a named, positive source is complete."""
        source = IncomeSource(name="Salary", amount=5000, frequency="monthly")
        assert source.is_complete is True

    def test_income_source_nan_amount_never_complete(self):
        """Test NaN amounts never count as positive."""
        source = IncomeSource(name="Salary", amount=math.nan)
        assert source.is_complete is False

    def test_income_source_restores_nan_from_null(self):
        """Test a serialized missing amount loads back as NaN."""
        source = IncomeSource.model_validate({"name": "Salary", "amount": None})
        assert math.isnan(source.amount)

    def test_income_source_without_frequency_not_complete(self):
        """Test a missing frequency keeps a source incomplete."""
        source = IncomeSource(name="Salary", amount=100, frequency=None)
        assert source.is_complete is False

    @pytest.mark.parametrize("frequency,expected", [
        (IncomeFrequency.WEEKLY, 1200 * 52 / 12),
        (IncomeFrequency.BI_WEEKLY, 1200 * 26 / 12),
        (IncomeFrequency.MONTHLY, 1200),
        (IncomeFrequency.ANNUAL, 100),
    ])
    def test_income_source_monthly_amount(self, frequency, expected):
        """Test amounts are normalized to monthly by frequency."""
        source = IncomeSource(name="Pay", amount=1200, frequency=frequency)
        assert source.monthly_amount() == pytest.approx(expected)

    def test_goal_whitespace_description_not_complete(self):
        """Test whitespace-only descriptions never complete a goal."""
        assert BudgetGoal(description="   ", target_amount=1000).is_complete is False
        assert BudgetGoal(description="Car", target_amount=1000).is_complete is True

    def test_expense_data_has_any(self):
        """Test either category list makes expenses non-empty."""
        assert ExpenseData().has_any is False
        assert ExpenseData(selected_categories=["Food"]).has_any is True
        assert ExpenseData(custom_categories=["Pets"]).has_any is True

    def test_form_state_defaults(self):
        """Test the default form state has four sections and no data."""
        state = FormState()
        assert [s.id for s in state.sections] == ["income", "expenses", "goals", "review"]
        assert state.current_section == 0
        assert state.data.income.sources == []
        assert state.is_dirty is False

    def test_profile_ids_are_unique(self):
        """Test each profile gets its own id."""
        assert BudgetProfile().id != BudgetProfile().id

    def test_validation_result_is_frozen(self):
        """Test validation results cannot be mutated."""
        result = ValidationResult(is_valid=True)
        with pytest.raises(ValueError):
            result.is_valid = False


class TestAuditModels:
    """Tests for form audit models."""

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = FormAuditEventBuilder.draft_saved("profile-1", "form-data", 67)
        log_dict = event.to_log_dict()
        assert log_dict["event_type"] == "draft_saved"
        assert log_dict["severity"] == "debug"
        assert log_dict["details"]["completion_percentage"] == 67
        assert log_dict["correlation_id"] is None

    def test_storage_failed_is_error(self):
        """Test storage failures carry error severity and message."""
        event = FormAuditEventBuilder.storage_failed("save", "form-data", "disk full")
        assert event.event_type == FormAuditEventType.STORAGE_FAILED
        assert event.severity == AuditSeverity.ERROR
        assert event.error_message == "disk full"

    def test_section_changed_details(self):
        """Test section change events record both sections."""
        event = FormAuditEventBuilder.section_changed("p", "income", "expenses")
        assert event.details == {"from": "income", "to": "expenses"}

    def test_description_length_limited(self):
        """Test overly long descriptions are rejected."""
        with pytest.raises(ValueError):
            FormAuditEvent(event_type=FormAuditEventType.FORM_RESET, description="x" * 501)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
