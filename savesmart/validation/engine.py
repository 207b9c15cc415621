"""
Field Validation Engine

Centralized validation rules for every input of the budget-profile form.

Each rule maps a rule key (e.g. 'income.amount') to a pure check and the
message shown next to the field when the check fails.

IMPORTANT: Validation NEVER raises for bad user input and NEVER logs.
A failed check is returned as a ValidationResult and shown inline.
Asking for a rule that does not exist IS raised: that is a programming
error, not user input.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional

from savesmart.models.profile import (
    IncomeFrequency,
    ValidationErrorKind,
    ValidationResult,
)


class UnknownValidationRuleError(KeyError):
    """Raised when a rule key has no registered rule."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"No validation rule registered for '{field}'")


@dataclass(frozen=True)
class ValidationRule:
    """A field identifier, its check and the message shown on failure."""
    field: str
    validator: Callable[[Any], bool]
    message: str
    kind: ValidationErrorKind


# =============================================================================
# CHECKS
# =============================================================================

def is_positive_number(value: Any) -> bool:
    """A real number above zero. NaN, bools and strings all fail."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value) and value > 0


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def is_valid_frequency(value: Any) -> bool:
    if isinstance(value, IncomeFrequency):
        return True
    return value in {f.value for f in IncomeFrequency}


def default_rules() -> list[ValidationRule]:
    """Validation rules for all form fields."""
    return [
        # Income
        ValidationRule(
            field="income.amount",
            validator=is_positive_number,
            message="Income amount must be a positive number",
            kind=ValidationErrorKind.NON_POSITIVE_AMOUNT,
        ),
        ValidationRule(
            field="income.frequency",
            validator=is_valid_frequency,
            message="Please select a valid frequency",
            kind=ValidationErrorKind.INVALID_FREQUENCY,
        ),
        ValidationRule(
            field="income.name",
            validator=is_non_empty_string,
            message="Income source name cannot be empty",
            kind=ValidationErrorKind.EMPTY_FIELD,
        ),
        # Expenses
        ValidationRule(
            field="customCategory",
            validator=is_non_empty_string,
            message="Category name cannot be empty",
            kind=ValidationErrorKind.EMPTY_FIELD,
        ),
        # Goals
        ValidationRule(
            field="goal.targetAmount",
            validator=is_positive_number,
            message="Target amount must be a positive number",
            kind=ValidationErrorKind.NON_POSITIVE_AMOUNT,
        ),
        ValidationRule(
            field="goal.description",
            validator=is_non_empty_string,
            message="Goal description cannot be empty",
            kind=ValidationErrorKind.EMPTY_FIELD,
        ),
    ]


# Which rule keys belong to which form section
_SECTION_MEMBERSHIP: dict[str, Callable[[str], bool]] = {
    "income": lambda field: field.startswith("income."),
    "expenses": lambda field: field == "customCategory",
    "goals": lambda field: field.startswith("goal."),
}


class ValidationEngine:
    """
    Validates individual fields, whole sections, or the full set of
    stored field values.
    """

    def __init__(self, rules: Optional[list[ValidationRule]] = None):
        self._rules: dict[str, ValidationRule] = {
            rule.field: rule for rule in (rules if rules is not None else default_rules())
        }
        self._field_values: dict[str, Any] = {}

    @property
    def rule_keys(self) -> list[str]:
        return list(self._rules)

    def set_field_values(self, values: dict[str, Any]) -> None:
        """
        Set nested field values for section/whole-form validation.

        Values are looked up by the dotted rule key, e.g.
        {"income": {"amount": 10}} for 'income.amount'.
        """
        self._field_values = values

    def validate(self, field: str, value: Any) -> ValidationResult:
        """
        Validate a single value against the rule for `field`.

        Args:
            field: Rule key (e.g. 'income.amount', 'customCategory')
            value: Value to check

        Returns:
            ValidationResult with is_valid and, on failure, the message and kind

        Raises:
            UnknownValidationRuleError: If no rule is registered for `field`
        """
        rule = self._rules.get(field)
        if rule is None:
            raise UnknownValidationRuleError(field)

        if rule.validator(value):
            return ValidationResult(is_valid=True)
        return ValidationResult(is_valid=False, error=rule.message, kind=rule.kind)

    def validate_section(self, section: str) -> list[ValidationResult]:
        """
        Validate all stored field values belonging to a section.

        Args:
            section: 'income', 'expenses' or 'goals'

        Raises:
            ValueError: For any other section name
        """
        belongs = _SECTION_MEMBERSHIP.get(section)
        if belongs is None:
            raise ValueError(f"Unknown form section: {section}")

        return [
            self.validate(field, self._get_field_value(field))
            for field in self._rules
            if belongs(field)
        ]

    def is_valid(self) -> bool:
        """Check if every stored field value passes its rule."""
        return all(
            self.validate(field, self._get_field_value(field)).is_valid
            for field in self._rules
        )

    def _get_field_value(self, field: str) -> Any:
        value: Any = self._field_values
        for part in field.split("."):
            if not isinstance(value, dict):
                return None
            value = value.get(part)
        return value

    # Generic checks, usable without a rule key

    def validate_required(self, value: Any) -> ValidationResult:
        is_empty = value is None or (isinstance(value, str) and len(value.strip()) == 0)
        if is_empty:
            return ValidationResult(
                is_valid=False,
                error="This field is required",
                kind=ValidationErrorKind.EMPTY_FIELD,
            )
        return ValidationResult(is_valid=True)

    def validate_positive_number(self, value: Any) -> ValidationResult:
        if is_positive_number(value):
            return ValidationResult(is_valid=True)
        return ValidationResult(
            is_valid=False,
            error="Value must be a positive number",
            kind=ValidationErrorKind.NON_POSITIVE_AMOUNT,
        )

    def validate_non_empty_string(self, value: Any) -> ValidationResult:
        if is_non_empty_string(value):
            return ValidationResult(is_valid=True)
        return ValidationResult(
            is_valid=False,
            error="Value cannot be empty",
            kind=ValidationErrorKind.EMPTY_FIELD,
        )


# Shared engine for the form components
validation_engine = ValidationEngine()
