"""Field validation package."""

from savesmart.validation.engine import (
    UnknownValidationRuleError,
    ValidationEngine,
    ValidationRule,
    default_rules,
    validation_engine,
)

__all__ = [
    "UnknownValidationRuleError",
    "ValidationEngine",
    "ValidationRule",
    "default_rules",
    "validation_engine",
]
