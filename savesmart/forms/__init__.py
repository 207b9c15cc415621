"""
Onboarding Form Package

Field bindings, inline messages, completion progress, section gating and
the controller that owns the form state.
"""

from savesmart.forms.controller import FormController, calculate_total_monthly
from savesmart.forms.income_input import IncomeSourceInput, parse_amount
from savesmart.forms.messages import RenderedMessage, ValidationMessage
from savesmart.forms.navigation import can_go_next, can_go_previous, is_section_valid
from savesmart.forms.progress import ProgressIndicator, calculate_completion_percentage

__all__ = [
    "FormController",
    "IncomeSourceInput",
    "ProgressIndicator",
    "RenderedMessage",
    "ValidationMessage",
    "calculate_completion_percentage",
    "calculate_total_monthly",
    "can_go_next",
    "can_go_previous",
    "is_section_valid",
    "parse_amount",
]
