"""
Profile Completion

Reduces the whole form state to a 0-100 completion score.

Required groups (each worth an equal share):
- Income: at least one source with a name, amount > 0 and a frequency
- Expenses: at least one category selected (predefined or custom)
- Goals: at least one goal with a description and target amount > 0

A group either counts or it does not; several valid items in one group
count once.
"""

import math
from html import escape

from savesmart.models.profile import FormState


REQUIRED_GROUPS = ("income", "expenses", "goals")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def has_valid_income(form_state: FormState) -> bool:
    return any(source.is_complete for source in form_state.data.income.sources)


def has_expenses(form_state: FormState) -> bool:
    return form_state.data.expenses.has_any


def has_valid_goal(form_state: FormState) -> bool:
    return any(goal.is_complete for goal in form_state.data.goals)


def satisfied_groups(form_state: FormState) -> list[str]:
    """Names of the required groups the form currently satisfies."""
    checks = {
        "income": has_valid_income,
        "expenses": has_expenses,
        "goals": has_valid_goal,
    }
    return [group for group in REQUIRED_GROUPS if checks[group](form_state)]


def calculate_completion_percentage(form_state: FormState) -> int:
    """
    Calculate the completion percentage of the form.

    Returns:
        One of 0, 33, 67 or 100
    """
    completed = len(satisfied_groups(form_state))
    return _round_half_up(completed / len(REQUIRED_GROUPS) * 100)


class ProgressIndicator:
    """Completion percentage plus the attributes of its progress bar."""

    label = "Profile Completion"

    def __init__(self, form_state: FormState):
        self.percentage = calculate_completion_percentage(form_state)

    @property
    def aria(self) -> dict[str, str]:
        return {
            "role": "progressbar",
            "aria-valuenow": str(self.percentage),
            "aria-valuemin": "0",
            "aria-valuemax": "100",
            "aria-label": f"{self.percentage}% complete",
        }

    def render_html(self) -> str:
        bar_attrs = " ".join(f'{key}="{escape(value)}"' for key, value in self.aria.items())
        return (
            '<div class="progress-indicator" role="region" aria-label="Form completion progress">'
            '<div class="progress-indicator__header">'
            f'<span class="progress-indicator__label">{escape(self.label)}</span>'
            f'<span class="progress-indicator__percentage" aria-live="polite">{self.percentage}%</span>'
            '</div>'
            f'<div class="progress-indicator__bar-container" {bar_attrs}>'
            f'<div class="progress-indicator__bar-fill" style="width: {self.percentage}%"></div>'
            '</div>'
            '</div>'
        )
