"""
Section Gating

Decides whether the user may move forward from a form section. Next is
enabled only when the current section's required fields are complete;
Previous is enabled everywhere except on the first section.
"""

from savesmart.forms.progress import has_expenses, has_valid_goal, has_valid_income
from savesmart.models.profile import FormState


def is_section_valid(section_id: str, form_state: FormState) -> bool:
    """
    Check if a section has all required fields completed and valid.

    The review section is always valid (it's just a summary).
    Unknown section ids are never valid.
    """
    if section_id == "income":
        return has_valid_income(form_state)
    if section_id == "expenses":
        return has_expenses(form_state)
    if section_id == "goals":
        return has_valid_goal(form_state)
    if section_id == "review":
        return True
    return False


def is_first_section(form_state: FormState) -> bool:
    return form_state.current_section == 0


def is_last_section(form_state: FormState) -> bool:
    return form_state.current_section == len(form_state.sections) - 1


def can_go_next(form_state: FormState) -> bool:
    current = form_state.sections[form_state.current_section]
    return is_section_valid(current.id, form_state) and not is_last_section(form_state)


def can_go_previous(form_state: FormState) -> bool:
    return not is_first_section(form_state)
