"""Tests for completion percentage and section gating."""

import math

import pytest

from savesmart.forms.navigation import can_go_next, can_go_previous, is_section_valid
from savesmart.forms.progress import (
    ProgressIndicator,
    calculate_completion_percentage,
    satisfied_groups,
)
from savesmart.models.profile import (
    BudgetGoal,
    BudgetProfile,
    ExpenseData,
    FormState,
    IncomeData,
    IncomeSource,
)


def make_state(sources=None, selected=None, custom=None, goals=None, current_section=0):
    return FormState(
        current_section=current_section,
        data=BudgetProfile(
            income=IncomeData(sources=sources or []),
            expenses=ExpenseData(
                selected_categories=selected or [],
                custom_categories=custom or [],
            ),
            goals=goals or [],
        ),
    )


VALID_SOURCE = IncomeSource(id="1", name="Salary", amount=5000, frequency="monthly")
VALID_GOAL = BudgetGoal(id="1", description="Emergency Fund", target_amount=10000)


class TestCompletionPercentage:
    """Tests for calculate_completion_percentage."""

    def test_empty_form_is_zero(self):
        """Test an empty form is 0%."""
        assert calculate_completion_percentage(make_state()) == 0

    @pytest.mark.parametrize("state", [
        make_state(sources=[VALID_SOURCE]),
        make_state(selected=["Housing"]),
        make_state(custom=["Pets"]),
        make_state(goals=[VALID_GOAL]),
    ])
    def test_one_group_is_33(self, state):
        """Test any single satisfied group gives 33%."""
        assert calculate_completion_percentage(state) == 33

    def test_two_groups_is_67(self):
        """Test two satisfied groups round up to 67%."""
        state = make_state(sources=[VALID_SOURCE], selected=["Housing", "Food"])
        assert calculate_completion_percentage(state) == 67

    def test_all_groups_is_100(self):
        """Test all three groups give 100%."""
        state = make_state(sources=[VALID_SOURCE], custom=["Pets"], goals=[VALID_GOAL])
        assert calculate_completion_percentage(state) == 100

    @pytest.mark.parametrize("amount", [0, -10, math.nan])
    def test_income_without_positive_amount_never_counts(self, amount):
        """Test sources with zero, negative or NaN amounts don't count."""
        source = IncomeSource(id="1", name="Salary", amount=amount)
        assert calculate_completion_percentage(make_state(sources=[source])) == 0

    def test_income_with_blank_name_never_counts(self):
        """Test sources with a whitespace-only name don't count."""
        source = IncomeSource(id="1", name="   ", amount=5000)
        assert calculate_completion_percentage(make_state(sources=[source])) == 0

    def test_income_without_frequency_never_counts(self):
        """Test sources without a frequency don't count."""
        source = IncomeSource(id="1", name="Salary", amount=5000, frequency=None)
        assert calculate_completion_percentage(make_state(sources=[source])) == 0

    def test_goal_with_whitespace_description_never_counts(self):
        """Test goals with a whitespace-only description don't count."""
        goal = BudgetGoal(id="1", description="  ", target_amount=10000)
        assert calculate_completion_percentage(make_state(goals=[goal])) == 0

    def test_goal_with_zero_target_never_counts(self):
        """Test goals with a zero target don't count."""
        goal = BudgetGoal(id="1", description="Car", target_amount=0)
        assert calculate_completion_percentage(make_state(goals=[goal])) == 0

    def test_any_valid_item_satisfies_group(self):
        """Test one valid item among invalid ones satisfies the group."""
        sources = [IncomeSource(id="1", name="", amount=0), VALID_SOURCE]
        assert calculate_completion_percentage(make_state(sources=sources)) == 33

    def test_many_items_count_once(self):
        """Test several valid items in one group count only once."""
        sources = [VALID_SOURCE, IncomeSource(id="2", name="Freelance", amount=300)]
        goals = [VALID_GOAL, BudgetGoal(id="2", description="Car", target_amount=1)]
        assert calculate_completion_percentage(make_state(sources=sources, goals=goals)) == 67

    def test_satisfied_groups_order(self):
        """Test satisfied groups are reported in fixed order."""
        state = make_state(goals=[VALID_GOAL], sources=[VALID_SOURCE])
        assert satisfied_groups(state) == ["income", "goals"]


class TestProgressIndicator:
    """Tests for the progress view."""

    def test_aria_attributes(self):
        """Test progressbar attributes reflect the percentage."""
        indicator = ProgressIndicator(make_state(selected=["Food"]))
        assert indicator.percentage == 33
        assert indicator.aria["role"] == "progressbar"
        assert indicator.aria["aria-valuenow"] == "33"
        assert indicator.aria["aria-label"] == "33% complete"

    def test_render_html(self):
        """Test the rendered bar width matches the percentage."""
        html = ProgressIndicator(make_state(selected=["Food"], goals=[VALID_GOAL])).render_html()
        assert "Profile Completion" in html
        assert "width: 67%" in html
        assert 'aria-valuemax="100"' in html


class TestSectionGating:
    """Tests for section validity and navigation gates."""

    def test_review_always_valid(self):
        """Test the review section is always valid."""
        assert is_section_valid("review", make_state()) is True

    def test_unknown_section_invalid(self):
        """Test unknown section ids are never valid."""
        assert is_section_valid("extras", make_state(sources=[VALID_SOURCE])) is False

    def test_cannot_go_next_from_incomplete_section(self):
        """Test Next is disabled while the current section is incomplete."""
        assert can_go_next(make_state()) is False
        assert can_go_next(make_state(sources=[VALID_SOURCE])) is True

    def test_cannot_go_next_from_last_section(self):
        """Test Next is disabled on the review section."""
        assert can_go_next(make_state(current_section=3)) is False

    def test_previous_disabled_on_first_section(self):
        """Test Previous is only disabled on the first section."""
        assert can_go_previous(make_state()) is False
        assert can_go_previous(make_state(current_section=2)) is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
