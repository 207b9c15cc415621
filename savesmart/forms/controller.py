"""
Form Controller

Owns the budget-profile FormState and every operation that changes it:
income sources, expense categories, goals, section navigation, field
errors and the submission flag.

Flow of one change:
1. Mutate the state
2. Recompute derived values (total monthly income, section flags)
3. Auto-save the draft if the state is dirty and not submitting
4. Notify subscribers

DESIGN DECISION: Everything here is synchronous. A change is fully
applied, saved and announced before the method returns.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Literal, Optional, Union
from uuid import uuid4

from savesmart.audit import FormAuditLogger
from savesmart.config import get_settings
from savesmart.forms.navigation import can_go_next, can_go_previous, is_section_valid
from savesmart.forms.progress import calculate_completion_percentage
from savesmart.models.profile import (
    BudgetGoal,
    BudgetProfile,
    FormState,
    IncomeSource,
    ProfileMetadata,
)
from savesmart.storage import FormStorageInterface


Subscriber = Callable[[FormState], None]


def generate_id() -> str:
    return f"{int(datetime.now(timezone.utc).timestamp() * 1000)}-{uuid4().hex[:9]}"


def calculate_total_monthly(sources: list[IncomeSource]) -> float:
    """Sum of all sources normalized to a monthly amount."""
    return sum(source.monthly_amount() for source in sources)


class FormController:
    """
    Manages all form state and provides methods to update it.

    Args:
        storage: Draft storage. If None, nothing is persisted.
        audit_logger: Audit logger for lifecycle events
        initial_data: Profile to start from when no draft is stored
        draft_key: Storage key of the draft (settings default if None)
        autosave: Save after every change (settings default if None)
    """

    def __init__(
        self,
        storage: Optional[FormStorageInterface] = None,
        audit_logger: Optional[FormAuditLogger] = None,
        initial_data: Optional[BudgetProfile] = None,
        draft_key: Optional[str] = None,
        autosave: Optional[bool] = None,
    ):
        settings = get_settings().onboarding
        self._storage = storage
        self._audit = audit_logger or FormAuditLogger()
        self._draft_key = draft_key or settings.draft_key
        self._autosave = settings.autosave_enabled if autosave is None else autosave
        self._subscribers: list[Subscriber] = []
        self._initial_data = initial_data

        saved = self._storage.load(self._draft_key) if self._storage else None
        if saved is not None:
            # Always reset submitting state on load
            saved.is_submitting = False
            self._state = saved
            self._audit.log_draft_loaded(saved.data.id, self._draft_key)
        else:
            self._state = self._default_state()
        self._refresh_derived()

    def _default_state(self) -> FormState:
        data = self._initial_data.model_copy(deep=True) if self._initial_data else BudgetProfile()
        return FormState(data=data)

    # =========================================================================
    # STATE ACCESS
    # =========================================================================

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def current_section_id(self) -> str:
        return self._state.sections[self._state.current_section].id

    @property
    def completion_percentage(self) -> int:
        return calculate_completion_percentage(self._state)

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """
        Register a callable invoked with the state after every change.

        Returns:
            A function that unregisters the subscriber
        """
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    def _refresh_derived(self) -> None:
        income = self._state.data.income
        income.total_monthly = calculate_total_monthly(income.sources)
        for section in self._state.sections:
            section.is_valid = is_section_valid(section.id, self._state)
            section.is_complete = section.is_valid

    def _changed(self, dirty: bool = True) -> None:
        if dirty:
            self._state.is_dirty = True
            self._state.data.updated_at = datetime.now(timezone.utc)
        self._refresh_derived()

        if (
            self._autosave
            and self._storage is not None
            and self._state.is_dirty
            and not self._state.is_submitting
        ):
            self._storage.save(self._draft_key, self._state)
            self._audit.log_draft_saved(
                self._state.data.id, self._draft_key, self.completion_percentage
            )

        for subscriber in list(self._subscribers):
            subscriber(self._state)

    # =========================================================================
    # INCOME
    # =========================================================================

    def add_income_source(self, source: Union[IncomeSource, dict[str, Any], None] = None) -> str:
        """Append an income source and return its newly assigned id."""
        fields = self._as_dict(source)
        fields["id"] = generate_id()
        new_source = IncomeSource.model_validate(fields)
        self._state.data.income.sources.append(new_source)
        self._changed()
        return new_source.id

    def update_income_source(self, source_id: str, data: dict[str, Any]) -> None:
        """Merge a partial update into the source with `source_id` (ignored if absent)."""
        sources = self._state.data.income.sources
        for index, source in enumerate(sources):
            if source.id == source_id:
                merged = {**source.model_dump(), **data, "id": source_id}
                sources[index] = IncomeSource.model_validate(merged)
        self._changed()

    def remove_income_source(self, source_id: str) -> None:
        income = self._state.data.income
        income.sources = [s for s in income.sources if s.id != source_id]
        self._changed()

    # =========================================================================
    # EXPENSES
    # =========================================================================

    def toggle_expense_category(self, category: str) -> None:
        expenses = self._state.data.expenses
        if category in expenses.selected_categories:
            expenses.selected_categories = [
                c for c in expenses.selected_categories if c != category
            ]
        else:
            expenses.selected_categories = [*expenses.selected_categories, category]
        self._changed()

    def add_custom_category(self, category: str) -> bool:
        """
        Add a user-defined category.

        Returns:
            False (and changes nothing) for a blank or duplicate category
        """
        name = category.strip()
        expenses = self._state.data.expenses
        if not name or name in expenses.custom_categories:
            return False
        expenses.custom_categories = [*expenses.custom_categories, name]
        self._changed()
        return True

    def remove_custom_category(self, category: str) -> None:
        expenses = self._state.data.expenses
        expenses.custom_categories = [c for c in expenses.custom_categories if c != category]
        self._changed()

    # =========================================================================
    # GOALS
    # =========================================================================

    def add_goal(self, goal: Union[BudgetGoal, dict[str, Any], None] = None) -> str:
        fields = self._as_dict(goal)
        fields["id"] = generate_id()
        new_goal = BudgetGoal.model_validate(fields)
        self._state.data.goals.append(new_goal)
        self._changed()
        return new_goal.id

    def update_goal(self, goal_id: str, data: dict[str, Any]) -> None:
        """Merge a partial update into a goal. Updates that change nothing are not saved."""
        goals = self._state.data.goals
        changed = False
        for index, goal in enumerate(goals):
            if goal.id == goal_id:
                updated = BudgetGoal.model_validate(
                    {**goal.model_dump(), **data, "id": goal_id}
                )
                if updated != goal:
                    goals[index] = updated
                    changed = True
        if changed:
            self._changed()

    def remove_goal(self, goal_id: str) -> None:
        self._state.data.goals = [g for g in self._state.data.goals if g.id != goal_id]
        self._changed()

    # =========================================================================
    # NAVIGATION
    # =========================================================================

    def go_to_section(self, section_index: int) -> bool:
        """Jump to a section. Out-of-range indexes are ignored."""
        if section_index < 0 or section_index >= len(self._state.sections):
            return False
        previous = self.current_section_id
        self._state.current_section = section_index
        self._audit.log_section_changed(self._state.data.id, previous, self.current_section_id)
        self._changed()
        return True

    def next_section(self) -> bool:
        return self.go_to_section(self._state.current_section + 1)

    def previous_section(self) -> bool:
        return self.go_to_section(self._state.current_section - 1)

    def can_go_next(self) -> bool:
        return can_go_next(self._state)

    def can_go_previous(self) -> bool:
        return can_go_previous(self._state)

    def navigate(self, direction: Literal["previous", "next"]) -> bool:
        """
        Move one section if the gate allows it.

        Returns:
            True if the current section changed
        """
        if direction == "next":
            return self.can_go_next() and self.next_section()
        if direction == "previous":
            return self.can_go_previous() and self.previous_section()
        raise ValueError(f"Unknown navigation direction: {direction}")

    # =========================================================================
    # FORM CONTROL
    # =========================================================================

    def set_error(self, field: str, error: str) -> None:
        field_errors = self._state.errors.get(field, [])
        if error in field_errors:
            return
        self._state.errors[field] = [*field_errors, error]
        self._changed(dirty=False)

    def clear_error(self, field: str) -> None:
        if self._state.errors.pop(field, None) is not None:
            self._changed(dirty=False)

    def set_submitting(self, is_submitting: bool) -> None:
        """
        Flag the form as submitting.

        Finishing a submission (True -> False) clears the stored draft.
        """
        was_submitting = self._state.is_submitting
        self._state.is_submitting = is_submitting

        if is_submitting and not was_submitting:
            self._audit.log_submission_started(self._state.data.id)
        elif was_submitting and not is_submitting:
            # The submitted profile is no longer a draft
            self._state.is_dirty = False
            if self._storage is not None:
                self._storage.clear(self._draft_key)
                self._audit.log_draft_cleared(self._state.data.id, self._draft_key)
            self._audit.log_submission_finished(self._state.data.id)

        self._changed(dirty=False)

    def reset_form(self) -> None:
        profile_id = self._state.data.id
        self._state = self._default_state()
        if self._storage is not None:
            self._storage.clear(self._draft_key)
        self._audit.log_form_reset(profile_id)
        self._changed(dirty=False)

    def build_profile(self) -> BudgetProfile:
        """The profile as it would be submitted, with metadata filled in."""
        return self._state.data.model_copy(
            deep=True,
            update={
                "metadata": ProfileMetadata(
                    completion_percentage=self.completion_percentage,
                    last_section=self.current_section_id,
                )
            },
        )

    @staticmethod
    def _as_dict(record: Union[IncomeSource, BudgetGoal, dict[str, Any], None]) -> dict[str, Any]:
        if record is None:
            return {}
        if isinstance(record, dict):
            return dict(record)
        return record.model_dump()
