"""
Income Source Input Binding

Holds the draft of one income source while the user types. Every change
re-validates the name and amount and reports a sanitized partial update
to the owner of the form.

DESIGN DECISION: The amount is kept as the raw keystroke buffer. A
buffer that does not parse as a complete number (e.g. "12.") is never
reported upward; the previous amount stays with the parent until the
buffer parses again.
"""

import math
import re
from typing import Any, Callable, Optional, Union

from savesmart.forms.messages import ValidationMessage
from savesmart.models.profile import IncomeFrequency, IncomeSource
from savesmart.validation import ValidationEngine, validation_engine


PartialUpdate = dict[str, Any]

_NUMBER_LITERAL = re.compile(r"^[+-]?(\d+(\.\d+)?|\.\d+)([eE][+-]?\d+)?$")


def parse_amount(raw: str) -> float:
    """
    Parse an amount buffer strictly.

    Returns NaN unless the whole (trimmed) buffer is a number literal.
    """
    text = raw.strip()
    if not _NUMBER_LITERAL.match(text):
        return math.nan
    return float(text)


def _format_amount(amount: Optional[float]) -> str:
    if amount is None or math.isnan(amount):
        return ""
    if float(amount).is_integer():
        return str(int(amount))
    return repr(float(amount))


class IncomeSourceInput:
    """
    Draft state and validation for a single income source.

    Args:
        on_change: Called with a partial update after every change
        on_remove: Called with no arguments when the user removes this source
        source: Existing record to start from
        is_only: Whether this is the only source (hides the remove affordance)
        show_validation: Whether error messages are surfaced
        engine: Validation engine (the shared one by default)
    """

    def __init__(
        self,
        on_change: Callable[[PartialUpdate], None],
        on_remove: Callable[[], None],
        source: Optional[IncomeSource] = None,
        is_only: bool = False,
        show_validation: bool = True,
        engine: Optional[ValidationEngine] = None,
    ):
        self._on_change = on_change
        self._on_remove = on_remove
        self._engine = engine or validation_engine
        self.source_id = source.id if source else None
        self.is_only = is_only
        self._show_validation = show_validation

        self._name = source.name if source else ""
        self._amount = _format_amount(source.amount) if source else ""
        self._frequency = (
            source.frequency if source and source.frequency else IncomeFrequency.MONTHLY
        )

        self.name_error: Optional[str] = None
        self.amount_error: Optional[str] = None

        self._recompute()

    # Draft fields

    @property
    def name(self) -> str:
        return self._name

    @property
    def amount(self) -> str:
        return self._amount

    @property
    def frequency(self) -> IncomeFrequency:
        return self._frequency

    @property
    def show_validation(self) -> bool:
        return self._show_validation

    def set_name(self, value: str) -> None:
        self._name = value
        self._recompute()

    def set_amount(self, value: str) -> None:
        self._amount = value
        self._recompute()

    def set_frequency(self, value: Union[IncomeFrequency, str]) -> None:
        self._frequency = IncomeFrequency(value)
        self._recompute()

    def set_show_validation(self, value: bool) -> None:
        self._show_validation = value
        self._recompute()

    # Removal

    @property
    def show_remove(self) -> bool:
        return not self.is_only

    def remove(self) -> None:
        self._on_remove()

    # Validation and upward notification

    def _recompute(self) -> None:
        name_result = self._engine.validate("income.name", self._name)
        self.name_error = (
            name_result.error if self._show_validation and not name_result.is_valid else None
        )

        amount_value = parse_amount(self._amount)
        amount_result = self._engine.validate("income.amount", amount_value)
        self.amount_error = (
            amount_result.error if self._show_validation and not amount_result.is_valid else None
        )

        update: PartialUpdate = {
            "name": self._name.strip(),
            "frequency": self._frequency,
        }
        if not math.isnan(amount_value):
            update["amount"] = amount_value

        self._on_change(update)

    # Accessibility

    def element_id(self, field: str) -> str:
        """Id of the input for 'name', 'amount' or 'frequency'."""
        return f"income-{field}-{self.source_id}"

    def error_id(self, field: str) -> str:
        return f"income-{field}-error-{self.source_id}"

    def describedby(self, field: str) -> Optional[str]:
        """The error id while that field's error is shown, else None."""
        error = {"name": self.name_error, "amount": self.amount_error}.get(field)
        return self.error_id(field) if error else None

    def name_message(self) -> ValidationMessage:
        return ValidationMessage(self.name_error, id=self.error_id("name"))

    def amount_message(self) -> ValidationMessage:
        return ValidationMessage(self.amount_error, id=self.error_id("amount"))
