"""
Inline Validation Messages

Renders zero, one or many error strings as a single accessible alert
region. One message renders as plain text, two or more as a list.
"""

from html import escape
from typing import Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict


MessageInput = Union[str, Sequence[str], None]


class RenderedMessage(BaseModel):
    """An alert region ready to be shown next to a field."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    messages: tuple[str, ...]
    role: str = "alert"
    aria_live: str = "polite"
    aria_atomic: bool = True

    @property
    def as_list(self) -> bool:
        return len(self.messages) > 1

    def to_html(self) -> str:
        id_attr = f' id="{escape(self.id)}"' if self.id else ""
        open_tag = (
            f'<div{id_attr} class="validation-message" role="{self.role}" '
            f'aria-live="{self.aria_live}" aria-atomic="{str(self.aria_atomic).lower()}">'
        )
        if self.as_list:
            items = "".join(
                f'<li class="validation-message__item">{escape(msg)}</li>'
                for msg in self.messages
            )
            body = f'<ul class="validation-message__list">{items}</ul>'
        else:
            body = f'<span class="validation-message__text">{escape(self.messages[0])}</span>'
        return f"{open_tag}{body}</div>"


class ValidationMessage:
    """
    Error message(s) for one field.

    Args:
        message: A single message, a sequence of messages, or None
        id: Element id, referenced by the field's aria-describedby
        visible: Hide the message without discarding it
    """

    def __init__(
        self,
        message: MessageInput = None,
        id: Optional[str] = None,
        visible: bool = True,
    ):
        self.message = message
        self.id = id
        self.visible = visible

    @property
    def messages(self) -> list[str]:
        """Non-blank messages, in their original order."""
        if not self.message:
            return []
        raw = [self.message] if isinstance(self.message, str) else list(self.message)
        return [msg for msg in raw if msg and msg.strip()]

    def render(self) -> Optional[RenderedMessage]:
        """Return the alert region, or None when there is nothing to show."""
        if not self.visible:
            return None
        messages = self.messages
        if not messages:
            return None
        return RenderedMessage(id=self.id, messages=tuple(messages))

    def to_html(self) -> str:
        rendered = self.render()
        return rendered.to_html() if rendered else ""
