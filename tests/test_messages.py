"""Tests for inline validation messages."""

import pytest

from savesmart.forms.messages import ValidationMessage


class TestRendering:
    """Tests for what renders and what doesn't."""

    @pytest.mark.parametrize("message", [None, "", "   ", [], ["", "  ", "\t"]])
    def test_nothing_to_show(self, message):
        """Test absent, blank and all-blank messages render nothing."""
        assert ValidationMessage(message).render() is None
        assert ValidationMessage(message).to_html() == ""

    def test_hidden_message(self):
        """Test visible=False renders nothing."""
        assert ValidationMessage("Error", visible=False).render() is None

    def test_single_message(self):
        """Test a single message renders as plain text."""
        rendered = ValidationMessage("This field is required").render()
        assert rendered.messages == ("This field is required",)
        assert rendered.as_list is False
        assert '<span class="validation-message__text">This field is required</span>' in rendered.to_html()

    def test_multiple_messages_render_as_list(self):
        """Test two or more messages render as a list."""
        rendered = ValidationMessage(["This field is required", "Must be a positive number"]).render()
        assert rendered.as_list is True
        html = rendered.to_html()
        assert html.count("<li") == 2
        assert "<ul" in html

    def test_blank_entries_filtered_in_order(self):
        """Test blank entries are dropped and order is kept."""
        rendered = ValidationMessage(["A", "", "B"]).render()
        assert rendered.messages == ("A", "B")
        html = rendered.to_html()
        assert html.index(">A<") < html.index(">B<")

    def test_single_survivor_renders_as_text(self):
        """Test a list with one non-blank entry renders as plain text."""
        rendered = ValidationMessage(["", "Only one"]).render()
        assert rendered.as_list is False


class TestAccessibility:
    """Tests for alert semantics."""

    def test_alert_attributes(self):
        """Test the region is a polite, atomic alert with the given id."""
        rendered = ValidationMessage("Error", id="income-name-error-1").render()
        assert rendered.role == "alert"
        assert rendered.aria_live == "polite"
        assert rendered.aria_atomic is True
        html = rendered.to_html()
        assert 'id="income-name-error-1"' in html
        assert 'role="alert"' in html
        assert 'aria-atomic="true"' in html

    def test_no_id_attribute_without_id(self):
        """Test no id attribute is emitted when none is given."""
        assert "id=" not in ValidationMessage("Error").to_html()

    def test_text_is_escaped(self):
        """Test message text is HTML-escaped."""
        html = ValidationMessage("<b>bad</b>").to_html()
        assert "&lt;b&gt;bad&lt;/b&gt;" in html


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
