"""Tests for dispatcher models."""

import pytest
from pydantic import ValidationError

from directus_mcp._internal.dispatch import CallContext, ResponseEnvelope, TextBlock


class TestResponseEnvelope:
    """Tests for ResponseEnvelope."""

    def test_from_data_pretty_prints(self):
        """Should serialize data as two-space indented JSON."""
        envelope = ResponseEnvelope.from_data({"data": [{"id": 1}]})
        assert len(envelope.content) == 1
        assert envelope.content[0].type == "text"
        assert envelope.text == '{\n  "data": [\n    {\n      "id": 1\n    }\n  ]\n}'
        assert envelope.is_error is False

    def test_from_data_keeps_unicode(self):
        """Non-ASCII text should not be escaped."""
        assert ResponseEnvelope.from_data({"title": "Café"}).text == '{\n  "title": "Café"\n}'

    def test_from_error(self):
        """Should prefix the message with the error marker."""
        envelope = ResponseEnvelope.from_error("boom")
        assert envelope.text == "Error: boom"
        assert envelope.is_error is True

    def test_from_text(self):
        """Should wrap plain text in a single block."""
        envelope = ResponseEnvelope.from_text("Item deleted successfully")
        assert envelope.content == [TextBlock(text="Item deleted successfully")]


class TestCallContext:
    """Tests for CallContext."""

    def test_requires_url_and_token(self):
        """Should reject a context without a token."""
        with pytest.raises(ValidationError):
            CallContext(url="https://h")
