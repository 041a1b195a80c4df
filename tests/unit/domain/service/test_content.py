"""Unit tests for plain-text content handling."""

import pytest

from comet.domain.error import ValidationError
from comet.domain.service.content import (
    normalize_newlines,
    plain_text_to_html,
    require_text,
)


class TestPlainTextToHtml:
    """Tests for escaping user text."""

    def test_escapes_markup(self):
        result = plain_text_to_html("<script>alert(\"x\")</script> & 'y'")

        assert result == (
            "&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt; &amp; &#39;y&#39;"
        )

    def test_apostrophe_uses_decimal_entity(self):
        assert plain_text_to_html("it's") == "it&#39;s"

    def test_converts_newlines_to_line_breaks(self):
        assert plain_text_to_html("a\nb\r\nc\rd") == "a<br>b<br>c<br>d"

    def test_empty_input(self):
        assert plain_text_to_html("") == ""
        assert plain_text_to_html(None) == ""


class TestRequireText:
    """Tests for required text fields."""

    def test_trims_surrounding_whitespace(self):
        assert require_text("  hello \n", "Comment content") == "hello"

    @pytest.mark.parametrize("value", ["", "   ", "\n\t", None])
    def test_rejects_blank_values(self, value):
        with pytest.raises(ValidationError, match="Comment content"):
            require_text(value, "Comment content")


def test_normalize_newlines():
    assert normalize_newlines("x\r\ny\rz") == "x\ny\nz"
