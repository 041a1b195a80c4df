"""Plain-text content handling.

Comments and report reasons are stored as HTML-safe text so the rendering
layer can insert them verbatim. Markup in user input is never interpreted.
"""

import html

from comet.domain.error import ValidationError

LINE_BREAK = "<br>"


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def plain_text_to_html(text: str | None) -> str:
    """Escape HTML special characters and turn newlines into ``<br>``.

    Args:
        text: Raw user input

    Returns:
        Escaped text, empty string for None
    """
    if not text:
        return ""
    escaped = html.escape(normalize_newlines(text), quote=True)
    return escaped.replace("&#x27;", "&#39;").replace("\n", LINE_BREAK)


def require_text(text: str | None, field: str) -> str:
    """Trim a required text field.

    Args:
        text: Raw input
        field: Human-readable field name for the error message

    Returns:
        The trimmed text

    Raises:
        ValidationError: If nothing is left after trimming
    """
    trimmed = (text or "").strip()
    if not trimmed:
        raise ValidationError(f"{field} must not be empty")
    return trimmed
