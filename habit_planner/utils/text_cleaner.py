"""Normalization of verse text returned by the scripture API."""
import re

_WHITESPACE = re.compile(r"\s+")

# Applied in order; escaped sequences before literal control characters.
_REPLACEMENTS = (
    ("\\n", " "),
    ("\\t", " "),
    ("\\r", " "),
    ("\n", " "),
    ("\t", " "),
    ("\r", " "),
    ('\\"', '"'),
    ("\\'", "'"),
    ("\\\\", "\\"),
)


def _clean_once(text: str) -> str:
    for old, new in _REPLACEMENTS:
        text = text.replace(old, new)
    return _WHITESPACE.sub(" ", text).strip()


def clean_verse_text(text: str) -> str:
    """Collapse escapes and whitespace in verse text.

    Escaped and literal newlines, tabs and carriage returns become single
    spaces, escaped quotes/apostrophes/backslashes are un-escaped, whitespace
    runs collapse to one space and the ends are trimmed. The pass is repeated
    until the text is stable, so the result is a fixed point.

    Args:
        text: Raw verse text

    Returns:
        Normalized text
    """
    if not text:
        return text

    # After the first pass only escape sequences can change the text, and
    # each one shortens it.
    cleaned = _clean_once(text)
    while cleaned != text:
        text = cleaned
        cleaned = _clean_once(text)
    return cleaned
