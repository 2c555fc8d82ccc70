"""Tests for verse text normalization."""

import pytest

from habit_planner.utils.text_cleaner import clean_verse_text


def test_replaces_escaped_and_literal_whitespace() -> None:
    """Escaped and real newlines/tabs/carriage returns become single spaces."""
    raw = "For God so loved\\nthe world,\nthat he\\tgave\this\\r\r only Son"
    assert clean_verse_text(raw) == "For God so loved the world, that he gave his only Son"


def test_unescapes_quotes_and_backslashes() -> None:
    raw = 'And God said, \\"Let there be light\\": and it\\\'s good \\\\ amen'
    assert clean_verse_text(raw) == 'And God said, "Let there be light": and it\'s good \\ amen'


def test_collapses_whitespace_and_trims() -> None:
    assert clean_verse_text("   Trust   in\n\n the LORD  ") == "Trust in the LORD"


def test_empty_text_is_returned_unchanged() -> None:
    assert clean_verse_text("") == ""


@pytest.mark.parametrize("raw", [
    "Plain verse text.",
    "  Line one\\n\\nLine two\n",
    'He said \\"go\\"',
    "nested \\\\\\\\n escapes \\\\\"",
    "tabs\t\t and \\t escaped tabs",
])
def test_normalization_is_idempotent(raw: str) -> None:
    """Cleaning an already-clean string changes nothing."""
    once = clean_verse_text(raw)
    assert clean_verse_text(once) == once
