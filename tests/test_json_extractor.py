"""Tests for extracting JSON objects from LLM replies."""

import pytest

from habit_planner.errors import ParseError
from habit_planner.utils.json_extractor import extract_json_object


def test_plain_minified_json() -> None:
    assert extract_json_object('{"planTitle":"Week","daily":[]}') == {"planTitle": "Week", "daily": []}


def test_code_fenced_json() -> None:
    text = '```json\n{"questions": []}\n```'
    assert extract_json_object(text) == {"questions": []}


def test_json_surrounded_by_prose() -> None:
    text = 'Here is your plan:\n{"planTitle": "Week"}\nGood luck!'
    assert extract_json_object(text) == {"planTitle": "Week"}


@pytest.mark.parametrize("text", [
    "",
    "No response received",
    '{"questions": [',
    '["q1", "q2"]',
])
def test_unparseable_or_non_object_raises(text: str) -> None:
    with pytest.raises(ParseError):
        extract_json_object(text)
