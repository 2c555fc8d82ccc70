"""Helpers for pulling a JSON object out of LLM output."""
import json
import re
from typing import Any, Dict, Optional

from habit_planner.errors import ParseError

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


def _strip_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` block if present."""
    return _FENCE.sub("", text.strip())


def _find_json_span(text: str) -> Optional[str]:
    """Grab the outermost {...} span; works when the model adds stray text."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end <= start:
        return None
    return text[start:end + 1]


def extract_json_object(text: str) -> Dict[str, Any]:
    """Parse LLM output into a JSON object.

    Args:
        text: Raw completion text

    Returns:
        Parsed dictionary

    Raises:
        ParseError: If no JSON object can be parsed from the text
    """
    candidate = _strip_fences(text or "")
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        span = _find_json_span(candidate)
        if span is None or span == candidate:
            raise ParseError(f"LLM response is not valid JSON: {e}") from e
        try:
            data = json.loads(span)
        except json.JSONDecodeError as inner:
            raise ParseError(f"LLM response is not valid JSON: {inner}") from inner

    if not isinstance(data, dict):
        raise ParseError(f"LLM response must be a JSON object, got {type(data).__name__}")
    return data
