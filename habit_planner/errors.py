"""Exception hierarchy for request-scoped failures."""
from typing import Optional


class HabitPlannerError(Exception):
    """Base class for errors that fail a single request with HTTP 400."""


class ConfigurationError(HabitPlannerError):
    """Required configuration (e.g. the API token) is missing."""


class UpstreamError(HabitPlannerError):
    """The LLM endpoint returned a non-success status or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ParseError(HabitPlannerError):
    """LLM output is not JSON, or not JSON of the expected shape."""


class InvalidRequestError(HabitPlannerError):
    """The caller supplied an unusable request (e.g. an empty habit)."""
