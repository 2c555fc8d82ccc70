"""Shared fixtures and fakes for the habit planner tests."""
import json
from typing import Dict, List, Optional

import pytest

from habit_planner.models import Quote
from habit_planner.services.config_service import Settings


class FakeLLMService:
    """Returns canned replies in order and records every prompt."""

    def __init__(self, replies: List):
        self.replies = list(replies)
        self.prompts: List[str] = []
        self.closed = False

    async def complete(self, prompt: str, model: Optional[str] = None) -> str:
        self.prompts.append(prompt)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    async def close(self) -> None:
        self.closed = True


class FakeScriptureService:
    """Maps references to verse text; records lookups."""

    def __init__(self, verses: Optional[Dict[str, str]] = None, default: str = "Verse text."):
        self.verses = verses or {}
        self.default = default
        self.calls: List[str] = []

    async def lookup(self, reference: str) -> str:
        self.calls.append(reference)
        return self.verses.get(reference, self.default)


class FakeQuoteService:
    """Returns one fixed quote (or None); records queries."""

    def __init__(self, quote: Optional[Quote] = None):
        self.quote = quote
        self.calls: List[str] = []

    async def search(self, tags_query: str) -> Optional[Quote]:
        self.calls.append(tags_query)
        return self.quote


def questions_json(count: int = 4) -> str:
    """Minified questions reply alternating text and single-choice items."""
    questions = []
    for i in range(1, count + 1):
        if i % 2:
            questions.append({"id": f"q{i}", "text": f"Question {i}?", "type": "single-choice",
                              "options": ["Morning", "Evening", "Anytime"]})
        else:
            questions.append({"id": f"q{i}", "text": f"Question {i}?", "type": "text"})
    return json.dumps({"questions": questions}, separators=(",", ":"))


def plan_days(order: Optional[List[int]] = None) -> List[Dict]:
    """Skeleton days in the given day order (default 1..7)."""
    return [
        {
            "day": day,
            "microAction": f"Drink a glass of water ({day})",
            "reflection": f"What helped today ({day})?",
            "verseRefs": [f"Proverbs {day}:1", "John 1:1"],
            "quoteTags": ["discipline", "focus"] if day % 2 else ["health"],
        }
        for day in (order or list(range(1, 8)))
    ]


def plan_json(order: Optional[List[int]] = None, title: str = "Hydration Week") -> str:
    return json.dumps({"planTitle": title, "daily": plan_days(order)})


@pytest.fixture
def settings() -> Settings:
    """Settings with a token and local-only endpoints."""
    return Settings.model_validate({
        "GitHubModels": {
            "ApiToken": "test-token",
            "ApiUrl": "https://llm.test/inference/chat/completions",
            "DefaultModel": "test/model",
            "ApiVersion": "2022-11-28",
        },
        "ExternalApis": {
            "QuoteApi": "http://quotes.test/search/quotes?limit=1&query=",
            "BibleApi": "http://bible.test/",
            "TimeoutSeconds": 5,
        },
        "Server": {"StaticDir": "does-not-exist"},
    })


@pytest.fixture
def settings_without_token(settings: Settings) -> Settings:
    return settings.model_copy(
        update={"github_models": settings.github_models.model_copy(update={"api_token": ""})}
    )


@pytest.fixture
def sample_quote() -> Quote:
    return Quote(content="Well done is better than well said.", author="Benjamin Franklin")
