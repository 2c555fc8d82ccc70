"""Pydantic models for onboarding questions and habit plans.

JSON field names are camelCase on the wire (``planTitle``, ``microAction`` ...);
Python attributes are snake_case and either form is accepted on input.
"""
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

MIN_QUESTIONS = 4
PLAN_DAYS = 7


class CamelModel(BaseModel):
    """Base model serialising to camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OnboardingQuestion(CamelModel):
    """A clarifying question shown before plan generation."""
    id: str = Field(..., description="Question identifier, e.g. 'q1'")
    text: str = Field(..., description="Question text")
    type: Literal["text", "single-choice"] = Field(..., description="Answer type")
    options: Optional[List[str]] = Field(None, description="Ordered options for single-choice questions")

    @model_validator(mode="after")
    def _require_options_for_choice(self) -> "OnboardingQuestion":
        if self.type == "single-choice" and not self.options:
            raise ValueError(f"question {self.id!r} is single-choice but has no options")
        return self


class QuestionsResponse(CamelModel):
    """Onboarding questions for a habit."""
    questions: List[OnboardingQuestion] = Field(..., min_length=MIN_QUESTIONS)


class PlanRequest(CamelModel):
    """Body of ``POST /plan``."""
    habit: str = Field(..., description="Habit the user wants to build")
    answers: Dict[str, str] = Field(default_factory=dict, description="Answers keyed by question id")


class DayPlanSkeleton(CamelModel):
    """One day of the plan as returned by the LLM, before enrichment."""
    day: int = Field(..., ge=1, le=PLAN_DAYS)
    micro_action: str
    reflection: str
    verse_refs: List[str] = Field(..., min_length=1)
    quote_tags: List[str] = Field(default_factory=list)


class PlanSkeleton(CamelModel):
    """Raw 7-day plan returned by the LLM."""
    plan_title: str
    daily: List[DayPlanSkeleton]

    @model_validator(mode="after")
    def _order_days(self) -> "PlanSkeleton":
        self.daily.sort(key=lambda d: d.day)
        days = [d.day for d in self.daily]
        if days != list(range(1, PLAN_DAYS + 1)):
            raise ValueError(f"plan must contain days 1..{PLAN_DAYS} exactly once, got {days}")
        return self


class Quote(BaseModel):
    """A quotation search hit; unknown fields from the API are ignored."""
    content: str = ""
    author: str = ""


class EnrichedDayPlan(CamelModel):
    """A plan day with resolved verse text and quotation."""
    day: int
    micro_action: str
    reflection: str
    verse_reference: str
    verse_text: str
    quote: str = ""
    quote_author: str = ""


class EnrichedPlan(CamelModel):
    """Response of ``POST /plan``."""
    plan_title: str
    daily: List[EnrichedDayPlan]


class ErrorResponse(BaseModel):
    """Body of every 400 response."""
    error: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    token_configured: bool
    default_model: str
