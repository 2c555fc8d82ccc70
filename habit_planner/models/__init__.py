"""Models package."""
from .schemas import (
    MIN_QUESTIONS,
    PLAN_DAYS,
    OnboardingQuestion,
    QuestionsResponse,
    PlanRequest,
    DayPlanSkeleton,
    PlanSkeleton,
    Quote,
    EnrichedDayPlan,
    EnrichedPlan,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "MIN_QUESTIONS",
    "PLAN_DAYS",
    "OnboardingQuestion",
    "QuestionsResponse",
    "PlanRequest",
    "DayPlanSkeleton",
    "PlanSkeleton",
    "Quote",
    "EnrichedDayPlan",
    "EnrichedPlan",
    "ErrorResponse",
    "HealthResponse",
]
