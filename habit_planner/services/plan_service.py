"""Plan orchestration: LLM questions, LLM plan skeleton, per-day enrichment."""
import asyncio
import logging
from typing import Dict, Optional

from pydantic import ValidationError

from habit_planner.errors import InvalidRequestError, ParseError
from habit_planner.models import (
    DayPlanSkeleton,
    EnrichedDayPlan,
    EnrichedPlan,
    PlanSkeleton,
    QuestionsResponse,
)
from habit_planner.prompts import build_plan_prompt, build_questions_prompt
from habit_planner.services.scripture_service import VERSE_ERROR
from habit_planner.utils.colored_logger import get_plugin_logger
from habit_planner.utils.json_extractor import extract_json_object

logger = logging.getLogger(__name__)
plugin_logger = get_plugin_logger(__name__, 'plan')


def _require_habit(habit: Optional[str]) -> str:
    habit = (habit or "").strip()
    if not habit:
        raise InvalidRequestError("Habit must not be empty")
    return habit


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "root"
    return f"{location}: {first['msg']}"


class PlanService:
    """Chains the LLM, scripture and quote services into plan responses."""

    def __init__(self, llm_service, scripture_service, quote_service, parallel_enrichment: bool = False):
        """Initialize plan service.

        Args:
            llm_service: LLM completion service
            scripture_service: Verse lookup service
            quote_service: Quotation search service
            parallel_enrichment: Enrich the seven days concurrently instead of one by one
        """
        self.llm_service = llm_service
        self.scripture_service = scripture_service
        self.quote_service = quote_service
        self.parallel_enrichment = parallel_enrichment

    async def generate_questions(self, habit: str) -> QuestionsResponse:
        """Ask the LLM for onboarding questions about a habit.

        Raises:
            InvalidRequestError: If the habit is empty
            ConfigurationError, UpstreamError: From the LLM call
            ParseError: If the reply is not a valid question list
        """
        habit = _require_habit(habit)
        plugin_logger.info(f"📝 Generating onboarding questions for {habit!r}")

        reply = await self.llm_service.complete(build_questions_prompt(habit))
        data = extract_json_object(reply)

        try:
            questions = QuestionsResponse.model_validate(data)
        except ValidationError as e:
            raise ParseError(
                f"LLM questions did not match the expected schema: {_describe_validation_error(e)}"
            ) from e

        plugin_logger.info(f"📝 Received {len(questions.questions)} questions for {habit!r}")
        return questions

    async def generate_plan(self, habit: str, answers: Optional[Dict[str, str]] = None) -> EnrichedPlan:
        """Ask the LLM for a 7-day plan and enrich every day.

        Only the LLM call and parsing can fail the request; verse and quote
        lookups fall back per day.

        Raises:
            InvalidRequestError: If the habit is empty
            ConfigurationError, UpstreamError: From the LLM call
            ParseError: If the reply is not a valid 7-day plan
        """
        habit = _require_habit(habit)
        plugin_logger.info(f"🗓️ Generating 7-day plan for {habit!r}")

        reply = await self.llm_service.complete(build_plan_prompt(habit, answers or {}))
        data = extract_json_object(reply)

        try:
            skeleton = PlanSkeleton.model_validate(data)
        except ValidationError as e:
            raise ParseError(
                f"LLM plan did not match the expected schema: {_describe_validation_error(e)}"
            ) from e

        if self.parallel_enrichment:
            daily = list(await asyncio.gather(*(self._enrich_day(day) for day in skeleton.daily)))
        else:
            daily = [await self._enrich_day(day) for day in skeleton.daily]

        plugin_logger.info(f"🗓️ Plan {skeleton.plan_title!r} enriched ({len(daily)} days)")
        return EnrichedPlan(plan_title=skeleton.plan_title, daily=daily)

    async def _enrich_day(self, day: DayPlanSkeleton) -> EnrichedDayPlan:
        """Resolve the verse and quote for one day."""
        verse_reference = day.verse_refs[0]

        try:
            verse_text = await self.scripture_service.lookup(verse_reference)
        except Exception as e:
            logger.error(f"Day {day.day}: verse lookup failed: {e}")
            verse_text = VERSE_ERROR

        try:
            quote = await self.quote_service.search(" ".join(day.quote_tags))
        except Exception as e:
            logger.error(f"Day {day.day}: quote search failed: {e}")
            quote = None

        return EnrichedDayPlan(
            day=day.day,
            micro_action=day.micro_action,
            reflection=day.reflection,
            verse_reference=verse_reference,
            verse_text=verse_text,
            quote=quote.content if quote else "",
            quote_author=quote.author if quote else "",
        )
