"""Plan controller for the questions and plan endpoints."""
import logging
from typing import Union

from fastapi.responses import JSONResponse

from habit_planner.errors import HabitPlannerError, UpstreamError
from habit_planner.models import EnrichedPlan, ErrorResponse, PlanRequest, QuestionsResponse

logger = logging.getLogger(__name__)


def error_response(message: str) -> JSONResponse:
    """Build the 400 ``{"error": message}`` response."""
    return JSONResponse(status_code=400, content=ErrorResponse(error=message).model_dump())


def _log_request_failure(action: str, habit: str, error: HabitPlannerError) -> None:
    if isinstance(error, UpstreamError):
        body_preview = (error.body or "")[:200]
        logger.warning(
            f"{action} request failed for {habit!r}: upstream status={error.status_code} body={body_preview!r}"
        )
    else:
        logger.warning(f"{action} request failed for {habit!r}: {error}")


class PlanController:
    """Controller translating plan service results into HTTP responses."""

    def __init__(self, plan_service):
        """Initialize plan controller.

        Args:
            plan_service: Plan orchestration service
        """
        self.plan_service = plan_service

    async def handle_questions(self, habit: str) -> Union[QuestionsResponse, JSONResponse]:
        """Handle ``GET /questions/{habit}``."""
        try:
            return await self.plan_service.generate_questions(habit)
        except HabitPlannerError as e:
            _log_request_failure("Questions", habit, e)
            return error_response(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error generating questions for {habit!r}")
            return error_response(str(e) or type(e).__name__)

    async def handle_plan(self, request: PlanRequest) -> Union[EnrichedPlan, JSONResponse]:
        """Handle ``POST /plan``."""
        try:
            return await self.plan_service.generate_plan(request.habit, request.answers)
        except HabitPlannerError as e:
            _log_request_failure("Plan", request.habit, e)
            return error_response(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error generating plan for {request.habit!r}")
            return error_response(str(e) or type(e).__name__)
