"""API router with all endpoints."""
import logging

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from habit_planner.models import (
    EnrichedPlan,
    ErrorResponse,
    HealthResponse,
    PlanRequest,
    QuestionsResponse,
)

logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {400: {"model": ErrorResponse, "description": "LLM, parse or request failure"}}


def create_router(plan_controller, config_controller) -> APIRouter:
    """Create API router with all endpoints.

    Args:
        plan_controller: Plan controller instance
        config_controller: Config controller instance

    Returns:
        Configured APIRouter
    """
    router = APIRouter()

    @router.get("/", include_in_schema=False)
    async def read_root():
        """Redirect to the frontend entry point."""
        return RedirectResponse(url="/index.html", status_code=302)

    @router.get(
        "/questions/{habit}",
        response_model=QuestionsResponse,
        response_model_exclude_none=True,
        responses=_ERROR_RESPONSES,
    )
    async def get_questions(habit: str):
        """Generate onboarding questions for a habit."""
        return await plan_controller.handle_questions(habit)

    @router.post("/plan", response_model=EnrichedPlan, responses=_ERROR_RESPONSES)
    async def create_plan(request: PlanRequest):
        """Generate an enriched 7-day plan from a habit and onboarding answers."""
        return await plan_controller.handle_plan(request)

    @router.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return config_controller.get_health()

    @router.get("/api/config")
    async def get_config():
        """Get current configuration (without the API token)."""
        return config_controller.get_config()

    return router
