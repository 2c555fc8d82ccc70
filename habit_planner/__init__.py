"""Habit planner application package."""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from habit_planner.controllers import ConfigController, PlanController
from habit_planner.controllers.plan_controller import error_response
from habit_planner.router import create_router
from habit_planner.services import (
    ConfigService,
    LLMService,
    PlanService,
    QuoteService,
    ScriptureService,
    Settings,
)

logger = logging.getLogger(__name__)


def _describe_request_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"Invalid request: {location}: {first.get('msg', 'invalid value')}"


def create_app(
    config_path: Optional[str] = None,
    settings: Optional[Settings] = None,
    llm_service=None,
    scripture_service=None,
    quote_service=None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config_path: Optional path to config file
        settings: Optional pre-built settings (skips config loading)
        llm_service: Optional LLM service override
        scripture_service: Optional scripture service override
        quote_service: Optional quote service override

    Returns:
        Configured FastAPI application
    """
    logger.info("Initializing services...")

    if settings is None:
        load_dotenv()
    config_service = ConfigService(config_path, settings=settings)
    settings = config_service.settings

    llm_service = llm_service or LLMService(settings)
    scripture_service = scripture_service or ScriptureService(settings)
    quote_service = quote_service or QuoteService(settings)
    plan_service = PlanService(
        llm_service=llm_service,
        scripture_service=scripture_service,
        quote_service=quote_service,
        parallel_enrichment=settings.external_apis.parallel_enrichment,
    )

    logger.info("Initializing controllers...")

    plan_controller = PlanController(plan_service=plan_service)
    config_controller = ConfigController(config_service=config_service)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await llm_service.close()

    app = FastAPI(
        title="Habit Planner API",
        description="Personalized 7-day habit plans with scripture and quotations",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = _describe_request_error(exc)
        logger.warning(f"{request.method} {request.url.path}: {message}")
        return error_response(message)

    router = create_router(plan_controller, config_controller)
    app.include_router(router)

    # Mounted last so API routes take precedence over static files.
    static_dir = Path(settings.server.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
    else:
        logger.warning("Static directory not found, frontend will not be served: %s", static_dir)

    logger.info("Application initialized successfully")
    logger.info(f"Default model: {settings.github_models.default_model}")

    return app
