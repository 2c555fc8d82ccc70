"""Services package."""
from .config_service import ConfigService, Settings
from .llm_service import LLMService
from .scripture_service import ScriptureService
from .quote_service import QuoteService
from .plan_service import PlanService

__all__ = [
    "ConfigService",
    "Settings",
    "LLMService",
    "ScriptureService",
    "QuoteService",
    "PlanService",
]
