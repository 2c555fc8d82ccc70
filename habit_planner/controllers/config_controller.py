"""Config controller for health and configuration endpoints."""
import logging
from typing import Dict

from habit_planner.models import HealthResponse

logger = logging.getLogger(__name__)


class ConfigController:
    """Controller for configuration operations."""

    def __init__(self, config_service):
        """Initialize config controller.

        Args:
            config_service: Configuration service
        """
        self.config_service = config_service

    def get_health(self) -> HealthResponse:
        """Get health status."""
        settings = self.config_service.settings
        return HealthResponse(
            status="healthy",
            token_configured=settings.token_configured,
            default_model=self.config_service.get_default_model(),
        )

    def get_config(self) -> Dict:
        """Get sanitized configuration.

        Returns:
            Configuration dict without the API token
        """
        return self.config_service.get_safe_config()
