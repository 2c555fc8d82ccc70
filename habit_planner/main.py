"""Main entry point for the application."""
import logging
import os

from dotenv import load_dotenv

from habit_planner import create_app
from habit_planner.services import ConfigService
from habit_planner.utils.colored_logger import setup_colored_logging

load_dotenv()

config_service = ConfigService(os.getenv("HABIT_PLANNER_CONFIG"))
setup_colored_logging(level=config_service.settings.log.level)
logger = logging.getLogger(__name__)


# Create the FastAPI app instance
app = create_app(settings=config_service.settings)


if __name__ == "__main__":
    import uvicorn

    server_cfg = config_service.settings.server
    logger.info("=" * 50)
    logger.info("Starting Habit Planner")
    logger.info("=" * 50)

    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)
