"""
Colored logging configuration for terminal output.
Each outbound component (LLM, scripture, quotes, plan orchestration) logs in its own color.
"""

import logging
import sys
from typing import Optional, Union


class Colors:
    """ANSI color codes for terminal output."""
    RESET = '\033[0m'
    BOLD = '\033[1m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    WHITE = '\033[37m'

    BRIGHT_BLACK = '\033[90m'
    BRIGHT_RED = '\033[91m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_CYAN = '\033[96m'


COMPONENT_COLORS = {
    'llm': Colors.GREEN,
    'scripture': Colors.BRIGHT_BLUE,
    'quotes': Colors.BRIGHT_MAGENTA,
    'plan': Colors.BRIGHT_CYAN,
    'default': Colors.WHITE,
}


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps each line in the color of its level or component."""

    LEVEL_COLORS = {
        'DEBUG': Colors.BRIGHT_BLACK,
        'INFO': Colors.WHITE,
        'WARNING': Colors.YELLOW,
        'ERROR': Colors.RED,
        'CRITICAL': Colors.BRIGHT_RED + Colors.BOLD,
    }

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None):
        if fmt is None:
            fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        if datefmt is None:
            datefmt = '%Y-%m-%d %H:%M:%S'
        super().__init__(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors.

        Warnings and errors keep their level color even when tagged with a
        component, so failures stand out in the enrichment loop.
        """
        formatted = super().format(record)

        component = getattr(record, 'component', None)
        if component and record.levelno < logging.WARNING:
            color = COMPONENT_COLORS.get(component, COMPONENT_COLORS['default'])
        else:
            color = self.LEVEL_COLORS.get(record.levelname, Colors.WHITE)

        return f"{color}{formatted}{Colors.RESET}"


class ComponentLogger:
    """Logger wrapper that tags every record with a component name."""

    def __init__(self, logger: logging.Logger, component: str):
        self.logger = logger
        self.component = component

    def _log(self, level: int, msg: str, *args, **kwargs):
        extra = kwargs.get('extra', {})
        extra['component'] = self.component
        kwargs['extra'] = extra
        self.logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self._log(logging.ERROR, msg, *args, **kwargs)


def setup_colored_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Setup colored logging on the root logger.

    Args:
        level: Logging level as int or name (e.g. "DEBUG")
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)


def get_plugin_logger(name: str, component: str) -> ComponentLogger:
    """
    Get a component logger with colored output.

    Args:
        name: Logger name (usually __name__)
        component: One of llm, scripture, quotes, plan

    Returns:
        ComponentLogger instance
    """
    return ComponentLogger(logging.getLogger(name), component)
