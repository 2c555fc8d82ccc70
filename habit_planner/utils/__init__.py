"""Utility helpers."""
from .colored_logger import get_plugin_logger, setup_colored_logging
from .json_extractor import extract_json_object
from .text_cleaner import clean_verse_text

__all__ = [
    "get_plugin_logger",
    "setup_colored_logging",
    "extract_json_object",
    "clean_verse_text",
]
