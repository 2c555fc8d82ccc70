"""Scripture lookup client for the bible-api.com style endpoint."""
import logging
from urllib.parse import quote

import aiohttp

from habit_planner.services.config_service import Settings
from habit_planner.utils.colored_logger import get_plugin_logger
from habit_planner.utils.text_cleaner import clean_verse_text

logger = logging.getLogger(__name__)
plugin_logger = get_plugin_logger(__name__, 'scripture')

VERSE_NOT_FOUND = "Bible verse not found"
VERSE_ERROR = "Error retrieving Bible verse"
NO_VERSES = "No verses found"


class ScriptureService:
    """Resolves verse references to normalized verse text. Never raises."""

    def __init__(self, settings: Settings):
        """Initialize scripture service.

        Args:
            settings: Application settings
        """
        apis_cfg = settings.external_apis
        self.api_url = apis_cfg.bible_api
        self.translation = apis_cfg.bible_translation
        self.verify_tls = apis_cfg.verify_tls
        self._timeout = aiohttp.ClientTimeout(total=apis_cfg.timeout_seconds)
        self._headers = {"Accept": "application/json"}

    def build_url(self, reference: str) -> str:
        """Build the lookup URL for a reference such as "Proverbs 21:5"."""
        return f"{self.api_url}{quote(reference, safe='')}?translation={self.translation}"

    async def lookup(self, reference: str) -> str:
        """Fetch and normalize the text of a verse reference.

        Args:
            reference: Verse reference

        Returns:
            Verse text, or a fallback message on failure
        """
        url = self.build_url(reference)

        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.get(url, headers=self._headers, ssl=self.verify_tls) as response:
                    if not 200 <= response.status < 300:
                        text = await response.text()
                        plugin_logger.warning(
                            f"Bible API HTTP {response.status} for {reference!r}: {text[:200]}"
                        )
                        return VERSE_NOT_FOUND

                    data = await response.json(content_type=None)
        except Exception as e:
            plugin_logger.error(f"Bible API error for {reference!r}: {e}")
            return VERSE_ERROR

        try:
            verses = data.get("verses") or []
            raw_text = " ".join(v["text"] for v in verses) if verses else NO_VERSES
        except (AttributeError, KeyError, TypeError) as e:
            plugin_logger.error(f"Bible API returned unexpected payload for {reference!r}: {e}")
            return VERSE_ERROR

        verse_text = clean_verse_text(raw_text)
        plugin_logger.info(f"📖 {reference}: {len(verse_text)} chars")
        return verse_text
