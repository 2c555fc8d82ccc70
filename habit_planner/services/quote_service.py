"""Quotation search client for the quotable.io style endpoint."""
import logging
from typing import Optional

import aiohttp

from habit_planner.models import Quote
from habit_planner.services.config_service import Settings
from habit_planner.utils.colored_logger import get_plugin_logger

logger = logging.getLogger(__name__)
plugin_logger = get_plugin_logger(__name__, 'quotes')


class QuoteService:
    """Finds the first quotation matching a tag query. Never raises."""

    def __init__(self, settings: Settings):
        apis_cfg = settings.external_apis
        self.api_url = apis_cfg.quote_api
        self.verify_tls = apis_cfg.verify_tls
        self._timeout = aiohttp.ClientTimeout(total=apis_cfg.timeout_seconds)
        self._headers = {"Accept": "application/json"}

    async def search(self, tags_query: str) -> Optional[Quote]:
        """Search quotations by tags.

        The configured URL already ends with ``limit=1&query=``; tags are
        appended as given (space-separated).

        Args:
            tags_query: Space-separated tags, e.g. "discipline focus"

        Returns:
            First matching Quote, or None if there is none or the call failed
        """
        url = f"{self.api_url}{tags_query}"

        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.get(url, headers=self._headers, ssl=self.verify_tls) as response:
                    if not 200 <= response.status < 300:
                        text = await response.text()
                        plugin_logger.warning(
                            f"Quote API HTTP {response.status} for {tags_query!r}: {text[:200]}"
                        )
                        return None

                    data = await response.json(content_type=None)

            results = data.get("results") or []
            if not results:
                plugin_logger.info(f"💬 No quote found for {tags_query!r}")
                return None

            quote = Quote.model_validate(results[0])
        except Exception as e:
            plugin_logger.error(f"Quote API error for {tags_query!r}: {e}")
            return None

        plugin_logger.info(f"💬 {tags_query!r}: quote by {quote.author or 'unknown'}")
        return quote
