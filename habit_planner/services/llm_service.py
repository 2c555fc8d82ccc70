"""LLM service for chat completions against the GitHub Models endpoint."""
import logging
from typing import Optional

import httpx
from openai import APIError, APIStatusError, AsyncOpenAI

from habit_planner.errors import ConfigurationError, UpstreamError
from habit_planner.services.config_service import Settings
from habit_planner.utils.colored_logger import get_plugin_logger

logger = logging.getLogger(__name__)
plugin_logger = get_plugin_logger(__name__, 'llm')

NO_RESPONSE = "No response received"
_COMPLETIONS_PATH = "/chat/completions"


def _base_url(api_url: str) -> str:
    """Turn the configured chat-completions URL into the SDK's base URL."""
    url = api_url.rstrip("/")
    if url.endswith(_COMPLETIONS_PATH):
        url = url[: -len(_COMPLETIONS_PATH)]
    return url


class LLMService:
    """Service for single-message completion calls.

    One attempt per call: the SDK's built-in retries are disabled.
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        """Initialize LLM service.

        Args:
            settings: Application settings
            http_client: Optional httpx client for the SDK (custom transport, proxies)
        """
        self.settings = settings
        self._http_client = http_client
        self._client: Optional[AsyncOpenAI] = None

    def _get_client(self) -> AsyncOpenAI:
        """Get or create the OpenAI client.

        Raises:
            ConfigurationError: If no API token is configured
        """
        if self._client is None:
            models_cfg = self.settings.github_models
            if not models_cfg.api_token:
                raise ConfigurationError(
                    "GitHub Models API token is not configured. "
                    "Please set GitHubModels:ApiToken in your configuration."
                )

            apis_cfg = self.settings.external_apis
            http_client = self._http_client
            if http_client is None and not apis_cfg.verify_tls:
                http_client = httpx.AsyncClient(verify=False, timeout=apis_cfg.timeout_seconds)

            self._client = AsyncOpenAI(
                api_key=models_cfg.api_token,
                base_url=_base_url(models_cfg.api_url),
                timeout=apis_cfg.timeout_seconds,
                max_retries=0,
                default_headers={
                    "Accept": "application/vnd.github+json",
                    "X-GitHub-Api-Version": models_cfg.api_version,
                },
                http_client=http_client,
            )
            logger.info(f"Created LLM client for {models_cfg.api_url}")

        return self._client

    async def complete(self, prompt: str, model: Optional[str] = None) -> str:
        """Send ``prompt`` as the only user message and return the reply text.

        Args:
            prompt: Prompt text
            model: Optional model override; defaults to GitHubModels:DefaultModel

        Returns:
            Content of the first choice, or "No response received"

        Raises:
            ConfigurationError: If no API token is configured
            UpstreamError: On a non-success status or transport failure
        """
        client = self._get_client()
        model_id = model or self.settings.github_models.default_model

        logger.debug(f"Calling LLM with model {model_id}")

        try:
            response = await client.chat.completions.create(
                model=model_id,
                messages=[{"role": "user", "content": prompt}],
            )
        except APIStatusError as e:
            body = e.response.text
            raise UpstreamError(
                f"API call failed with status {e.status_code}: {body}",
                status_code=e.status_code,
                body=body,
            ) from e
        except APIError as e:
            raise UpstreamError(f"LLM request failed: {e}") from e

        content = None
        choices = getattr(response, "choices", None)
        if choices and getattr(choices[0], "message", None) is not None:
            content = choices[0].message.content
        if content is None:
            plugin_logger.warning(f"LLM ({model_id}) returned no choices")
            return NO_RESPONSE

        preview = content[:150] + "..." if len(content) > 150 else content
        plugin_logger.info(f"🤖 LLM Response ({model_id}): {len(content)} chars")
        plugin_logger.info(f"   {preview}")

        return content

    async def close(self) -> None:
        """Close the OpenAI client and the httpx client underneath it."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            logger.info("Closed LLM client")
