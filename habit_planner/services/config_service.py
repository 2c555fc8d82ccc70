"""Configuration service for loading immutable application settings."""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class _Section(BaseModel):
    """Frozen config section addressed by its PascalCase key names."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class GitHubModelsSettings(_Section):
    """LLM endpoint configuration."""
    api_token: str = Field("", alias="ApiToken")
    api_url: str = Field("https://models.github.ai/inference/chat/completions", alias="ApiUrl")
    default_model: str = Field("xai/grok-3", alias="DefaultModel")
    api_version: str = Field("2022-11-28", alias="ApiVersion")


class ExternalApisSettings(_Section):
    """Scripture and quotation API configuration."""
    quote_api: str = Field("https://api.quotable.io/search/quotes?limit=1&query=", alias="QuoteApi")
    bible_api: str = Field("https://bible-api.com/", alias="BibleApi")
    bible_translation: str = Field("kjv", alias="BibleTranslation")
    timeout_seconds: float = Field(30.0, gt=0, alias="TimeoutSeconds")
    verify_tls: bool = Field(True, alias="VerifyTls")
    parallel_enrichment: bool = Field(False, alias="ParallelEnrichment")


class LoggingSettings(_Section):
    """Logging configuration."""
    level: str = Field("INFO", alias="Level")


class ServerSettings(_Section):
    """Uvicorn and static file configuration."""
    host: str = Field("0.0.0.0", alias="Host")
    port: int = Field(8000, alias="Port")
    static_dir: str = Field("frontend", alias="StaticDir")


class Settings(_Section):
    """Process-wide configuration, loaded once at startup."""
    github_models: GitHubModelsSettings = Field(default_factory=GitHubModelsSettings, alias="GitHubModels")
    external_apis: ExternalApisSettings = Field(default_factory=ExternalApisSettings, alias="ExternalApis")
    log: LoggingSettings = Field(default_factory=LoggingSettings, alias="Logging")
    server: ServerSettings = Field(default_factory=ServerSettings, alias="Server")

    @property
    def token_configured(self) -> bool:
        return bool(self.github_models.api_token)


def _apply_env_overrides(data: Dict[str, Any], environ: Mapping[str, str]) -> Dict[str, Any]:
    """Overlay ``Section__Key`` environment variables onto raw config data.

    Matching is case-insensitive, so both ``GitHubModels__ApiToken`` and
    ``GITHUBMODELS__APITOKEN`` set ``GitHubModels.ApiToken``.
    """
    env = {key.lower(): value for key, value in environ.items() if "__" in key}

    for section_name, section_field in Settings.model_fields.items():
        section_model = section_field.annotation
        section_alias = section_field.alias or section_name
        section = dict(data.get(section_alias) or {})

        for key_name, key_field in section_model.model_fields.items():
            key_alias = key_field.alias or key_name
            value = env.get(f"{section_alias}__{key_alias}".lower())
            if value is not None:
                section[key_alias] = value

        if section or section_alias in data:
            data[section_alias] = section

    return data


class ConfigService:
    """Service for loading and exposing application configuration."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        settings: Optional[Settings] = None
    ):
        """Initialize configuration service.

        Args:
            config_path: Path to config file. If None, will search default locations.
            environ: Environment mapping used for overrides (defaults to os.environ)
            settings: Pre-built settings; skips loading when given
        """
        self._config_path = config_path
        self._environ = os.environ if environ is None else environ
        self._settings: Optional[Settings] = settings
        if settings is None:
            self.load_config()

    def _resolve_path(self) -> Optional[Path]:
        if self._config_path:
            config_path = Path(self._config_path)
            if not config_path.exists():
                raise FileNotFoundError(f"Config file not found: {config_path}")
            return config_path

        for candidate in (Path("config.yml"), Path("config/config.yml")):
            if candidate.exists():
                return candidate
        return None

    def load_config(self) -> Settings:
        """Load configuration from YAML file and environment.

        Returns:
            Immutable Settings

        Raises:
            FileNotFoundError: If an explicit config path does not exist
        """
        config_path = self._resolve_path()
        data: Dict[str, Any] = {}

        if config_path is not None:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            logger.info(f"Configuration loaded from {config_path}")
        else:
            logger.info("No config.yml found, using defaults and environment")

        data = _apply_env_overrides(data, self._environ)
        self._settings = Settings.model_validate(data)

        if not self._settings.token_configured:
            logger.warning("GitHubModels:ApiToken is not configured; LLM requests will fail")
        if not self._settings.external_apis.verify_tls:
            logger.warning(
                "ExternalApis:VerifyTls is false; TLS certificates are NOT validated. "
                "Use this only for local development."
            )

        return self._settings

    @property
    def settings(self) -> Settings:
        """Get current settings."""
        if self._settings is None:
            raise RuntimeError("Configuration not loaded")
        return self._settings

    def get_default_model(self) -> str:
        """Get default model name."""
        return self.settings.github_models.default_model

    def get_safe_config(self) -> Dict:
        """Get configuration without the API token.

        Returns:
            Safe configuration dictionary
        """
        settings = self.settings
        github_models = settings.github_models.model_dump(by_alias=True, exclude={"api_token"})
        github_models["TokenConfigured"] = settings.token_configured
        return {
            "GitHubModels": github_models,
            "ExternalApis": settings.external_apis.model_dump(by_alias=True),
        }
