"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from habit_planner.services.config_service import ConfigService


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yml"
    path.write_text(
        "GitHubModels:\n"
        "  DefaultModel: openai/gpt-4.1\n"
        '  ApiVersion: "2024-01-01"\n'
        "ExternalApis:\n"
        "  BibleApi: https://bible.example/\n"
        "  TimeoutSeconds: 12\n",
        encoding="utf-8",
    )
    return path


def test_defaults_without_file_or_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Every key except the token has a default."""
    monkeypatch.chdir(tmp_path)
    settings = ConfigService(environ={}).settings

    assert settings.github_models.api_token == ""
    assert settings.github_models.api_url == "https://models.github.ai/inference/chat/completions"
    assert settings.github_models.default_model == "xai/grok-3"
    assert settings.github_models.api_version == "2022-11-28"
    assert settings.external_apis.quote_api == "https://api.quotable.io/search/quotes?limit=1&query="
    assert settings.external_apis.bible_api == "https://bible-api.com/"
    assert settings.external_apis.timeout_seconds == 30
    assert settings.external_apis.verify_tls is True
    assert settings.token_configured is False


def test_yaml_values_override_defaults(config_file: Path) -> None:
    settings = ConfigService(str(config_file), environ={}).settings

    assert settings.github_models.default_model == "openai/gpt-4.1"
    assert settings.github_models.api_version == "2024-01-01"
    assert settings.external_apis.bible_api == "https://bible.example/"
    assert settings.external_apis.timeout_seconds == 12
    assert settings.external_apis.quote_api.startswith("https://api.quotable.io/")


def test_environment_overrides_yaml(config_file: Path) -> None:
    """Section__Key variables win over the file, case-insensitively."""
    environ = {
        "GitHubModels__ApiToken": "secret",
        "GITHUBMODELS__DEFAULTMODEL": "env/model",
        "ExternalApis__VerifyTls": "false",
        "UNRELATED": "x",
    }
    settings = ConfigService(str(config_file), environ=environ).settings

    assert settings.github_models.api_token == "secret"
    assert settings.github_models.default_model == "env/model"
    assert settings.external_apis.verify_tls is False
    assert settings.token_configured is True


def test_explicit_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        ConfigService(str(tmp_path / "missing.yml"), environ={})


def test_settings_are_immutable(config_file: Path) -> None:
    settings = ConfigService(str(config_file), environ={}).settings
    with pytest.raises(ValidationError):
        settings.github_models.api_token = "changed"


def test_safe_config_hides_token(config_file: Path) -> None:
    service = ConfigService(str(config_file), environ={"GitHubModels__ApiToken": "secret"})
    safe = service.get_safe_config()

    assert "ApiToken" not in safe["GitHubModels"]
    assert safe["GitHubModels"]["TokenConfigured"] is True
    assert "secret" not in str(safe)
    assert safe["ExternalApis"]["BibleApi"] == "https://bible.example/"


def test_empty_section_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("Logging:\nExternalApis:\n  VerifyTls: false\n", encoding="utf-8")

    settings = ConfigService(str(path), environ={}).settings

    assert settings.log.level == "INFO"
    assert settings.external_apis.verify_tls is False
