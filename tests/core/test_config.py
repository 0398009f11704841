"""
Unit tests for Settings and application startup configuration.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from catsafe.api.main import app
from catsafe.core import config
from catsafe.core.config import Settings, get_settings
from catsafe.services.plant_safety import PlantSafetyService


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No OPENAI_* variables, no .env file, no cached settings."""
    for name in ("OPENAI_API_KEY", "OPENAI_MODEL", "OPENAI_BASE_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "_settings", None)


def test_defaults(clean_env):
    settings = Settings(openai_api_key="sk-test")

    assert settings.openai_model == "gpt-4.1-mini"
    assert settings.openai_base_url is None
    assert settings.openai_max_retries == 0
    assert settings.analysis_timeout > 0
    assert settings.log_level == "INFO"


def test_missing_api_key_raises(clean_env):
    with pytest.raises(ValidationError) as exc_info:
        Settings()
    assert "openai_api_key" in str(exc_info.value).lower()


@pytest.mark.parametrize("key", ["", "   "])
def test_blank_api_key_raises(clean_env, key):
    with pytest.raises(ValidationError) as exc_info:
        Settings(openai_api_key=key)
    assert "OPENAI_API_KEY is required" in str(exc_info.value)


def test_reads_environment(clean_env, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.openai_api_key == "sk-from-env"
    assert settings.openai_model == "gpt-4o-mini"
    assert settings.log_level == "DEBUG"


def test_reads_dotenv_file(clean_env, tmp_path):
    (tmp_path / ".env").write_text("OPENAI_API_KEY=sk-from-dotenv\n", encoding="utf-8")

    assert Settings().openai_api_key == "sk-from-dotenv"


def test_get_settings_is_cached(clean_env, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    assert get_settings() is get_settings()


def test_startup_fails_without_api_key(clean_env):
    """The app refuses to start, so no request can be served."""
    with pytest.raises(ValidationError):
        with TestClient(app):
            pass

    assert not hasattr(app.state, "plant_safety_service")


def test_startup_builds_service(clean_env, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    with TestClient(app) as client:
        assert isinstance(app.state.plant_safety_service, PlantSafetyService)
        response = client.get("/health")
        assert response.status_code == 200

    assert not hasattr(app.state, "plant_safety_service")
