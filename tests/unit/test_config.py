"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from hello_api.config import Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "HOST", "PORT", "SERVER_URL", "DOCS_URL", "OPENAPI_URL",
        "LOG_LEVEL", "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)

    assert settings.host == "0.0.0.0"
    assert settings.port == 4000
    assert settings.server_url == "http://localhost:4000"
    assert settings.docs_url == "/docs"
    assert settings.openapi_url == "/openapi.json"
    assert settings.log_level == "info"
    assert settings.log_format == "json"


def test_environment_overrides(clean_env):
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("log_format", "text")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.log_format == "text"


def test_log_settings_are_lowercased(clean_env):
    clean_env.setenv("LOG_LEVEL", "WARNING")
    clean_env.setenv("LOG_FORMAT", "JSON")

    settings = Settings(_env_file=None)

    assert settings.log_level == "warning"
    assert settings.log_format == "json"


@pytest.mark.parametrize(
    "field, value",
    [("log_level", "warn"), ("log_level", "verbose"), ("log_format", "xml")],
)
def test_unknown_log_settings_are_rejected(clean_env, field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
