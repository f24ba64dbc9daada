"""Unit tests for settings loading."""

import pydantic
import pytest

from community.config import Settings


def test_database_url_is_required(monkeypatch):
    monkeypatch.delenv("DATABASE__URL", raising=False)

    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None)


def test_nested_environment_variables(monkeypatch):
    monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/app")
    monkeypatch.setenv("AUTH__GOOGLE__CLIENT_ID", "client-123")

    settings = Settings(_env_file=None)

    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/app"
    assert settings.auth.google.client_id == "client-123"


def test_callback_url_follows_host(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("HOST", "community.example.com")

    settings = Settings(_env_file=None)

    assert settings.api.base_url == "https://community.example.com"
    assert (
        settings.auth.google_callback_url
        == "https://community.example.com/auth/google/callback"
    )
    assert settings.is_production


def test_local_callback_url_includes_port(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("HOST", "localhost")
    monkeypatch.setenv("PORT", "3000")

    settings = Settings(_env_file=None)

    assert settings.auth.google_callback_url == (
        "http://localhost:3000/auth/google/callback"
    )
