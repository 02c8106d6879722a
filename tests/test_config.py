"""
Tests for environment-driven settings
"""

from userql.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.api_port == 8000
    assert settings.graphiql is True
    assert settings.environment == "development"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("USERQL_API_PORT", "9100")
    monkeypatch.setenv("USERQL_DEBUG", "false")
    monkeypatch.setenv("USERQL_CORS_ORIGINS", '["https://example.com"]')

    settings = Settings(_env_file=None)

    assert settings.api_port == 9100
    assert settings.debug is False
    assert settings.cors_origins == ["https://example.com"]
