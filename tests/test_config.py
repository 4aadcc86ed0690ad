"""
Tests for settings loading and production safeguards.
"""

import pytest
from pydantic import ValidationError

from cats_api.core.config import DEV_JWT_SECRET, Settings


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("JWT_SECRET", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        settings = _settings()
        assert settings.environment == "development"
        assert settings.port == 8866
        assert settings.jwt_secret == DEV_JWT_SECRET
        assert not settings.is_production

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("CAPTCHA_TTL_SECONDS", "60")
        settings = _settings()
        assert settings.port == 9000
        assert settings.captcha_ttl_seconds == 60

    def test_cors_origins_list(self) -> None:
        settings = _settings(cors_origins="https://a.example, https://b.example,")
        assert settings.cors_origins_list == ["https://a.example", "https://b.example"]

    def test_unknown_environment_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _settings(environment="staging")


class TestProductionValidation:
    """Production refuses development secrets."""

    def test_dev_secret_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            _settings(
                environment="production",
                jwt_secret=DEV_JWT_SECRET,
                openrouter_api_key="key",
            )
        assert "JWT_SECRET" in str(exc_info.value)

    def test_missing_api_key_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            _settings(environment="production", jwt_secret="real", openrouter_api_key="")
        assert "OPENROUTER_API_KEY" in str(exc_info.value)

    def test_valid_production(self) -> None:
        settings = _settings(
            environment="production", jwt_secret="real", openrouter_api_key="key"
        )
        assert settings.is_production
