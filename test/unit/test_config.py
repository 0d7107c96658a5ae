"""
Unit tests for backend/quizmo/core/config.py
Tests: Settings defaults, field validators (CORS parsing, provider upper-casing,
required secrets, positive limits).
No DB or network required.
"""

import pytest
from pydantic import ValidationError

from quizmo.core.config import settings, Settings


class TmpSettings(Settings):
    model_config = {"env_file": None}


def _make(**overrides):
    base = {"DATABASE_URL": "psql://x", "JWT_SECRET_KEY": "a" * 34}
    base.update(overrides)
    return TmpSettings(**base)


class TestSettingsDefaults:
    """Verify default values in the Settings singleton."""

    def test_settings_is_settings_instance(self):
        assert isinstance(settings, Settings)

    def test_jwt_algorithm_default(self):
        assert settings.JWT_ALGORITHM == "HS256"

    def test_access_token_lasts_seven_days(self):
        assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 7 * 24 * 60

    def test_history_retention_limit_default(self):
        assert settings.HISTORY_RETENTION_LIMIT == 10

    def test_history_page_size_default(self):
        assert settings.HISTORY_PAGE_SIZE == 10

    def test_llm_timeout_default(self):
        assert settings.LLM_TIMEOUT == 30

    def test_cors_origins_is_list(self):
        assert isinstance(settings.CORS_ORIGINS, list)
        assert len(settings.CORS_ORIGINS) >= 1

    def test_environment_is_valid(self):
        assert settings.ENVIRONMENT in ("development", "staging", "production")


class TestCorsValidator:
    """Test the comma-separated CORS_ORIGINS validator."""

    def test_list_input_preserved(self):
        tmp = _make(CORS_ORIGINS=["http://localhost:3000", "http://localhost:5173"])
        assert tmp.CORS_ORIGINS == ["http://localhost:3000", "http://localhost:5173"]

    def test_string_input_split(self):
        tmp = _make(CORS_ORIGINS="http://a.com, http://b.com,")
        assert tmp.CORS_ORIGINS == ["http://a.com", "http://b.com"]


class TestProviderValidator:

    def test_provider_is_uppercased(self):
        assert _make(LLM_PROVIDER="ollama").LLM_PROVIDER == "OLLAMA"

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValidationError, match="LLM_PROVIDER"):
            _make(LLM_PROVIDER="openai")


class TestRequiredSecrets:

    def test_missing_jwt_secret_rejected(self):
        with pytest.raises(ValidationError, match="JWT_SECRET_KEY"):
            _make(JWT_SECRET_KEY="")

    def test_missing_database_url_rejected(self):
        with pytest.raises(ValidationError, match="DATABASE_URL"):
            _make(DATABASE_URL="")


class TestPositiveLimits:

    @pytest.mark.parametrize("field", ["HISTORY_RETENTION_LIMIT", "HISTORY_PAGE_SIZE", "MAX_QUESTION_COUNT", "LLM_TIMEOUT"])
    def test_zero_rejected(self, field):
        with pytest.raises(ValidationError):
            _make(**{field: 0})
