"""Tests for bearer token handling and environment configuration."""
import pytest

from workout_planner_api.auth import StaticCredentialProvider, extract_bearer_token
from workout_planner_api.config import Settings


class TestExtractBearerToken:
    @pytest.mark.parametrize(
        "header,token",
        [
            ("Bearer abc", "abc"),
            ("bearer  abc ", "abc"),
            ("Basic abc", None),
            ("Bearer", None),
            ("", None),
            (None, None),
        ],
    )
    def test_extract(self, header, token):
        assert extract_bearer_token(header) == token

    @pytest.mark.asyncio
    async def test_static_provider(self):
        assert await StaticCredentialProvider("tok")() == "tok"
        assert await StaticCredentialProvider(None)() is None


class TestSettings:
    """Environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in (
            "INFERENCE_FUNCTION_URL", "SUPABASE_URL", "INFERENCE_MAX_ATTEMPTS",
            "INFERENCE_RETRY_DELAY_SECONDS", "USE_INFERENCE_FOR_WORKOUTS", "ENVIRONMENT",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.INFERENCE_FUNCTION_URL is None
        assert settings.INFERENCE_MAX_ATTEMPTS == 3
        assert settings.INFERENCE_RETRY_DELAY_SECONDS == 1.0
        assert settings.USE_INFERENCE_FOR_WORKOUTS is False
        assert settings.ENVIRONMENT == "development"

    def test_endpoint_derived_from_supabase_url(self, monkeypatch):
        monkeypatch.delenv("INFERENCE_FUNCTION_URL", raising=False)
        monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co/")

        assert Settings().INFERENCE_FUNCTION_URL == "https://abc.supabase.co/functions/v1/ai-trainer"

    def test_explicit_endpoint_wins(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co")
        monkeypatch.setenv("INFERENCE_FUNCTION_URL", "https://other.test/fn")

        assert Settings().INFERENCE_FUNCTION_URL == "https://other.test/fn"

    def test_service_role_key_wins(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
        monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service")

        assert Settings().SUPABASE_KEY == "service"

    def test_bad_numbers_fall_back(self, monkeypatch):
        monkeypatch.setenv("INFERENCE_MAX_ATTEMPTS", "many")
        monkeypatch.setenv("INFERENCE_RETRY_DELAY_SECONDS", "soon")

        settings = Settings()

        assert settings.INFERENCE_MAX_ATTEMPTS == 3
        assert settings.INFERENCE_RETRY_DELAY_SECONDS == 1.0

    def test_attempts_at_least_one(self, monkeypatch):
        monkeypatch.setenv("INFERENCE_MAX_ATTEMPTS", "0")
        assert Settings().INFERENCE_MAX_ATTEMPTS == 1
