"""Configuration settings for the workout planner API."""
import os
from typing import Literal, Optional


EnvironmentType = Literal["development", "staging", "production"]

DEFAULT_INFERENCE_MAX_ATTEMPTS = 3
DEFAULT_INFERENCE_RETRY_DELAY_SECONDS = 1.0
DEFAULT_INFERENCE_TIMEOUT_SECONDS = 60.0

_INFERENCE_FUNCTION_PATH = "/functions/v1/ai-trainer"


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


class Settings:
    """Application settings."""

    # Feature flags
    USE_INFERENCE_FOR_WORKOUTS: bool = False

    # Environment
    ENVIRONMENT: EnvironmentType = "development"
    LOG_LEVEL: str = "INFO"

    # Managed backend
    SUPABASE_URL: Optional[str] = None
    SUPABASE_KEY: Optional[str] = None

    # Inference gateway
    INFERENCE_FUNCTION_URL: Optional[str] = None
    INFERENCE_MAX_ATTEMPTS: int = DEFAULT_INFERENCE_MAX_ATTEMPTS
    INFERENCE_RETRY_DELAY_SECONDS: float = DEFAULT_INFERENCE_RETRY_DELAY_SECONDS
    INFERENCE_TIMEOUT_SECONDS: float = DEFAULT_INFERENCE_TIMEOUT_SECONDS

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        # Feature flags
        self.USE_INFERENCE_FOR_WORKOUTS = (
            os.getenv("USE_INFERENCE_FOR_WORKOUTS", "false").lower() == "true"
        )

        # Managed backend (service role key wins over the anon key)
        self.SUPABASE_URL = os.getenv("SUPABASE_URL")
        self.SUPABASE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY") or os.getenv("SUPABASE_ANON_KEY")

        # Inference gateway
        self.INFERENCE_FUNCTION_URL = os.getenv("INFERENCE_FUNCTION_URL")
        if not self.INFERENCE_FUNCTION_URL and self.SUPABASE_URL:
            self.INFERENCE_FUNCTION_URL = self.SUPABASE_URL.rstrip("/") + _INFERENCE_FUNCTION_PATH

        self.INFERENCE_MAX_ATTEMPTS = max(
            1, _env_int("INFERENCE_MAX_ATTEMPTS", DEFAULT_INFERENCE_MAX_ATTEMPTS)
        )
        self.INFERENCE_RETRY_DELAY_SECONDS = max(
            0.0, _env_float("INFERENCE_RETRY_DELAY_SECONDS", DEFAULT_INFERENCE_RETRY_DELAY_SECONDS)
        )
        self.INFERENCE_TIMEOUT_SECONDS = _env_float(
            "INFERENCE_TIMEOUT_SECONDS", DEFAULT_INFERENCE_TIMEOUT_SECONDS
        )


settings = Settings()
