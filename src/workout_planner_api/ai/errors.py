"""Failures raised by the inference gateway client."""
from typing import Optional


class InferenceError(RuntimeError):
    """Base class for terminal inference gateway failures."""


class AuthMissingError(InferenceError):
    """No bearer credential was available; no request was sent."""

    def __init__(self, message: str = "No auth session"):
        super().__init__(message)


class InferenceNetworkError(InferenceError):
    """Transport-level failure talking to the inference function."""


class InferenceHTTPError(InferenceError):
    """The inference function answered with a non-success, non-429 status."""

    def __init__(self, status_code: int, detail: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail
        message = f"Inference request failed with status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class RateLimitSignal(InferenceError):
    """A single 429 answer. Consumed by the retry loop, never surfaced."""


class RateLimitedError(InferenceError):
    """Every attempt was rate limited."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Rate limited after {attempts} attempts")


class InvalidResponseFormatError(InferenceError):
    """Successful status, but the body carried no usable `response` text."""

    def __init__(self, message: str = "Invalid response format from AI service"):
        super().__init__(message)
