"""Inference gateway access for the workout planner API."""
from .client_factory import AIClientFactory, AIRequestContext
from .errors import (
    AuthMissingError,
    InferenceError,
    InferenceHTTPError,
    InferenceNetworkError,
    InvalidResponseFormatError,
    RateLimitedError,
    RateLimitSignal,
)
from .gateway import CredentialProvider, InferenceGatewayClient
from .retry import (
    create_async_retrying,
    is_retryable_error,
    retry_async_call,
)

__all__ = [
    "AIClientFactory",
    "AIRequestContext",
    "AuthMissingError",
    "CredentialProvider",
    "InferenceError",
    "InferenceGatewayClient",
    "InferenceHTTPError",
    "InferenceNetworkError",
    "InvalidResponseFormatError",
    "RateLimitedError",
    "RateLimitSignal",
    "create_async_retrying",
    "is_retryable_error",
    "retry_async_call",
]
