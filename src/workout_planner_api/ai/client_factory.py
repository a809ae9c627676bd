"""HTTP client factory for the inference function."""
import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from workout_planner_api.config import settings


logger = logging.getLogger(__name__)

# Default client timeout
DEFAULT_TIMEOUT = 60.0


@dataclass
class AIRequestContext:
    """Context for inference requests, used for tracking and observability."""

    user_id: Optional[str] = None
    feature_name: Optional[str] = None
    request_id: Optional[str] = None
    custom_properties: dict[str, str] = field(default_factory=dict)

    def to_tracking_headers(self) -> dict[str, str]:
        """Convert context to request headers understood by the function logs."""
        headers: dict[str, str] = {}

        if self.user_id:
            headers["X-User-Id"] = self.user_id

        if self.feature_name:
            headers["X-Feature-Name"] = self.feature_name

        if self.request_id:
            headers["X-Request-Id"] = self.request_id

        headers["X-Environment"] = settings.ENVIRONMENT

        for key, value in self.custom_properties.items():
            header_key = f"X-Property-{key.replace('_', '-').title()}"
            headers[header_key] = str(value)

        return headers


class AIClientFactory:
    """Factory for HTTP clients that talk to the inference function."""

    @staticmethod
    def create_http_client(
        context: Optional[AIRequestContext] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> httpx.AsyncClient:
        """
        Create an async HTTP client with tracking headers.

        Args:
            context: Request context for tracking and observability
            timeout: Client timeout in seconds

        Returns:
            httpx.AsyncClient; the caller owns and closes it
        """
        headers = {"Content-Type": "application/json"}
        if context:
            headers.update(context.to_tracking_headers())

        logger.debug("Creating inference HTTP client (timeout=%ss)", timeout)
        return httpx.AsyncClient(timeout=timeout, headers=headers)
