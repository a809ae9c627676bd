"""Shared fixtures for inference gateway tests."""
from typing import Callable, List
from unittest.mock import AsyncMock

import httpx
import pytest

from workout_planner_api.ai import InferenceGatewayClient
from workout_planner_api.auth import StaticCredentialProvider


ENDPOINT_URL = "https://example.supabase.co/functions/v1/ai-trainer"


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def mock_sleep() -> AsyncMock:
    """Replaces the retry delay so no test sleeps for real."""
    return AsyncMock()


@pytest.fixture
def make_gateway(recorded_requests, mock_sleep) -> Callable[..., InferenceGatewayClient]:
    """
    Build a gateway whose HTTP traffic goes to a list of canned responses.

    Each request consumes the next response; an exception instance in the
    list is raised instead.
    """

    def factory(responses, token="test-token", **kwargs) -> InferenceGatewayClient:
        queue = list(responses)

        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            item = queue.pop(0)
            if isinstance(item, Exception):
                raise item
            return item

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return InferenceGatewayClient(
            StaticCredentialProvider(token),
            endpoint_url=ENDPOINT_URL,
            max_attempts=kwargs.pop("max_attempts", 3),
            retry_delay_seconds=kwargs.pop("retry_delay_seconds", 1.0),
            http_client=client,
            sleep=mock_sleep,
            **kwargs,
        )

    return factory
