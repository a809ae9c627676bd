"""Unit tests for AIRequestContext headers and the HTTP client factory."""
from unittest.mock import patch

import pytest

from workout_planner_api.ai.client_factory import AIClientFactory, AIRequestContext


class TestAIRequestContextHeaders:
    """Tracking header generation from AIRequestContext."""

    def test_empty_context_includes_environment_only(self):
        """Empty context should still include environment header."""
        with patch("workout_planner_api.ai.client_factory.settings") as mock_settings:
            mock_settings.ENVIRONMENT = "production"

            headers = AIRequestContext().to_tracking_headers()

            assert headers == {"X-Environment": "production"}

    @pytest.mark.parametrize(
        "field,value,header",
        [
            ("user_id", "user_123", "X-User-Id"),
            ("feature_name", "workout_generator", "X-Feature-Name"),
            ("request_id", "req_xyz789", "X-Request-Id"),
        ],
    )
    def test_fields_map_to_headers(self, field, value, header):
        with patch("workout_planner_api.ai.client_factory.settings") as mock_settings:
            mock_settings.ENVIRONMENT = "development"

            headers = AIRequestContext(**{field: value}).to_tracking_headers()

            assert headers[header] == value

    def test_custom_properties_are_prefixed(self):
        """custom_properties keys are title-cased with dashes."""
        with patch("workout_planner_api.ai.client_factory.settings") as mock_settings:
            mock_settings.ENVIRONMENT = "development"

            context = AIRequestContext(custom_properties={"plan_type": "work"})
            headers = context.to_tracking_headers()

            assert headers["X-Property-Plan-Type"] == "work"


class TestAIClientFactory:
    """HTTP client construction."""

    @pytest.mark.asyncio
    async def test_client_carries_json_and_tracking_headers(self):
        context = AIRequestContext(user_id="user_123")

        async with AIClientFactory.create_http_client(context, timeout=5.0) as client:
            assert client.headers["Content-Type"] == "application/json"
            assert client.headers["X-User-Id"] == "user_123"
            assert client.timeout.read == 5.0

    @pytest.mark.asyncio
    async def test_client_without_context(self):
        async with AIClientFactory.create_http_client() as client:
            assert "X-User-Id" not in client.headers
