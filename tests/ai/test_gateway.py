"""Tests for the inference gateway client against a mocked HTTP transport."""
import json
from unittest.mock import call

import httpx
import pytest

from workout_planner_api.ai import (
    AuthMissingError,
    InferenceGatewayClient,
    InferenceHTTPError,
    InferenceNetworkError,
    InvalidResponseFormatError,
    RateLimitedError,
)
from workout_planner_api.auth import StaticCredentialProvider
from workout_planner_api.models import InferenceRequest


def _json_response(status_code: int, body) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(body).encode())


class TestSuccessfulRequests:
    """2xx responses with usable content."""

    @pytest.mark.asyncio
    async def test_returns_content_and_token_usage(self, make_gateway):
        """Content and usage.total_tokens are surfaced."""
        gateway = make_gateway([
            _json_response(200, {"response": "Do ten squats.", "usage": {"total_tokens": 42}})
        ])

        result = await gateway.generate("Suggest an exercise")

        assert result.content == "Do ten squats."
        assert result.token_usage == 42

    @pytest.mark.asyncio
    async def test_missing_usage_leaves_token_usage_empty(self, make_gateway):
        """Usage is optional."""
        gateway = make_gateway([_json_response(200, {"response": "Hello"})])

        result = await gateway.generate("Hi")

        assert result.token_usage is None

    @pytest.mark.asyncio
    async def test_sends_bearer_token_and_wire_payload(self, make_gateway, recorded_requests):
        """The credential goes in the Authorization header; prompts use wire names."""
        gateway = make_gateway([_json_response(200, {"response": "ok"})], token="abc123")

        await gateway.generate("the prompt", "the system prompt")

        request = recorded_requests[0]
        assert request.method == "POST"
        assert request.headers["Authorization"] == "Bearer abc123"
        assert json.loads(request.content) == {
            "prompt": "the prompt",
            "systemPrompt": "the system prompt",
        }

    @pytest.mark.asyncio
    async def test_system_prompt_omitted_when_absent(self, make_gateway, recorded_requests):
        """No systemPrompt key is sent without a system prompt."""
        gateway = make_gateway([_json_response(200, {"response": "ok"})])

        await gateway.send(InferenceRequest(prompt="just this"))

        assert json.loads(recorded_requests[0].content) == {"prompt": "just this"}


class TestAuthentication:
    """Credential handling."""

    @pytest.mark.asyncio
    async def test_missing_credential_raises_before_any_request(self, make_gateway, recorded_requests):
        """No token means AuthMissingError and zero network calls."""
        gateway = make_gateway([_json_response(200, {"response": "unused"})], token=None)

        with pytest.raises(AuthMissingError, match="No auth session"):
            await gateway.generate("Hi")

        assert recorded_requests == []

    @pytest.mark.asyncio
    async def test_empty_credential_counts_as_missing(self, make_gateway, recorded_requests):
        """An empty token is treated the same as none."""
        gateway = make_gateway([_json_response(200, {"response": "unused"})], token="")

        with pytest.raises(AuthMissingError):
            await gateway.generate("Hi")

        assert recorded_requests == []


class TestRateLimiting:
    """429 handling and the bounded retry loop."""

    @pytest.mark.asyncio
    async def test_three_rate_limits_exhaust_retries(self, make_gateway, recorded_requests, mock_sleep):
        """Three 429s in a row surface RateLimitedError after two fixed waits."""
        gateway = make_gateway([_json_response(429, {"error": "slow down"}) for _ in range(3)])

        with pytest.raises(RateLimitedError, match="Rate limited after 3 attempts"):
            await gateway.generate("Hi")

        assert len(recorded_requests) == 3
        assert mock_sleep.await_args_list == [call(1.0), call(1.0)]

    @pytest.mark.asyncio
    async def test_success_after_rate_limit(self, make_gateway, recorded_requests, mock_sleep):
        """A success within the attempt budget is returned."""
        gateway = make_gateway([
            _json_response(429, {}),
            _json_response(200, {"response": "finally"}),
        ])

        result = await gateway.generate("Hi")

        assert result.content == "finally"
        assert len(recorded_requests) == 2
        assert mock_sleep.await_count == 1

    @pytest.mark.asyncio
    async def test_attempt_cap_is_configurable(self, make_gateway, recorded_requests):
        """max_attempts bounds the number of requests."""
        gateway = make_gateway([_json_response(429, {}) for _ in range(5)], max_attempts=5)

        with pytest.raises(RateLimitedError) as exc_info:
            await gateway.generate("Hi")

        assert exc_info.value.attempts == 5
        assert len(recorded_requests) == 5


class TestTerminalFailures:
    """Failures that are never retried."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 401, 500, 503])
    async def test_non_429_status_is_terminal(self, make_gateway, recorded_requests, mock_sleep, status_code):
        """Other error statuses fail on the first attempt."""
        gateway = make_gateway([_json_response(status_code, {"error": "boom"}) for _ in range(3)])

        with pytest.raises(InferenceHTTPError) as exc_info:
            await gateway.generate("Hi")

        assert exc_info.value.status_code == status_code
        assert exc_info.value.detail == "boom"
        assert len(recorded_requests) == 1
        mock_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_transport_error_is_network_error(self, make_gateway, recorded_requests):
        """Connection failures become InferenceNetworkError without retry."""
        gateway = make_gateway([httpx.ConnectError("connection refused")])

        with pytest.raises(InferenceNetworkError):
            await gateway.generate("Hi")

        assert len(recorded_requests) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"response": ""},
            {"response": "   "},
            {"response": None},
            {"response": 42},
            ["not", "an", "object"],
        ],
    )
    async def test_unusable_content_is_invalid_format(self, make_gateway, body):
        """Success status without usable text raises InvalidResponseFormatError."""
        gateway = make_gateway([_json_response(200, body)])

        with pytest.raises(InvalidResponseFormatError):
            await gateway.generate("Hi")

    @pytest.mark.asyncio
    async def test_non_json_body_is_invalid_format(self, make_gateway):
        """A body that is not JSON raises InvalidResponseFormatError."""
        gateway = make_gateway([httpx.Response(200, content=b"<html>oops</html>")])

        with pytest.raises(InvalidResponseFormatError):
            await gateway.generate("Hi")


class TestConfiguration:
    """Construction rules."""

    def test_missing_endpoint_raises(self, monkeypatch):
        """A gateway cannot be built without an endpoint."""
        from workout_planner_api.ai import gateway as gateway_module

        monkeypatch.setattr(gateway_module.settings, "INFERENCE_FUNCTION_URL", None)

        with pytest.raises(ValueError, match="not configured"):
            InferenceGatewayClient(StaticCredentialProvider("token"))

    def test_explicit_endpoint_wins(self):
        """The endpoint argument is used as given."""
        client = InferenceGatewayClient(
            StaticCredentialProvider("token"),
            endpoint_url="https://example.test/fn",
        )
        assert client.endpoint_url == "https://example.test/fn"
