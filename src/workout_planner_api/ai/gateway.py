"""Client for the external text-generation function."""
import logging
from typing import Awaitable, Callable, Optional

import httpx

from workout_planner_api.ai.client_factory import AIClientFactory, AIRequestContext
from workout_planner_api.ai.errors import (
    AuthMissingError,
    InferenceHTTPError,
    InferenceNetworkError,
    InvalidResponseFormatError,
    RateLimitSignal,
)
from workout_planner_api.ai.retry import SleepFunc, retry_async_call
from workout_planner_api.config import settings
from workout_planner_api.models import InferenceRequest, InferenceResponse


logger = logging.getLogger(__name__)

CredentialProvider = Callable[[], Awaitable[Optional[str]]]

_RATE_LIMIT_STATUS = 429


def _error_detail(response: httpx.Response) -> Optional[str]:
    """Best-effort error message from a failed response."""
    try:
        data = response.json()
    except ValueError:
        return response.text[:200] or None
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return None


class InferenceGatewayClient:
    """
    Issues one logical inference request with rate-limit retries.

    The client holds no mutable state besides the injected collaborators, so a
    single instance may serve concurrent requests.
    """

    def __init__(
        self,
        credential_provider: CredentialProvider,
        endpoint_url: Optional[str] = None,
        max_attempts: Optional[int] = None,
        retry_delay_seconds: Optional[float] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        context: Optional[AIRequestContext] = None,
        sleep: Optional[SleepFunc] = None,
    ):
        endpoint_url = endpoint_url or settings.INFERENCE_FUNCTION_URL
        if not endpoint_url:
            raise ValueError(
                "Inference endpoint not configured. Set INFERENCE_FUNCTION_URL or SUPABASE_URL."
            )
        self.endpoint_url = endpoint_url
        self.max_attempts = max_attempts if max_attempts is not None else settings.INFERENCE_MAX_ATTEMPTS
        self.retry_delay_seconds = (
            retry_delay_seconds
            if retry_delay_seconds is not None
            else settings.INFERENCE_RETRY_DELAY_SECONDS
        )
        self.timeout = timeout if timeout is not None else settings.INFERENCE_TIMEOUT_SECONDS
        self.context = context
        self._credential_provider = credential_provider
        self._http_client = http_client
        self._sleep = sleep

    async def generate(self, prompt: str, system_prompt: Optional[str] = None) -> InferenceResponse:
        """Convenience wrapper around `send`."""
        return await self.send(InferenceRequest(prompt=prompt, system_prompt=system_prompt))

    async def send(self, request: InferenceRequest) -> InferenceResponse:
        """
        Send a request to the inference function.

        Args:
            request: Prompt and optional system prompt

        Returns:
            InferenceResponse whose content is non-empty text

        Raises:
            AuthMissingError: No credential; nothing was sent
            InferenceNetworkError: Transport failure
            InferenceHTTPError: Non-success status other than 429
            RateLimitedError: 429 on every attempt
            InvalidResponseFormatError: Success status without usable content
        """
        token = await self._credential_provider()
        if not token:
            logger.error("Inference request rejected: no auth session")
            raise AuthMissingError()

        headers = {"Authorization": f"Bearer {token}"}
        payload = request.to_payload()

        if self._http_client is not None:
            return await self._send_with_retry(self._http_client, headers, payload)

        async with AIClientFactory.create_http_client(self.context, self.timeout) as client:
            return await self._send_with_retry(client, headers, payload)

    async def _send_with_retry(
        self,
        client: httpx.AsyncClient,
        headers: dict,
        payload: dict,
    ) -> InferenceResponse:
        return await retry_async_call(
            self._post_once,
            client,
            headers,
            payload,
            max_attempts=self.max_attempts,
            delay_seconds=self.retry_delay_seconds,
            sleep=self._sleep,
        )

    async def _post_once(
        self,
        client: httpx.AsyncClient,
        headers: dict,
        payload: dict,
    ) -> InferenceResponse:
        try:
            response = await client.post(self.endpoint_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Inference transport failure: {e}")
            raise InferenceNetworkError(f"Inference request failed: {e}") from e

        logger.debug("Inference response status: %s", response.status_code)

        if response.status_code == _RATE_LIMIT_STATUS:
            raise RateLimitSignal("Inference function returned 429")

        if not response.is_success:
            detail = _error_detail(response)
            logger.error(f"Inference function returned {response.status_code}: {detail}")
            raise InferenceHTTPError(response.status_code, detail)

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Inference response body is not JSON")
            raise InvalidResponseFormatError() from e

        content = data.get("response") if isinstance(data, dict) else None
        if not isinstance(content, str) or not content.strip():
            logger.error("Inference response has no content")
            raise InvalidResponseFormatError()

        usage = data.get("usage")
        token_usage = usage.get("total_tokens") if isinstance(usage, dict) else None
        if isinstance(token_usage, bool) or not isinstance(token_usage, int):
            token_usage = None

        return InferenceResponse(content=content, token_usage=token_usage)
