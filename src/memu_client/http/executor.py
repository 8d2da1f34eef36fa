"""
Request executor for the MemU API.

Turns one logical API call into one or more HTTP attempts. Each attempt is
sent through a shared ``httpx.AsyncClient``; the outcome is classified as a
transport failure, rate limit, server error, client error or success, and the
configured retry policy decides whether to back off and try again.

Only the terminal outcome leaves ``execute``: the decoded payload on success,
or a MemUError subclass otherwise. Cancellation (``asyncio.CancelledError``)
is never intercepted, so a caller's ``asyncio.timeout``/``wait_for`` or
``task.cancel()`` aborts the call during a send or a backoff sleep.
"""
import asyncio
import json
import logging
import math
from typing import Any, Dict, Mapping, Optional

import httpx

from ..config.constants import USER_AGENT
from ..core.exceptions import (
    RateLimitError,
    SerializationError,
    ServerError,
    TransportError,
    classify_http_error,
)
from ..retry import RetryPolicy

logger = logging.getLogger(__name__)


def decode_body(text: str) -> Optional[Dict[str, Any]]:
    """Decode a response body into a mapping.

    A JSON object is returned as-is. Anything else (invalid JSON, or JSON that
    is not an object) is wrapped as ``{"raw": text}`` so the caller keeps the
    original text for debugging. An empty body decodes to None.
    """
    if not text:
        return None
    try:
        decoded = json.loads(text)
    except ValueError:
        return {"raw": text}
    if isinstance(decoded, dict):
        return decoded
    return {"raw": text}


def parse_retry_after(value: Optional[str]) -> Optional[float]:
    """Parse a ``Retry-After`` header given in (possibly fractional) seconds.

    Returns None when the header is absent or not a finite, non-negative number.
    """
    if value is None:
        return None
    try:
        seconds = float(value.strip())
    except ValueError:
        return None
    if not math.isfinite(seconds) or seconds < 0:
        return None
    return seconds


class RequestExecutor:
    """
    Executes API requests with retry, backoff and error classification.

    The executor holds only read-only configuration and a shared httpx client,
    so a single instance is safe to use from many concurrent tasks.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        http_client: httpx.AsyncClient,
        retry_policy: RetryPolicy,
    ):
        """
        Initialize the executor.

        Args:
            api_key: API key sent as a bearer token
            base_url: API base URL without trailing slash
            http_client: Shared async HTTP client
            retry_policy: Policy consulted after every failed attempt
        """
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client
        self.retry_policy = retry_policy

    @property
    def headers(self) -> Dict[str, str]:
        """Default headers for API requests."""
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    async def _sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)

    def _serialize(self, body: Any) -> Optional[bytes]:
        if body is None:
            return None
        try:
            return json.dumps(body, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"failed to serialize request body: {e}") from e

    async def execute(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Execute one logical API call.

        Args:
            method: HTTP method
            path: Path appended to the base URL
            body: JSON-serializable request body
            params: Optional query parameters

        Returns:
            Decoded JSON object from the successful response

        Raises:
            SerializationError: body is not JSON-serializable
            TransportError: no response after the allowed attempts
            RateLimitError: still rate limited when retries ran out
            ServerError: 5xx response when retries ran out
            ClientError: any other 4xx response (or a subclass of it)
        """
        content = self._serialize(body)
        url = self.base_url + path

        request_kwargs: Dict[str, Any] = {"headers": self.headers}
        if content is not None:
            request_kwargs["content"] = content
        if params:
            request_kwargs["params"] = dict(params)

        attempt = 0
        while True:
            try:
                response = await self.http_client.request(method, url, **request_kwargs)
            except httpx.RequestError as e:
                if self.retry_policy.should_retry(attempt, 0, e):
                    delay = self.retry_policy.get_backoff(attempt)
                    logger.debug(
                        f"{method} {path} transport error, retrying in {delay}s "
                        f"(attempt {attempt + 1}): {e!r}"
                    )
                    await self._sleep(delay)
                    attempt += 1
                    continue
                logger.warning(f"{method} {path} failed after {attempt + 1} attempts: {e!r}")
                raise TransportError(
                    f"request failed after {attempt + 1} attempts: {e}",
                    attempts=attempt + 1,
                ) from e

            status_code = response.status_code
            text = response.text
            result = decode_body(text)

            if status_code == 429:
                retry_after = parse_retry_after(response.headers.get("Retry-After"))
                wait = retry_after if retry_after is not None else self.retry_policy.get_backoff(attempt)

                if self.retry_policy.should_retry(attempt, status_code, None):
                    logger.debug(
                        f"{method} {path} rate limited, retrying in {wait}s (attempt {attempt + 1})"
                    )
                    await self._sleep(wait)
                    attempt += 1
                    continue

                logger.warning(f"{method} {path} rate limited after {attempt + 1} attempts")
                raise RateLimitError(
                    "rate limit exceeded",
                    retry_after=wait,
                    status_code=status_code,
                    response=result,
                )

            if status_code >= 500:
                if self.retry_policy.should_retry(attempt, status_code, None):
                    delay = self.retry_policy.get_backoff(attempt)
                    logger.debug(
                        f"{method} {path} returned {status_code}, retrying in {delay}s "
                        f"(attempt {attempt + 1})"
                    )
                    await self._sleep(delay)
                    attempt += 1
                    continue

                message = f"server error: {status_code}"
                if text:
                    message = f"server error: {status_code}, response: {text}"
                logger.warning(f"{method} {path} returned {status_code} after {attempt + 1} attempts")
                raise ServerError(message, status_code=status_code, response=result)

            if status_code >= 400:
                logger.debug(f"{method} {path} returned {status_code}")
                raise classify_http_error(status_code, path, result)

            return result if result is not None else {}
