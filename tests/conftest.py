"""Pytest configuration and fixtures for memu-client tests."""

import json
from typing import Any, Callable, List, Optional, Union
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from memu_client.config.settings import MemUSettings, get_settings
from memu_client.http import RequestExecutor
from memu_client.retry import DefaultRetryPolicy, RetryPolicy


TEST_API_KEY = "test-api-key"
TEST_BASE_URL = "https://api.memu.test"

MEMU_ENV_VARS = [
    "MEMU_API_KEY",
    "MEMU_BASE_URL",
    "MEMU_TIMEOUT",
    "MEMU_MAX_RETRIES",
    "MEMU_RETRY_BASE_DELAY",
    "MEMU_RETRY_MAX_DELAY",
    "MEMU_POLL_INTERVAL",
    "MEMU_WAIT_TIMEOUT",
    "MEMU_MAX_CONNECTIONS",
    "MEMU_LOG_LEVEL",
    "MEMU_LOG_VERBOSITY",
    "MEMU_LOG_FORMAT",
]


class ResponseSequence:
    """MockTransport handler that replays responses in order.

    Items may be httpx.Response objects or exceptions to raise. The last item
    is repeated once the sequence is exhausted. Every request is recorded.
    """

    def __init__(self, *items: Union[httpx.Response, Exception]):
        self.items: List[Union[httpx.Response, Exception]] = list(items)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self.items.pop(0) if len(self.items) > 1 else self.items[0]
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def json_body(self, index: int = -1) -> Any:
        """Decoded JSON body of a recorded request."""
        return json.loads(self.requests[index].content)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep MEMU_* variables and cached settings from leaking into tests."""
    for name in MEMU_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Settings that ignore the environment and any .env file."""
    return MemUSettings(_env_file=None)


@pytest.fixture
def responses():
    """The ResponseSequence class, for building scripted transports."""
    return ResponseSequence


@pytest.fixture
def no_sleep():
    """Replace backoff sleeps with an AsyncMock that records the delays."""
    with patch.object(RequestExecutor, "_sleep", new_callable=AsyncMock) as mock_sleep:
        yield mock_sleep


@pytest.fixture
def make_executor() -> Callable[..., RequestExecutor]:
    """Factory for executors backed by an httpx MockTransport."""

    def _make(handler: ResponseSequence, retry_policy: Optional[RetryPolicy] = None) -> RequestExecutor:
        return RequestExecutor(
            api_key=TEST_API_KEY,
            base_url=TEST_BASE_URL,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
            retry_policy=retry_policy or DefaultRetryPolicy(),
        )

    return _make


@pytest.fixture
def mock_http_client() -> Callable[[ResponseSequence], httpx.AsyncClient]:
    """Factory for httpx clients backed by a MockTransport."""

    def _make(handler: ResponseSequence) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def conversation():
    """A valid three-message conversation."""
    return [
        {"role": "user", "content": "I love reading science fiction."},
        {"role": "assistant", "content": "Any favourite authors?"},
        {"role": "user", "content": "Asimov and Le Guin, mostly."},
    ]
