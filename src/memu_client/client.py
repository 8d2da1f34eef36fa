"""
Async client for the MemU memory API.

Provides the four API operations (memorize, get_task_status, retrieve,
list_categories) plus task polling on top of the request executor, which owns
retries and error classification.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional, Protocol, Type, TypeVar, Union, runtime_checkable
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError as PydanticValidationError

from .config.constants import APIPaths, HTTPMethod
from .config.settings import MemUSettings, get_settings
from .core.exceptions import MemUError, TaskTimeoutError
from .http import RequestExecutor
from .models import (
    ListCategoriesRequest,
    MemorizeRequest,
    MemorizeResult,
    MemoryCategory,
    RetrieveRequest,
    RetrieveResult,
    TaskStatus,
)
from .retry import DefaultRetryPolicy, RetryConfig, RetryPolicy

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)


@runtime_checkable
class MemUClientProtocol(Protocol):
    """Protocol for MemU API client implementations, e.g. for test doubles."""

    async def memorize(self, request: Optional[MemorizeRequest] = None, **kwargs: Any) -> MemorizeResult:
        """Submit a conversation for memory extraction."""
        ...

    async def get_task_status(self, task_id: str) -> TaskStatus:
        """Get the status of a memorization task."""
        ...

    async def retrieve(self, request: Optional[RetrieveRequest] = None, **kwargs: Any) -> RetrieveResult:
        """Retrieve memories relevant to a query."""
        ...

    async def list_categories(
        self, request: Optional[ListCategoriesRequest] = None, **kwargs: Any
    ) -> List[MemoryCategory]:
        """List memory categories."""
        ...


class MemUClient:
    """
    MemU API client.

    Features:
    - Automatic retries with exponential backoff for transport errors,
      rate limits and 5xx responses
    - Typed exceptions for terminal failures
    - Environment-based configuration via MemUSettings
    - Shared connection pool, safe for concurrent calls

    Example:
        ```python
        async with MemUClient(api_key="...") as client:
            result = await client.memorize(
                conversation_text="User: I love sci-fi novels.",
                user_id="user_123",
                agent_id="agent_123",
            )
            status = await client.wait_for_task(result.task_id)
        ```
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_policy: Optional[RetryPolicy] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[MemUSettings] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: API key; falls back to MEMU_API_KEY
            base_url: API base URL; falls back to MEMU_BASE_URL
            timeout: Request timeout in seconds for the owned HTTP client
            max_retries: Retry ceiling for the default retry policy
            retry_policy: Custom retry policy, overrides max_retries
            http_client: Externally managed httpx client to share; it is not
                closed by this client and keeps its own timeout
            settings: Settings to use instead of the environment

        Raises:
            ValueError: If no API key is available
        """
        self.settings = settings or get_settings()

        if api_key is None:
            api_key = self.settings.get_api_key()
        api_key = (api_key or "").strip()
        if not api_key:
            raise ValueError("API key is required")

        self.base_url = (base_url or self.settings.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else self.settings.timeout
        self.max_retries = max_retries if max_retries is not None else self.settings.max_retries
        self.retry_policy = retry_policy or DefaultRetryPolicy(
            RetryConfig(
                max_retries=self.max_retries,
                base_delay=self.settings.retry_base_delay,
                max_delay=self.settings.retry_max_delay,
            )
        )

        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            limits=httpx.Limits(
                max_keepalive_connections=min(20, self.settings.max_connections // 5),
                max_connections=self.settings.max_connections,
            ),
        )

        self.executor = RequestExecutor(
            api_key=api_key,
            base_url=self.base_url,
            http_client=self.http_client,
            retry_policy=self.retry_policy,
        )

        logger.debug(f"MemU client initialized with base URL: {self.base_url}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client and not self.http_client.is_closed:
            await self.http_client.aclose()
            logger.debug("MemU client closed")

    def __repr__(self) -> str:
        return f"MemUClient(base_url={self.base_url!r}, retry_policy={self.retry_policy!r})"

    @staticmethod
    def _build_request(
        model: Type[RequestT],
        request: Union[RequestT, Dict[str, Any], None],
        kwargs: Dict[str, Any],
        operation: str,
    ) -> RequestT:
        """Accept a request model, a plain dict, or keyword arguments."""
        if request is not None and kwargs:
            raise ValueError(f"{operation}: pass either a request or keyword arguments, not both")
        if request is None:
            if not kwargs:
                raise ValueError(f"{operation}: request is required")
            return model(**kwargs)
        if isinstance(request, model):
            return request
        return model.model_validate(request)

    @staticmethod
    def _parse(parser, response: Dict[str, Any], what: str):
        try:
            return parser(response)
        except PydanticValidationError as e:
            raise MemUError(f"failed to parse {what}: {e}", response=response) from e

    async def memorize(
        self, request: Optional[MemorizeRequest] = None, **kwargs: Any
    ) -> MemorizeResult:
        """
        Submit a conversation for asynchronous memory extraction.

        Args:
            request: MemorizeRequest, or pass its fields as keyword arguments

        Returns:
            The task acknowledgement; poll it with get_task_status/wait_for_task
        """
        request = self._build_request(MemorizeRequest, request, kwargs, "memorize")
        response = await self.executor.execute(
            HTTPMethod.POST.value, APIPaths.MEMORIZE, request.to_payload()
        )
        result = MemorizeResult.from_response(response)
        logger.info(f"Memorize task submitted: {result.task_id} ({result.status})")
        return result

    async def get_task_status(self, task_id: str) -> TaskStatus:
        """Get the status of a memorization task."""
        if not task_id or not task_id.strip():
            raise ValueError("task_id is required")

        path = APIPaths.MEMORIZE_STATUS.format(task_id=quote(task_id, safe=""))
        response = await self.executor.execute(HTTPMethod.GET.value, path)
        if "status" not in response:
            raise MemUError("failed to parse task status: missing status field", response=response)
        return self._parse(TaskStatus.model_validate, response, "task status")

    async def retrieve(
        self, request: Optional[RetrieveRequest] = None, **kwargs: Any
    ) -> RetrieveResult:
        """Retrieve memories relevant to a text or conversation query."""
        request = self._build_request(RetrieveRequest, request, kwargs, "retrieve")
        response = await self.executor.execute(
            HTTPMethod.POST.value, APIPaths.RETRIEVE, request.to_payload()
        )
        return self._parse(RetrieveResult.from_response, response, "retrieve result")

    async def list_categories(
        self, request: Optional[ListCategoriesRequest] = None, **kwargs: Any
    ) -> List[MemoryCategory]:
        """List the memory categories of a user, optionally scoped to an agent."""
        request = self._build_request(ListCategoriesRequest, request, kwargs, "list_categories")
        response = await self.executor.execute(
            HTTPMethod.POST.value, APIPaths.CATEGORIES, request.to_payload()
        )

        categories = response.get("categories")
        if not isinstance(categories, list):
            return []
        return self._parse(
            lambda data: [MemoryCategory.model_validate(item) for item in data],
            categories,
            "categories",
        )

    async def wait_for_task(
        self,
        task_id: str,
        poll_interval: Optional[float] = None,
        timeout: Optional[float] = None,
    ) -> TaskStatus:
        """
        Poll a memorization task until it reaches a terminal status.

        Args:
            task_id: Task to poll
            poll_interval: Seconds between polls (default from settings)
            timeout: Maximum seconds to wait (default from settings)

        Returns:
            The terminal TaskStatus (COMPLETED, SUCCESS or FAILED)

        Raises:
            TaskTimeoutError: If the task is still running at the deadline
        """
        poll_interval = poll_interval if poll_interval is not None else self.settings.poll_interval
        timeout = timeout if timeout is not None else self.settings.wait_timeout

        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout

        while True:
            status = await self.get_task_status(task_id)
            if status.is_terminal:
                logger.info(f"Task {task_id} finished with status {status.status}")
                return status

            remaining = deadline - loop.time()
            if remaining <= 0:
                raise TaskTimeoutError(task_id, timeout, last_status=status.status)

            logger.debug(f"Task {task_id} is {status.status}, polling again in {poll_interval}s")
            await asyncio.sleep(min(poll_interval, remaining))


def create_memu_client(**kwargs) -> MemUClient:
    """Create a MemU client."""
    return MemUClient(**kwargs)
