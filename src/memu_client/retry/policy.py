"""
Retry policies for the request executor.

A policy answers two questions independently: whether a failed attempt
should be retried, and how long to wait before the next one. Splitting the
decision from the delay lets callers replace either half, e.g. keep the
exponential curve but change which status codes are retryable.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Optional, Protocol, runtime_checkable

from ..config.constants import Defaults, RETRYABLE_STATUS_CODES

logger = logging.getLogger(__name__)


CustomRetryFunc = Callable[[int, int, Optional[BaseException]], bool]
CustomBackoffFunc = Callable[[int], float]


@runtime_checkable
class RetryPolicy(Protocol):
    """Protocol for retry policy implementations."""

    def should_retry(
        self, attempt: int, status_code: int, error: Optional[BaseException]
    ) -> bool:
        """Decide whether attempt ``attempt`` (0-based) should be retried.

        ``status_code`` is 0 when no response was received, in which case
        ``error`` holds the transport exception.
        """
        ...

    def get_backoff(self, attempt: int) -> float:
        """Return the delay in seconds before retrying attempt ``attempt``."""
        ...


@dataclass(frozen=True)
class RetryConfig:
    """
    Retry configuration.

    Attributes:
        max_retries: Maximum number of retries after the first attempt
        base_delay: Delay before the first retry, in seconds
        max_delay: Ceiling applied to every computed delay, in seconds
        retryable_status_codes: Status codes that trigger a retry
    """

    max_retries: int = Defaults.MAX_RETRIES
    base_delay: float = Defaults.RETRY_BASE_DELAY
    max_delay: float = Defaults.RETRY_MAX_DELAY
    retryable_status_codes: FrozenSet[int] = field(default_factory=lambda: RETRYABLE_STATUS_CODES)

    def __post_init__(self):
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.base_delay < 0 or self.max_delay < 0:
            raise ValueError("retry delays must be >= 0")
        # Accept any iterable of codes from callers
        object.__setattr__(self, "retryable_status_codes", frozenset(self.retryable_status_codes))


class DefaultRetryPolicy:
    """Exponential backoff with a ceiling, retrying transport errors and retryable statuses."""

    def __init__(self, config: Optional[RetryConfig] = None):
        self.config = config or RetryConfig()

    @property
    def max_retries(self) -> int:
        return self.config.max_retries

    def should_retry(
        self, attempt: int, status_code: int, error: Optional[BaseException]
    ) -> bool:
        if attempt >= self.config.max_retries:
            return False

        # Network errors are always worth another try
        if error is not None:
            return True

        if status_code > 0:
            return status_code in self.config.retryable_status_codes

        return False

    def get_backoff(self, attempt: int) -> float:
        # base_delay * 2^attempt, capped; saturates instead of overflowing
        try:
            delay = math.ldexp(self.config.base_delay, attempt)
        except OverflowError:
            return self.config.max_delay
        return min(delay, self.config.max_delay)

    def __repr__(self) -> str:
        return f"DefaultRetryPolicy({self.config!r})"


class NoRetryPolicy:
    """Policy that never retries."""

    max_retries = 0

    def should_retry(
        self, attempt: int, status_code: int, error: Optional[BaseException]
    ) -> bool:
        return False

    def get_backoff(self, attempt: int) -> float:
        return 0.0

    def __repr__(self) -> str:
        return "NoRetryPolicy()"


class CustomRetryPolicy:
    """
    Policy built from caller-supplied functions.

    ``should_retry`` is only consulted below the ``max_retries`` ceiling, so a
    custom decision function can never cause an unbounded retry loop.
    """

    def __init__(
        self,
        max_retries: int,
        should_retry: CustomRetryFunc,
        get_backoff: CustomBackoffFunc,
    ):
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self.max_retries = max_retries
        self._should_retry = should_retry
        self._get_backoff = get_backoff

    def should_retry(
        self, attempt: int, status_code: int, error: Optional[BaseException]
    ) -> bool:
        if attempt >= self.max_retries:
            return False
        return bool(self._should_retry(attempt, status_code, error))

    def get_backoff(self, attempt: int) -> float:
        return float(self._get_backoff(attempt))

    def __repr__(self) -> str:
        return f"CustomRetryPolicy(max_retries={self.max_retries})"


def create_retry_policy(
    max_retries: int = Defaults.MAX_RETRIES,
    base_delay: float = Defaults.RETRY_BASE_DELAY,
    max_delay: float = Defaults.RETRY_MAX_DELAY,
) -> RetryPolicy:
    """Create the default exponential policy from scalar settings."""
    return DefaultRetryPolicy(
        RetryConfig(max_retries=max_retries, base_delay=base_delay, max_delay=max_delay)
    )
