"""memu-client - async Python client for the MemU memory API.

Submit conversations for memory extraction, poll task status, retrieve
relevant memories and list memory categories, with automatic retries and
typed errors.
"""

# Initialize library logging on import; third-party loggers are left alone
from .config.logging_config import setup_logging
setup_logging(quiet_transport=False)

from .__version__ import __version__

from .client import MemUClient, MemUClientProtocol, create_memu_client

from .config import (
    DEFAULT_BASE_URL,
    MemUSettings,
    get_settings,
    get_logger,
)

from .core.exceptions import (
    MemUError,
    ClientError,
    AuthenticationError,
    NotFoundError,
    ValidationError,
    RateLimitError,
    ServerError,
    TransportError,
    SerializationError,
    TaskTimeoutError,
    get_http_status_code,
)

from .models import (
    TaskStatusEnum,
    ConversationMessage,
    MemoryResource,
    MemoryItem,
    MemoryCategory,
    TaskStatus,
    MemorizeRequest,
    MemorizeResult,
    RetrieveRequest,
    RetrieveResult,
    ListCategoriesRequest,
)

from .retry import (
    RetryPolicy,
    RetryConfig,
    DefaultRetryPolicy,
    NoRetryPolicy,
    CustomRetryPolicy,
    create_retry_policy,
)

__all__ = [
    "__version__",
    # Client
    "MemUClient",
    "MemUClientProtocol",
    "create_memu_client",
    # Configuration
    "DEFAULT_BASE_URL",
    "MemUSettings",
    "get_settings",
    "get_logger",
    # Exceptions
    "MemUError",
    "ClientError",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "SerializationError",
    "TaskTimeoutError",
    "get_http_status_code",
    # Models
    "TaskStatusEnum",
    "ConversationMessage",
    "MemoryResource",
    "MemoryItem",
    "MemoryCategory",
    "TaskStatus",
    "MemorizeRequest",
    "MemorizeResult",
    "RetrieveRequest",
    "RetrieveResult",
    "ListCategoriesRequest",
    # Retry policies
    "RetryPolicy",
    "RetryConfig",
    "DefaultRetryPolicy",
    "NoRetryPolicy",
    "CustomRetryPolicy",
    "create_retry_policy",
]
