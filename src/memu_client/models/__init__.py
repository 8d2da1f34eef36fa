"""Request and response models for the MemU API."""

from .base import BaseSchema
from .memory import (
    TaskStatusEnum,
    ConversationMessage,
    MemoryResource,
    MemoryItem,
    MemoryCategory,
    TaskStatus,
    MemorizeResult,
    RetrieveResult,
)
from .requests import (
    MIN_CONVERSATION_MESSAGES,
    MemorizeRequest,
    RetrieveRequest,
    ListCategoriesRequest,
)

__all__ = [
    "BaseSchema",
    "TaskStatusEnum",
    "ConversationMessage",
    "MemoryResource",
    "MemoryItem",
    "MemoryCategory",
    "TaskStatus",
    "MemorizeResult",
    "RetrieveResult",
    "MIN_CONVERSATION_MESSAGES",
    "MemorizeRequest",
    "RetrieveRequest",
    "ListCategoriesRequest",
]
