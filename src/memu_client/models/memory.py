"""
Memory models returned by the MemU API.

Resources are the raw source material (conversations, documents, images),
items are discrete memories extracted from them, and categories aggregate
related items into summaries.
"""
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import Field

from .base import BaseSchema


class TaskStatusEnum(str, Enum):
    """Status of an asynchronous memorization task."""
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"

    @classmethod
    def terminal(cls) -> frozenset:
        return frozenset({cls.COMPLETED.value, cls.SUCCESS.value, cls.FAILED.value})


class ConversationMessage(BaseSchema):
    """A single message in a conversation."""
    role: str = Field(description="Sender role, e.g. user, assistant or system")
    content: str = Field(description="Message text")
    name: Optional[str] = Field(None, description="Optional sender name")
    created_at: Optional[str] = Field(None, description="Optional ISO timestamp")


class MemoryResource(BaseSchema):
    """A raw resource stored in MemU."""
    modality: Optional[str] = Field(None, description="Resource type: text, image, audio, ...")
    resource_url: Optional[str] = None
    caption: Optional[str] = None
    content: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None


class MemoryItem(BaseSchema):
    """A discrete memory unit such as a preference, skill or habit."""
    content: Optional[str] = None
    memory_type: Optional[str] = None


class MemoryCategory(BaseSchema):
    """An aggregated memory category (e.g. preferences, work_life)."""
    name: Optional[str] = None
    description: Optional[str] = None
    summary: Optional[str] = None
    user_id: Optional[str] = None
    agent_id: Optional[str] = None


class TaskStatus(BaseSchema):
    """Status information for a memorization task.

    ``status`` is kept as the raw string so statuses added by the API later
    still parse; compare it against TaskStatusEnum members directly.
    """
    task_id: str = ""
    status: str = ""
    message: Optional[str] = None
    detail_info: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TaskStatusEnum.terminal()

    @property
    def is_successful(self) -> bool:
        return self.status in (TaskStatusEnum.COMPLETED, TaskStatusEnum.SUCCESS)


class MemorizeResult(BaseSchema):
    """Result of a memorize call.

    The API only acknowledges the task; use get_task_status or retrieve to
    read the extracted memories.
    """
    task_id: Optional[str] = None
    status: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def from_response(cls, response: Dict[str, Any]) -> "MemorizeResult":
        # Only string values are taken over
        return cls(**{
            key: response[key]
            for key in ("task_id", "status", "message")
            if isinstance(response.get(key), str)
        })


class RetrieveResult(BaseSchema):
    """Result of a memory retrieval."""
    rewritten_query: Optional[str] = None
    categories: List[MemoryCategory] = Field(default_factory=list)
    items: List[MemoryItem] = Field(default_factory=list)
    resources: List[MemoryResource] = Field(default_factory=list)

    @classmethod
    def from_response(cls, response: Dict[str, Any]) -> "RetrieveResult":
        data: Dict[str, Any] = {}
        for key in ("categories", "items", "resources"):
            if isinstance(response.get(key), list):
                data[key] = response[key]
        if isinstance(response.get("rewritten_query"), str):
            data["rewritten_query"] = response["rewritten_query"]
        return cls.model_validate(data)
