"""
Request models with client-side parameter validation.

Validation runs when a model is constructed, so an invalid request fails
with pydantic's ValidationError (a ValueError) before any HTTP call.
"""
from typing import Any, Dict, List, Optional, Union
from pydantic import Field, field_validator, model_validator

from .base import BaseSchema
from .memory import ConversationMessage


MIN_CONVERSATION_MESSAGES = 3


def _require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{field_name} is required")
    return value


class MemorizeRequest(BaseSchema):
    """Request to memorize a conversation."""
    conversation: List[ConversationMessage] = Field(default_factory=list)
    conversation_text: Optional[str] = Field(None, description="Raw conversation text alternative")
    user_id: str
    agent_id: str
    user_name: str = "User"
    agent_name: str = "Assistant"
    session_date: Optional[str] = Field(None, description="Optional ISO session date")

    @field_validator("user_id", "agent_id")
    @classmethod
    def validate_ids(cls, v: str, info) -> str:
        return _require_non_empty(v, info.field_name)

    @field_validator("user_name", "agent_name", mode="before")
    @classmethod
    def default_empty_names(cls, v: Any, info) -> Any:
        # Empty names fall back to the defaults
        if v is None or v == "":
            return cls.model_fields[info.field_name].default
        return v

    @model_validator(mode="after")
    def validate_conversation(self) -> "MemorizeRequest":
        if not self.conversation and self.conversation_text is None:
            raise ValueError("either conversation or conversation_text must be provided")
        if self.conversation and len(self.conversation) < MIN_CONVERSATION_MESSAGES:
            raise ValueError(
                f"conversation must contain at least {MIN_CONVERSATION_MESSAGES} messages"
            )
        return self

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "user_id": self.user_id,
            "agent_id": self.agent_id,
            "user_name": self.user_name,
            "agent_name": self.agent_name,
        }
        if self.conversation:
            payload["conversation"] = [m.to_payload() for m in self.conversation]
        elif self.conversation_text is not None:
            payload["conversation_text"] = self.conversation_text
        if self.session_date is not None:
            payload["session_date"] = self.session_date
        return payload


class RetrieveRequest(BaseSchema):
    """Request to retrieve memories relevant to a query."""
    query: Union[str, List[ConversationMessage]] = Field(
        description="A text query or a conversation to retrieve against"
    )
    user_id: str
    agent_id: str

    @field_validator("user_id", "agent_id")
    @classmethod
    def validate_ids(cls, v: str, info) -> str:
        return _require_non_empty(v, info.field_name)


class ListCategoriesRequest(BaseSchema):
    """Request to list memory categories for a user."""
    user_id: str
    agent_id: Optional[str] = None

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v: str) -> str:
        return _require_non_empty(v, "user_id")
