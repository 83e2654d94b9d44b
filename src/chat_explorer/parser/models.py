"""
Data shapes for conversation exports.

Raw models validate the export JSON as it arrives; ConversationEntry and
ConversationThread are what the rest of the package hands around.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, field_validator


class RawMessage(BaseModel):
    """One element of a conversation's ``chat_messages`` array."""

    model_config = ConfigDict(frozen=True)

    sender: StrictStr = ""
    text: StrictStr = ""
    content: Any = None
    timestamp: StrictStr = Field(default="", alias="created_at")

    @field_validator("sender", "text", "timestamp", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class RawConversation(BaseModel):
    """One element of the top-level conversations array."""

    model_config = ConfigDict(frozen=True)

    id: StrictStr = Field(default="", alias="uuid")
    name: StrictStr = ""
    messages: List[Optional[RawMessage]] = Field(default_factory=list, alias="chat_messages")

    @field_validator("id", "name", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("messages", mode="before")
    @classmethod
    def null_as_no_messages(cls, value: Any) -> Any:
        return [] if value is None else value


# Null elements are tolerated and stand for empty conversations.
ConversationsPayload = TypeAdapter(List[Optional[RawConversation]])


@dataclass(frozen=True)
class ConversationEntry:
    """
    A single displayable message, flattened with its conversation context.

    - conversation_id / conversation_name: copied verbatim from the export
    - speaker: trimmed sender, or "unknown"
    - message: extracted text, never empty
    - message_timestamp: raw ``created_at`` string, possibly empty
    """

    conversation_id: str
    conversation_name: str
    speaker: str
    message: str
    message_timestamp: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            'conversationId': self.conversation_id,
            'conversationName': self.conversation_name,
            'speaker': self.speaker,
            'message': self.message,
            'messageTimestamp': self.message_timestamp,
        }


@dataclass
class ConversationThread:
    """Entries of one conversation, in the order they were loaded."""

    conversation_id: str
    conversation_name: str
    messages: List[ConversationEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'conversationId': self.conversation_id,
            'conversationName': self.conversation_name,
            'messages': [entry.to_dict() for entry in self.messages],
        }
