"""
chat-explorer - flatten Claude conversation exports.

A Python library for loading conversations.json exports, directly or from
the zip archive they are delivered in, into ordered message entries.
"""

__version__ = "0.1.0"

from .errors import (
    ArchiveOpenError,
    ChatExplorerError,
    CloseError,
    DecodeError,
    NotFoundError,
    OpenError,
    PathRequiredError,
    WriteError,
)
from .loader import load_entries
from .parser import ConversationEntry, ConversationThread, decode_payload, group_conversation_entries

__all__ = [
    "load_entries",
    "decode_payload",
    "group_conversation_entries",
    "ConversationEntry",
    "ConversationThread",
    "ChatExplorerError",
    "PathRequiredError",
    "OpenError",
    "ArchiveOpenError",
    "NotFoundError",
    "DecodeError",
    "CloseError",
    "WriteError",
]
