"""
Conversation export parsing library.

Decodes Claude conversations.json payloads into flat, ordered message
entries and regroups them into threads for display.
"""

from .models import ConversationEntry, ConversationThread
from .parser import decode_payload
from .thread_grouper import group_conversation_entries

__all__ = ["ConversationEntry", "ConversationThread", "decode_payload", "group_conversation_entries"]
