"""Group flat conversation entries back into threads."""

import logging
from typing import Dict, List

from .models import ConversationEntry, ConversationThread

logger = logging.getLogger(__name__)

UNTITLED_CONVERSATION_NAME = "Untitled conversation"


def normalize_conversation_name(name: str) -> str:
    """Trim a conversation name, substituting a placeholder when blank."""
    return name.strip() or UNTITLED_CONVERSATION_NAME


def build_conversation_key(entry: ConversationEntry) -> str:
    """Key entries by conversation id, or by name when the id is blank."""
    conversation_id = entry.conversation_id.strip()
    if conversation_id:
        return f"id:{conversation_id}"

    return f"name:{normalize_conversation_name(entry.conversation_name)}"


def group_conversation_entries(entries: List[ConversationEntry]) -> List[ConversationThread]:
    """Collect entries into threads ordered by first appearance."""
    threads: List[ConversationThread] = []
    thread_index_by_key: Dict[str, int] = {}

    for entry in entries:
        key = build_conversation_key(entry)
        entry_name = normalize_conversation_name(entry.conversation_name)

        if key not in thread_index_by_key:
            thread_index_by_key[key] = len(threads)
            threads.append(ConversationThread(
                conversation_id=entry.conversation_id.strip(),
                conversation_name=entry_name,
                messages=[entry]
            ))
            continue

        thread = threads[thread_index_by_key[key]]
        # A later entry may carry the name the first one was missing
        if thread.conversation_name == UNTITLED_CONVERSATION_NAME and entry_name != UNTITLED_CONVERSATION_NAME:
            thread.conversation_name = entry_name
        thread.messages.append(entry)

    logger.debug(f"Grouped {len(entries)} entries into {len(threads)} threads")
    return threads
