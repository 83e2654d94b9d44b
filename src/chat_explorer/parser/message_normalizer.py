"""Flatten raw conversations into display entries."""

import logging
from typing import List

from .content_extractor import extract_message_text
from .models import ConversationEntry, RawConversation

logger = logging.getLogger(__name__)

UNKNOWN_SPEAKER = "unknown"


def normalize_conversation(conversation: RawConversation) -> List[ConversationEntry]:
    """Build one entry per message that has displayable text."""
    entries = []

    for raw_message in conversation.messages:
        if raw_message is None:
            continue

        message = extract_message_text(raw_message)
        if not message:
            continue

        speaker = raw_message.sender.strip() or UNKNOWN_SPEAKER

        entries.append(ConversationEntry(
            conversation_id=conversation.id,
            conversation_name=conversation.name,
            speaker=speaker,
            message=message,
            message_timestamp=raw_message.timestamp
        ))

    skipped = len(conversation.messages) - len(entries)
    if skipped:
        logger.debug(f"Skipped {skipped} empty messages in conversation {conversation.id!r}")

    return entries
