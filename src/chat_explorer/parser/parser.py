"""
Payload decoding for conversation exports.

Reads a conversations.json document from an open stream and flattens every
conversation it holds into ConversationEntry records, in document order.
"""

import json
import logging
from typing import IO, Any, List

from pydantic import ValidationError

from ..errors import DecodeError
from .message_normalizer import normalize_conversation
from .models import ConversationEntry, ConversationsPayload

logger = logging.getLogger(__name__)


def decode_payload(stream: IO[Any]) -> List[ConversationEntry]:
    """Decode a conversations JSON array from a binary or text stream.

    The stream is left open; closing it is the caller's job.

    Raises:
        DecodeError: the stream is not a JSON array of conversation objects.
    """
    try:
        data = json.load(stream)
        conversations = ConversationsPayload.validate_python(data) if data is not None else []
    except ValidationError as e:
        raise DecodeError(f"decode conversations json: unexpected structure: {e}") from e
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"decode conversations json: {e}") from e

    entries = []
    for conversation in conversations:
        if conversation is None:
            continue
        entries.extend(normalize_conversation(conversation))

    logger.debug(f"Decoded {len(entries)} entries from {len(conversations)} conversations")
    return entries
