"""
EntryExporter: writes loaded conversations to disk.

Entries can be written flat or grouped into threads, either as JSON with the
export's camelCase keys or as a plain text transcript.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..parser.models import ConversationEntry, ConversationThread
from .timestamps import format_message_timestamp

logger = logging.getLogger(__name__)

Record = Union[ConversationEntry, ConversationThread]


class EntryExporter:
    """Saves entries and threads under a single output directory."""

    def __init__(self, output_dir: Optional[str] = None):
        """Initialize exporter with output directory."""
        self.output_dir = Path(output_dir) if output_dir else Path.cwd()
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def save_to_json(self, records: Sequence[Record], output_filename: Optional[str] = None) -> str:
        """Save entries or threads to a JSON file, returning its path."""
        if not records:
            logger.warning("No records to save")
            return ""

        if not output_filename:
            kind = 'threads' if isinstance(records[0], ConversationThread) else 'entries'
            output_filename = f"{kind}_{self._timestamp()}.json"

        payload = [record.to_dict() for record in records]
        return self._write(output_filename, json.dumps(payload, indent=2, ensure_ascii=False))

    def save_to_text(self, threads: Sequence[ConversationThread], output_filename: Optional[str] = None) -> str:
        """Save threads as a readable transcript, returning its path."""
        if not threads:
            logger.warning("No threads to save")
            return ""

        if not output_filename:
            output_filename = f"transcript_{self._timestamp()}.txt"

        return self._write(output_filename, render_transcript(threads))

    def _timestamp(self) -> str:
        return datetime.now().strftime("%Y%m%d_%H%M%S")

    def _write(self, output_filename: str, content: str) -> str:
        output_path = Path(output_filename)
        if not output_path.is_absolute():
            output_path = self.output_dir / output_path.name

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)

            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(content)
            logger.info(f"Saved export to {output_path}")
            return str(output_path)
        except OSError as e:
            logger.error(f"Error saving export: {e}")
            return ""


def render_transcript(threads: Sequence[ConversationThread]) -> str:
    """Render threads as plain text, one block per message."""
    blocks: List[str] = []

    for thread in threads:
        header = f"# {thread.conversation_name}"
        if thread.conversation_id:
            header += f" ({thread.conversation_id})"
        blocks.append(header)

        for entry in thread.messages:
            when = format_message_timestamp(entry.message_timestamp)
            blocks.append(f"[{when}] {entry.speaker}:\n{entry.message}")

    return "\n\n".join(blocks) + "\n"
