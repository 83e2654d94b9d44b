"""
Export writers for loaded conversations.

Serializes entries and threads to JSON or plain text transcripts.
"""

from .exporter import EntryExporter
from .timestamps import format_message_timestamp

__all__ = ["EntryExporter", "format_message_timestamp"]
