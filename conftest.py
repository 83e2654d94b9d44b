"""Shared pytest fixtures for chat-explorer."""

import json
import zipfile
from pathlib import Path
from typing import Callable, List, Tuple

import pytest

from chat_explorer import ConversationEntry

TESTDATA_DIR = Path(__file__).parent / "tests" / "testdata"

SAMPLE_CONVERSATIONS_JSON = json.dumps([
    {
        "uuid": "conv-1",
        "name": "Example",
        "chat_messages": [
            {"sender": "assistant", "text": "Hello from export."}
        ]
    }
])


@pytest.fixture
def sample_conversations_json() -> str:
    return SAMPLE_CONVERSATIONS_JSON


@pytest.fixture
def golden_conversations_json() -> str:
    return (TESTDATA_DIR / "conversations_golden.json").read_text(encoding="utf-8")


@pytest.fixture
def golden_entries() -> List[ConversationEntry]:
    return [
        ConversationEntry("conv-1", "Setup", "human", "How do I export data?", "2026-01-02T03:04:05Z"),
        ConversationEntry("conv-2", "Setup", "assistant", "Open Settings and click Export data.", "2026-01-02T03:04:30Z"),
        ConversationEntry("conv-3", "Multiline", "assistant", "Line one\nLine two", "2026-01-02T03:05:00Z"),
        ConversationEntry("conv-4", "International", "研究者🧪", "¡Hola! Привет こんにちは 👋", "2026-01-02T03:05:30Z"),
        ConversationEntry("conv-5", "", "unknown", "Fallback speaker + untitled name", "2026-01-02T03:06:00Z"),
    ]


@pytest.fixture
def write_json_fixture(tmp_path: Path) -> Callable[[str, str], str]:
    """Write text content to a file in the test directory."""
    def _write(file_name: str, content: str) -> str:
        path = tmp_path / file_name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def write_zip_fixture(tmp_path: Path) -> Callable[[str, List[Tuple[str, str]]], str]:
    """Write a zip archive whose members are stored in the given order."""
    def _write(file_name: str, members: List[Tuple[str, str]]) -> str:
        path = tmp_path / file_name
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for member_name, content in members:
                archive.writestr(member_name, content)
        return str(path)
    return _write
