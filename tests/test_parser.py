"""Tests for conversations payload decoding."""

import io
import json

import pytest

from chat_explorer import ConversationEntry, DecodeError, decode_payload


def decode(text: str):
    return decode_payload(io.BytesIO(text.encode("utf-8")))


def test_golden_fixture(golden_conversations_json, golden_entries):
    assert decode(golden_conversations_json) == golden_entries


def test_end_to_end_example(sample_conversations_json):
    assert decode(sample_conversations_json) == [
        ConversationEntry(
            conversation_id="conv-1",
            conversation_name="Example",
            speaker="assistant",
            message="Hello from export.",
            message_timestamp="",
        )
    ]


def test_decoding_is_repeatable(golden_conversations_json):
    assert decode(golden_conversations_json) == decode(golden_conversations_json)


def test_text_stream_is_accepted(sample_conversations_json):
    entries = decode_payload(io.StringIO(sample_conversations_json))
    assert [entry.message for entry in entries] == ["Hello from export."]


def test_stream_is_left_open(sample_conversations_json):
    stream = io.BytesIO(sample_conversations_json.encode("utf-8"))
    decode_payload(stream)
    assert not stream.closed


def test_timestamps_come_from_created_at():
    payload = json.dumps([{
        "uuid": "with-timestamps",
        "name": "Timeline",
        "chat_messages": [
            {"sender": "human", "text": "Question", "created_at": "2026-01-02T10:00:00Z"},
            {"sender": "assistant", "text": "Answer", "created_at": "2026-01-02T10:00:42Z"},
        ],
    }])
    assert decode(payload) == [
        ConversationEntry("with-timestamps", "Timeline", "human", "Question", "2026-01-02T10:00:00Z"),
        ConversationEntry("with-timestamps", "Timeline", "assistant", "Answer", "2026-01-02T10:00:42Z"),
    ]


def test_null_messages_do_not_affect_siblings():
    payload = json.dumps([
        {"uuid": "null-messages", "name": "Null Messages", "chat_messages": None},
        {"uuid": "valid-conv", "name": "Valid", "chat_messages": [{"sender": "me", "text": "Hello"}]},
    ])
    assert decode(payload) == [ConversationEntry("valid-conv", "Valid", "me", "Hello", "")]


def test_conversation_order_is_preserved():
    payload = json.dumps([
        {"uuid": f"conv-{index}", "name": "", "chat_messages": [{"sender": "human", "text": str(index)}]}
        for index in range(5)
    ])
    assert [entry.conversation_id for entry in decode(payload)] == [f"conv-{index}" for index in range(5)]


def test_unknown_keys_and_null_elements_are_tolerated():
    payload = json.dumps([
        None,
        {"uuid": "c", "name": "n", "account": {"uuid": "x"}, "chat_messages": [None, {"text": "t", "files": []}]},
    ])
    assert decode(payload) == [ConversationEntry("c", "n", "unknown", "t", "")]


def test_top_level_null_yields_no_entries():
    assert decode("null") == []


def test_empty_array_yields_no_entries():
    assert decode("[]") == []


def test_invalid_json_fails():
    with pytest.raises(DecodeError, match="decode conversations json"):
        decode("{")


@pytest.mark.parametrize("payload", [
    '{"uuid": "not-an-array"}',
    '"just a string"',
    '[1, 2, 3]',
    '[{"uuid": 7, "chat_messages": []}]',
    '[{"uuid": "c", "chat_messages": {"sender": "human"}}]',
    '[{"uuid": "c", "chat_messages": [{"sender": ["human"], "text": "hi"}]}]',
])
def test_shape_mismatch_fails(payload):
    with pytest.raises(DecodeError, match="decode conversations json"):
        decode(payload)


def test_invalid_utf8_fails():
    with pytest.raises(DecodeError):
        decode_payload(io.BytesIO(b'[{"name": "\xff\xfe\xfa"}]'))


def test_hundred_levels_of_content_nesting():
    node = {"text": "Deepest"}
    for _ in range(100):
        node = {"content": [node]}
    payload = json.dumps([{"uuid": "deep", "name": "Deep", "chat_messages": [{"sender": "assistant", "content": node}]}])

    assert decode(payload) == [ConversationEntry("deep", "Deep", "assistant", "Deepest", "")]


def test_only_export_keys_populate_fields():
    payload = json.dumps([{
        "id": "from-id",
        "messages": [{"text": "hi", "timestamp": "t"}],
    }])
    assert decode(payload) == []


def test_created_at_not_timestamp_sets_message_time():
    payload = json.dumps([{
        "uuid": "c",
        "name": "n",
        "chat_messages": [{"sender": "human", "text": "hi", "timestamp": "ignored"}],
    }])
    assert decode(payload) == [ConversationEntry("c", "n", "human", "hi", "")]
