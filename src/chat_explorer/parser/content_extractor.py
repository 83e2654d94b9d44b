"""Extract display text from export message content."""

from typing import Any, List

from .models import RawMessage


def extract_message_text(message: RawMessage) -> str:
    """Return the text to display for a message, or "" if it has none.

    A non-blank ``text`` field always wins. Otherwise every text fragment
    found in ``content`` is joined with newlines.
    """
    text = message.text.strip()
    if text:
        return text

    return "\n".join(collect_text_fragments(message.content))


def collect_text_fragments(node: Any) -> List[str]:
    """Collect trimmed, non-empty text fragments from a content node.

    Strings are fragments themselves, lists are walked in order, and dicts
    contribute their ``text`` value followed by whatever their ``content``
    holds. Numbers, booleans and nulls contribute nothing.
    """
    fragments = []
    # Children are pushed in reverse so they pop in document order.
    stack = [node]

    while stack:
        current = stack.pop()

        if isinstance(current, str):
            trimmed = current.strip()
            if trimmed:
                fragments.append(trimmed)
        elif isinstance(current, list):
            stack.extend(reversed(current))
        elif isinstance(current, dict):
            text = current.get('text')
            if isinstance(text, str):
                trimmed = text.strip()
                if trimmed:
                    fragments.append(trimmed)
            if 'content' in current:
                stack.append(current['content'])

    return fragments
