"""Markup sanitising for user-submitted text."""

import re

_EXECUTABLE_BLOCK = re.compile(
    r"<\s*(script|style|iframe|object|embed)\b[^>]*>.*?<\s*/\s*\1\s*>",
    re.IGNORECASE | re.DOTALL,
)
_TAG = re.compile(r"</?[a-zA-Z!][^>]*>")
_JS_URL = re.compile(r"javascript\s*:", re.IGNORECASE)


def _strip_once(text: str) -> str:
    cleaned = _EXECUTABLE_BLOCK.sub("", text)
    cleaned = _TAG.sub("", cleaned)
    return _JS_URL.sub("", cleaned)


def strip_markup(text: str) -> str:
    """Remove executable markup from plain text.

    Drops script-like blocks together with their content, then every
    remaining tag, then ``javascript:`` URL schemes. The passes repeat until
    the text stops changing, so fragments joined by a removal are stripped
    too. Result is trimmed.

    Args:
        text: Raw user input

    Returns:
        Plain text safe to store and render
    """
    cleaned = _strip_once(text)
    while cleaned != text:
        text = cleaned
        cleaned = _strip_once(text)
    return cleaned.strip()
