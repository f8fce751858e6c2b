from __future__ import annotations

import re

from metatag_ai import config

QUOTE_CHARS = "\"'"

# Labels models like to put in front of the answer. Only the first match is removed.
LABEL_PATTERNS = [
    re.compile(r"^\*\*Meta Description[^:]*:\*\*\s*", re.IGNORECASE),
    re.compile(r"^Meta Description[^:]*:\s*", re.IGNORECASE),
    re.compile(r"^\*\*Description[^:]*:\*\*\s*", re.IGNORECASE),
    re.compile(r"^Description[^:]*:\s*", re.IGNORECASE),
]


def strip_quotes(text: str) -> str:
    """Remove at most one leading and one trailing straight quote, each on its own."""
    if text and text[0] in QUOTE_CHARS:
        text = text[1:]
    if text and text[-1] in QUOTE_CHARS:
        text = text[:-1]
    return text


def strip_label(text: str) -> str:
    for pattern in LABEL_PATTERNS:
        stripped, count = pattern.subn("", text, count=1)
        if count:
            return stripped
    return text


def enforce_length(
    text: str,
    max_length: int = config.MAX_DESCRIPTION_LENGTH,
    min_break: int = config.MIN_WORD_BREAK_INDEX,
) -> str:
    """Cut overlong text to ``max_length`` including the ellipsis.

    Prefers a word boundary, but only one past ``min_break`` so the result
    does not come out unnaturally short.
    """
    if len(text) <= max_length:
        return text

    cut = text[: max_length - len(config.ELLIPSIS)]
    last_space = cut.rfind(" ")
    if last_space > min_break:
        cut = cut[:last_space]
    return cut + config.ELLIPSIS


def post_process(raw: str) -> str:
    """Clean a raw model answer into a meta description.

    May return an empty string; the caller decides what that means.
    """
    text = (raw or "").strip()
    text = strip_quotes(text)
    text = strip_label(text)
    text = text.strip()
    return enforce_length(text)
