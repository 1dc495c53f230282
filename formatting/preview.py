"""
formatting/preview.py
---------------------
Hover previews for gallery thumbnails.

A preview is the caption's first sentence with footnote markers removed,
capped at PREVIEW_MAX_CHARS. An ellipsis marks text that was cut off.
"""

import re

from .escape import escape_html
from .footnote_parse import strip_footnote_references
from .typography import smart_typography

PREVIEW_MAX_CHARS = 120
ELLIPSIS = "..."

SENTENCE_END_REGEX = re.compile(r"[.!?]")


def first_sentence(text: str) -> str:
    """Text up to, not including, the first sentence terminator."""
    return SENTENCE_END_REGEX.split(text, maxsplit=1)[0]


def get_preview(text) -> str:
    """
    Build the hover preview for a caption.

    Args:
        text: Raw caption text

    Returns:
        Escaped, typography-normalized preview; "" for empty input
    """
    if not text or not isinstance(text, str):
        return ""

    plain = strip_footnote_references(text).strip()
    sentence = first_sentence(plain)

    if len(sentence) > PREVIEW_MAX_CHARS:
        cut = PREVIEW_MAX_CHARS - len(ELLIPSIS)
        preview = sentence[:cut] + ELLIPSIS
    elif len(plain) > len(sentence):
        preview = sentence + ELLIPSIS
    else:
        preview = sentence

    return escape_html(smart_typography(preview))
