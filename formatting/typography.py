"""
formatting/typography.py
------------------------
Smart typography for caption text.

Replaces the ASCII shortcuts authors type in feed captions with their
typographic equivalents:
- " -- " and "--" become em dashes
- straight double quotes become curly opening/closing quotes
- straight single quotes become curly quotes and apostrophes

The substitutions run in a fixed order: later rules only see the straight
characters the earlier rules left behind.
"""

import re

EM_DASH = "—"
LEFT_DOUBLE = "“"
RIGHT_DOUBLE = "”"
LEFT_SINGLE = "‘"
RIGHT_SINGLE = "’"

# Quote preceded by start-of-string, whitespace or an opening bracket
OPENING_DOUBLE_REGEX = re.compile(r'(^|[\s(\[{])"')
# Quote followed by whitespace, punctuation, a closing bracket or end-of-string
CLOSING_DOUBLE_REGEX = re.compile(r'"([\s.,;:!?)\]}]|\Z)')
OPENING_SINGLE_REGEX = re.compile(r"(^|[\s(\[{])'")

# (pattern, replacement) in application order
TYPOGRAPHY_RULES = [
    (re.compile(r" -- "), f" {EM_DASH} "),
    (re.compile(r"--"), EM_DASH),
    (OPENING_DOUBLE_REGEX, rf"\1{LEFT_DOUBLE}"),
    (CLOSING_DOUBLE_REGEX, rf"{RIGHT_DOUBLE}\1"),
    (re.compile(r'"'), RIGHT_DOUBLE),
    (OPENING_SINGLE_REGEX, rf"\1{LEFT_SINGLE}"),
    (re.compile(r"'"), RIGHT_SINGLE),
]


def smart_typography(text) -> str:
    """
    Apply smart typography substitutions to text.

    Args:
        text: Raw caption text

    Returns:
        Text with typographic dashes and quotes, or "" for non-string input
    """
    if not isinstance(text, str):
        return ""

    for pattern, replacement in TYPOGRAPHY_RULES:
        text = pattern.sub(replacement, text)
    return text
