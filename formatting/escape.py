"""
formatting/escape.py
--------------------
HTML escaping for caption fragments.

Only &, <, > and " are escaped. Callers escape once per stage, after
typography, and before injecting any markup of their own.
"""

# Order matters: & first so the other entities are not re-escaped
HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
)


def escape_html(text) -> str:
    """Escape text for inclusion in HTML. Non-string input yields ""."""
    if not isinstance(text, str):
        return ""
    for char, entity in HTML_ESCAPES:
        text = text.replace(char, entity)
    return text
