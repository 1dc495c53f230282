"""
formatting/caption.py
---------------------
Caption formatting pipeline.

Turns a raw feed caption into the HTML fragment shown in a lightbox slide:

    raw caption
      -> split body / footnote definitions   (footnote_parse)
      -> body: typography, then escape
      -> [FN#] markers -> tooltips           (definitions: typography,
                                              escape, term links)
      -> newlines -> <br>

Usage:
    from formatting.caption import CaptionFormatter
    formatter = CaptionFormatter(rules.footnote_links)
    html = formatter.format(raw_caption)
"""

from .escape import escape_html
from .footnote_parse import parse_caption, render_footnotes
from .linker import LinkRule, add_footnote_links
from .preview import get_preview
from .typography import smart_typography

LINE_BREAK = "<br>"


class CaptionFormatter:
    """Formats captions against a fixed, ordered link rule table."""

    def __init__(self, link_rules: list[LinkRule] | None = None):
        self.link_rules = list(link_rules or [])

    def render_definition(self, definition: str) -> str:
        """Footnote definition -> tooltip HTML."""
        return add_footnote_links(
            escape_html(smart_typography(definition)),
            self.link_rules,
        )

    def format(self, text) -> str:
        """
        Format a raw caption as an HTML fragment.

        Args:
            text: Raw caption text

        Returns:
            HTML with tooltips and <br> line breaks; "" for empty input
        """
        if not text or not isinstance(text, str):
            return ""

        parsed = parse_caption(text)
        body_html = escape_html(smart_typography(parsed.body))
        body_html = render_footnotes(body_html, parsed.footnotes, self.render_definition)
        return body_html.replace("\n", LINE_BREAK)

    def preview(self, text) -> str:
        return get_preview(text)


def format_caption(text, link_rules: list[LinkRule] | None = None) -> str:
    """Format a caption with the given link rules (none by default)."""
    return CaptionFormatter(link_rules).format(text)
