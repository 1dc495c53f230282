"""
formatting/linker.py
--------------------
Term hyperlinking for footnote text.

Footnote tooltips can point readers at outside material: a rule table maps
literal phrases to URLs. Rules run against footnote text only, after
typography and escaping, so a phrase has to be written the way it appears
at that point (curly quotes, &amp; entities).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkRule:
    """A phrase to hyperlink inside footnote text."""
    term: str  # literal, case-sensitive, post-typography/escaping
    url: str


def render_link(term: str, url: str) -> str:
    """Anchor opening url in a new browsing context."""
    return f'<a href="{url}" target="_blank" rel="noopener">{term}</a>'


def add_footnote_links(text: str, rules: list[LinkRule]) -> str:
    """
    Link the first occurrence of each rule's term.

    Rules are applied in list order, each to the output of the previous
    one. Only the first match of a term is linked; later occurrences are
    left alone.

    Args:
        text: Escaped, typography-normalized footnote text
        rules: Ordered link rules

    Returns:
        Text with anchors injected
    """
    for rule in rules:
        if rule.term:
            text = text.replace(rule.term, render_link(rule.term, rule.url), 1)
    return text
