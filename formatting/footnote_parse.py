"""
formatting/footnote_parse.py
----------------------------
Footnote extraction and rendering for gallery captions.

Captions use a bracketed footnote style:
- Reference: "[FN1]" anywhere in the body text
- Definition: "[FN1] Some note text" at the start of a line, after the body

Definitions are collected by a two-state scanner over the caption lines.
The first definition line ends the body; every later line is either a new
definition or a continuation of the most recent one.

Rendered references become hover tooltips:
    <span class="footnote-ref" tabindex="0"><sup>1</sup>
    <span class="footnote-tooltip">...</span></span>
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

# Inline reference anywhere in the body: "[FN1]", "[FN 2]"
FOOTNOTE_REFERENCE_REGEX = re.compile(r"\[FN\s*(\d+)\]")

# Definition line: "[FN1] text" (the text may be blank after trimming)
FOOTNOTE_DEFINITION_REGEX = re.compile(r"^\[FN\s*(\d+)\]\s*(.+)$")

# Anything starting like a marker, valid definition or not
FOOTNOTE_PREFIX = "[FN"


class ScanState(Enum):
    """Scanner state while walking caption lines."""
    BODY = "body"
    FOOTNOTES = "footnotes"


@dataclass
class ParsedCaption:
    """Results of splitting a caption into body text and footnotes."""
    body: str
    footnotes: dict[int, str] = field(default_factory=dict)  # number -> text


class FootnoteScanner:
    """
    Line-by-line scanner splitting a caption into body and footnotes.

    BODY -> FOOTNOTES happens on the first definition line and never
    reverses. Continuation lines attach to the footnote defined most
    recently, which is not necessarily the highest number.
    """

    def __init__(self):
        self.state = ScanState.BODY
        self.body_lines: list[str] = []
        self.footnotes: dict[int, str] = {}
        self.last_number: int | None = None

    def feed(self, line: str) -> None:
        """Consume one caption line."""
        match = FOOTNOTE_DEFINITION_REGEX.match(line)
        if match:
            self._define(int(match.group(1)), match.group(2).strip())
        elif self.state is ScanState.BODY:
            self.body_lines.append(line)
        else:
            self._continue(line)

    def _define(self, number: int, text: str) -> None:
        self.state = ScanState.FOOTNOTES
        # Redefinition moves the number to the end of the insertion order
        self.footnotes.pop(number, None)
        self.footnotes[number] = text
        self.last_number = number

    def _continue(self, line: str) -> None:
        stripped = line.strip()
        if not stripped or line.startswith(FOOTNOTE_PREFIX):
            return
        if self.last_number is not None:
            self.footnotes[self.last_number] += " " + stripped

    def result(self) -> ParsedCaption:
        return ParsedCaption(
            body="\n".join(self.body_lines),
            footnotes=dict(self.footnotes),
        )


def parse_caption(text: str) -> ParsedCaption:
    """
    Split a raw caption into body text and footnote definitions.

    Args:
        text: Raw caption, possibly multi-line

    Returns:
        ParsedCaption with the newline-joined body and number -> text map
    """
    scanner = FootnoteScanner()
    for line in text.split("\n"):
        scanner.feed(line)
    return scanner.result()


def strip_footnote_references(text: str) -> str:
    """Remove every [FN#] marker from text."""
    return FOOTNOTE_REFERENCE_REGEX.sub("", text)


def render_reference(number: int, tooltip_html: str) -> str:
    """
    Render a single footnote reference.

    Args:
        number: Footnote number shown in the superscript
        tooltip_html: Rendered definition; empty for a dangling reference

    Returns:
        Tooltip markup, or a plain superscript when there is no definition
    """
    if tooltip_html:
        return (
            f'<span class="footnote-ref" tabindex="0"><sup>{number}</sup>'
            f'<span class="footnote-tooltip">{tooltip_html}</span></span>'
        )
    return f'<sup class="footnote-ref">{number}</sup>'


def render_footnotes(
    body_html: str,
    footnotes: dict[int, str],
    render_definition: Callable[[str], str],
) -> str:
    """
    Replace [FN#] markers in already-escaped body HTML with tooltips.

    Args:
        body_html: Body text after typography and escaping
        footnotes: Raw definitions keyed by number
        render_definition: Turns a raw definition into tooltip HTML

    Returns:
        Body HTML with every marker replaced
    """
    def _replace(match: re.Match) -> str:
        number = int(match.group(1))
        definition = footnotes.get(number)
        tooltip = render_definition(definition) if definition else ""
        return render_reference(number, tooltip)

    return FOOTNOTE_REFERENCE_REGEX.sub(_replace, body_html)
