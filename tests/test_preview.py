"""
tests/test_preview.py
---------------------
Unit tests for thumbnail hover previews.

Run with: python -m pytest tests/test_preview.py -v
"""

from formatting.preview import PREVIEW_MAX_CHARS, first_sentence, get_preview


class TestFirstSentence:
    """Tests for first-sentence extraction."""

    def test_stops_at_period(self):
        assert first_sentence("One. Two.") == "One"

    def test_stops_at_question_or_exclamation(self):
        assert first_sentence("Why? Because!") == "Why"
        assert first_sentence("Stop! Now.") == "Stop"

    def test_no_terminator(self):
        assert first_sentence("no end in sight") == "no end in sight"


class TestGetPreview:
    """Tests for preview construction."""

    def test_whole_text_no_ellipsis(self):
        """A single unterminated sentence is shown as-is."""
        assert get_preview("Short and sweet") == "Short and sweet"

    def test_more_text_gets_ellipsis(self):
        """Text after the first sentence is marked with an ellipsis."""
        assert get_preview("First sentence. Second sentence.") == "First sentence..."

    def test_trailing_terminator_counts_as_more_text(self):
        """The terminator itself is text beyond the first sentence."""
        assert get_preview("Only one.") == "Only one..."

    def test_long_sentence_truncated(self):
        """Sentences over the limit are cut to 117 characters plus '...'."""
        text = "a" * 130 + ". And more."
        preview = get_preview(text)
        assert preview == "a" * 117 + "..."
        assert len(preview) == PREVIEW_MAX_CHARS

    def test_exactly_limit_not_truncated(self):
        """A sentence of exactly the limit is not truncated."""
        text = "b" * PREVIEW_MAX_CHARS
        assert get_preview(text) == text

    def test_footnote_markers_stripped(self):
        """Markers are removed before the first sentence is taken."""
        assert get_preview("[FN1]Text here[FN2]. More") == "Text here..."

    def test_footnote_definitions_not_special(self):
        """Definition lines only matter if they come before a terminator."""
        assert get_preview("Body text\n[FN1] note.") == "Body text\n note..."

    def test_typography_then_escape(self):
        """Previews are normalized and escaped."""
        assert get_preview('He said "hi" & left') == "He said “hi” &amp; left"

    def test_whitespace_trimmed(self):
        """Surrounding whitespace is ignored."""
        assert get_preview("   padded   ") == "padded"

    def test_empty_input(self):
        """Empty or missing captions give an empty preview."""
        assert get_preview("") == ""
        assert get_preview(None) == ""
        assert get_preview(7) == ""
