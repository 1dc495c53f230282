"""
tests/test_typography.py
------------------------
Unit tests for smart typography and HTML escaping.

Run with: python -m pytest tests/test_typography.py -v
"""

import pytest

from formatting.escape import escape_html
from formatting.typography import smart_typography


class TestDashes:
    """Tests for em dash substitution."""

    def test_spaced_double_hyphen(self):
        """'a -- b' keeps single spaces around one em dash."""
        assert smart_typography("a -- b") == "a — b"

    def test_unspaced_double_hyphen(self):
        """'a--b' becomes an em dash with no spaces."""
        assert smart_typography("a--b") == "a—b"

    def test_single_hyphen_untouched(self):
        """Hyphenated words are left alone."""
        assert smart_typography("well-known") == "well-known"


class TestQuotes:
    """Tests for curly quote substitution."""

    def test_double_quotes_and_apostrophe(self):
        """Opening/closing double quotes plus an apostrophe."""
        result = smart_typography('He said "hi" to Sam\'s dog.')
        assert result == "He said “hi” to Sam’s dog."

    def test_quote_at_start_of_string(self):
        """A quote at the very start opens."""
        assert smart_typography('"Run," she said.') == "“Run,” she said."

    def test_quote_after_bracket(self):
        """A quote after an opening parenthesis opens; before ) it closes."""
        assert smart_typography('("quoted")') == "(“quoted”)"

    def test_quote_at_end_of_string(self):
        """A quote at the very end closes."""
        assert smart_typography('say "yes"') == "say “yes”"

    def test_ambiguous_quote_defaults_to_closing(self):
        """A quote between letters falls back to closing."""
        assert smart_typography('x"y') == "x”y"

    def test_single_quotes(self):
        """Single quotes open after whitespace and close everywhere else."""
        assert smart_typography("she said 'no'") == "she said ‘no’"

    def test_contraction(self):
        """Contractions get a curly apostrophe."""
        assert smart_typography("don't") == "don’t"

    def test_multiline_quotes(self):
        """A quote after a newline opens."""
        assert smart_typography('one\n"two"') == "one\n“two”"

    def test_dash_then_quotes(self):
        """Em dash substitution happens before quote handling."""
        assert smart_typography('"--"') == "“—”"


class TestIdentity:
    """Plain text passes through normalization and escaping unchanged."""

    @pytest.mark.parametrize("text", [
        "",
        "plain text",
        "Behemoths live among the stars",
        "one\ntwo\nthree",
        "numbers 1, 2 and 3; well-known",
    ])
    def test_plain_text_identity(self, text):
        assert smart_typography(text) == text
        assert escape_html(text) == text


class TestNonString:
    """Non-string input degrades to an empty string."""

    @pytest.mark.parametrize("value", [None, 42, ["text"], {"a": 1}])
    def test_non_string(self, value):
        assert smart_typography(value) == ""
        assert escape_html(value) == ""


class TestEscapeHtml:
    """Tests for HTML escaping."""

    def test_escapes_markup(self):
        """&, <, > and double quotes are escaped."""
        assert escape_html('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"

    def test_single_quote_untouched(self):
        """Only the four listed characters are escaped."""
        assert escape_html("it's") == "it's"

    def test_not_idempotent(self):
        """Escaping twice double-escapes, so each stage escapes once."""
        once = escape_html("a & b")
        assert once == "a &amp; b"
        assert escape_html(once) == "a &amp;amp; b"

    def test_curly_quotes_untouched(self):
        """Typographic quotes survive escaping."""
        assert escape_html("“hi”") == "“hi”"
