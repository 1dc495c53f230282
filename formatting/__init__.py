"""
formatting/
-----------
Caption formatting pipeline for the gallery build.

Modules:
- typography: ASCII quote/dash shortcuts -> typographic Unicode
- escape: HTML entity escaping
- footnote_parse: [FN#] definition extraction and tooltip rendering
- linker: term hyperlinking inside footnote text
- preview: first-sentence hover previews
- caption: facade binding the link rules to the pipeline
"""

__version__ = "0.1.0"
