"""
tests/conftest.py
-----------------
Shared fixtures: a small Atom feed in the Pixelfed shape and a rules file.
"""

import pytest

ATOM_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom" xmlns:media="http://search.yahoo.com/mrss/">
  <id>https://example.social/users/writer</id>
  <title>writer</title>
  <updated>2025-01-03T00:00:00Z</updated>
  <entry>
    <id>https://example.social/p/writer/3</id>
    <title>Dogs -- they came back.</title>
    <updated>2025-01-03T00:00:00Z</updated>
    <link rel="alternate" href="https://example.social/p/writer/3"/>
    <media:content url="https://cdn.example/3.png" type="image/png" medium="image"/>
  </entry>
  <entry>
    <id>https://example.social/p/writer/2</id>
    <title>A post with no picture.</title>
    <updated>2025-01-02T00:00:00Z</updated>
    <link rel="alternate" href="https://example.social/p/writer/2"/>
  </entry>
  <entry>
    <id>https://example.social/p/writer/1</id>
    <title>The first post.</title>
    <updated>2025-01-01T00:00:00Z</updated>
    <link rel="alternate" href="https://example.social/p/writer/1"/>
    <media:content url="https://cdn.example/1.png" type="image/png" medium="image"/>
  </entry>
</feed>
"""

RULES_YAML = """
site:
  title: "Test Gallery"
  subtitle: "by Someone"
footnote_links:
  - term: "Minor Mage"
    url: "https://example.com/minor-mage"
text_replacements:
  - prefix: "Dogs --"
    replacement: "...dogs --"
manual_entries:
  - image_url: "https://cdn.example/manual.png"
    caption: "Before the feed began."
    post_url: "https://example.social/p/writer/0"
"""


@pytest.fixture
def atom_feed() -> str:
    return ATOM_FEED


@pytest.fixture
def rules_file(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text(RULES_YAML, encoding="utf-8")
    return path
