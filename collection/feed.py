"""
collection/feed.py
------------------
Atom feed acquisition for the gallery build.

Reads posts from the Pixelfed Atom feed, normalizes each into a FeedEntry
and puts them in reading order: manual entries first, then the feed from
oldest to newest.

Usage:
    from collection.feed import collect_entries
    entries = collect_entries(FEED_URL, rules)
"""
import logging
from dataclasses import dataclass
from datetime import datetime

import feedparser

from microgallery.config import LOG_DIR, GalleryRules, TextReplacement

logger = logging.getLogger(__name__)


class FeedError(Exception):
    """The feed could not be fetched or parsed."""


@dataclass(frozen=True)
class FeedEntry:
    """One post in the gallery."""
    image_url: str
    caption: str
    post_url: str


# --- Utility Functions ---

def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure logging to console and file."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
    log_file = LOG_DIR / f"build_{timestamp}.log"

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )

    # Reduce noise from the HTTP stack
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging to: {log_file}")
    return logger


def apply_text_replacements(text: str, replacements: tuple[TextReplacement, ...]) -> str:
    """
    Rewrite known-bad caption openings.

    Args:
        text: Raw caption from the feed
        replacements: Ordered TextReplacement records

    Returns:
        Caption with each matching prefix replaced once
    """
    if not isinstance(text, str):
        return ""
    for rule in replacements:
        if rule.prefix and text.startswith(rule.prefix):
            text = rule.replacement + text[len(rule.prefix):]
    return text


# --- Feed Parsing ---

def parse_feed(source: str) -> feedparser.FeedParserDict:
    """
    Fetch and parse an Atom feed.

    Args:
        source: Feed URL or the feed document itself

    Returns:
        Parsed feed

    Raises:
        FeedError: On HTTP errors or a malformed feed with no entries
    """
    parsed = feedparser.parse(source)

    status = parsed.get("status")
    if status is not None and status >= 400:
        raise FeedError(f"Feed request failed with HTTP {status}")

    if parsed.get("bozo") and not parsed.entries:
        raise FeedError(f"Could not parse feed: {parsed.get('bozo_exception')}")

    return parsed


def _image_url(entry) -> str:
    """URL of the entry's first media:content item."""
    for media in entry.get("media_content") or []:
        url = media.get("url")
        if url:
            return url
    return ""


def entries_from_feed(parsed, replacements=()) -> list[FeedEntry]:
    """
    Convert parsed feed entries into FeedEntry records, in feed order.

    Missing fields become "" so one bad entry never stops the build;
    entries without an image are dropped later, during assembly.

    Args:
        parsed: Result of parse_feed
        replacements: TextReplacement records applied to each caption

    Returns:
        List of FeedEntry in the order the feed lists them (newest first)
    """
    entries = []
    for item in parsed.entries:
        caption = apply_text_replacements(item.get("title", ""), replacements)
        entries.append(FeedEntry(
            image_url=_image_url(item),
            caption=caption,
            post_url=item.get("link", "") or "",
        ))
    return entries


def collect_entries(feed_url: str, rules: GalleryRules) -> list[FeedEntry]:
    """
    Build the full oldest-first entry list.

    Args:
        feed_url: Atom feed URL (or document)
        rules: Rule tables supplying manual entries and text replacements

    Returns:
        Manual entries followed by feed entries, oldest first

    Raises:
        FeedError: If the feed cannot be read
    """
    logger.info(f"Fetching feed: {feed_url}")
    parsed = parse_feed(feed_url)

    feed_entries = entries_from_feed(parsed, rules.text_replacements)
    logger.info(
        f"Found {len(feed_entries)} entries from feed, "
        f"plus {len(rules.manual_entries)} manual entries"
    )

    # Feed lists newest first; the gallery reads oldest first
    feed_entries.reverse()

    manual = [
        FeedEntry(image_url=m.image_url, caption=m.caption, post_url=m.post_url)
        for m in rules.manual_entries
    ]
    return manual + feed_entries
