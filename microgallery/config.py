"""
microgallery/config.py
----------------------
Shared configuration for the gallery build.

Loads settings from environment variables with sensible defaults, and the
rule tables (footnote links, text replacements, manual entries, site text)
from a YAML file.
"""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

from formatting.linker import LinkRule

logger = logging.getLogger(__name__)

# Load .env file if it exists
load_dotenv()

# Project root (parent of this file's directory)
PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Atom feed the gallery is built from
FEED_URL = os.getenv("GALLERY_FEED_URL", "https://pixelfed.social/users/eleanorkonik.atom")

# Generated page
OUTPUT_PATH = Path(os.getenv("GALLERY_OUTPUT_PATH", PROJECT_ROOT / "index.html"))

# Log directory
LOG_DIR = Path(os.getenv("GALLERY_LOG_DIR", PROJECT_ROOT / "logs"))

# Rule tables
DEFAULT_RULES_PATH = Path(__file__).parent / "data" / "gallery.yaml"
RULES_PATH = Path(os.getenv("GALLERY_RULES_PATH", DEFAULT_RULES_PATH))


@dataclass(frozen=True)
class TextReplacement:
    """Literal caption prefix to rewrite before formatting."""
    prefix: str
    replacement: str


@dataclass(frozen=True)
class ManualEntry:
    """A post missing from the feed, added by hand."""
    image_url: str
    caption: str
    post_url: str


@dataclass(frozen=True)
class SiteInfo:
    """Static text for the page chrome."""
    title: str = "Gallery"
    subtitle: str = ""
    logo: str = ""
    about_url: str = ""
    about_label: str = ""
    feed_url: str = ""
    copyright: str = ""


@dataclass(frozen=True)
class GalleryRules:
    """Rule tables injected into the build."""
    site: SiteInfo = field(default_factory=SiteInfo)
    footnote_links: tuple[LinkRule, ...] = ()
    text_replacements: tuple[TextReplacement, ...] = ()
    manual_entries: tuple[ManualEntry, ...] = ()  # oldest first


def _records(data: dict, section: str, cls, keys: tuple[str, ...]) -> tuple:
    """Build a tuple of `cls` from a list of mappings under `section`."""
    items = data.get(section) or []
    if not isinstance(items, list):
        raise ValueError(f"Rules section '{section}' must be a list")

    records = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"Rules section '{section}' item {i} must be a mapping")
        missing = [k for k in keys if k not in item]
        if missing:
            raise ValueError(
                f"Rules section '{section}' item {i} missing: {', '.join(missing)}"
            )
        records.append(cls(**{k: str(item[k]) for k in keys}))
    return tuple(records)


def rules_from_dict(data: dict | None) -> GalleryRules:
    """
    Build GalleryRules from a parsed rules document.

    Args:
        data: Mapping with optional keys site, footnote_links,
            text_replacements, manual_entries

    Returns:
        GalleryRules instance

    Raises:
        ValueError: If a section has the wrong shape
    """
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError("Rules document must be a mapping")

    site_data = data.get("site") or {}
    if not isinstance(site_data, dict):
        raise ValueError("Rules section 'site' must be a mapping")
    unknown = set(site_data) - set(SiteInfo.__dataclass_fields__)
    if unknown:
        raise ValueError(f"Unknown site keys: {', '.join(sorted(unknown))}")

    return GalleryRules(
        site=SiteInfo(**{k: str(v) for k, v in site_data.items()}),
        footnote_links=_records(data, "footnote_links", LinkRule, ("term", "url")),
        text_replacements=_records(
            data, "text_replacements", TextReplacement, ("prefix", "replacement")
        ),
        manual_entries=_records(
            data, "manual_entries", ManualEntry, ("image_url", "caption", "post_url")
        ),
    )


def load_rules(path: Path | str = RULES_PATH) -> GalleryRules:
    """
    Load rule tables from a YAML file.

    Args:
        path: Rules file (defaults to GALLERY_RULES_PATH or the packaged file)

    Returns:
        GalleryRules instance

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid rules YAML
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    rules = rules_from_dict(data)
    logger.debug(
        f"Loaded rules from {path}: {len(rules.footnote_links)} links, "
        f"{len(rules.text_replacements)} replacements, "
        f"{len(rules.manual_entries)} manual entries"
    )
    return rules
