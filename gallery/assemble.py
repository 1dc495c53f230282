"""
gallery/assemble.py
-------------------
Entry assembly: turns the ordered entry list into index-aligned grid
thumbnails and lightbox slides.

Entries without an image are skipped and do not consume an index, so
thumbnails[i] and slides[i] always describe the same post with index i.
"""
import logging
from dataclasses import dataclass, field

from formatting.caption import CaptionFormatter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Thumbnail:
    """Grid item: image plus hover preview."""
    index: int
    image_url: str
    preview: str  # escaped HTML


@dataclass(frozen=True)
class Slide:
    """Lightbox slide: image, formatted caption and permalink."""
    index: int
    image_url: str
    post_url: str
    caption_html: str


@dataclass
class Gallery:
    """Assembled page content."""
    thumbnails: list[Thumbnail] = field(default_factory=list)
    slides: list[Slide] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.slides)


def assemble_gallery(entries, formatter: CaptionFormatter | None = None) -> Gallery:
    """
    Assemble thumbnails and slides for an ordered list of entries.

    Args:
        entries: Objects with image_url, caption and post_url attributes,
            already in display order
        formatter: Caption formatter (no link rules if omitted)

    Returns:
        Gallery with index-aligned thumbnails and slides
    """
    formatter = formatter or CaptionFormatter()
    gallery = Gallery()
    skipped = 0

    for entry in entries:
        image_url = getattr(entry, "image_url", "")
        if not image_url or not isinstance(image_url, str):
            skipped += 1
            logger.debug(f"Skipping entry without image: {getattr(entry, 'post_url', '')}")
            continue

        index = len(gallery.slides)
        caption = getattr(entry, "caption", "")
        gallery.thumbnails.append(Thumbnail(
            index=index,
            image_url=image_url,
            preview=formatter.preview(caption),
        ))
        gallery.slides.append(Slide(
            index=index,
            image_url=image_url,
            post_url=getattr(entry, "post_url", "") or "",
            caption_html=formatter.format(caption),
        ))

    logger.info(f"Assembled {gallery.total} entries ({skipped} skipped without image)")
    return gallery
