"""
gallery/render.py
-----------------
Renders the assembled gallery into a static HTML page.

Captions and previews arrive as escaped HTML fragments and are wrapped in
Markup so Jinja2's autoescape passes them through untouched. Everything
else (URLs, site text) is escaped by the template.
"""
import logging
import shutil
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from microgallery.config import SiteInfo
from .assemble import Gallery

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"
PAGE_TEMPLATE = "index.html"

_jinja_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_page(gallery: Gallery, site: SiteInfo) -> str:
    """
    Render the gallery page.

    Args:
        gallery: Assembled thumbnails and slides
        site: Page chrome text

    Returns:
        Complete HTML document
    """
    thumbnails = [
        {"index": t.index, "image_url": t.image_url, "preview": Markup(t.preview)}
        for t in gallery.thumbnails
    ]
    slides = [
        {
            "index": s.index,
            "image_url": s.image_url,
            "post_url": s.post_url,
            "caption_html": Markup(s.caption_html),
        }
        for s in gallery.slides
    ]

    template = _jinja_env.get_template(PAGE_TEMPLATE)
    return template.render(
        site=site,
        thumbnails=thumbnails,
        slides=slides,
        total=gallery.total,
    )


def write_page(html: str, output_path: Path) -> Path:
    """
    Write the page, replacing any previous build in one step.

    Args:
        html: Rendered document
        output_path: Destination file

    Returns:
        The written path
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    tmp = output_path.with_suffix(output_path.suffix + ".tmp")
    try:
        tmp.write_text(html, encoding="utf-8")
        tmp.replace(output_path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
    logger.info(f"Generated {output_path}")
    return output_path


def copy_assets(output_dir: Path) -> list[Path]:
    """
    Copy the page's static assets (lightbox script) next to the page.

    Args:
        output_dir: Directory holding the generated index.html

    Returns:
        Paths of the copied files
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    copied = []
    for asset in sorted(STATIC_DIR.iterdir()):
        if asset.is_file():
            copied.append(Path(shutil.copy2(asset, output_dir / asset.name)))
    logger.info(f"Copied {len(copied)} static assets to {output_dir}")
    return copied
