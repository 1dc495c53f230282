"""
microgallery/cli.py
-------------------
Command-line interface for the gallery build.

Usage:
    microgallery build                      # Fetch feed, write index.html
    microgallery build --output site/index.html
    microgallery build --feed-url URL --rules my_rules.yaml
    microgallery format caption.txt         # Print formatted caption HTML
    microgallery format - --preview         # Preview for caption on stdin
"""
import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def _load_rules_or_exit(path):
    from microgallery.config import load_rules

    try:
        return load_rules(path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load rules: {e}")
        sys.exit(1)


def cmd_build(args):
    """Fetch the feed and write the gallery page."""
    from collection.feed import FeedError, collect_entries, setup_logging
    from formatting.caption import CaptionFormatter
    from gallery.assemble import assemble_gallery
    from gallery.render import copy_assets, render_page, write_page

    setup_logging(verbose=args.verbose)
    rules = _load_rules_or_exit(args.rules)

    try:
        entries = collect_entries(args.feed_url, rules)
    except FeedError as e:
        logger.error(f"Build failed: {e}")
        sys.exit(1)

    gallery = assemble_gallery(entries, CaptionFormatter(rules.footnote_links))
    output = write_page(render_page(gallery, rules.site), args.output)
    copy_assets(output.parent)

    print("\nBuild complete:")
    print(f"  Entries: {gallery.total}")
    print(f"  Output:  {output}")


def cmd_format(args):
    """Format a single caption file and print the result."""
    from formatting.caption import CaptionFormatter

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    rules = _load_rules_or_exit(args.rules)

    if args.file == "-":
        text = sys.stdin.read()
    else:
        path = Path(args.file)
        if not path.exists():
            logger.error(f"Caption file not found: {path}")
            sys.exit(1)
        text = path.read_text(encoding="utf-8")

    formatter = CaptionFormatter(rules.footnote_links)
    print(formatter.preview(text) if args.preview else formatter.format(text))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    from microgallery.config import FEED_URL, OUTPUT_PATH, RULES_PATH

    parser = argparse.ArgumentParser(
        prog="microgallery",
        description="microgallery - static gallery builder for illustrated micro-fiction feeds",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # build command
    build_parser_ = subparsers.add_parser(
        "build",
        help="Fetch the feed and generate the gallery page",
    )
    build_parser_.add_argument(
        "--feed-url",
        default=FEED_URL,
        help="Atom feed URL (default: GALLERY_FEED_URL or the Pixelfed feed)",
    )
    build_parser_.add_argument(
        "--rules",
        type=Path,
        default=RULES_PATH,
        metavar="PATH",
        help="Rules YAML file (default: GALLERY_RULES_PATH or packaged rules)",
    )
    build_parser_.add_argument(
        "--output",
        type=Path,
        default=OUTPUT_PATH,
        metavar="PATH",
        help="Output HTML file (default: GALLERY_OUTPUT_PATH or ./index.html)",
    )
    build_parser_.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging",
    )
    build_parser_.set_defaults(func=cmd_build)

    # format command
    format_parser = subparsers.add_parser(
        "format",
        help="Format one caption file (use - for stdin)",
    )
    format_parser.add_argument("file", help="Caption text file, or - for stdin")
    format_parser.add_argument(
        "--preview",
        action="store_true",
        help="Print the hover preview instead of the full caption",
    )
    format_parser.add_argument(
        "--rules",
        type=Path,
        default=RULES_PATH,
        metavar="PATH",
        help="Rules YAML file supplying footnote links",
    )
    format_parser.set_defaults(func=cmd_format)

    return parser


def main(argv=None):
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
