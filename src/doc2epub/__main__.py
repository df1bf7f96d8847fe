"""Command-line entry point: ``python -m doc2epub``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from doc2epub.builder import build_book
from doc2epub.exceptions import Doc2EpubError
from doc2epub.schemas import BuildConfig

# Package logger: the entry point runs as "__main__", not under "doc2epub".
logger = logging.getLogger("doc2epub")


def main(argv: list[str] | None = None) -> int:
    defaults = BuildConfig()
    parser = argparse.ArgumentParser(description="Split an HTML document into an EPUB book.")
    parser.add_argument("--url", default=defaults.source_url, help="Source document URL")
    parser.add_argument("--output", type=Path, default=defaults.output_path, help="EPUB file to write")
    parser.add_argument("--title", default=defaults.title, help="Book title")
    parser.add_argument(
        "--boundary-tag", default=defaults.boundary_tag, help="Heading tag that starts a section"
    )
    parser.add_argument("--cover", type=Path, help="Cover image file")
    parser.add_argument("--stylesheet", type=Path, help="CSS file linked from every section")
    parser.add_argument("--font", type=Path, help="Font file to embed")
    parser.add_argument("--no-cache", action="store_true", help="Always fetch a fresh copy")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # DanglingLinkWarning is reported through warnings.warn.
    logging.captureWarnings(True)

    config = defaults.model_copy(
        update={
            "source_url": args.url,
            "output_path": args.output,
            "title": args.title,
            "boundary_tag": args.boundary_tag,
            "cover_image_path": args.cover,
            "stylesheet_path": args.stylesheet,
            "font_path": args.font,
        }
    )

    try:
        output = build_book(config, use_cache=not args.no_cache)
    except Doc2EpubError as exc:
        logger.error("Build failed during %s: %s", exc.stage, exc)
        return 1

    logger.info("Book written to %s", output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
