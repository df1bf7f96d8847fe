"""Package rendered sections into an EPUB file."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path

from ebooklib import epub
from lxml import etree

from doc2epub.exceptions import PackagingError
from doc2epub.schemas import BuildConfig, ConvertedBook

logger = logging.getLogger(__name__)

_STYLESHEET_DIR = "styles"
_FONT_DIR = "fonts"
_FONT_MEDIA_TYPES = {
    ".otf": "font/otf",
    ".ttf": "font/ttf",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
}
# ebooklib cannot render a chapter whose body is empty.
_EMPTY_CONTENT = "<div></div>"


def write_epub(book: ConvertedBook, config: BuildConfig) -> Path:
    """Write ``book`` to ``config.output_path``.

    Sections keep their order and exact file names. Only titled sections are
    listed in the table of contents. The package is written to a temporary
    sibling first and moved into place, so a failed build leaves no file.

    Raises:
        PackagingError: If an asset cannot be read or the file cannot be written.
    """
    output_path = Path(config.output_path)
    tmp_path = output_path.with_name(output_path.name + ".tmp")
    try:
        package = _assemble(book, config)
        if output_path.parent != Path():
            output_path.parent.mkdir(parents=True, exist_ok=True)
        epub.write_epub(str(tmp_path), package, {})
        tmp_path.replace(output_path)
    except (OSError, ValueError, epub.EpubException, etree.LxmlError) as exc:
        raise PackagingError(str(exc)) from exc
    finally:
        tmp_path.unlink(missing_ok=True)

    logger.info("Wrote %s (%d sections)", output_path, len(book.sections))
    return output_path


def _assemble(book: ConvertedBook, config: BuildConfig) -> epub.EpubBook:
    package = epub.EpubBook()
    package.set_identifier(str(uuid.uuid5(uuid.NAMESPACE_URL, config.source_url)))
    package.set_title(book.title)
    package.set_language(config.language)

    spine: list = []
    if config.cover_image_path:
        cover_path = Path(config.cover_image_path)
        package.set_cover(cover_path.name, cover_path.read_bytes())
        spine.append("cover")

    stylesheet = None
    if config.stylesheet_path:
        stylesheet_path = Path(config.stylesheet_path)
        stylesheet = epub.EpubItem(
            uid="stylesheet",
            file_name=f"{_STYLESHEET_DIR}/{stylesheet_path.name}",
            media_type="text/css",
            content=stylesheet_path.read_bytes(),
        )
        package.add_item(stylesheet)

    if config.font_path:
        font_path = Path(config.font_path)
        package.add_item(
            epub.EpubItem(
                uid="font",
                file_name=f"{_FONT_DIR}/{font_path.name}",
                media_type=_FONT_MEDIA_TYPES.get(font_path.suffix.lower(), "application/octet-stream"),
                content=font_path.read_bytes(),
            )
        )

    chapters: list[epub.EpubHtml] = []
    for section in book.sections:
        chapter = epub.EpubHtml(
            title=section.title,
            file_name=section.filename,
            lang=config.language,
        )
        chapter.content = section.content if section.content.strip() else _EMPTY_CONTENT
        if stylesheet is not None:
            chapter.add_item(stylesheet)
        package.add_item(chapter)
        chapters.append(chapter)

    package.toc = tuple(chapter for chapter in chapters if chapter.title)
    package.spine = spine + chapters
    package.add_item(epub.EpubNcx())
    package.add_item(epub.EpubNav())
    return package
