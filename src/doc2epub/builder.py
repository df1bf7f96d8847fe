"""Build pipeline: source HTML -> sectioned document -> EPUB."""

from __future__ import annotations

import logging
from pathlib import Path

from bs4.element import Tag

from doc2epub.epub import write_epub
from doc2epub.exceptions import StructureNotFoundError
from doc2epub.fetch import fetch_source_html
from doc2epub.footer import reformat_footer
from doc2epub.links import InternalLinkMap, rewrite_internal_links
from doc2epub.nodes import find_first, parse_document, remove
from doc2epub.schemas import BuildConfig, ConvertedBook, NodeFilter
from doc2epub.sections import sectionize
from doc2epub.serializer import render_sections

logger = logging.getLogger(__name__)


def convert_document(html: str, config: BuildConfig | None = None) -> ConvertedBook:
    """Split an HTML document into rendered sections with working internal links.

    Args:
        html: The source document markup.
        config: Build options. Uses defaults if None.

    Returns:
        The rendered sections, title section first.

    Raises:
        ParseError: If the markup cannot be parsed.
        StructureNotFoundError: If the container, page or configured footer is missing.
        MalformedSectionError: If a boundary element has no title text.
        SerializationError: If a section cannot be rendered.
    """
    cfg = config or BuildConfig()
    document = parse_document(html)

    for node_filter in cfg.remove:
        if remove(document, node_filter.tag, node_filter.attr_key, node_filter.attr_val) is not None:
            logger.debug("Removed %s", node_filter.describe())

    root: Tag = document
    if cfg.page is not None:
        root = _require(document, cfg.page, "page")
    container = _require(root, cfg.container, "container")

    footer = None
    if cfg.footer is not None:
        footer = _require(container, cfg.footer, "footer")
        reformat_footer(document, footer, cfg.source_url)

    link_map = InternalLinkMap()
    sections = sectionize(
        container,
        boundary_tag=cfg.boundary_tag,
        footer=footer,
        title_filename=cfg.title_filename,
        link_map=link_map,
    )
    logger.info("Split document into %d sections (%d ids)", len(sections), len(link_map))

    dangling = rewrite_internal_links(sections, link_map)
    if dangling:
        logger.info("%d internal links left unresolved", len(dangling))

    return ConvertedBook(
        title=cfg.title,
        sections=render_sections(sections),
        dangling_links=dangling,
    )


def build_book(config: BuildConfig | None = None, *, use_cache: bool = True) -> Path:
    """Fetch the source document, convert it and write the EPUB.

    Any Doc2EpubError propagates unchanged; nothing is written on failure.

    Returns:
        Path of the written EPUB.
    """
    cfg = config or BuildConfig()
    logger.info("Fetching %s", cfg.source_url)
    html = fetch_source_html(cfg.source_url, use_cache=use_cache)
    book = convert_document(html, cfg)
    return write_epub(book, cfg)


def _require(root: Tag, node_filter: NodeFilter, role: str) -> Tag:
    node = find_first(root, node_filter.tag, node_filter.attr_key, node_filter.attr_val)
    if node is None:
        raise StructureNotFoundError(
            f"No {role} node matching {node_filter.describe()} in source document"
        )
    return node
