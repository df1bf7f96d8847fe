"""Build configuration model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from doc2epub.config import (
    DEFAULT_TITLE_FILENAME,
    DOC2EPUB_BOOK_TITLE,
    DOC2EPUB_BOUNDARY_TAG,
    DOC2EPUB_OUTPUT_PATH,
    DOC2EPUB_SOURCE_URL,
)


class NodeFilter(BaseModel):
    """Tag/attribute filter used to locate a node in the source document.

    Empty fields match anything.
    """

    tag: str = ""
    attr_key: str = ""
    attr_val: str = ""

    def describe(self) -> str:
        """Return a CSS-like description for error messages."""
        text = self.tag or "*"
        if self.attr_key:
            text += f"[{self.attr_key}"
            if self.attr_val:
                text += f"={self.attr_val!r}"
            text += "]"
        return text


class BuildConfig(BaseModel):
    """Options for building a book from a source page.

    Attributes:
        source_url: URL of the HTML document to convert.
        title: Book title written to the package metadata.
        language: Book language code.
        boundary_tag: Heading tag that starts a new section.
        output_path: Where the EPUB is written.
        title_filename: File name of the untitled front section.
        cover_image_path: Optional cover image.
        stylesheet_path: Optional stylesheet linked from every section.
        font_path: Optional font embedded in the package.
        page: Optional outer node searched before the container.
        container: Node whose direct children are split into sections.
        footer: Optional footer node inside the container, moved to the
            title section. When set it must exist.
        remove: Nodes detached from the document before sectioning.
    """

    source_url: str = DOC2EPUB_SOURCE_URL
    title: str = DOC2EPUB_BOOK_TITLE
    language: str = "en"
    boundary_tag: str = DOC2EPUB_BOUNDARY_TAG
    output_path: Path = DOC2EPUB_OUTPUT_PATH
    title_filename: str = DEFAULT_TITLE_FILENAME
    cover_image_path: Path | None = None
    stylesheet_path: Path | None = None
    font_path: Path | None = None
    page: NodeFilter | None = Field(
        default_factory=lambda: NodeFilter(tag="div", attr_key="id", attr_val="page")
    )
    container: NodeFilter = Field(
        default_factory=lambda: NodeFilter(tag="div", attr_key="class", attr_val="container")
    )
    footer: NodeFilter | None = Field(
        default_factory=lambda: NodeFilter(tag="div", attr_key="id", attr_val="footer")
    )
    remove: list[NodeFilter] = Field(
        default_factory=lambda: [NodeFilter(tag="div", attr_key="id", attr_val="nav")]
    )
