"""doc2epub: split a published HTML document into an EPUB book."""

from doc2epub.builder import build_book, convert_document
from doc2epub.exceptions import (
    DanglingLinkWarning,
    Doc2EpubError,
    FetchError,
    MalformedSectionError,
    PackagingError,
    ParseError,
    SerializationError,
    StructureNotFoundError,
)
from doc2epub.schemas import BuildConfig, ConvertedBook, NodeFilter, RenderedSection

__all__ = [
    "BuildConfig",
    "ConvertedBook",
    "DanglingLinkWarning",
    "Doc2EpubError",
    "FetchError",
    "MalformedSectionError",
    "NodeFilter",
    "PackagingError",
    "ParseError",
    "RenderedSection",
    "SerializationError",
    "StructureNotFoundError",
    "build_book",
    "convert_document",
]
