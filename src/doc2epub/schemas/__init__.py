"""Shared schemas for doc2epub."""

from doc2epub.schemas.book import ConvertedBook, RenderedSection
from doc2epub.schemas.config import BuildConfig, NodeFilter

__all__ = ["BuildConfig", "ConvertedBook", "NodeFilter", "RenderedSection"]
