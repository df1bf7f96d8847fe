"""Rendered book models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RenderedSection(BaseModel):
    """A serialized section ready for packaging.

    Attributes:
        title: Human-readable title. Empty for the title page, which keeps it
            out of the table of contents.
        filename: Output file name inside the package. Rewritten internal
            links point at this exact name.
        content: Concatenated markup of the section's nodes.
    """

    title: str
    filename: str
    content: str


class ConvertedBook(BaseModel):
    """Sectioned document produced from a single source page."""

    title: str
    sections: list[RenderedSection] = Field(default_factory=list)
    dangling_links: list[str] = Field(default_factory=list)
