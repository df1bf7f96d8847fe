"""Render sections to markup strings."""

from __future__ import annotations

from typing import Iterable

from doc2epub.nodes import serialize
from doc2epub.schemas import RenderedSection
from doc2epub.sections import Section


def render_section(section: Section) -> RenderedSection:
    """Concatenate the section's nodes in acquisition order."""
    content = "".join(serialize(node) for node in section.nodes)
    return RenderedSection(title=section.title, filename=section.filename, content=content)


def render_sections(sections: Iterable[Section]) -> list[RenderedSection]:
    """Render every section; a failure in any node aborts the whole render."""
    return [render_section(section) for section in sections]
