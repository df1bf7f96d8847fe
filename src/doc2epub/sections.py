"""Split a container's children into sections on heading boundaries."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from doc2epub.config import DEFAULT_TITLE_FILENAME
from doc2epub.exceptions import MalformedSectionError
from doc2epub.links import InternalLinkMap

_SLUG_RE = re.compile(r"[^a-z0-9]+")


@dataclass
class Section:
    """A chapter of the output book.

    The title section has an empty ``title`` so it stays out of the table of
    contents.
    """

    filename: str
    title: str = ""
    nodes: list[PageElement] = field(default_factory=list)


def title_to_filename(title: str) -> str:
    """Turn a section title into a file name (``"Control structures"`` -> ``control-structures.xhtml``)."""
    ascii_title = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    slug = _SLUG_RE.sub("-", ascii_title.strip().lower()).strip("-")
    return f"{slug}.xhtml" if slug else ""


def sectionize(
    container: Tag,
    *,
    boundary_tag: str,
    footer: Tag | None = None,
    title_filename: str = DEFAULT_TITLE_FILENAME,
    link_map: InternalLinkMap | None = None,
) -> list[Section]:
    """Split the direct children of ``container`` into sections.

    Every ``boundary_tag`` child closes the open section and starts a new one
    titled after the boundary's text. Children before the first boundary go
    to the untitled title section. ``footer`` is always routed to the title
    section, wherever it sits in the container, so the license text ends up
    on the title page. Identifiers are recorded in ``link_map`` against the
    section that takes the node.

    Raises:
        MalformedSectionError: If a boundary element has no leading text.
    """
    sections: list[Section] = []
    section = Section(filename=title_filename)
    used_filenames = {title_filename}

    for node in list(container.children):
        if isinstance(node, Tag) and node.name == boundary_tag:
            sections.append(section)
            title = _boundary_title(node)
            section = Section(
                filename=_unique_filename(title, len(sections), used_filenames),
                title=title,
            )

        # The title section is the first one appended, or still open when no
        # boundary has been seen yet.
        owner = section
        if footer is not None and node is footer:
            owner = sections[0] if sections else section
        owner.nodes.append(node)

        if link_map is not None:
            link_map.record(node, owner.filename)

    sections.append(section)
    return sections


def _boundary_title(node: Tag) -> str:
    first = next(iter(node.children), None)
    if (
        not isinstance(first, NavigableString)
        or isinstance(first, PreformattedString)
        or not first.strip()
    ):
        raise MalformedSectionError(
            f"<{node.name}> boundary has no title text: {str(node)[:80]!r}"
        )
    return first.strip()


def _unique_filename(title: str, index: int, used: set[str]) -> str:
    filename = title_to_filename(title) or f"section-{index}.xhtml"
    stem = filename[: -len(".xhtml")]
    counter = 2
    while filename in used:
        filename = f"{stem}-{counter}.xhtml"
        counter += 1
    used.add(filename)
    return filename
