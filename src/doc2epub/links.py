"""Map element identifiers to section files and rewrite fragment links."""

from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING, Iterable

from bs4.element import PageElement, Tag

from doc2epub.exceptions import DanglingLinkWarning
from doc2epub.nodes import find_all

if TYPE_CHECKING:
    from doc2epub.sections import Section

logger = logging.getLogger(__name__)


class InternalLinkMap:
    """Identifier -> ``<filename>#<identifier>`` lookup for one document."""

    def __init__(self) -> None:
        self._targets: dict[str, str] = {}

    def record(self, node: PageElement, filename: str) -> None:
        """Record every ``id`` in ``node`` (inclusive) as living in ``filename``."""
        if not isinstance(node, Tag):
            return
        for element in find_all(node, attr_key="id"):
            identifier = element.get("id")
            if not identifier:
                continue
            if identifier in self._targets:
                # Browsers resolve a fragment to the first matching element.
                logger.debug(
                    "Duplicate id %r in %s ignored (already mapped to %s)",
                    identifier,
                    filename,
                    self._targets[identifier],
                )
                continue
            self._targets[identifier] = f"{filename}#{identifier}"

    def resolve(self, identifier: str) -> str | None:
        return self._targets.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._targets

    def __len__(self) -> int:
        return len(self._targets)

    def as_dict(self) -> dict[str, str]:
        return dict(self._targets)


def rewrite_internal_links(
    sections: Iterable[Section], link_map: InternalLinkMap
) -> list[str]:
    """Point every ``href="#id"`` anchor at the section file holding ``id``.

    Anchors whose target is unknown keep their original ``href`` and trigger a
    DanglingLinkWarning each.

    Returns:
        The hrefs that could not be resolved, in document order.
    """
    dangling: list[str] = []
    for section in sections:
        for node in section.nodes:
            if not isinstance(node, Tag):
                continue
            for anchor in find_all(node, "a", "href"):
                href = anchor["href"]
                if not href.startswith("#"):
                    continue
                target = link_map.resolve(href[1:])
                if target is None:
                    dangling.append(href)
                    _warn_dangling(href, section.filename)
                    continue
                anchor["href"] = target
    return dangling


def _warn_dangling(href: str, filename: str) -> None:
    # Every dangling anchor is reported, even when the message repeats.
    with warnings.catch_warnings():
        warnings.simplefilter("always", DanglingLinkWarning)
        warnings.warn(
            f"Internal link {href!r} in {filename} has no matching id",
            DanglingLinkWarning,
            stacklevel=3,
        )
