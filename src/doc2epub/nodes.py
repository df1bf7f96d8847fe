"""Tree-search and serialization helpers over BeautifulSoup documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from doc2epub.exceptions import ParseError, SerializationError

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, PageElement, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_FORMATTER = "minimal"


@dataclass(frozen=True)
class NodeMatcher:
    """Predicate matching elements by tag name and/or attribute.

    Empty or ``None`` filters match anything. ``attr_val`` is only checked
    when ``attr_key`` is set. Multi-valued attributes such as ``class`` match
    when any single token, or the space-joined value, equals ``attr_val``.
    """

    tag: str | None = None
    attr_key: str | None = None
    attr_val: str | None = None

    def __call__(self, node: PageElement) -> bool:
        if not isinstance(node, Tag) or isinstance(node, BeautifulSoup):
            return False
        if self.tag and node.name != self.tag:
            return False
        if not self.attr_key:
            return True
        if self.attr_key not in node.attrs:
            return False
        if not self.attr_val:
            return True
        value = node.attrs[self.attr_key]
        if isinstance(value, (list, tuple)):
            return self.attr_val in value or " ".join(value) == self.attr_val
        return value == self.attr_val


class NodeQuery:
    """Lazy, restartable sequence of elements matched under a root.

    Every ``iter()`` walks the tree again, so the query reflects the tree as
    it is at iteration time.
    """

    def __init__(self, root: Tag, matcher: NodeMatcher) -> None:
        self.root = root
        self.matcher = matcher

    def __iter__(self) -> Iterator[Tag]:
        if self.matcher(self.root):
            yield self.root
        if not isinstance(self.root, Tag):
            return
        for node in self.root.descendants:
            if self.matcher(node):
                yield node

    def __repr__(self) -> str:
        return f"NodeQuery(root={getattr(self.root, 'name', None)!r}, matcher={self.matcher!r})"


def parse_document(markup: str | bytes) -> BeautifulSoup:
    """Parse HTML markup into a document tree.

    Raises:
        ParseError: If the input is empty or yields no elements.
    """
    if not markup or not markup.strip():
        raise ParseError("Source document is empty")
    document = BeautifulSoup(markup, "lxml")
    if document.find(True) is None:
        raise ParseError("Source document contains no markup elements")
    return document


def find_all(
    root: Tag,
    tag: str | None = None,
    attr_key: str | None = None,
    attr_val: str | None = None,
) -> NodeQuery:
    """Return every element under ``root`` (inclusive) that matches, in document order."""
    return NodeQuery(root, NodeMatcher(tag, attr_key, attr_val))


def find_first(
    root: Tag,
    tag: str | None = None,
    attr_key: str | None = None,
    attr_val: str | None = None,
) -> Tag | None:
    """Return the first matching element under ``root`` (inclusive), or None."""
    return next(iter(find_all(root, tag, attr_key, attr_val)), None)


def remove(
    root: Tag,
    tag: str | None = None,
    attr_key: str | None = None,
    attr_val: str | None = None,
) -> Tag | None:
    """Detach the first matching element from its parent.

    Returns the detached element, or None when nothing matched.
    """
    node = find_first(root, tag, attr_key, attr_val)
    if node is None:
        return None
    return node.extract()


def serialize(node: PageElement) -> str:
    """Render a node and its subtree back to markup.

    Void elements are self-closed (``<br/>``) so the output is usable as
    XHTML content.

    Raises:
        SerializationError: If the node was decomposed or cannot be rendered.
    """
    if getattr(node, "decomposed", False):
        raise SerializationError(f"Cannot serialize decomposed node {node!r}")
    try:
        if isinstance(node, Tag):
            return node.decode(formatter=_FORMATTER)
        if isinstance(node, NavigableString):
            return node.output_ready(formatter=_FORMATTER)
    except (AttributeError, TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(f"Failed to serialize node: {exc}") from exc
    raise SerializationError(f"Unsupported node type: {type(node).__name__}")


def new_element(
    document: BeautifulSoup,
    name: str,
    attrs: dict[str, str] | None = None,
    text: str | None = None,
) -> Tag:
    """Create a detached element using the document's tree builder."""
    element = document.new_tag(name, attrs=attrs or {})
    if text is not None:
        element.append(NavigableString(text))
    return element


def new_text(text: str) -> NavigableString:
    """Create a detached text node."""
    return NavigableString(text)
