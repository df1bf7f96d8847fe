"""Reformat the page footer for use on the book's title page."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from doc2epub.nodes import new_element, new_text


def reformat_footer(document: BeautifulSoup, footer: Tag, source_url: str) -> Tag:
    """Rewrite the footer in place and return it.

    Every direct ``<br>`` child is doubled and "page" becomes "book" in direct
    text children. A ``Source: <url>`` attribution followed by two line
    breaks is then placed in front of the original content.
    """
    for child in list(footer.children):
        if isinstance(child, Tag) and child.name == "br":
            child.insert_before(new_element(document, "br"))
        elif (
            isinstance(child, NavigableString)
            and not isinstance(child, PreformattedString)
            and "page" in child
        ):
            child.replace_with(new_text(child.replace("page", "book")))

    attribution = [
        new_text("Source: "),
        new_element(document, "a", {"href": source_url}, text=source_url),
        new_element(document, "br"),
        new_element(document, "br"),
    ]
    for position, node in enumerate(attribution):
        footer.insert(position, node)

    return footer
