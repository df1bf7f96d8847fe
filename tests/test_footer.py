"""Tests for footer reformatting."""

from __future__ import annotations

from bs4.element import Tag

from doc2epub.footer import reformat_footer
from doc2epub.nodes import find_first, parse_document, serialize

SOURCE = "https://go.dev/doc/effective_go"


def _shape(footer: Tag) -> list[str]:
    """Tag names for elements, raw text for strings."""
    return [child.name if isinstance(child, Tag) else str(child) for child in footer.contents]


class TestReformatFooter:
    """Tests for reformat_footer."""

    def test_attribution_doubled_breaks_and_wording(self) -> None:
        """Two <br> and one 'page' text become the book footer layout."""
        document = parse_document('<div id="footer"><br>Back to page top<br></div>')
        footer = find_first(document, "div", "id", "footer")

        reformat_footer(document, footer, SOURCE)

        assert _shape(footer) == [
            "Source: ",
            "a",
            "br",
            "br",
            "br",
            "br",
            "Back to book top",
            "br",
            "br",
        ]
        link = footer.contents[1]
        assert link["href"] == SOURCE
        assert link.get_text() == SOURCE

    def test_returns_same_node(self) -> None:
        document = parse_document('<div id="footer">text</div>')
        footer = find_first(document, "div", "id", "footer")
        assert reformat_footer(document, footer, SOURCE) is footer

    def test_replaces_every_occurrence(self) -> None:
        document = parse_document('<div id="footer">page one, page two</div>')
        footer = find_first(document, "div", "id", "footer")
        reformat_footer(document, footer, SOURCE)
        assert footer.contents[-1] == "book one, book two"

    def test_nested_text_and_comments_untouched(self) -> None:
        """Only direct text children are reworded."""
        document = parse_document(
            '<div id="footer"><!-- page --><span>this page</span></div>'
        )
        footer = find_first(document, "div", "id", "footer")
        reformat_footer(document, footer, SOURCE)
        markup = serialize(footer)
        assert "<!-- page -->" in markup
        assert "<span>this page</span>" in markup

    def test_empty_footer_gets_attribution(self) -> None:
        document = parse_document('<div id="footer"></div>')
        footer = find_first(document, "div", "id", "footer")
        reformat_footer(document, footer, SOURCE)
        assert serialize(footer) == (
            f'<div id="footer">Source: <a href="{SOURCE}">{SOURCE}</a><br/><br/></div>'
        )
