"""Inspect a source page to choose container, footer and boundary settings."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.element import Tag

from doc2epub.http_utils import fetch_with_retries
from doc2epub.nodes import find_all, parse_document


def main() -> None:
    parser = argparse.ArgumentParser(description="Show where section headings live in a page.")
    parser.add_argument("--url", help="URL to fetch (e.g. https://go.dev/doc/effective_go)")
    parser.add_argument("--file", help="Local HTML file path")
    parser.add_argument("--tag", default="h2", help="Candidate boundary tag")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    document = parse_document(load_html(url=args.url, file_path=args.file))
    parents, ids = collect_stats(document, args.tag)

    print(f"<{args.tag}> parents:")
    for name, count in parents.most_common():
        print(f"{name}: {count}")

    print("\nElements with id:")
    for name, count in ids.most_common():
        print(f"{name}: {count}")


def load_html(*, url: str | None, file_path: str | None) -> str:
    if url:
        return fetch_with_retries(url)

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"HTML file not found: {path}")
    return path.read_text(encoding="utf-8")


def describe(tag: Tag) -> str:
    text = tag.name
    if tag.get("id"):
        text += f"#{tag['id']}"
    for cls in tag.get("class", []):
        text += f".{cls}"
    return text


def collect_stats(document: BeautifulSoup, boundary_tag: str) -> tuple[Counter, Counter]:
    parents = Counter()
    ids = Counter()

    for heading in find_all(document, boundary_tag):
        if heading.parent is not None:
            parents[describe(heading.parent)] += 1
    for element in find_all(document, attr_key="id"):
        ids[element.name] += 1
    return parents, ids


if __name__ == "__main__":
    main()
