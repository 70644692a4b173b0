"""Walking books stored in the mdbook JSON layout."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

Chapter = dict[str, Any]


def _walk(items: Iterable[Any]) -> Iterator[Chapter]:
    for item in items:
        if isinstance(item, Mapping) and "Chapter" in item:
            chapter = item["Chapter"]
            yield chapter
            yield from _walk(chapter.get("sub_items") or ())


def iter_chapters(book: Mapping[str, Any]) -> Iterator[Chapter]:
    """Yield every chapter of ``book``, each parent before its sub-chapters.

    Separators and part titles are skipped. The yielded dicts belong to the
    book, so changing them changes the book.
    """
    if not isinstance(book, Mapping) or "sections" not in book:
        raise ValueError("book has no sections")
    yield from _walk(book["sections"])