"""Front matter handling for book chapters."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from coursebook.book import iter_chapters

_FRONTMATTER = re.compile(
    r"\A\s*---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)(.*)\Z",
    re.DOTALL,
)


def split_frontmatter(text: str) -> tuple[str, str] | None:
    """Split ``text`` into ``(frontmatter, content)``.

    Front matter sits between two lines of ``---`` at the start of the text.
    Returns ``None`` when the text has none.
    """
    match = _FRONTMATTER.match(text)
    if match is None:
        return None
    frontmatter, content = match.groups()
    return frontmatter or "", content


def remove_frontmatter(context: Mapping[str, Any], book: dict[str, Any]) -> dict[str, Any]:
    """Strip front matter from every chapter of ``book``.

    For the HTML renderer the front matter is kept in a floating ``<pre>``
    block for review purposes. The book is changed in place and returned.
    """
    is_html = context.get("renderer") == "html"
    for chapter in iter_chapters(book):
        parts = split_frontmatter(chapter.get("content", ""))
        if parts is None:
            continue
        frontmatter, content = parts
        if is_html:
            pre = f'<pre class="frontmatter">{frontmatter}</pre>'
            chapter["content"] = f"{pre}\n\n{content}"
        else:
            chapter["content"] = content
    return book