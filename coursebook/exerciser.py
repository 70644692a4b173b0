"""Extract exercise files from code blocks in Markdown."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from markdown_it import MarkdownIt
from markdown_it.token import Token

logger = logging.getLogger(__name__)

_FILENAME_START = "<!-- File "
_FILENAME_END = " -->"

_MARKDOWN = MarkdownIt("commonmark")


def _filename_from_html(html: str) -> str | None:
    html = html.strip()
    if (
        html.startswith(_FILENAME_START)
        and html.endswith(_FILENAME_END)
        and len(html) >= len(_FILENAME_START) + len(_FILENAME_END)
    ):
        return html[len(_FILENAME_START) : len(html) - len(_FILENAME_END)]
    return None


def _events(tokens: Iterable[Token]) -> Iterator[tuple[str, str]]:
    """Yield ``("html", text)`` and ``("code", text)`` events in document order."""
    for token in tokens:
        if token.type == "html_block":
            for line in token.content.splitlines():
                yield "html", line
        elif token.type == "inline":
            for child in token.children or ():
                if child.type == "html_inline":
                    yield "html", child.content
        elif token.type in ("fence", "code_block"):
            yield "code", token.content


def process(output_directory: str | os.PathLike[str], input_contents: str) -> list[Path]:
    """Write each code block announced by a ``<!-- File name -->`` comment.

    The file is named by the comment, relative to ``output_directory``.
    Code blocks without such a comment are ignored; a comment stays pending
    until the next code block. Returns the paths written, in order.
    """
    output_directory = Path(output_directory)
    next_filename: str | None = None
    written: list[Path] = []
    for kind, text in _events(_MARKDOWN.parse(input_contents)):
        logger.debug("%s: %r", kind, text)
        if kind == "html":
            filename = _filename_from_html(text)
            if filename is not None:
                next_filename = filename
                logger.info("Next file: %r", next_filename)
        elif next_filename is not None:
            full_filename = output_directory / next_filename
            logger.info("Opening %s", full_filename)
            full_filename.parent.mkdir(parents=True, exist_ok=True)
            with full_filename.open("w", encoding="utf-8", newline="") as output:
                output.write(text)
            written.append(full_filename)
            next_filename = None
    return written