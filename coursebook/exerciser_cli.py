"""The mdbook-exerciser renderer command."""

from __future__ import annotations

import argparse
import json
import logging
import os
import shutil
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path, PurePosixPath
from typing import Any

from coursebook.book import iter_chapters
from coursebook.exerciser import process

logger = logging.getLogger(__name__)


def process_all(book: Mapping[str, Any], output_directory: str | os.PathLike[str]) -> list[Path]:
    """Extract exercises from every chapter that has a path.

    Each chapter's files go into a subdirectory named after the chapter
    file's stem. Returns every path written.
    """
    output_directory = Path(output_directory)
    written: list[Path] = []
    for chapter in iter_chapters(book):
        chapter_path = chapter.get("path")
        logger.debug("Chapter %r / %r", chapter_path, chapter.get("source_path"))
        if not chapter_path:
            continue
        stem = PurePosixPath(chapter_path.replace("\\", "/")).stem
        if not stem:
            raise ValueError(f"Chapter {chapter_path!r} has no file stem")
        written.extend(process(output_directory / stem, chapter.get("content", "")))
    return written


def _read_context(stream) -> dict[str, Any]:
    try:
        context = json.load(stream)
    except ValueError as error:
        raise ValueError(f"Parsing stdin: {error}") from error
    if not isinstance(context, dict) or "book" not in context:
        raise ValueError("Parsing stdin: expected a render context with a book")
    return context


def _output_directory(context: Mapping[str, Any]) -> Path:
    config = context.get("config") or {}
    output = config.get("output") if isinstance(config, Mapping) else None
    renderer = output.get("exerciser") if isinstance(output, Mapping) else None
    if not isinstance(renderer, Mapping):
        raise ValueError("Missing output.exerciser configuration")
    value = renderer.get("output-directory")
    if value is None:
        raise ValueError("Missing output.exerciser.output-directory configuration value")
    if not isinstance(value, str):
        raise ValueError("Expected a string for output.exerciser.output-directory")
    return Path(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a render context from stdin and write out every exercise file."""
    argparse.ArgumentParser(
        prog="mdbook-exerciser",
        description="mdbook renderer that extracts exercise files",
    ).parse_args(argv)
    logging.basicConfig(level=logging.WARNING)
    try:
        context = _read_context(sys.stdin)
        output_directory = _output_directory(context)
        shutil.rmtree(output_directory, ignore_errors=True)
        try:
            output_directory.mkdir()
        except OSError as error:
            raise OSError(
                f"Failed to create output directory {str(output_directory)!r}: {error}"
            ) from error
        process_all(context["book"], output_directory)
    except (ValueError, TypeError, OSError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())