"""The mdbook-course preprocessor command."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from coursebook.frontmatter import remove_frontmatter


def _parse_input(stdin: TextIO) -> tuple[dict[str, Any], dict[str, Any]]:
    data = json.load(stdin)
    if not isinstance(data, list) or len(data) != 2:
        raise ValueError("expected a [context, book] pair on standard input")
    context, book = data
    if not isinstance(context, dict) or not isinstance(book, dict):
        raise ValueError("context and book must both be JSON objects")
    return context, book


def preprocess(stdin: TextIO, stdout: TextIO) -> dict[str, Any]:
    """Read ``[context, book]`` JSON, strip front matter, write the book JSON."""
    context, book = _parse_input(stdin)
    remove_frontmatter(context, book)
    json.dump(book, stdout)
    return book


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdbook-course",
        description="mdbook preprocessor for the course book",
    )
    commands = parser.add_subparsers(dest="command")
    supports = commands.add_parser("supports")
    supports.add_argument("renderer")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the preprocessor; ``supports <renderer>`` accepts every renderer."""
    logging.basicConfig(level=logging.WARNING)
    args = _parser().parse_args(argv)
    if args.command == "supports":
        return 0
    try:
        preprocess(sys.stdin, sys.stdout)
    except (ValueError, KeyError, TypeError, OSError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())