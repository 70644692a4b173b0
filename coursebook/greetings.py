"""Greeting people by name."""

from __future__ import annotations

import argparse
import textwrap
from collections.abc import Sequence

_WRAP_WIDTH = 24


def greeting(name: str) -> str:
    """Return a friendly greeting for ``name``."""
    return f"Hello {name}, it is very nice to meet you!"


def main(argv: Sequence[str] | None = None) -> int:
    """Print a greeting, wrapped to a narrow column."""
    parser = argparse.ArgumentParser(prog="greetings", description="Print a greeting.")
    parser.add_argument("name", nargs="?", default="Bob", help="who to greet")
    args = parser.parse_args(argv)
    print(textwrap.fill(greeting(args.name), _WRAP_WIDTH))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())