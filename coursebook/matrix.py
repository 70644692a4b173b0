"""Transposing and printing small integer matrices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Matrix = list[list[int]]

_EXAMPLE: Matrix = [
    [101, 102, 103],
    [201, 202, 203],
    [301, 302, 303],
]


def transpose(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return the transpose of a rectangular ``matrix`` as a new list of rows."""
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return [list(column) for column in zip(*rows)]


def pretty_print(matrix: Iterable[Sequence[int]]) -> None:
    """Print each row of ``matrix`` on its own line as ``[a, b, c]``."""
    for row in matrix:
        print(list(row))


def main(argv: Sequence[str] | None = None) -> int:
    """Print an example matrix and its transpose."""
    matrix = [row[:] for row in _EXAMPLE]
    print("matrix:")
    pretty_print(matrix)
    print("transposed:")
    pretty_print(transpose(matrix))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())