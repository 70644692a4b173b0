"""Comparing two numbers and reporting the result."""

from __future__ import annotations


def analyze_numbers(x: int, y: int) -> str:
    """Print and return which of ``x`` and ``y`` is the smaller."""
    if x < y:
        message = f"x ({x}) is smallest!"
    else:
        message = f"y ({y}) is probably larger than x ({x})"
    print(message)
    return message


if __name__ == "__main__":
    analyze_numbers(10, 20)
    analyze_numbers(123, 321)