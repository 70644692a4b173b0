"""The Luhn checksum for card numbers."""

from __future__ import annotations

from collections.abc import Sequence

_DIGITS = "0123456789"
_EXAMPLE = "1234 5678 1234 5670"


def luhn(cc_number: str) -> bool:
    """Return whether ``cc_number`` passes the Luhn check.

    Spaces are ignored. Any other non-digit character, or fewer than two
    digits, makes the number invalid.
    """
    total = 0
    digits_seen = 0
    for position, char in enumerate(reversed(cc_number.replace(" ", ""))):
        if char not in _DIGITS:
            return False
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
        digits_seen += 1
    return digits_seen >= 2 and total % 10 == 0


def main(argv: Sequence[str] | None = None) -> int:
    """Report whether each given number (or an example one) is valid."""
    numbers = list(argv) if argv else [_EXAMPLE]
    for number in numbers:
        verdict = "yes" if luhn(number) else "no"
        print(f"Is {number} a valid credit card number? {verdict}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())