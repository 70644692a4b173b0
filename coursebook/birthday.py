"""A service that wishes people a happy birthday."""

from __future__ import annotations

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class BirthdayService:
    """Composes birthday wishes."""

    def wish_happy_birthday(self, name: str, years: int) -> str:
        """Return a birthday wish for ``name`` turning ``years``."""
        if isinstance(years, bool) or not isinstance(years, int):
            raise TypeError(f"years must be an integer, not {type(years).__name__}")
        if not _I32_MIN <= years <= _I32_MAX:
            raise ValueError(f"years out of range: {years}")
        return f"Happy Birthday {name}, congratulations with the {years} years!"