"""A list of the months of a year."""

from __future__ import annotations

import calendar
from datetime import date


def _months_in_year(year: int) -> int:
    # The Gregorian calendar has no year zero.
    return 0 if year == 0 else 12


class YearModel:
    """Lists the short month names of a year."""

    def __init__(self, year: int | None = None) -> None:
        self.year = date.today().year if year is None else year

    def row_count(self) -> int:
        return _months_in_year(self.year)

    def data(self, row: int) -> str | None:
        """Return the short name of the month at a row, or None if out of range."""
        if not 0 <= row < self.row_count():
            return None
        return calendar.month_abbr[row + 1]

    def month_names(self) -> list[str]:
        return [calendar.month_abbr[row + 1] for row in range(self.row_count())]