"""Walking the Gregorian calendar day by day to count Sundays."""

from collections.abc import Iterator
from dataclasses import dataclass


def is_leap(year: int) -> bool:
    """Tell whether year is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in month (1-12) of year."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1..12, got {month}")
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        return 29 if is_leap(year) else 28
    return 31


@dataclass(frozen=True)
class Day:
    """A calendar date with its weekday, 0 being Sunday."""

    day: int
    month: int
    year: int
    weekday: int

    def next(self) -> "Day":
        """Return the following day."""
        if self.day == days_in_month(self.month, self.year):
            if self.month == 12:
                day, month, year = 1, 1, self.year + 1
            else:
                day, month, year = 1, self.month + 1, self.year
        else:
            day, month, year = self.day + 1, self.month, self.year
        return Day(day, month, year, (self.weekday + 1) % 7)

    def __str__(self) -> str:
        return f"{self.day}-{self.month}-{self.year}: {self.weekday}"


# 1 January 1900 was a Monday.
EPOCH = Day(1, 1, 1900, 1)


def _days_from(start: Day) -> Iterator[Day]:
    current = start
    while True:
        yield current
        current = current.next()


def count_month_start_sundays(first_year: int = 1901, last_year: int = 2000) -> int:
    """Count the months from first_year to last_year that begin on a Sunday."""
    if first_year < EPOCH.year:
        raise ValueError(f"years before {EPOCH.year} are not covered")
    count = 0
    for current in _days_from(EPOCH):
        if current.year > last_year:
            break
        if current.year >= first_year and current.day == 1 and current.weekday == 0:
            count += 1
    return count