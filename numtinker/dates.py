"""Calendar helpers for stepping through dates one day at a time."""

from __future__ import annotations

from dataclasses import dataclass

_DAYS_IN_MONTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_per_month(year: int, month: int) -> int:
    """Return the number of days in the given month (1-12) of the given year."""
    if not 0 < month < 13 or year < 1:
        raise ValueError(f"invalid year/month: {year}/{month}")
    days = _DAYS_IN_MONTHS[month - 1]
    if month == 2 and is_leap_year(year):
        days += 1
    return days


@dataclass
class Date:
    """A calendar day with a day-of-week counter running from 1 to 7."""

    year: int
    month: int
    date: int
    day_of_week: int

    def roll_day_of_week(self) -> None:
        """Advance the day of week, wrapping from 7 back to 1."""
        self.day_of_week += 1
        if self.day_of_week > 7:
            self.day_of_week = 1

    def tomorrow(self) -> None:
        """Advance this date in place to the following day."""
        if self.date + 1 <= days_per_month(self.year, self.month):
            self.date += 1
        else:
            self.date = 1
            if self.month == 12:
                self.month = 1
                self.year += 1
            else:
                self.month += 1
        self.roll_day_of_week()