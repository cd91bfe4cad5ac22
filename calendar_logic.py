"""Pure calendar calculations — no UI dependencies."""

import calendar
from datetime import MAXYEAR, MINYEAR, date

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

_THIRTY_DAY_MONTHS = (4, 6, 9, 11)


def is_leap_year(year: int) -> bool:
    """Gregorian rule: every 4th year, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def month_length(month: int, year: int) -> int:
    """Return the number of days in the given month."""
    if month in _THIRTY_DAY_MONTHS:
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 31


def with_day(year: int, month: int, day: int) -> date:
    """Build a date, clamping *day* to the month's last valid day."""
    return date(year, month, min(day, month_length(month, year)))


def shift_months(d: date, months: int) -> date:
    """Move *d* by whole months, clamping the day (Jan 31 + 1 -> Feb 28/29)."""
    index = d.year * 12 + (d.month - 1) + months
    year, month0 = divmod(index, 12)
    if not MINYEAR <= year <= MAXYEAR:
        raise OverflowError("date value out of range")
    return with_day(year, month0 + 1, d.day)


def months_between(start: date, end: date) -> int:
    """Signed number of month boundaries from *start*'s month to *end*'s."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def month_title(month: int, year: int) -> str:
    return f"{calendar.month_name[month]} {year}"


def day_of_year(d: date) -> int:
    """Return the 1-based day-of-year for the given date."""
    return d.timetuple().tm_yday


def iso_week_number(d: date) -> int:
    return d.isocalendar()[1]
