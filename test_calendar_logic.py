from datetime import date

import pytest

from calendar_logic import (
    is_leap_year,
    month_length,
    month_title,
    months_between,
    shift_months,
    with_day,
)


@pytest.mark.parametrize("year, leap", [
    (2024, True), (2023, False), (2000, True), (1900, False), (2100, False), (2400, True),
])
def test_is_leap_year(year, leap):
    assert is_leap_year(year) is leap


def test_month_length():
    assert month_length(1, 2023) == 31
    assert month_length(4, 2023) == 30
    assert month_length(11, 2023) == 30
    assert month_length(2, 2023) == 28
    assert month_length(2, 2024) == 29
    assert month_length(2, 1900) == 28
    assert month_length(12, 2023) == 31


def test_month_length_matches_datetime():
    for year in (1999, 2000, 2023, 2024):
        for month in range(1, 13):
            first = date(year, month, 1)
            assert month_length(month, year) == (shift_months(first, 1) - first).days


def test_with_day_clamps():
    assert with_day(2023, 4, 31) == date(2023, 4, 30)
    assert with_day(2023, 2, 30) == date(2023, 2, 28)
    assert with_day(2023, 3, 15) == date(2023, 3, 15)


def test_shift_months_clamps_to_last_day():
    assert shift_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert shift_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
    assert shift_months(date(2024, 5, 31), -1) == date(2024, 4, 30)


def test_shift_months_day_31_into_30_day_months():
    start = date(2024, 1, 31)
    for months in range(-36, 37):
        shifted = shift_months(start, months)
        if month_length(shifted.month, shifted.year) == 30:
            assert shifted.day == 30
        elif shifted.month != 2:
            assert shifted.day == 31


def test_shift_months_across_years():
    assert shift_months(date(2024, 12, 15), 1) == date(2025, 1, 15)
    assert shift_months(date(2024, 1, 31), -13) == date(2022, 12, 31)
    assert shift_months(date(2024, 3, 10), 0) == date(2024, 3, 10)
    assert shift_months(date(2024, 3, 10), 120) == date(2034, 3, 10)


def test_shift_months_out_of_range():
    with pytest.raises(OverflowError):
        shift_months(date(9999, 12, 1), 1)
    with pytest.raises(OverflowError):
        shift_months(date(1, 1, 1), -1)


def test_months_between():
    assert months_between(date(2024, 2, 15), date(2024, 2, 1)) == 0
    assert months_between(date(2024, 2, 15), date(2025, 1, 31)) == 11
    assert months_between(date(2024, 2, 15), date(2023, 12, 1)) == -2


def test_month_title():
    assert month_title(2, 2024) == "February 2024"
