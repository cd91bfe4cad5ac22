"""Month page engine: day cells for one pager page, memoized per month.

A page covers one calendar month plus the overflow days of the adjacent
months needed to fill whole Monday-to-Sunday weeks.  The pager's center
index (``pager.INITIAL_PAGE``) is the start date's own month.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable

from calendar_logic import iso_week_number, month_length, shift_months
from pager import INITIAL_PAGE

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 24

MonthKey = tuple[int, int]  # (month, year)


@dataclass(frozen=True)
class DayCell:
    """One grid cell."""

    date: date
    is_today: bool = False
    is_previous_month: bool = False
    is_next_month: bool = False

    @property
    def is_current_month(self) -> bool:
        return not self.is_previous_month and not self.is_next_month

    @property
    def is_weekend(self) -> bool:
        return self.date.weekday() >= 5


@dataclass(frozen=True)
class MonthPage:
    """Chronological day cells of one month page (length is a multiple of 7)."""

    days: tuple[DayCell, ...]
    month: int
    year: int

    @property
    def key(self) -> MonthKey:
        return self.month, self.year

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def leading(self) -> tuple[DayCell, ...]:
        return tuple(c for c in self.days if c.is_previous_month)

    @property
    def current(self) -> tuple[DayCell, ...]:
        return tuple(c for c in self.days if c.is_current_month)

    @property
    def trailing(self) -> tuple[DayCell, ...]:
        return tuple(c for c in self.days if c.is_next_month)

    @property
    def weeks(self) -> tuple[tuple[DayCell, ...], ...]:
        """Rows of 7 cells, Monday first."""
        return tuple(self.days[i:i + 7] for i in range(0, len(self.days), 7))

    @property
    def week_numbers(self) -> list[int]:
        """ISO week number of each row."""
        return [iso_week_number(row[0].date) for row in self.weeks]


def target_month_start(start_date: date, page_offset: int,
                       center: int = INITIAL_PAGE) -> date:
    """First day of the month shown on *page_offset*.

    Pages below *center* lie before *start_date*'s month, pages above it
    after.
    """
    return shift_months(start_date, page_offset - center).replace(day=1)


def leading_days(first: date, today: date) -> list[DayCell]:
    """Previous-month days from the preceding Monday up to *first* (exclusive)."""
    return [
        _cell(first - timedelta(days=n), today, previous=True)
        for n in range(first.weekday(), 0, -1)
    ]


def current_days(first: date, today: date) -> list[DayCell]:
    count = month_length(first.month, first.year)
    return [_cell(first + timedelta(days=n), today) for n in range(count)]


def trailing_days(last: date, today: date) -> list[DayCell]:
    """Next-month days after *last* up to the following Sunday."""
    return [
        _cell(last + timedelta(days=n), today, next_=True)
        for n in range(1, 7 - last.weekday())
    ]


def build_page(first: date, today: date) -> MonthPage:
    """Compute the page for the month starting at *first* (no caching)."""
    current = current_days(first, today)
    days = (
        leading_days(first, today)
        + current
        + trailing_days(current[-1].date, today)
    )
    return MonthPage(tuple(days), first.month, first.year)


def _cell(d: date, today: date, previous: bool = False,
          next_: bool = False) -> DayCell:
    return DayCell(
        date=d,
        is_today=d == today,
        is_previous_month=previous,
        is_next_month=next_,
    )


class MonthPageCalculator:
    """Computes month pages and keeps the most recently used ones.

    *cache_size* bounds the number of cached months (least recently used
    entries are evicted first); ``None`` keeps every month ever computed.
    *clock* supplies "today" when :meth:`compute_page` is not given one.
    """

    def __init__(self, cache_size: int | None = DEFAULT_CACHE_SIZE,
                 clock: Callable[[], date] = date.today,
                 center: int = INITIAL_PAGE) -> None:
        if cache_size is not None and cache_size < 1:
            raise ValueError(f"cache_size must be at least 1, got {cache_size}")
        self.cache_size = cache_size
        self.center = center
        self._clock = clock
        self._cache: OrderedDict[MonthKey, MonthPage] = OrderedDict()
        self._lock = threading.Lock()

    def compute_page(self, start_date: date, page_offset: int,
                     today: date | None = None) -> MonthPage:
        """Return the page *page_offset* positions from the start date's page.

        A cached page is returned as stored, including its ``is_today``
        flags from the time it was computed.
        """
        first = target_month_start(start_date, page_offset, self.center)
        key = (first.month, first.year)
        with self._lock:
            page = self._cache.get(key)
            if page is not None:
                self._cache.move_to_end(key)
                logger.debug("Page cache hit for %02d/%d", *key)
                return page

            if today is None:
                today = self._clock()
            page = build_page(first, today)
            self._cache[key] = page
            logger.debug("Page cache miss for %02d/%d (%d cells)", *key, len(page.days))
            self._evict()
        return page

    def _evict(self) -> None:
        if self.cache_size is None:
            return
        while len(self._cache) > self.cache_size:
            key, _page = self._cache.popitem(last=False)
            logger.debug("Evicted cached page %02d/%d", *key)

    def cached_months(self) -> list[MonthKey]:
        """Cached (month, year) keys, least recently used first."""
        with self._lock:
            return list(self._cache)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache
