"""Virtual infinite paging over a fixed page range.

The page at ``INITIAL_PAGE`` shows the start date's month; lower indices
step back one month per page, higher indices forward.
"""

from __future__ import annotations

import logging
from datetime import MAXYEAR, MINYEAR, date
from typing import TYPE_CHECKING, Callable

from calendar_logic import months_between, shift_months

if TYPE_CHECKING:
    from month_page import MonthPage, MonthPageCalculator

logger = logging.getLogger(__name__)

TOTAL_PAGES = 100_000
INITIAL_PAGE = TOTAL_PAGES // 2

DEFAULT_RECENTER_MARGIN = 12

# Earliest and latest (year, month) whose whole page, overflow days
# included, lies within date.min..date.max. date.min is a Monday.
FIRST_MONTH = (MINYEAR, 1)
LAST_MONTH = (MAXYEAR, 12 if date.max.weekday() == 6 else 11)


class PagerState:
    """Current page index plus the reference start date it is relative to."""

    def __init__(self, start_date: date, total_pages: int = TOTAL_PAGES,
                 initial_page: int | None = None,
                 recenter_margin: int = DEFAULT_RECENTER_MARGIN,
                 on_recenter: Callable[[date], None] | None = None) -> None:
        if total_pages < 1:
            raise ValueError(f"total_pages must be at least 1, got {total_pages}")
        center = total_pages // 2 if initial_page is None else initial_page
        if not 0 <= center < total_pages:
            raise ValueError(
                f"initial_page {center} outside [0, {total_pages})")
        self.start_date = start_date
        self.total_pages = total_pages
        self.center = center
        self.recenter_margin = recenter_margin
        self.on_recenter = on_recenter
        self.page = self._clamp(center)

    # ------------------------------------------------------------------
    # Page <-> month mapping
    # ------------------------------------------------------------------
    def month_of(self, page: int) -> tuple[int, int]:
        """Return (year, month) shown on *page*."""
        d = shift_months(self.start_date, page - self.center)
        return d.year, d.month

    def page_for(self, year: int, month: int) -> int:
        return self.center + months_between(self.start_date, date(year, month, 1))

    @property
    def current_month(self) -> tuple[int, int]:
        return self.month_of(self.page)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def bounds(self) -> tuple[int, int]:
        """Lowest and highest index that is inside the range and has a
        representable month page."""
        low = max(0, self.page_for(*FIRST_MONTH))
        high = min(self.total_pages - 1, self.page_for(*LAST_MONTH))
        return low, high

    def _clamp(self, page: int) -> int:
        low, high = self.bounds()
        return max(low, min(page, high))

    def scroll_to(self, page: int) -> int:
        """Move to *page*, clamped into the bounds; returns the new index."""
        self.page = self._clamp(page)
        self._maybe_recenter()
        return self.page

    def next(self) -> int:
        return self.scroll_to(self.page + 1)

    def previous(self) -> int:
        return self.scroll_to(self.page - 1)

    def go_today(self, today: date | None = None) -> int:
        today = today or date.today()
        return self.scroll_to(self.page_for(today.year, today.month))

    def _maybe_recenter(self) -> None:
        if self.total_pages <= 2 * self.recenter_margin + 1:
            return
        if self.recenter_margin <= self.page < self.total_pages - self.recenter_margin:
            return
        year, month = self.current_month
        self.start_date = date(year, month, 1)
        logger.info("Recentering pager at %d-%02d (was page %d)",
                    year, month, self.page)
        self.page = self.center
        if self.on_recenter is not None:
            self.on_recenter(self.start_date)

    def compute(self, calculator: MonthPageCalculator,
                today: date | None = None) -> MonthPage:
        """Return the month page for the current index."""
        offset = self.page - self.center + calculator.center
        return calculator.compute_page(self.start_date, offset, today)
