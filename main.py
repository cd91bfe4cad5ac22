"""Entry point — opens the pager window or exports a month page as PNG."""

import argparse
import logging
from datetime import date

from month_page import MonthPage, MonthPageCalculator
from settings import load_settings

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Infinitely paged month calendar.")
    parser.add_argument("--date", type=date.fromisoformat, default=None,
                        help="start date (YYYY-MM-DD), defaults to today")
    parser.add_argument("--offset", type=int, default=0,
                        help="months to page away from the start date (with --export)")
    parser.add_argument("--export", metavar="PATH", default=None,
                        help="write the month page as a PNG instead of opening a window")
    parser.add_argument("--settings", metavar="PATH", default=None,
                        help="settings file to use instead of the default one")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def export_page(path: str, start_date: date, offset: int, settings: dict) -> MonthPage:
    """Render the page *offset* months away from *start_date* to a PNG."""
    from page_image import render_page

    calculator = MonthPageCalculator(cache_size=settings["cache_size"])
    page = calculator.compute_page(start_date, calculator.center + offset)
    render_page(page, dark=settings["dark_mode"]).save(path)
    logger.info("Wrote %d-%02d to %s", page.year, page.month, path)
    return page


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings(args.settings)
    start_date = args.date or date.today()

    if args.export:
        export_page(args.export, start_date, args.offset, settings)
        return

    from calendar_window import CalendarWindow

    cal_win = CalendarWindow(start_date=start_date, settings=settings,
                             settings_path=args.settings)
    cal_win.show()
    # Closing the window only hides it; quit the loop instead
    cal_win.root.protocol("WM_DELETE_WINDOW", lambda: (cal_win.hide(), cal_win.root.quit()))
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
