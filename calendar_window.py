"""Single-month pager window (tkinter) backed by the month page engine."""

import logging
from datetime import date
from tkinter import font as tkfont
import tkinter as tk
from typing import Callable

from calendar_logic import DAY_ABBR, day_of_year, month_title
from month_page import DayCell, MonthPage, MonthPageCalculator
from pager import PagerState
from settings import load_settings, save_settings
from theme import day_colors, palette

logger = logging.getLogger(__name__)

MAX_WEEKS = 6


def default_day_text(cell: DayCell) -> str:
    return str(cell.date.day)


class CalendarWindow:
    """Pages through months one at a time.

    *month_header*, *day_of_week_label* and *day_text* produce the text of
    the header, the weekday row and each day cell; pass ``None`` for the
    first two to hide that row.
    """

    def __init__(
        self,
        start_date: date | None = None,
        settings: dict | None = None,
        calculator: MonthPageCalculator | None = None,
        month_header: Callable[[int, int], str] | None = month_title,
        day_of_week_label: Callable[[int], str] | None = DAY_ABBR.__getitem__,
        day_text: Callable[[DayCell], str] = default_day_text,
        settings_path: str | None = None,
    ) -> None:
        self.root = tk.Tk()
        self.root.title(self._title())
        self.root.resizable(True, True)

        self._settings_path = settings_path
        settings = settings if settings is not None else load_settings(settings_path)
        self.colors = palette(settings["dark_mode"])
        self.root.configure(bg=self.colors["grid_bg"])
        self._saved_width: int | None = settings["window_width"]
        self._saved_height: int | None = settings["window_height"]
        self._show_week_numbers: bool = settings["show_week_numbers"]

        self.month_header = month_header
        self.day_of_week_label = day_of_week_label if settings["show_weekday_labels"] else None
        self.day_text = day_text

        self.calculator = calculator or MonthPageCalculator(cache_size=settings["cache_size"])
        self._today = date.today()
        self.pager = PagerState(start_date or self._today,
                                total_pages=settings["total_pages"])
        self.current_page: MonthPage | None = None

        self._setup_fonts()

        self._header_label: tk.Label | None = None
        self._footer_label: tk.Label | None = None
        self._week_nums: list[tk.Label] = []
        self._day_cells: list[tk.Canvas] = []
        self._build_shell()
        self._render()

        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.bind("<Left>", lambda _e: self._navigate(-1))
        self.root.bind("<Right>", lambda _e: self._navigate(1))
        self.root.bind("<Home>", lambda _e: self._go_today())
        self.root.bind("<MouseWheel>", self._on_wheel)
        # X11 reports the wheel as buttons 4 (up) and 5 (down)
        self.root.bind("<Button-4>", self._on_wheel)
        self.root.bind("<Button-5>", self._on_wheel)
        self.root.bind("<Configure>", self._on_configure)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_wn = tkfont.Font(family=base, size=8)

    @staticmethod
    def _title() -> str:
        return f"Month Pager  Day: {day_of_year(date.today())}"

    # ------------------------------------------------------------------
    # Build shell (once) — nav bar + header + weekday row + cell pool
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        c = self.colors
        outer = tk.Frame(self.root, bg=c["grid_bg"])
        outer.pack(padx=6, pady=4)

        nav = tk.Frame(outer, bg=c["grid_bg"])
        nav.pack(fill="x", pady=(0, 2))

        btn_prev = tk.Label(nav, text="◀", font=self.font_nav,
                            bg=c["grid_bg"], fg=c["fg"], cursor="hand2")
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self._navigate(-1))

        btn_next = tk.Label(nav, text="▶", font=self.font_nav,
                            bg=c["grid_bg"], fg=c["fg"], cursor="hand2")
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self._navigate(1))

        btn_today = tk.Label(nav, text="Today", font=self.font_bold,
                             bg=c["grid_bg"], fg=c["accent"], cursor="hand2")
        btn_today.pack(side="top")
        btn_today.bind("<Button-1>", lambda _e: self._go_today())

        grid = tk.Frame(outer, bg=c["grid_bg"])
        grid.pack()
        first_col = 1 if self._show_week_numbers else 0
        row = 0

        if self.month_header is not None:
            self._header_label = tk.Label(grid, font=self.font_header,
                                          bg=c["header_bg"], fg=c["header_fg"])
            self._header_label.grid(row=row, column=0, columnspan=first_col + 7,
                                    sticky="we", pady=(0, 2))
            row += 1

        if self.day_of_week_label is not None:
            if self._show_week_numbers:
                tk.Label(grid, text="Wk", font=self.font_bold, bg=c["grid_bg"],
                         fg=c["wn_fg"], width=3).grid(row=row, column=0)
            for weekday in range(7):
                fg = c["weekend_fg"] if weekday >= 5 else c["header_fg"]
                tk.Label(grid, text=self.day_of_week_label(weekday), font=self.font_bold,
                         bg=c["grid_bg"], fg=fg, width=3).grid(row=row, column=first_col + weekday)
            row += 1

        # Measure cell size to match a Label width=3
        sample = tk.Label(self.root, text="00", font=self.font_normal, width=3)
        sample.update_idletasks()
        cell_w, cell_h = sample.winfo_reqwidth(), sample.winfo_reqheight()
        sample.destroy()

        for r in range(MAX_WEEKS):
            if self._show_week_numbers:
                wn = tk.Label(grid, font=self.font_wn, bg=c["grid_bg"], fg=c["wn_fg"], width=3)
                wn.grid(row=row + r, column=0)
                self._week_nums.append(wn)
            for col in range(7):
                cell = tk.Canvas(grid, width=cell_w, height=cell_h, bg=c["grid_bg"],
                                 highlightthickness=0, borderwidth=0)
                cell.grid(row=row + r, column=first_col + col)
                self._day_cells.append(cell)

        self._footer_label = tk.Label(outer, font=self.font_normal,
                                      bg=c["grid_bg"], fg=c["wn_fg"])
        self._footer_label.pack(pady=(4, 0))

    # ------------------------------------------------------------------
    # Fill the cell pool from the current month page
    # ------------------------------------------------------------------
    def _render(self) -> None:
        today = date.today()
        if today != self._today:
            # Cached pages carry the old day's is_today flags
            self.calculator.clear()
            self._today = today
        page = self.pager.compute(self.calculator, today)
        self.current_page = page

        if self._header_label is not None:
            self._header_label.configure(text=self.month_header(page.month, page.year))

        week_numbers = page.week_numbers
        for r, wn in enumerate(self._week_nums):
            wn.configure(text=str(week_numbers[r]) if r < len(week_numbers) else "")

        for i, cell in enumerate(self._day_cells):
            if i < len(page.days):
                day = page.days[i]
                bg, fg = day_colors(day, self.colors)
                font = self.font_bold if day.is_today else self.font_normal
                self._draw_cell(cell, self.day_text(day), bg, fg, font)
            else:
                self._draw_cell(cell, "", self.colors["grid_bg"], "", self.font_normal)

        if self._footer_label is not None:
            self._footer_label.configure(text=f"Today: {today.strftime('%d.%m.%Y')}")

    def _draw_cell(self, cell: tk.Canvas, text: str, bg: str, fg: str, font) -> None:
        cell.delete("all")
        cell.configure(bg=bg)
        if text:
            w = int(cell["width"])
            h = int(cell["height"])
            cell.create_text(w // 2, h // 2, text=text, fill=fg, font=font)

    def cell_background(self, index: int) -> str:
        return self._day_cells[index].cget("bg")

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _navigate(self, direction: int) -> None:
        if direction < 0:
            self.pager.previous()
        else:
            self.pager.next()
        self._render()

    def _go_today(self) -> None:
        self.pager.go_today()
        self._render()

    def _on_wheel(self, event: tk.Event) -> None:
        if event.num == 4:
            self._navigate(-1)
        elif event.num == 5:
            self._navigate(1)
        elif event.delta:
            self._navigate(-1 if event.delta > 0 else 1)

    # ------------------------------------------------------------------
    # Persist window size
    # ------------------------------------------------------------------
    def _on_configure(self, event: tk.Event) -> None:
        if event.widget is not self.root or self.root.winfo_width() <= 1:
            return
        # Track size (persisted on hide)
        self._saved_width = self.root.winfo_width()
        self._saved_height = self.root.winfo_height()

    def _persist_size(self) -> None:
        settings = load_settings(self._settings_path)
        settings["window_width"] = self._saved_width
        settings["window_height"] = self._saved_height
        save_settings(settings, self._settings_path)
        logger.debug("Saved window size %sx%s", self._saved_width, self._saved_height)

    # ------------------------------------------------------------------
    # Show / Hide
    # ------------------------------------------------------------------
    def show(self) -> None:
        self.root.title(self._title())
        self._render()
        self.root.deiconify()
        if self._saved_width is not None and self._saved_height is not None:
            self.root.geometry(f"{self._saved_width}x{self._saved_height}")
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        if self._saved_width is not None and self._saved_height is not None:
            self._persist_size()
        self.root.withdraw()
