"""Colour palettes shared by the tkinter window and the image renderer."""

from month_page import DayCell

LIGHT = {
    "accent": "#0078D4",
    "grid_bg": "white",
    "header_bg": "#F3F3F3",
    "fg": "black",
    "header_fg": "#333333",
    "weekend_fg": "#CC0000",
    "overflow_fg": "#AAAAAA",
    "wn_fg": "#888888",
}

DARK = {
    "accent": "#3A96DD",
    "grid_bg": "#202020",
    "header_bg": "#2B2B2B",
    "fg": "#F0F0F0",
    "header_fg": "#DDDDDD",
    "weekend_fg": "#FF6B6B",
    "overflow_fg": "#666666",
    "wn_fg": "#999999",
}


def palette(dark: bool) -> dict:
    return DARK if dark else LIGHT


def day_colors(cell: DayCell, colors: dict) -> tuple[str, str]:
    """Return (background, foreground) for a day cell."""
    if cell.is_today:
        return colors["accent"], "white"
    if not cell.is_current_month:
        return colors["grid_bg"], colors["overflow_fg"]
    if cell.is_weekend:
        return colors["grid_bg"], colors["weekend_fg"]
    return colors["grid_bg"], colors["fg"]
