"""Render a month page into a PIL Image (in-memory)."""

from typing import Callable

from PIL import Image, ImageDraw, ImageFont

from calendar_logic import DAY_ABBR, month_title
from month_page import DayCell, MonthPage
from theme import day_colors, palette

DEFAULT_CELL_SIZE = (40, 32)
_FONT_FACES = ("segoeui.ttf", "DejaVuSans.ttf", "Arial.ttf")


def _load_font(size: int):
    for face in _FONT_FACES:
        try:
            return ImageFont.truetype(face, size)
        except OSError:
            continue
    return ImageFont.load_default()


def cell_box(index: int, cell_size: tuple[int, int] = DEFAULT_CELL_SIZE,
             top: int = 0) -> tuple[int, int, int, int]:
    """Return the (x0, y0, x1, y1) pixel box of the *index*-th day cell."""
    cw, ch = cell_size
    row, col = divmod(index, 7)
    x0 = col * cw
    y0 = top + row * ch
    return x0, y0, x0 + cw, y0 + ch


def _draw_centered(draw: ImageDraw.ImageDraw, box, text: str, fill: str, font) -> None:
    if not text:
        return
    # Centre the visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = box[0] + (box[2] - box[0] - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = box[1] + (box[3] - box[1] - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill=fill, font=font)


def render_page(
    page: MonthPage,
    cell_size: tuple[int, int] = DEFAULT_CELL_SIZE,
    dark: bool = False,
    month_header: Callable[[int, int], str] | None = month_title,
    day_of_week_label: Callable[[int], str] | None = DAY_ABBR.__getitem__,
    day_text: Callable[[DayCell], str] = lambda cell: str(cell.date.day),
) -> Image.Image:
    """Return an RGBA image of *page*: header, weekday row, one row per week.

    Passing ``None`` for *month_header* or *day_of_week_label* leaves that
    row out.
    """
    colors = palette(dark)
    cw, ch = cell_size
    width = cw * 7
    top = 0
    if month_header is not None:
        top += ch
    if day_of_week_label is not None:
        top += ch
    height = top + ch * len(page.weeks)

    img = Image.new("RGBA", (width, height), colors["grid_bg"])
    draw = ImageDraw.Draw(img)
    font = _load_font(max(8, ch // 2))

    y = 0
    if month_header is not None:
        draw.rectangle((0, 0, width - 1, ch - 1), fill=colors["header_bg"])
        _draw_centered(draw, (0, 0, width, ch),
                       month_header(page.month, page.year), colors["header_fg"], font)
        y += ch
    if day_of_week_label is not None:
        for weekday in range(7):
            fg = colors["weekend_fg"] if weekday >= 5 else colors["header_fg"]
            _draw_centered(draw, (weekday * cw, y, (weekday + 1) * cw, y + ch),
                           day_of_week_label(weekday), fg, font)

    for i, cell in enumerate(page.days):
        box = cell_box(i, cell_size, top)
        bg, fg = day_colors(cell, colors)
        if bg != colors["grid_bg"]:
            draw.rectangle((box[0], box[1], box[2] - 1, box[3] - 1), fill=bg)
        _draw_centered(draw, box, day_text(cell), fg, font)

    return img
