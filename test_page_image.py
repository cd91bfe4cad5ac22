from datetime import date

import pytest

pytest.importorskip("PIL")

from month_page import build_page
from page_image import cell_box, render_page

TODAY = date(2024, 2, 15)


@pytest.fixture
def february():
    return build_page(date(2024, 2, 1), TODAY)


def test_cell_box():
    assert cell_box(0) == (0, 0, 40, 32)
    assert cell_box(8, (40, 32), top=64) == (40, 96, 80, 128)
    assert cell_box(17, (20, 10)) == (60, 20, 80, 30)


def test_image_size(february):
    img = render_page(february)
    assert img.mode == "RGBA"
    # header + weekday row + 5 weeks
    assert img.size == (280, 32 * 7)


def test_image_size_without_header_rows(february):
    img = render_page(february, cell_size=(30, 20), month_header=None, day_of_week_label=None)
    assert img.size == (210, 100)


def test_today_cell_is_accent_coloured(february):
    img = render_page(february)
    index = [c.date for c in february.days].index(TODAY)
    x0, y0, _x1, _y1 = cell_box(index, top=64)
    assert img.getpixel((x0, y0)) == (0, 120, 212, 255)


def test_header_and_grid_background(february):
    img = render_page(february)
    assert img.getpixel((0, 0)) == (243, 243, 243, 255)
    x0, y0, _x1, _y1 = cell_box(0, top=64)
    assert img.getpixel((x0, y0)) == (255, 255, 255, 255)


def test_dark_palette(february):
    img = render_page(february, dark=True, month_header=None)
    x0, y0, _x1, _y1 = cell_box(0, top=32)
    assert img.getpixel((x0, y0)) == (32, 32, 32, 255)


def test_callbacks_receive_page_data(february):
    headers, labels, cells = [], [], []
    render_page(
        february,
        month_header=lambda m, y: headers.append((m, y)) or "",
        day_of_week_label=lambda wd: labels.append(wd) or "",
        day_text=lambda cell: cells.append(cell.date) or "",
    )
    assert headers == [(2, 2024)]
    assert labels == list(range(7))
    assert cells == [c.date for c in february.days]
