"""Box-drawing screen layouts for the invoice listing and annual revenue tables."""

from __future__ import annotations

import math

HORIZONTAL = "─"
VERTICAL = "│"
TOP_LEFT = "┌"
TOP_RIGHT = "┐"
BOTTOM_LEFT = "└"
BOTTOM_RIGHT = "┘"
DOUBLE_HORIZONTAL = "═"
DOUBLE_VERTICAL = "║"
DOUBLE_TOP_LEFT = "╔"
DOUBLE_TOP_RIGHT = "╗"
DOUBLE_BOTTOM_LEFT = "╚"
DOUBLE_BOTTOM_RIGHT = "╝"
TEE_RIGHT = "├"
TEE_LEFT = "┤"
TEE_DOWN = "┬"
TEE_UP = "┴"
CROSS = "┼"

STOP_HINT = "ESC = Stop Program"
INVOICE_LISTING_TITLE = "BANG LIET KE CAC HOA DON TRONG KHOANG THOI GIAN"
ANNUAL_REVENUE_TITLE = "BANG THONG KE DOANH THU NAM"


class Canvas:
    """A fixed-size grid of characters; writes outside it are dropped."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas size must not be negative")
        self.width = width
        self.height = height
        self._cells = [[" "] * width for _ in range(height)]

    def put(self, x: int, y: int, char: str) -> None:
        """Place a single character at column *x*, row *y*."""
        if len(char) != 1:
            raise ValueError("put expects exactly one character")
        if 0 <= x < self.width and 0 <= y < self.height:
            self._cells[y][x] = char

    def text(self, x: int, y: int, value: str) -> None:
        """Write *value* left to right starting at column *x*, row *y*."""
        for offset, char in enumerate(value):
            self.put(x + offset, y, char)

    def lines(self) -> list[str]:
        """The rows of the canvas with trailing blanks removed."""
        return ["".join(row).rstrip() for row in self._cells]

    def __str__(self) -> str:
        return "\n".join(self.lines())


def _box(canvas: Canvas, left: int, right: int, y: int, height: int, glyphs: tuple[str, ...]) -> None:
    horizontal, vertical, top_left, top_right, bottom_left, bottom_right = glyphs
    for ix in range(left, right + 1):
        canvas.put(ix, y, horizontal)
        canvas.put(ix, y + height, horizontal)
    for iy in range(y, y + height + 1):
        canvas.put(left, iy, vertical)
        canvas.put(right, iy, vertical)
    canvas.put(left, y, top_left)
    canvas.put(left, y + height, bottom_left)
    canvas.put(right, y, top_right)
    canvas.put(right, y + height, bottom_right)


_SINGLE = (HORIZONTAL, VERTICAL, TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT)
_DOUBLE = (
    DOUBLE_HORIZONTAL,
    DOUBLE_VERTICAL,
    DOUBLE_TOP_LEFT,
    DOUBLE_TOP_RIGHT,
    DOUBLE_BOTTOM_LEFT,
    DOUBLE_BOTTOM_RIGHT,
)


def draw_rectangle(canvas: Canvas, x: int, y: int, width: int, height: int) -> None:
    """Single-line box from (x, y) to (x + width, y + height)."""
    _box(canvas, x, x + width, y, height, _SINGLE)


def draw_double_rectangle(canvas: Canvas, x: int, y: int, width: int, height: int) -> None:
    """Double-line box from (x, y) to (x + width, y + height)."""
    _box(canvas, x, x + width, y, height, _DOUBLE)


def draw_rectangle_reverse(canvas: Canvas, x: int, y: int, x2: int, height: int) -> None:
    """Single-line box whose right edge is column *x* and left edge column *x2*."""
    for ix in range(x, x2 - 1, -1):
        canvas.put(ix, y, HORIZONTAL)
        canvas.put(ix, y + height, HORIZONTAL)
    for iy in range(y, y + height + 1):
        canvas.put(x, iy, VERTICAL)
        canvas.put(x2, iy, VERTICAL)
    canvas.put(x, y, TOP_RIGHT)
    canvas.put(x, y + height, BOTTOM_RIGHT)
    canvas.put(x2, y, TOP_LEFT)
    canvas.put(x2, y + height, BOTTOM_LEFT)


def _invoice_listing_titles(canvas: Canvas, x: int, y: int, width: int, height: int) -> None:
    half_title = len(INVOICE_LISTING_TITLE) // 2
    canvas.text(math.ceil(width * 0.5) - half_title, y + 1, INVOICE_LISTING_TITLE)
    canvas.text(math.ceil(width * 0.25) - half_title // 3, y + 3, "Tu ngay : ##/##/##")
    canvas.text(math.floor(width * 0.7) - half_title // 3, y + 3, "Den ngay : ##/##/##")
    headings = (
        (0.125, "So HD"),
        (0.325, "Ngay Lap"),
        (0.525, "Loai HD"),
        (0.7, "Ho ten NV lap"),
        (0.875, "Tri gia hoa don"),
    )
    for fraction, heading in headings:
        canvas.text(math.ceil(width * fraction) - half_title // 5, y + 5, heading)
    canvas.text(x, height - 1, STOP_HINT)


def invoice_listing_layout(width: int, height: int) -> Canvas:
    """Frame of the table listing invoices between two dates."""
    canvas = Canvas(width, height)
    x, y = 1, 0
    half = math.ceil(width * 0.5)
    column = math.ceil(width * 0.2)
    right = width - 1

    draw_rectangle(canvas, x, y, width - 2, 2)
    draw_rectangle(canvas, x, y + 2, half - 1, 2)
    draw_rectangle_reverse(canvas, right, y + 2, half, 2)
    for row, box_height in ((y + 4, 2), (y + 6, 20)):
        for k in range(4):
            draw_rectangle(canvas, x + column * k, row, column, box_height)
        draw_rectangle_reverse(canvas, right, row, column * 4 + 1, box_height)

    canvas.put(x, y + 2, TEE_RIGHT)
    canvas.put(right, y + 2, TEE_LEFT)
    canvas.put(right, y + 4, TEE_LEFT)
    canvas.put(half, y + 2, TEE_DOWN)
    canvas.put(half, y + 4, TEE_UP)
    canvas.put(x, y + 4, TEE_RIGHT)
    for k in range(1, 5):
        canvas.put(x + column * k, y + 4, TEE_DOWN)
    for k in range(1, 5):
        canvas.put(x + column * k, y + 6, TEE_UP)
    canvas.put(x, y + 6, TEE_RIGHT)
    for k in range(1, 5):
        canvas.put(x + column * k, y + 6, CROSS)
    canvas.put(right, y + 6, TEE_LEFT)
    for k in range(1, 5):
        canvas.put(x + column * k, y + 26, TEE_UP)

    _invoice_listing_titles(canvas, x, y, width, height)
    return canvas


def _annual_revenue_titles(canvas: Canvas, x: int, y: int, width: int, height: int) -> None:
    half_title = len(ANNUAL_REVENUE_TITLE) // 2
    canvas.text(math.ceil(width * 0.5) - half_title, y + 1, ANNUAL_REVENUE_TITLE)
    canvas.text(math.ceil(width * 0.25) - half_title // 3, y + 3, "Thang")
    canvas.text(math.floor(width * 0.75) - half_title // 3, y + 3, "Doanh Thu")
    canvas.text(x, height - 1, STOP_HINT)


def annual_revenue_layout(width: int, height: int) -> Canvas:
    """Frame of the table of revenue per month of a year."""
    canvas = Canvas(width, height)
    x, y = 1, 0
    half = math.ceil(width * 0.5)
    right = width - 1

    draw_rectangle(canvas, x, y, width - 2, 2)
    draw_rectangle(canvas, x, y + 2, half - 1, 2)
    draw_rectangle_reverse(canvas, right, y + 2, half, 2)
    draw_rectangle(canvas, x, y + 4, half - 1, 20)
    draw_rectangle_reverse(canvas, right, y + 4, half, 20)

    canvas.put(x, y + 2, TEE_RIGHT)
    canvas.put(x, y + 4, TEE_RIGHT)
    canvas.put(right, y + 2, TEE_LEFT)
    canvas.put(right, y + 4, TEE_LEFT)
    canvas.put(half, y + 2, TEE_DOWN)
    canvas.put(half, y + 4, CROSS)
    canvas.put(half, y + 24, TEE_UP)

    _annual_revenue_titles(canvas, x, y, width, height)
    return canvas