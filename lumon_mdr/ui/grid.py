"""The drifting grid of numbers that employees refine by clicking."""

from __future__ import annotations

import math
import random
from typing import List, Optional, Tuple

from lumon_mdr.app import App
from lumon_mdr.ui.canvas import Canvas, Rect

GRID_SEED = 42
MAX_INFLUENCE_DISTANCE = 10.0
MAX_SCALE_FACTOR = 2.0
MAGNIFIED_THRESHOLD = 1.5


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def grid_dimensions(area: Rect) -> Tuple[int, int, int, int]:
    """Return (columns, rows, horizontal spacing, vertical spacing) for ``area``."""
    horizontal_spacing = 3 if area.width < 30 else 6
    vertical_spacing = 1 if area.height < 10 else 2

    max_width = max(area.width - 2, 0)
    max_height = max(area.height - 1, 0)

    cols = max_width // horizontal_spacing if max_width >= horizontal_spacing else 0
    rows = max_height // vertical_spacing if max_height >= vertical_spacing else 0
    return cols, rows, horizontal_spacing, vertical_spacing


def number_position(col: int, row: int, area: Rect, horizontal_spacing: int,
                    vertical_spacing: int, time: float, digit: int) -> Tuple[int, int]:
    """Where a grid number is drawn, drifting one cell along a single axis."""
    base_x = area.x + col * horizontal_spacing + 2
    base_y = area.y + row * vertical_spacing + vertical_spacing // 2

    seed = row * 0.73 + col * 0.37 + digit * 0.19
    moves_horizontally = (row + col + digit) % 2 == 0
    offset = _round_half_away(math.sin(time + seed) * 0.8)
    x_offset = offset if moves_horizontally else 0
    y_offset = 0 if moves_horizontally else offset

    max_width = max(area.width - 2, 0)
    max_height = max(area.height - 1, 0)
    x = min(max(base_x + x_offset, area.x), area.x + max_width - 1)
    y = min(max(base_y + y_offset, area.y), area.y + max_height - 1)
    return x, y


def scale_factor(mouse: Optional[Tuple[int, int]], x: int, y: int) -> float:
    """How much a number at (x, y) is magnified by the mouse: 1.0 to 2.0."""
    if mouse is None:
        return 1.0
    distance = math.hypot(x - mouse[0], y - mouse[1])
    if distance < MAX_INFLUENCE_DISTANCE:
        return 1.0 + (MAX_SCALE_FACTOR - 1.0) * (1.0 - distance / MAX_INFLUENCE_DISTANCE)
    return 1.0


def draw_number_grid(canvas: Canvas, area: Rect, app: App) -> None:
    """Draw the number grid and collect the magnified numbers under a click."""
    fg = app.palette.fg_style()
    if area.width < 5 or area.height < 3:
        canvas.paragraph(area, ["···"], style=fg, align="center")
        return

    cols, rows, h_spacing, v_spacing = grid_dimensions(area)
    if cols == 0 or rows == 0:
        return

    rng = random.Random(GRID_SEED)
    time = app.animation_counter * 0.01
    click = app.last_clicked
    click_in_area = click is not None and area.contains(*click)
    magnified: List[Tuple[int, int, int]] = []

    for row in range(rows):
        for col in range(cols):
            digit = app.get_replaced_number(col, row)
            if digit is None:
                digit = rng.randint(0, 9)
            x, y = number_position(col, row, area, h_spacing, v_spacing, time, digit)
            scale = scale_factor(app.mouse_position, x, y)
            if click_in_area and scale > MAGNIFIED_THRESHOLD:
                magnified.append((col, row, digit))
            _render_digit(canvas, x, y, digit, scale, area, fg)

    if magnified and app.last_clicked is not None:
        app.add_to_random_non_full_container(sum(digit for _, _, digit in magnified))
        app.replace_numbers((col, row) for col, row, _ in magnified)


def _render_digit(canvas: Canvas, x: int, y: int, digit: int, scale: float,
                  area: Rect, style) -> None:
    if not (x < area.right and y < area.bottom):
        return
    text = str(digit)
    if scale > 1.0 and max(_round_half_away(scale), 1) == 2:
        max_x = area.right - 1
        max_y = area.bottom - 1
        x2 = x + 1 if x < max_x else x
        y2 = y + 1 if y < max_y else y
        for px, py in ((x, y), (x2, y), (x, y2), (x2, y2)):
            canvas.put(px, py, text, style)
    else:
        canvas.put(x, y, text, style)