"""The main work screen: title bar, number grid, refinement bins and footer."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from lumon_mdr.app import App, DataContainer
from lumon_mdr.theme import Color, Style
from lumon_mdr.ui.canvas import Canvas, Length, Min, Percentage, Rect, split
from lumon_mdr.ui.grid import draw_number_grid

SMALL_LOGO = (
    "╭──────────╮",
    "│  LUMON   │",
    "│ INDUSTRY │",
    "╰──────────╯",
)

MIN_WIDTH = 50
MIN_HEIGHT = 20
CONTAINER_CLICK_VALUE = 3
CONTAINER_HEIGHT = 6

_LOGO_WIDTH = 12
_LOGO_HEIGHT = 4
_YELLOW_BOLD = Style(fg=Color.YELLOW, bold=True)


def progress_bar_parts(width: int, filled: int, text: str, text_start: int,
                       text_end: int) -> Tuple[str, str, str]:
    """The top border, the filled middle with ``text`` laid over it, and the bottom border."""
    top = "┌" + "─" * width + "┐"
    middle = []
    for i in range(width):
        if text_start <= i < text_end:
            offset = i - text_start
            if offset < len(text):
                middle.append(text[offset])
        elif i < filled:
            middle.append("█")
        else:
            middle.append(" ")
    bar = "│" + "".join(middle) + "│"
    bottom = "└" + "─" * width + "┘"
    return top, bar, bottom


def container_layout(area: Rect, container_width: int) -> List[Rect]:
    """Five bins of ``container_width`` with gaps between them, left to right."""
    gap = 1 if area.width < 80 else 5
    constraints = [Length(container_width)]
    for _ in range(4):
        constraints += [Length(gap), Length(container_width)]
    return split(area, constraints, vertical=False)


def draw_main_screen(canvas: Canvas, area: Rect, app: App) -> None:
    if area.width < MIN_WIDTH or area.height < MIN_HEIGHT:
        canvas.paragraph(area, f"Window too small\nMin size: {MIN_WIDTH}x{MIN_HEIGHT}",
                         style=_YELLOW_BOLD, align="center")
        return

    fg = app.palette.fg_style()
    layout = _main_layout(area)

    _draw_title_bar(canvas, layout[0], app)
    _draw_divider(canvas, layout[1], fg, thick=True)

    canvas.fill(layout[2], fg)
    draw_number_grid(canvas, layout[2], app)

    _draw_divider(canvas, layout[3], fg, thick=True)
    _draw_data_containers(canvas, layout[5], app)
    _draw_divider(canvas, layout[7], fg, thick=False)
    _draw_footer(canvas, layout[8], app)


def _main_layout(area: Rect) -> List[Rect]:
    small = area.height < 25
    padding = 0 if small else 1
    return split(
        area,
        [
            Length(3),
            Length(1),
            Min(5),
            Length(1),
            Length(padding),
            Length(CONTAINER_HEIGHT),
            Length(padding),
            Length(1),
            Length(1),
        ],
        margin=1 if small else 2,
    )


def _draw_title_bar(canvas: Canvas, area: Rect, app: App) -> None:
    fg = app.palette.fg_style()
    inner = canvas.box(area, fg)

    containers = app.containers
    completion = sum(c.progress for c in containers) / len(containers) if containers else 0.0
    completion_text = f"{math.floor(completion + 0.5)}% Complete"
    name_text = f" {app.username} "
    spacer = max(inner.width - len(name_text) - len(completion_text) - (_LOGO_WIDTH + 2), 0)

    canvas.paragraph(inner, [[(name_text, fg), (" " * spacer, fg), (completion_text, fg)]])
    _draw_logo_at_right_edge(canvas)


def _draw_logo_at_right_edge(canvas: Canvas) -> None:
    x = max(max(canvas.width - _LOGO_WIDTH, 0) - 2, 0)
    rect = Rect(x, 1, _LOGO_WIDTH, _LOGO_HEIGHT)
    canvas.paragraph(rect, [(line, _YELLOW_BOLD) for line in SMALL_LOGO])


def _draw_footer(canvas: Canvas, area: Rect, app: App) -> None:
    text = f"0x{id(app):016x} : 0x{id(app.containers):016x}"
    canvas.paragraph(area, [text], style=app.palette.fg_style(), align="center")


def _progress_symbol(progress: float) -> str:
    if progress >= 100.0:
        return "■"
    if progress >= 75.0:
        return "▣"
    if progress >= 50.0:
        return "▢"
    if progress >= 25.0:
        return "□"
    return "·"


def _draw_data_containers(canvas: Canvas, area: Rect, app: App) -> None:
    fg = app.palette.fg_style()
    available = max(area.width - 4 * 5, 0)
    container_width = max(available // 5, 1)

    if area.width < 40:
        rects = split(area, [Percentage(20)] * 5, vertical=False)
        for rect, container in zip(rects, app.containers):
            canvas.paragraph(rect, [_progress_symbol(container.progress)], style=fg,
                             align="center")
        return

    bins = container_layout(area, container_width)[::2]
    _process_container_clicks(app, bins)
    for idx, (rect, container) in enumerate(zip(bins, app.containers)):
        _draw_single_container(canvas, rect, idx, container, app)


def _process_container_clicks(app: App, bins: Sequence[Rect]) -> None:
    if app.last_clicked is None:
        return
    x, y = app.last_clicked
    for idx, rect in enumerate(bins):
        if rect.contains(x, y):
            app.add_to_container(idx, CONTAINER_CLICK_VALUE)
            break


def _draw_single_container(canvas: Canvas, rect: Rect, idx: int,
                           container: DataContainer, app: App) -> None:
    parts = split(rect, [Length(3), Length(3), Min(0)])
    fg = app.palette.fg_style()
    _draw_container_number(canvas, parts[0], idx, fg)
    _draw_progress_bar(canvas, parts[1], container.progress, fg)


def _draw_container_number(canvas: Canvas, area: Rect, idx: int, fg: Style) -> None:
    inner = canvas.box(area, fg)
    center_y = inner.y + inner.height // 2
    canvas.paragraph(Rect(inner.x, center_y, inner.width, 1), [f"0{idx + 1}"], style=fg,
                     align="center")


def _draw_progress_bar(canvas: Canvas, area: Rect, progress: float, fg: Style) -> None:
    percentage = int(progress)
    width = max(area.width - 2, 0)
    filled = int(width * (percentage / 100.0))
    text = f"{percentage}%"
    start = max((width - len(text)) // 2, 0)
    parts = progress_bar_parts(width, filled, text, start, start + len(text))
    canvas.paragraph(area, list(parts), style=fg, align="center")


def _draw_divider(canvas: Canvas, area: Rect, fg: Style, thick: bool) -> None:
    line = ("━" if thick else "─") * area.width
    canvas.paragraph(area, [line], style=fg)