"""Top-level drawing: background, size checks and the screen for the current state."""

from __future__ import annotations

from lumon_mdr.app import App, AppState
from lumon_mdr.theme import Color, Style
from lumon_mdr.ui.canvas import Canvas, Rect
from lumon_mdr.ui.loading import draw_loading_screen
from lumon_mdr.ui.login import draw_login_screen
from lumon_mdr.ui.main_screen import draw_main_screen
from lumon_mdr.ui.prize import draw_prize_screen

DESIRED_WIDTH = 120
DESIRED_HEIGHT = 40
ABSOLUTE_MIN_WIDTH = 20
ABSOLUTE_MIN_HEIGHT = 10

_SCREENS = {
    AppState.LOGIN: draw_login_screen,
    AppState.LOADING: draw_loading_screen,
    AppState.MAIN: draw_main_screen,
    AppState.PRIZE: draw_prize_screen,
}


def draw(canvas: Canvas, app: App) -> None:
    """Draw the whole frame for ``app`` onto ``canvas``."""
    area = canvas.area
    canvas.fill(area, app.palette.bg_style())

    if area.width < ABSOLUTE_MIN_WIDTH or area.height < ABSOLUTE_MIN_HEIGHT:
        canvas.paragraph(area, "Terminal\ntoo small", style=Style(fg=Color.YELLOW, bold=True),
                         align="center")
        return

    if app.show_size_warning:
        _draw_size_warning(canvas, area, app)
        return

    _SCREENS[app.state](canvas, area, app)


def _draw_size_warning(canvas: Canvas, area: Rect, app: App) -> None:
    warning = (
        "⚠️ Window Size Warning ⚠️\n\n"
        f"Optimal size: {DESIRED_WIDTH}x{DESIRED_HEIGHT}\n"
        f"Current size: {app.current_width}x{app.current_height}\n\n"
        "Press any key to continue"
    )
    width = min(50, area.width - 4)
    height = min(10, area.height - 4)
    rect = Rect((area.width - width) // 2, (area.height - height) // 2, width, height)
    canvas.fill(rect, Style(fg=Color.YELLOW))
    inner = canvas.box(rect, Style(bg=Color.BLACK))
    canvas.paragraph(inner, warning, align="center")