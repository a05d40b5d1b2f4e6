"""The login screen, where the employee enters a name."""

from __future__ import annotations

from typing import List

from lumon_mdr.app import App
from lumon_mdr.theme import Color, Style
from lumon_mdr.ui.canvas import Canvas, Length, Min, Percentage, Rect, Span, split

TITLE = "LUMON INDUSTRIES TERMINAL"
ERROR_TEXT = "ERROR: Employee name cannot be empty"

LOGO = (
    " _       _    _ __  __  ___  _   _ ",
    " | |     | |  | |  \\/  |/ _ \\| \\ | |",
    "| |     | |  | | \\  / | | | |  \\| |",
    " | |     | |  | | |\\/| | | | | . ` |",
    "| |___  | |__| | |  | | |_| | |\\  |",
    " |_____|  \\____/|_|  |_|\\___/|_| \\_|",
)

_CURSOR_STYLE = Style(fg=Color.BLACK, bg=Color.WHITE)
_END_CURSOR_STYLE = Style(bg=Color.WHITE)
_HEADING_STYLE = Style(fg=Color.YELLOW, bold=True)


def input_spans(app: App) -> List[Span]:
    """The name field's text, with the character under the cursor highlighted."""
    fg = app.palette.fg_style()
    name = app.username
    cursor = app.username_cursor
    if cursor < len(name):
        return [
            (name[:cursor], fg),
            (name[cursor], _CURSOR_STYLE),
            (name[cursor + 1:], fg),
        ]
    return [(name, fg), (" ", _END_CURSOR_STYLE)]


def draw_login_screen(canvas: Canvas, area: Rect, app: App) -> None:
    fg = app.palette.fg_style()
    small = area.height < 20
    layout = split(
        area,
        [
            Length(3),
            Length(1),
            Length(0 if small else 6),
            Length(1 if small else 2),
            Length(3),
            Length(3),
            Length(1),
            Length(0 if small else 2),
            Length(3 if small else 6),
            Min(0),
        ],
        margin=1 if small else 2,
    )

    canvas.paragraph(layout[0], [TITLE], style=fg, align="center")
    canvas.paragraph(layout[1], ["━" * layout[1].width], style=fg)

    if not small:
        bold = fg.patch(bold=True)
        canvas.paragraph(layout[2], [(line, bold) for line in LOGO], align="center")

    canvas.paragraph(
        layout[4],
        [
            ("Enter your employee identification name:", fg),
            ("Press ENTER to continue.", fg),
        ],
        align="center",
    )

    input_area = split(
        layout[5], [Percentage(25), Percentage(50), Percentage(25)], vertical=False
    )[1]
    canvas.fill(input_area, fg.patch(bold=True))
    inner = canvas.box(input_area, fg)
    canvas.paragraph(inner, [input_spans(app)])

    if app.show_login_error:
        canvas.paragraph(layout[6], [ERROR_TEXT], style=Style(fg=Color.RED, bold=True),
                         align="center")

    if small:
        usage = [
            ("CONTROLS: [q] Quit [r] Reset", _HEADING_STYLE),
            ("Use mouse to select numbers and data bins", fg),
        ]
    else:
        usage = [
            ("APPLICATION CONTROLS", _HEADING_STYLE),
            "",
            ("During operation: [q] Quit [r] Reset containers", fg),
            ("Mouse: Click on numbers to select them, click on bins to add data", fg),
            ("Complete tasks by collecting numbers into the data refinement bins", fg),
        ]
    canvas.paragraph(layout[8], usage, align="center")