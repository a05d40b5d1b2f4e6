"""The prize screen shown once every bin is full."""

from __future__ import annotations

from lumon_mdr.app import App
from lumon_mdr.theme import Color, Style
from lumon_mdr.ui.canvas import Canvas, Length, Min, Rect, split

TROPHY = (
    "    ___________    ",
    "   '._==_==_=_.'   ",
    "   .-\\:      /-.   ",
    "  | (|:.     |) |  ",
    "   '-|:.     |-'   ",
    "     \\::.    /     ",
    "      '::. .'      ",
    "        ) (        ",
    "      _.' '._      ",
    "     '-------'     ",
)

_YELLOW_BOLD = Style(fg=Color.YELLOW, bold=True)


def draw_prize_screen(canvas: Canvas, area: Rect, app: App) -> None:
    fg = app.palette.fg_style()
    small = area.height < 15
    layout = split(
        area,
        [
            Length(3),
            Length(1),
            Length(0 if small else 5),
            Length(1 if small else 2),
            Length(3),
            Length(1),
            Length(2),
            Min(0),
        ],
        margin=1 if small else 2,
    )

    canvas.paragraph(layout[0], ["CONGRATULATIONS"], style=_YELLOW_BOLD, align="center")
    canvas.paragraph(layout[1], ["━" * layout[1].width], style=fg)

    if not small:
        shown = TROPHY[:layout[2].height]
        canvas.paragraph(layout[2], [(line, _YELLOW_BOLD) for line in shown], align="center")

    canvas.paragraph(
        layout[4],
        [
            (f"Employee {app.username} has been awarded:", fg),
            "",
            (f">> {app.prize_name} <<", Style(fg=Color.GREEN, bold=True)),
        ],
        align="center",
    )

    if small:
        instructions = [("Press [R]/[ENTER] to reset, [Q]/[ESC] to exit", fg)]
    else:
        instructions = [
            ("Press [R] or [ENTER] to reset and return to work", fg),
            ("Press [Q] or [ESC] to exit", fg),
        ]
    canvas.paragraph(layout[6], instructions, align="center")