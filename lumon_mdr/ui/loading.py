"""The loading screen: the company logo and a progress bar with status messages."""

from __future__ import annotations

import math

from lumon_mdr.app import App
from lumon_mdr.theme import Color, Style
from lumon_mdr.ui.canvas import Canvas, Rect

_LOGO_WIDTH = 119

# Each logo row as (indent, glyphs); rows are padded to the full logo width.
_LOGO_ROWS = (
    (47, "ZTMIKMLKOVSRSY   ZSSTZTNIHHKQX"),
    (41, "WPNPWZVZ       VP  Y   Z  OX       NSYTNOU"),
    (37, "XRRUW   TTP  KKMIGN NRSY   ZSSO XGDHHI  ZRY  UWQQU"),
    (34, "ZSLD  EDCBCL CCCCFGD FCCGGGGGGGGGDCC CGGECCCD BCCD  CGMT"),
    (32, "TTS" + " " * 54 + "NTT"),
    (30, "YWQ VRLGGGFC CGGGGGGGFLUEGGGGGGGGGGGGGGGFI DGGGGGGGGC CFGGMN OTT"),
    (29, "VT  RT     ZXTT       Z YY               ZW W        TSZZ   TTN MT"),
    (29, "T SWY    TMMSZ    TMMTSMMT   TMLSXQKMT  TMFHHHGMT UNINMLLT    TM NU"),
    (28, "WS T      M  M     N  MM  M   M   U   M  M       M O   B  M     TH N"),
    (28, "U RX      G  G     H  GG  G   G       G  G  CGE  G J      G      H H"),
    (28, "U XS      L  L     M      M   L  U U  L  L  BFB  L O  B   L     YL M"),
    (28, "XQ MT     S     Z  TLZ   NS   S   M   V  R       S T  L   S    YV TT"),
    (29, "TN OUZ   ZYRRRYZ   ZWUNPRZ   ZYYZ ZYYZ  ZRFCCGLSZ ZYYYVVVZ   TR  X"),
    (30, "TO XSSW   T OUU      U NT               WP T       TSZ X  TTM PWY"),
    (31, "VUQ  QRRXTTS OTU    UN NU             WS PT     TTM PWQSSS MTT"),
    (33, "WSSQ  VROLRX OQQW  TN NT           TP SW   URRP HJJVT  STT"),
    (36, "URRV   XQKC  TSOPPN NTT       TSM PVTONQK  KST  ZTSSZ"),
    (39, "YROQXX    T    LGD CGGGGGGGC HHNX        ZUPPVZ"),
    (44, "XQMNTXSOOW                 XTONQPLNUZ"),
    (52, "ZXRLIHHGGGGGGGHHKOUY"),
)

LUMON_LOGO = tuple((" " * indent + glyphs).ljust(_LOGO_WIDTH) for indent, glyphs in _LOGO_ROWS)

LOADING_MESSAGES = (
    "Initializing MDR protocol", "Checking refinement quotas",
    "Verifying department credentials", "Preparing macrodata bins",
    "Establishing connection to Lumon mainframe", "Running compliance check",
    "Validating severance chip", "Please enjoy all amenities equally",
)

SMALL_TITLE = "LUMON INDUSTRIES"

# Rows taken below the logo by the message and the progress bar.
_PROGRESS_ROOM = 5
# Columns of the area not given to the bar, leaving room for the percentage.
_BAR_MARGIN = 15


def loading_message(progress: float) -> str:
    """The status message shown at ``progress`` percent."""
    last = len(LOADING_MESSAGES) - 1
    if progress >= 100.0:
        return LOADING_MESSAGES[last]
    if last > 0:
        return LOADING_MESSAGES[max(math.floor(progress / 100.0 * last), 0)]
    return LOADING_MESSAGES[0]


def progress_bar_text(width: int, progress: float) -> str:
    """A one-line bar with percentage for an area ``width`` cells wide."""
    bar_width = max(width - _BAR_MARGIN, 0)
    filled = min(max(int(bar_width * (progress / 100.0)), 0), bar_width)
    return "[" + "=" * filled + " " * (bar_width - filled) + "]" + f" {progress:3.0f}%"


def draw_loading_screen(canvas: Canvas, area: Rect, app: App) -> None:
    """Draw the logo (or a short title on small areas) and the progress indicator."""
    fg = app.palette.fg_style()
    logo_w = len(LUMON_LOGO[0])
    logo_h = len(LUMON_LOGO)

    if area.width >= logo_w and area.height >= logo_h + _PROGRESS_ROOM:
        x = area.x + (area.width - logo_w) // 2
        y = area.y + (area.height - logo_h - _PROGRESS_ROOM) // 2
        rect = Rect(x, y, min(logo_w, area.width), min(logo_h, area.height - _PROGRESS_ROOM))
        canvas.paragraph(rect, [(line, fg) for line in LUMON_LOGO], style=app.palette.bg_style())
        progress_y = y + logo_h + 2
    else:
        text_y = area.y + area.height // 3
        canvas.paragraph(Rect(area.x, text_y, area.width, 1), [(SMALL_TITLE, fg)],
                         style=fg, align="center")
        progress_y = text_y + 2

    if progress_y < area.bottom:
        _draw_progress_indicator(canvas, area, app, progress_y)


def _draw_progress_indicator(canvas: Canvas, area: Rect, app: App, y: int) -> None:
    message = loading_message(app.progress_percentage)
    canvas.paragraph(Rect(area.x, y, area.width, 1),
                     [(message, Style(fg=Color.WHITE))], align="center")
    canvas.paragraph(Rect(area.x, y + 1, area.width, 1),
                     [progress_bar_text(area.width, app.progress_percentage)],
                     style=app.palette.fg_style(), align="center")