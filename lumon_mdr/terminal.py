"""Running the application in a terminal: input, timing and drawing."""

from __future__ import annotations

import argparse
import re
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, TextIO, Union

from lumon_mdr.app import App, Key, KeyInput
from lumon_mdr.theme import Color, Style, detect
from lumon_mdr.ui.canvas import Canvas
from lumon_mdr.ui.screen import DESIRED_HEIGHT, DESIRED_WIDTH, draw

TICK_RATE = 0.3

_MOUSE_ON = "\x1b[?1000h\x1b[?1003h\x1b[?1006h"
_MOUSE_OFF = "\x1b[?1006l\x1b[?1003l\x1b[?1000l"
_MOUSE_PATTERN = re.compile(r"\[<(\d+);(\d+);(\d+)([Mm])")
_MAX_MOUSE_SEQUENCE = 24

_SEQUENCE_KEYS = {
    "KEY_BACKSPACE": Key.BACKSPACE,
    "KEY_DELETE": Key.DELETE,
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
    "KEY_UP": Key.UP,
    "KEY_DOWN": Key.DOWN,
    "KEY_HOME": Key.HOME,
    "KEY_END": Key.END,
    "KEY_TAB": Key.TAB,
    "KEY_ENTER": Key.ENTER,
    "KEY_ESCAPE": Key.ESC,
}

_CONTROL_KEYS = {
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
    "\t": Key.TAB,
    "\x1b": Key.ESC,
}

_NAMED_COLOURS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


@dataclass(frozen=True)
class _Mouse:
    column: int
    row: int
    pressed: bool


_Event = Union[KeyInput, _Mouse]


def check_window_size(app: App, width: int, height: int) -> None:
    """Record the terminal size and whether it is smaller than desired."""
    app.window_size_warning = width < DESIRED_WIDTH or height < DESIRED_HEIGHT
    app.current_width = width
    app.current_height = height


def _translate(keystroke) -> KeyInput:
    if getattr(keystroke, "is_sequence", False):
        return _SEQUENCE_KEYS.get(keystroke.name, Key.OTHER)
    text = str(keystroke)
    if text in _CONTROL_KEYS:
        return _CONTROL_KEYS[text]
    if len(text) == 1 and text.isprintable():
        return text
    return Key.OTHER


def _read_mouse(term) -> Optional[_Mouse]:
    """Read the rest of an SGR mouse report after an escape, or put it back."""
    collected = ""
    while len(collected) < _MAX_MOUSE_SEQUENCE:
        char = str(term.inkey(timeout=0))
        if not char:
            break
        collected += char
        if collected in ("[", "[<"):
            continue
        if not collected.startswith("[<"):
            break
        if char in "Mm":
            break
    match = _MOUSE_PATTERN.fullmatch(collected)
    if match is None:
        if collected:
            term.ungetch(collected)
        return None
    button, column, row, final = match.groups()
    code = int(button)
    pressed = final == "M" and not code & 32 and not code & 64 and code & 3 != 3
    return _Mouse(int(column) - 1, int(row) - 1, pressed)


def _read_event(term, timeout: float) -> Optional[_Event]:
    keystroke = term.inkey(timeout=timeout)
    if not str(keystroke):
        return None
    if str(keystroke) == "\x1b":
        mouse = _read_mouse(term)
        if mouse is not None:
            return mouse
        return Key.ESC
    return _translate(keystroke)


def _colour_codes(colour: Color, base: int) -> List[str]:
    if colour.name is not None:
        return [str(base + _NAMED_COLOURS.index(colour.name))]
    if colour.index is not None:
        return [str(base + 8), "5", str(colour.index)]
    red, green, blue = colour.rgb
    return [str(base + 8), "2", str(red), str(green), str(blue)]


def _sgr(style: Style) -> str:
    codes = ["0"]
    if style.bold:
        codes.append("1")
    if style.fg is not None:
        codes += _colour_codes(style.fg, 30)
    if style.bg is not None:
        codes += _colour_codes(style.bg, 40)
    return f"\x1b[{';'.join(codes)}m"


def _render(stream: TextIO, canvas: Canvas) -> None:
    parts = []
    for y, row in enumerate(canvas.cells):
        parts.append(f"\x1b[{y + 1};1H")
        current = None
        for char, style in row:
            if style != current:
                parts.append(_sgr(style))
                current = style
            parts.append(char)
        parts.append("\x1b[0m")
    stream.write("".join(parts))
    stream.flush()


def event_loop(term, app: App) -> None:
    """Draw, read input and advance time until the application stops."""
    stream = term.stream
    stream.write(_MOUSE_ON)
    stream.flush()
    try:
        size = (term.width, term.height)
        check_window_size(app, *size)
        shown_size_warning = False
        last_tick = time.monotonic()

        while app.running:
            timeout = max(TICK_RATE - (time.monotonic() - last_tick), 0.0)

            canvas = Canvas(term.width, term.height)
            draw(canvas, app)
            _render(stream, canvas)

            if app.window_size_warning and not shown_size_warning:
                app.show_size_warning = True
                shown_size_warning = True

            event = _read_event(term, timeout)
            if isinstance(event, _Mouse):
                app.on_mouse(event.column, event.row, event.pressed)
            elif event is not None:
                app.on_key(event)

            new_size = (term.width, term.height)
            if new_size != size:
                size = new_size
                check_window_size(app, *size)

            if time.monotonic() - last_tick >= TICK_RATE:
                app.tick()
                last_tick = time.monotonic()
    finally:
        stream.write(_MOUSE_OFF)
        stream.flush()


def main(argv: Optional[List[str]] = None) -> int:
    """Start the refinement terminal."""
    parser = argparse.ArgumentParser(prog="lumon-mdr",
                                     description="Refine macrodata in the terminal.")
    parser.parse_args(argv)

    import blessed

    sys.stdout.write(f"\x1b[8;{DESIRED_HEIGHT};{DESIRED_WIDTH}t")
    sys.stdout.flush()

    term = blessed.Terminal()
    app = App(palette=detect())
    with term.fullscreen(), term.raw(), term.hidden_cursor():
        event_loop(term, app)
    return 0


if __name__ == "__main__":
    sys.exit(main())