from lumon_mdr.app import App, AppState
from lumon_mdr.theme import Color
from lumon_mdr.ui.canvas import Canvas
from lumon_mdr.ui.prize import draw_prize_screen


def _winner():
    return App(state=AppState.PRIZE, username="Irving", prize_name="Waffle Party")


def test_large_screen_announces_prize():
    canvas = Canvas(80, 30)
    draw_prize_screen(canvas, canvas.area, _winner())
    screen = "\n".join(canvas.row_text(y) for y in range(canvas.height))
    assert "CONGRATULATIONS" in screen
    assert "Employee Irving has been awarded:" in screen
    assert ">> Waffle Party <<" in screen
    assert "Press [R] or [ENTER] to reset and return to work" in screen
    assert "Press [Q] or [ESC] to exit" in screen


def test_trophy_truncated_to_its_area():
    canvas = Canvas(80, 30)
    draw_prize_screen(canvas, canvas.area, _winner())
    screen = "\n".join(canvas.row_text(y) for y in range(canvas.height))
    assert "___________" in screen
    assert "'-------'" not in screen


def test_small_screen_has_no_trophy_and_short_instructions():
    canvas = Canvas(80, 14)
    draw_prize_screen(canvas, canvas.area, _winner())
    screen = "\n".join(canvas.row_text(y) for y in range(canvas.height))
    assert "___________" not in screen
    assert "Press [R]/[ENTER] to reset, [Q]/[ESC] to exit" in screen
    assert ">> Waffle Party <<" in screen


def test_prize_name_is_green_and_bold():
    canvas = Canvas(80, 30)
    draw_prize_screen(canvas, canvas.area, _winner())
    rows = [(y, canvas.row_text(y)) for y in range(canvas.height)]
    matches = [(y, row) for y, row in rows if ">> Waffle" in row]
    assert len(matches) == 1
    y, row = matches[0]
    style = canvas.cells[y][row.index(">>")][1]
    assert style.fg == Color.GREEN
    assert style.bold


def test_title_is_yellow():
    canvas = Canvas(80, 30)
    draw_prize_screen(canvas, canvas.area, _winner())
    rows = [(y, canvas.row_text(y)) for y in range(canvas.height)]
    matches = [(y, row) for y, row in rows if "CONGRATULATIONS" in row]
    y, row = matches[0]
    assert canvas.cells[y][row.index("C")][1].fg == Color.YELLOW