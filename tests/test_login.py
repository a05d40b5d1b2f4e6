from lumon_mdr.app import App
from lumon_mdr.theme import Color, Palette
from lumon_mdr.ui.canvas import Canvas
from lumon_mdr.ui.login import draw_login_screen, input_spans


def test_input_spans_cursor_at_end():
    app = App(username="Helly", username_cursor=5)
    spans = input_spans(app)
    assert "".join(text for text, _ in spans) == "Helly "
    assert spans[-1][1].bg == Color.WHITE


def test_input_spans_cursor_in_middle_highlights_character():
    app = App(username="Dylan", username_cursor=2)
    before, cursor, after = input_spans(app)
    assert before[0] == "Dy"
    assert cursor[0] == "l"
    assert cursor[1].fg == Color.BLACK
    assert cursor[1].bg == Color.WHITE
    assert after[0] == "an"
    assert before[1] == app.palette.fg_style()


def test_input_spans_empty_name():
    spans = input_spans(App())
    assert "".join(text for text, _ in spans) == " "


def test_large_screen_shows_title_logo_and_controls():
    canvas = Canvas(120, 40)
    draw_login_screen(canvas, canvas.area, App())
    screen = "\n".join(canvas.row_text(y) for y in range(canvas.height))
    assert "LUMON INDUSTRIES TERMINAL" in screen
    assert "|_____|" in screen
    assert "APPLICATION CONTROLS" in screen
    assert "Enter your employee identification name:" in screen
    assert "ERROR: Employee name cannot be empty" not in screen


def test_small_screen_hides_logo_and_shortens_controls():
    canvas = Canvas(80, 19)
    draw_login_screen(canvas, canvas.area, App())
    screen = "\n".join(canvas.row_text(y) for y in range(canvas.height))
    assert "LUMON INDUSTRIES TERMINAL" in screen
    assert "|_____|" not in screen
    assert "CONTROLS: [q] Quit [r] Reset" in screen
    assert "APPLICATION CONTROLS" not in screen


def test_error_message_shown():
    canvas = Canvas(120, 40)
    draw_login_screen(canvas, canvas.area, App(show_login_error=True))
    screen = "\n".join(canvas.row_text(y) for y in range(canvas.height))
    assert "ERROR: Employee name cannot be empty" in screen


def test_username_drawn_bold_inside_box():
    app = App(palette=Palette.X256, username="Mark", username_cursor=4)
    canvas = Canvas(120, 40)
    draw_login_screen(canvas, canvas.area, app)
    rows = [(y, canvas.row_text(y)) for y in range(canvas.height)]
    rows = [(y, row) for y, row in rows if "│Mark" in row]
    assert len(rows) == 1
    y, row = rows[0]
    x = row.index("Mark")
    char, style = canvas.cells[y][x]
    assert char == "M"
    assert style.bold
    assert style.fg == app.palette.fg_style().fg
    assert canvas.cells[y][x + 4][1].bg == Color.WHITE


def test_divider_spans_width():
    canvas = Canvas(120, 40)
    draw_login_screen(canvas, canvas.area, App())
    dividers = [canvas.row_text(y) for y in range(canvas.height)]
    dividers = [row for row in dividers if "━" in row]
    assert len(dividers) == 1
    assert dividers[0].strip() == "━" * len(dividers[0].strip())