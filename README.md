# lumon-mdr

A small terminal game about macrodata refinement. Sign in with your
employee name, wait for the terminal to boot, then sort the drifting
numbers into five data bins. Fill every bin to 100% to be awarded a prize.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Playing

    lumon-mdr

On start the game asks the terminal to resize itself to 120 columns by
40 rows; not every terminal honours this. If the window is still smaller
than that, a size warning is shown first; press any key to dismiss it.
Below 20 by 10 only "Terminal too small" is drawn, and the work screen
needs at least 50 by 20.

The game needs a terminal that reports mouse events (SGR mouse mode).

### Login screen

Type your employee identification name (up to 25 characters) and press
Enter. Left and Right move the cursor, Backspace and Delete edit, Esc
quits. An empty name is refused with an error message.

### Loading

A progress bar fills in random steps while status messages change. When
it reaches 100% the work screen follows. `q` quits.

### Refinement

- Move the mouse over the grid: numbers near the pointer are drawn larger.
- Click inside the grid to collect the enlarged numbers. Their sum goes
  into a random bin that is not yet full, and new random numbers take
  their place.
- Click a bin directly to add 3 to it.
- `r` empties all bins, `q` quits.

Each bin holds at most 100. The title bar shows your name and the overall
completion. Once every bin is full, the prize screen appears after about
three seconds.

### Prize screen

`r`, Enter or Space empties the bins and returns you to work; `q` or Esc
exits.

## Colours

The palette is chosen from the environment by `lumon_mdr.theme.detect`:
true colour when `COLORTERM` mentions `truecolor`, 256 colours when `TERM`
contains `256`, and the basic ANSI colours otherwise.

## Using the pieces

The game state lives in `lumon_mdr.app.App`, which takes key presses
through `on_key` (one-character strings or `lumon_mdr.app.Key` members),
mouse events through `on_mouse` and the passage of time through `tick`.
Screens are drawn onto a `lumon_mdr.ui.canvas.Canvas`, a grid of
characters and styles, by `lumon_mdr.ui.screen.draw`; `Canvas.row_text`
reads a drawn row back as plain text. `lumon_mdr.terminal.event_loop`
ties these to a `blessed` terminal.