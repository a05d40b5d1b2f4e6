"""A character-cell drawing surface with rectangles and a simple layout splitter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from lumon_mdr.theme import Style

Span = Tuple[str, Optional[Style]]
LineLike = Union[str, Span, Sequence[Span]]

_ALIGNMENTS = ("left", "center", "right")


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.width, self.height) < 0:
            raise ValueError(f"rectangle values must not be negative: {self}")

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def inner(self, margin: int = 1) -> "Rect":
        """Return the rectangle shrunk by ``margin`` cells on every side."""
        if margin < 0:
            raise ValueError("margin must not be negative")
        width = max(self.width - 2 * margin, 0)
        height = max(self.height - 2 * margin, 0)
        if width == 0 or height == 0:
            return Rect(self.x, self.y, 0, 0)
        return Rect(self.x + margin, self.y + margin, width, height)

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.right and self.y <= y < self.bottom


@dataclass(frozen=True)
class Length:
    """A fixed number of cells."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("length must not be negative")


@dataclass(frozen=True)
class Min:
    """At least this many cells, growing to take up what is left."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("minimum must not be negative")


@dataclass(frozen=True)
class Percentage:
    """A share of the available cells."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 100:
            raise ValueError("percentage must be between 0 and 100")


Constraint = Union[Length, Min, Percentage]


def split(area: Rect, constraints: Sequence[Constraint], vertical: bool = True,
          margin: int = 0) -> List[Rect]:
    """Divide ``area`` into consecutive rectangles, one per constraint."""
    inner = area.inner(margin) if margin else area
    total = inner.height if vertical else inner.width

    sizes = []
    for constraint in constraints:
        if isinstance(constraint, (Length, Min)):
            sizes.append(constraint.value)
        elif isinstance(constraint, Percentage):
            sizes.append(total * constraint.value // 100)
        else:
            raise TypeError(f"unknown constraint: {constraint!r}")

    leftover = total - sum(sizes)
    if leftover > 0 and sizes:
        flexible = [i for i, c in enumerate(constraints) if isinstance(c, Min)]
        if not flexible:
            flexible = [len(sizes) - 1]
        share, extra = divmod(leftover, len(flexible))
        for n, i in enumerate(flexible):
            sizes[i] += share + (1 if n < extra else 0)

    rects = []
    offset = 0
    for size in sizes:
        start = min(offset, total)
        size = min(size, total - start)
        if vertical:
            rects.append(Rect(inner.x, inner.y + start, inner.width, size))
        else:
            rects.append(Rect(inner.x + start, inner.y, size, inner.height))
        offset = start + size
    return rects


def _merge(base: Style, over: Optional[Style]) -> Style:
    if over is None:
        return base
    return Style(
        fg=over.fg if over.fg is not None else base.fg,
        bg=over.bg if over.bg is not None else base.bg,
        bold=base.bold or over.bold,
    )


def _normalise(lines: Union[str, Iterable[LineLike]]) -> List[List[Span]]:
    if isinstance(lines, str):
        return [[(part, None)] for part in lines.split("\n")]
    result = []
    for line in lines:
        if isinstance(line, str):
            result.append([(line, None)])
        elif isinstance(line, tuple) and len(line) == 2 and isinstance(line[0], str):
            result.append([line])
        else:
            result.append(list(line))
    return result


class Canvas:
    """A grid of (character, style) cells that screens are drawn onto."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas size must not be negative")
        self.width = width
        self.height = height
        self.cells: List[List[Tuple[str, Style]]] = [
            [(" ", Style()) for _ in range(width)] for _ in range(height)
        ]

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def put(self, x: int, y: int, text: str, style: Optional[Style] = None) -> int:
        """Write ``text`` from (x, y), clipped to the canvas; return the next column."""
        return self._write(x, y, text, style, self.width)

    def _write(self, x: int, y: int, text: str, style: Optional[Style], limit: int) -> int:
        if not 0 <= y < self.height:
            return x + len(text)
        row = self.cells[y]
        end = min(limit, self.width)
        for char in text:
            if x >= end:
                break
            if x >= 0:
                row[x] = (char, _merge(row[x][1], style))
            x += 1
        return x

    def fill(self, rect: Rect, style: Optional[Style]) -> None:
        """Lay ``style`` over every cell of ``rect``."""
        if style is None:
            return
        for y in range(max(rect.y, 0), min(rect.bottom, self.height)):
            row = self.cells[y]
            for x in range(max(rect.x, 0), min(rect.right, self.width)):
                char, old = row[x]
                row[x] = (char, _merge(old, style))

    def box(self, rect: Rect, style: Optional[Style] = None) -> Rect:
        """Draw a single-line border around ``rect`` and return its inside."""
        self.fill(rect, style)
        if rect.width == 0 or rect.height == 0:
            return rect.inner()
        last_x = rect.right - 1
        last_y = rect.bottom - 1

        def edge(left: str, right: str) -> str:
            return "".join(
                left if x == rect.x else right if x == last_x else "─"
                for x in range(rect.x, rect.right)
            )

        self.put(rect.x, rect.y, edge("┌", "┐"))
        if last_y > rect.y:
            self.put(rect.x, last_y, edge("└", "┘"))
        for y in range(rect.y + 1, last_y):
            self.put(rect.x, y, "│")
            if last_x > rect.x:
                self.put(last_x, y, "│")
        return rect.inner()

    def paragraph(self, rect: Rect, lines: Union[str, Iterable[LineLike]],
                  style: Optional[Style] = None, align: str = "left") -> None:
        """Draw lines of text inside ``rect``, truncating what does not fit."""
        if align not in _ALIGNMENTS:
            raise ValueError(f"unknown alignment: {align!r}")
        self.fill(rect, style)
        for offset, spans in enumerate(_normalise(lines)):
            if offset >= rect.height:
                break
            width = sum(len(text) for text, _ in spans)
            if align == "center":
                start = max(rect.width // 2 - width // 2, 0)
            elif align == "right":
                start = max(rect.width - width, 0)
            else:
                start = 0
            x = rect.x + start
            for text, span_style in spans:
                x = self._write(x, rect.y + offset, text, span_style, rect.right)

    def row_text(self, y: int) -> str:
        """Return the characters of row ``y``."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside the canvas")
        return "".join(char for char, _ in self.cells[y])