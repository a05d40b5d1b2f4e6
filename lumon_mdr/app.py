"""Application state: login, loading, refining numbers into bins, and prizes."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Tuple, Union

from lumon_mdr.theme import Palette

MAX_USERNAME_LENGTH = 25
CONTAINER_COUNT = 5
CONTAINER_CAPACITY = 100
LOADING_TICKS_PER_STEP = 3
LOADING_MAX_INCREMENT = 13.0
LOADING_COMPLETION_STEPS = 2
PRIZE_DELAY_TICKS = 9

PRIZES = (
    "Waffle Party",
    "Melon Bar",
    "Finger Trap",
    "Caricature Portrait",
    "Dance Experience",
    "Music/Dance Experience",
    "Wellness Session",
    "Coffee Cozy",
    "Choice of Desk Toy",
)


class AppState(Enum):
    LOGIN = auto()
    LOADING = auto()
    MAIN = auto()
    PRIZE = auto()


class Key(Enum):
    """Non-character keys; printable characters are passed as one-character strings."""

    BACKSPACE = auto()
    DELETE = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    HOME = auto()
    END = auto()
    TAB = auto()
    ENTER = auto()
    ESC = auto()
    OTHER = auto()


KeyInput = Union[Key, str]


@dataclass
class DataContainer:
    """A refinement bin that fills up to 100."""

    count: int = 0
    progress: float = 0.0

    def add(self, value: int) -> None:
        self.count = min(self.count + value, CONTAINER_CAPACITY)
        self.progress = float(self.count)

    def is_full(self) -> bool:
        return self.count >= CONTAINER_CAPACITY


def _new_containers() -> List[DataContainer]:
    return [DataContainer() for _ in range(CONTAINER_COUNT)]


@dataclass
class App:
    palette: Palette = Palette.ANSI
    running: bool = True
    state: AppState = AppState.LOGIN
    username: str = ""
    username_cursor: int = 0
    show_login_error: bool = False
    loading_timer: int = 0
    progress_percentage: float = 0.0
    completion_delay: int = 0
    completion_timer: int = 0
    prize_name: str = ""
    animation_counter: int = 0
    mouse_position: Optional[Tuple[int, int]] = None
    last_clicked: Optional[Tuple[int, int]] = None
    containers: List[DataContainer] = field(default_factory=_new_containers)
    replaced_numbers: Dict[Tuple[int, int], int] = field(default_factory=dict)
    window_size_warning: bool = False
    show_size_warning: bool = False
    current_width: int = 0
    current_height: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    # -- input -----------------------------------------------------------

    def on_key(self, key: KeyInput) -> None:
        if isinstance(key, str) and len(key) != 1:
            raise ValueError(f"expected a single character, got {key!r}")

        if self.show_size_warning:
            self.show_size_warning = False
            return

        if self.state is AppState.LOGIN:
            self._login_key(key)
        elif self.state is AppState.PRIZE:
            if key in ("q", Key.ESC):
                self.running = False
            elif key in ("r", " ", Key.ENTER):
                self.reset_containers()
                self.state = AppState.MAIN
        elif key == "q":
            self.running = False
        elif key == "r":
            self.reset_containers()

    def _login_key(self, key: KeyInput) -> None:
        self.show_login_error = False
        if isinstance(key, str):
            if len(self.username) < MAX_USERNAME_LENGTH:
                cursor = self.username_cursor
                self.username = self.username[:cursor] + key + self.username[cursor:]
                self.username_cursor += 1
        elif key is Key.BACKSPACE:
            if self.username_cursor > 0:
                self.username_cursor -= 1
                self._remove_at_cursor()
        elif key is Key.DELETE:
            if self.username_cursor < len(self.username):
                self._remove_at_cursor()
        elif key is Key.LEFT:
            if self.username_cursor > 0:
                self.username_cursor -= 1
        elif key is Key.RIGHT:
            if self.username_cursor < len(self.username):
                self.username_cursor += 1
        elif key is Key.ENTER:
            if self.username.strip():
                self.state = AppState.LOADING
            else:
                self.show_login_error = True
        elif key is Key.ESC:
            self.running = False

    def _remove_at_cursor(self) -> None:
        cursor = self.username_cursor
        self.username = self.username[:cursor] + self.username[cursor + 1:]

    def on_mouse(self, column: int, row: int, pressed: bool = False) -> None:
        self.mouse_position = (column, row)
        if pressed:
            self.last_clicked = (column, row)

    # -- number grid -----------------------------------------------------

    def replace_number(self, col: int, row: int) -> None:
        self.replaced_numbers[(col, row)] = self.rng.randint(0, 9)

    def replace_numbers(self, positions: Iterable[Tuple[int, int]]) -> None:
        for col, row in positions:
            self.replace_number(col, row)

    def get_replaced_number(self, col: int, row: int) -> Optional[int]:
        return self.replaced_numbers.get((col, row))

    # -- containers ------------------------------------------------------

    def add_to_container(self, index: int, value: int) -> None:
        if 0 <= index < len(self.containers):
            self.containers[index].add(value)
            self.last_clicked = None

    def add_random(self) -> None:
        index = self.rng.randrange(len(self.containers))
        self.add_to_container(index, self.rng.randint(1, 10))

    def add_to_random_non_full_container(self, value: int) -> None:
        candidates = [i for i, container in enumerate(self.containers) if not container.is_full()]
        if candidates:
            self.add_to_container(self.rng.choice(candidates), value)
        self.last_clicked = None

    def reset_containers(self) -> None:
        for container in self.containers:
            container.count = 0
            container.progress = 0.0

    def is_all_complete(self) -> bool:
        return all(container.is_full() for container in self.containers)

    # -- time ------------------------------------------------------------

    def tick(self) -> None:
        self.animation_counter = (self.animation_counter + 1) & 0xFFFFFFFF

        if self.state is AppState.LOADING:
            self._tick_loading()
        elif self.state is AppState.MAIN:
            if self.is_all_complete():
                self.completion_timer += 1
                if self.completion_timer >= PRIZE_DELAY_TICKS:
                    self.select_random_prize()
                    self.state = AppState.PRIZE
            else:
                self.completion_timer = 0

    def _tick_loading(self) -> None:
        self.loading_timer += 1
        if self.loading_timer < LOADING_TICKS_PER_STEP:
            return
        self.loading_timer = 0
        if self.progress_percentage >= 100.0:
            self.progress_percentage = 100.0
            self.completion_delay += 1
            if self.completion_delay >= LOADING_COMPLETION_STEPS:
                self.state = AppState.MAIN
        else:
            increment = self.rng.random() * LOADING_MAX_INCREMENT
            self.progress_percentage = min(self.progress_percentage + increment, 100.0)

    def select_random_prize(self) -> None:
        self.prize_name = self.rng.choice(PRIZES)