import random

import pytest

from lumon_mdr.app import PRIZES, App, AppState, DataContainer, Key
from lumon_mdr.theme import Palette


def make_app(seed=1):
    return App(palette=Palette.ANSI, rng=random.Random(seed))


def type_text(app, text):
    for ch in text:
        app.on_key(ch)


def fill_all(app):
    for i in range(len(app.containers)):
        app.add_to_container(i, 100)


def test_new_app_defaults():
    app = make_app()
    assert app.state is AppState.LOGIN
    assert app.running is True
    assert len(app.containers) == 5
    assert all(c.count == 0 and c.progress == 0.0 for c in app.containers)


def test_container_caps_at_capacity():
    container = DataContainer()
    container.add(60)
    assert not container.is_full()
    container.add(60)
    assert container.count == 100
    assert container.progress == 100.0
    assert container.is_full()


def test_typing_and_cursor_editing():
    app = make_app()
    type_text(app, "mark")
    assert app.username == "mark"
    assert app.username_cursor == 4
    app.on_key(Key.LEFT)
    app.on_key(Key.LEFT)
    app.on_key("X")
    assert app.username == "maXrk"
    app.on_key(Key.BACKSPACE)
    assert app.username == "mark"
    assert app.username_cursor == 2
    app.on_key(Key.DELETE)
    assert app.username == "mak"
    app.on_key(Key.RIGHT)
    app.on_key(Key.RIGHT)
    assert app.username_cursor == len(app.username)


def test_cursor_bounds_are_respected():
    app = make_app()
    app.on_key(Key.LEFT)
    app.on_key(Key.BACKSPACE)
    app.on_key(Key.DELETE)
    assert app.username == "" and app.username_cursor == 0
    type_text(app, "ab")
    app.on_key(Key.RIGHT)
    app.on_key(Key.DELETE)
    assert app.username == "ab" and app.username_cursor == 2


def test_username_limited_to_25_characters():
    app = make_app()
    type_text(app, "x" * 40)
    assert len(app.username) == 25
    assert app.username_cursor == 25


def test_enter_with_blank_name_shows_error_then_clears():
    app = make_app()
    type_text(app, "   ")
    app.on_key(Key.ENTER)
    assert app.show_login_error is True
    assert app.state is AppState.LOGIN
    app.on_key(Key.LEFT)
    assert app.show_login_error is False


def test_enter_with_name_starts_loading():
    app = make_app()
    type_text(app, "helly")
    app.on_key(Key.ENTER)
    assert app.state is AppState.LOADING


def test_escape_on_login_quits():
    app = make_app()
    app.on_key(Key.ESC)
    assert app.running is False


def test_multi_character_key_rejected():
    app = make_app()
    with pytest.raises(ValueError):
        app.on_key("ab")


def test_size_warning_swallows_one_key():
    app = make_app()
    app.show_size_warning = True
    app.on_key("a")
    assert app.show_size_warning is False
    assert app.username == ""
    app.on_key("a")
    assert app.username == "a"


def test_main_keys_reset_and_quit():
    app = make_app()
    app.state = AppState.MAIN
    app.add_to_container(0, 40)
    app.on_key("r")
    assert app.containers[0].count == 0
    app.on_key(Key.ESC)
    assert app.running is True
    app.on_key("q")
    assert app.running is False


@pytest.mark.parametrize("key", ["r", " ", Key.ENTER])
def test_prize_keys_return_to_work(key):
    app = make_app()
    fill_all(app)
    app.state = AppState.PRIZE
    app.on_key(key)
    assert app.state is AppState.MAIN
    assert not any(c.count for c in app.containers)


@pytest.mark.parametrize("key", ["q", Key.ESC])
def test_prize_keys_quit(key):
    app = make_app()
    app.state = AppState.PRIZE
    app.on_key(key)
    assert app.running is False


def test_mouse_tracks_position_and_clicks():
    app = make_app()
    app.on_mouse(3, 4)
    assert app.mouse_position == (3, 4)
    assert app.last_clicked is None
    app.on_mouse(7, 8, pressed=True)
    assert app.last_clicked == (7, 8)


def test_add_to_container_clears_click_and_ignores_bad_index():
    app = make_app()
    app.last_clicked = (1, 1)
    app.add_to_container(9, 5)
    assert app.last_clicked == (1, 1)
    assert all(c.count == 0 for c in app.containers)
    app.add_to_container(2, 5)
    assert app.containers[2].count == 5
    assert app.last_clicked is None


def test_add_random_adds_between_one_and_ten():
    app = make_app()
    for _ in range(20):
        before = sum(c.count for c in app.containers)
        app.add_random()
        added = sum(c.count for c in app.containers) - before
        assert 1 <= added <= 10


def test_add_to_random_non_full_container_only_hits_non_full():
    app = make_app()
    for i in range(4):
        app.add_to_container(i, 100)
    app.last_clicked = (2, 2)
    app.add_to_random_non_full_container(7)
    assert app.containers[4].count == 7
    assert app.last_clicked is None


def test_add_to_random_when_all_full_still_clears_click():
    app = make_app()
    fill_all(app)
    app.last_clicked = (2, 2)
    app.add_to_random_non_full_container(7)
    assert all(c.count == 100 for c in app.containers)
    assert app.last_clicked is None


def test_replace_numbers_store_digits():
    app = make_app()
    assert app.get_replaced_number(1, 2) is None
    app.replace_numbers([(1, 2), (3, 4)])
    for pos in [(1, 2), (3, 4)]:
        digit = app.get_replaced_number(*pos)
        assert digit in range(10)
    assert set(app.replaced_numbers) == {(1, 2), (3, 4)}


def test_loading_progresses_to_main():
    app = make_app(seed=7)
    app.state = AppState.LOADING
    previous = 0.0
    for _ in range(2000):
        app.tick()
        assert previous <= app.progress_percentage <= 100.0
        previous = app.progress_percentage
        if app.state is AppState.MAIN:
            break
    assert app.state is AppState.MAIN
    assert app.progress_percentage == 100.0
    assert app.completion_delay == 2


def test_loading_only_advances_every_third_tick():
    app = make_app()
    app.state = AppState.LOADING
    app.tick()
    app.tick()
    assert app.progress_percentage == 0.0
    assert app.loading_timer == 2
    app.tick()
    assert app.loading_timer == 0


def test_prize_after_nine_complete_ticks():
    app = make_app()
    app.state = AppState.MAIN
    fill_all(app)
    for _ in range(8):
        app.tick()
    assert app.state is AppState.MAIN
    app.tick()
    assert app.state is AppState.PRIZE
    assert app.prize_name in PRIZES


def test_completion_timer_resets_when_not_complete():
    app = make_app()
    app.state = AppState.MAIN
    fill_all(app)
    app.tick()
    app.tick()
    app.containers[0].count = 50
    app.tick()
    assert app.completion_timer == 0


def test_animation_counter_wraps():
    app = make_app()
    app.animation_counter = 0xFFFFFFFF
    app.tick()
    assert app.animation_counter == 0


def test_select_random_prize_picks_from_list():
    app = make_app()
    seen = set()
    for _ in range(50):
        app.select_random_prize()
        seen.add(app.prize_name)
    assert seen <= set(PRIZES)
    assert len(seen) > 1


def test_is_all_complete():
    app = make_app()
    assert not app.is_all_complete()
    fill_all(app)
    assert app.is_all_complete()
    app.reset_containers()
    assert not app.is_all_complete()