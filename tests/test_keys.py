import pytest

from countryguess.keys import MOUSE_LEFT, MOUSE_MIDDLE, MOUSE_RIGHT, Key, Keyboard, Mouse
from countryguess.vectors import Vector2


def _recording_key(key_type, log):
    return Key(
        key_type,
        on_press=lambda: log.append("press"),
        on_down=lambda: log.append("down"),
        on_release=lambda: log.append("release"),
    )


def test_key_press_down_release_sequence():
    log = []
    key = _recording_key(7, log)
    key.update_value(7, True)
    key.process()
    key.process()
    key.update_value(7, False)
    key.process()
    assert log == ["press", "down", "down", "release"]
    assert key.state is False


def test_key_ignores_other_types():
    log = []
    key = _recording_key(7, log)
    key.update_value(8, True)
    key.process()
    assert log == []
    assert key.state is False


def test_repeated_down_does_not_press_again():
    log = []
    key = _recording_key(3, log)
    key.update_value(3, True)
    key.update_value(3, True)
    assert log == ["press"]
    assert key.state is True


def test_release_without_press_fires_nothing():
    log = []
    key = _recording_key(3, log)
    key.update_value(3, False)
    assert log == []


def test_keyboard_has_all_keys_in_order():
    keyboard = Keyboard()
    names = keyboard.names()
    assert len(keyboard) == 66
    assert names[:3] == ["q", "w", "e"]
    assert names[-1] == "f12"
    assert len(set(names)) == len(names)


def test_keyboard_letter_codes():
    keyboard = Keyboard()
    assert keyboard.r.key_type == ord("R")
    assert keyboard.num0.key_type == ord("0")
    assert keyboard["c"] is keyboard.c


def test_keyboard_codes_are_unique():
    keyboard = Keyboard()
    codes = [key.key_type for key in keyboard]
    assert len(set(codes)) == len(codes)


def test_keyboard_dispatches_to_matching_key():
    keyboard = Keyboard()
    log = []
    keyboard.r.on_press = lambda: log.append("r")
    keyboard.c.on_press = lambda: log.append("c")
    keyboard.update_value(ord("R"), True)
    assert log == ["r"]
    assert keyboard.r.state is True
    assert keyboard.c.state is False


def test_keyboard_process_runs_held_keys_only():
    keyboard = Keyboard()
    log = []
    keyboard.w.on_down = lambda: log.append("w")
    keyboard.s.on_down = lambda: log.append("s")
    keyboard.update_value(ord("W"), True)
    keyboard.process()
    assert log == ["w"]


def test_keyboard_unknown_key_raises():
    keyboard = Keyboard()
    assert "not_a_key" not in keyboard.names()
    with pytest.raises(AttributeError):
        getattr(keyboard, "not_a_key")


def test_mouse_buttons_have_distinct_types():
    mouse = Mouse()
    assert [b.key_type for b in mouse.buttons] == [MOUSE_LEFT, MOUSE_MIDDLE, MOUSE_RIGHT]


def test_mouse_button_dispatch():
    mouse = Mouse()
    log = []
    mouse.right.on_press = lambda: log.append("right")
    mouse.left.on_release = lambda: log.append("left-up")
    mouse.update_value(MOUSE_RIGHT, True)
    mouse.update_value(MOUSE_LEFT, True)
    mouse.update_value(MOUSE_LEFT, False)
    assert log == ["right", "left-up"]
    assert mouse.right.state is True
    assert mouse.left.state is False


def test_mouse_process_runs_hold_callback():
    mouse = Mouse()
    log = []
    mouse.middle.on_down = lambda: log.append("m")
    mouse.update_value(MOUSE_MIDDLE, True)
    mouse.process()
    mouse.update_value(MOUSE_MIDDLE, False)
    mouse.process()
    assert log == ["m"]


def test_mouse_scroll_accumulates():
    mouse = Mouse()
    mouse.update_scroll(2)
    mouse.update_scroll(-5)
    assert mouse.scroll == -3


def test_mouse_position_update():
    mouse = Mouse()
    mouse.update_position((12, 34))
    assert mouse.position == Vector2(12.0, 34.0)


def test_normalized_position_center_is_origin():
    mouse = Mouse()
    mouse.update_position((400, 300))
    assert mouse.normalized_position((800, 600)) == Vector2(0.0, 0.0)


def test_normalized_position_corners():
    mouse = Mouse()
    mouse.update_position((0, 600))
    bottom_left = mouse.normalized_position((800, 600))
    mouse.update_position((800, 0))
    top_right = mouse.normalized_position((800, 600))
    assert bottom_left == top_right.negate()
    assert top_right == Vector2.splash(1.0)