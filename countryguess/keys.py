"""Keyboard and mouse button state with press, hold and release callbacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Sequence, Union

from countryguess.vectors import Vector2

Callback = Callable[[], object]

MOUSE_LEFT = 0
MOUSE_MIDDLE = 1
MOUSE_RIGHT = 2


def _fire(callback: Optional[Callback]) -> None:
    """Run ``callback`` if one is set."""
    if callback is not None:
        callback()


@dataclass(eq=False)
class Key:
    """One button identified by ``key_type``.

    ``on_press`` runs when the button goes down, ``on_release`` when it comes
    up, and ``on_down`` on every :meth:`process` call while it is held.
    Callbacks left as ``None`` are skipped.
    """

    key_type: int
    on_press: Optional[Callback] = None
    on_down: Optional[Callback] = None
    on_release: Optional[Callback] = None
    _state: bool = field(default=False, init=False, repr=False)

    @property
    def state(self) -> bool:
        """Whether the button is currently held."""
        return self._state

    def update_value(self, key_type: int, new_state: bool) -> None:
        """Apply a state change if it concerns this button, firing press or release."""
        if key_type != self.key_type:
            return
        if not self._state and new_state:
            _fire(self.on_press)
        elif self._state and not new_state:
            _fire(self.on_release)
        self._state = new_state

    def process(self) -> None:
        """Run ``on_down`` if the button is held."""
        if self._state:
            _fire(self.on_down)


_KEYBOARD_CODES: tuple[tuple[str, int], ...] = (
    *((letter.lower(), ord(letter)) for letter in "QWERTZUIOPASDFGHJKLYXCVBNM"),
    *((f"num{digit}", ord(str(digit))) for digit in range(10)),
    ("period", 0xBE),
    ("comma", 0xBC),
    ("plus", 0xBB),
    ("minus", 0xBD),
    ("esc", 0x1B),
    ("tab", 0x09),
    ("caps", 0x14),
    ("shift", 0x10),
    ("ctrl", 0x11),
    ("alt", 0x12),
    ("space", 0x20),
    ("enter", 0x0D),
    ("insert", 0x2D),
    ("delete", 0x2E),
    ("up", 0x26),
    ("left", 0x25),
    ("down", 0x28),
    ("right", 0x27),
    *((f"f{number}", 0x6F + number) for number in range(1, 13)),
)


class Keyboard:
    """The tracked keyboard keys, reachable as attributes such as ``keyboard.r``."""

    __slots__ = ("_keys",)

    def __init__(self) -> None:
        self._keys: dict[str, Key] = {name: Key(code) for name, code in _KEYBOARD_CODES}

    def __getattr__(self, name: str) -> Key:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._keys[name]
        except KeyError:
            raise AttributeError(f"keyboard has no key {name!r}") from None

    def __getitem__(self, name: str) -> Key:
        return self._keys[name]

    def __iter__(self) -> Iterator[Key]:
        return iter(self._keys.values())

    def __len__(self) -> int:
        return len(self._keys)

    def names(self) -> list[str]:
        """Names of all tracked keys in their fixed order."""
        return list(self._keys)

    def update_value(self, key_type: int, state: bool) -> None:
        """Pass a key state change to every key."""
        for key in self:
            key.update_value(key_type, state)

    def process(self) -> None:
        """Run the hold callbacks of every held key."""
        for key in self:
            key.process()


Position = Union[Vector2, Sequence[float]]


class Mouse:
    """The three mouse buttons, the scroll count and the cursor position."""

    def __init__(self) -> None:
        self.left = Key(MOUSE_LEFT)
        self.middle = Key(MOUSE_MIDDLE)
        self.right = Key(MOUSE_RIGHT)
        self.hidden = False
        self._scroll = 0
        self._position = Vector2(0.0, 0.0)

    @property
    def buttons(self) -> tuple[Key, Key, Key]:
        """Left, middle and right buttons."""
        return (self.left, self.middle, self.right)

    @property
    def scroll(self) -> int:
        """Accumulated scroll wheel steps."""
        return self._scroll

    @property
    def position(self) -> Vector2:
        """Cursor position in client pixels, y pointing down."""
        return self._position

    def update_value(self, key_type: int, state: bool) -> None:
        """Pass a button state change to every button."""
        for button in self.buttons:
            button.update_value(key_type, state)

    def process(self) -> None:
        """Run the hold callbacks of every held button."""
        for button in self.buttons:
            button.process()

    def update_scroll(self, delta_scroll: int) -> None:
        """Add ``delta_scroll`` wheel steps."""
        self._scroll += delta_scroll

    def update_position(self, position: Position) -> None:
        """Record a new cursor position."""
        x, y = position
        self._position = Vector2(float(x), float(y))

    def normalized_position(self, frame_size: Position) -> Vector2:
        """Cursor position mapped to -1..1 on both axes, y pointing up."""
        width, height = (float(v) for v in frame_size)
        result = Vector2(
            self._position.x / width,
            (height - self._position.y) / height,
        )
        return result * 2.0 - Vector2.splash(1.0)