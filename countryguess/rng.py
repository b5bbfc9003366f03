"""Random values of the package's basic types, drawn from the module-level generator."""

from __future__ import annotations

import random
import string
from typing import Optional

from countryguess.vectors import Vector2, Vector3, Vector4


def get_bool() -> bool:
    """A random boolean."""
    return random.random() < 0.5


def get_byte() -> int:
    """A random integer in ``[0, 255]``."""
    return random.randrange(256)


def get_color(gray: bool = False) -> tuple[int, int, int]:
    """A random RGB colour; all three channels equal when ``gray``."""
    if gray:
        value = get_byte()
        return (value, value, value)
    return (get_byte(), get_byte(), get_byte())


def get_int(start: int, end: Optional[int] = None) -> int:
    """A random integer in ``[start, end)``, or in ``[0, start)`` with one argument."""
    if end is None:
        start, end = 0, start
    return random.randrange(start, end)


def get_float(start: Optional[float] = None, end: Optional[float] = None) -> float:
    """A random float in ``[0, 1]``, ``[0, start]`` or ``[start, end]`` by argument count."""
    if start is None:
        return random.random()
    if end is None:
        return random.random() * start
    return random.random() * (end - start) + start


def get_char(upper: bool = False) -> str:
    """A random ASCII letter of the chosen case."""
    return random.choice(string.ascii_uppercase if upper else string.ascii_lowercase)


def get_string(length: int) -> str:
    """A random string of ``length`` mixed-case ASCII letters."""
    return "".join(get_char(get_bool()) for _ in range(length))


def get_vector2(start: Optional[float] = None, end: Optional[float] = None) -> Vector2:
    """A vector whose components are drawn as by :func:`get_float`."""
    return Vector2(get_float(start, end), get_float(start, end))


def get_vector3(start: Optional[float] = None, end: Optional[float] = None) -> Vector3:
    """A vector whose components are drawn as by :func:`get_float`."""
    return Vector3(*(get_float(start, end) for _ in range(3)))


def get_vector4(start: Optional[float] = None, end: Optional[float] = None) -> Vector4:
    """A vector whose components are drawn as by :func:`get_float`."""
    return Vector4(*(get_float(start, end) for _ in range(4)))