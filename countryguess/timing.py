"""Interval measurement, waiting, dates and a frame timer."""

from __future__ import annotations

import datetime as _dt
import time
from dataclasses import dataclass
from typing import Callable, Optional

Clock = Callable[[], float]

_last_interval_mark: Optional[float] = None


def get_interval() -> float:
    """Seconds since the previous call; the first call returns about zero."""
    global _last_interval_mark
    now = time.perf_counter()
    if _last_interval_mark is None:
        _last_interval_mark = now
    elapsed = now - _last_interval_mark
    _last_interval_mark = now
    return elapsed


def wait(seconds: float) -> None:
    """Busy-wait for ``seconds``."""
    start = time.perf_counter()
    while time.perf_counter() - start < seconds:
        pass


def sleep(seconds: float) -> bool:
    """Sleep for ``seconds``, yielding the CPU; returns True once done."""
    time.sleep(max(seconds, 0.0))
    return True


@dataclass(frozen=True)
class Date:
    """A calendar date and time of day, to the second."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    @classmethod
    def now(cls) -> Date:
        """The current local date and time."""
        moment = _dt.datetime.now()
        return cls(moment.year, moment.month, moment.day, moment.hour, moment.minute, moment.second)

    def __str__(self) -> str:
        return f"{self.year}.{self.month}.{self.day} {self.hour}:{self.minute}:{self.second}"


class Timer:
    """Tracks the time between updates and the time since a starting point."""

    def __init__(self, clock: Clock = time.perf_counter):
        self._clock = clock
        now = clock()
        self._interval_start = now
        self._interval_end = now
        self._elapsed_start = now

    def reset(self) -> None:
        """Start a new interval and restart the elapsed count."""
        self.update_interval()
        self.update_elapsed()

    def update_interval(self) -> None:
        """Close the current interval at the present moment."""
        self._interval_start = self._interval_end
        self._interval_end = self._clock()

    def interval(self) -> float:
        """Length in seconds of the last interval closed by :meth:`update_interval`."""
        return self._interval_end - self._interval_start

    def update_elapsed(self) -> None:
        """Restart the elapsed count from now."""
        self._elapsed_start = self._clock()

    def elapsed(self) -> float:
        """Seconds since construction or the last :meth:`update_elapsed`."""
        return self._clock() - self._elapsed_start