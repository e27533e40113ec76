"""
Clock
=====
Injectable time source. A clock is any zero-argument callable returning the
current Unix time in seconds.
"""

import time
from typing import Callable, Union

Clock = Callable[[], Union[int, float]]


def system_clock() -> int:
    """Current Unix time, truncated to whole seconds."""
    return int(time.time())


class FixedClock:
    """Clock frozen at a given epoch; advance it explicitly in tests."""

    def __init__(self, now: int):
        self.now = int(now)

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += int(seconds)
