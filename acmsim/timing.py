"""Wall-clock timing of a run and small numeric helpers."""

from __future__ import annotations

import math
import time
from typing import Callable

_EPOCH_2015 = (2015, 1, 1, 0, 0, 0, 0, 0, -1)


def format_elapsed(seconds: int, prefix: str = "") -> str:
    """Format a duration in seconds as ``<prefix>-ctime=..h..m..s``."""
    seconds = int(seconds)
    if seconds < 60:
        body = f"00h00m{seconds:02d}s"
    elif seconds < 3600:
        body = f"00h{seconds // 60:02d}m{seconds % 60:02d}s"
    elif seconds < 86400:
        body = f"{seconds // 3600:02d}h{(seconds // 60) % 60:02d}m{seconds % 60:02d}s"
    else:
        body = (
            f"{seconds // 86400}d{(seconds // 3600) % 24:02d}h"
            f"{(seconds // 60) % 60:02d}m{seconds % 60:02d}s"
        )
    return f"{prefix}-ctime={body}"


class RunTimer:
    """Measures the time elapsed since its creation."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.time
        self._begin = self._clock()

    def elapsed(self) -> int:
        """Whole seconds elapsed since the timer was created."""
        return math.floor(self._clock() - self._begin)

    def since_2015(self) -> int:
        """Whole seconds between local 2015-01-01 00:00 and the timer's start."""
        return math.floor(self._begin - time.mktime(_EPOCH_2015))

    def format(self, prefix: str = "") -> str:
        """Elapsed time formatted by :func:`format_elapsed`."""
        return format_elapsed(self.elapsed(), prefix)


def square(r: float) -> float:
    return r * r


def cube(r: float) -> float:
    return r * r * r