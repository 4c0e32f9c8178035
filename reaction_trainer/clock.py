from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Monotonic clock used for reaction timing.

    The trial controller reads it when a key is highlighted and again when the
    matching input arrives; tests inject a fake.
    """

    def now(self) -> float:
        """Return monotonic seconds."""


class RealClock:
    """Production clock backed by time.perf_counter()."""

    def now(self) -> float:
        return time.perf_counter()
