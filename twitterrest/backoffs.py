"""Exponential back-off schedules used when reconnecting."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta


@dataclass
class ExponentialBackOff:
    """Randomized exponential back-off.

    Each interval is drawn from ``current * (1 ± randomization_factor)`` and
    the current interval then grows by ``multiplier`` up to ``max_interval``.
    Once ``max_elapsed_time`` has passed since the last reset,
    :meth:`next_backoff` returns ``None`` to signal that retrying should stop.
    """

    initial_interval: timedelta = timedelta(milliseconds=500)
    randomization_factor: float = 0.5
    multiplier: float = 1.5
    max_interval: timedelta = timedelta(seconds=60)
    max_elapsed_time: timedelta | None = timedelta(minutes=15)
    clock: Callable[[], float] = time.monotonic
    rng: random.Random = field(default_factory=random.Random)
    current_interval: timedelta = field(init=False)
    _start: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Return to the initial interval and restart the elapsed-time clock."""
        self.current_interval = self.initial_interval
        self._start = self.clock()

    @property
    def elapsed_time(self) -> timedelta:
        return timedelta(seconds=self.clock() - self._start)

    def next_backoff(self) -> timedelta | None:
        """Return the wait before the next retry, or None to stop retrying."""
        if self.max_elapsed_time and self.elapsed_time > self.max_elapsed_time:
            return None
        interval = self.current_interval
        self._increment()
        delta = interval * self.randomization_factor
        return interval - delta + (delta * 2) * self.rng.random()

    def _increment(self) -> None:
        if self.current_interval >= self.max_interval / self.multiplier:
            self.current_interval = self.max_interval
        else:
            self.current_interval = self.current_interval * self.multiplier


def new_exponential_backoff() -> ExponentialBackOff:
    """Back-off starting at 5 seconds, doubling up to 320 seconds."""
    return ExponentialBackOff(
        initial_interval=timedelta(seconds=5),
        multiplier=2.0,
        max_interval=timedelta(seconds=320),
    )


def new_aggressive_exponential_backoff() -> ExponentialBackOff:
    """Back-off starting at 1 minute, doubling up to 16 minutes."""
    return ExponentialBackOff(
        initial_interval=timedelta(minutes=1),
        multiplier=2.0,
        max_interval=timedelta(minutes=16),
    )