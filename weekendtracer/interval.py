"""Closed and open real intervals."""

from __future__ import annotations

from dataclasses import dataclass

from weekendtracer.utils import INFINITY


@dataclass(frozen=True, slots=True)
class Interval:
    """A range of reals from ``min`` to ``max``; empty by default."""

    min: float = INFINITY
    max: float = -INFINITY

    def size(self) -> float:
        """Length of the interval (negative when empty)."""
        return self.max - self.min

    def contains(self, x: float) -> bool:
        """True if ``x`` lies in the closed interval."""
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        """True if ``x`` lies strictly inside the interval."""
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        """Limit ``x`` to the interval bounds."""
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x


EMPTY = Interval(INFINITY, -INFINITY)
UNIVERSE = Interval(-INFINITY, INFINITY)