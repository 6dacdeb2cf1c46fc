"""Shared constants and small numeric helpers."""

from __future__ import annotations

import math
import random

INFINITY = math.inf
PI = 3.1415926535897932385

# Deterministic default generator, so repeated renders give identical output.
_DEFAULT_SEED = 5489
_default_rng = random.Random(_DEFAULT_SEED)


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def default_rng() -> random.Random:
    """Return the generator used when no generator is passed explicitly."""
    return _default_rng


def random_double(
    low: float = 0.0,
    high: float = 1.0,
    rng: random.Random | None = None,
) -> float:
    """Return a random real number in ``[low, high)``."""
    generator = rng if rng is not None else _default_rng
    return low + (high - low) * generator.random()