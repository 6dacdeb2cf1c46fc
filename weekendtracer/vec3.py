"""Three-component vector used for points, directions and colours."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import Iterator, Union

from weekendtracer.utils import random_double

_Scalar = (int, float)


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __pos__(self) -> Vec3:
        return self

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, _Scalar):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vec3:
        if isinstance(other, _Scalar):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: object) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, _Scalar):
            return (1 / other) * self
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g} {self.z:g}"

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.squared_length())

    def squared_length(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    @classmethod
    def random(
        cls,
        low: float = 0.0,
        high: float = 1.0,
        rng: _random.Random | None = None,
    ) -> Vec3:
        """Vector whose components are each uniform in ``[low, high)``."""
        return cls(
            random_double(low, high, rng),
            random_double(low, high, rng),
            random_double(low, high, rng),
        )


Point3 = Vec3
Scalar = Union[int, float]


def dot(u: Vec3, v: Vec3) -> float:
    """Dot product."""
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u: Vec3, v: Vec3) -> Vec3:
    """Cross product."""
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    """Vector of length one pointing the same way as ``v``."""
    return v / v.length()


def random_unit_vector(rng: _random.Random | None = None) -> Vec3:
    """Uniformly distributed direction on the unit sphere."""
    while True:
        p = Vec3.random(-1.0, 1.0, rng)
        lensq = p.squared_length()
        if 1e-160 < lensq <= 1:
            return p / math.sqrt(lensq)


def random_on_hemisphere(normal: Vec3, rng: _random.Random | None = None) -> Vec3:
    """Random unit direction in the hemisphere around ``normal``."""
    on_unit_sphere = random_unit_vector(rng)
    if dot(on_unit_sphere, normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere