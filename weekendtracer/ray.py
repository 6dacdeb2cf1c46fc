"""Half-lines through space, defined by an origin and a direction."""

from __future__ import annotations

from dataclasses import dataclass, field

from weekendtracer.vec3 import Point3, Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray ``P(t) = origin + t * direction``."""

    origin: Point3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)

    def at(self, t: float) -> Point3:
        """Point reached after travelling ``t`` units of ``direction``."""
        return self.origin + t * self.direction