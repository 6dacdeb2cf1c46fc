"""Ray intersection records and the interface of objects a ray can hit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.vec3 import Point3, Vec3, dot


@dataclass(slots=True)
class HitRecord:
    """Where and how a ray met a surface."""

    point: Point3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    t: float = 0.0
    front_face: bool = False

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Orient the stored normal against the incoming ray.

        ``outward_normal`` is assumed to have unit length.
        """
        self.front_face = dot(ray.direction, outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, ray_t: Interval) -> HitRecord | None:
        """Return the nearest hit with ``t`` strictly inside ``ray_t``, or None."""