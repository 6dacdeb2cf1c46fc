"""Spheres as hittable objects."""

from __future__ import annotations

import math

from weekendtracer.hittable import HitRecord, Hittable
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.vec3 import Point3, dot


class Sphere(Hittable):
    """A sphere given by its centre and a non-negative radius."""

    __slots__ = ("center", "radius")

    def __init__(self, center: Point3, radius: float) -> None:
        self.center = center
        self.radius = max(0.0, float(radius))

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius!r})"

    def hit(self, ray: Ray, ray_t: Interval) -> HitRecord | None:
        """Nearest intersection with ``t`` strictly inside ``ray_t``, or None."""
        oc = self.center - ray.origin
        a = ray.direction.squared_length()
        h = dot(ray.direction, oc)
        c = oc.squared_length() - self.radius * self.radius
        discriminant = h * h - a * c

        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)

        root = (h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        point = ray.at(root)
        outward_normal = (point - self.center) / self.radius
        rec = HitRecord(point=point, normal=outward_normal, t=root)
        rec.set_face_normal(ray, outward_normal)
        return rec