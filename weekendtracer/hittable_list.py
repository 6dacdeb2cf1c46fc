"""A collection of hittable objects treated as one."""

from __future__ import annotations

from typing import Iterator

from weekendtracer.hittable import HitRecord, Hittable
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray


class HittableList(Hittable):
    """A scene: the nearest hit among all of its objects."""

    def __init__(self, obj: Hittable | None = None) -> None:
        self.objects: list[Hittable] = []
        if obj is not None:
            self.add(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def add(self, obj: Hittable) -> None:
        """Append an object to the scene."""
        self.objects.append(obj)

    def clear(self) -> None:
        """Remove every object."""
        self.objects.clear()

    def hit(self, ray: Ray, ray_t: Interval) -> HitRecord | None:
        """Closest hit across all objects within ``ray_t``, or None."""
        closest: HitRecord | None = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                closest = rec
        return closest