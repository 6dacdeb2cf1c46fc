"""A configurable pinhole camera that renders a scene to a PPM image."""

from __future__ import annotations

import enum
import math
import random
import sys
from dataclasses import dataclass, field
from typing import TextIO

from weekendtracer.color import Color, write_color, write_ppm_header
from weekendtracer.hittable import Hittable
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.utils import INFINITY, degrees_to_radians, random_double
from weekendtracer.vec3 import (
    Point3,
    Vec3,
    cross,
    random_on_hemisphere,
    unit_vector,
)

_WHITE = Vec3(1.0, 1.0, 1.0)
_SKY_BLUE = Vec3(0.5, 0.7, 1.0)
_BLACK = Vec3(0.0, 0.0, 0.0)
_SHADOW_ACNE_EPSILON = 0.001


class Shading(enum.Enum):
    """How a surface hit is coloured."""

    NORMALS = "normals"
    DIFFUSE = "diffuse"


@dataclass
class Camera:
    """Camera settings plus the viewport geometry derived from them.

    Change the settings freely; :meth:`initialize` (called by :meth:`render`)
    recomputes the derived geometry.
    """

    aspect_ratio: float = 1.0
    image_width: int = 800
    samples_per_pixel: int = 10
    max_depth: int = 10

    vfov: float = 90.0
    look_from: Point3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    look_at: Point3 = field(default_factory=lambda: Vec3(0.0, 0.0, -1.0))
    vup: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))

    defocus_angle: float = 0.0
    focus_dist: float = 10.0

    shading: Shading = Shading.DIFFUSE
    antialias: bool = True
    clamp: bool = True
    rng: random.Random | None = None

    image_height: int = field(init=False, default=0)
    pixel_sample_scale: float = field(init=False, default=0.0)
    center: Point3 = field(init=False, default_factory=Vec3)
    pixel00_loc: Point3 = field(init=False, default_factory=Vec3)
    pixel_delta_u: Vec3 = field(init=False, default_factory=Vec3)
    pixel_delta_v: Vec3 = field(init=False, default_factory=Vec3)
    u: Vec3 = field(init=False, default_factory=Vec3)
    v: Vec3 = field(init=False, default_factory=Vec3)
    w: Vec3 = field(init=False, default_factory=Vec3)
    defocus_disk_u: Vec3 = field(init=False, default_factory=Vec3)
    defocus_disk_v: Vec3 = field(init=False, default_factory=Vec3)
    _initialized: bool = field(init=False, default=False, repr=False)

    def initialize(self) -> None:
        """Compute image height, camera basis and viewport from the settings."""
        if self.image_width < 1:
            raise ValueError(f"image_width must be positive, got {self.image_width}")
        if self.antialias and self.samples_per_pixel < 1:
            raise ValueError(
                f"samples_per_pixel must be positive, got {self.samples_per_pixel}"
            )

        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.pixel_sample_scale = (
            1.0 / self.samples_per_pixel if self.samples_per_pixel > 0 else 1.0
        )
        self.center = self.look_from

        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        self.w = unit_vector(self.look_from - self.look_at)
        self.u = unit_vector(cross(self.vup, self.w))
        self.v = cross(self.w, self.u)

        viewport_u = viewport_width * self.u
        viewport_v = viewport_height * -self.v  # image rows run downwards

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (
            self.center - (self.focus_dist * self.w) - viewport_u / 2 - viewport_v / 2
        )
        self.pixel00_loc = viewport_upper_left + 0.5 * (
            self.pixel_delta_u + self.pixel_delta_v
        )

        defocus_radius = self.focus_dist * math.tan(
            degrees_to_radians(self.defocus_angle / 2)
        )
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius
        self._initialized = True

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.initialize()

    def sample_square(self) -> Vec3:
        """Random offset in the square ``[-0.5, 0.5) x [-0.5, 0.5)`` with z = 0."""
        return Vec3(
            random_double(rng=self.rng) - 0.5,
            random_double(rng=self.rng) - 0.5,
            0.0,
        )

    def get_ray(self, i: int, j: int) -> Ray:
        """Ray from the camera centre through a random point around pixel (i, j)."""
        self._ensure_initialized()
        offset = self.sample_square()
        pixel_sample = (
            self.pixel00_loc
            + (i + offset.x) * self.pixel_delta_u
            + (j + offset.y) * self.pixel_delta_v
        )
        origin = self.center
        return Ray(origin, pixel_sample - origin)

    def ray_color(self, ray: Ray, depth: int, world: Hittable) -> Color:
        """Colour seen along ``ray``, following at most ``depth`` bounces."""
        if depth <= 0:
            return _BLACK

        rec = world.hit(ray, Interval(_SHADOW_ACNE_EPSILON, INFINITY))
        if rec is not None:
            if self.shading is Shading.NORMALS:
                return 0.5 * (rec.normal + _WHITE)
            direction = random_on_hemisphere(rec.normal, self.rng)
            return 0.5 * self.ray_color(Ray(rec.point, direction), depth - 1, world)

        unit_direction = unit_vector(ray.direction)
        a = 0.5 * (unit_direction.y + 1.0)
        return (1.0 - a) * _WHITE + a * _SKY_BLUE

    def pixel_color(self, i: int, j: int, world: Hittable) -> Color:
        """Final colour of pixel (i, j): one centre ray, or the sample average."""
        self._ensure_initialized()
        if not self.antialias:
            pixel_center = (
                self.pixel00_loc + i * self.pixel_delta_u + j * self.pixel_delta_v
            )
            ray = Ray(self.center, pixel_center - self.center)
            return self.ray_color(ray, self.max_depth, world)

        total = _BLACK
        for _ in range(self.samples_per_pixel):
            total = total + self.ray_color(self.get_ray(i, j), self.max_depth, world)
        return self.pixel_sample_scale * total

    def render(
        self,
        world: Hittable,
        out: TextIO | None = None,
        log: TextIO | None = None,
    ) -> None:
        """Render ``world`` as a P3 PPM image to ``out``, progress to ``log``."""
        out = sys.stdout if out is None else out
        log = sys.stderr if log is None else log

        self.initialize()
        write_ppm_header(out, self.image_width, self.image_height)

        for j in range(self.image_height):
            log.write(f"\rScanlines remaining: {self.image_height - j} ")
            log.flush()
            for i in range(self.image_width):
                write_color(out, self.pixel_color(i, j, world), self.clamp)

        log.write("\rDone.                 \n")