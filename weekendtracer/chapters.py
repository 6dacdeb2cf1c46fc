"""The scenes built up chapter by chapter, and a command to render them."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, TextIO

from weekendtracer.camera import Camera, Shading
from weekendtracer.color import Color, write_color, write_ppm_header
from weekendtracer.hittable import Hittable
from weekendtracer.hittable_list import HittableList
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.sphere import Sphere
from weekendtracer.utils import INFINITY
from weekendtracer.vec3 import Point3, Vec3, dot, unit_vector

_WHITE = Vec3(1.0, 1.0, 1.0)
_SKY_BLUE = Vec3(0.5, 0.7, 1.0)
_BLACK = Vec3(0.0, 0.0, 0.0)
_WIDE_ASPECT = 16.0 / 9.0
_SPHERE_CENTER = Vec3(0.0, 0.0, -1.0)


@dataclass(frozen=True)
class Viewport:
    """Fixed pinhole camera geometry at the origin looking down -z."""

    image_width: int
    image_height: int
    center: Point3
    pixel00_loc: Point3
    pixel_delta_u: Vec3
    pixel_delta_v: Vec3

    def pixel_center(self, i: int, j: int) -> Point3:
        """Centre of pixel column ``i``, row ``j`` on the viewport plane."""
        return self.pixel00_loc + i * self.pixel_delta_u + j * self.pixel_delta_v

    def ray_through(self, i: int, j: int) -> Ray:
        """Ray from the camera centre through the centre of pixel (i, j)."""
        return Ray(self.center, self.pixel_center(i, j) - self.center)


def make_viewport(image_width: int, aspect_ratio: float) -> Viewport:
    """Viewport of height 2 at focal length 1 for the given image size."""
    image_height = max(1, int(image_width / aspect_ratio))

    focal_length = 1.0
    viewport_height = 2.0
    viewport_width = viewport_height * (image_width / image_height)
    center = Vec3(0.0, 0.0, 0.0)

    viewport_u = Vec3(viewport_width, 0.0, 0.0)
    viewport_v = Vec3(0.0, -viewport_height, 0.0)  # image rows run downwards

    pixel_delta_u = viewport_u / image_width
    pixel_delta_v = viewport_v / image_height

    upper_left = center - Vec3(0.0, 0.0, focal_length) - viewport_u / 2 - viewport_v / 2
    pixel00_loc = upper_left + 0.5 * (pixel_delta_u + pixel_delta_v)

    return Viewport(
        image_width=image_width,
        image_height=image_height,
        center=center,
        pixel00_loc=pixel00_loc,
        pixel_delta_u=pixel_delta_u,
        pixel_delta_v=pixel_delta_v,
    )


def _streams(out: TextIO | None, log: TextIO | None) -> tuple[TextIO, TextIO]:
    return (sys.stdout if out is None else out, sys.stderr if log is None else log)


def _scan(
    out: TextIO | None,
    log: TextIO | None,
    width: int,
    height: int,
    rows: Iterable[int],
    shade: Callable[[int, int], Color],
    clamp: bool = False,
) -> None:
    out, log = _streams(out, log)
    write_ppm_header(out, width, height)
    for j in rows:
        log.write(f"\rScanlines remaining: {height - j} ")
        log.flush()
        for i in range(width):
            write_color(out, shade(i, j), clamp)
    log.write("\rDone.                 \n")


def render_gradient(out: TextIO | None = None, log: TextIO | None = None) -> None:
    """Render the 200x100 red/green gradient, bottom row first."""
    width, height = 200, 100
    _scan(
        out,
        log,
        width,
        height,
        range(height - 1, -1, -1),
        lambda i, j: Vec3(i / width, j / height, 0.2),
    )


def render_color_ramp(out: TextIO | None = None, log: TextIO | None = None) -> None:
    """Render the 256x256 colour ramp, bottom row first."""
    width = height = 256
    _scan(
        out,
        log,
        width,
        height,
        range(height - 1, -1, -1),
        lambda i, j: Vec3(i / width, j / height, 0.2),
    )


def render_black(out: TextIO | None = None, log: TextIO | None = None) -> None:
    """Render the all-black image traced through the first viewport."""
    view = make_viewport(400, _WIDE_ASPECT)

    def shade(i: int, j: int) -> Color:
        view.ray_through(i, j)
        return _BLACK

    _scan(
        out,
        log,
        view.image_width,
        view.image_height,
        range(view.image_height - 1, -1, -1),
        shade,
    )


def sky_color(ray: Ray) -> Color:
    """Blend white to sky blue by the height of the ray direction."""
    unit_direction = unit_vector(ray.direction)
    a = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - a) * _WHITE + a * _SKY_BLUE


def render_sky(out: TextIO | None = None, log: TextIO | None = None) -> None:
    """Render the background sky gradient."""
    view = make_viewport(400, _WIDE_ASPECT)
    _scan(
        out,
        log,
        view.image_width,
        view.image_height,
        range(view.image_height),
        lambda i, j: sky_color(view.ray_through(i, j)),
    )


def hit_sphere(center: Point3, radius: float, ray: Ray) -> float:
    """Nearest ``t`` at which ``ray`` meets the sphere, or -1.0 on a miss."""
    oc = center - ray.origin
    a = ray.direction.squared_length()
    h = dot(ray.direction, oc)
    c = oc.squared_length() - radius * radius
    discriminant = h * h - a * c
    if discriminant < 0:
        return -1.0
    return (h - discriminant**0.5) / a


def normal_sphere_color(ray: Ray) -> Color:
    """Colour a single sphere by its surface normal over the sky."""
    t = hit_sphere(_SPHERE_CENTER, 0.5, ray)
    if t > 0.0:
        n = unit_vector(ray.at(t) - _SPHERE_CENTER)
        return 0.5 * Vec3(n.x + 1, n.y + 1, n.z + 1)
    return sky_color(ray)


def render_normal_sphere(out: TextIO | None = None, log: TextIO | None = None) -> None:
    """Render one sphere shaded by its normals."""
    view = make_viewport(800, _WIDE_ASPECT)
    _scan(
        out,
        log,
        view.image_width,
        view.image_height,
        range(view.image_height),
        lambda i, j: normal_sphere_color(view.ray_through(i, j)),
    )


def world_normal_color(ray: Ray, world: Hittable) -> Color:
    """Colour the nearest hit in ``world`` by its normal, else the sky."""
    rec = world.hit(ray, Interval(0, INFINITY))
    if rec is not None:
        return 0.5 * (rec.normal + _WHITE)
    return sky_color(ray)


def default_world() -> HittableList:
    """A small sphere resting on a very large ground sphere."""
    world = HittableList()
    world.add(Sphere(Vec3(0.0, 0.0, -1.0), 0.5))
    world.add(Sphere(Vec3(0.0, -100.5, -1.0), 100))
    return world


def render_world_normals(out: TextIO | None = None, log: TextIO | None = None) -> None:
    """Render the default world shaded by surface normals."""
    world = default_world()
    view = make_viewport(800, _WIDE_ASPECT)
    _scan(
        out,
        log,
        view.image_width,
        view.image_height,
        range(view.image_height),
        lambda i, j: world_normal_color(view.ray_through(i, j), world),
    )


def render_antialiased(out: TextIO | None = None, log: TextIO | None = None) -> None:
    """Render the default world's normals with 100 samples per pixel."""
    camera = Camera(
        aspect_ratio=_WIDE_ASPECT,
        image_width=400,
        samples_per_pixel=100,
        shading=Shading.NORMALS,
    )
    camera.render(default_world(), out, log)


def render_diffuse(out: TextIO | None = None, log: TextIO | None = None) -> None:
    """Render the default world with diffuse bouncing light."""
    camera = Camera(
        aspect_ratio=_WIDE_ASPECT,
        image_width=800,
        samples_per_pixel=100,
        max_depth=50,
        shading=Shading.DIFFUSE,
    )
    camera.render(default_world(), out, log)


_CHAPTERS: dict[str, Callable[[TextIO | None, TextIO | None], None]] = {
    "gradient": render_gradient,
    "color-ramp": render_color_ramp,
    "black": render_black,
    "sky": render_sky,
    "normal-sphere": render_normal_sphere,
    "world-normals": render_world_normals,
    "antialiased": render_antialiased,
    "diffuse": render_diffuse,
}


def main(argv: list[str] | None = None) -> int:
    """Render one chapter's scene as a PPM image."""
    parser = argparse.ArgumentParser(
        prog="weekendtracer", description="Render a scene as a plain PPM image."
    )
    parser.add_argument(
        "chapter",
        nargs="?",
        default="diffuse",
        choices=sorted(_CHAPTERS),
        help="scene to render (default: diffuse)",
    )
    parser.add_argument(
        "-o", "--output", help="file to write the image to (default: stdout)"
    )
    args = parser.parse_args(argv)

    render = _CHAPTERS[args.chapter]
    if args.output is None:
        render(sys.stdout, sys.stderr)
    else:
        with open(args.output, "w", encoding="ascii", newline="\n") as fh:
            render(fh, sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())