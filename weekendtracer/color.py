"""Colour conversion and plain-text PPM output."""

from __future__ import annotations

from typing import TextIO

from weekendtracer.interval import Interval
from weekendtracer.vec3 import Vec3

Color = Vec3

_INTENSITY = Interval(0.000, 0.999)


def _component_to_byte(value: float, clamp: bool) -> int:
    if clamp:
        return int(256 * _INTENSITY.clamp(value))
    return int(255.99 * value)


def color_to_bytes(pixel_color: Color, clamp: bool = True) -> tuple[int, int, int]:
    """Translate ``[0, 1]`` colour components to the byte range ``[0, 255]``.

    With ``clamp`` each component is first limited to ``[0, 0.999]`` and
    scaled by 256; without it the component is scaled by 255.99 as is.
    """
    r, g, b = (_component_to_byte(c, clamp) for c in pixel_color)
    return r, g, b


def write_color(out: TextIO, pixel_color: Color, clamp: bool = True) -> None:
    """Write one pixel as a line of three byte values."""
    r, g, b = color_to_bytes(pixel_color, clamp)
    out.write(f"{r} {g} {b}\n")


def write_ppm_header(out: TextIO, width: int, height: int) -> None:
    """Write the header of an ASCII (P3) PPM image with 8-bit channels."""
    out.write(f"P3\n{width} {height}\n255\n")