# weekendtracer

A small ray tracer written in pure Python. It renders scenes of spheres
and writes them as plain-text PPM (`P3`) images. It has no dependencies
outside the standard library.

## Installation

```
pip install .
```

## Command line

The `weekendtracer` command renders one scene. The image goes to
standard output, or to a file given with `-o`/`--output`. Progress
("Scanlines remaining: ...") goes to standard error.

```
weekendtracer > image.ppm
weekendtracer sky -o sky.ppm
```

The scene is picked by an optional positional argument. The default is
`diffuse`:

| Scene           | What it draws                                                      |
|-----------------|--------------------------------------------------------------------|
| `gradient`      | 200x100 red/green gradient, rows written bottom first              |
| `color-ramp`    | 256x256 version of the same gradient                               |
| `black`         | 400x225 all-black image                                            |
| `sky`           | 400x225 white-to-blue sky background                               |
| `normal-sphere` | 800x450, one sphere coloured by its surface normals                |
| `world-normals` | 800x450, a small sphere on a large ground sphere, normal shading   |
| `antialiased`   | 400x225, the same world with normal shading and 100 samples/pixel  |
| `diffuse`       | 800x450, the same world with diffuse bounces, 100 samples, depth 50 |

The sampled scenes are slow in pure Python. `antialiased` and `diffuse`
in particular can take a long time.

## Library use

```python
import sys

from weekendtracer.camera import Camera, Shading
from weekendtracer.chapters import default_world

camera = Camera(image_width=200, samples_per_pixel=10, shading=Shading.DIFFUSE)
camera.render(default_world(), sys.stdout, sys.stderr)
```

`Camera` is a dataclass. Its settings include `aspect_ratio`, `image_width`,
`samples_per_pixel`, `max_depth`, `vfov`, `look_from`, `look_at`, `vup`,
`focus_dist`, `shading` (`Shading.NORMALS` or `Shading.DIFFUSE`),
`antialias`, `clamp` and `rng`. `render` calls `initialize()`, which
recomputes the image height and the viewport from the current settings.
`Camera` also offers `get_ray`, `ray_color` and `pixel_color` for tracing
single rays or pixels.

Modules:

- `weekendtracer.utils`: `INFINITY`, `PI`, `degrees_to_radians` and
  `random_double(low, high, rng)`.
- `weekendtracer.vec3`: the immutable `Vec3` type (alias `Point3`) with
  arithmetic operators, `length`, `squared_length` and `Vec3.random`.
  Also `dot`, `cross`, `unit_vector`, `random_unit_vector` and
  `random_on_hemisphere`.
- `weekendtracer.interval`: `Interval` with `size`, `contains`,
  `surrounds` and `clamp`, plus `EMPTY` and `UNIVERSE`.
- `weekendtracer.ray`: `Ray` with `Ray.at(t)`.
- `weekendtracer.color`: `write_ppm_header`, `write_color` and
  `color_to_bytes`. With `clamp=True` components are limited to
  `[0, 0.999]` and scaled by 256. Otherwise they are scaled by 255.99.
- `weekendtracer.hittable`: the abstract `Hittable` and the `HitRecord`
  that `hit` returns. `hit` returns `None` on a miss.
- `weekendtracer.sphere`: `Sphere(center, radius)`.
- `weekendtracer.hittable_list`: `HittableList` with `add`, `clear` and
  `hit`. `hit` returns the nearest hit.
- `weekendtracer.camera`: `Camera` and `Shading`.
- `weekendtracer.chapters`: `Viewport` and `make_viewport`, the shading
  helpers (`sky_color`, `hit_sphere`, `normal_sphere_color`,
  `world_normal_color`), `default_world`, the `render_*` functions behind
  each scene, and `main`.

## Randomness

Random numbers come from a `random.Random` generator. If none is passed,
a module-level generator seeded with a fixed value is used, so a fresh
process produces the same image every time. Pass your own generator
through `Camera(rng=...)` or the `rng` arguments to control this.

## Limitations

- The only surfaces are spheres.
- The only shadings are surface normals and a grey diffuse bounce. There
  are no metal or glass materials.
- `defocus_angle` is used to compute defocus-disk vectors, but rays
  always start at the camera centre, so there is no depth-of-field blur.
- The only output format is ASCII PPM.

## Running the tests

```
pip install ".[test]"
pytest
```