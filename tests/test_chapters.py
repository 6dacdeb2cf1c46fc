import io
import math

import pytest

from weekendtracer.chapters import (
    Viewport,
    default_world,
    hit_sphere,
    main,
    make_viewport,
    normal_sphere_color,
    render_black,
    render_color_ramp,
    render_gradient,
    render_normal_sphere,
    render_sky,
    sky_color,
    world_normal_color,
)
from weekendtracer.ray import Ray
from weekendtracer.sphere import Sphere
from weekendtracer.vec3 import Vec3


def _parse(text):
    lines = text.splitlines()
    header = lines[:3]
    pixels = [tuple(int(v) for v in line.split()) for line in lines[3:]]
    return header, pixels


def test_make_viewport_height_from_aspect():
    view = make_viewport(400, 16.0 / 9.0)
    assert view.image_width == 400
    assert view.image_height == 225


def test_make_viewport_height_at_least_one():
    assert make_viewport(1, 16.0 / 9.0).image_height == 1


def test_viewport_corners_are_symmetric():
    view = make_viewport(400, 16.0 / 9.0)
    first = view.pixel_center(0, 0)
    last = view.pixel_center(view.image_width - 1, view.image_height - 1)
    assert first.x + last.x == pytest.approx(0.0, abs=1e-12)
    assert first.y + last.y == pytest.approx(0.0, abs=1e-12)
    assert first.z == pytest.approx(-1.0)
    assert first.x < 0 < first.y


def test_viewport_pixel_steps():
    view = Viewport(
        image_width=2,
        image_height=2,
        center=Vec3(),
        pixel00_loc=Vec3(0.0, 0.0, -1.0),
        pixel_delta_u=Vec3(1.0, 0.0, 0.0),
        pixel_delta_v=Vec3(0.0, -1.0, 0.0),
    )
    assert view.pixel_center(1, 1) == Vec3(1.0, -1.0, -1.0)


def test_render_gradient_header_and_size():
    out, log = io.StringIO(), io.StringIO()
    render_gradient(out, log)
    header, pixels = _parse(out.getvalue())
    assert header == ["P3", "200 100", "255"]
    assert len(pixels) == 200 * 100
    assert all(0 <= c <= 255 for p in pixels for c in p)


def test_render_gradient_first_pixel_is_bottom_up():
    out, log = io.StringIO(), io.StringIO()
    render_gradient(out, log)
    _, pixels = _parse(out.getvalue())
    assert pixels[0] == (0, 253, 51)
    # red grows along a row, green falls from row to row
    assert pixels[199][0] > pixels[0][0]
    assert pixels[200][1] < pixels[0][1]


def test_render_gradient_progress_log():
    out, log = io.StringIO(), io.StringIO()
    render_gradient(out, log)
    text = log.getvalue()
    assert text.startswith("\rScanlines remaining: 1 ")
    assert "\rScanlines remaining: 100 " in text
    assert text.endswith("\rDone.                 \n")


def test_render_color_ramp_size_and_range():
    out, log = io.StringIO(), io.StringIO()
    render_color_ramp(out, log)
    header, pixels = _parse(out.getvalue())
    assert header == ["P3", "256 256", "255"]
    assert len(pixels) == 256 * 256
    assert len({p[2] for p in pixels}) == 1
    assert all(0 <= c <= 255 for p in pixels for c in p)


def test_render_black_is_all_black():
    out, log = io.StringIO(), io.StringIO()
    render_black(out, log)
    header, pixels = _parse(out.getvalue())
    assert header == ["P3", "400 225", "255"]
    assert len(pixels) == 400 * 225
    assert set(pixels) == {(0, 0, 0)}
    assert log.getvalue().endswith("\rDone.                 \n")


def test_sky_color_extremes():
    up = sky_color(Ray(Vec3(), Vec3(0.0, 1.0, 0.0)))
    down = sky_color(Ray(Vec3(), Vec3(0.0, -3.0, 0.0)))
    assert tuple(up) == pytest.approx((0.5, 0.7, 1.0))
    assert tuple(down) == pytest.approx((1.0, 1.0, 1.0))


def test_render_sky_blues_upwards():
    out, log = io.StringIO(), io.StringIO()
    render_sky(out, log)
    header, pixels = _parse(out.getvalue())
    assert header == ["P3", "400 225", "255"]
    assert len(pixels) == 400 * 225
    assert {p[2] for p in pixels} == {255}
    assert pixels[0][0] < pixels[-1][0]
    assert log.getvalue().startswith("\rScanlines remaining: 225 ")


def test_hit_sphere_point_lies_on_surface():
    center = Vec3(0.0, 0.0, -1.0)
    ray = Ray(Vec3(), Vec3(0.0, 0.0, -1.0))
    t = hit_sphere(center, 0.5, ray)
    assert t > 0
    assert (ray.at(t) - center).length() == pytest.approx(0.5)


def test_hit_sphere_miss_returns_minus_one():
    ray = Ray(Vec3(), Vec3(0.0, 1.0, 0.0))
    assert hit_sphere(Vec3(0.0, 0.0, -1.0), 0.5, ray) == -1.0


def test_normal_sphere_color_miss_is_sky():
    ray = Ray(Vec3(), Vec3(0.0, 1.0, 0.0))
    assert normal_sphere_color(ray) == sky_color(ray)


def test_normal_sphere_color_hit_facing_camera():
    ray = Ray(Vec3(), Vec3(0.0, 0.0, -1.0))
    assert tuple(normal_sphere_color(ray)) == pytest.approx((0.5, 0.5, 1.0))


def test_default_world_contents():
    world = default_world()
    spheres = list(world)
    assert len(spheres) == 2
    assert all(isinstance(s, Sphere) for s in spheres)
    assert spheres[0].center == Vec3(0.0, 0.0, -1.0)
    assert spheres[0].radius == 0.5
    assert spheres[1].center == Vec3(0.0, -100.5, -1.0)
    assert spheres[1].radius == 100


def test_world_normal_color_matches_single_sphere_on_axis():
    ray = Ray(Vec3(), Vec3(0.0, 0.0, -1.0))
    got = world_normal_color(ray, default_world())
    assert tuple(got) == pytest.approx(tuple(normal_sphere_color(ray)))


def test_world_normal_color_miss_is_sky():
    ray = Ray(Vec3(), Vec3(0.0, 1.0, 0.0))
    assert world_normal_color(ray, default_world()) == sky_color(ray)


def test_world_normal_color_ground_hit_is_unit_normal_color():
    ray = Ray(Vec3(), Vec3(0.0, -1.0, -1.0))
    color = world_normal_color(ray, default_world())
    normal = 2 * color - Vec3(1.0, 1.0, 1.0)
    assert normal.length() == pytest.approx(1.0)
    assert normal.y > 0


def test_render_normal_sphere_size():
    out, log = io.StringIO(), io.StringIO()
    render_normal_sphere(out, log)
    header, pixels = _parse(out.getvalue())
    assert header == ["P3", "800 450", "255"]
    assert len(pixels) == 800 * 450
    assert all(0 <= c <= 255 for p in pixels for c in p)


def test_main_writes_output_file(tmp_path):
    target = tmp_path / "image.ppm"
    assert main(["gradient", "-o", str(target)]) == 0
    out, log = io.StringIO(), io.StringIO()
    render_gradient(out, log)
    assert target.read_text(encoding="ascii") == out.getvalue()


def test_main_writes_stdout(capsys):
    assert main(["color-ramp"]) == 0
    captured = capsys.readouterr()
    out, log = io.StringIO(), io.StringIO()
    render_color_ramp(out, log)
    assert captured.out == out.getvalue()
    assert captured.err.endswith("\rDone.                 \n")


def test_main_rejects_unknown_chapter():
    with pytest.raises(SystemExit) as excinfo:
        main(["no-such-chapter"])
    assert excinfo.value.code == 2


def test_viewport_rays_leave_camera_center():
    view = make_viewport(10, 2.0)
    ray = view.ray_through(3, 2)
    assert ray.origin == view.center
    assert math.isclose(ray.direction.z, -1.0)