import pytest

from pathtrace.backend import CPUBackend, RenderCaptureSpecification, RenderPayload
from pathtrace.camera import Camera, CameraSpecification
from pathtrace.geometry import Sphere
from pathtrace.materials import Lambertian, Material, Metal
from pathtrace.ray import Ray
from pathtrace.rng import Random
from pathtrace.scene import Primitive, Scene
from pathtrace.vector import Vec3


def _backend(scene=None, width=4, height=3, samples=1, seed=0):
    camera = Camera(
        CameraSpecification(samples_per_pixel=samples, width=width, height=height)
    )
    backend = CPUBackend(Random(seed))
    backend.update_render_payload(RenderPayload(camera, scene or Scene()))
    return backend


def _sphere_scene(material):
    return Scene([Primitive(Sphere(Vec3(0.0, 0.0, 0.0), 0.5), material)])


def test_depth_zero_is_black():
    backend = _backend()
    assert backend.trace_ray(Ray(Vec3(), Vec3(0.0, 1.0, 0.0)), 0) == Vec3()


@pytest.mark.parametrize(
    "direction",
    [Vec3(0.0, 1.0, 0.0), Vec3(0.0, -1.0, 0.0), Vec3(1.0, 0.2, -0.3), Vec3(0.0, 0.0, -1.0)],
)
def test_sky_colour_bounds(direction):
    color = _backend().trace_ray(Ray(Vec3(), direction))
    assert 0.5 <= color.x <= 1.0
    assert 0.7 <= color.y <= 1.0
    assert color.z == pytest.approx(1.0)


def test_absorbing_material_is_black():
    backend = _backend(_sphere_scene(Material()))
    ray = Ray(Vec3(0.0, 0.0, 3.0), Vec3(0.0, 0.0, -1.0))
    assert backend.trace_ray(ray) == Vec3()


def test_black_lambertian_is_black():
    backend = _backend(_sphere_scene(Lambertian(Vec3(0.0, 0.0, 0.0))))
    ray = Ray(Vec3(0.0, 0.0, 3.0), Vec3(0.0, 0.0, -1.0))
    assert backend.trace_ray(ray) == Vec3()


def test_perfect_mirror_shows_reflected_sky():
    backend = _backend(_sphere_scene(Metal(Vec3(1.0, 1.0, 1.0), 0.0)))
    incoming = backend.trace_ray(Ray(Vec3(0.0, 0.0, 3.0), Vec3(0.0, 0.0, -1.0)))
    reflected = backend.trace_ray(Ray(Vec3(0.0, 0.0, 0.5), Vec3(0.0, 0.0, 1.0)))
    assert incoming.x == pytest.approx(reflected.x)
    assert incoming.y == pytest.approx(reflected.y)
    assert incoming.z == pytest.approx(reflected.z)


def test_render_empty_scene_fills_opaque_sky():
    backend = _backend(width=4, height=3)
    spec = RenderCaptureSpecification(4, 3, [0] * 12)
    backend.render_to_buffer(spec)
    assert len(spec.buffer) == 12
    for pixel in spec.buffer:
        assert pixel >> 24 == 255
        assert (pixel >> 16) & 0xFF >= 254


def test_render_is_deterministic_for_a_seed():
    scene = _sphere_scene(Lambertian(Vec3(0.5, 0.5, 0.5)))
    first = RenderCaptureSpecification(4, 3, [0] * 12)
    second = RenderCaptureSpecification(4, 3, [0] * 12)
    _backend(scene, samples=2, seed=7).render_to_buffer(first)
    _backend(scene, samples=2, seed=7).render_to_buffer(second)
    assert first.buffer == second.buffer


def test_render_without_payload_raises():
    with pytest.raises(RuntimeError):
        CPUBackend().render_to_buffer(RenderCaptureSpecification(1, 1, [0]))


def test_render_with_small_buffer_raises():
    with pytest.raises(ValueError):
        _backend().render_to_buffer(RenderCaptureSpecification(4, 3, [0] * 5))


def test_render_without_buffer_raises():
    with pytest.raises(ValueError):
        _backend().render_to_buffer(RenderCaptureSpecification(4, 3))


def test_zero_samples_give_black_pixel():
    assert _backend(samples=0).per_pixel(0, 0) == Vec3()


def test_pixel_outside_camera_raises():
    with pytest.raises(IndexError):
        _backend(width=2, height=2).per_pixel(5, 0)