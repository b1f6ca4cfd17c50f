from pathtrace.ray import Ray
from pathtrace.vector import Vec3


def test_at_zero_is_origin():
    ray = Ray(Vec3(1.0, 2.0, 3.0), Vec3(0.0, 0.0, -1.0))
    assert ray.at(0.0) == ray.origin


def test_at_one_is_origin_plus_direction():
    ray = Ray(Vec3(1.0, 2.0, 3.0), Vec3(0.5, -1.0, 2.0))
    assert ray.at(1.0) == ray.origin + ray.direction


def test_at_scales_direction():
    ray = Ray(Vec3(0.0, 0.0, 3.0), Vec3(0.0, 0.0, -1.0))
    assert ray.at(2.0) == Vec3(0.0, 0.0, 1.0)


def test_fields_are_kept():
    origin = Vec3(4.0, 5.0, 6.0)
    direction = Vec3(1.0, 0.0, 0.0)
    ray = Ray(origin, direction)
    assert (ray.origin, ray.direction) == (origin, direction)