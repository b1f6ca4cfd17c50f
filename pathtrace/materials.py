"""Surface materials deciding how rays bounce."""

from __future__ import annotations

from dataclasses import dataclass

from pathtrace.geometry import HitRecord
from pathtrace.ray import Ray
from pathtrace.rng import Random
from pathtrace.vector import Vec3


@dataclass(frozen=True)
class Scatter:
    """A bounced ray and the colour it is attenuated by."""

    attenuation: Vec3
    scattered: Ray


class Material:
    """A surface that absorbs every ray."""

    def scatter(self, ray: Ray, rec: HitRecord, rng: Random) -> Scatter | None:
        """Return the scattered ray, or None if the ray is absorbed."""
        return None


@dataclass(eq=False)
class Lambertian(Material):
    """Diffuse surface scattering around the normal."""

    albedo: Vec3

    def scatter(self, ray: Ray, rec: HitRecord, rng: Random) -> Scatter | None:
        direction = rec.normal + rng.in_unit_sphere()
        return Scatter(self.albedo, Ray(rec.point, direction))


@dataclass(eq=False)
class Metal(Material):
    """Mirror-like surface; fuzz blurs the reflection."""

    albedo: Vec3
    fuzz: float

    def scatter(self, ray: Ray, rec: HitRecord, rng: Random) -> Scatter | None:
        reflected = ray.direction.reflect(rec.normal).normalized()
        reflected = reflected + rng.in_unit_sphere() * self.fuzz
        scattered = Ray(rec.point, reflected)
        if scattered.direction.dot(rec.normal) > 0:
            return Scatter(self.albedo, scattered)
        return None