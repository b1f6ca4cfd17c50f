"""Ray-hit records and the shapes rays can hit."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pathtrace.ray import Ray
from pathtrace.vector import Vec3

if TYPE_CHECKING:
    from pathtrace.materials import Material


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    point: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    t: float = 0.0
    is_front_face: bool = False
    material: Material | None = None

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Orient the normal against the incoming ray and record which side was hit."""
        self.is_front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.is_front_face else -outward_normal


class Shape(ABC):
    """Anything a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Return the hit strictly between t_min and t_max, or None."""


@dataclass(eq=False)
class Sphere(Shape):
    """A sphere given by its centre and radius."""

    origin: Vec3
    radius: float

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        oc = self.origin - ray.origin
        a = ray.direction.length() ** 2
        if a == 0.0:
            return None
        h = ray.direction.dot(oc)
        c = oc.length() ** 2 - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)
        root = (h - sqrtd) / a
        if root <= t_min or t_max <= root:
            root = (h + sqrtd) / a
            if root <= t_min or t_max <= root:
                return None

        point = ray.at(root)
        record = HitRecord(point=point, t=root)
        record.set_face_normal(ray, (point - self.origin) / self.radius)
        return record