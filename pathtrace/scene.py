"""Primitives pairing a shape with a material, and scenes made of them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from pathtrace.geometry import HitRecord, Shape
from pathtrace.materials import Material
from pathtrace.ray import Ray


@dataclass(eq=False)
class Primitive:
    """A shape with the material it is made of and a display tag."""

    shape: Shape | None
    material: Material | None
    tag: str = ""

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Hit the shape; the record carries this primitive's material."""
        if self.shape is None:
            raise ValueError(f"primitive {self.tag!r} has no shape")
        record = self.shape.hit(ray, t_min, t_max)
        if record is not None:
            record.material = self.material
        return record


class Scene(Shape):
    """An ordered collection of primitives hit as one shape."""

    def __init__(self, primitives: Iterable[Primitive] = ()) -> None:
        self.primitives: list[Primitive] = list(primitives)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self.primitives)

    def __len__(self) -> int:
        return len(self.primitives)

    def clear(self) -> None:
        """Remove every primitive."""
        self.primitives.clear()

    def add(self, primitive: Primitive) -> None:
        """Append a primitive (a shallow copy sharing shape and material)."""
        self.primitives.append(
            Primitive(primitive.shape, primitive.material, primitive.tag)
        )

    def copy(self) -> Scene:
        """A new scene holding copies of the primitives, sharing shapes and materials."""
        copied = Scene()
        for primitive in self.primitives:
            copied.add(primitive)
        return copied

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        """Closest hit among all primitives, or None."""
        closest: HitRecord | None = None
        for primitive in self.primitives:
            limit = closest.t if closest is not None else t_max
            record = primitive.hit(ray, t_min, limit)
            if record is not None:
                closest = record
        return closest