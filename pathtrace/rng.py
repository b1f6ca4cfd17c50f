"""Deterministic PCG-hash random number generator."""

from __future__ import annotations

from pathtrace.vector import Vec3

_MASK = 0xFFFFFFFF
_UINT32_MAX = 0xFFFFFFFF


class Random:
    """Random source driven by a 32-bit PCG hash state."""

    def __init__(self, state: int = 0) -> None:
        self.state = state & _MASK

    def uint(self) -> int:
        """Next unsigned 32-bit value."""
        state = self.state
        self.state = (self.state * 747796405 + 2891336453) & _MASK
        word = (((state >> ((state >> 28) + 4)) ^ state) * 277803737) & _MASK
        return ((word >> 22) ^ word) & _MASK

    def uint_range(self, minimum: int, maximum: int) -> int:
        """Value in the inclusive range [minimum, maximum]."""
        if maximum < minimum:
            raise ValueError("maximum must not be smaller than minimum")
        span = (maximum - minimum + 1) & _MASK
        value = self.uint()
        if span == 0:
            return (minimum + value) & _MASK
        return minimum + value % span

    def float(self) -> float:
        """Value in [0, 1]."""
        return self.uint() / _UINT32_MAX

    def vec3(self) -> Vec3:
        """Vector with each component in [0, 1]."""
        return Vec3(self.float(), self.float(), self.float())

    def vec3_range(self, minimum: float, maximum: float) -> Vec3:
        """Vector with each component in [minimum, maximum]."""
        width = maximum - minimum
        return Vec3(
            self.float() * width + minimum,
            self.float() * width + minimum,
            self.float() * width + minimum,
        )

    def in_unit_sphere(self) -> Vec3:
        """Random unit-length direction."""
        return self.vec3_range(-1.0, 1.0).normalized()

    def in_hemisphere(self, normal: Vec3) -> Vec3:
        """Random unit direction on the side of the given normal."""
        on_sphere = self.in_unit_sphere()
        if on_sphere.dot(normal) > 0.0:
            return on_sphere
        return -on_sphere