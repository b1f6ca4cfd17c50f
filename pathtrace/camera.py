"""Perspective camera producing one primary ray direction per pixel."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pathtrace.vector import Vec3

Matrix4 = tuple[tuple[float, float, float, float], ...]

_IDENTITY: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)
_WORLD_UP = Vec3(0.0, 1.0, 0.0)


@dataclass
class CameraSpecification:
    """Settings a camera is created from."""

    vertical_fov: float = 45.0
    near_clip: float = 0.1
    far_clip: float = 100.0
    samples_per_pixel: int = 20
    width: int = 0
    height: int = 0


def _basis(forward: Vec3) -> tuple[Vec3, Vec3, Vec3]:
    f = forward.normalized()
    s = f.cross(_WORLD_UP).normalized()
    u = s.cross(f)
    return s, u, f


def _perspective_fov(fov: float, width: int, height: int, near: float, far: float) -> Matrix4:
    h = math.cos(0.5 * fov) / math.sin(0.5 * fov)
    w = h * height / width
    depth = far - near
    return (
        (w, 0.0, 0.0, 0.0),
        (0.0, h, 0.0, 0.0),
        (0.0, 0.0, -(far + near) / depth, -(2.0 * far * near) / depth),
        (0.0, 0.0, -1.0, 0.0),
    )


def _look_at(eye: Vec3, forward: Vec3) -> Matrix4:
    s, u, f = _basis(forward)
    return (
        (s.x, s.y, s.z, -s.dot(eye)),
        (u.x, u.y, u.z, -u.dot(eye)),
        (-f.x, -f.y, -f.z, f.dot(eye)),
        (0.0, 0.0, 0.0, 1.0),
    )


class Camera:
    """Fixed-position perspective camera looking down -Z from (0, 0, 3)."""

    def __init__(self, spec: CameraSpecification | None = None) -> None:
        spec = spec if spec is not None else CameraSpecification()
        self._vertical_fov = spec.vertical_fov
        self._near_clip = spec.near_clip
        self._far_clip = spec.far_clip
        self.samples_per_pixel = spec.samples_per_pixel
        self._width = spec.width
        self._height = spec.height

        self._position = Vec3(0.0, 0.0, 3.0)
        self._forward = Vec3(0.0, 0.0, -1.0)

        self._projection: Matrix4 = _IDENTITY
        self._view: Matrix4 = _IDENTITY
        self._directions: list[Vec3] | None = None

        if self._width > 0 and self._height > 0:
            self._recalculate_projection()
            self._view = _look_at(self._position, self._forward)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def vertical_fov(self) -> float:
        return self._vertical_fov

    @property
    def near_clip(self) -> float:
        return self._near_clip

    @property
    def far_clip(self) -> float:
        return self._far_clip

    @property
    def position(self) -> Vec3:
        return self._position

    @property
    def direction(self) -> Vec3:
        return self._forward

    @property
    def projection(self) -> Matrix4:
        """Row-major perspective projection matrix."""
        return self._projection

    @property
    def view(self) -> Matrix4:
        """Row-major world-to-view matrix."""
        return self._view

    @property
    def ray_directions(self) -> list[Vec3]:
        """World-space ray direction per pixel, row by row from the bottom."""
        if self._directions is None:
            self._directions = self._compute_directions()
        return self._directions

    def resize(self, width: int, height: int) -> None:
        """Change the viewport size, recomputing projection and rays if it differs."""
        if width == self._width and height == self._height:
            return
        self._width = width
        self._height = height
        self._recalculate_projection()
        self._directions = None

    def ray_direction(self, x: int, y: int) -> Vec3:
        """Direction of the primary ray through pixel (x, y)."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height}")
        return self.ray_directions[x + y * self._width]

    def _recalculate_projection(self) -> None:
        if self._width > 0 and self._height > 0:
            self._projection = _perspective_fov(
                math.radians(self._vertical_fov),
                self._width,
                self._height,
                self._near_clip,
                self._far_clip,
            )
        else:
            self._projection = _IDENTITY

    def _compute_directions(self) -> list[Vec3]:
        width, height = self._width, self._height
        if width <= 0 or height <= 0:
            return []
        tan_half = math.tan(math.radians(self._vertical_fov) / 2.0)
        aspect = width / height
        right, up, forward = _basis(self._forward)

        rows = [(y / height * 2.0 - 1.0) * tan_half for y in range(height)]
        cols = [(x / width * 2.0 - 1.0) * tan_half * aspect for x in range(width)]

        def to_world(view_dir: Vec3) -> Vec3:
            return right * view_dir.x + up * view_dir.y - forward * view_dir.z

        return [
            to_world(Vec3(vx, vy, -1.0).normalized()) for vy in rows for vx in cols
        ]