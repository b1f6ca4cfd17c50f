"""Render backends that fill a pixel buffer from a camera and a scene."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from pathtrace.camera import Camera
from pathtrace.ray import Ray
from pathtrace.rng import Random
from pathtrace.scene import Scene
from pathtrace.vector import Vec3, convert_to_rgba

_T_MIN = 0.001
_JITTER = 0.001
_MAX_DEPTH = 10
_WHITE = Vec3(1.0, 1.0, 1.0)
_SKY_BLUE = Vec3(0.5, 0.7, 1.0)


@dataclass
class RenderPayload:
    """The camera and scene a backend renders."""

    camera: Camera
    scene: Scene


@dataclass
class RenderCaptureSpecification:
    """Size of a capture and the buffer of packed RGBA pixels it is written to."""

    width: int
    height: int
    buffer: list[int] | None = None


class Backend(ABC):
    """Something able to render a payload into a pixel buffer."""

    @abstractmethod
    def update_render_payload(self, payload: RenderPayload) -> None:
        """Set the camera and scene to render."""

    @abstractmethod
    def render_to_buffer(self, spec: RenderCaptureSpecification) -> None:
        """Fill spec.buffer with width * height packed pixels."""


class CPUBackend(Backend):
    """Path tracer running on the CPU."""

    def __init__(self, rng: Random | None = None) -> None:
        self.rng = rng if rng is not None else Random()
        self._payload: RenderPayload | None = None

    @property
    def payload(self) -> RenderPayload | None:
        return self._payload

    def update_render_payload(self, payload: RenderPayload) -> None:
        self._payload = payload

    def _require_payload(self) -> RenderPayload:
        if self._payload is None:
            raise RuntimeError("no render payload set")
        return self._payload

    def render_to_buffer(self, spec: RenderCaptureSpecification) -> None:
        self._require_payload()
        if spec.buffer is None:
            raise ValueError("capture specification has no buffer")
        needed = spec.width * spec.height
        if len(spec.buffer) < needed:
            raise ValueError(
                f"buffer holds {len(spec.buffer)} pixels, {needed} needed"
            )
        for y in range(spec.height):
            row = y * spec.width
            for x in range(spec.width):
                color = self.per_pixel(x, y)
                spec.buffer[row + x] = convert_to_rgba(color.x, color.y, color.z, 1.0)

    def per_pixel(self, x: int, y: int) -> Vec3:
        """Average colour of the camera's samples through pixel (x, y)."""
        camera = self._require_payload().camera
        samples = camera.samples_per_pixel
        if samples <= 0:
            return Vec3()
        base_direction = camera.ray_direction(x, y)
        origin = camera.position
        total = Vec3()
        for _ in range(samples):
            direction = base_direction + self.rng.vec3_range(-_JITTER, _JITTER)
            total = total + self.trace_ray(Ray(origin, direction))
        return total / float(samples)

    def trace_ray(self, ray: Ray, depth: int = _MAX_DEPTH) -> Vec3:
        """Colour carried back along a ray, bouncing at most depth times."""
        if depth <= 0:
            return Vec3()
        scene = self._require_payload().scene
        record = scene.hit(ray, _T_MIN, math.inf)
        if record is not None:
            if record.material is None:
                return Vec3()
            bounce = record.material.scatter(ray, record, self.rng)
            if bounce is None:
                return Vec3()
            return bounce.attenuation * self.trace_ray(bounce.scattered, depth - 1)

        a = (ray.direction.normalized() + _WHITE) * 0.5
        return (_WHITE - a) * _WHITE + a * _SKY_BLUE