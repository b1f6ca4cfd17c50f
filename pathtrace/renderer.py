"""High-level renderer: holds camera and scene, captures and saves images."""

from __future__ import annotations

import copy
import enum
import struct
import zlib
from pathlib import Path
from typing import Sequence

from pathtrace.backend import (
    Backend,
    CPUBackend,
    RenderCaptureSpecification,
    RenderPayload,
)
from pathtrace.camera import Camera, CameraSpecification
from pathtrace.rng import Random
from pathtrace.scene import Scene

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class RendererAPI(enum.Enum):
    """Which backend a renderer drives."""

    CPU = "cpu"


def _chunk(tag: bytes, data: bytes) -> bytes:
    return (
        struct.pack(">I", len(data))
        + tag
        + data
        + struct.pack(">I", zlib.crc32(tag + data) & 0xFFFFFFFF)
    )


def encode_png(
    width: int, height: int, pixels: Sequence[int], flip_vertically: bool = True
) -> bytes:
    """Encode packed RGBA pixels (red in the low byte) as an 8-bit RGBA PNG."""
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid image size {width}x{height}")
    if len(pixels) < width * height:
        raise ValueError(f"{len(pixels)} pixels given, {width * height} needed")

    rows = [pixels[y * width:(y + 1) * width] for y in range(height)]
    if flip_vertically:
        rows.reverse()
    raw = b"".join(
        b"\x00" + struct.pack(f"<{width}I", *(p & 0xFFFFFFFF for p in row))
        for row in rows
    )
    header = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    return (
        _PNG_SIGNATURE
        + _chunk(b"IHDR", header)
        + _chunk(b"IDAT", zlib.compress(raw))
        + _chunk(b"IEND", b"")
    )


class Renderer:
    """Owns a camera, a scene and the backend that renders them."""

    def __init__(self, api: RendererAPI = RendererAPI.CPU, rng: Random | None = None) -> None:
        self.api = api
        self.camera = Camera(
            CameraSpecification(
                vertical_fov=45.0,
                near_clip=0.1,
                far_clip=100.0,
                samples_per_pixel=1,
                width=0,
                height=0,
            )
        )
        self.scene = Scene()
        self.backend: Backend = CPUBackend(rng)

    def _update_payload(self) -> None:
        self.backend.update_render_payload(RenderPayload(self.camera, self.scene))

    def set_geometry(self, scene: Scene) -> None:
        """Render a copy of the given scene from now on."""
        self.scene = scene.copy()
        self._update_payload()

    def set_active_camera(self, camera: Camera) -> None:
        """Render through a copy of the given camera from now on."""
        self.camera = copy.copy(camera)
        self._update_payload()

    def capture(self, spec: RenderCaptureSpecification) -> list[int]:
        """Render at the spec's size into its buffer, allocating one if missing."""
        self.camera.resize(spec.width, spec.height)
        if spec.buffer is None:
            spec.buffer = [0] * (spec.width * spec.height)
        self.backend.render_to_buffer(spec)
        return spec.buffer

    @staticmethod
    def save_capture(spec: RenderCaptureSpecification, filename: str | Path) -> None:
        """Write a captured buffer to a PNG file, bottom row first."""
        if spec.buffer is None:
            raise ValueError("capture specification has no buffer")
        data = encode_png(spec.width, spec.height, spec.buffer, flip_vertically=True)
        Path(filename).write_bytes(data)