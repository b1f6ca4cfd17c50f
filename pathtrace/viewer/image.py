"""In-memory RGBA image the viewport shows the rendered scene in."""

from __future__ import annotations

from itertools import islice
from typing import Iterable

_MASK = 0xFFFFFFFF


def _check_size(width: int, height: int) -> tuple[int, int]:
    if width < 0 or height < 0:
        raise ValueError(f"invalid image size {width}x{height}")
    return width, height


class Image:
    """A width x height grid of packed RGBA pixels (red in the low byte)."""

    def __init__(
        self, width: int, height: int, data: Iterable[int] | None = None
    ) -> None:
        self._width, self._height = _check_size(width, height)
        self._pixels = [0] * (self._width * self._height)
        if data is not None:
            self.set_data(data)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> tuple[int, ...]:
        """Pixels row by row, the first row being the bottom of the picture."""
        return tuple(self._pixels)

    def set_data(self, data: Iterable[int]) -> None:
        """Replace the pixels with the first width * height values of data."""
        needed = self._width * self._height
        pixels = [int(p) & _MASK for p in islice(data, needed)]
        if len(pixels) < needed:
            raise ValueError(f"{len(pixels)} pixels given, {needed} needed")
        self._pixels = pixels

    def resize(self, width: int, height: int) -> None:
        """Change the size; the content is cleared to zero."""
        self._width, self._height = _check_size(width, height)
        self._pixels = [0] * (self._width * self._height)

    def to_ppm(self) -> bytes:
        """Binary PPM of the image as displayed, top row (the last stored row) first."""
        header = f"P6\n{self._width} {self._height}\n255\n".encode("ascii")
        rows = [
            self._pixels[y * self._width:(y + 1) * self._width]
            for y in range(self._height)
        ]
        body = bytearray()
        for row in reversed(rows):
            for pixel in row:
                body += bytes((pixel & 0xFF, (pixel >> 8) & 0xFF, (pixel >> 16) & 0xFF))
        return header + bytes(body)