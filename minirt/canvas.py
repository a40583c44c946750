"""A pixel buffer that the renderer paints and that can be written as PPM."""

from __future__ import annotations

from pathlib import Path
from typing import Union

WIDTH = 1000
HEIGHT = 1000


class Canvas:
    """A width x height grid of packed 0xRRGGBB pixels, initially black."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = [[0] * width for _ in range(height)]

    def put_pixel(self, x: int, y: int, value: int) -> None:
        """Set a pixel; coordinates outside the canvas are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._pixels[y][x] = value & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """The packed colour at a pixel."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError("pixel outside the canvas")
        return self._pixels[y][x]

    def to_ppm(self) -> bytes:
        """The canvas as a binary PPM (P6) image."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytearray()
        for row in self._pixels:
            for value in row:
                body += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
        return header + bytes(body)

    def save(self, path: Union[str, Path]) -> None:
        """Write the canvas to a PPM file."""
        Path(path).write_bytes(self.to_ppm())