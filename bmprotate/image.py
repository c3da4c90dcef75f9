"""In-memory 24-bit image model."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

PIXEL_SIZE_IN_BYTES = 3
CONSTANT_ROTATION_ANGLE_IN_DEGREES = 90.0
ROTATION_ANGLE_PRECISION_IN_DEGREES = 0.01


@dataclass(frozen=True)
class Pixel:
    """A pixel stored in blue, green, red order."""

    b: int = 0
    g: int = 0
    r: int = 0

    def __post_init__(self) -> None:
        for name in ("b", "g", "r"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"pixel component {name}={value} is outside 0..255")

    def to_bytes(self) -> bytes:
        """Return the three bytes of the pixel in b, g, r order."""
        return bytes((self.b, self.g, self.r))

    @classmethod
    def from_bytes(cls, data: bytes) -> Pixel:
        """Build a pixel from exactly three bytes in b, g, r order."""
        if len(data) != PIXEL_SIZE_IN_BYTES:
            raise ValueError(
                f"a pixel needs {PIXEL_SIZE_IN_BYTES} bytes, got {len(data)}"
            )
        b, g, r = data
        return cls(b, g, r)


@dataclass
class Image:
    """A width x height grid of pixels stored row by row, top row first."""

    width: int
    height: int
    data: list[Pixel] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        if len(self.data) != self.width * self.height:
            raise ValueError(
                f"image of {self.width}x{self.height} needs "
                f"{self.width * self.height} pixels, got {len(self.data)}"
            )

    @classmethod
    def blank(cls, width: int, height: int) -> Image:
        """Create an image filled with black pixels; a zero side gives a 0x0 image."""
        if width == 0 or height == 0:
            return cls(0, 0, [])
        return cls(width, height, [Pixel()] * (width * height))

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return y * self.width + x

    def get(self, x: int, y: int) -> Pixel:
        """Return the pixel at column x, row y (row 0 is the top)."""
        return self.data[self._index(x, y)]

    def set(self, x: int, y: int, pixel: Pixel) -> None:
        """Replace the pixel at column x, row y."""
        self.data[self._index(x, y)] = pixel

    def rows(self) -> Iterator[list[Pixel]]:
        """Yield the rows of the image from top to bottom."""
        for start in range(0, self.width * self.height, self.width or 1):
            yield self.data[start:start + self.width]