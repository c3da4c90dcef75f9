"""Image rotation."""

from __future__ import annotations

from bmprotate.image import ROTATION_ANGLE_PRECISION_IN_DEGREES, Image


class RotationError(Exception):
    """Raised when the rotated image cannot be produced."""

    def __init__(self, message: str = "Rotated image creation failed.") -> None:
        super().__init__(message)


def rotate_counterclockwise(image: Image, angle: float) -> Image:
    """Return a copy of the image rotated counterclockwise.

    Only a quarter turn is supported: any angle below 90 degrees plus the
    rotation precision gives a 90 degree turn, larger angles are refused.
    """
    if angle - 90.0 < ROTATION_ANGLE_PRECISION_IN_DEGREES:
        return _turn_quarter_counterclockwise(image)
    raise RotationError()


def _turn_quarter_counterclockwise(image: Image) -> Image:
    # Each source row becomes a column of the result, its first pixel at the bottom.
    rows = list(image.rows())
    data = [row[x] for x in reversed(range(image.width)) for row in rows]
    try:
        return Image(image.height, image.width, data)
    except MemoryError as exc:
        raise RotationError() from exc