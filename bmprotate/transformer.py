"""Rotate a BMP image file by a quarter turn counterclockwise."""

from __future__ import annotations

import contextlib
import enum
import os
import sys
from collections.abc import Sequence

from bmprotate.bmp import BmpReadError, BmpWriteError, ReadStatus
from bmprotate.formats import UnknownExtensionError, load_image, save_image
from bmprotate.image import CONSTANT_ROTATION_ANGLE_IN_DEGREES
from bmprotate.rotation import RotationError, rotate_counterclockwise

PROGRAM_NAME = "image-transformer"
SUCCESS_MESSAGE = "Image successfully rotated."


class Stage(enum.IntEnum):
    """The step of the transformation that failed."""

    OPEN_SOURCE = 1
    READ_SOURCE = 2
    ROTATE = 3
    OPEN_OUTPUT = 4
    WRITE_OUTPUT = 5


class _WriteFailure(enum.Enum):
    UNKNOWN_FILE_EXTENSION = 1
    UNABLE_TO_WRITE = 2


_STAGE_MESSAGES = {
    Stage.OPEN_SOURCE: "Error while opening source image file.",
    Stage.ROTATE: "Rotated image creation failed.",
    Stage.OPEN_OUTPUT: "Error while opening rotated image file.",
}

_READ_MESSAGES = {
    ReadStatus.UNKNOWN_FILE_EXTENSION: "Unknown source image file extension.",
    ReadStatus.UNABLE_TO_READ_BMP_HEADER: "Unable to read bmp header in source image file.",
    ReadStatus.INVALID_SIGNATURE: "bmp source image file has invalid signature.",
    ReadStatus.INVALID_RESERVED: 'bmp source image file has invalid member "reserved".',
    ReadStatus.INVALID_PLANES: 'bmp source image file has invalid member "bi_planes".',
    ReadStatus.INVALID_BIT_COUNT: 'bmp source image file has invalid member "bit_count".',
    ReadStatus.INVALID_COMPRESSION: 'bmp source image file has invalid member "bi_compression".',
    ReadStatus.INVALID_COLORS_USED: 'bmp source image file has invalid member "bi_color_used".',
    ReadStatus.INVALID_IMPORTANT_COLORS:
        'bmp source image file has invalid member "bi_important_colors".',
    ReadStatus.DATA_OFFSET_ERROR: "bmp source image file has invalid data offset.",
    ReadStatus.IMAGE_CREATION_FAILED: "Image creation from bmp source image file failed.",
    ReadStatus.PIXEL_DATA_CROSSES_END_OF_FILE:
        "Expected pixel data of bmp source image file crosses end of file.",
}

_WRITE_MESSAGES = {
    _WriteFailure.UNKNOWN_FILE_EXTENSION: "Unknown extension for output file.",
    _WriteFailure.UNABLE_TO_WRITE: "Unable to write image to bmp file.",
}


class TransformError(Exception):
    """Raised when an image file cannot be rotated; stage tells where it failed."""

    def __init__(self, stage: Stage, detail: ReadStatus | _WriteFailure | None = None) -> None:
        self.stage = stage
        self.detail = detail
        super().__init__(self.message())

    def message(self) -> str:
        """Return the user-facing description of the failure."""
        if self.stage is Stage.READ_SOURCE and isinstance(self.detail, ReadStatus):
            return _READ_MESSAGES[self.detail]
        if self.stage is Stage.WRITE_OUTPUT:
            failure = self.detail if isinstance(self.detail, _WriteFailure) else _WriteFailure.UNABLE_TO_WRITE
            return _WRITE_MESSAGES[failure]
        return _STAGE_MESSAGES.get(self.stage, _READ_MESSAGES[ReadStatus.UNABLE_TO_READ_BMP_HEADER])


def rotate_image(
    source_filename: str | os.PathLike[str], rotated_filename: str | os.PathLike[str]
) -> None:
    """Read the source image, rotate it 90 degrees counterclockwise and save it."""
    try:
        source = open(source_filename, "rb")
    except OSError as exc:
        raise TransformError(Stage.OPEN_SOURCE) from exc

    with source:
        try:
            image = load_image(source_filename, source)
        except BmpReadError as exc:
            raise TransformError(Stage.READ_SOURCE, exc.status) from exc

    try:
        rotated = rotate_counterclockwise(image, CONSTANT_ROTATION_ANGLE_IN_DEGREES)
    except RotationError as exc:
        raise TransformError(Stage.ROTATE) from exc

    try:
        output = open(rotated_filename, "wb")
    except OSError as exc:
        raise TransformError(Stage.OPEN_OUTPUT) from exc

    failure: _WriteFailure | None = None
    cause: Exception | None = None
    with output:
        try:
            save_image(rotated_filename, output, rotated)
        except UnknownExtensionError as exc:
            failure, cause = _WriteFailure.UNKNOWN_FILE_EXTENSION, exc
        except BmpWriteError as exc:
            failure, cause = _WriteFailure.UNABLE_TO_WRITE, exc

    if failure is not None:
        with contextlib.suppress(OSError):
            os.remove(rotated_filename)
        raise TransformError(Stage.WRITE_OUTPUT, failure) from cause


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: rotate SOURCE into ROTATED."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(
            f"Usage: {PROGRAM_NAME} <source-image-filename> <rotated-image-filename>",
            file=sys.stderr,
        )
        return 1
    try:
        rotate_image(args[0], args[1])
    except TransformError as exc:
        print(exc.message(), file=sys.stderr)
        return 1
    print(SUCCESS_MESSAGE)
    return 0