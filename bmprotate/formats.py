"""Image file formats chosen by file name extension."""

from __future__ import annotations

import enum
import os
from collections.abc import Callable
from typing import BinaryIO

from bmprotate.bmp import BmpReadError, ReadStatus, read_bmp, write_bmp
from bmprotate.image import Image

_COMPARE_CHUNK_SIZE = 4096


class ImageFormat(enum.Enum):
    """Image file formats recognised by their extension."""

    BMP = 0
    PNG = 1


_EXTENSIONS = {".bmp": ImageFormat.BMP, ".png": ImageFormat.PNG}

_READERS: dict[ImageFormat, Callable[[BinaryIO], Image]] = {
    ImageFormat.BMP: read_bmp,
}
_WRITERS: dict[ImageFormat, Callable[[BinaryIO, Image], None]] = {
    ImageFormat.BMP: write_bmp,
}


class UnknownExtensionError(ValueError):
    """Raised when a file name has no supported image extension."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"unknown image file extension: {filename!r}")
        self.filename = filename


def image_format_from_filename(filename: str | os.PathLike[str]) -> ImageFormat:
    """Return the image format named by the text after the last dot of filename."""
    name = os.fspath(filename)
    _, dot, extension = name.rpartition(".")
    if not dot:
        raise UnknownExtensionError(name)
    image_format = _EXTENSIONS.get(dot + extension)
    if image_format is None:
        raise UnknownExtensionError(name)
    return image_format


def are_files_binary_similar(
    path1: str | os.PathLike[str], path2: str | os.PathLike[str]
) -> bool:
    """Tell whether two files hold exactly the same bytes; unreadable files differ."""
    try:
        with open(path1, "rb") as first, open(path2, "rb") as second:
            while True:
                chunk1 = first.read(_COMPARE_CHUNK_SIZE)
                chunk2 = second.read(_COMPARE_CHUNK_SIZE)
                if chunk1 != chunk2:
                    return False
                if not chunk1:
                    return True
    except OSError:
        return False


def load_image(filename: str | os.PathLike[str], stream: BinaryIO) -> Image:
    """Read an image from stream in the format given by filename's extension."""
    try:
        image_format = image_format_from_filename(filename)
    except UnknownExtensionError as exc:
        raise BmpReadError(ReadStatus.UNKNOWN_FILE_EXTENSION) from exc
    reader = _READERS.get(image_format)
    if reader is None:
        raise BmpReadError(ReadStatus.UNKNOWN_FILE_EXTENSION)
    return reader(stream)


def save_image(filename: str | os.PathLike[str], stream: BinaryIO, image: Image) -> None:
    """Write image to stream in the format given by filename's extension."""
    image_format = image_format_from_filename(filename)
    writer = _WRITERS.get(image_format)
    if writer is None:
        raise UnknownExtensionError(os.fspath(filename))
    writer(stream, image)