"""Reading and writing 24-bit uncompressed BMP files."""

from __future__ import annotations

import enum
import io
import struct
from dataclasses import astuple, dataclass
from typing import BinaryIO

from bmprotate.image import PIXEL_SIZE_IN_BYTES, Image, Pixel

BMP_HEADER_SIGNATURE = 0x4D42
BMP_HEADER_RESERVED = 0
BMP_HEADER_DATA_OFFSET = 54
BMP_HEADER_BI_SIZE = 40
BMP_HEADER_BI_PLANES = 1
BMP_HEADER_BI_BIT_COUNT = 24
BMP_HEADER_BI_COMPRESSION = 0
BMP_HEADER_BI_X_PIXELS_PER_METER = 0
BMP_HEADER_BI_Y_PIXELS_PER_METER = 0
BMP_HEADER_BI_COLOR_USED = 0
BMP_HEADER_BI_IMPORTANT_COLORS = 0

_HEADER = struct.Struct("<HIIIIIIHHIIIIII")
HEADER_SIZE = _HEADER.size


class ReadStatus(enum.IntEnum):
    """Reasons a BMP file cannot be read."""

    UNKNOWN_FILE_EXTENSION = 1
    UNABLE_TO_READ_BMP_HEADER = 2
    INVALID_SIGNATURE = 3
    INVALID_RESERVED = 4
    INVALID_PLANES = 5
    INVALID_BIT_COUNT = 6
    INVALID_COMPRESSION = 7
    INVALID_COLORS_USED = 8
    INVALID_IMPORTANT_COLORS = 9
    DATA_OFFSET_ERROR = 10
    IMAGE_CREATION_FAILED = 11
    PIXEL_DATA_CROSSES_END_OF_FILE = 12


class BmpReadError(Exception):
    """Raised when a BMP stream cannot be turned into an image."""

    def __init__(self, status: ReadStatus) -> None:
        super().__init__(status.name.lower().replace("_", " "))
        self.status = status


class BmpWriteError(Exception):
    """Raised when an image cannot be written as BMP."""

    def __init__(self, message: str = "Unable to write image to bmp file.") -> None:
        super().__init__(message)


def width_padding(width: int) -> int:
    """Number of zero bytes that pad a pixel row of the given width to 4 bytes."""
    return (4 - (width * PIXEL_SIZE_IN_BYTES) % 4) % 4


def padded_pixel_array_size(width: int, height: int) -> int:
    """Size in bytes of the padded pixel array."""
    return (width * PIXEL_SIZE_IN_BYTES + width_padding(width)) * height


def file_size(data_offset: int, width: int, height: int) -> int:
    """Size in bytes of a BMP file whose pixels start at data_offset."""
    return data_offset + padded_pixel_array_size(width, height)


@dataclass(frozen=True)
class BmpHeader:
    """The 54-byte file and info header of a BMP file."""

    signature: int
    file_size: int
    reserved: int
    data_offset: int
    bi_size: int
    width: int
    height: int
    planes: int
    bit_count: int
    compression: int
    size_image: int
    x_pixels_per_meter: int
    y_pixels_per_meter: int
    colors_used: int
    important_colors: int

    @classmethod
    def unpack(cls, data: bytes) -> BmpHeader:
        """Parse a header from the first bytes of data."""
        if len(data) < HEADER_SIZE:
            raise BmpReadError(ReadStatus.UNABLE_TO_READ_BMP_HEADER)
        return cls(*_HEADER.unpack_from(data))

    def pack(self) -> bytes:
        """Return the header as its 54 little-endian bytes."""
        return _HEADER.pack(*astuple(self))

    @classmethod
    def for_image(cls, width: int, height: int) -> BmpHeader:
        """Build the header written for an image of the given size."""
        return cls(
            signature=BMP_HEADER_SIGNATURE,
            file_size=file_size(BMP_HEADER_DATA_OFFSET, width, height),
            reserved=BMP_HEADER_RESERVED,
            data_offset=BMP_HEADER_DATA_OFFSET,
            bi_size=BMP_HEADER_BI_SIZE,
            width=width,
            height=height,
            planes=BMP_HEADER_BI_PLANES,
            bit_count=BMP_HEADER_BI_BIT_COUNT,
            compression=BMP_HEADER_BI_COMPRESSION,
            size_image=padded_pixel_array_size(width, height),
            x_pixels_per_meter=BMP_HEADER_BI_X_PIXELS_PER_METER,
            y_pixels_per_meter=BMP_HEADER_BI_Y_PIXELS_PER_METER,
            colors_used=BMP_HEADER_BI_COLOR_USED,
            important_colors=BMP_HEADER_BI_IMPORTANT_COLORS,
        )

    def validate(self) -> None:
        """Raise BmpReadError for the first field that is not supported."""
        checks = (
            (self.signature == BMP_HEADER_SIGNATURE, ReadStatus.INVALID_SIGNATURE),
            (self.reserved == BMP_HEADER_RESERVED, ReadStatus.INVALID_RESERVED),
            (self.planes == BMP_HEADER_BI_PLANES, ReadStatus.INVALID_PLANES),
            (self.bit_count == BMP_HEADER_BI_BIT_COUNT, ReadStatus.INVALID_BIT_COUNT),
            (self.compression == BMP_HEADER_BI_COMPRESSION, ReadStatus.INVALID_COMPRESSION),
            (self.colors_used == BMP_HEADER_BI_COLOR_USED, ReadStatus.INVALID_COLORS_USED),
            (
                self.important_colors == BMP_HEADER_BI_IMPORTANT_COLORS,
                ReadStatus.INVALID_IMPORTANT_COLORS,
            ),
            (
                HEADER_SIZE <= self.data_offset < self.file_size,
                ReadStatus.DATA_OFFSET_ERROR,
            ),
        )
        for ok, status in checks:
            if not ok:
                raise BmpReadError(status)


def has_at_least_n_bytes(stream: BinaryIO | None, n: int) -> bool:
    """Tell whether the seekable stream is at least n bytes long."""
    if stream is None:
        return False
    try:
        position = stream.tell()
        size = stream.seek(0, io.SEEK_END)
        stream.seek(position)
    except OSError:
        return False
    return size >= n


def read_bmp(stream: BinaryIO) -> Image:
    """Read a 24-bit uncompressed BMP image from the start of a binary stream."""
    header = BmpHeader.unpack(stream.read(HEADER_SIZE))
    header.validate()

    if not has_at_least_n_bytes(
        stream, file_size(header.data_offset, header.width, header.height)
    ):
        raise BmpReadError(ReadStatus.PIXEL_DATA_CROSSES_END_OF_FILE)

    if header.width == 0 or header.height == 0:
        return Image.blank(0, 0)

    row_size = header.width * PIXEL_SIZE_IN_BYTES
    stride = row_size + width_padding(header.width)
    stream.seek(header.data_offset)
    try:
        # Rows are stored bottom to top.
        file_rows = [stream.read(stride)[:row_size] for _ in range(header.height)]
        data = [
            Pixel(b, g, r)
            for raw in reversed(file_rows)
            for b, g, r in zip(*[iter(raw)] * PIXEL_SIZE_IN_BYTES)
        ]
        return Image(header.width, header.height, data)
    except MemoryError as exc:
        raise BmpReadError(ReadStatus.IMAGE_CREATION_FAILED) from exc


def write_bmp(stream: BinaryIO, image: Image) -> None:
    """Write the image to a binary stream as a 24-bit uncompressed BMP."""
    header = BmpHeader.for_image(image.width, image.height).pack()
    padding = bytes(width_padding(image.width))
    try:
        written = stream.write(header)
        if written is not None and written != len(header):
            raise BmpWriteError()
        for row in reversed(list(image.rows())):
            stream.write(b"".join(p.to_bytes() for p in row) + padding)
    except OSError as exc:
        raise BmpWriteError() from exc