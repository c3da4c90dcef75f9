"""Compare the pixel data of two 24-bit BMP files."""

from __future__ import annotations

import enum
import io
import sys
from collections.abc import Sequence
from typing import BinaryIO

from bmprotate.bmp import HEADER_SIZE, BmpHeader, BmpReadError
from bmprotate.image import PIXEL_SIZE_IN_BYTES

EXECUTABLE_NAME = "image-transformer"
CMP_BUFFER_SIZE = 4096 * 2


class CmpResult(enum.Enum):
    """Outcome of comparing two byte streams."""

    EQ = 0
    DIFF = 1
    ERROR = 2


class CompareStatus(enum.IntEnum):
    """Outcome of comparing two BMP files; the value is the exit status."""

    EQUALS = 0
    DIFF = 1
    FILE_ERROR = 2
    DIMENSIONS_DIFFER = 3
    INVALID_FORMAT = 4
    OUT_OF_MEMORY = 5
    INVALID_ARGUMENT = 6

    @property
    def message(self) -> str:
        """Text reported for this status."""
        return _MESSAGES[self]


_MESSAGES = {
    CompareStatus.EQUALS: "BMP files are similar",
    CompareStatus.DIFF: "Read from BMP file successful",
    CompareStatus.FILE_ERROR: "Invalid BMP file",
    CompareStatus.DIMENSIONS_DIFFER: "BMP files have different dimensions",
    CompareStatus.INVALID_FORMAT: "Invalid BMP file format",
    CompareStatus.OUT_OF_MEMORY: "Out of memory while comparing BMP files",
    CompareStatus.INVALID_ARGUMENT: "Internal error while reading BMP file: invalid argument",
}


def compare_streams(stream1: BinaryIO, stream2: BinaryIO, size: int) -> CmpResult:
    """Compare the next size bytes of both streams; a short read ends the comparison."""
    remaining = size
    try:
        while remaining > 0:
            chunk_size = min(CMP_BUFFER_SIZE, remaining)
            chunk1 = stream1.read(chunk_size)
            chunk2 = stream2.read(chunk_size)
            if chunk1 != chunk2:
                return CmpResult.DIFF
            if len(chunk1) < CMP_BUFFER_SIZE:
                return CmpResult.EQ
            remaining -= CMP_BUFFER_SIZE
    except OSError:
        return CmpResult.ERROR
    return CmpResult.EQ


def _read_header(stream: BinaryIO) -> BmpHeader | None:
    try:
        header = BmpHeader.unpack(stream.read(HEADER_SIZE))
    except (BmpReadError, OSError):
        return None
    if header.pack()[:2] != b"BM" or header.bit_count != 24:
        return None
    return header


def bmp_compare(stream1: BinaryIO, stream2: BinaryIO) -> CompareStatus:
    """Compare the dimensions and pixel rows of two BMP streams, ignoring row padding."""
    header1 = _read_header(stream1)
    if header1 is None:
        return CompareStatus.FILE_ERROR
    header2 = _read_header(stream2)
    if header2 is None:
        return CompareStatus.INVALID_FORMAT
    if header1.width != header2.width or header1.height != header2.height:
        return CompareStatus.DIMENSIONS_DIFFER

    padding = header1.width % 4
    row_size = header1.width * PIXEL_SIZE_IN_BYTES
    for _ in range(header1.height):
        result = compare_streams(stream1, stream2, row_size)
        if result is CmpResult.DIFF:
            return CompareStatus.DIFF
        if result is CmpResult.ERROR:
            return CompareStatus.FILE_ERROR
        try:
            stream1.seek(padding, io.SEEK_CUR)
            stream2.seek(padding, io.SEEK_CUR)
        except OSError:
            return CompareStatus.FILE_ERROR
    return CompareStatus.EQUALS


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: compare two BMP files, exit 0 when they match."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(f"Usage: ./{EXECUTABLE_NAME} BMP_FILE_NAME1 BMP_FILE_NAME2", file=sys.stderr)
        if len(args) < 2:
            return 1

    try:
        first = open(args[0], "rb")
    except OSError:
        print("Bad first input file", file=sys.stderr)
        return 1
    with first:
        try:
            second = open(args[1], "rb")
        except OSError:
            print("Bad second input file", file=sys.stderr)
            return 1
        with second:
            status = bmp_compare(first, second)

    if status is CompareStatus.EQUALS:
        return 0
    print(status.message, file=sys.stderr)
    return int(status)