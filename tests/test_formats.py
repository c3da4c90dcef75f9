import io

import pytest

from bmprotate.bmp import BmpReadError, ReadStatus
from bmprotate.formats import (
    ImageFormat,
    UnknownExtensionError,
    are_files_binary_similar,
    image_format_from_filename,
    load_image,
    save_image,
)
from bmprotate.image import Image, Pixel


def _sample_image():
    return Image(
        2,
        3,
        [Pixel(1, 2, 3), Pixel(4, 5, 6), Pixel(7, 8, 9),
         Pixel(10, 11, 12), Pixel(13, 14, 15), Pixel(16, 17, 18)],
    )


@pytest.mark.parametrize(
    "name, expected",
    [
        ("picture.bmp", ImageFormat.BMP),
        ("picture.png", ImageFormat.PNG),
        ("dir.png/picture.bmp", ImageFormat.BMP),
        ("archive.tar.bmp", ImageFormat.BMP),
    ],
)
def test_format_from_filename(name, expected):
    assert image_format_from_filename(name) is expected


@pytest.mark.parametrize(
    "name", ["picture", "picture.jpg", "picture.BMP", "dir.bmp/picture", "picture.bmp2"]
)
def test_unknown_extension(name):
    with pytest.raises(UnknownExtensionError):
        image_format_from_filename(name)


def test_files_with_same_bytes_are_similar(tmp_path):
    first = tmp_path / "a.bin"
    second = tmp_path / "b.bin"
    payload = bytes(range(256)) * 40
    first.write_bytes(payload)
    second.write_bytes(payload)
    assert are_files_binary_similar(first, second) is True


def test_empty_files_are_similar(tmp_path):
    first = tmp_path / "a.bin"
    second = tmp_path / "b.bin"
    first.write_bytes(b"")
    second.write_bytes(b"")
    assert are_files_binary_similar(first, second) is True


def test_files_with_different_bytes_differ(tmp_path):
    first = tmp_path / "a.bin"
    second = tmp_path / "b.bin"
    payload = bytearray(10000)
    first.write_bytes(bytes(payload))
    payload[9000] = 1
    second.write_bytes(bytes(payload))
    assert are_files_binary_similar(first, second) is False


def test_prefix_file_differs(tmp_path):
    first = tmp_path / "a.bin"
    second = tmp_path / "b.bin"
    first.write_bytes(b"abcdef")
    second.write_bytes(b"abc")
    assert are_files_binary_similar(first, second) is False


def test_missing_file_is_not_similar(tmp_path):
    first = tmp_path / "a.bin"
    first.write_bytes(b"abc")
    assert are_files_binary_similar(first, tmp_path / "missing.bin") is False


def test_save_and_load_round_trip():
    image = _sample_image()
    buffer = io.BytesIO()
    save_image("out.bmp", buffer, image)
    buffer.seek(0)
    assert load_image("in.bmp", buffer) == image


def test_saved_bmp_starts_with_signature():
    buffer = io.BytesIO()
    save_image("out.bmp", buffer, _sample_image())
    assert buffer.getvalue()[:2] == b"BM"


def test_load_with_unknown_extension():
    buffer = io.BytesIO()
    save_image("out.bmp", buffer, _sample_image())
    buffer.seek(0)
    with pytest.raises(BmpReadError) as info:
        load_image("in.txt", buffer)
    assert info.value.status is ReadStatus.UNKNOWN_FILE_EXTENSION


def test_load_png_is_refused():
    with pytest.raises(BmpReadError) as info:
        load_image("in.png", io.BytesIO(b""))
    assert info.value.status is ReadStatus.UNKNOWN_FILE_EXTENSION


@pytest.mark.parametrize("name", ["out.txt", "out", "out.png"])
def test_save_with_unsupported_extension_writes_nothing(name):
    buffer = io.BytesIO()
    with pytest.raises(UnknownExtensionError):
        save_image(name, buffer, _sample_image())
    assert buffer.getvalue() == b""