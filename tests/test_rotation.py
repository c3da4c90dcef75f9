import pytest

from bmprotate.image import Image, Pixel
from bmprotate.rotation import RotationError, rotate_counterclockwise


def _numbered(width, height):
    return Image(width, height, [Pixel(i % 256, i // 256, 0) for i in range(width * height)])


def test_two_pixel_row_turns_right_pixel_to_top():
    left, right = Pixel(1, 1, 1), Pixel(2, 2, 2)
    rotated = rotate_counterclockwise(Image(2, 1, [left, right]), 90.0)
    assert (rotated.width, rotated.height) == (1, 2)
    assert rotated.data == [right, left]


def test_dimensions_swap():
    rotated = rotate_counterclockwise(_numbered(5, 3), 90.0)
    assert (rotated.width, rotated.height) == (3, 5)


def test_pixel_positions_follow_quarter_turn():
    source = _numbered(4, 3)
    rotated = rotate_counterclockwise(source, 90.0)
    for y in range(source.height):
        for x in range(source.width):
            assert rotated.get(y, source.width - 1 - x) == source.get(x, y)


def test_four_turns_give_original():
    source = _numbered(3, 7)
    result = source
    for _ in range(4):
        result = rotate_counterclockwise(result, 90.0)
    assert result == source


def test_source_is_not_modified():
    source = _numbered(3, 2)
    snapshot = list(source.data)
    rotate_counterclockwise(source, 90.0)
    assert source.data == snapshot


def test_empty_image_rotates_to_empty():
    rotated = rotate_counterclockwise(Image.blank(0, 0), 90.0)
    assert (rotated.width, rotated.height) == (0, 0)


def test_smaller_angle_still_turns_a_quarter():
    source = _numbered(3, 2)
    assert rotate_counterclockwise(source, 45.0) == rotate_counterclockwise(source, 90.0)


@pytest.mark.parametrize("angle", [180.0, 270.0, 90.5])
def test_other_angles_are_refused(angle):
    with pytest.raises(RotationError):
        rotate_counterclockwise(_numbered(2, 2), angle)