import pytest

from quadkit.color import (
    BLACK,
    BLANK,
    BLUE,
    DARKGRAY,
    GOLD,
    GRAY,
    MAGENTA,
    PINK,
    RED,
    SKYBLUE,
    WHITE,
    Color,
    color_u8,
    hsl_to_rgb,
    rgb_to_hsl,
)


def test_color_from_bytes_macro():
    assert Color(1.0, 0.0, 0.0, 1.0) == color_u8(255, 0, 0, 255)
    assert Color(1.0, 0.5, 0.0, 1.0) == color_u8(255, 127.5, 0, 255)
    assert Color(0.0, 1.0, 0.5, 1.0) == color_u8(0, 255, 127.5, 255)


def test_from_rgba_matches_color_u8():
    assert Color.from_rgba(10, 20, 30, 40) == color_u8(10, 20, 30, 40)


def test_from_bytes_and_to_bytes_round_trip():
    data = bytes([0, 64, 128, 255])
    assert Color.from_bytes(data).to_bytes() == data


def test_from_bytes_accepts_list():
    assert Color.from_bytes([255, 0, 0, 255]) == Color(1.0, 0.0, 0.0, 1.0)


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        Color.from_bytes(b"\x00\x01\x02")


def test_to_bytes_white_and_blank():
    assert WHITE.to_bytes() == b"\xff\xff\xff\xff"
    assert BLANK.to_bytes() == b"\x00\x00\x00\x00"


def test_to_bytes_saturates_out_of_range():
    assert Color(2.0, -1.0, 0.5, 1.0).to_bytes() == bytes([255, 0, 127, 255])


def test_tuple_round_trip():
    values = (0.1, 0.2, 0.3, 0.4)
    assert Color.from_tuple(values).to_tuple() == values


def test_from_tuple_wrong_length():
    with pytest.raises(ValueError):
        Color.from_tuple((0.1, 0.2))


def test_hsl_to_rgb_grey_when_unsaturated():
    assert hsl_to_rgb(0.3, 0.0, 0.25) == Color(0.25, 0.25, 0.25, 1.0)


def test_hsl_to_rgb_pure_red():
    color = hsl_to_rgb(0.0, 1.0, 0.5)
    assert color.to_tuple() == pytest.approx((1.0, 0.0, 0.0, 1.0))


def test_rgb_to_hsl_gray():
    assert rgb_to_hsl(GRAY) == (0.0, 0.0, GRAY.r)


@pytest.mark.parametrize(
    "color", [RED, BLUE, GOLD, PINK, SKYBLUE, MAGENTA, DARKGRAY, WHITE, BLACK]
)
def test_hsl_round_trip(color):
    h, s, l = rgb_to_hsl(color)
    assert 0.0 <= h <= 1.0
    back = hsl_to_rgb(h, s, l)
    assert back.to_tuple() == pytest.approx(color.to_tuple())