import pytest

from blockcaster.color import Color, create_rgb, int_to_rgb, negative_color


def test_create_rgb_white():
    assert create_rgb(255, 255, 255) == 0xFFFFFF


def test_create_rgb_truncates_floats():
    assert create_rgb(255.9, 0.7, 0.2) == create_rgb(255, 0, 0)


def test_int_to_rgb_channels():
    assert int_to_rgb(0xFF0000) == Color(255, 0, 0)
    assert int_to_rgb(0x00FF00) == Color(0, 255, 0)


def test_int_to_rgb_ignores_high_bits():
    assert int_to_rgb(0x1FFFFFF) == int_to_rgb(0xFFFFFF)


@pytest.mark.parametrize(
    "r,g,b", [(0, 0, 0), (255, 255, 255), (1, 2, 3), (200, 17, 99)]
)
def test_round_trip(r, g, b):
    color = Color(r, g, b)
    assert int_to_rgb(create_rgb(r, g, b)) == color
    assert color.to_int() == create_rgb(r, g, b)


def test_negative_extremes():
    assert negative_color(Color(0, 0, 0)) == 0xFFFFFF
    assert negative_color(Color(255, 255, 255)) == create_rgb(0, 0, 0)


@pytest.mark.parametrize("packed", [0x000000, 0x123456, 8355711, 0xFFFFFF])
def test_negative_is_involution(packed):
    once = negative_color(int_to_rgb(packed))
    assert negative_color(int_to_rgb(once)) == packed
    assert once + packed == 0xFFFFFF