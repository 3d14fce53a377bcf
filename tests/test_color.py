import pytest

from targa.color import Gray8, Rgb555, Rgb888, convert


def test_rgb888_from_raw_splits_channels():
    assert Rgb888.from_raw(0x123456) == Rgb888(0x12, 0x34, 0x56)


def test_rgb888_from_raw_ignores_high_bits():
    assert Rgb888.from_raw(0xAB123456) == Rgb888.from_raw(0x123456)


@pytest.mark.parametrize("r,g,b", [(0, 0, 0), (31, 0, 0), (0, 31, 0), (0, 0, 31), (5, 17, 29)])
def test_rgb555_from_raw_layout(r, g, b):
    assert Rgb555.from_raw((r << 10) | (g << 5) | b) == Rgb555(r, g, b)


def test_rgb555_from_raw_ignores_top_bit():
    assert Rgb555.from_raw(0x8000 | 0x1234) == Rgb555.from_raw(0x1234)


def test_gray8_from_raw_masks_to_byte():
    assert Gray8.from_raw(0x1AB) == Gray8(0xAB)


def test_rgb888_to_rgb888_is_identity():
    color = Rgb888(1, 2, 3)
    assert color.to_rgb888() is color


def test_gray8_to_rgb888_copies_luma():
    assert Gray8(0x40).to_rgb888() == Rgb888(0x40, 0x40, 0x40)


def test_rgb555_extremes_map_to_rgb888_extremes():
    assert Rgb555(31, 31, 31).to_rgb888() == Rgb888(255, 255, 255)
    assert Rgb555(0, 0, 0).to_rgb888() == Rgb888(0, 0, 0)


def test_rgb555_round_trip_through_rgb888():
    for value in range(32):
        color = Rgb555(value, 31 - value, value)
        assert convert(convert(color, Rgb888), Rgb555) == color


def test_gray8_round_trip_through_rgb888():
    for value in range(256):
        assert convert(convert(Gray8(value), Rgb888), Gray8) == Gray8(value)


def test_gray8_round_trip_through_rgb555_keeps_extremes():
    assert convert(convert(Gray8(0), Rgb555), Gray8) == Gray8(0)
    assert convert(convert(Gray8(255), Rgb555), Gray8) == Gray8(255)


def test_white_and_black_to_gray():
    assert convert(Rgb888(255, 255, 255), Gray8) == Gray8(255)
    assert convert(Rgb888(0, 0, 0), Gray8).luma == 0


def test_luma_is_monotonic():
    lumas = [convert(Rgb888(v, v, v), Gray8).luma for v in range(256)]
    assert lumas == sorted(lumas)


def test_convert_to_same_type_returns_color():
    color = Rgb555(1, 2, 3)
    assert convert(color, Rgb555) is color


def test_convert_to_unknown_type_raises():
    with pytest.raises(TypeError):
        convert(Rgb888(0, 0, 0), int)


@pytest.mark.parametrize(
    "factory",
    [lambda: Gray8(256), lambda: Rgb555(32, 0, 0), lambda: Rgb888(0, -1, 0)],
)
def test_out_of_range_channels_raise(factory):
    with pytest.raises(ValueError):
        factory()