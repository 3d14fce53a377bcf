import pytest

from targa.errors import (
    ColorMapError,
    FooterError,
    HeaderError,
    MismatchedBppError,
    ParseError,
    UnsupportedBppError,
    UnsupportedImageTypeError,
    UnsupportedTgaTypeError,
)
from targa.header import Bpp, DataType, TgaHeader, parse_image_type


@pytest.mark.parametrize(
    "error",
    [
        ColorMapError(),
        HeaderError(),
        FooterError(),
        UnsupportedImageTypeError(8),
        UnsupportedBppError(12),
        MismatchedBppError(24),
        UnsupportedTgaTypeError(DataType.NO_DATA, Bpp.BITS32),
    ],
)
def test_every_error_is_caught_as_parse_error(error):
    with pytest.raises(ParseError) as info:
        raise error
    assert info.value is error


def test_parse_error_is_value_error():
    with pytest.raises(ValueError) as info:
        TgaHeader.parse(b"\x00")
    assert isinstance(info.value, HeaderError)


def test_image_type_error_is_caught_as_parse_error():
    with pytest.raises(ParseError) as info:
        parse_image_type(8)
    assert isinstance(info.value, UnsupportedImageTypeError)
    assert info.value.image_type == 8


def test_unsupported_image_type_keeps_value():
    error = UnsupportedImageTypeError(8)
    assert error.image_type == 8
    assert "8" in str(error)


def test_unsupported_bpp_keeps_value():
    error = UnsupportedBppError(12)
    assert error.bpp == 12
    assert "12" in str(error)


def test_mismatched_bpp_keeps_value():
    error = MismatchedBppError(24)
    assert error.bpp == 24
    assert "24" in str(error)


def test_unsupported_tga_type_keeps_values():
    error = UnsupportedTgaTypeError(DataType.COLOR_MAPPED, Bpp.BITS32)
    assert error.data_type is DataType.COLOR_MAPPED
    assert error.bpp is Bpp.BITS32
    assert "COLOR_MAPPED" in str(error)
    assert "BITS32" in str(error)


def test_header_error_is_not_color_map_error():
    with pytest.raises(HeaderError) as info:
        TgaHeader.parse(b"")
    assert not isinstance(info.value, ColorMapError)