"""TGA header parsing and the enumerations it uses."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import HeaderError, UnsupportedImageTypeError

HEADER_LENGTH = 18
_HEADER_FORMAT = struct.Struct("<BBBHHBHHHHBB")


class Bpp(Enum):
    """Bits per pixel."""

    BITS8 = 8
    BITS16 = 16
    BITS24 = 24
    BITS32 = 32

    @classmethod
    def from_bits(cls, value) -> Optional["Bpp"]:
        """Return the member for a bit count, or None if it is not supported."""
        try:
            return cls(value)
        except ValueError:
            return None

    def bits(self) -> int:
        """Return the number of bits."""
        return self.value

    def bytes(self) -> int:
        """Return the number of bytes needed to store a value of this depth."""
        return self.value // 8


class Compression(Enum):
    """Image data compression."""

    UNCOMPRESSED = "uncompressed"
    RLE = "rle"


class DataType(Enum):
    """Image data type."""

    NO_DATA = "no_data"
    COLOR_MAPPED = "color_mapped"
    TRUE_COLOR = "true_color"
    BLACK_AND_WHITE = "black_and_white"


_DATA_TYPES = {
    0: DataType.NO_DATA,
    1: DataType.COLOR_MAPPED,
    2: DataType.TRUE_COLOR,
    3: DataType.BLACK_AND_WHITE,
}


class ImageOrigin(Enum):
    """Corner of the image where the pixel data starts."""

    BOTTOM_LEFT = 0
    BOTTOM_RIGHT = 1
    TOP_LEFT = 2
    TOP_RIGHT = 3

    @classmethod
    def from_descriptor(cls, value) -> "ImageOrigin":
        """Extract the origin from an image descriptor byte."""
        return cls((value & 0x30) >> 4)

    def is_bottom(self) -> bool:
        """Whether the first row of the pixel data is the bottom row."""
        return self in (ImageOrigin.BOTTOM_LEFT, ImageOrigin.BOTTOM_RIGHT)


def parse_image_type(image_type) -> tuple[DataType, Compression]:
    """Split an image type byte into data type and compression."""
    if image_type & ~0b1011 & 0xFF or image_type == 8 or not 0 <= image_type <= 0xFF:
        raise UnsupportedImageTypeError(image_type)
    data_type = _DATA_TYPES[image_type & 0x3]
    compression = Compression.RLE if image_type & 0x8 else Compression.UNCOMPRESSED
    return data_type, compression


@dataclass(frozen=True)
class TgaHeader:
    """The fixed 18 byte header at the start of a TGA file."""

    id_len: int
    has_color_map: bool
    data_type: DataType
    compression: Compression
    color_map_start: int
    color_map_len: int
    color_map_depth: Optional[Bpp]
    x_origin: int
    y_origin: int
    width: int
    height: int
    pixel_depth: Bpp
    image_origin: ImageOrigin
    alpha_channel_depth: int

    @classmethod
    def parse(cls, data) -> "TgaHeader":
        """Parse the header from the start of ``data``; trailing bytes are ignored."""
        if len(data) < HEADER_LENGTH:
            raise HeaderError("TGA header is truncated")
        (
            id_len,
            color_map_type,
            image_type,
            color_map_start,
            color_map_len,
            color_map_depth,
            x_origin,
            y_origin,
            width,
            height,
            pixel_depth,
            descriptor,
        ) = _HEADER_FORMAT.unpack_from(bytes(data[:HEADER_LENGTH]))

        if color_map_type not in (0, 1):
            raise HeaderError(f"invalid color map type: {color_map_type}")
        try:
            data_type, compression = parse_image_type(image_type)
        except UnsupportedImageTypeError as exc:
            raise HeaderError(str(exc)) from exc
        depth = Bpp.from_bits(pixel_depth)
        if depth is None:
            raise HeaderError(f"unsupported pixel depth: {pixel_depth}")

        return cls(
            id_len=id_len,
            has_color_map=color_map_type == 1,
            data_type=data_type,
            compression=compression,
            color_map_start=color_map_start,
            color_map_len=color_map_len,
            color_map_depth=Bpp.from_bits(color_map_depth),
            x_origin=x_origin,
            y_origin=y_origin,
            width=width,
            height=height,
            pixel_depth=depth,
            image_origin=ImageOrigin.from_descriptor(descriptor),
            alpha_channel_depth=descriptor & 0xF,
        )