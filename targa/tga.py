"""TGA images decoded into typed colors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple

from .color import COLOR_TYPES, Gray8, Rgb555, Rgb888, convert
from .color_map import ColorMap
from .errors import ColorMapError, UnsupportedTgaTypeError
from .header import Bpp, DataType, ImageOrigin
from .raw_iter import Point, Size, raw_colors
from .raw_tga import RawTga

_IMAGE_COLOR_TYPES = {
    (Bpp.BITS8, DataType.BLACK_AND_WHITE): Gray8,
    (Bpp.BITS16, DataType.COLOR_MAPPED): Rgb555,
    (Bpp.BITS16, DataType.TRUE_COLOR): Rgb555,
    (Bpp.BITS24, DataType.COLOR_MAPPED): Rgb888,
    (Bpp.BITS24, DataType.TRUE_COLOR): Rgb888,
}

_DIRECT_COLOR_TYPES = {
    Bpp.BITS8: Gray8,
    Bpp.BITS16: Rgb555,
    Bpp.BITS24: Rgb888,
}


class Pixel(NamedTuple):
    """A position together with its decoded color."""

    position: Point
    color: object


def _lookup(color_map: ColorMap, index: int) -> int:
    entry = color_map.get_raw(index)
    if entry is None:
        raise ColorMapError(f"color index {index} is outside the color map")
    return entry


def _draw_positions(size: Size, origin: ImageOrigin) -> Iterator[Point]:
    width, height = size
    if origin is ImageOrigin.TOP_LEFT:
        return (Point(x, y) for y in range(height) for x in range(width))
    if origin is ImageOrigin.BOTTOM_LEFT:
        return (Point(x, y) for y in reversed(range(height)) for x in range(width))
    if origin is ImageOrigin.TOP_RIGHT:
        return (Point(width - 1 - x, y) for y in range(height) for x in range(width))
    return (
        Point(width - 1 - x, height - 1 - y) for y in range(height) for x in range(width)
    )


@dataclass(frozen=True)
class Tga:
    """A TGA image whose pixels are returned in a chosen color type."""

    _raw: RawTga
    _image_color_type: type
    _color_type: type

    @classmethod
    def from_bytes(cls, data, color_type=Rgb888) -> "Tga":
        """Parse a TGA image; pixels are converted into ``color_type``.

        Raises UnsupportedTgaTypeError if the combination of data type and
        color depth cannot be decoded.
        """
        if color_type not in COLOR_TYPES:
            raise TypeError(f"unsupported color type: {color_type!r}")
        raw = RawTga.from_bytes(data)
        image_color_type = _IMAGE_COLOR_TYPES.get((raw.color_bpp(), raw.data_type()))
        if image_color_type is None:
            raise UnsupportedTgaTypeError(raw.data_type(), raw.color_bpp())
        return cls(raw, image_color_type, color_type)

    def as_raw(self) -> RawTga:
        """Return the underlying raw image."""
        return self._raw

    def size(self) -> Size:
        """Return the image dimensions."""
        return self._raw.size()

    def pixels(self) -> Iterator[Pixel]:
        """Iterate over the pixels in storage order with converted colors."""
        color_map = self._raw.color_map()
        for position, value in self._raw.pixels():
            if color_map is not None:
                value = _lookup(color_map, value)
            color = self._image_color_type.from_raw(value)
            yield Pixel(position, convert(color, self._color_type))

    def _draw_colors(self) -> Iterator:
        bpp = self._raw.image_data_bpp()
        if bpp is Bpp.BITS32:
            return iter(())
        values = raw_colors(self._raw.image_data(), bpp, self._raw.compression())
        color_map = self._raw.color_map()
        if color_map is not None:
            # A color map for grayscale data is not supported.
            if self._image_color_type is Gray8:
                return iter(())
            image_type = self._image_color_type
            return (
                convert(image_type.from_raw(_lookup(color_map, v)), self._color_type)
                for v in values
            )
        direct_type = _DIRECT_COLOR_TYPES[bpp]
        return (convert(direct_type.from_raw(v), self._color_type) for v in values)

    def draw(self, target) -> None:
        """Draw the image onto ``target`` by assigning ``target[point] = color``.

        Points are relative to the top left corner of the image, whatever
        its stored origin.
        """
        width, height = self.size()
        if width == 0 or height == 0:
            return
        positions = _draw_positions(self.size(), self._raw.image_origin())
        for point, color in zip(positions, self._draw_colors()):
            target[point] = color