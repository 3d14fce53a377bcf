"""Decoding of raw TGA pixel data into color values and positioned pixels."""

from __future__ import annotations

from itertools import chain, repeat
from typing import Iterator, NamedTuple

from .header import Bpp, Compression, ImageOrigin


class Point(NamedTuple):
    """A position relative to the top left corner of an image."""

    x: int = 0
    y: int = 0


class Size(NamedTuple):
    """Image dimensions in pixels."""

    width: int = 0
    height: int = 0


class RawPixel(NamedTuple):
    """A pixel position together with its raw, undecoded color value."""

    position: Point = Point()
    color: int = 0


def _uncompressed(data: bytes, width: int) -> Iterator[int]:
    complete = len(data) - len(data) % width
    for start in range(0, complete, width):
        yield int.from_bytes(data[start:start + width], "little")


def _rle(data: bytes, width: int) -> Iterator[int]:
    pos = 0
    end = len(data)
    while pos < end:
        packet = data[pos]
        pos += 1
        # The lower 7 bits hold the pixel count minus one; the top bit marks a run.
        count = (packet & 0x7F) + 1
        if packet & 0x80:
            if pos + width > end:
                return
            value = int.from_bytes(data[pos:pos + width], "little")
            pos += width
            yield from repeat(value, count)
        else:
            for _ in range(count):
                if pos + width > end:
                    return
                yield int.from_bytes(data[pos:pos + width], "little")
                pos += width


def raw_colors(data, bpp: Bpp, compression: Compression) -> Iterator[int]:
    """Yield the raw color values stored in TGA image data.

    Uncompressed data is padded with zeros forever once it runs out; RLE data
    ends as soon as a packet cannot be read completely.
    """
    data = bytes(data)
    width = bpp.bytes()
    if compression is Compression.RLE:
        return _rle(data, width)
    return chain(_uncompressed(data, width), repeat(0))


def _positions(size: Size, origin: ImageOrigin) -> Iterator[Point]:
    bottom = origin.is_bottom()
    step = -1 if bottom else 1
    x = 0
    y = max(size.height - 1, 0) if bottom else 0
    while 0 <= y < size.height:
        yield Point(x, y)
        x += 1
        if x >= size.width:
            x = 0
            y += step


def raw_pixels(
    data, bpp: Bpp, compression: Compression, size: Size, origin: ImageOrigin
) -> Iterator[RawPixel]:
    """Yield every pixel of the image in storage order with its position."""
    for position, color in zip(_positions(size, origin), raw_colors(data, bpp, compression)):
        yield RawPixel(position, color)