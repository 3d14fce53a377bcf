"""TGA color map (palette)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import ColorMapError
from .header import Bpp, TgaHeader


@dataclass(frozen=True)
class ColorMap:
    """Color map entries stored in a TGA file."""

    start_index: int
    length: int
    entry_bpp: Bpp
    data: bytes

    @classmethod
    def parse(cls, data, header: TgaHeader) -> tuple[Optional["ColorMap"], bytes]:
        """Read the color map from ``data``; return it with the bytes that follow.

        If the header declares no color map, ``(None, data)`` is returned.
        """
        if not header.has_color_map:
            return None, data
        entry_bpp = header.color_map_depth
        if entry_bpp is None:
            raise ColorMapError("color map has an unsupported entry depth")
        size = header.color_map_len * entry_bpp.bytes()
        if len(data) < size:
            raise ColorMapError("color map is larger than the file")
        color_map = cls(
            start_index=header.color_map_start,
            length=header.color_map_len,
            entry_bpp=entry_bpp,
            data=bytes(data[:size]),
        )
        return color_map, data[size:]

    def get_raw(self, index) -> Optional[int]:
        """Return the raw little-endian value of an entry, or None if out of range."""
        if not 0 <= index < self.length:
            return None
        width = self.entry_bpp.bytes()
        start = index * width
        return int.from_bytes(self.data[start:start + width], "little")