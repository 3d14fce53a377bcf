"""TGA 2.0 footer: locates the extension area and developer directory."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Optional

FOOTER_LENGTH = 26
SIGNATURE = b"TRUEVISION-XFILE.\x00"


def _slice(data, start, end) -> Optional[bytes]:
    if start > end or end > len(data):
        return None
    return bytes(data[start:end])


@dataclass(frozen=True)
class TgaFooter:
    """Offsets read from the footer at the end of a TGA file."""

    footer_start: int
    extension_area_offset: Optional[int] = None
    developer_directory_offset: Optional[int] = None

    @classmethod
    def parse(cls, data) -> Optional["TgaFooter"]:
        """Parse the footer, or return None if the file has no valid footer."""
        footer_start = len(data) - FOOTER_LENGTH
        if footer_start < 0:
            return None
        if bytes(data[footer_start + 8:]) != SIGNATURE:
            return None
        extension, developer = struct.unpack_from("<II", bytes(data[footer_start:footer_start + 8]))
        return cls(footer_start, extension or None, developer or None)

    def length(self, data) -> int:
        """Length of the footer, extension area and developer directory together."""
        length = FOOTER_LENGTH
        for offset in (self.extension_area_offset, self.developer_directory_offset):
            if offset is not None:
                length = max(length, len(data) - offset)
        return length

    def _section(self, data, start, other) -> Optional[bytes]:
        if start is None:
            return None
        end = other if other is not None and other > start else self.footer_start
        return _slice(data, start, end)

    def extension_area(self, data) -> Optional[bytes]:
        """Return the extension area, or None if the file has none."""
        return self._section(data, self.extension_area_offset, self.developer_directory_offset)

    def developer_directory(self, data) -> Optional[bytes]:
        """Return the developer directory, or None if the file has none."""
        return self._section(data, self.developer_directory_offset, self.extension_area_offset)