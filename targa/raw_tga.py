"""Low level access to a parsed TGA file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .color_map import ColorMap
from .errors import HeaderError
from .footer import TgaFooter
from .header import HEADER_LENGTH, Bpp, Compression, DataType, ImageOrigin, TgaHeader
from .raw_iter import RawPixel, Size, raw_pixels


@dataclass(frozen=True)
class RawTga:
    """A TGA image with access to its header, color map and raw pixel data."""

    _data: bytes = field(repr=False)
    _color_map: Optional[ColorMap] = field(repr=False)
    _pixel_data: bytes = field(repr=False)
    _size: Size
    _data_type: DataType
    _compression: Compression
    _bpp: Bpp
    _image_origin: ImageOrigin

    @classmethod
    def from_bytes(cls, data) -> "RawTga":
        """Parse a TGA image from bytes.

        Raises HeaderError or ColorMapError if the file is malformed.
        """
        data = bytes(data)
        header = TgaHeader.parse(data)
        rest = data[HEADER_LENGTH:]
        if len(rest) < header.id_len:
            raise HeaderError("image ID is truncated")
        rest = rest[header.id_len:]
        color_map, rest = ColorMap.parse(rest, header)

        footer = TgaFooter.parse(data)
        footer_length = footer.length(data) if footer is not None else 0
        pixel_data = bytes(rest[:max(len(rest) - footer_length, 0)])

        return cls(
            _data=data,
            _color_map=color_map,
            _pixel_data=pixel_data,
            _size=Size(header.width, header.height),
            _data_type=header.data_type,
            _compression=header.compression,
            _bpp=header.pixel_depth,
            _image_origin=header.image_origin,
        )

    def size(self) -> Size:
        """Return the image dimensions."""
        return self._size

    def color_map(self) -> Optional[ColorMap]:
        """Return the color map, or None if the image has none."""
        return self._color_map

    def color_bpp(self) -> Bpp:
        """Return the bit depth of the decoded colors.

        For color mapped images this is the depth of the color map entries.
        """
        if self._color_map is not None:
            return self._color_map.entry_bpp
        return self._bpp

    def image_origin(self) -> ImageOrigin:
        """Return the image origin."""
        return self._image_origin

    def data_type(self) -> DataType:
        """Return the data type."""
        return self._data_type

    def compression(self) -> Compression:
        """Return the compression type."""
        return self._compression

    def image_data(self) -> bytes:
        """Return the raw image data, without header, color map and footer."""
        return self._pixel_data

    def image_data_bpp(self) -> Bpp:
        """Return the number of bits used to store one pixel in the image data."""
        return self._bpp

    def pixels(self) -> Iterator[RawPixel]:
        """Iterate over the raw pixels of the image."""
        return raw_pixels(
            self._pixel_data, self._bpp, self._compression, self._size, self._image_origin
        )

    def header(self) -> TgaHeader:
        """Return the TGA header, parsed again from the file data."""
        return TgaHeader.parse(self._data)

    def developer_directory(self) -> Optional[bytes]:
        """Return the developer directory, or None if the file has none."""
        footer = TgaFooter.parse(self._data)
        return footer.developer_directory(self._data) if footer is not None else None

    def extension_area(self) -> Optional[bytes]:
        """Return the extension area, or None if the file has none."""
        footer = TgaFooter.parse(self._data)
        return footer.extension_area(self._data) if footer is not None else None

    def image_id(self) -> Optional[bytes]:
        """Return the image ID, or None if the file has none."""
        header = TgaHeader.parse(self._data)
        image_id = self._data[HEADER_LENGTH:HEADER_LENGTH + header.id_len]
        if len(image_id) < header.id_len or not image_id:
            return None
        return image_id