"""Pixel color types and the conversions between them."""

from __future__ import annotations

from dataclasses import dataclass


def _scale(value: int, from_max: int, to_max: int) -> int:
    """Rescale a channel value from one range to another, rounding to nearest."""
    if from_max == to_max:
        return value
    return (value * to_max + from_max // 2) // from_max


def _check_channel(name: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")


def _luma(rgb: "Rgb888") -> int:
    # ITU-R BT.601 weights scaled to 256.
    return (rgb.r * 77 + rgb.g * 150 + rgb.b * 29 + 128) >> 8


@dataclass(frozen=True, order=True)
class Gray8:
    """8 bit grayscale color."""

    luma: int

    def __post_init__(self):
        _check_channel("luma", self.luma, 0xFF)

    @classmethod
    def from_raw(cls, raw) -> "Gray8":
        """Decode a raw 8 bit value; higher bits are ignored."""
        return cls(raw & 0xFF)

    def to_rgb888(self) -> "Rgb888":
        """Return the equivalent 24 bit color."""
        return Rgb888(self.luma, self.luma, self.luma)


@dataclass(frozen=True, order=True)
class Rgb555:
    """15 bit color with 5 bits per channel."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            _check_channel(name, getattr(self, name), 0x1F)

    @classmethod
    def from_raw(cls, raw) -> "Rgb555":
        """Decode a raw value laid out as 0RRRRRGGGGGBBBBB."""
        return cls((raw >> 10) & 0x1F, (raw >> 5) & 0x1F, raw & 0x1F)

    def to_rgb888(self) -> "Rgb888":
        """Return the equivalent 24 bit color."""
        return Rgb888(_scale(self.r, 31, 255), _scale(self.g, 31, 255), _scale(self.b, 31, 255))


@dataclass(frozen=True, order=True)
class Rgb888:
    """24 bit color with 8 bits per channel."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            _check_channel(name, getattr(self, name), 0xFF)

    @classmethod
    def from_raw(cls, raw) -> "Rgb888":
        """Decode a raw value laid out as 0xRRGGBB."""
        return cls((raw >> 16) & 0xFF, (raw >> 8) & 0xFF, raw & 0xFF)

    def to_rgb888(self) -> "Rgb888":
        """Return this color."""
        return self


COLOR_TYPES = (Gray8, Rgb555, Rgb888)


def convert(color, target):
    """Convert ``color`` into the color type ``target``."""
    if target not in COLOR_TYPES:
        raise TypeError(f"unsupported target color type: {target!r}")
    if isinstance(color, target):
        return color
    if target is Rgb888:
        return color.to_rgb888()
    if target is Rgb555:
        if isinstance(color, Gray8):
            value = _scale(color.luma, 255, 31)
            return Rgb555(value, value, value)
        rgb = color.to_rgb888()
        return Rgb555(_scale(rgb.r, 255, 31), _scale(rgb.g, 255, 31), _scale(rgb.b, 255, 31))
    return Gray8(_luma(color.to_rgb888()))