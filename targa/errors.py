"""Exceptions raised while parsing TGA images."""


class ParseError(ValueError):
    """Base class for every TGA parse error."""


class ColorMapError(ParseError):
    """The color map is missing, malformed or truncated."""

    def __init__(self, message="invalid or truncated color map"):
        super().__init__(message)


class HeaderError(ParseError):
    """The TGA header could not be parsed."""

    def __init__(self, message="invalid or truncated TGA header"):
        super().__init__(message)


class FooterError(ParseError):
    """The TGA footer could not be parsed."""

    def __init__(self, message="invalid TGA footer"):
        super().__init__(message)


class UnsupportedImageTypeError(ParseError):
    """The image type field holds a value that is not supported."""

    def __init__(self, image_type):
        self.image_type = image_type
        super().__init__(f"unsupported image type: {image_type}")


class UnsupportedBppError(ParseError):
    """The bits per pixel value is not supported."""

    def __init__(self, bpp):
        self.bpp = bpp
        super().__init__(f"unsupported bits per pixel: {bpp}")


class MismatchedBppError(ParseError):
    """The image bit depth differs from the requested one."""

    def __init__(self, bpp):
        self.bpp = bpp
        super().__init__(f"mismatched bits per pixel: {bpp}")


def _describe(value):
    return getattr(value, "name", repr(value))


class UnsupportedTgaTypeError(ParseError):
    """The combination of data type and bit depth is not supported."""

    def __init__(self, data_type, bpp):
        self.data_type = data_type
        self.bpp = bpp
        super().__init__(
            f"unsupported TGA type: {_describe(data_type)} with {_describe(bpp)}"
        )