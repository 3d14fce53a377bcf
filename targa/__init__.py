"""Parse TGA images and read their raw or color-decoded pixels."""

__version__ = "0.5.0"