# targa

A small TGA (Truevision Targa) image parser in pure Python, with no
third-party dependencies.

`RawTga` reads uncompressed and run-length encoded images at 8, 16, 24 or
32 bits per pixel. It gives access to the header, the image ID, the color
map, the raw pixel data, and the extension area and developer directory
that the file footer points to.

`Tga` decodes pixels into colors for color mapped images with 16 or 24 bit
entries (types 1 and 9), true color images at 16 or 24 bits (types 2 and
10) and 8 bit grayscale images (types 3 and 11). Pixels can come in any of
the four image origins.

## Installation

```
pip install .
```

## Decoding pixels into colors

`targa.tga.Tga.from_bytes(data, color_type)` parses an image and converts
every pixel into `color_type`, one of `Gray8`, `Rgb555` or `Rgb888` from
`targa.color`. The default is `Rgb888`.

```python
from targa.color import Rgb888
from targa.tga import Tga

with open("image.tga", "rb") as fh:
    tga = Tga.from_bytes(fh.read(), Rgb888)

print(tga.size())            # Size(width=..., height=...)
for pixel in tga.pixels():   # Pixel(position=Point(x, y), color=Rgb888(...))
    print(pixel.position, pixel.color)
```

`pixels()` yields pixels in the order they are stored in the file. Each
position is measured from the top left corner of the image.

`tga.draw(target)` places every pixel with `target[point] = color`, where
`point` is measured from the top left corner whatever the stored origin.
Any object with item assignment, such as a dict, can be the target:

```python
canvas = {}
tga.draw(canvas)
print(canvas[(0, 0)])
```

`tga.as_raw()` returns the underlying `RawTga`.

### Colors

`Gray8(luma)`, `Rgb555(r, g, b)` and `Rgb888(r, g, b)` are frozen
dataclasses that check the range of their channels. Each has
`from_raw(value)` to decode a stored value and `to_rgb888()`.
`targa.color.convert(color, target)` converts a color into another of the
three types.

## Accessing raw pixel data

`targa.raw_tga.RawTga` gives lower-level access. Its pixels are `RawPixel`
tuples holding the position and the stored value as an integer. For color
mapped images the value is the color map index.

```python
from targa.raw_tga import RawTga

with open("image.tga", "rb") as fh:
    img = RawTga.from_bytes(fh.read())

header = img.header()
print(header.width, header.height, header.pixel_depth, header.image_origin)
print(img.image_id(), img.extension_area(), img.developer_directory())

for raw_pixel in img.pixels():
    print(raw_pixel.position, hex(raw_pixel.color))
```

Other accessors are `size()`, `color_map()`, `color_bpp()`,
`image_data_bpp()`, `image_origin()`, `data_type()`, `compression()` and
`image_data()`. `ColorMap.get_raw(index)` returns the raw value of a color
map entry.

Missing uncompressed pixel data is read as zeros. Run-length encoded data
stops at the first packet that cannot be read in full.

## Errors

Malformed files raise a subclass of `targa.errors.ParseError`, which is a
`ValueError`:

- `HeaderError`: the header is truncated, or it has an invalid color map
  type, an unsupported image type or an unsupported pixel depth. The image
  ID may also be truncated.
- `ColorMapError`: the color map is truncated or has an unsupported entry
  depth. `Tga` also raises it when a pixel's index falls outside the color
  map.
- `UnsupportedTgaTypeError`: `Tga` cannot decode this combination of data
  type and color depth, for example 32 bit images.

`targa.header.parse_image_type` raises `UnsupportedImageTypeError` on its
own.

## What it does not do

The package only reads images. It does not write or encode TGA files,
decode the contents of the extension area or developer directory, or
display images.

## Running the tests

```
pip install -e ".[test]"
pytest
```