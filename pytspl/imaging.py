"""
Image to BITMAP conversion.

Converts Pillow images into the row-packed 1-bit payload used by the
BITMAP command. Each row is ceil(width / 8) bytes, most significant bit is
the leftmost pixel, and rows are written top to bottom.

TSPL polarity: a 0 bit prints (black) and a 1 bit leaves the label blank.
Some firmware variants use the opposite convention; pass ``invert=True``
for those. Padding bits at the end of each row are always blank.

Example:
    >>> from PIL import Image
    >>> from pytspl.imaging import bitmap_from_image
    >>> logo = Image.open("logo.png")
    >>> cmd = bitmap_from_image(logo, x=20, y=20, dither=True)
    >>> data = cmd.render()
"""

import logging
from pathlib import Path
from typing import Final, Union

from PIL import Image

from pytspl.commands.bitmap import Bitmap, BitmapMode

__all__ = [
    "DEFAULT_THRESHOLD",
    "pack_image",
    "bitmap_from_image",
]

logger: Final = logging.getLogger(__name__)

DEFAULT_THRESHOLD: Final[int] = 128

ImageSource = Union[Image.Image, str, Path]


def _monochrome(image: Image.Image, threshold: int, dither: bool) -> Image.Image:
    """Reduce to Pillow mode "1" (0 = black, 255 = white)."""
    if image.mode == "1":
        return image
    if image.mode in ("RGBA", "LA") or "transparency" in image.info:
        # Transparent pixels become white instead of whatever the RGB
        # channels hold.
        rgba = image.convert("RGBA")
        background = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
        image = Image.alpha_composite(background, rgba)
    gray = image.convert("L")
    if dither:
        return gray.convert("1", dither=Image.Dither.FLOYDSTEINBERG)
    return gray.point(lambda v: 0 if v < threshold else 255, "1")


def pack_image(
    image: Image.Image,
    *,
    threshold: int = DEFAULT_THRESHOLD,
    dither: bool = False,
    invert: bool = False,
) -> tuple[int, int, bytes]:
    """
    Pack an image into TSPL bitmap rows.

    Args:
        image: Any Pillow image. Non 1-bit images are converted to
            grayscale first; alpha is composited onto white.
        threshold: Gray level below which a pixel is black (0-255).
            Ignored when ``dither`` is set.
        dither: Use Floyd-Steinberg dithering instead of a threshold.
        invert: Write 1 for black and 0 for blank.

    Returns:
        (width_bytes, height, data) ready for a Bitmap command.

    Raises:
        ValueError: If the image is empty or threshold is out of range.
    """
    if not 0 <= threshold <= 255:
        raise ValueError(f"threshold must be between 0 and 255, got {threshold}")
    if image.width == 0 or image.height == 0:
        raise ValueError(f"image has no pixels ({image.width}x{image.height})")

    mono = _monochrome(image, threshold, dither)
    width, height = mono.size
    width_bytes = (width + 7) // 8
    pixels = mono.load()

    black_bit = 1 if invert else 0
    blank_bit = 1 - black_bit

    data = bytearray()
    for y in range(height):
        for byte_col in range(width_bytes):
            value = 0
            for bit in range(8):
                x = byte_col * 8 + bit
                if x < width and pixels[x, y] == 0:
                    pixel_bit = black_bit
                else:
                    pixel_bit = blank_bit
                value |= pixel_bit << (7 - bit)
            data.append(value)

    logger.debug(
        "Packed %dx%d image into %d bytes (%d bytes/row)",
        width,
        height,
        len(data),
        width_bytes,
    )
    return width_bytes, height, bytes(data)


def bitmap_from_image(
    image: ImageSource,
    x: int = 0,
    y: int = 0,
    mode: BitmapMode = BitmapMode.OVERWRITE,
    *,
    threshold: int = DEFAULT_THRESHOLD,
    dither: bool = False,
    invert: bool = False,
) -> Bitmap:
    """
    Build a fully populated Bitmap command from an image.

    Args:
        image: Pillow image or path to an image file.
        x: Horizontal position in dots.
        y: Vertical position in dots.
        mode: How the bitmap combines with the image buffer.
        threshold: See pack_image().
        dither: See pack_image().
        invert: See pack_image().

    Returns:
        Bitmap with width (in bytes), height and data set.
    """
    if isinstance(image, (str, Path)):
        with Image.open(image) as opened:
            opened.load()
            return bitmap_from_image(
                opened, x, y, mode, threshold=threshold, dither=dither, invert=invert
            )

    width_bytes, height, data = pack_image(
        image, threshold=threshold, dither=dither, invert=invert
    )
    return Bitmap(
        x=x, y=y, width=width_bytes, height=height, mode=mode, data=data
    )
