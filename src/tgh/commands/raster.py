"""
Raster bit image command for TGH printers.

Converts a decoded RGBA image into the monochrome raster format of
``GS v 0`` and frames it with the command header.

Command: GS v 0 m xL xH yL yH d1...dk
Hex: 1D 76 30 m xL xH yL yH d1...dk
m: 48 (normal, unscaled)
xL xH: horizontal size in bytes
yL yH: vertical size in dots

Data Format:
    One byte per 8-pixel strip, rows top to bottom, strips left to right.

    Bit 7 (MSB) ═══► Leftmost pixel of the strip
    ...
    Bit 0 (LSB) ═══► Rightmost pixel of the strip

    Value: 1 = print dot (black), 0 = no dot (white)

Reference: ESC/POS Command Reference, GS v 0
"""

from __future__ import annotations

from typing import Final, Tuple

from src import get_logger
from src.tgh.buffer import CommandBuffer
from src.tgh.commands.table import GS_RASTER_IMAGE
from src.tgh.exceptions import OutOfRangeError

logger = get_logger(__name__)

__all__ = [
    "ALPHA_THRESHOLD",
    "LUMINANCE_THRESHOLD",
    "Pixel",
    "TRANSPARENT_PIXEL",
    "is_dark",
    "sample_pixel",
    "pack_raster",
    "padded_width",
    "raster_header",
    "print_raster_image",
]

ALPHA_THRESHOLD: Final[int] = 126
"""A pixel is opaque when alpha is strictly greater than this."""

LUMINANCE_THRESHOLD: Final[int] = 128
"""An opaque pixel prints when its luminance is strictly below this."""

Pixel = Tuple[int, int, int, int]

TRANSPARENT_PIXEL: Final[Pixel] = (0, 0, 0, 0)


def is_dark(pixel: Pixel) -> bool:
    """
    Decide whether a pixel is printed.

    Opaque (alpha > 126) and Rec. 709 luminance, truncated to int, below 128.
    """
    r, g, b, a = pixel
    if a <= ALPHA_THRESHOLD:
        return False
    luminance = int(0.2126 * r + 0.7152 * g + 0.0722 * b)
    return luminance < LUMINANCE_THRESHOLD


def sample_pixel(pixels: bytes, width: int, row: int, column: int) -> Pixel:
    """Read the RGBA pixel at (row, column); columns past ``width`` are transparent."""
    if column >= width:
        return TRANSPARENT_PIXEL
    idx = (width * row + column) << 2
    return pixels[idx], pixels[idx + 1], pixels[idx + 2], pixels[idx + 3]


def pack_raster(width: int, height: int, pixels: bytes) -> bytes:
    """
    Pack RGBA pixels into monochrome raster bytes.

    Each row yields ``ceil(width / 8)`` bytes; the last strip of a row is
    filled with transparent pixels when width is not a multiple of 8.
    """
    strips = (width + 7) // 8
    raster = bytearray()
    for row in range(height):
        for strip in range(strips):
            byte = 0
            for bit in range(8):
                pixel = sample_pixel(pixels, width, row, strip * 8 + bit)
                if is_dark(pixel):
                    byte |= 1 << (7 - bit)
            raster.append(byte)
    return bytes(raster)


def padded_width(width: int) -> int:
    """
    Width reported in the xL field, in dots.

    Widths that are not a multiple of 8 get a full 8 dots added
    (9 -> 17, not 16).
    """
    if width % 8 != 0:
        return width + 8
    return width


def raster_header(width: int, height: int) -> bytes:
    """Return ``GS v 0 m xL xH yL yH`` for an image of the given size."""
    return GS_RASTER_IMAGE + bytes(
        [
            (padded_width(width) >> 3) & 0xFF,
            0x00,
            height & 0xFF,
            (height >> 8) & 0xFF,
        ]
    )


def print_raster_image(width: int, height: int, pixels: bytes) -> bytes:
    """
    Generate the raster bit image command for a decoded RGBA image.

    Args:
        width: Image width in pixels (positive).
        height: Image height in pixels (positive).
        pixels: RGBA-interleaved channel bytes, ``width * height * 4`` long.

    Returns:
        Command bytes: header followed by packed raster data.

    Raises:
        OutOfRangeError: If width or height is not positive.
        ValueError: If the pixel buffer length does not match the size.

    Example:
        >>> black = bytes([0, 0, 0, 255]) * 8
        >>> print_raster_image(8, 1, black)
        b'\\x1dv00\\x01\\x00\\x01\\x00\\xff'
    """
    if width <= 0:
        raise OutOfRangeError("width", width, 1, 0xFFFF, command="print_raster_image")
    if height <= 0:
        raise OutOfRangeError("height", height, 1, 0xFFFF, command="print_raster_image")

    expected = width * height * 4
    if len(pixels) != expected:
        raise ValueError(
            f"Pixel data length ({len(pixels)} bytes) must be width*height*4 "
            f"({expected} bytes) for a {width}x{height} RGBA image"
        )

    raster = pack_raster(width, height, pixels)

    buf = CommandBuffer()
    buf.append(raster_header(width, height))
    buf.append(raster)

    logger.debug(
        "Raster command built: %dx%d px, %d data bytes", width, height, len(raster)
    )
    return buf.result()
