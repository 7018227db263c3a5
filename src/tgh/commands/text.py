"""
Character size command for TGH printers.

Command: GS ! n
Hex: 1D 21 n
n: bits 4-7 = height magnification - 1, bits 0-3 = width magnification - 1
"""

from __future__ import annotations

from typing import Final

from src.tgh.buffer import CommandBuffer
from src.tgh.commands.table import GS_CHARACTER_SIZE
from src.tgh.exceptions import OutOfRangeError

__all__ = [
    "MIN_TEXT_SCALE",
    "MAX_TEXT_SCALE",
    "set_text_size",
]

MIN_TEXT_SCALE: Final[int] = 0
MAX_TEXT_SCALE: Final[int] = 7


def set_text_size(height: int, width: int) -> bytes:
    """
    Generate the select-character-size command.

    Args:
        height: Vertical magnification, 0 (normal) to 7 (8x).
        width: Horizontal magnification, 0 (normal) to 7 (8x).

    Returns:
        3-byte command ``1D 21 n`` where the high nibble of n is height
        and the low nibble is width.

    Raises:
        OutOfRangeError: If height or width is outside 0-7.

    Example:
        >>> set_text_size(1, 1)  # double height, double width
        b'\\x1d!\\x11'
    """
    if not (MIN_TEXT_SCALE <= height <= MAX_TEXT_SCALE):
        raise OutOfRangeError(
            "height", height, MIN_TEXT_SCALE, MAX_TEXT_SCALE, command="set_text_size"
        )
    if not (MIN_TEXT_SCALE <= width <= MAX_TEXT_SCALE):
        raise OutOfRangeError(
            "width", width, MIN_TEXT_SCALE, MAX_TEXT_SCALE, command="set_text_size"
        )

    buf = CommandBuffer()
    buf.append(GS_CHARACTER_SIZE)
    buf.append(bytes([(height << 4) | width]))
    return buf.result()
