"""
Barcode commands for TGH printers.

A barcode build sets HRI position, HRI font, module width and bar height,
then prints the symbol with GS k using the length-prefixed form
(function B: ``GS k m n d1...dn``). Every setting is always sent, with the
protocol default when the caller leaves it unset.

Reference: ESC/POS Command Reference, GS H, GS f, GS w, GS h, GS k
"""

from __future__ import annotations

from typing import Any, Final, Mapping, Optional, Union

from src import get_logger
from src.tgh.buffer import CommandBuffer
from src.tgh.commands.settings import (
    DEFAULT_BARCODE_HEIGHT,
    DEFAULT_BARCODE_WIDTH,
    DEFAULT_HRI_FONT,
    DEFAULT_HRI_POSITION,
    BarcodeTypeLike,
    SymbolSettings,
)
from src.tgh.commands.table import (
    GS_BARCODE_HEIGHT,
    GS_BARCODE_PRINT,
    GS_BARCODE_WIDTH,
    GS_HRI_FONT,
    GS_HRI_POSITION,
    BarcodeSystem,
    HRIPosition,
)
from src.tgh.exceptions import OutOfRangeError, PayloadTooLargeError

logger = get_logger(__name__)

__all__ = [
    "BARCODE_MAX_DATA_LENGTH",
    "print_barcode",
]

BARCODE_MAX_DATA_LENGTH: Final[int] = 255

MIN_MODULE_WIDTH: Final[int] = 2
MAX_MODULE_WIDTH: Final[int] = 6
MIN_BAR_HEIGHT: Final[int] = 1
MAX_BAR_HEIGHT: Final[int] = 255


def _byte_option(name: str, value: int, low: int = 0, high: int = 255) -> bytes:
    if not (low <= value <= high):
        raise OutOfRangeError(name, value, low, high, command="print_barcode")
    return bytes([value])


def _encode_data(data: Union[str, bytes]) -> bytes:
    if isinstance(data, str):
        try:
            return data.encode("ascii")
        except UnicodeEncodeError as e:
            raise TypeError(
                f"Barcode data must be ASCII-encodable (codes 0-127). "
                f"Invalid character: {e.object[e.start:e.end]!r}"
            ) from e
    return bytes(data)


def print_barcode(
    data: Union[str, bytes],
    barcode_type: BarcodeTypeLike,
    settings: Optional[Union[SymbolSettings, Mapping[str, Any]]] = None,
) -> bytes:
    """
    Generate the command sequence to print a barcode.

    Command sequence:
        GS H n      HRI position (default 0, none)
        GS f n      HRI font (default 0)
        GS w n      Module width 2-6 (default 3)
        GS h n      Bar height 1-255 dots (default 162)
        GS k m n d  Print: type m, data length n, data

    Args:
        data: Barcode content. ``str`` must be ASCII.
        barcode_type: BarcodeSystem member or raw type code (0-255).
        settings: Optional SymbolSettings (or mapping). Uses
                  ``hri_position``, ``hri_font``, ``width``, ``height``.

    Returns:
        Command bytes ready to send to the printer.

    Raises:
        PayloadTooLargeError: If data is longer than 255 bytes.
        OutOfRangeError: If a setting is outside its protocol range.
        TypeError: If ``str`` data is not ASCII.

    Example:
        >>> cmd = print_barcode("012345678905", BarcodeSystem.UPCA,
        ...                     SymbolSettings(hri_position=HRIPosition.BELOW))
        >>> printer.send(cmd)
    """
    settings = SymbolSettings.coerce(settings)
    raw = _encode_data(data)
    if len(raw) > BARCODE_MAX_DATA_LENGTH:
        raise PayloadTooLargeError(
            len(raw), BARCODE_MAX_DATA_LENGTH, command="print_barcode"
        )

    type_code = (
        barcode_type.value if isinstance(barcode_type, BarcodeSystem) else barcode_type
    )
    hri_position = settings.hri_position or DEFAULT_HRI_POSITION
    if isinstance(hri_position, HRIPosition):
        hri_position = hri_position.value

    hri_byte = _byte_option("hri_position", hri_position)
    font_byte = _byte_option("hri_font", settings.hri_font or DEFAULT_HRI_FONT)
    width_byte = _byte_option(
        "width",
        settings.width or DEFAULT_BARCODE_WIDTH,
        MIN_MODULE_WIDTH,
        MAX_MODULE_WIDTH,
    )
    height_byte = _byte_option(
        "height",
        settings.height or DEFAULT_BARCODE_HEIGHT,
        MIN_BAR_HEIGHT,
        MAX_BAR_HEIGHT,
    )
    type_byte = _byte_option("barcode_type", type_code)

    buf = CommandBuffer()
    buf.append(GS_HRI_POSITION + hri_byte)
    buf.append(GS_HRI_FONT + font_byte)
    buf.append(GS_BARCODE_WIDTH + width_byte)
    buf.append(GS_BARCODE_HEIGHT + height_byte)
    buf.append(GS_BARCODE_PRINT)
    buf.append(type_byte + bytes([len(raw)]))
    buf.append(raw)

    logger.debug("Barcode command built: type=%d data=%d bytes", type_code, len(raw))
    return buf.result()
