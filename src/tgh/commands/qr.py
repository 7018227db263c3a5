"""
QR code commands for TGH printers (GS ( k function set).

A QR build is five commands sent in fixed order: select model, set module
size, select error correction, store data, print stored symbol. The printer
renders the symbol itself; no image processing happens here.

Reference: ESC/POS Command Reference, GS ( k <Function 165, 167, 169, 180, 181>
"""

from __future__ import annotations

from typing import Any, Final, Mapping, Optional, Union

from src import get_logger
from src.tgh.buffer import CommandBuffer
from src.tgh.commands.settings import SymbolSettings
from src.tgh.commands.table import (
    QRCODE_CELLSIZE,
    QRCODE_CORRECTION,
    QRCODE_MODEL,
    QRCODE_PRINT,
    QRCODE_STORE_FUNCTION,
    QRCODE_STORE_PREFIX,
    resolve_cell_size,
    resolve_correction,
    resolve_model,
)
from src.tgh.exceptions import PayloadTooLargeError

logger = get_logger(__name__)

__all__ = [
    "QR_MAX_STORE_LENGTH",
    "print_qr",
    "qr_store_length",
]

QR_MAX_STORE_LENGTH: Final[int] = 0xFFFF
"""pL pH is a 16-bit field; it counts cn fn m plus the data."""


def qr_store_length(payload: bytes) -> bytes:
    """
    Return the pL pH pair for the store-data command.

    The length covers the three bytes ``31 50 30`` plus the payload.

    Raises:
        PayloadTooLargeError: If the length does not fit 16 bits.
    """
    length = len(payload) + len(QRCODE_STORE_FUNCTION)
    if length > QR_MAX_STORE_LENGTH:
        raise PayloadTooLargeError(
            len(payload),
            QR_MAX_STORE_LENGTH - len(QRCODE_STORE_FUNCTION),
            command="print_qr",
        )
    return bytes([length % 256, length // 256])


def print_qr(
    payload: Union[str, bytes],
    settings: Optional[Union[SymbolSettings, Mapping[str, Any]]] = None,
) -> bytes:
    """
    Generate the full command sequence to print a QR code.

    Args:
        payload: Data to encode. ``str`` is encoded as UTF-8; the length
                 field always counts encoded bytes.
        settings: Optional SymbolSettings (or mapping). Only ``model``,
                  ``cell_size`` and ``correction`` are used here.

    Returns:
        Command bytes ready to send to the printer.

    Raises:
        UnknownOptionError: If cell size or correction level has no
                            command table entry.
        PayloadTooLargeError: If the payload does not fit the 16-bit
                              length field.

    Example:
        >>> cmd = print_qr("https://example.com", SymbolSettings(cell_size=6))
        >>> printer.send(cmd)
    """
    settings = SymbolSettings.coerce(settings)
    data = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)

    # All lookups happen before the first append
    model = resolve_model(settings.model)
    cell_size = resolve_cell_size(settings.cell_size)
    correction = resolve_correction(settings.correction)
    length = qr_store_length(data)

    buf = CommandBuffer()
    buf.append(QRCODE_MODEL[model])
    buf.append(QRCODE_CELLSIZE[cell_size])
    buf.append(QRCODE_CORRECTION[correction])
    buf.append(QRCODE_STORE_PREFIX + length + QRCODE_STORE_FUNCTION)
    buf.append(data)
    buf.append(QRCODE_PRINT)

    logger.debug(
        "QR command built: model=%s cell=%s correction=%s payload=%d bytes",
        model.name,
        cell_size.value,
        correction.name,
        len(data),
    )
    return buf.result()
