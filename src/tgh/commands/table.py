"""
Command table for the TGH thermal printer dialect.

Static mapping from enumerated options (QR model, module cell size,
error-correction level) to the fixed byte sequences documented for the
GS ( k function set, plus the opcodes of the simple GS commands.
No command logic here: adding a supported value is a table change.

Reference: ESC/POS Command Reference, GS ( k <Function 165/167/169/180/181>,
           GS !, GS H, GS f, GS w, GS h, GS k, GS v 0, GS p
"""

from __future__ import annotations

from enum import Enum
from typing import Final, Mapping, Optional, Union

from src.tgh.exceptions import UnknownOptionError

__all__ = [
    "QRModel",
    "QRCellSize",
    "QRCorrection",
    "BarcodeSystem",
    "HRIPosition",
    "QRCODE_MODEL",
    "QRCODE_CELLSIZE",
    "QRCODE_CORRECTION",
    "QRCODE_STORE_PREFIX",
    "QRCODE_STORE_FUNCTION",
    "QRCODE_PRINT",
    "GS_CHARACTER_SIZE",
    "GS_HRI_POSITION",
    "GS_HRI_FONT",
    "GS_BARCODE_WIDTH",
    "GS_BARCODE_HEIGHT",
    "GS_BARCODE_PRINT",
    "GS_RASTER_IMAGE",
    "GS_PRINT_LOGO",
    "resolve_model",
    "resolve_cell_size",
    "resolve_correction",
]

# =============================================================================
# OPTION ENUMS
# =============================================================================


class QRModel(Enum):
    """
    QR symbol family selected by GS ( k <Function 165>.

    Value is the model number callers pass in settings.
    """

    MODEL_1 = 1
    """Original QR Code model 1."""

    MODEL_2 = 2
    """QR Code model 2 (printer default)."""

    MICRO = 3
    """Micro QR Code."""


class QRCellSize(Enum):
    """Module size in dots, GS ( k <Function 167>. Range depends on firmware."""

    CELLSIZE_1 = 1
    CELLSIZE_2 = 2
    CELLSIZE_3 = 3
    CELLSIZE_4 = 4
    CELLSIZE_5 = 5
    CELLSIZE_6 = 6
    CELLSIZE_7 = 7
    CELLSIZE_8 = 8


class QRCorrection(Enum):
    """
    Error-correction level, GS ( k <Function 169>.

    Value is the parameter byte n. TGH documents the levels as letters
    A-D; the usual QR names L/M/Q/H are aliases of the same bytes.
    """

    A = 0x30  # ~7%
    B = 0x31  # ~15%
    C = 0x32  # ~25%
    D = 0x33  # ~30%

    L = 0x30
    M = 0x31
    Q = 0x32
    H = 0x33


class BarcodeSystem(Enum):
    """
    Barcode symbologies for GS k (function B, length-prefixed data).

    Each value is the type code m sent after the GS k opcode.
    """

    UPCA = 65
    UPCE = 66
    EAN13 = 67
    EAN8 = 68
    CODE39 = 69
    ITF = 70
    CODABAR = 71
    CODE93 = 72
    CODE128 = 73


class HRIPosition(Enum):
    """Human Readable Interpretation position for GS H."""

    NONE = 0
    ABOVE = 1
    BELOW = 2
    BOTH = 3


# =============================================================================
# QR CODE COMMANDS (GS ( k)
# =============================================================================

QRCODE_MODEL: Final[Mapping[QRModel, bytes]] = {
    QRModel.MODEL_1: b"\x1d\x28\x6b\x04\x00\x31\x41\x31\x00",
    QRModel.MODEL_2: b"\x1d\x28\x6b\x04\x00\x31\x41\x32\x00",
    QRModel.MICRO: b"\x1d\x28\x6b\x04\x00\x31\x41\x33\x00",
}
"""
Select the QR code model.

Command: GS ( k pL pH cn fn n1 n2
Hex: 1D 28 6B 04 00 31 41 n1 00
n1: 0x31 model 1, 0x32 model 2, 0x33 micro QR
"""

QRCODE_CELLSIZE: Final[Mapping[QRCellSize, bytes]] = {
    size: b"\x1d\x28\x6b\x03\x00\x31\x43" + bytes([size.value]) for size in QRCellSize
}
"""
Set the size of the module.

Command: GS ( k pL pH cn fn n
Hex: 1D 28 6B 03 00 31 43 n
"""

QRCODE_CORRECTION: Final[Mapping[QRCorrection, bytes]] = {
    level: b"\x1d\x28\x6b\x03\x00\x31\x45" + bytes([level.value]) for level in QRCorrection
}
"""
Select the error correction level.

Command: GS ( k pL pH cn fn n
Hex: 1D 28 6B 03 00 31 45 n
n: 0x30 (7%), 0x31 (15%), 0x32 (25%), 0x33 (30%)
"""

QRCODE_STORE_PREFIX: Final[bytes] = b"\x1d\x28\x6b"
"""Store symbol data, head: GS ( k. Followed by pL pH (little-endian)."""

QRCODE_STORE_FUNCTION: Final[bytes] = b"\x31\x50\x30"
"""
Store symbol data, cn fn m: 31 50 30.

These three bytes are counted in pL pH together with the data.
"""

QRCODE_PRINT: Final[bytes] = b"\x1d\x28\x6b\x03\x00\x31\x51\x30"
"""
Print the symbol data in the symbol storage area.

Hex: 1D 28 6B 03 00 31 51 30
"""

# =============================================================================
# SIMPLE GS COMMANDS
# =============================================================================

GS_CHARACTER_SIZE: Final[bytes] = b"\x1d\x21"
"""Select character size: GS ! n (height nibble, width nibble)."""

GS_HRI_POSITION: Final[bytes] = b"\x1d\x48"
"""Select HRI print position: GS H n (0-3 or 48-51)."""

GS_HRI_FONT: Final[bytes] = b"\x1d\x66"
"""Select HRI font: GS f n (0-4, 48-52, 97, 98; 0 and 1 on all models)."""

GS_BARCODE_WIDTH: Final[bytes] = b"\x1d\x77"
"""Set barcode module width: GS w n (2-6)."""

GS_BARCODE_HEIGHT: Final[bytes] = b"\x1d\x68"
"""Set barcode height: GS h n (1-255 dots)."""

GS_BARCODE_PRINT: Final[bytes] = b"\x1d\x6b"
"""Print barcode: GS k m n d1...dn."""

GS_RASTER_IMAGE: Final[bytes] = b"\x1d\x76\x30\x30"
"""Print raster bit image: GS v 0 m, m = 48 (normal, unscaled)."""

GS_PRINT_LOGO: Final[bytes] = b"\x1d\x70"
"""Print stored logo: GS p n m."""

# =============================================================================
# LOOKUPS
# =============================================================================

_MODEL_SELECT: Final[Mapping[str, QRModel]] = {
    "1": QRModel.MODEL_1,
    "3": QRModel.MICRO,
}


def resolve_model(model: Optional[Union[QRModel, int, str]]) -> QRModel:
    """
    Map a caller-supplied model to a QRModel.

    1 selects model 1 and 3 selects micro QR (ints or numeric strings);
    anything else, unset included, selects model 2.
    """
    if isinstance(model, QRModel):
        return model
    return _MODEL_SELECT.get(str(model).strip(), QRModel.MODEL_2)


def resolve_cell_size(cell_size: Optional[Union[QRCellSize, int, str]]) -> QRCellSize:
    """
    Map a cell size (enum, int or numeric string) to QRCellSize; unset selects 3.

    Raises:
        UnknownOptionError: If there is no ``CELLSIZE_<n>`` entry.
    """
    if isinstance(cell_size, QRCellSize):
        return cell_size
    if not cell_size:
        return QRCellSize.CELLSIZE_3
    key = f"CELLSIZE_{str(cell_size).strip()}"
    try:
        return QRCellSize[key]
    except KeyError:
        raise UnknownOptionError(
            "cell size", cell_size, [s.value for s in QRCellSize], command="print_qr"
        ) from None


def resolve_correction(correction: Optional[Union[QRCorrection, str]]) -> QRCorrection:
    """
    Map a correction letter (case-insensitive) to QRCorrection; unset selects "A".

    Raises:
        UnknownOptionError: If there is no ``CORRECTION_<LETTER>`` entry.
    """
    if isinstance(correction, QRCorrection):
        return correction
    if not correction:
        return QRCorrection.A
    try:
        return QRCorrection[str(correction).strip().upper()]
    except KeyError:
        raise UnknownOptionError(
            "correction level",
            correction,
            list(QRCorrection.__members__),
            command="print_qr",
        ) from None
