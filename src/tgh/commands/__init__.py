"""
TGH command encoders.

Low-level builders for the TGH thermal receipt printer dialect (ESC/POS
family). Every function returns a fresh ``bytes`` object ready to be written
verbatim to the printer; nothing is carried over between calls.

Module Structure:
    commands/
    ├── __init__.py     # This file (public API exports)
    ├── table.py        # Option enums and fixed command bytes
    ├── settings.py     # SymbolSettings for QR and barcodes
    ├── text.py         # GS ! character size
    ├── qr.py           # GS ( k QR code
    ├── barcode.py      # GS H/f/w/h/k barcode
    ├── raster.py       # GS v 0 raster bit image
    └── logo.py         # GS p stored logo

Usage:
    >>> from src.tgh.commands import set_text_size, print_qr
    >>> command = set_text_size(1, 1) + b"Total" + print_qr("INV-0042")
    >>> printer.send(command)
"""

from src.tgh.commands.table import (
    BarcodeSystem,
    HRIPosition,
    QRCellSize,
    QRCorrection,
    QRModel,
)
from src.tgh.commands.settings import SymbolSettings
from src.tgh.commands.text import set_text_size
from src.tgh.commands.qr import print_qr
from src.tgh.commands.barcode import print_barcode
from src.tgh.commands.raster import print_raster_image
from src.tgh.commands.logo import print_logo

__all__ = [
    # Options
    "BarcodeSystem",
    "HRIPosition",
    "QRCellSize",
    "QRCorrection",
    "QRModel",
    "SymbolSettings",
    # Encoders
    "set_text_size",
    "print_qr",
    "print_barcode",
    "print_raster_image",
    "print_logo",
]
