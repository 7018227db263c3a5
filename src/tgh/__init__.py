"""
tgh

Кодировщик команд термопринтера TGH (диалект ESC/POS).

Public API:
    - TGHPrinter: фасад с настраиваемыми значениями по умолчанию (class)
    - CommandBuffer: буфер одной сборки команды (class)
    - SymbolSettings: опции QR и штрихкодов (dataclass)
    - set_text_size, print_qr, print_barcode, print_raster_image, print_logo
    - load_image, decode_image, render_qr, render_barcode
    - TGHError и подклассы

Примеры:
    >>> from src.tgh import TGHPrinter, BarcodeSystem
    >>> printer = TGHPrinter()
    >>> cmd = printer.print_barcode("ABC-123", BarcodeSystem.CODE39)

Зависимости:
    Pillow, qrcode, python-barcode
"""

from src.tgh.buffer import CommandBuffer
from src.tgh.commands import (
    BarcodeSystem,
    HRIPosition,
    QRCellSize,
    QRCorrection,
    QRModel,
    SymbolSettings,
    print_barcode,
    print_logo,
    print_qr,
    print_raster_image,
    set_text_size,
)
from src.tgh.exceptions import (
    OutOfRangeError,
    PayloadTooLargeError,
    SymbolRenderError,
    TGHError,
    UnknownOptionError,
)
from src.tgh.imaging import (
    DecodedImage,
    decode_image,
    load_image,
    render_barcode,
    render_qr,
)
from src.tgh.printer import TGHPrinter

__all__ = [
    "TGHPrinter",
    "CommandBuffer",
    "SymbolSettings",
    "BarcodeSystem",
    "HRIPosition",
    "QRCellSize",
    "QRCorrection",
    "QRModel",
    "set_text_size",
    "print_qr",
    "print_barcode",
    "print_raster_image",
    "print_logo",
    "DecodedImage",
    "decode_image",
    "load_image",
    "render_qr",
    "render_barcode",
    "TGHError",
    "OutOfRangeError",
    "UnknownOptionError",
    "PayloadTooLargeError",
    "SymbolRenderError",
]
