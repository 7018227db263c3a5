"""
RU: Загрузка изображений (Pillow) и растеризация QR/штрихкодов для печати через GS v 0.
EN: Image source (Pillow) and bitmap rendering of QR codes and barcodes.

Provides:
- DecodedImage: width, height and RGBA-interleaved pixel bytes
- load_image / decode_image: file or PIL.Image -> DecodedImage
- render_qr / render_barcode: PIL images for printers without native symbols

Decoder errors (missing file, unknown format) are raised unchanged from
Pillow. Rendering errors from qrcode / python-barcode are wrapped in
SymbolRenderError.

Requirements: Pillow, qrcode, python-barcode
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Final, Optional, Union

import barcode as pybarcode
import qrcode
import qrcode.image.pil
from barcode.errors import BarcodeNotFoundError
from barcode.writer import ImageWriter
from PIL import Image
from qrcode.constants import (
    ERROR_CORRECT_H,
    ERROR_CORRECT_L,
    ERROR_CORRECT_M,
    ERROR_CORRECT_Q,
)

from src import get_logger
from src.tgh.commands.table import (
    QRCellSize,
    QRCorrection,
    resolve_cell_size,
    resolve_correction,
)
from src.tgh.exceptions import SymbolRenderError, UnknownOptionError

logger = get_logger(__name__)

__all__ = [
    "DecodedImage",
    "decode_image",
    "load_image",
    "render_qr",
    "render_barcode",
]

# TGH correction bytes 0x30..0x33 are L, M, Q, H
_QR_ERROR_CORRECTION: Final[Dict[QRCorrection, int]] = {
    QRCorrection.A: ERROR_CORRECT_L,
    QRCorrection.B: ERROR_CORRECT_M,
    QRCorrection.C: ERROR_CORRECT_Q,
    QRCorrection.D: ERROR_CORRECT_H,
}

QR_QUIET_ZONE: Final[int] = 4
BARCODE_QUIET_ZONE: Final[float] = 2.0


@dataclass(frozen=True)
class DecodedImage:
    """
    Decoded image as consumed by the raster encoder.

    Attributes:
        width: Width in pixels.
        height: Height in pixels.
        pixels: RGBA-interleaved bytes, ``width * height * 4`` long.
    """

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        expected = self.width * self.height * 4
        if len(self.pixels) != expected:
            raise ValueError(
                f"Pixel data length ({len(self.pixels)} bytes) does not match "
                f"{self.width}x{self.height} RGBA ({expected} bytes)"
            )


def decode_image(image: Image.Image) -> DecodedImage:
    """Convert a PIL image to RGBA and return its raw pixel bytes."""
    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    return DecodedImage(rgba.width, rgba.height, rgba.tobytes())


def load_image(path: Union[str, Path]) -> DecodedImage:
    """
    Open an image file with Pillow and decode it to RGBA.

    Raises:
        FileNotFoundError: If the file does not exist.
        PIL.UnidentifiedImageError: If the format is not recognized.
    """
    with Image.open(path) as img:
        decoded = decode_image(img)
    logger.debug("Loaded %s: %dx%d", path, decoded.width, decoded.height)
    return decoded


def render_qr(
    payload: str,
    cell_size: Optional[Union[QRCellSize, int, str]] = None,
    correction: Optional[Union[QRCorrection, str]] = None,
) -> Image.Image:
    """
    Render a QR code to a 1-bit-looking RGB image with the qrcode library.

    ``cell_size`` becomes the box size in pixels (one pixel per printer dot)
    and ``correction`` uses the same letters as the native QR command.

    Raises:
        UnknownOptionError: For cell sizes or levels not in the command table.
        SymbolRenderError: If qrcode fails to produce an image.
    """
    size = resolve_cell_size(cell_size)
    level = resolve_correction(correction)

    try:
        qr = qrcode.QRCode(
            version=None,
            error_correction=_QR_ERROR_CORRECTION[level],
            box_size=size.value,
            border=QR_QUIET_ZONE,
        )
        qr.add_data(payload)
        qr.make(fit=True)
        qr_img = qr.make_image(
            fill_color="black",
            back_color="white",
            image_factory=qrcode.image.pil.PilImage,
        )
    except Exception as e:
        logger.error("QR rendering failed: %s", e)
        raise SymbolRenderError("QR code rendering failed", command="render_qr") from e

    if hasattr(qr_img, "get_image"):
        qr_img = qr_img.get_image()
    if not isinstance(qr_img, Image.Image):
        raise SymbolRenderError(
            "QR code rendering did not produce a valid image", command="render_qr"
        )
    return qr_img.convert("RGB")


def render_barcode(
    data: str,
    symbology: str = "code128",
    module_height: float = 10.0,
    write_text: bool = False,
    options: Optional[Dict[str, Any]] = None,
) -> Image.Image:
    """
    Render a 1D barcode with python-barcode's ImageWriter.

    Args:
        data: Barcode content.
        symbology: python-barcode name ("code128", "ean13", "code39", ...).
        module_height: Bar height in millimetres.
        write_text: Print the HRI text under the bars.
        options: Extra ImageWriter options.

    Raises:
        UnknownOptionError: If python-barcode has no such symbology.
        SymbolRenderError: If the data is rejected or rendering fails.
    """
    try:
        bclass = pybarcode.get_barcode_class(symbology)
    except BarcodeNotFoundError:
        raise UnknownOptionError(
            "symbology",
            symbology,
            sorted(pybarcode.PROVIDED_BARCODES),
            command="render_barcode",
        ) from None

    try:
        img = bclass(data, writer=ImageWriter()).render(
            writer_options={
                "module_height": module_height,
                "quiet_zone": BARCODE_QUIET_ZONE,
                "write_text": write_text,
                **(options or {}),
            }
        )
    except Exception as e:
        logger.error("Barcode rendering failed [%s]: %s", symbology, e)
        raise SymbolRenderError(
            f"Barcode rendering failed: {symbology}", command="render_barcode"
        ) from e

    if not isinstance(img, Image.Image):
        raise SymbolRenderError(
            "Barcode output is not an Image.Image object", command="render_barcode"
        )
    return img.convert("RGB")
