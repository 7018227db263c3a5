"""
TGH printer facade.

TGHPrinter groups the command encoders behind one object, applies
configured symbol defaults and loads images from disk. It keeps no buffer
between calls: every method builds its own CommandBuffer and returns bytes,
so one instance can serve concurrent jobs.
"""

from __future__ import annotations

from functools import wraps
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar, Union

from PIL import Image

from src import default_config, get_logger, load_config
from src.tgh.commands.barcode import print_barcode
from src.tgh.commands.logo import print_logo
from src.tgh.commands.qr import print_qr
from src.tgh.commands.raster import print_raster_image
from src.tgh.commands.settings import BarcodeTypeLike, SymbolSettings
from src.tgh.commands.text import set_text_size
from src.tgh.exceptions import TGHError
from src.tgh.imaging import (
    DecodedImage,
    decode_image,
    load_image,
    render_barcode,
    render_qr,
)

logger = get_logger(__name__)

__all__ = ["TGHPrinter"]

SettingsLike = Optional[Union[SymbolSettings, Mapping[str, Any]]]

F = TypeVar("F", bound=Callable[..., bytes])


def _logged(func: F) -> F:
    """Log TGHError at ERROR level and re-raise it."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> bytes:
        try:
            return func(*args, **kwargs)
        except TGHError as e:
            logger.error("%s failed: %s", func.__name__, e)
            raise

    return wrapper  # type: ignore[return-value]


class TGHPrinter:
    """
    Command builder for a TGH thermal receipt printer.

    Args:
        config: Optional configuration mapping (see ``src.load_config``).
                Missing keys fall back to the protocol defaults.

    Examples:
        >>> printer = TGHPrinter()
        >>> job = printer.set_text_size(1, 1) + b"HELLO\\n"
        >>> job += printer.print_barcode("12345678", BarcodeSystem.EAN8)
        >>> job += printer.print_image("logo.png")
    """

    def __init__(self, config: Optional[Mapping[str, Any]] = None) -> None:
        merged = default_config()
        merged.update(config or {})
        self.config: Dict[str, Any] = merged
        self.defaults = SymbolSettings(
            model=merged.get("qr_model"),
            cell_size=merged.get("qr_cell_size"),
            correction=merged.get("qr_correction"),
            hri_position=merged.get("barcode_hri_position"),
            hri_font=merged.get("barcode_hri_font"),
            width=merged.get("barcode_width"),
            height=merged.get("barcode_height"),
        )

    @classmethod
    def from_config_file(cls, config_path: Optional[Path] = None) -> "TGHPrinter":
        """Create a printer from ``config.json`` (or the given path)."""
        return cls(load_config(config_path))

    def _settings(self, settings: SettingsLike) -> SymbolSettings:
        return SymbolSettings.coerce(settings).with_defaults(self.defaults)

    # ------------------------------------------------------------------ text

    @_logged
    def set_text_size(self, height: int, width: int) -> bytes:
        """Select character size; both factors 0-7."""
        return set_text_size(height, width)

    # -------------------------------------------------------------- symbols

    @_logged
    def print_qr(self, payload: Union[str, bytes], settings: SettingsLike = None) -> bytes:
        """Native QR code (GS ( k). Unset options use the configured defaults."""
        return print_qr(payload, self._settings(settings))

    @_logged
    def print_barcode(
        self,
        data: Union[str, bytes],
        barcode_type: BarcodeTypeLike,
        settings: SettingsLike = None,
    ) -> bytes:
        """Native barcode (GS k). Unset options use the configured defaults."""
        return print_barcode(data, barcode_type, self._settings(settings))

    @_logged
    def print_logo(self, number: int = 0, mode: int = 0) -> bytes:
        return print_logo(number, mode)

    # --------------------------------------------------------------- images

    @_logged
    def print_image_buffer(self, width: int, height: int, pixels: bytes) -> bytes:
        """Raster image from decoded RGBA pixels."""
        return print_raster_image(width, height, pixels)

    def print_decoded_image(self, image: Union[DecodedImage, Image.Image]) -> bytes:
        """Raster image from a DecodedImage or a PIL image."""
        if isinstance(image, Image.Image):
            image = decode_image(image)
        return self.print_image_buffer(image.width, image.height, image.pixels)

    def print_image(self, path: Union[str, Path]) -> bytes:
        """
        Load an image file and build its raster command.

        Decoder errors from Pillow propagate unchanged.
        """
        decoded = load_image(path)
        logger.info("Printing image %s (%dx%d)", path, decoded.width, decoded.height)
        return self.print_decoded_image(decoded)

    def print_qr_image(self, payload: str, settings: SettingsLike = None) -> bytes:
        """
        QR code rendered on the host and sent as a raster image.

        For firmware without GS ( k support. Uses ``cell_size`` and
        ``correction`` from the settings.
        """
        resolved = self._settings(settings)
        img = render_qr(payload, resolved.cell_size, resolved.correction)
        return self.print_decoded_image(img)

    def print_barcode_image(
        self,
        data: str,
        symbology: str = "code128",
        write_text: bool = False,
    ) -> bytes:
        """Barcode rendered on the host with python-barcode and sent as a raster image."""
        img = render_barcode(data, symbology, write_text=write_text)
        return self.print_decoded_image(img)
