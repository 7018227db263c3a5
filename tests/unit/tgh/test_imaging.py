"""
Модульные тесты для src/tgh/imaging.py
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from PIL import Image, UnidentifiedImageError

from src.tgh.exceptions import SymbolRenderError, UnknownOptionError
from src.tgh.imaging import (
    DecodedImage,
    decode_image,
    load_image,
    render_barcode,
    render_qr,
)


class TestDecodedImage:
    def test_valid(self) -> None:
        img = DecodedImage(2, 1, bytes(8))
        assert (img.width, img.height) == (2, 1)

    def test_length_mismatch(self) -> None:
        with pytest.raises(ValueError, match="does not match"):
            DecodedImage(2, 2, bytes(8))


class TestDecode:
    def test_rgb_is_converted_to_rgba(self) -> None:
        img = Image.new("RGB", (2, 1), (10, 20, 30))
        decoded = decode_image(img)
        assert decoded.pixels == bytes([10, 20, 30, 255]) * 2

    def test_rgba_keeps_alpha(self) -> None:
        img = Image.new("RGBA", (1, 1), (0, 0, 0, 0))
        assert decode_image(img).pixels == b"\x00\x00\x00\x00"

    def test_grayscale(self) -> None:
        img = Image.new("L", (3, 2), 0)
        decoded = decode_image(img)
        assert decoded.pixels == bytes([0, 0, 0, 255]) * 6


class TestLoadImage:
    def test_load_png(self, tmp_path: Path) -> None:
        path = tmp_path / "logo.png"
        Image.new("RGBA", (9, 4), (0, 0, 0, 255)).save(path)

        decoded = load_image(path)

        assert (decoded.width, decoded.height) == (9, 4)
        assert len(decoded.pixels) == 9 * 4 * 4

    def test_load_str_path(self, tmp_path: Path) -> None:
        path = tmp_path / "logo.bmp"
        Image.new("RGB", (8, 1), (255, 255, 255)).save(path)
        assert load_image(str(path)).width == 8

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_image(tmp_path / "missing.png")

    def test_not_an_image(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.png"
        path.write_bytes(b"definitely not an image")
        with pytest.raises(UnidentifiedImageError):
            load_image(path)


class TestRenderQR:
    def test_returns_square_rgb_image(self) -> None:
        img = render_qr("HELLO")
        assert isinstance(img, Image.Image)
        assert img.mode == "RGB"
        assert img.width == img.height
        assert img.width % 3 == 0

    def test_cell_size_scales_image(self) -> None:
        small = render_qr("HELLO", cell_size=2)
        large = render_qr("HELLO", cell_size=4)
        assert large.width == small.width * 2

    def test_has_dark_and_light_pixels(self) -> None:
        colors = {c for _, c in render_qr("HELLO").getcolors()}
        assert (0, 0, 0) in colors
        assert (255, 255, 255) in colors

    def test_unknown_cell_size(self) -> None:
        with pytest.raises(UnknownOptionError):
            render_qr("HELLO", cell_size=12)

    def test_unknown_correction(self) -> None:
        with pytest.raises(UnknownOptionError):
            render_qr("HELLO", correction="X")

    def test_library_failure_is_wrapped(self) -> None:
        with patch(
            "src.tgh.imaging.qrcode.QRCode", side_effect=RuntimeError("boom")
        ):
            with pytest.raises(SymbolRenderError, match="QR code rendering failed"):
                render_qr("HELLO")


class TestRenderBarcode:
    def test_code128(self) -> None:
        img = render_barcode("12345")
        assert isinstance(img, Image.Image)
        assert img.mode == "RGB"
        assert img.width > 0 and img.height > 0

    def test_ean13(self) -> None:
        assert isinstance(render_barcode("5901234123457", "ean13"), Image.Image)

    def test_unknown_symbology(self) -> None:
        with pytest.raises(UnknownOptionError) as exc_info:
            render_barcode("12345", "nosuchcode")
        assert "code128" in exc_info.value.available

    def test_invalid_data(self) -> None:
        with pytest.raises(SymbolRenderError, match="ean13"):
            render_barcode("abc", "ean13")
