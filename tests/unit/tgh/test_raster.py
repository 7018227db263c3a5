"""
Модульные тесты для src/tgh/commands/raster.py
"""

import pytest

from src.tgh.commands.raster import (
    TRANSPARENT_PIXEL,
    is_dark,
    pack_raster,
    padded_width,
    print_raster_image,
    raster_header,
    sample_pixel,
)
from src.tgh.exceptions import OutOfRangeError

BLACK = bytes([0, 0, 0, 255])
WHITE = bytes([255, 255, 255, 255])
CLEAR = bytes([0, 0, 0, 0])
HEAD = b"\x1d\x76\x30\x30"


class TestIsDark:
    @pytest.mark.parametrize(
        "pixel,expected",
        [
            ((0, 0, 0, 255), True),
            ((255, 255, 255, 255), False),
            ((0, 0, 0, 0), False),
            ((0, 0, 0, 126), False),
            ((0, 0, 0, 127), True),
            ((255, 0, 0, 255), True),  # luminance 54
            ((0, 255, 0, 255), False),  # luminance 182
            ((0, 0, 255, 255), True),  # luminance 18
            ((200, 200, 200, 255), False),
            ((50, 50, 50, 255), True),
        ],
    )
    def test_threshold(self, pixel: tuple, expected: bool) -> None:
        assert is_dark(pixel) is expected


class TestPacking:
    def test_padded_width(self) -> None:
        assert padded_width(8) == 8
        assert padded_width(16) == 16
        assert padded_width(1) == 9
        assert padded_width(9) == 17

    def test_sample_outside_width_is_transparent(self) -> None:
        assert sample_pixel(BLACK, 1, 0, 1) == TRANSPARENT_PIXEL
        assert sample_pixel(BLACK, 1, 0, 0) == (0, 0, 0, 255)

    def test_msb_is_leftmost_pixel(self) -> None:
        assert pack_raster(8, 1, BLACK + WHITE * 7) == b"\x80"
        assert pack_raster(8, 1, WHITE * 7 + BLACK) == b"\x01"

    def test_rows_top_to_bottom(self) -> None:
        assert pack_raster(8, 2, BLACK * 8 + WHITE * 8) == b"\xff\x00"

    def test_bytes_per_row(self) -> None:
        """ceil(width / 8) байт на строку."""
        assert len(pack_raster(9, 3, BLACK * 27)) == 6
        assert len(pack_raster(16, 1, BLACK * 16)) == 2

    def test_header_fields(self) -> None:
        assert raster_header(8, 1) == HEAD + b"\x01\x00\x01\x00"
        assert raster_header(9, 1) == HEAD + b"\x02\x00\x01\x00"
        assert raster_header(16, 300) == HEAD + b"\x02\x00\x2c\x01"


class TestPrintRasterImage:
    def test_black_8x1(self) -> None:
        assert print_raster_image(8, 1, BLACK * 8) == HEAD + b"\x01\x00\x01\x00\xff"

    def test_transparent_8x1(self) -> None:
        assert print_raster_image(8, 1, CLEAR * 8) == HEAD + b"\x01\x00\x01\x00\x00"

    def test_black_9x1_padding(self) -> None:
        """Ширина 9: два байта данных, поле ширины 2, хвост прозрачный."""
        cmd = print_raster_image(9, 1, BLACK * 9)
        assert cmd == HEAD + b"\x02\x00\x01\x00\xff\x80"

    def test_single_pixel(self) -> None:
        assert print_raster_image(1, 1, BLACK) == HEAD + b"\x01\x00\x01\x00\x80"

    def test_data_length(self) -> None:
        cmd = print_raster_image(20, 5, WHITE * 100)
        assert len(cmd) == 8 + 3 * 5

    @pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-8, 1)])
    def test_non_positive_size(self, width: int, height: int) -> None:
        with pytest.raises(OutOfRangeError):
            print_raster_image(width, height, b"")

    def test_pixel_length_mismatch(self) -> None:
        with pytest.raises(ValueError, match="width\\*height\\*4"):
            print_raster_image(8, 1, BLACK * 7)

    def test_idempotent(self) -> None:
        pixels = (BLACK + WHITE) * 12
        assert print_raster_image(12, 2, pixels) == print_raster_image(12, 2, pixels)
