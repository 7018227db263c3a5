"""
Модульные тесты для src/tgh/commands/table.py
"""

import pytest

from src.tgh.commands.table import (
    QRCODE_CELLSIZE,
    QRCODE_CORRECTION,
    QRCODE_MODEL,
    QRCODE_PRINT,
    BarcodeSystem,
    QRCellSize,
    QRCorrection,
    QRModel,
    resolve_cell_size,
    resolve_correction,
    resolve_model,
)
from src.tgh.exceptions import UnknownOptionError


class TestCommandTable:
    """Проверить байтовые последовательности таблицы команд."""

    def test_model_entries(self) -> None:
        assert QRCODE_MODEL[QRModel.MODEL_1] == bytes.fromhex("1d286b040031413100")
        assert QRCODE_MODEL[QRModel.MODEL_2] == bytes.fromhex("1d286b040031413200")
        assert QRCODE_MODEL[QRModel.MICRO] == bytes.fromhex("1d286b040031413300")

    @pytest.mark.parametrize("size", list(QRCellSize))
    def test_cellsize_entries(self, size: QRCellSize) -> None:
        assert QRCODE_CELLSIZE[size] == bytes.fromhex("1d286b03003143") + bytes([size.value])

    def test_correction_entries(self) -> None:
        assert QRCODE_CORRECTION[QRCorrection.A] == bytes.fromhex("1d286b0300314530")
        assert QRCODE_CORRECTION[QRCorrection.B] == bytes.fromhex("1d286b0300314531")
        assert QRCODE_CORRECTION[QRCorrection.C] == bytes.fromhex("1d286b0300314532")
        assert QRCODE_CORRECTION[QRCorrection.D] == bytes.fromhex("1d286b0300314533")

    def test_correction_aliases(self) -> None:
        assert QRCorrection.L is QRCorrection.A
        assert QRCorrection.H is QRCorrection.D
        assert len(QRCODE_CORRECTION) == 4

    def test_print_command(self) -> None:
        assert QRCODE_PRINT == bytes.fromhex("1d286b0300315130")

    def test_barcode_type_codes(self) -> None:
        assert BarcodeSystem.UPCA.value == 65
        assert BarcodeSystem.CODE39.value == 69
        assert BarcodeSystem.CODE128.value == 73


class TestResolve:
    """Тестирование поиска опций по таблице."""

    @pytest.mark.parametrize("value", [None, 0])
    def test_model_default(self, value: object) -> None:
        assert resolve_model(value) is QRModel.MODEL_2  # type: ignore[arg-type]

    @pytest.mark.parametrize("value,expected", [(1, QRModel.MODEL_1), (3, QRModel.MICRO)])
    def test_model_numbers(self, value: int, expected: QRModel) -> None:
        assert resolve_model(value) is expected

    @pytest.mark.parametrize("value,expected", [("1", QRModel.MODEL_1), (" 3 ", QRModel.MICRO)])
    def test_model_numeric_strings(self, value: str, expected: QRModel) -> None:
        assert resolve_model(value) is expected

    @pytest.mark.parametrize("value", [2, "2", 4, 99, -1, "micro"])
    def test_model_other_values_select_model_2(self, value: object) -> None:
        """Всё, кроме 1 и 3, выбирает модель 2."""
        assert resolve_model(value) is QRModel.MODEL_2  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [None, 0, ""])
    def test_cell_size_default(self, value: object) -> None:
        assert resolve_cell_size(value) is QRCellSize.CELLSIZE_3  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [6, "6", " 6 ", QRCellSize.CELLSIZE_6])
    def test_cell_size_forms(self, value: object) -> None:
        assert resolve_cell_size(value) is QRCellSize.CELLSIZE_6  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [9, "big", -2])
    def test_cell_size_unknown(self, value: object) -> None:
        with pytest.raises(UnknownOptionError, match="Unknown cell size"):
            resolve_cell_size(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, QRCorrection.A),
            ("", QRCorrection.A),
            ("b", QRCorrection.B),
            ("C", QRCorrection.C),
            ("h", QRCorrection.D),
            (QRCorrection.Q, QRCorrection.C),
        ],
    )
    def test_correction_forms(self, value: object, expected: QRCorrection) -> None:
        assert resolve_correction(value) is expected  # type: ignore[arg-type]

    def test_correction_unknown_lists_available(self) -> None:
        with pytest.raises(UnknownOptionError) as exc_info:
            resolve_correction("Z")
        assert exc_info.value.command == "print_qr"
        assert "A" in exc_info.value.available
