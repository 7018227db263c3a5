"""
Модульные тесты для src/tgh/commands/logo.py
"""

import pytest

from src.tgh.commands.logo import print_logo


class TestPrintLogo:
    def test_defaults(self) -> None:
        assert print_logo() == b"\x1d\x70\x00\x00"

    @pytest.mark.parametrize("number,mode", [(1, 0), (2, 3), (255, 255)])
    def test_parameters_passed_through(self, number: int, mode: int) -> None:
        assert print_logo(number, mode) == b"\x1d\x70" + bytes([number, mode])

    def test_returns_only_own_bytes(self) -> None:
        """Две последовательные команды не накапливают данные."""
        print_logo(1)
        assert print_logo(1) == b"\x1d\x70\x01\x00"
