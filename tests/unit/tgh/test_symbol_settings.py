"""
Модульные тесты для src/tgh/commands/settings.py
"""

from unittest.mock import patch

import pytest

from src.tgh.commands.settings import SymbolSettings


class TestSymbolSettings:
    def test_all_fields_unset_by_default(self) -> None:
        s = SymbolSettings()
        assert s.model is None
        assert s.cell_size is None
        assert s.correction is None
        assert s.hri_position is None
        assert s.width is None

    def test_frozen(self) -> None:
        s = SymbolSettings()
        with pytest.raises(Exception):
            s.width = 3  # type: ignore[misc]

    def test_from_mapping_snake_case(self) -> None:
        s = SymbolSettings.from_mapping({"cell_size": 6, "correction": "c"})
        assert s == SymbolSettings(cell_size=6, correction="c")

    def test_from_mapping_camel_case_aliases(self) -> None:
        s = SymbolSettings.from_mapping({"cellSize": 5, "hriPos": 2, "hriFont": 1})
        assert s == SymbolSettings(cell_size=5, hri_position=2, hri_font=1)

    def test_from_mapping_unknown_key_warns(self) -> None:
        with patch("src.tgh.commands.settings.logger") as mock_logger:
            s = SymbolSettings.from_mapping({"colour": "red", "width": 4})
        assert s == SymbolSettings(width=4)
        mock_logger.warning.assert_called_once()

    @pytest.mark.parametrize("data", [None, {}])
    def test_from_mapping_empty(self, data: object) -> None:
        assert SymbolSettings.from_mapping(data) == SymbolSettings()  # type: ignore[arg-type]

    def test_coerce(self) -> None:
        s = SymbolSettings(width=4)
        assert SymbolSettings.coerce(s) is s
        assert SymbolSettings.coerce(None) == SymbolSettings()
        assert SymbolSettings.coerce({"width": 4}) == s


class TestWithDefaults:
    """Незаданные поля берутся из значений по умолчанию."""

    def test_fills_unset_fields(self) -> None:
        defaults = SymbolSettings(cell_size=3, correction="A", height=162)
        merged = SymbolSettings(cell_size=6).with_defaults(defaults)
        assert merged == SymbolSettings(cell_size=6, correction="A", height=162)

    def test_none_counts_as_unset(self) -> None:
        merged = SymbolSettings(cell_size=None, correction=None).with_defaults(
            SymbolSettings(cell_size=4, correction="B")
        )
        assert merged.cell_size == 4
        assert merged.correction == "B"

    def test_explicit_zero_is_kept(self) -> None:
        """Явный 0 не заменяется значением по умолчанию."""
        merged = SymbolSettings(hri_position=0, hri_font=0).with_defaults(
            SymbolSettings(hri_position=2, hri_font=1)
        )
        assert merged.hri_position == 0
        assert merged.hri_font == 0

    def test_none_defaults_are_not_applied(self) -> None:
        merged = SymbolSettings(width=4).with_defaults(SymbolSettings(width=None))
        assert merged.width == 4

    def test_no_changes_returns_same_object(self) -> None:
        s = SymbolSettings(cell_size=6)
        assert s.with_defaults(SymbolSettings()) is s
