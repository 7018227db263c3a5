# RU: Настройки символов (QR и штрихкоды) с значениями по умолчанию протокола TGH.
# EN: Symbol settings for QR and barcode commands, with TGH protocol defaults.

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, ClassVar, Dict, Mapping, Optional, Union

from src import get_logger
from src.tgh.commands.table import (
    BarcodeSystem,
    HRIPosition,
    QRCellSize,
    QRCorrection,
    QRModel,
)

logger = get_logger(__name__)

__all__ = [
    "SymbolSettings",
    "DEFAULT_HRI_POSITION",
    "DEFAULT_HRI_FONT",
    "DEFAULT_BARCODE_WIDTH",
    "DEFAULT_BARCODE_HEIGHT",
    "BarcodeTypeLike",
]

DEFAULT_HRI_POSITION = 0
DEFAULT_HRI_FONT = 0
DEFAULT_BARCODE_WIDTH = 3
DEFAULT_BARCODE_HEIGHT = 0xA2

BarcodeTypeLike = Union[BarcodeSystem, int]


@dataclass(frozen=True)
class SymbolSettings:
    """
    Optional configuration for QR and barcode commands.

    Every field is optional; ``None`` (or any falsy value) means
    "use the protocol default" when the command is built.

    QR fields:
        model: 1 or 3 (micro QR); anything else selects model 2.
        cell_size: Module size in dots. Default 3.
        correction: Error-correction letter. Default "A".

    Barcode fields:
        hri_position: 0-3 (none, above, below, both). Default 0.
        hri_font: Default 0.
        width: Module width 2-6. Default 3.
        height: Bar height 1-255 dots. Default 162 (0xA2).

    Example:
        >>> SymbolSettings(cell_size=6, correction="c")
        >>> SymbolSettings.from_mapping({"cellSize": 6, "hriPos": 2})
    """

    # camelCase keys used by JSON payloads and older callers
    _aliases: ClassVar[Dict[str, str]] = {
        "cellSize": "cell_size",
        "hriPos": "hri_position",
        "hriPosition": "hri_position",
        "hriFont": "hri_font",
    }

    model: Optional[Union[QRModel, int, str]] = None
    cell_size: Optional[Union[QRCellSize, int, str]] = None
    correction: Optional[Union[QRCorrection, str]] = None
    hri_position: Optional[Union[HRIPosition, int]] = None
    hri_font: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "SymbolSettings":
        """
        Build settings from a plain mapping (snake_case or camelCase keys).

        Unrecognized keys are ignored with a warning.
        """
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = cls._aliases.get(key, key)
            if name not in known:
                logger.warning("Ignoring unknown symbol setting %r", key)
                continue
            values[name] = value
        return cls(**values)

    @classmethod
    def coerce(
        cls, settings: Optional[Union["SymbolSettings", Mapping[str, Any]]]
    ) -> "SymbolSettings":
        """Accept SymbolSettings, a mapping, or None."""
        if settings is None:
            return cls()
        if isinstance(settings, SymbolSettings):
            return settings
        return cls.from_mapping(settings)

    def with_defaults(self, defaults: "SymbolSettings") -> "SymbolSettings":
        """
        Return a copy whose unset fields are taken from ``defaults``.

        Only ``None`` counts as unset here; an explicit 0 is kept.
        """
        changes = {
            f.name: getattr(defaults, f.name)
            for f in fields(self)
            if getattr(self, f.name) is None and getattr(defaults, f.name) is not None
        }
        return replace(self, **changes) if changes else self
