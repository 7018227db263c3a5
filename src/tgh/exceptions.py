"""
Исключения кодировщика команд TGH.

Иерархия типизированных исключений для всех операций построения команд.
Все ошибки локальные и синхронные: они означают ошибку вызывающего кода,
а не временный сбой, поэтому повторять операцию бессмысленно.

Example:
    >>> from src.tgh.exceptions import TGHError
    >>> try:
    ...     set_text_size(9, 1)
    ... except TGHError as e:
    ...     logger.error(f"Command build failed: {e}")

Иерархия:
    TGHError (базовое)
    ├── OutOfRangeError
    ├── UnknownOptionError
    ├── PayloadTooLargeError
    └── SymbolRenderError
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "TGHError",
    "OutOfRangeError",
    "UnknownOptionError",
    "PayloadTooLargeError",
    "SymbolRenderError",
]


class TGHError(Exception):
    """
    Базовое исключение для всех ошибок построения команд.

    Attributes:
        message: Человекочитаемое сообщение об ошибке
        command: Имя команды, при построении которой произошла ошибка
        context: Дополнительный контекст для отладки
    """

    def __init__(
        self,
        message: str,
        *,
        command: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.command = command
        self.context = context or {}

    def __str__(self) -> str:
        parts = [self.__class__.__name__, ": ", self.message]

        if self.command:
            parts.append(f" [command={self.command}]")

        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")

        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"command={self.command!r}, "
            f"context={self.context!r})"
        )


class OutOfRangeError(TGHError, ValueError):
    """
    Числовой параметр вне допустимого протоколом диапазона.

    Example:
        >>> set_text_size(8, 0)
        OutOfRangeError: height must be between 0 and 7, got 8 [command=set_text_size]
    """

    def __init__(
        self,
        name: str,
        value: Any,
        low: int,
        high: int,
        *,
        command: Optional[str] = None,
    ) -> None:
        super().__init__(
            f"{name} must be between {low} and {high}, got {value!r}",
            command=command,
        )
        self.name = name
        self.value = value
        self.low = low
        self.high = high


class UnknownOptionError(TGHError, LookupError):
    """
    Запрошенная опция отсутствует в таблице команд.

    Attributes:
        option: Имя опции (например, "correction")
        value: Запрошенное значение
        available: Допустимые значения
    """

    def __init__(
        self,
        option: str,
        value: Any,
        available: Optional[list] = None,
        *,
        command: Optional[str] = None,
    ) -> None:
        context: Dict[str, Any] = {}
        if available:
            context["available"] = ", ".join(str(v) for v in available)
        super().__init__(
            f"Unknown {option} {value!r}",
            command=command,
            context=context,
        )
        self.option = option
        self.value = value
        self.available = list(available or [])


class PayloadTooLargeError(TGHError, ValueError):
    """Данные не помещаются в поле длины команды."""

    def __init__(
        self,
        size: int,
        limit: int,
        *,
        command: Optional[str] = None,
    ) -> None:
        super().__init__(
            f"Payload of {size} bytes exceeds limit of {limit} bytes",
            command=command,
            context={"size": size, "limit": limit},
        )
        self.size = size
        self.limit = limit


class SymbolRenderError(TGHError):
    """Сбой растеризации QR-кода или штрихкода сторонней библиотекой."""
