"""
Command buffer for TGH command builds.

Each encoder creates its own CommandBuffer, appends the command groups in
protocol order and returns ``result()``. Nothing is shared between builds.
"""

from __future__ import annotations

__all__ = ["CommandBuffer"]


class CommandBuffer:
    """
    Append-only byte accumulator for a single command build.

    Example:
        >>> buf = CommandBuffer()
        >>> buf.append(b"\\x1d\\x21").append(b"\\x11")
        >>> buf.result()
        b'\\x1d!\\x11'
    """

    __slots__ = ("_data",)

    def __init__(self, initial: bytes = b"") -> None:
        self._data = bytearray(initial)

    def reset(self) -> None:
        """Discard current content."""
        self._data = bytearray()

    def append(self, data: bytes) -> "CommandBuffer":
        """Concatenate ``data`` onto the buffer, preserving order."""
        if data:
            self._data.extend(data)
        return self

    def result(self) -> bytes:
        """Return an immutable snapshot of the current content."""
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self.result()

    def __repr__(self) -> str:
        return f"CommandBuffer({self.result()!r})"
