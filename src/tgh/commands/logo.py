"""
Stored logo command for TGH printers.

Command: GS p n m
Hex: 1D 70 n m
n: logo number in printer flash, m: print mode
"""

from src.tgh.buffer import CommandBuffer
from src.tgh.commands.table import GS_PRINT_LOGO

__all__ = ["print_logo"]


def print_logo(number: int = 0, mode: int = 0) -> bytes:
    """
    Print a logo previously stored in the printer.

    Parameters are passed through unchecked; valid values depend on the
    logos loaded into the printer.

    Example:
        >>> print_logo(1)
        b'\\x1dp\\x01\\x00'
    """
    buf = CommandBuffer()
    buf.append(GS_PRINT_LOGO)
    buf.append(bytes([number, mode]))
    return buf.result()
