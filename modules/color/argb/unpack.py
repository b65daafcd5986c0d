"""Unpack a 32-bit integer into ARGB channels."""

__all__ = ["unpack"]

from .model import ArgbColor


def unpack(value: int) -> ArgbColor:
    """
    Split a 32-bit integer into ARGB channels.

    The value is reduced modulo 2**32 first, so signed (negative) and
    oversized integers wrap like a 32-bit register.

    Example:
        >>> unpack(0x8080FF80)
        ArgbColor(alpha=128, red=128, green=255, blue=128)
        >>> unpack(-1)
        ArgbColor(alpha=255, red=255, green=255, blue=255)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    value &= 0xFFFFFFFF
    return ArgbColor(
        alpha=(value >> 24) & 0xFF,
        red=(value >> 16) & 0xFF,
        green=(value >> 8) & 0xFF,
        blue=value & 0xFF,
    )
