"""Signed reading of a packed color."""

__all__ = ["to_signed"]


def to_signed(value: int) -> int:
    """
    Read a 32-bit value as two's-complement (Android ``@ColorInt`` style).

    Example:
        >>> to_signed(0xFFFF0000)
        -65536
    """
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value
