"""Format an ARGB color as #AARRGGBB."""

__all__ = ["to_hex"]

from .model import ArgbColor


def to_hex(color: ArgbColor) -> str:
    """
    Format color as ``#AARRGGBB`` with uppercase digits.

    Example:
        >>> to_hex(ArgbColor(128, 128, 255, 128))
        '#8080FF80'
    """
    return "#" + "".join(f"{channel & 0xFF:02X}" for channel in color.as_tuple())
