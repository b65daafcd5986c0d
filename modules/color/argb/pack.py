"""Pack ARGB channels into a 32-bit integer."""

__all__ = ["pack"]

from .model import ArgbColor


def pack(color: ArgbColor) -> int:
    """
    Pack four channels into an unsigned 32-bit integer.

    Each channel is masked to one byte, so out-of-range values cannot
    leak into neighbouring channels.

    Example:
        >>> pack(ArgbColor(255, 255, 0, 0))
        4294901760
    """
    return (
        (color.alpha & 0xFF) << 24
        | (color.red & 0xFF) << 16
        | (color.green & 0xFF) << 8
        | (color.blue & 0xFF)
    )
