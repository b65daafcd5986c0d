"""CSS rgba() descriptor for an ARGB color."""

__all__ = ["to_css_rgba"]

from .model import ArgbColor


def to_css_rgba(color: ArgbColor) -> str:
    """
    Format color as a CSS ``rgba()`` value.

    Alpha is alpha/255 rounded to 4 decimal places, so 128 gives 0.502.

    Example:
        >>> to_css_rgba(ArgbColor(0, 255, 0, 0))
        'rgba(255, 0, 0, 0)'
        >>> to_css_rgba(ArgbColor(255, 0, 0, 0))
        'rgba(0, 0, 0, 1)'
    """
    alpha = round((color.alpha & 0xFF) / 255, 4)
    return (
        f"rgba({color.red & 0xFF}, {color.green & 0xFF}, {color.blue & 0xFF}, "
        f"{alpha:g})"
    )
