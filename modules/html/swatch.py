"""
Checkerboard color swatches - no external dependencies.

The checkerboard shows through translucent colors, so alpha is visible.
"""

__all__ = [
    "checkerboard_style",
    "swatch",
    "preview_swatch",
    "preset_swatch",
]

from modules.color.argb.config import CONFIG
from modules.color.argb.model import ArgbColor
from modules.color.argb.to_css_rgba import to_css_rgba


def checkerboard_style(
    size_px: int,
    tile_px: int,
    checker_color: str = CONFIG["checker_color"],
) -> str:
    """
    Inline CSS for a square checkerboard background with a black border.

    Args:
        size_px: Width and height of the square
        tile_px: Size of one checker tile pair
        checker_color: Color of the dark tiles

    Returns:
        CSS declarations for a ``style`` attribute

    Example:
        >>> "background-size:20px 20px" in checkerboard_style(100, 20)
        True
    """
    gradient = (
        f"linear-gradient(45deg, {checker_color} 25%, transparent 25%, "
        f"transparent 75%, {checker_color} 75%, {checker_color})"
    )
    return (
        f"background:{gradient},{gradient};"
        f"background-size:{tile_px}px {tile_px}px;"
        f"background-position:0 0, {tile_px // 2}px {tile_px // 2}px;"
        f"width:{size_px}px;height:{size_px}px;"
        "border:1px solid black;"
    )


def swatch(
    color: ArgbColor,
    size_px: int,
    tile_px: int,
    extra_style: str = "",
) -> str:
    """
    Generate a checkerboard square overlaid with color.

    Args:
        color: Color to overlay
        size_px: Width and height of the square
        tile_px: Size of one checker tile pair
        extra_style: Additional CSS for the outer element

    Returns:
        HTML string
    """
    outer = checkerboard_style(size_px, tile_px) + extra_style
    inner = f"width:100%;height:100%;background-color:{to_css_rgba(color)};"
    return f'<div style="{outer}"><div style="{inner}"></div></div>'


def preview_swatch(color: ArgbColor) -> str:
    """Large centered swatch for the current color."""
    square = swatch(color, CONFIG["preview_size_px"], CONFIG["preview_tile_px"])
    return (
        '<div style="display:flex;justify-content:center;'
        f'align-items:center;height:150px;">{square}</div>'
    )


def preset_swatch(color: ArgbColor) -> str:
    """Small inline swatch for a preset button."""
    return swatch(
        color,
        CONFIG["preset_size_px"],
        CONFIG["preset_tile_px"],
        extra_style="display:inline-block;margin-right:10px;vertical-align:middle;",
    )
