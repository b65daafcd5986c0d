"""
Named preset colors.

The table is fixed and ordered; presets are immutable and applied verbatim.
"""

__all__ = ["Preset", "PRESETS", "find_preset"]

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .model import ArgbColor


@dataclass(frozen=True)
class Preset:
    """A named, immutable color."""

    name: str
    color: ArgbColor


PRESETS: Tuple[Preset, ...] = (
    Preset("Red", ArgbColor(255, 255, 0, 0)),
    Preset("Green", ArgbColor(255, 0, 255, 0)),
    Preset("Blue", ArgbColor(255, 0, 0, 255)),
    Preset("Yellow", ArgbColor(255, 255, 255, 0)),
    Preset("Cyan", ArgbColor(255, 0, 255, 255)),
    Preset("Magenta", ArgbColor(255, 255, 0, 255)),
    Preset("White", ArgbColor(255, 255, 255, 255)),
    Preset("Black", ArgbColor(255, 0, 0, 0)),
    Preset("Grey", ArgbColor(255, 128, 128, 128)),
    Preset("Light Grey", ArgbColor(255, 192, 192, 192)),
    Preset("Dark Grey", ArgbColor(255, 64, 64, 64)),
    Preset("Transparent", ArgbColor(0, 0, 0, 0)),
    Preset("Semi-Transparent", ArgbColor(128, 0, 0, 0)),
)


def find_preset(key: Union[int, str, None]) -> Optional[Preset]:
    """
    Look up a preset by index or case-insensitive name.

    Example:
        >>> find_preset("light grey").color
        ArgbColor(alpha=255, red=192, green=192, blue=192)
        >>> find_preset(99) is None
        True
    """
    if key is None or isinstance(key, bool):
        return None
    if isinstance(key, int):
        return PRESETS[key] if 0 <= key < len(PRESETS) else None
    wanted = key.strip().casefold()
    for preset in PRESETS:
        if preset.name.casefold() == wanted:
            return preset
    return None
