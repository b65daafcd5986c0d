"""Parse #AARRGGBB text."""

__all__ = ["from_hex", "HEX_PATTERN"]

import re
from typing import Optional

from .model import ArgbColor

# ASCII digits only; ``\d`` would also accept other Unicode digits.
HEX_PATTERN = re.compile(
    r"#?([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})"
)


def from_hex(text: str) -> Optional[ArgbColor]:
    """
    Parse an 8-digit ARGB hex string, with or without a leading ``#``.

    Returns None unless the whole string matches.

    Example:
        >>> from_hex("#8080ff80")
        ArgbColor(alpha=128, red=128, green=255, blue=128)
        >>> from_hex("80FF80") is None
        True
    """
    if not text:
        return None
    match = HEX_PATTERN.fullmatch(text)
    if match is None:
        return None
    alpha, red, green, blue = (int(group, 16) for group in match.groups())
    return ArgbColor(alpha=alpha, red=red, green=green, blue=blue)
