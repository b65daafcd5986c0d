"""
Input normalization for the converter form fields.

Raw widget values arrive as text (or numbers, from marimo number widgets)
and are validated here before they reach the codecs. Invalid input maps
to None; the caller decides whether that means "ignore the edit".
"""

__all__ = [
    "parse_channel",
    "parse_packed",
    "is_blank",
    "normalize_hex_text",
]

import re
from typing import Optional, Union

RawValue = Union[str, int, float, None]

_DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_decimal(text: str) -> Optional[int]:
    """Parse base-10 integer text, trimming surrounding whitespace."""
    text = text.strip()
    if not _DECIMAL_PATTERN.fullmatch(text):
        return None
    return int(text, 10)


def is_blank(raw: RawValue) -> bool:
    """True for None or whitespace-only text."""
    return raw is None or (isinstance(raw, str) and not raw.strip())


def parse_channel(raw: RawValue) -> Optional[int]:
    """
    Parse a channel value in [0, 255].

    Out-of-range values are rejected, not clamped.

    Example:
        >>> parse_channel(" 42 ")
        42
        >>> parse_channel(12.0)
        12
        >>> parse_channel("300") is None
        True
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, float):
        if not raw.is_integer():
            return None
        value = int(raw)
    elif isinstance(raw, int):
        value = raw
    elif isinstance(raw, str):
        value = _parse_decimal(raw)
        if value is None:
            return None
    else:
        return None
    return value if 0 <= value <= 0xFF else None


def parse_packed(raw: RawValue) -> Optional[int]:
    """
    Parse packed-integer text, wrapping it to 32 bits.

    Signed values map onto the same bit pattern as their unsigned
    counterparts, so ``-1`` becomes ``0xFFFFFFFF``.

    Example:
        >>> parse_packed("-65536")
        4294901760
        >>> parse_packed("12abc") is None
        True
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw & 0xFFFFFFFF
    if isinstance(raw, float):
        return int(raw) & 0xFFFFFFFF if raw.is_integer() else None
    if not isinstance(raw, str):
        return None
    value = _parse_decimal(raw)
    return None if value is None else value & 0xFFFFFFFF


def normalize_hex_text(raw: RawValue) -> str:
    """Display form of hex field text: the typed text, uppercased."""
    if raw is None:
        return ""
    return str(raw).upper()
