"""
Form state from URL query parameters.

Supported parameters, in precedence order:
- preset: preset name or index (e.g. ``?preset=cyan``)
- hex:    8 hex digits, ``#`` optional (e.g. ``?hex=8080FF80``)
- int:    packed integer, signed or unsigned (e.g. ``?int=-65536``)
- signed: show the integer field as signed (``true``/``1``/``yes``/``on``)
"""

__all__ = ["parse_url_state", "to_query_params", "share_query_string"]

from typing import Any, Dict, Mapping, Optional

from loguru import logger

from modules.html.urls import build_query_string

from ..from_hex import from_hex
from ..model import ArgbColor
from ..normalize import parse_packed
from ..presets import find_preset
from ..unpack import unpack
from .state import FormState, initial_state


def _param_value(url_params: Mapping[str, Any], key: str) -> Optional[str]:
    """Single string value of a parameter; repeated keys use the last value."""
    value = url_params.get(key)
    if isinstance(value, (list, tuple)):
        value = value[-1] if value else None
    return value if isinstance(value, str) else None


def _parse_bool(value: str) -> bool:
    """Parse boolean from URL parameter string."""
    return value.strip().lower() in ("true", "1", "yes", "on")


def _preset_color(value: str) -> Optional[ArgbColor]:
    value = value.strip()
    key = int(value) if value.isascii() and value.isdigit() else value
    preset = find_preset(key)
    return preset.color if preset else None


def _int_color(value: str) -> Optional[ArgbColor]:
    packed = parse_packed(value)
    return unpack(packed) if packed is not None else None


_COLOR_SOURCES = (
    ("preset", _preset_color),
    ("hex", from_hex),
    ("int", _int_color),
)


def parse_url_state(url_params: Mapping[str, Any]) -> FormState:
    """
    Build the initial form state from URL query parameters.

    Invalid values are skipped in favour of the next source; with no
    usable source the configured default color is used. A repeated
    parameter arrives as a list, and its last value wins.
    """
    signed = None
    signed_value = _param_value(url_params, "signed")
    if signed_value is not None:
        signed = _parse_bool(signed_value)

    for key, parse in _COLOR_SOURCES:
        value = _param_value(url_params, key)
        if not value:
            continue
        color = parse(value)
        if color is not None:
            logger.info(f"Initial color from URL parameter {key}={value!r}")
            return initial_state(color, signed)
        logger.warning(f"Ignoring invalid URL parameter {key}={value!r}")

    return initial_state(signed=signed)


def to_query_params(state: FormState) -> Dict[str, str]:
    """Query parameters reproducing the current color."""
    params = {"hex": state.hex.lstrip("#")}
    if state.signed:
        params["signed"] = "true"
    return params


def share_query_string(state: FormState) -> str:
    """
    URL query string (with leading ``?``) for the current color.

    Example:
        >>> share_query_string(initial_state(ArgbColor(255, 0, 0, 255), False))
        '?hex=FF0000FF'
    """
    return build_query_string(to_query_params(state))
