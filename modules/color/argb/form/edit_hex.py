"""Hex field edits."""

__all__ = ["set_hex_text"]

from dataclasses import replace

from loguru import logger

from ..from_hex import from_hex
from ..normalize import RawValue, normalize_hex_text
from .state import FormState, format_packed


def set_hex_text(state: FormState, raw: RawValue) -> FormState:
    """
    Apply text typed into the hex field.

    The field always shows what was typed. The color only changes once
    the text is a complete #AARRGGBB value.
    """
    text = normalize_hex_text(raw)
    color = from_hex(text)
    if color is None:
        logger.debug(f"Hex text {text!r} incomplete, color unchanged")
        return replace(state, hex_text=text)
    return replace(
        state,
        color=color,
        int_text=format_packed(color, state.signed),
        hex_text=text,
    )
