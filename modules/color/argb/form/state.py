"""
Converter form state.

A FormState holds the canonical color plus the text currently shown in the
integer and hex fields. Every committing edit ends in ``sync`` so the three
representations agree whenever an operation returns.
"""

__all__ = ["FormState", "sync", "initial_state", "with_signed"]

from dataclasses import dataclass
from typing import Optional

from ..config import CONFIG
from ..model import ArgbColor
from ..pack import pack
from ..to_css_rgba import to_css_rgba
from ..to_hex import to_hex
from ..to_signed import to_signed


@dataclass(frozen=True)
class FormState:
    """Canonical color and the text shown in the derived fields."""

    color: ArgbColor
    int_text: str
    hex_text: str
    signed: bool = False

    @property
    def packed(self) -> int:
        """Unsigned packed value."""
        return pack(self.color)

    @property
    def hex(self) -> str:
        """Canonical #AARRGGBB form (may differ from a half-typed hex_text)."""
        return to_hex(self.color)

    @property
    def css(self) -> str:
        return to_css_rgba(self.color)


def format_packed(color: ArgbColor, signed: bool = False) -> str:
    """Integer field text for color."""
    value = pack(color)
    return str(to_signed(value) if signed else value)


def sync(color: ArgbColor, signed: bool = False) -> FormState:
    """Re-derive both text fields from color."""
    return FormState(
        color=color,
        int_text=format_packed(color, signed),
        hex_text=to_hex(color),
        signed=signed,
    )


def initial_state(
    color: Optional[ArgbColor] = None,
    signed: Optional[bool] = None,
) -> FormState:
    """State shown on page load; defaults come from CONFIG."""
    if color is None:
        color = ArgbColor(**CONFIG["default_color"])
    if signed is None:
        signed = CONFIG["signed_integer_field"]
    return sync(color, signed)


def with_signed(state: FormState, signed: bool) -> FormState:
    """Switch the integer field between unsigned and signed display."""
    if state.signed == signed:
        return state
    return FormState(
        color=state.color,
        int_text=format_packed(state.color, signed),
        hex_text=state.hex_text,
        signed=signed,
    )
