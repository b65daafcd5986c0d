"""Preset selection."""

__all__ = ["apply_preset"]

from typing import Union

from loguru import logger

from ..presets import Preset, find_preset
from .state import FormState, sync


def apply_preset(state: FormState, preset: Union[Preset, int, str]) -> FormState:
    """Replace the color with a preset, given as a Preset, index or name."""
    if not isinstance(preset, Preset):
        found = find_preset(preset)
        if found is None:
            logger.debug(f"Ignoring unknown preset {preset!r}")
            return state
        preset = found
    logger.debug(f"Applying preset {preset.name}")
    return sync(preset.color, state.signed)
