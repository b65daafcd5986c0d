"""Channel field edits."""

__all__ = ["set_channel_and_sync"]

from loguru import logger

from ..model import CHANNELS
from ..normalize import RawValue, parse_channel
from .state import FormState, sync


def set_channel_and_sync(state: FormState, channel: str, raw: RawValue) -> FormState:
    """
    Set one channel from raw widget input and re-derive the other fields.

    Unknown channels and values outside [0, 255] leave the state unchanged.
    """
    if channel not in CHANNELS:
        logger.debug(f"Ignoring edit of unknown channel {channel!r}")
        return state
    value = parse_channel(raw)
    if value is None:
        logger.debug(f"Ignoring invalid {channel} value {raw!r}")
        return state
    return sync(state.color.with_channel(channel, value), state.signed)
