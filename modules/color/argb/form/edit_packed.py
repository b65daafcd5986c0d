"""Integer field edits."""

__all__ = ["set_packed_text"]

from loguru import logger

from ..model import ArgbColor
from ..normalize import RawValue, is_blank, parse_packed
from ..unpack import unpack
from .state import FormState, sync


def set_packed_text(state: FormState, raw: RawValue) -> FormState:
    """
    Apply text typed into the integer field.

    Blank text resets every channel to zero. Text that is not a base-10
    integer is ignored. Anything else is wrapped to 32 bits and unpacked.
    """
    if is_blank(raw):
        logger.info("Integer field cleared, resetting color to #00000000")
        return sync(ArgbColor(0, 0, 0, 0), state.signed)
    value = parse_packed(raw)
    if value is None:
        logger.debug(f"Ignoring invalid integer {raw!r}")
        return state
    return sync(unpack(value), state.signed)
