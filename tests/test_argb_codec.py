from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from modules.color.argb.model import CHANNELS, ArgbColor
from modules.color.argb.pack import pack
from modules.color.argb.to_signed import to_signed
from modules.color.argb.unpack import unpack

st_byte = st.integers(0, 255)
st_colors = st.builds(ArgbColor, st_byte, st_byte, st_byte, st_byte)


@given(st_colors)
def test_unpack_inverts_pack(color: ArgbColor) -> None:
    assert unpack(pack(color)) == color


@given(st.integers(0, 0xFFFFFFFF))
def test_pack_inverts_unpack(value: int) -> None:
    assert pack(unpack(value)) == value


@given(st_colors)
def test_pack_is_unsigned_32_bit(color: ArgbColor) -> None:
    assert 0 <= pack(color) <= 0xFFFFFFFF


def test_pack_opaque_red_stays_positive() -> None:
    assert pack(ArgbColor(255, 255, 0, 0)) == 0xFFFF0000


def test_pack_places_channels_in_argb_order() -> None:
    assert pack(ArgbColor(0x12, 0x34, 0x56, 0x78)) == 0x12345678


def test_pack_masks_out_of_range_channels() -> None:
    # 0x1FF would bleed into red without masking
    assert pack(ArgbColor(0x1FF, 0, 0, 0)) == 0xFF000000
    assert pack(ArgbColor(0, 0, 0, 256)) == 0


def test_unpack_wraps_signed_and_oversized_values() -> None:
    assert unpack(-1) == ArgbColor(255, 255, 255, 255)
    assert unpack(-65536) == ArgbColor(255, 255, 0, 0)
    assert unpack(0x1_0000_00FF) == ArgbColor(0, 0, 0, 255)


@pytest.mark.parametrize("value", [1.5, "12", None, True])
def test_unpack_rejects_non_integers(value) -> None:
    with pytest.raises(TypeError):
        unpack(value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, 0),
        (0x7FFFFFFF, 0x7FFFFFFF),
        (0x80000000, -0x80000000),
        (0xFFFF0000, -65536),
        (0xFFFFFFFF, -1),
    ],
)
def test_to_signed(value: int, expected: int) -> None:
    assert to_signed(value) == expected


@given(st.integers(0, 0xFFFFFFFF))
def test_signed_reading_unpacks_to_same_color(value: int) -> None:
    assert unpack(to_signed(value)) == unpack(value)


def test_with_channel_replaces_one_channel() -> None:
    color = ArgbColor(1, 2, 3, 4)
    assert color.with_channel("green", 200) == ArgbColor(1, 2, 200, 4)
    assert color == ArgbColor(1, 2, 3, 4)


def test_with_channel_rejects_unknown_channel() -> None:
    with pytest.raises(ValueError, match="Unknown channel"):
        ArgbColor().with_channel("cyan", 1)


def test_channels_are_in_argb_order() -> None:
    assert CHANNELS == ("alpha", "red", "green", "blue")
    assert ArgbColor(1, 2, 3, 4).as_tuple() == (1, 2, 3, 4)
