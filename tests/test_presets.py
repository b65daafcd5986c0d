from __future__ import annotations

import dataclasses

import pytest

from modules.color.argb.model import ArgbColor
from modules.color.argb.presets import PRESETS, Preset, find_preset


def test_presets_are_ordered() -> None:
    assert [preset.name for preset in PRESETS] == [
        "Red",
        "Green",
        "Blue",
        "Yellow",
        "Cyan",
        "Magenta",
        "White",
        "Black",
        "Grey",
        "Light Grey",
        "Dark Grey",
        "Transparent",
        "Semi-Transparent",
    ]


def test_only_transparency_presets_are_translucent() -> None:
    translucent = {p.name: p.color.alpha for p in PRESETS if p.color.alpha != 255}
    assert translucent == {"Transparent": 0, "Semi-Transparent": 128}


def test_presets_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        PRESETS[0].name = "Crimson"
    with pytest.raises(dataclasses.FrozenInstanceError):
        PRESETS[0].color.red = 1


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        (0, "Red"),
        (12, "Semi-Transparent"),
        ("cyan", "Cyan"),
        ("  LIGHT GREY ", "Light Grey"),
        ("semi-transparent", "Semi-Transparent"),
    ],
)
def test_find_preset(key, expected: str) -> None:
    preset = find_preset(key)
    assert isinstance(preset, Preset)
    assert preset.name == expected


@pytest.mark.parametrize("key", [13, -1, "Crimson", "", None, True])
def test_find_preset_unknown(key) -> None:
    assert find_preset(key) is None


def test_grey_levels() -> None:
    assert find_preset("Grey").color == ArgbColor(255, 128, 128, 128)
    assert find_preset("Light Grey").color == ArgbColor(255, 192, 192, 192)
    assert find_preset("Dark Grey").color == ArgbColor(255, 64, 64, 64)
