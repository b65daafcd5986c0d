"""ARGB color value type."""

__all__ = ["ArgbColor", "CHANNELS"]

from dataclasses import dataclass, replace

CHANNELS = ("alpha", "red", "green", "blue")


@dataclass(frozen=True)
class ArgbColor:
    """Four 8-bit channels, alpha first."""

    alpha: int = 0
    red: int = 0
    green: int = 0
    blue: int = 0

    def with_channel(self, channel: str, value: int) -> "ArgbColor":
        """Return a copy with one channel replaced."""
        if channel not in CHANNELS:
            raise ValueError(f"Unknown channel: {channel!r}")
        return replace(self, **{channel: value})

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Channels in ARGB order."""
        return (self.alpha, self.red, self.green, self.blue)
