"""Integer TRGB colours and the arithmetic used by the shading model."""

from __future__ import annotations

from dataclasses import dataclass

_CHANNEL_MAX = 255


@dataclass(frozen=True)
class Color:
    """A colour with integer red, green, blue and transparency channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    t: int = 0

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b, self.t + other.t)

    def limited(self) -> Color:
        """Clamp every channel above 255 down to 255."""
        return Color(
            min(self.r, _CHANNEL_MAX),
            min(self.g, _CHANNEL_MAX),
            min(self.b, _CHANNEL_MAX),
            min(self.t, _CHANNEL_MAX),
        )

    def scaled(self, ratio: float) -> Color:
        """Multiply every channel by ``ratio``, truncating towards zero."""
        return Color(
            int(self.r * ratio),
            int(self.g * ratio),
            int(self.b * ratio),
            int(self.t * ratio),
        )

    def mult(self, other: Color) -> Color:
        """Filter this colour through another, channel by channel."""

        def channel(a: int, b: int) -> int:
            return int((a / 255.0 * b / 255.0) * 255.0)

        return Color(
            channel(self.r, other.r),
            channel(self.g, other.g),
            channel(self.b, other.b),
            channel(self.t, other.t),
        )

    def to_trgb(self, ratio: float = 1.0) -> int:
        """Pack the scaled colour into a 32-bit 0xTTRRGGBB pixel value."""
        c = self.scaled(ratio)
        return (c.t << 24 | c.r << 16 | c.g << 8 | c.b) & 0xFFFFFFFF