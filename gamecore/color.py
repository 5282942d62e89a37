"""RGBA colours with HSL conversion and hex parsing."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _round(x: float) -> int:
    return math.floor(x + 0.5) if x >= 0 else -math.floor(-x + 0.5)


def _to_byte(x: float) -> int:
    return min(max(_round(x * 255.0), 0), 255)


@dataclass(frozen=True)
class Color:
    """A colour with components in the 0..1 range."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_rgba8(self) -> tuple[int, int, int, int]:
        """Components scaled to 0..255 and rounded."""
        return (_to_byte(self.r), _to_byte(self.g), _to_byte(self.b), _to_byte(self.a))

    def to_hex(self) -> str:
        """Six lower-case hex digits of the RGB part."""
        r, g, b, _ = self.to_rgba8()
        return f"{r:02x}{g:02x}{b:02x}"

    def to_hsla(self) -> tuple[float, float, float, float]:
        """Hue in degrees, saturation, lightness and alpha."""
        high = max(self.r, self.g, self.b)
        low = min(self.r, self.g, self.b)
        c = high - low
        hue = 0.0
        saturation = 0.0
        lightness = (high + low) * 0.5

        if abs(c) > 1e-6:
            if abs(high - self.r) <= 1e-6:
                hue = 60.0 * math.fmod((self.g - self.b) / c, 6.0)
            elif abs(high - self.g) <= 1e-6:
                hue = 60.0 * ((self.b - self.r) / c + 2.0)
            else:
                hue = 60.0 * ((self.r - self.g) / c + 4.0)
            saturation = c / (1.0 - abs(2.0 * lightness - 1.0))

        return (hue, saturation, lightness, self.a)

    def desaturate(self) -> Color:
        k = (self.r + self.g + self.b) / 3.0
        return Color(k, k, k, self.a)

    def darker(self, d: float) -> Color:
        return Color(
            max(self.r - d, 0.0), max(self.g - d, 0.0), max(self.b - d, 0.0), self.a
        )

    def invert(self) -> Color:
        return Color(1.0 - self.r, 1.0 - self.g, 1.0 - self.b, self.a)

    def scale(self, factor: Color) -> Color:
        """Component-wise product, clamped to 0..1."""

        def clamp(x: float) -> float:
            return max(min(x, 1.0), 0.0)

        return Color(
            clamp(self.r * factor.r),
            clamp(self.g * factor.g),
            clamp(self.b * factor.b),
            clamp(self.a * factor.a),
        )


BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0, 1.0)


def hsla(h: float, s: float, l: float, a: float) -> Color:
    """Colour from hue in degrees, saturation, lightness and alpha."""
    h = math.fmod(h, 360.0)
    c = (1.0 - abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - abs(math.fmod(h / 60.0, 2.0) - 1.0))
    m = l - c / 2.0

    r = g = b = 0.0
    if 0.0 <= h < 60.0:
        r, g, b = c, x, 0.0
    elif 60.0 <= h < 120.0:
        r, g, b = x, c, 0.0
    elif 120.0 <= h < 180.0:
        r, g, b = 0.0, c, x
    elif 180.0 <= h < 240.0:
        r, g, b = 0.0, x, c
    elif 240.0 <= h < 300.0:
        r, g, b = x, 0.0, c
    elif 300.0 <= h < 360.0:
        r, g, b = c, 0.0, x

    return Color(r + m, g + m, b + m, a)


def _hex_digit(ch: str) -> int:
    if "0" <= ch <= "9" or "a" <= ch <= "f" or "A" <= ch <= "F":
        return int(ch, 16)
    return 0


def hexstr(text: str) -> Color:
    """Parse six hex digits; anything of another length gives opaque black."""
    if len(text) != 6:
        return Color(0.0, 0.0, 0.0, 1.0)
    r, g, b = (
        (_hex_digit(text[i]) * 16 + _hex_digit(text[i + 1])) / 255.0
        for i in (0, 2, 4)
    )
    return Color(r, g, b, 1.0)