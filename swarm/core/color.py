"""
Normalized RGBA colors
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Tuple

from .vector import clamp

_HEX_RE = re.compile(r"#([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


class FormatError(ValueError):
    """Raised when a color string can not be parsed"""


@dataclass(frozen=True)
class Color:
    """RGBA color with every channel in [0, 1]"""
    r: float
    g: float
    b: float
    a: float = 1.0

    def with_alpha(self, a: float) -> Color:
        return replace(self, a=a)

    def gray_scale(self, t: float = 1.0) -> Color:
        """Blend each channel toward the channel average; t=1 is fully gray"""
        t = clamp(t, 0.0, 1.0)
        x = (self.r + self.g + self.b) / 3
        return Color(
            self.r + (x - self.r) * t,
            self.g + (x - self.g) * t,
            self.b + (x - self.b) * t,
            self.a,
        )

    def to_rgba(self) -> Tuple[int, int, int, int]:
        """0..255 integer tuple, the form Arcade draw calls accept"""
        return tuple(
            int(round(clamp(c, 0.0, 1.0) * 255))
            for c in (self.r, self.g, self.b, self.a)
        )

    @classmethod
    def hex(cls, hexcolor: str) -> Color:
        """Parse a `#RRGGBB` string"""
        matches = _HEX_RE.fullmatch(hexcolor)
        if matches is None:
            raise FormatError(f"Invalid hex color: {hexcolor!r}")
        r, g, b = (int(channel, 16) / 255 for channel in matches.groups())
        return cls(r, g, b)
