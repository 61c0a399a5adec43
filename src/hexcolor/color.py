# -*- test-case-name: hexcolor.test.test_color -*-
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """
    A color with red, green, blue and alpha channels, each normally in the
    range 0.0 to 1.0.

    Channels are not clamped or validated on construction; a color taken from
    an extended-range color space may have components outside of 0.0-1.0, and
    it is up to consumers such as L{hexcolor.codec.toHexString} to reject
    those.
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def channels(self, includeAlpha: bool = True) -> tuple[float, ...]:
        """
        The channels of this color in RGBA order, or RGB order if
        C{includeAlpha} is false.
        """
        if includeAlpha:
            return (self.red, self.green, self.blue, self.alpha)
        return (self.red, self.green, self.blue)


clear = Color(0.0, 0.0, 0.0, 0.0)
