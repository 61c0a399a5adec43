from __future__ import annotations

from enum import Enum


class HexColorError(Enum):
    """
    The ways that converting between hex text and a L{Color} can fail.

    The strict conversion functions in L{hexcolor.codec} return one of these
    rather than raising it, so callers can tell the failures apart with a
    simple identity check.
    """

    MissingHashPrefix = "MissingHashPrefix"
    """
    The text did not begin with C{#}.
    """

    UnableToScanHex = "UnableToScanHex"
    """
    The text after C{#} was not made up entirely of hexadecimal digits.
    """

    MismatchedLength = "MismatchedLength"
    """
    The number of digits after C{#} was not 3, 4, 6 or 8.
    """

    ChannelOutOfRange = "ChannelOutOfRange"
    """
    A channel was outside of 0.0-1.0 and so cannot be written as a byte;
    usually this means the color came from a wide-gamut color space.
    """

    @property
    def description(self) -> str:
        return _descriptions[self]


_descriptions = {
    HexColorError.MissingHashPrefix: "Invalid RGB string, missing '#' as prefix",
    HexColorError.UnableToScanHex: "Scan hex error",
    HexColorError.MismatchedLength: (
        "Invalid RGB string, number of characters after '#' should be "
        "either 3, 4, 6 or 8"
    ),
    HexColorError.ChannelOutOfRange: (
        "Unable to output hex string for a color with channels outside "
        "of 0.0-1.0"
    ),
}
