# -*- test-case-name: hexcolor.test.test_codec -*-
"""
Conversion between hexadecimal color text (C{#RGB}, C{#RGBA}, C{#RRGGBB} and
C{#RRGGBBAA}) and L{Color} values.

Each conversion that can fail comes in two flavors: a strict one, which
returns a L{HexColorError} describing what went wrong, and a lenient one,
which substitutes a default instead.
"""

from __future__ import annotations

from string import hexdigits

from twisted.logger import Logger

from .color import Color, clear
from .errors import HexColorError

log = Logger()

_hexDigits = frozenset(hexdigits)


def fromHex3(hex3: int, alpha: float = 1.0) -> Color:
    """
    The shorthand three-digit hexadecimal representation of a color; C{#RGB}
    is equivalent to C{#RRGGBB}.

    @param hex3: Three-digit hexadecimal value.
    @param alpha: 0.0 - 1.0.
    """
    divisor = 15.0
    red = ((hex3 & 0xF00) >> 8) / divisor
    green = ((hex3 & 0x0F0) >> 4) / divisor
    blue = (hex3 & 0x00F) / divisor
    return Color(red, green, blue, alpha)


def fromHex4(hex4: int) -> Color:
    """
    The shorthand four-digit hexadecimal representation of a color with
    alpha; C{#RGBA} is equivalent to C{#RRGGBBAA}.
    """
    divisor = 15.0
    red = ((hex4 & 0xF000) >> 12) / divisor
    green = ((hex4 & 0x0F00) >> 8) / divisor
    blue = ((hex4 & 0x00F0) >> 4) / divisor
    alpha = (hex4 & 0x000F) / divisor
    return Color(red, green, blue, alpha)


def fromHex6(hex6: int, alpha: float = 1.0) -> Color:
    """
    The six-digit hexadecimal representation of a color, C{#RRGGBB}.
    """
    divisor = 255.0
    red = ((hex6 & 0xFF0000) >> 16) / divisor
    green = ((hex6 & 0x00FF00) >> 8) / divisor
    blue = (hex6 & 0x0000FF) / divisor
    return Color(red, green, blue, alpha)


def fromHex8(hex8: int) -> Color:
    """
    The eight-digit hexadecimal representation of a color with alpha,
    C{#RRGGBBAA}.
    """
    divisor = 255.0
    red = ((hex8 & 0xFF00_0000) >> 24) / divisor
    green = ((hex8 & 0x00FF_0000) >> 16) / divisor
    blue = ((hex8 & 0x0000_FF00) >> 8) / divisor
    alpha = (hex8 & 0x0000_00FF) / divisor
    return Color(red, green, blue, alpha)


def fromString(rgba: str) -> Color | HexColorError:
    """
    Parse a color from its C{#RGB}, C{#RGBA}, C{#RRGGBB} or C{#RRGGBBAA}
    string representation.

    @return: the parsed L{Color}, or L{HexColorError.MissingHashPrefix},
        L{HexColorError.UnableToScanHex} or L{HexColorError.MismatchedLength}
        if C{rgba} is malformed.  The digits are checked before their count,
        so C{"#GG0000"} is a scanning error, not a length error.
    """
    if not rgba.startswith("#"):
        return HexColorError.MissingHashPrefix

    hexString = rgba[1:]
    # int(x, 16) alone would also take "0x", "_", whitespace and signs
    if not hexString or not _hexDigits.issuperset(hexString):
        return HexColorError.UnableToScanHex
    hexValue = int(hexString, 16)

    digitCount = len(hexString)
    if digitCount == 3:
        return fromHex3(hexValue)
    elif digitCount == 4:
        return fromHex4(hexValue)
    elif digitCount == 6:
        return fromHex6(hexValue)
    elif digitCount == 8:
        return fromHex8(hexValue)
    else:
        return HexColorError.MismatchedLength


def fromStringOrDefault(rgba: str, defaultColor: Color = clear) -> Color:
    """
    Like L{fromString}, but return C{defaultColor} rather than an error if
    C{rgba} cannot be parsed.
    """
    result = fromString(rgba)
    if isinstance(result, HexColorError):
        log.debug(
            "could not parse {rgba!r} ({error.name}), using {defaultColor}",
            rgba=rgba,
            error=result,
            defaultColor=defaultColor,
        )
        return defaultColor
    return result


def toHexString(
    color: Color, includeAlpha: bool = True
) -> str | HexColorError:
    """
    Hex string of a L{Color}, C{#RRGGBBAA} or, if C{includeAlpha} is false,
    C{#RRGGBB}.

    Each channel is scaled to 0-255 and truncated, and the digits are always
    uppercase.

    @return: the hex string, or L{HexColorError.ChannelOutOfRange} if any
        channel being written is outside of 0.0-1.0 (or is NaN).
    """
    channels = color.channels(includeAlpha)
    if not all(0.0 <= channel <= 1.0 for channel in channels):
        return HexColorError.ChannelOutOfRange
    return "#" + "".join("%02X" % int(channel * 255) for channel in channels)


def toHexStringOrEmpty(color: Color, includeAlpha: bool = True) -> str:
    """
    Like L{toHexString}, but return an empty string rather than an error.
    """
    result = toHexString(color, includeAlpha)
    if isinstance(result, HexColorError):
        log.debug(
            "could not format {color} as hex ({error.name})",
            color=color,
            error=result,
        )
        return ""
    return result


def argbToRgba(argb: str) -> str | None:
    """
    Convert an C{#ARGB} or C{#AARRGGBB} string into C{#RGBA} or
    C{#RRGGBBAA}, by moving the alpha digits from the front to the back.

    This only rearranges characters; it does not check that they are
    hexadecimal digits.

    @return: the reordered string, or C{None} if C{argb} does not start with
        C{#} or does not have 4 or 8 characters after it.
    """
    if not argb.startswith("#"):
        return None

    hexString = argb[1:]
    if len(hexString) == 4:
        return f"#{hexString[1:]}{hexString[:1]}"
    elif len(hexString) == 8:
        return f"#{hexString[2:]}{hexString[:2]}"
    else:
        return None
