# -*- test-case-name: hexcolor.macos.test.test_nscolor -*-
"""
Hex string conversions for C{NSColor}.
"""

from __future__ import annotations

from AppKit import NSColor, NSColorSpace
from twisted.logger import Logger

from ..codec import fromString, toHexString
from ..color import Color
from ..errors import HexColorError

log = Logger()


def nsColorFromColor(color: Color) -> NSColor:
    """
    Convert a L{Color} to an sRGB C{NSColor}.
    """
    return NSColor.colorWithSRGBRed_green_blue_alpha_(
        color.red, color.green, color.blue, color.alpha
    )


def colorFromNSColor(nsColor: NSColor) -> Color | None:
    """
    Convert an C{NSColor} to a L{Color} by way of the extended sRGB color
    space, so that wide-gamut colors come back with components outside of
    0.0-1.0 rather than being silently clipped.

    @return: the color, or C{None} if C{nsColor} has no RGB representation
        (a pattern color, for example).
    """
    converted = nsColor.colorUsingColorSpace_(
        NSColorSpace.extendedSRGBColorSpace()
    )
    if converted is None:
        return None
    red, green, blue, alpha = converted.getRed_green_blue_alpha_(
        None, None, None, None
    )
    return Color(red, green, blue, alpha)


def nsColorFromHexStringOrError(rgba: str) -> NSColor | HexColorError:
    """
    Parse an C{NSColor} from C{#RGB}, C{#RGBA}, C{#RRGGBB} or C{#RRGGBBAA}.
    """
    result = fromString(rgba)
    if isinstance(result, HexColorError):
        return result
    return nsColorFromColor(result)


def nsColorFromHexString(
    rgba: str, defaultColor: NSColor | None = None
) -> NSColor:
    """
    Parse an C{NSColor} from hex text, falling back to C{defaultColor} (or
    C{NSColor.clearColor()} if none is given) if it is malformed.
    """
    result = nsColorFromHexStringOrError(rgba)
    if isinstance(result, HexColorError):
        log.debug(
            "could not parse {rgba!r} ({error.name})", rgba=rgba, error=result
        )
        return NSColor.clearColor() if defaultColor is None else defaultColor
    return result


def hexStringFromNSColor(
    nsColor: NSColor, includeAlpha: bool = True
) -> str | HexColorError:
    """
    Hex string of an C{NSColor}.

    @return: the string, or L{HexColorError.ChannelOutOfRange} if the color
        is outside of the sRGB gamut or is not an RGB color at all.
    """
    color = colorFromNSColor(nsColor)
    if color is None:
        return HexColorError.ChannelOutOfRange
    return toHexString(color, includeAlpha)


def hexStringFromNSColorOrEmpty(
    nsColor: NSColor, includeAlpha: bool = True
) -> str:
    result = hexStringFromNSColor(nsColor, includeAlpha)
    if isinstance(result, HexColorError):
        log.debug(
            "could not format {nsColor} as hex ({error.name})",
            nsColor=nsColor,
            error=result,
        )
        return ""
    return result
