"""
Convert colors to and from hexadecimal text.
"""

from .codec import (
    argbToRgba,
    fromHex3,
    fromHex4,
    fromHex6,
    fromHex8,
    fromString,
    fromStringOrDefault,
    toHexString,
    toHexStringOrEmpty,
)
from .color import Color, clear
from .errors import HexColorError

__all__ = [
    "Color",
    "HexColorError",
    "argbToRgba",
    "clear",
    "fromHex3",
    "fromHex4",
    "fromHex6",
    "fromHex8",
    "fromString",
    "fromStringOrDefault",
    "toHexString",
    "toHexStringOrEmpty",
]
