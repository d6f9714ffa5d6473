from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, Components
from .base import ColorModel

WhitePoint = Components

# CIE chromaticities (x, y) turned into XYZ with Y = 1
D50: WhitePoint = (0.3457 / 0.3585, 1.0, (1.0 - 0.3457 - 0.3585) / 0.3585)
D65: WhitePoint = (0.3127 / 0.3290, 1.0, (1.0 - 0.3127 - 0.3290) / 0.3290)


class XyzModel(ColorModel):
    __slots__ = ()
    white_point: ClassVar[WhitePoint]


class XyzD50(XyzModel):
    __slots__ = ()
    color_space: ClassVar[ColorSpace] = ColorSpace.XYZ_D50
    channels:    ClassVar[Tuple[str, str, str]] = ("x", "y", "z")
    white_point: ClassVar[WhitePoint] = D50


class XyzD65(XyzModel):
    __slots__ = ()
    color_space: ClassVar[ColorSpace] = ColorSpace.XYZ_D65
    channels:    ClassVar[Tuple[str, str, str]] = ("x", "y", "z")
    white_point: ClassVar[WhitePoint] = D65
