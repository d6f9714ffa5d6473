from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .base import ColorModel


class Lab(ColorModel):
    """CIE Lab (D50): lightness 0-100, unbounded a and b."""
    __slots__ = ()
    color_space: ClassVar[ColorSpace] = ColorSpace.LAB
    channels:    ClassVar[Tuple[str, str, str]] = ("lightness", "a", "b")


class Lch(ColorModel):
    __slots__ = ()
    color_space: ClassVar[ColorSpace] = ColorSpace.LCH
    channels:    ClassVar[Tuple[str, str, str]] = ("lightness", "chroma", "hue")


class Oklab(ColorModel):
    """Oklab: lightness 0-1, unbounded a and b."""
    __slots__ = ()
    color_space: ClassVar[ColorSpace] = ColorSpace.OKLAB
    channels:    ClassVar[Tuple[str, str, str]] = ("lightness", "a", "b")


class Oklch(ColorModel):
    __slots__ = ()
    color_space: ClassVar[ColorSpace] = ColorSpace.OKLCH
    channels:    ClassVar[Tuple[str, str, str]] = ("lightness", "chroma", "hue")
