from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .base import ColorModel


class RgbModel(ColorModel):
    """Red/green/blue channels, shared by every RGB-like space."""
    __slots__ = ()


class Srgb(RgbModel):
    __slots__ = ()
    color_space: ClassVar[ColorSpace] = ColorSpace.SRGB
    channels:    ClassVar[Tuple[str, str, str]] = ("red", "green", "blue")


class SrgbLinear(RgbModel):
    __slots__ = ()
    color_space: ClassVar[ColorSpace] = ColorSpace.SRGB_LINEAR
    channels:    ClassVar[Tuple[str, str, str]] = ("red", "green", "blue")


class DisplayP3(RgbModel):
    __slots__ = ()
    color_space: ClassVar[ColorSpace] = ColorSpace.DISPLAY_P3
    channels:    ClassVar[Tuple[str, str, str]] = ("red", "green", "blue")


class A98Rgb(RgbModel):
    __slots__ = ()
    color_space: ClassVar[ColorSpace] = ColorSpace.A98_RGB
    channels:    ClassVar[Tuple[str, str, str]] = ("red", "green", "blue")


class ProphotoRgb(RgbModel):
    __slots__ = ()
    color_space: ClassVar[ColorSpace] = ColorSpace.PROPHOTO_RGB
    channels:    ClassVar[Tuple[str, str, str]] = ("red", "green", "blue")


class Rec2020(RgbModel):
    __slots__ = ()
    color_space: ClassVar[ColorSpace] = ColorSpace.REC2020
    channels:    ClassVar[Tuple[str, str, str]] = ("red", "green", "blue")
