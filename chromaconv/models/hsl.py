from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .base import ColorModel


class Hsl(ColorModel):
    """Hue in degrees, saturation and lightness nominally in [0, 1]."""
    __slots__ = ()
    color_space: ClassVar[ColorSpace] = ColorSpace.HSL
    channels:    ClassVar[Tuple[str, str, str]] = ("hue", "saturation", "lightness")
