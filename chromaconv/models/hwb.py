from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .base import ColorModel


class Hwb(ColorModel):
    """Hue in degrees, whiteness and blackness nominally in [0, 1]."""
    __slots__ = ()
    color_space: ClassVar[ColorSpace] = ColorSpace.HWB
    channels:    ClassVar[Tuple[str, str, str]] = ("hue", "whiteness", "blackness")
