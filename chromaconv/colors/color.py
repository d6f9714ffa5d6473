from __future__ import annotations
from .color_base import Color
from ..conversions.wrapper import color_convert
from ..types.color_types import ColorSpace


def to_color_space(self: Color, to_space: ColorSpace | str) -> Color:
    """
    Convert this color to another color space.

    Args:
        to_space: Target ColorSpace or CSS name (e.g. "oklch", "display-p3")

    Returns:
        New Color in the target space; ``self`` is left untouched.
    """
    return color_convert(self, to_space)


Color.to_color_space = to_color_space
