"""Chromaconv: single-value color conversion between the CSS color spaces."""

from .colors import Color
from .types import ColorSpace, ColorFlags, Components, is_hue_space
from .models import (
    ColorModel,
    model_for,
    Srgb,
    SrgbLinear,
    DisplayP3,
    A98Rgb,
    ProphotoRgb,
    Rec2020,
    Hsl,
    Hwb,
    Lab,
    Lch,
    Oklab,
    Oklch,
    XyzD50,
    XyzD65,
    D50,
    D65,
)
from .conversions import (
    color_convert,
    convert,
    conversion_path,
    pivot_path,
    ACHROMATIC_HUE,
)

__version__ = "1.0.0"

__all__ = [
    # core value
    "Color",
    "ColorSpace",
    "ColorFlags",
    "Components",
    "is_hue_space",
    # typed projections
    "ColorModel",
    "model_for",
    "Srgb",
    "SrgbLinear",
    "DisplayP3",
    "A98Rgb",
    "ProphotoRgb",
    "Rec2020",
    "Hsl",
    "Hwb",
    "Lab",
    "Lch",
    "Oklab",
    "Oklch",
    "XyzD50",
    "XyzD65",
    "D50",
    "D65",
    # conversions
    "color_convert",
    "convert",
    "conversion_path",
    "pivot_path",
    "ACHROMATIC_HUE",
]
