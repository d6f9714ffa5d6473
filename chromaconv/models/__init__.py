"""
Typed per-space views of a Color's components.

>>> from chromaconv import Color
>>> from chromaconv.models import Lab
>>> lab = Lab.from_color(Color("lab", 56.6293, 39.2371, 57.5538))
>>> lab.lightness
56.6293

Projecting a color into another space's model raises ``TypeError``.
"""
from .base import ColorModel, MODEL_REGISTRY, model_for
from .rgb import RgbModel, Srgb, SrgbLinear, DisplayP3, A98Rgb, ProphotoRgb, Rec2020
from .hsl import Hsl
from .hwb import Hwb
from .lab import Lab, Lch, Oklab, Oklch
from .xyz import WhitePoint, XyzModel, XyzD50, XyzD65, D50, D65

__all__ = [
    "ColorModel", "MODEL_REGISTRY", "model_for",
    "RgbModel", "Srgb", "SrgbLinear", "DisplayP3", "A98Rgb", "ProphotoRgb", "Rec2020",
    "Hsl", "Hwb",
    "Lab", "Lch", "Oklab", "Oklch",
    "WhitePoint", "XyzModel", "XyzD50", "XyzD65", "D50", "D65",
]
