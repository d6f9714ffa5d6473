"""
Rectangular <-> cylindrical conversions shared by Lab/LCH and Oklab/Oklch.

Lightness passes through untouched; the two remaining axes are a polar
<-> Cartesian pair.
"""
import math
from typing import Tuple

from ..models import Lab, Lch, Oklab, Oklch
from ..types.flags import ColorFlags
from .numbers import hue_or_zero, normalize_hue
from .to_hsl import derived_hue_flags

PLANE = (1, 2)


def rectangular_to_polar(lightness: float, a: float, b: float) -> Tuple[float, float, float]:
    chroma = math.hypot(a, b)
    hue = normalize_hue(math.degrees(math.atan2(b, a)))
    return lightness, chroma, hue


def polar_to_rectangular(lightness: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    angle = math.radians(hue_or_zero(hue))
    return lightness, chroma * math.cos(angle), chroma * math.sin(angle)


def _plane_flags(flags: ColorFlags) -> ColorFlags:
    return derived_hue_flags(flags, inputs=PLANE, outputs=PLANE)


def lab_to_lch(lab: Lab) -> Lch:
    return Lch(*rectangular_to_polar(*lab.components), flags=_plane_flags(lab.flags))


def lch_to_lab(lch: Lch) -> Lab:
    return Lab(*polar_to_rectangular(*lch.components), flags=_plane_flags(lch.flags))


def oklab_to_oklch(oklab: Oklab) -> Oklch:
    return Oklch(*rectangular_to_polar(*oklab.components), flags=_plane_flags(oklab.flags))


def oklch_to_oklab(oklch: Oklch) -> Oklab:
    return Oklab(*polar_to_rectangular(*oklch.components), flags=_plane_flags(oklch.flags))
