from typing import Tuple

from ..models import Srgb, Hwb
from .numbers import normalize_hue
from .to_hsl import rgb_hue_min_max, derived_hue_flags


def unit_rgb_to_hwb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HWB.

    Returns:
        Tuple[float, float, float]: (hue [0,360) or NaN, whiteness, blackness)
    """
    hue, min_c, max_c = rgb_hue_min_max(r, g, b)
    return normalize_hue(hue), min_c, 1 - max_c


def srgb_to_hwb(rgb: Srgb) -> Hwb:
    return Hwb(*unit_rgb_to_hwb(*rgb.components), flags=derived_hue_flags(rgb.flags))
