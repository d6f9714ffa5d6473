from typing import Tuple

from ..models import Srgb, Hsl, Hwb
from .numbers import hue_or_zero, normalize_hue
from .to_hsl import derived_hue_flags


def _hue_to_rgb(t1: float, t2: float, hue: float) -> float:
    """Interpolate one channel; ``hue`` is measured in sextants (60 degree units)."""
    if hue < 0:
        hue += 6
    if hue >= 6:
        hue -= 6

    if hue < 1:
        return (t2 - t1) * hue + t1
    if hue < 3:
        return t2
    if hue < 4:
        return (t2 - t1) * (4 - hue) + t1
    return t1


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees; any value is wrapped, the NaN sentinel reads as 0
        s: Saturation, nominally in [0, 1]
        l: Lightness, nominally in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b), no clamping applied
    """
    hue = normalize_hue(hue_or_zero(h)) / 60

    if l <= 0.5:
        t2 = l * (s + 1)
    else:
        t2 = l + s - l * s
    t1 = l * 2 - t2

    r = _hue_to_rgb(t1, t2, hue + 2)
    g = _hue_to_rgb(t1, t2, hue)
    b = _hue_to_rgb(t1, t2, hue - 2)
    return r, g, b


def hwb_to_unit_rgb(h: float, w: float, b: float) -> Tuple[float, float, float]:
    """
    Convert HWB to RGB.

    When whiteness and blackness add up to more than 1 the result is the gray
    ``w / (w + b)`` whatever the hue.
    """
    if w + b > 1:
        gray = w / (w + b)
        return gray, gray, gray

    scale = 1 - w - b
    r, g, b_ = hsl_to_unit_rgb(h, 1.0, 0.5)
    return r * scale + w, g * scale + w, b_ * scale + w


def hsl_to_srgb(hsl: Hsl) -> Srgb:
    return Srgb(*hsl_to_unit_rgb(*hsl.components), flags=derived_hue_flags(hsl.flags))


def hwb_to_srgb(hwb: Hwb) -> Srgb:
    return Srgb(*hwb_to_unit_rgb(*hwb.components), flags=derived_hue_flags(hwb.flags))
