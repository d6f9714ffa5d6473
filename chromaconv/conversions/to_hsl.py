from typing import Tuple

from ..models import Srgb, Hsl
from ..types.flags import ColorFlags, all_none, with_channels
from .numbers import ACHROMATIC_HUE, HUE_360, normalize_hue

RGB_CHANNELS = (0, 1, 2)


def rgb_hue_min_max(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Hue (degrees, unnormalized) together with the smallest and largest channel.

    The hue is ``ACHROMATIC_HUE`` (NaN) when all channels are equal.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if delta == 0:
        return ACHROMATIC_HUE, min_c, max_c

    if max_c == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return hue * 60, min_c, max_c


def derived_hue_flags(flags: ColorFlags, inputs=RGB_CHANNELS, outputs=RGB_CHANNELS) -> ColorFlags:
    """
    Flags for outputs computed from several inputs at once: an output is
    unspecified only when every input feeding it was unspecified.
    """
    return with_channels(flags, outputs, all_none(flags, inputs))


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSL using the CSS Color 4 algorithm.

    Args:
        r: Red component, nominally in [0, 1]
        g: Green component, nominally in [0, 1]
        b: Blue component, nominally in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360) or NaN, saturation, lightness)
    """
    hue, min_c, max_c = rgb_hue_min_max(r, g, b)
    delta = max_c - min_c

    lightness = (min_c + max_c) / 2

    if delta == 0 or lightness == 0 or lightness == 1:
        saturation = 0.0
    else:
        saturation = (max_c - lightness) / min(lightness, 1 - lightness)

    # out-of-gamut input can produce a negative saturation
    if saturation < 0:
        hue += HUE_360 / 2
        saturation = abs(saturation)

    return normalize_hue(hue), saturation, lightness


def srgb_to_hsl(rgb: Srgb) -> Hsl:
    return Hsl(*unit_rgb_to_hsl(*rgb.components), flags=derived_hue_flags(rgb.flags))
