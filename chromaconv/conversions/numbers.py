import math
from boundednumbers.functions import cyclic_wrap_float

HUE_360 = 360.0

# Hue of an achromatic color (max == min); it carries no angle.
ACHROMATIC_HUE = math.nan


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range. The NaN sentinel is returned unchanged."""
    if math.isnan(h):
        return h
    h = float(cyclic_wrap_float(h, 0.0, HUE_360))
    # tiny negative inputs wrap to exactly 360.0 in floating point
    return 0.0 if h >= HUE_360 else h


def hue_or_zero(h: float) -> float:
    """Read a hue as an angle; the achromatic sentinel reads as 0."""
    return 0.0 if math.isnan(h) else h
