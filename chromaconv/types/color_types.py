from __future__ import annotations
from enum import Enum
from typing import Tuple

Components = Tuple[float, float, float]
ComponentInput = float | int | None


class ColorSpace(str, Enum):
    SRGB = "srgb"
    SRGB_LINEAR = "srgb-linear"
    HSL = "hsl"
    HWB = "hwb"
    LAB = "lab"
    LCH = "lch"
    OKLAB = "oklab"
    OKLCH = "oklch"
    DISPLAY_P3 = "display-p3"
    A98_RGB = "a98-rgb"
    PROPHOTO_RGB = "prophoto-rgb"
    REC2020 = "rec2020"
    XYZ_D50 = "xyz-d50"
    XYZ_D65 = "xyz-d65"

    @classmethod
    def from_name(cls, name: str | ColorSpace) -> ColorSpace:
        """
        Look up a color space by its CSS name.

        Args:
            name: CSS name (case-insensitive) or an existing ColorSpace.
                  ``xyz`` is accepted as an alias of ``xyz-d65``.

        Returns:
            The matching ColorSpace member.
        """
        if isinstance(name, ColorSpace):
            return name
        key = name.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown color space: {name!r}") from None

    @property
    def is_rgb_like(self) -> bool:
        return self in RGB_SPACES

    @property
    def is_rectangular_orthogonal(self) -> bool:
        return self in RECTANGULAR_SPACES

    @property
    def is_cylindrical_polar(self) -> bool:
        return self in POLAR_SPACES

    @property
    def is_xyz_like(self) -> bool:
        return self in XYZ_SPACES

    @property
    def has_hue(self) -> bool:
        return self in HUE_INDEX

    @property
    def hue_index(self) -> int | None:
        """Channel holding the hue angle, or None for spaces without one."""
        return HUE_INDEX.get(self)

    def __str__(self) -> str:
        return self.value


_ALIASES = {"xyz": "xyz-d65"}

RGB_SPACES = frozenset({
    ColorSpace.SRGB,
    ColorSpace.SRGB_LINEAR,
    ColorSpace.DISPLAY_P3,
    ColorSpace.A98_RGB,
    ColorSpace.PROPHOTO_RGB,
    ColorSpace.REC2020,
})
RECTANGULAR_SPACES = frozenset({ColorSpace.LAB, ColorSpace.OKLAB})
POLAR_SPACES = frozenset({ColorSpace.LCH, ColorSpace.OKLCH})
XYZ_SPACES = frozenset({ColorSpace.XYZ_D50, ColorSpace.XYZ_D65})

HUE_INDEX = {
    ColorSpace.HSL: 0,
    ColorSpace.HWB: 0,
    ColorSpace.LCH: 2,
    ColorSpace.OKLCH: 2,
}


def is_hue_space(color_space: ColorSpace | str) -> bool:
    """
    Check if the given color space carries a hue channel (HSL, HWB, LCH, Oklch).

    Args:
        color_space: ColorSpace member or CSS name
    Returns:
        True if hue-based, False otherwise
    """
    return ColorSpace.from_name(color_space).has_hue
