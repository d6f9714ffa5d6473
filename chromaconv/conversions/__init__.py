"""
Chromaconv Color Space Conversions
==================================

Primitive transforms between adjacent color spaces and the engine that
chains them.

Direct (one-hop) conversions
----------------------------
    srgb_to_hsl / hsl_to_srgb
    srgb_to_hwb / hwb_to_srgb
    lab_to_lch / lch_to_lab
    oklab_to_oklch / oklch_to_oklab

Linear-light steps
------------------
    srgb_to_srgb_linear / srgb_linear_to_srgb
    srgb_linear_to_xyz_d65 / xyz_d65_to_srgb_linear
    display_p3, a98_rgb, rec2020 <-> xyz_d65
    prophoto_rgb <-> xyz_d50
    xyz_d65_to_xyz_d50 / xyz_d50_to_xyz_d65 (Bradford)
    lab_to_xyz_d50 / xyz_d50_to_lab
    oklab_to_xyz_d65 / xyz_d65_to_oklab

Engine
------
    color_convert(color, to_space, pivot=False)
        Convert a Color along the shortest path (or through XYZ-D50).
    convert(components, from_space, to_space)
        Tuple in, tuple out.
    conversion_path(source, target) / pivot_path(source, target)
        Inspect the chosen route.

Examples
--------
>>> from chromaconv.conversions import convert
>>> h, s, l = convert((0.8235, 0.4118, 0.1176), "srgb", "hsl")
>>> round(h, 2), round(s, 2)
(25.01, 0.75)
"""
from .numbers import ACHROMATIC_HUE, normalize_hue, hue_or_zero
from .to_hsl import unit_rgb_to_hsl, srgb_to_hsl
from .to_hwb import unit_rgb_to_hwb, srgb_to_hwb
from .to_rgb import hsl_to_unit_rgb, hwb_to_unit_rgb, hsl_to_srgb, hwb_to_srgb
from .polar import lab_to_lch, lch_to_lab, oklab_to_oklch, oklch_to_oklab
from .xyz import (
    srgb_to_srgb_linear, srgb_linear_to_srgb,
    srgb_linear_to_xyz_d65, xyz_d65_to_srgb_linear,
    display_p3_to_xyz_d65, xyz_d65_to_display_p3,
    a98_rgb_to_xyz_d65, xyz_d65_to_a98_rgb,
    rec2020_to_xyz_d65, xyz_d65_to_rec2020,
    prophoto_rgb_to_xyz_d50, xyz_d50_to_prophoto_rgb,
    xyz_d65_to_xyz_d50, xyz_d50_to_xyz_d65,
    lab_to_xyz_d50, xyz_d50_to_lab,
    oklab_to_xyz_d65, xyz_d65_to_oklab,
)
from .wrapper import (
    DIRECT_CONVERSIONS,
    INTERCHANGE_SPACE,
    color_convert,
    conversion_path,
    convert,
    convert_model,
    forward_chain,
    pivot_path,
)

__all__ = [
    'ACHROMATIC_HUE', 'normalize_hue', 'hue_or_zero',
    'unit_rgb_to_hsl', 'srgb_to_hsl',
    'unit_rgb_to_hwb', 'srgb_to_hwb',
    'hsl_to_unit_rgb', 'hwb_to_unit_rgb', 'hsl_to_srgb', 'hwb_to_srgb',
    'lab_to_lch', 'lch_to_lab', 'oklab_to_oklch', 'oklch_to_oklab',
    'srgb_to_srgb_linear', 'srgb_linear_to_srgb',
    'srgb_linear_to_xyz_d65', 'xyz_d65_to_srgb_linear',
    'display_p3_to_xyz_d65', 'xyz_d65_to_display_p3',
    'a98_rgb_to_xyz_d65', 'xyz_d65_to_a98_rgb',
    'rec2020_to_xyz_d65', 'xyz_d65_to_rec2020',
    'prophoto_rgb_to_xyz_d50', 'xyz_d50_to_prophoto_rgb',
    'xyz_d65_to_xyz_d50', 'xyz_d50_to_xyz_d65',
    'lab_to_xyz_d50', 'xyz_d50_to_lab',
    'oklab_to_xyz_d65', 'xyz_d65_to_oklab',
    'DIRECT_CONVERSIONS', 'INTERCHANGE_SPACE',
    'color_convert', 'conversion_path', 'convert', 'convert_model',
    'forward_chain', 'pivot_path',
]
