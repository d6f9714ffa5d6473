"""
Linear-light steps of the conversion chains: transfer functions, primaries
matrices, chromatic adaptation and the Lab / Oklab definitions.

Every step keeps the input flags as they are; only the numbers change.
"""
from typing import Tuple

import numpy as np

from ..models import (
    Srgb, SrgbLinear, DisplayP3, A98Rgb, ProphotoRgb, Rec2020,
    Lab, Oklab, XyzD50, XyzD65, D50,
)
from . import matrices as m
from . import transfer as tf

# CIE 1976 constants, exact rationals
KAPPA = 24389 / 27
EPSILON = 216 / 24389


# ---- sRGB / linear sRGB ----

def srgb_to_srgb_linear(rgb: Srgb) -> SrgbLinear:
    return SrgbLinear(*tf.apply_per_channel(tf.srgb_decode, rgb.components), flags=rgb.flags)


def srgb_linear_to_srgb(rgb: SrgbLinear) -> Srgb:
    return Srgb(*tf.apply_per_channel(tf.srgb_encode, rgb.components), flags=rgb.flags)


def srgb_linear_to_xyz_d65(rgb: SrgbLinear) -> XyzD65:
    return XyzD65(*m.apply_matrix(m.LINEAR_SRGB_TO_XYZ_D65, rgb.components), flags=rgb.flags)


def xyz_d65_to_srgb_linear(xyz: XyzD65) -> SrgbLinear:
    return SrgbLinear(*m.apply_matrix(m.XYZ_D65_TO_LINEAR_SRGB, xyz.components), flags=xyz.flags)


# ---- wide-gamut RGB spaces (linear form is internal) ----

def display_p3_to_xyz_d65(rgb: DisplayP3) -> XyzD65:
    linear = tf.apply_per_channel(tf.srgb_decode, rgb.components)
    return XyzD65(*m.apply_matrix(m.LINEAR_P3_TO_XYZ_D65, linear), flags=rgb.flags)


def xyz_d65_to_display_p3(xyz: XyzD65) -> DisplayP3:
    linear = m.apply_matrix(m.XYZ_D65_TO_LINEAR_P3, xyz.components)
    return DisplayP3(*tf.apply_per_channel(tf.srgb_encode, linear), flags=xyz.flags)


def a98_rgb_to_xyz_d65(rgb: A98Rgb) -> XyzD65:
    linear = tf.apply_per_channel(tf.a98_decode, rgb.components)
    return XyzD65(*m.apply_matrix(m.LINEAR_A98_TO_XYZ_D65, linear), flags=rgb.flags)


def xyz_d65_to_a98_rgb(xyz: XyzD65) -> A98Rgb:
    linear = m.apply_matrix(m.XYZ_D65_TO_LINEAR_A98, xyz.components)
    return A98Rgb(*tf.apply_per_channel(tf.a98_encode, linear), flags=xyz.flags)


def prophoto_rgb_to_xyz_d50(rgb: ProphotoRgb) -> XyzD50:
    linear = tf.apply_per_channel(tf.prophoto_decode, rgb.components)
    return XyzD50(*m.apply_matrix(m.LINEAR_PROPHOTO_TO_XYZ_D50, linear), flags=rgb.flags)


def xyz_d50_to_prophoto_rgb(xyz: XyzD50) -> ProphotoRgb:
    linear = m.apply_matrix(m.XYZ_D50_TO_LINEAR_PROPHOTO, xyz.components)
    return ProphotoRgb(*tf.apply_per_channel(tf.prophoto_encode, linear), flags=xyz.flags)


def rec2020_to_xyz_d65(rgb: Rec2020) -> XyzD65:
    linear = tf.apply_per_channel(tf.rec2020_decode, rgb.components)
    return XyzD65(*m.apply_matrix(m.LINEAR_REC2020_TO_XYZ_D65, linear), flags=rgb.flags)


def xyz_d65_to_rec2020(xyz: XyzD65) -> Rec2020:
    linear = m.apply_matrix(m.XYZ_D65_TO_LINEAR_REC2020, xyz.components)
    return Rec2020(*tf.apply_per_channel(tf.rec2020_encode, linear), flags=xyz.flags)


# ---- chromatic adaptation ----

def xyz_d65_to_xyz_d50(xyz: XyzD65) -> XyzD50:
    return XyzD50(*m.apply_matrix(m.XYZ_D65_TO_XYZ_D50, xyz.components), flags=xyz.flags)


def xyz_d50_to_xyz_d65(xyz: XyzD50) -> XyzD65:
    return XyzD65(*m.apply_matrix(m.XYZ_D50_TO_XYZ_D65, xyz.components), flags=xyz.flags)


# ---- CIE Lab ----

def _lab_f(v: float) -> float:
    if v > EPSILON:
        return float(np.cbrt(v))
    return (KAPPA * v + 16) / 116


def xyz_to_lab_values(x: float, y: float, z: float) -> Tuple[float, float, float]:
    fx, fy, fz = (_lab_f(v / w) for v, w in zip((x, y, z), D50))
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_xyz_values(lightness: float, a: float, b: float) -> Tuple[float, float, float]:
    f1 = (lightness + 16) / 116
    f0 = f1 + a / 500
    f2 = f1 - b / 200

    x = f0 ** 3 if f0 ** 3 > EPSILON else (116 * f0 - 16) / KAPPA
    y = f1 ** 3 if lightness > KAPPA * EPSILON else lightness / KAPPA
    z = f2 ** 3 if f2 ** 3 > EPSILON else (116 * f2 - 16) / KAPPA

    return x * D50[0], y * D50[1], z * D50[2]


def xyz_d50_to_lab(xyz: XyzD50) -> Lab:
    return Lab(*xyz_to_lab_values(*xyz.components), flags=xyz.flags)


def lab_to_xyz_d50(lab: Lab) -> XyzD50:
    return XyzD50(*lab_to_xyz_values(*lab.components), flags=lab.flags)


# ---- Oklab ----

def xyz_d65_to_oklab(xyz: XyzD65) -> Oklab:
    lms = m.apply_matrix(m.XYZ_D65_TO_LMS, xyz.components)
    lms_g = tuple(float(v) for v in np.cbrt(lms))
    return Oklab(*m.apply_matrix(m.LMS_TO_OKLAB, lms_g), flags=xyz.flags)


def oklab_to_xyz_d65(oklab: Oklab) -> XyzD65:
    lms_g = m.apply_matrix(m.OKLAB_TO_LMS, oklab.components)
    lms = tuple(v ** 3 for v in lms_g)
    return XyzD65(*m.apply_matrix(m.LMS_TO_XYZ_D65, lms), flags=oklab.flags)
