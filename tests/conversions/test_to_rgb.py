import math

from chromaconv.conversions import (
    hsl_to_unit_rgb, hwb_to_unit_rgb, unit_rgb_to_hwb, hsl_to_srgb, hwb_to_srgb,
)
from chromaconv.models import Hsl, Hwb, Srgb
from samples import samples_hsl_rgb, samples_rgb_hwb, samples_hwb_rgb, hue_distance


def test_hsl_to_unit_rgb():
    for (h, s, l), expected in samples_hsl_rgb.items():
        out = hsl_to_unit_rgb(h, s, l)
        for got, want in zip(out, expected):
            assert abs(got - want) < 1e-9


def test_hsl_to_rgb_nan_hue_reads_as_zero():
    assert hsl_to_unit_rgb(math.nan, 0.0, 0.5) == (0.5, 0.5, 0.5)
    assert hsl_to_unit_rgb(math.nan, 1.0, 0.5) == hsl_to_unit_rgb(0.0, 1.0, 0.5)


def test_hsl_to_rgb_is_not_clamped():
    r, g, b = hsl_to_unit_rgb(0.0, 2.0, 0.5)
    assert r > 1.0
    assert b < 0.0


def test_unit_rgb_to_hwb():
    for (r, g, b), (h_exp, w_exp, b_exp) in samples_rgb_hwb.items():
        h, w, bl = unit_rgb_to_hwb(r, g, b)
        assert hue_distance(h, h_exp) < 1e-9
        assert abs(w - w_exp) < 1e-9
        assert abs(bl - b_exp) < 1e-9


def test_hwb_to_unit_rgb():
    for (h, w, b), expected in samples_hwb_rgb.items():
        out = hwb_to_unit_rgb(h, w, b)
        for got, want in zip(out, expected):
            assert abs(got - want) < 1e-9


def test_hwb_gray_collapse():
    # whiteness + blackness > 1: the hue plays no part
    for hue in (0.0, 90.0, 275.0, math.nan):
        assert hwb_to_unit_rgb(hue, 0.6, 0.6) == (0.5, 0.5, 0.5)


def test_hwb_boundary_matches_gray():
    r, g, b = hwb_to_unit_rgb(45.0, 0.4, 0.6)
    for channel in (r, g, b):
        assert abs(channel - 0.4) < 1e-12


def test_model_level_steps():
    assert isinstance(hsl_to_srgb(Hsl(0.0, 1.0, 0.5)), Srgb)
    rgb = hwb_to_srgb(Hwb(300.0, 0.6, 0.6))
    assert rgb.components == (0.5, 0.5, 0.5)
