import math

from chromaconv.conversions import unit_rgb_to_hsl, srgb_to_hsl, ACHROMATIC_HUE
from chromaconv.models import Srgb, Hsl
from chromaconv.types.flags import ColorFlags
from samples import samples_rgb_hsl, hue_distance


def test_unit_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = unit_rgb_to_hsl(r, g, b)

        assert hue_distance(h_out, h_exp) < 1e-3
        assert abs(s_out - s_exp) < 1e-3
        assert abs(l_out - l_exp) < 1e-3


def test_reference_orange():
    h, s, l = unit_rgb_to_hsl(0.8235, 0.4118, 0.1176)
    assert abs(h - 25.0064) < 1e-3
    assert abs(s - 0.75) < 1e-3
    assert abs(l - 0.4706) < 1e-3


def test_achromatic_hue_is_nan_sentinel():
    h, s, l = unit_rgb_to_hsl(0.5, 0.5, 0.5)
    assert math.isnan(h)
    assert math.isnan(ACHROMATIC_HUE)
    assert s == 0.0
    assert l == 0.5


def test_black_and_white_have_zero_saturation():
    assert unit_rgb_to_hsl(0.0, 0.0, 0.0)[1:] == (0.0, 0.0)
    assert unit_rgb_to_hsl(1.0, 1.0, 1.0)[1:] == (0.0, 1.0)


def test_hue_is_normalized():
    for rgb in [(1.0, 0.0, 0.2), (0.3, 0.0, 1.0), (0.9, 0.1, 0.8)]:
        h, _, _ = unit_rgb_to_hsl(*rgb)
        assert 0.0 <= h < 360.0


def test_negative_saturation_flips_hue():
    # out of gamut: lightness above 1 makes the raw saturation negative
    h, s, l = unit_rgb_to_hsl(1.5, 1.2, 1.2)
    assert l > 1
    assert s > 0
    assert hue_distance(h, 180.0) < 1e-9


def test_srgb_to_hsl_model():
    hsl = srgb_to_hsl(Srgb(1.0, 0.5, 0.0))
    assert isinstance(hsl, Hsl)
    assert hsl.hue == 30.0
    assert hsl.flags == ColorFlags(0)


def test_srgb_to_hsl_keeps_alpha_flag():
    hsl = srgb_to_hsl(Srgb(1.0, 0.5, 0.0, flags=ColorFlags.ALPHA_IS_NONE))
    assert hsl.flags == ColorFlags.ALPHA_IS_NONE
