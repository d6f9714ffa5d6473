import math

from chromaconv.conversions import lab_to_lch, lch_to_lab, oklab_to_oklch, oklch_to_oklab
from chromaconv.conversions.polar import rectangular_to_polar, polar_to_rectangular
from chromaconv.models import Lab, Lch, Oklab, Oklch
from samples import samples_lab_lch, hue_distance


def test_rectangular_to_polar():
    for lab, (l_exp, c_exp, h_exp) in samples_lab_lch.items():
        l, c, h = rectangular_to_polar(*lab)
        assert l == l_exp
        assert abs(c - c_exp) < 1e-3
        assert hue_distance(h, h_exp) < 1e-3
        assert 0.0 <= h < 360.0


def test_polar_to_rectangular():
    for (l_in, a_in, b_in), lch in samples_lab_lch.items():
        l, a, b = polar_to_rectangular(*lch)
        assert l == l_in
        assert abs(a - a_in) < 1e-3
        assert abs(b - b_in) < 1e-3


def test_reference_lab_lch_pair():
    lch = lab_to_lch(Lab(56.6293, 39.2371, 57.5538))
    assert isinstance(lch, Lch)
    assert abs(lch.lightness - 56.6293) < 1e-4
    assert abs(lch.chroma - 69.6562) < 1e-3
    assert abs(lch.hue - 55.7159) < 1e-3

    lab = lch_to_lab(lch)
    assert abs(lab.lightness - 56.6293) < 1e-4
    assert abs(lab.a - 39.2371) < 1e-4
    assert abs(lab.b - 57.5538) < 1e-4


def test_zero_chroma_gives_zero_hue():
    _, c, h = rectangular_to_polar(50.0, 0.0, 0.0)
    assert c == 0.0
    assert h == 0.0


def test_nan_hue_reads_as_zero():
    assert polar_to_rectangular(0.5, 0.1, math.nan) == polar_to_rectangular(0.5, 0.1, 0.0)


def test_oklab_pair_uses_same_formula():
    oklch = oklab_to_oklch(Oklab(0.7, 0.1, 0.1))
    assert isinstance(oklch, Oklch)
    assert abs(oklch.chroma - math.sqrt(0.02)) < 1e-12
    assert abs(oklch.hue - 45.0) < 1e-9

    oklab = oklch_to_oklab(oklch)
    assert isinstance(oklab, Oklab)
    assert abs(oklab.a - 0.1) < 1e-12
    assert abs(oklab.b - 0.1) < 1e-12
