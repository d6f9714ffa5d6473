import numpy as np
import pytest

from chromaconv.conversions import (
    srgb_linear_to_xyz_d65, xyz_d65_to_srgb_linear,
    xyz_d65_to_xyz_d50, xyz_d50_to_xyz_d65,
    lab_to_xyz_d50, xyz_d50_to_lab,
    oklab_to_xyz_d65, xyz_d65_to_oklab,
)
from chromaconv.conversions import matrices as m
from chromaconv.conversions.xyz import KAPPA, EPSILON, lab_to_xyz_values, xyz_to_lab_values
from chromaconv.models import SrgbLinear, XyzD50, XyzD65, Lab, Oklab, D50, D65
from chromaconv.types.flags import ColorFlags


def close(a, b, tol):
    return all(abs(x - y) < tol for x, y in zip(a, b))


def test_constants():
    assert KAPPA * EPSILON == pytest.approx(8.0)


def test_matrix_pairs_are_inverse():
    pairs = [
        (m.LINEAR_SRGB_TO_XYZ_D65, m.XYZ_D65_TO_LINEAR_SRGB),
        (m.XYZ_D65_TO_XYZ_D50, m.XYZ_D50_TO_XYZ_D65),
        (m.LINEAR_P3_TO_XYZ_D65, m.XYZ_D65_TO_LINEAR_P3),
        (m.LINEAR_A98_TO_XYZ_D65, m.XYZ_D65_TO_LINEAR_A98),
        (m.LINEAR_PROPHOTO_TO_XYZ_D50, m.XYZ_D50_TO_LINEAR_PROPHOTO),
        (m.LINEAR_REC2020_TO_XYZ_D65, m.XYZ_D65_TO_LINEAR_REC2020),
        (m.XYZ_D65_TO_LMS, m.LMS_TO_XYZ_D65),
        (m.LMS_TO_OKLAB, m.OKLAB_TO_LMS),
    ]
    for forward, backward in pairs:
        assert np.allclose(forward @ backward, np.eye(3), atol=1e-8)


def test_matrices_are_read_only():
    with pytest.raises(ValueError):
        m.LINEAR_SRGB_TO_XYZ_D65[0, 0] = 1.0


def test_apply_matrix_returns_floats():
    out = m.apply_matrix(m.LINEAR_SRGB_TO_XYZ_D65, (1.0, 0.0, 0.0))
    assert all(type(v) is float for v in out)
    assert close(out, (0.41239079926595934, 0.21263900587151027, 0.01933081871559182), 1e-12)


def test_white_maps_to_white_point():
    xyz = srgb_linear_to_xyz_d65(SrgbLinear(1.0, 1.0, 1.0))
    assert close(xyz.components, D65, 1e-6)

    d50 = xyz_d65_to_xyz_d50(xyz)
    assert close(d50.components, D50, 1e-5)

    back = xyz_d50_to_xyz_d65(d50)
    assert close(back.components, D65, 1e-9)
    assert close(xyz_d65_to_srgb_linear(back).components, (1.0, 1.0, 1.0), 1e-9)


def test_white_point_is_lab_white():
    lab = xyz_d50_to_lab(XyzD50(*D50))
    assert close(lab.components, (100.0, 0.0, 0.0), 1e-9)


def test_lab_mid_gray():
    xyz = lab_to_xyz_d50(Lab(50.0, 0.0, 0.0))
    y = (66 / 116) ** 3
    assert close(xyz.components, (y * D50[0], y, y * D50[2]), 1e-12)


def test_lab_dark_branch_uses_lightness_threshold():
    x, y, z = lab_to_xyz_values(5.0, 0.0, 0.0)
    assert abs(y - 5.0 / KAPPA) < 1e-15
    assert abs(x - 5.0 / KAPPA * D50[0]) < 1e-15


def test_lab_xyz_round_trip():
    for lab in [(56.6293, 39.2371, 57.5538), (5.0, -3.0, 2.0), (90.0, -60.0, -40.0)]:
        xyz = lab_to_xyz_values(*lab)
        assert close(xyz_to_lab_values(*xyz), lab, 1e-9)


def test_oklab_white():
    oklab = xyz_d65_to_oklab(XyzD65(*D65))
    assert close(oklab.components, (1.0, 0.0, 0.0), 1e-3)


def test_oklab_round_trip():
    oklab = Oklab(0.62796, 0.22486, 0.12585)
    back = xyz_d65_to_oklab(oklab_to_xyz_d65(oklab))
    assert close(back.components, oklab.components, 1e-9)


def test_steps_pass_flags_through():
    flags = ColorFlags.C1_IS_NONE | ColorFlags.ALPHA_IS_NONE
    xyz = srgb_linear_to_xyz_d65(SrgbLinear(0.2, 0.0, 0.4, flags=flags))
    assert xyz.flags == flags
    assert xyz_d65_to_xyz_d50(xyz).flags == flags
    assert xyz_d50_to_lab(xyz_d65_to_xyz_d50(xyz)).flags == flags


def test_d50_white_adapts_to_d65_white():
    assert close(xyz_d50_to_xyz_d65(XyzD50(*D50)).components, D65, 1e-5)
    assert np.allclose(m.XYZ_D65_TO_XYZ_D50 @ m.XYZ_D50_TO_XYZ_D65, np.eye(3), atol=1e-10)
