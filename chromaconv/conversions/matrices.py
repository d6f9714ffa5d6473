"""
Constant 3x3 matrices used by the linear steps of the conversion chains.

Values are the CSS Color 4 reference coefficients; where a reference is
written as rationals it is kept as rationals so the floats match the
reference test vectors bit for bit.
"""
from typing import Sequence, Tuple

import numpy as np
from numpy import ndarray

Vector = Tuple[float, float, float]


def _matrix(rows: Sequence[Sequence[float]]) -> ndarray:
    m = np.array(rows, dtype=np.float64)
    m.flags.writeable = False
    return m


def _inverse(m: ndarray) -> ndarray:
    return _matrix(np.linalg.inv(m))


def apply_matrix(m: ndarray, v: Sequence[float]) -> Vector:
    """Multiply the column vector ``v`` by ``m`` and return plain floats."""
    x, y, z = m @ np.asarray(v, dtype=np.float64)
    return float(x), float(y), float(z)


# sRGB primaries, D65
LINEAR_SRGB_TO_XYZ_D65 = _matrix([
    [506752 / 1228815,  87881 / 245763,   12673 /   70218],
    [ 87098 /  409605, 175762 / 245763,   12673 /  175545],
    [  7918 /  409605,  87881 / 737289, 1001167 / 1053270],
])
XYZ_D65_TO_LINEAR_SRGB = _matrix([
    [  12831 /   3959,    -329 /    214,  -1974 /   3959],
    [-851781 / 878810, 1648619 / 878810,  36519 / 878810],
    [    705 /  12673,   -2585 /  12673,    705 /    667],
])

# Bradford chromatic adaptation
XYZ_D65_TO_XYZ_D50 = _matrix([
    [ 1.0479297925449969,    0.022946870601609652, -0.05019226628920524 ],
    [ 0.02962780877005599,   0.9904344267538799,   -0.017073799063418826],
    [-0.009243040646204504,  0.015055191490298152,  0.7518742814281371  ],
])
XYZ_D50_TO_XYZ_D65 = _matrix([
    [ 0.955473421488075,    -0.02309845494876471,   0.06325924320057072 ],
    [-0.0283697093338637,    1.0099953980813041,    0.021041441191917323],
    [ 0.012314014864481998, -0.020507649298898964,  1.330365926242124   ],
])

# Display P3 primaries, D65
LINEAR_P3_TO_XYZ_D65 = _matrix([
    [0.4865709486482162, 0.26566769316909306, 0.1982172852343625],
    [0.2289745640697488, 0.6917385218365064,  0.079286914093745 ],
    [0.0,                0.04511338185890264, 1.043944368900976 ],
])
XYZ_D65_TO_LINEAR_P3 = _matrix([
    [ 2.493496911941425,   -0.9313836179191239,  -0.40271078445071684 ],
    [-0.8294889695615747,   1.7626640603183463,   0.023624685841943577],
    [ 0.03584583024378447, -0.07617238926804182,  0.9568845240076872  ],
])

# Adobe RGB (1998) primaries, D65
LINEAR_A98_TO_XYZ_D65 = _matrix([
    [573536 /  994567,  263643 / 1420810,  187206 /  994567],
    [591459 / 1989134, 6239551 / 9945670,  374412 / 4972835],
    [ 53769 / 1989134,  351524 / 4972835, 4929758 / 4972835],
])
XYZ_D65_TO_LINEAR_A98 = _inverse(LINEAR_A98_TO_XYZ_D65)

# ProPhoto RGB primaries, D50 (no adaptation needed)
LINEAR_PROPHOTO_TO_XYZ_D50 = _matrix([
    [0.7977666449006423, 0.13518129740053308, 0.0313477341283922 ],
    [0.2880748288194013, 0.711835234241873,   0.00008993693872564],
    [0.0,                0.0,                 0.8251046025104602 ],
])
XYZ_D50_TO_LINEAR_PROPHOTO = _matrix([
    [ 1.3457868816471583, -0.25557208737979464, -0.05110186497554526],
    [-0.5446307051249019,  1.5082477428451468,   0.02052744743642139],
    [ 0.0,                 0.0,                  1.2119675456389452 ],
])

# ITU-R BT.2020 primaries, D65
LINEAR_REC2020_TO_XYZ_D65 = _matrix([
    [63426534 /  99577255,  20160776 / 139408157,  47086771 / 278816314],
    [26158966 /  99577255, 472592308 / 697040785,   8267143 / 139408157],
    [       0,              19567812 / 697040785, 295819943 / 278816314],
])
XYZ_D65_TO_LINEAR_REC2020 = _inverse(LINEAR_REC2020_TO_XYZ_D65)

# Oklab, defined on XYZ D65
XYZ_D65_TO_LMS = _matrix([
    [0.8190224379967030, 0.3619062600528904, -0.1288737815209879],
    [0.0329836539323885, 0.9292868615863434,  0.0361446663506424],
    [0.0481771893596242, 0.2642395317527308,  0.6335478284694309],
])
LMS_TO_XYZ_D65 = _matrix([
    [ 1.2268798758459243, -0.5578149944602171,  0.2813910456659647],
    [-0.0405757452148008,  1.1122868032803170, -0.0717110580655164],
    [-0.0763729366746601, -0.4214933324022432,  1.5869240198367816],
])
LMS_TO_OKLAB = _matrix([
    [0.2104542683093140,  0.7936177747023054, -0.0040720430116193],
    [1.9779985324311684, -2.4285922420485799,  0.4505937096174110],
    [0.0259040424655478,  0.7827717124575296, -0.8086757549230774],
])
OKLAB_TO_LMS = _matrix([
    [1.0,  0.3963377773761749,  0.2158037573099136],
    [1.0, -0.1055613458156586, -0.0638541728258133],
    [1.0, -0.0894841775298119, -1.2914855480194092],
])
