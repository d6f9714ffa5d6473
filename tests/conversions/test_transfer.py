import pytest

from chromaconv.conversions import transfer as tf

PAIRS = [
    (tf.srgb_decode, tf.srgb_encode),
    (tf.a98_decode, tf.a98_encode),
    (tf.prophoto_decode, tf.prophoto_encode),
    (tf.rec2020_decode, tf.rec2020_encode),
]

VALUES = [0.0, 0.001, 0.02, 0.04, 0.1, 0.5, 0.8235, 1.0, 1.2]


def test_srgb_decode_reference():
    assert abs(tf.srgb_decode(0.5) - 0.21404114) < 1e-7
    assert tf.srgb_decode(0.04) == 0.04 / 12.92
    assert tf.srgb_decode(1.0) == pytest.approx(1.0)


def test_srgb_encode_linear_segment():
    assert tf.srgb_encode(0.002) == 12.92 * 0.002


@pytest.mark.parametrize("decode, encode", PAIRS)
def test_round_trip(decode, encode):
    for v in VALUES:
        assert abs(encode(decode(v)) - v) < 1e-9
        assert abs(decode(encode(v)) - v) < 1e-9


@pytest.mark.parametrize("decode, encode", PAIRS)
def test_sign_preserving(decode, encode):
    for v in VALUES:
        assert decode(-v) == -decode(v)
        assert encode(-v) == -encode(v)


def test_linear_segments():
    assert tf.prophoto_decode(0.01) == 0.01 / 16
    assert tf.prophoto_encode(0.001) == 16 * 0.001
    assert tf.rec2020_decode(0.05) == 0.05 / 4.5
    assert tf.rec2020_encode(0.01) == 4.5 * 0.01


def test_apply_per_channel():
    assert tf.apply_per_channel(tf.a98_decode, (1.0, 0.0, -1.0)) == (1.0, 0.0, -1.0)
