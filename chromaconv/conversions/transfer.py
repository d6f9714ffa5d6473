"""
Transfer functions between gamma-encoded and linear-light RGB values.

Every function works on one channel and is sign preserving, so
out-of-gamut negative values survive a decode/encode round trip.
"""
import math
from typing import Callable, Tuple

Transfer = Callable[[float], float]

# sRGB (IEC 61966-2-1), also used by Display P3
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308

A98_GAMMA = 563 / 256

PROPHOTO_GAMMA = 1.8
PROPHOTO_DECODE_THRESHOLD = 16 / 512
PROPHOTO_ENCODE_THRESHOLD = 1 / 512

REC2020_ALPHA = 1.09929682680944
REC2020_BETA = 0.018053968510807


def srgb_decode(v: float) -> float:
    magnitude = abs(v)
    if magnitude <= SRGB_DECODE_THRESHOLD:
        return v / 12.92
    return math.copysign(((magnitude + 0.055) / 1.055) ** 2.4, v)


def srgb_encode(v: float) -> float:
    magnitude = abs(v)
    if magnitude <= SRGB_ENCODE_THRESHOLD:
        return 12.92 * v
    return math.copysign(1.055 * magnitude ** (1 / 2.4) - 0.055, v)


def a98_decode(v: float) -> float:
    return math.copysign(abs(v) ** A98_GAMMA, v)


def a98_encode(v: float) -> float:
    return math.copysign(abs(v) ** (1 / A98_GAMMA), v)


def prophoto_decode(v: float) -> float:
    magnitude = abs(v)
    if magnitude <= PROPHOTO_DECODE_THRESHOLD:
        return v / 16
    return math.copysign(magnitude ** PROPHOTO_GAMMA, v)


def prophoto_encode(v: float) -> float:
    magnitude = abs(v)
    if magnitude >= PROPHOTO_ENCODE_THRESHOLD:
        return math.copysign(magnitude ** (1 / PROPHOTO_GAMMA), v)
    return 16 * v


def rec2020_decode(v: float) -> float:
    magnitude = abs(v)
    if magnitude < REC2020_BETA * 4.5:
        return v / 4.5
    return math.copysign(((magnitude + REC2020_ALPHA - 1) / REC2020_ALPHA) ** (1 / 0.45), v)


def rec2020_encode(v: float) -> float:
    magnitude = abs(v)
    if magnitude > REC2020_BETA:
        return math.copysign(REC2020_ALPHA * magnitude ** 0.45 - (REC2020_ALPHA - 1), v)
    return 4.5 * v


def apply_per_channel(fn: Transfer, rgb: Tuple[float, float, float]) -> Tuple[float, float, float]:
    r, g, b = rgb
    return fn(r), fn(g), fn(b)
