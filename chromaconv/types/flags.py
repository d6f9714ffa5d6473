from enum import IntFlag
from typing import Iterable, Tuple


class ColorFlags(IntFlag):
    """Bits marking channels as unspecified ("none") rather than zero."""
    C0_IS_NONE = 1 << 0
    C1_IS_NONE = 1 << 1
    C2_IS_NONE = 1 << 2
    ALPHA_IS_NONE = 1 << 3


NO_FLAGS = ColorFlags(0)
ALPHA_INDEX = 3

COMPONENT_FLAGS: Tuple[ColorFlags, ColorFlags, ColorFlags] = (
    ColorFlags.C0_IS_NONE,
    ColorFlags.C1_IS_NONE,
    ColorFlags.C2_IS_NONE,
)
ALL_COMPONENTS = ColorFlags.C0_IS_NONE | ColorFlags.C1_IS_NONE | ColorFlags.C2_IS_NONE
ALL_FLAGS = ALL_COMPONENTS | ColorFlags.ALPHA_IS_NONE


def component_flag(index: int) -> ColorFlags:
    """Flag bit for channel ``index`` (0-2 components, 3 alpha)."""
    if index == ALPHA_INDEX:
        return ColorFlags.ALPHA_IS_NONE
    if not 0 <= index < 3:
        raise IndexError(f"Channel index must be in 0..3, got {index}")
    return COMPONENT_FLAGS[index]


def all_none(flags: ColorFlags, indices: Iterable[int]) -> bool:
    """True iff every listed channel is unspecified."""
    return all(flags & component_flag(i) for i in indices)


def with_channels(flags: ColorFlags, indices: Iterable[int], is_none: bool) -> ColorFlags:
    """Return ``flags`` with the listed channel bits set or cleared, other bits kept."""
    mask = NO_FLAGS
    for i in indices:
        mask |= component_flag(i)
    return (flags | mask) if is_none else (flags & (ALL_FLAGS ^ mask))
