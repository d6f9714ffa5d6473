"""
Conversion engine.

Every space has one parent on its way to the XYZ-D50 interchange space;
together they form a tree rooted at ``xyz-d50``. A conversion walks up from
the source until it reaches a space that is also an ancestor of the target,
then walks down to the target. One-hop pairs with closed forms (the
``DIRECT_CONVERSIONS`` table) never leave their pair.
"""
from __future__ import annotations
import logging
from typing import Callable, Dict, List, Sequence, Tuple

from ..colors.color_base import Color
from ..models import ColorModel, model_for
from ..types.color_types import ColorSpace, ComponentInput
from .to_hsl import srgb_to_hsl
from .to_hwb import srgb_to_hwb
from .to_rgb import hsl_to_srgb, hwb_to_srgb
from .polar import lab_to_lch, lch_to_lab, oklab_to_oklch, oklch_to_oklab
from . import xyz

logger = logging.getLogger(__name__)

Step = Callable[[ColorModel], ColorModel]
Path = List[ColorSpace]

INTERCHANGE_SPACE = ColorSpace.XYZ_D50

S = ColorSpace

# (child, parent, child -> parent, parent -> child)
EDGES: Tuple[Tuple[ColorSpace, ColorSpace, Step, Step], ...] = (
    (S.HSL,          S.SRGB,        hsl_to_srgb,                 srgb_to_hsl),
    (S.HWB,          S.SRGB,        hwb_to_srgb,                 srgb_to_hwb),
    (S.SRGB,         S.SRGB_LINEAR, xyz.srgb_to_srgb_linear,     xyz.srgb_linear_to_srgb),
    (S.SRGB_LINEAR,  S.XYZ_D65,     xyz.srgb_linear_to_xyz_d65,  xyz.xyz_d65_to_srgb_linear),
    (S.DISPLAY_P3,   S.XYZ_D65,     xyz.display_p3_to_xyz_d65,   xyz.xyz_d65_to_display_p3),
    (S.A98_RGB,      S.XYZ_D65,     xyz.a98_rgb_to_xyz_d65,      xyz.xyz_d65_to_a98_rgb),
    (S.REC2020,      S.XYZ_D65,     xyz.rec2020_to_xyz_d65,      xyz.xyz_d65_to_rec2020),
    (S.PROPHOTO_RGB, S.XYZ_D50,     xyz.prophoto_rgb_to_xyz_d50, xyz.xyz_d50_to_prophoto_rgb),
    (S.LCH,          S.LAB,         lch_to_lab,                  lab_to_lch),
    (S.LAB,          S.XYZ_D50,     xyz.lab_to_xyz_d50,          xyz.xyz_d50_to_lab),
    (S.OKLCH,        S.OKLAB,       oklch_to_oklab,              oklab_to_oklch),
    (S.OKLAB,        S.XYZ_D65,     xyz.oklab_to_xyz_d65,        xyz.xyz_d65_to_oklab),
    (S.XYZ_D65,      S.XYZ_D50,     xyz.xyz_d65_to_xyz_d50,      xyz.xyz_d50_to_xyz_d65),
)

PARENT: Dict[ColorSpace, ColorSpace] = {child: parent for child, parent, _, _ in EDGES}

STEPS: Dict[Tuple[ColorSpace, ColorSpace], Step] = {}
for _child, _parent, _up, _down in EDGES:
    STEPS[(_child, _parent)] = _up
    STEPS[(_parent, _child)] = _down

# One-hop conversions with closed-form formulas
DIRECT_CONVERSIONS: Dict[Tuple[ColorSpace, ColorSpace], Step] = {
    (S.SRGB, S.HSL): srgb_to_hsl,
    (S.HSL, S.SRGB): hsl_to_srgb,
    (S.SRGB, S.HWB): srgb_to_hwb,
    (S.HWB, S.SRGB): hwb_to_srgb,
    (S.LAB, S.LCH): lab_to_lch,
    (S.LCH, S.LAB): lch_to_lab,
    (S.OKLAB, S.OKLCH): oklab_to_oklch,
    (S.OKLCH, S.OKLAB): oklch_to_oklab,
}


def forward_chain(color_space: ColorSpace | str) -> Path:
    """Spaces visited from ``color_space`` up to the interchange space, both ends included."""
    space = ColorSpace.from_name(color_space)
    chain = [space]
    while space != INTERCHANGE_SPACE:
        space = PARENT[space]
        chain.append(space)
    return chain


def conversion_path(source: ColorSpace | str, target: ColorSpace | str) -> Path:
    """
    Shortest sequence of spaces leading from ``source`` to ``target``.

    Returns ``[source]`` for identical spaces and ``[source, target]`` for a
    direct pair. Otherwise the path climbs the source chain to the first
    space shared with the target chain and descends from there.
    """
    source = ColorSpace.from_name(source)
    target = ColorSpace.from_name(target)
    if source == target:
        return [source]
    if (source, target) in DIRECT_CONVERSIONS:
        return [source, target]

    up = forward_chain(source)
    down = forward_chain(target)
    meet = next(space for space in up if space in down)
    return up[:up.index(meet) + 1] + down[:down.index(meet)][::-1]


def pivot_path(source: ColorSpace | str, target: ColorSpace | str) -> Path:
    """Path that always passes through the interchange space."""
    down = forward_chain(target)
    return forward_chain(source) + down[:-1][::-1]


def run_path(model: ColorModel, path: Sequence[ColorSpace]) -> ColorModel:
    """Apply the primitive step for every consecutive pair of ``path``."""
    if model.color_space != path[0]:
        raise TypeError(
            f"Path starts at {path[0].value} but the model is {model.color_space.value}"
        )
    for current, following in zip(path, path[1:]):
        model = STEPS[(current, following)](model)
    return model


def convert_model(model: ColorModel, to_space: ColorSpace | str, *, pivot: bool = False) -> ColorModel:
    """Convert a typed model into the model of ``to_space``."""
    to_space = ColorSpace.from_name(to_space)
    if pivot:
        path = pivot_path(model.color_space, to_space)
    else:
        path = conversion_path(model.color_space, to_space)
    return run_path(model, path)


def color_convert(color: Color, to_space: ColorSpace | str, *, pivot: bool = False) -> Color:
    """
    Convert ``color`` into ``to_space`` and return a new Color.

    Alpha and its flag are carried over untouched. Converting into the
    color's own space returns a value-equal copy.

    Args:
        color: Color to convert; never mutated.
        to_space: Target ColorSpace or its CSS name.
        pivot: Force the route through XYZ-D50 even when a shorter one exists.
    """
    to_space = ColorSpace.from_name(to_space)
    if color.color_space == to_space:
        return color.copy()

    if pivot:
        path = pivot_path(color.color_space, to_space)
    else:
        path = conversion_path(color.color_space, to_space)
    logger.debug("Converting %r via %s", color, " -> ".join(s.value for s in path))

    model = model_for(color.color_space).from_color(color)
    return run_path(model, path).into_color(color.alpha, color.alpha_is_none)


def convert(
    color: Sequence[ComponentInput],
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> Tuple[float, ...]:
    """
    Convert bare components, optionally followed by alpha.

    ``None`` marks an unspecified channel on input; on output unspecified
    channels read as ``0.0``. Returns a tuple of the same length as ``color``.
    """
    if len(color) not in (3, 4):
        raise ValueError(f"Expected 3 components and an optional alpha, got {len(color)} values")
    alpha = color[3] if len(color) == 4 else 1.0
    result = color_convert(Color(from_space, color[0], color[1], color[2], alpha), to_space)
    if len(color) == 4:
        return result.components + (result.alpha,)
    return result.components
