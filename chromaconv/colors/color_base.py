from __future__ import annotations
import math
from numbers import Real
from typing import Any, Callable, Iterable, Tuple, TYPE_CHECKING

from ..types.color_types import ColorSpace, Components, ComponentInput
from ..types.flags import ColorFlags, NO_FLAGS, ALPHA_INDEX, ALL_COMPONENTS, COMPONENT_FLAGS, component_flag

if TYPE_CHECKING:
    from ..models.base import ColorModel


def _component_details(value: ComponentInput, flag: ColorFlags) -> Tuple[float, ColorFlags]:
    """Split a component argument into its stored value and its flag bit."""
    if value is None:
        return 0.0, flag
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"Color components must be real numbers or None, got {value!r}")
    return float(value), NO_FLAGS


def _same_float(a: float, b: float) -> bool:
    return a == b or (math.isnan(a) and math.isnan(b))


class Color:
    """
    An immutable color value: three components, alpha, a space tag and the
    flags marking which channels are unspecified.

    Unspecified channels always store ``0.0``; the flag bit, not the value,
    says whether a channel is missing.

    >>> c = Color("srgb", 0.8235, None, 0.1176)
    >>> c.components
    (0.8235, 0.0, 0.1176)
    >>> c.is_none(1)
    True
    """
    __slots__ = ('_components', '_alpha', '_color_space', '_flags', '_is_frozen')  # no new attributes → immutability

    to_color_space: Callable[[Color, ColorSpace | str], Color]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        color_space: ColorSpace | str,
        c0: ComponentInput,
        c1: ComponentInput,
        c2: ComponentInput,
        alpha: ComponentInput = 1.0,
    ) -> None:
        flags = NO_FLAGS
        values = []
        for value, flag in zip((c0, c1, c2, alpha), COMPONENT_FLAGS + (ColorFlags.ALPHA_IS_NONE,)):
            stored, bit = _component_details(value, flag)
            values.append(stored)
            flags |= bit

        self._assign(ColorSpace.from_name(color_space), tuple(values[:3]), values[3], flags)

    def _assign(self, color_space: ColorSpace, components: Components, alpha: float, flags: ColorFlags) -> None:
        self._color_space = color_space
        self._components = components
        self._alpha = alpha
        self._flags = ColorFlags(flags)
        # freeze instance; no more writes allowed
        object.__setattr__(self, '_is_frozen', True)

    @classmethod
    def from_parts(
        cls,
        color_space: ColorSpace | str,
        components: Iterable[float],
        alpha: float,
        flags: ColorFlags = NO_FLAGS,
    ) -> Color:
        """
        Assemble a color from already computed values.

        Channels whose flag bit is set are stored as ``0.0`` whatever value
        was passed for them.
        """
        values = tuple(float(v) for v in components)
        if len(values) != 3:
            raise ValueError(f"Color expects 3 components, got {len(values)}")
        flags = ColorFlags(flags)
        values = tuple(
            0.0 if flags & bit else v for v, bit in zip(values, COMPONENT_FLAGS)
        )
        alpha = 0.0 if flags & ColorFlags.ALPHA_IS_NONE else float(alpha)

        color = cls.__new__(cls)
        color._assign(ColorSpace.from_name(color_space), values, alpha, flags)  # type: ignore[arg-type]
        return color

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def components(self) -> Components:
        return self._components

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def color_space(self) -> ColorSpace:
        return self._color_space

    @property
    def flags(self) -> ColorFlags:
        return self._flags

    @property
    def alpha_is_none(self) -> bool:
        return bool(self._flags & ColorFlags.ALPHA_IS_NONE)

    def is_none(self, index: int) -> bool:
        """Check whether channel ``index`` (0-2 components, 3 alpha) is unspecified."""
        return bool(self._flags & component_flag(index))

    def copy(self) -> Color:
        """Return a distinct, value-equal color."""
        return Color.from_parts(self._color_space, self._components, self._alpha, self._flags)

    def with_alpha(self, alpha: ComponentInput) -> Color:
        """Return a copy with ``alpha`` replaced; ``None`` marks alpha unspecified."""
        value, bit = _component_details(alpha, ColorFlags.ALPHA_IS_NONE)
        flags = (self._flags | bit) if bit else (self._flags & ALL_COMPONENTS)
        return Color.from_parts(self._color_space, self._components, value, flags)

    def project(self, model_cls: type[ColorModel]) -> ColorModel:
        """
        View the components through the typed model of this color's space.

        Raises:
            TypeError: if ``model_cls`` belongs to another color space.
        """
        return model_cls.from_color(self)

    def as_model(self) -> ColorModel:
        """Project into the model registered for this color's own space."""
        from ..models import model_for
        return model_for(self._color_space).from_color(self)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            self._color_space == other._color_space
            and self._flags == other._flags
            and _same_float(self._alpha, other._alpha)
            and all(_same_float(a, b) for a, b in zip(self._components, other._components))
        )

    def __hash__(self) -> int:
        def key(v: float) -> float:
            return 0.0 if math.isnan(v) else v
        return hash((self._color_space, int(self._flags), key(self._alpha), tuple(key(c) for c in self._components)))

    def __repr__(self) -> str:
        def show(i: int, v: float) -> str:
            return "none" if self.is_none(i) else repr(v)
        parts = ", ".join(show(i, v) for i, v in enumerate(self._components))
        return f"Color({self._color_space.value}, {parts}, alpha={show(ALPHA_INDEX, self._alpha)})"
