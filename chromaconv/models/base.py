from __future__ import annotations
from typing import Any, ClassVar, Dict, Tuple

from ..colors.color_base import Color
from ..types.color_types import ColorSpace, Components
from ..types.flags import ColorFlags, NO_FLAGS, ALL_COMPONENTS


def _channel(index: int, name: str) -> property:
    def getter(self: ColorModel) -> float:
        return self._components[index]
    getter.__name__ = name
    getter.__doc__ = f"Component {index} ({name})."
    return property(getter)


class ColorModel:
    """
    Typed, read-only view of three components in one specific color space.

    Subclasses declare ``color_space`` and ``channels``; one property per
    channel name is generated when the subclass is created.
    """
    __slots__ = ('_components', '_flags', '_is_frozen')

    color_space: ClassVar[ColorSpace]
    channels:    ClassVar[Tuple[str, str, str]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        channels = cls.__dict__.get('channels')
        if channels is None:
            return
        if len(channels) != 3:
            raise ValueError(f"{cls.__name__} must name exactly 3 channels, got {channels!r}")
        for index, name in enumerate(channels):
            setattr(cls, name, _channel(index, name))
        MODEL_REGISTRY[cls.color_space] = cls

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, c0: float, c1: float, c2: float, flags: ColorFlags = NO_FLAGS) -> None:
        self._components = (float(c0), float(c1), float(c2))
        self._flags = ColorFlags(flags)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_color(cls, color: Color) -> ColorModel:
        """
        Project ``color`` into this model.

        Raises:
            TypeError: if the color is tagged with a different color space.
        """
        if color.color_space != cls.color_space:
            raise TypeError(
                f"Cannot view a {color.color_space.value} color as {cls.__name__} "
                f"({cls.color_space.value})"
            )
        return cls(*color.components, flags=color.flags)

    @property
    def components(self) -> Components:
        return self._components

    @property
    def flags(self) -> ColorFlags:
        return self._flags

    @property
    def component_flags(self) -> ColorFlags:
        """Flags restricted to the three component bits."""
        return self._flags & ALL_COMPONENTS

    def into_color(self, alpha: float, alpha_none: bool = False) -> Color:
        """Reassemble a Color tagged with this model's space."""
        flags = self.component_flags
        if alpha_none:
            flags |= ColorFlags.ALPHA_IS_NONE
        return Color.from_parts(self.color_space, self._components, alpha, flags)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._components == other._components and self._flags == other._flags

    def __hash__(self) -> int:
        return hash((type(self), self._components, int(self._flags)))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in zip(self.channels, self._components))
        return f"{self.__class__.__name__}({fields}, flags={self._flags!r})"


MODEL_REGISTRY: Dict[ColorSpace, type[ColorModel]] = {}


def model_for(color_space: ColorSpace | str) -> type[ColorModel]:
    """Return the typed model registered for ``color_space``."""
    return MODEL_REGISTRY[ColorSpace.from_name(color_space)]
