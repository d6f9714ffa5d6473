from .color_types import ColorSpace, Components, is_hue_space
from .flags import ColorFlags, component_flag

__all__ = ["ColorSpace", "Components", "is_hue_space", "ColorFlags", "component_flag"]
