"""
Chromaconv Color Record
=======================

``Color`` is the immutable value every conversion consumes and produces:
three components, an alpha, a ColorSpace tag and the flags marking
unspecified ("none") channels.

>>> from chromaconv.colors import Color
>>> orange = Color("srgb", 0.8235, 0.4118, 0.1176)
>>> hsl = orange.to_color_space("hsl")
>>> hsl.color_space
<ColorSpace.HSL: 'hsl'>

Pass ``None`` for a component to mark it unspecified; the stored value is
``0.0`` and the matching bit is set in ``flags``.
"""
from .color_base import Color
from .color import to_color_space

__all__ = ['Color', 'to_color_space']
