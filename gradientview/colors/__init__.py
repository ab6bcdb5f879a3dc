"""
Gradientview Color Classes
==========================

Immutable RGB(A) colors in three formats, plus appearance-dependent colors.

Scalar Usage
-----------
>>> from gradientview.colors.rgb import RGB, RGBA
>>>
>>> color = RGB((255, 128, 0))
>>> print(color.value)  # (255, 128, 0)
>>> unit = color.to_format("float")
>>>
>>> rgba = RGBA((255, 128, 0, 255))
>>> print(rgba.alpha)  # 255
>>> semi_transparent = rgba.with_alpha(128)

Dynamic Colors
--------------
>>> from gradientview.colors import Appearance, DynamicColor
>>> ink = DynamicColor(light=RGB((0, 0, 0)), dark=RGB((255, 255, 255)))
>>> ink.resolve(Appearance.DARK).value  # (255, 255, 255)

Notes
-----
- Values are clamped to the format's maxima during initialization
- Instances are frozen after initialization
- Converting between formats never changes the color space
"""

from .appearance import Appearance
from .color_base import ColorBase
from .color import unified_tuple_to_class
from .dynamic import DynamicColor
from .rgb import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
    RGB,
    RGBA,
)

__all__ = [
    "Appearance",
    "ColorBase",
    "DynamicColor",
    "unified_tuple_to_class",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "ColorPercentageRGB",
    "ColorPercentageRGBA",
    "RGB",
    "RGBA",
]
