"""
Gradientview - Axial, Radial and Conic Gradients for Two-Point Primitives
=========================================================================

Rendering primitives such as a gradient layer only interpolate between a
start and an end point. This library computes the points and stop locations
that make them draw correct-looking axial, radial and conic gradients on
rectangular views.

Quick Start
-----------
>>> from gradientview import GradientSpec, Radial, transform
>>>
>>> spec = GradientSpec(
...     colors=["#3dc5ff", "#ffb89c"],
...     start_point=(0.5, 1.0),
...     end_point=(0.0, 0.0),
...     kind=Radial(factor=0.75),
... )
>>> params = transform(spec, viewport_size=(320, 480))
>>> params.layer_type, params.start_point, params.end_point, params.locations

Modules
-------
- gradients: GradientSpec, RenderParams, the per-kind transforms
- colors: immutable RGB(A) colors and appearance-dependent colors
- view: an explicit host keeping a primitive's state up to date
- samples: preview gradients
"""

from .types import Axial, Conic, FormatType, GradientKind, LayerType, Point, Radial, Size
from .errors import (
    GradientSpecError,
    InsufficientStopsError,
    StopCountMismatchError,
    DegenerateFactorError,
    DegenerateViewportError,
)
from .colors import (
    Appearance,
    ColorBase,
    DynamicColor,
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
)
from .gradients import (
    GradientSpec,
    RenderParams,
    transform,
    default_locations,
    axial_transform,
    radial_transform,
    conic_transform,
)
from .normalizers import resolve_colors
from .view import GradientLayer, GradientView

__version__ = "1.0.0"

__all__ = [
    # geometry and kinds
    "Point",
    "Size",
    "Axial",
    "Radial",
    "Conic",
    "GradientKind",
    "LayerType",
    "FormatType",
    # errors
    "GradientSpecError",
    "InsufficientStopsError",
    "StopCountMismatchError",
    "DegenerateFactorError",
    "DegenerateViewportError",
    # colors
    "Appearance",
    "ColorBase",
    "DynamicColor",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "ColorPercentageRGB",
    "ColorPercentageRGBA",
    "resolve_colors",
    # transforms
    "GradientSpec",
    "RenderParams",
    "transform",
    "default_locations",
    "axial_transform",
    "radial_transform",
    "conic_transform",
    # host
    "GradientLayer",
    "GradientView",
    # Version
    "__version__",
]
