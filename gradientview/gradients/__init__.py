from .gradient_transform import GradientSpec, RenderParams, transform
from .stops import default_locations, resolve_locations
from .transforms import axial_transform, conic_transform, radial_transform

__all__ = [
    "GradientSpec",
    "RenderParams",
    "transform",
    "default_locations",
    "resolve_locations",
    "axial_transform",
    "radial_transform",
    "conic_transform",
]
