from .format_type import FormatType
from .geometry_types import Point, Size, as_point, as_size
from .gradient_kind import Axial, Conic, GradientKind, LayerType, Radial

__all__ = [
    "FormatType",
    "Point",
    "Size",
    "as_point",
    "as_size",
    "Axial",
    "Radial",
    "Conic",
    "GradientKind",
    "LayerType",
]
