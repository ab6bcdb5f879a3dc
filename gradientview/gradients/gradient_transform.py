from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from ..defaults import DEFAULT_END_POINT, DEFAULT_KIND, DEFAULT_START_POINT
from ..types.geometry_types import Point, Size, SizeInput, as_point, as_size
from ..types.gradient_kind import Axial, Conic, GradientKind, LayerType, Radial
from .stops import resolve_locations
from .transforms import axial_transform, conic_transform, radial_transform
from .validation import validate_kind, validate_stops


def _as_tuple(values: Optional[Sequence]) -> Optional[Tuple]:
    return None if values is None else tuple(values)


def _as_float_tuple(values: Optional[Sequence[float]]) -> Optional[Tuple[float, ...]]:
    return None if values is None else tuple(float(v) for v in values)


@dataclass(frozen=True)
class GradientSpec:
    """
    What the caller wants to see.

    Attributes:
        colors: Stop colours, first to last. Set at least two.
        locations: Stop locations from 0 (start) to 1 (end). When omitted the
            colours are distributed uniformly.
        start_point: Relative coordinates; (0, 0) is the top left corner and
            (1, 1) the bottom right. See the kind classes for how each kind
            uses it.
        end_point: Same coordinate system as ``start_point``.
        kind: ``Axial()``, ``Radial(factor)`` or ``Conic(angle)``.
    """
    colors: Optional[Tuple] = None
    locations: Optional[Tuple[float, ...]] = None
    start_point: Point = DEFAULT_START_POINT
    end_point: Point = DEFAULT_END_POINT
    kind: GradientKind = DEFAULT_KIND

    def __post_init__(self) -> None:
        # Normalize containers so specs compare and hash by value
        object.__setattr__(self, "colors", _as_tuple(self.colors))
        object.__setattr__(self, "locations", _as_float_tuple(self.locations))
        object.__setattr__(self, "start_point", as_point(self.start_point))
        object.__setattr__(self, "end_point", as_point(self.end_point))

    def replace(self, **changes) -> GradientSpec:
        """Return a copy with the given fields changed."""
        return replace(self, **changes)


@dataclass(frozen=True)
class RenderParams:
    """The quantities handed to the rendering primitive."""
    layer_type: LayerType
    locations: Optional[Tuple[float, ...]]
    start_point: Point
    end_point: Point


def transform(spec: GradientSpec, viewport_size: Optional[SizeInput] = None) -> RenderParams:
    """
    Turn a GradientSpec into RenderParams for a ``width`` by ``height`` viewport.

    Axial gradients ignore ``viewport_size``; radial and conic gradients need
    a positive one. Invalid specs raise a GradientSpecError before anything is
    computed.
    """
    size: Optional[Size] = None if viewport_size is None else as_size(viewport_size)
    kind = spec.kind

    validate_stops(spec.colors, spec.locations)
    validate_kind(kind, size)

    locations = resolve_locations(spec.colors, spec.locations)

    if isinstance(kind, Axial):
        start, end, locations = axial_transform(spec.start_point, spec.end_point, locations)
    elif isinstance(kind, Radial):
        start, end, locations = radial_transform(
            spec.start_point, spec.end_point, locations, kind.factor, size.width, size.height
        )
    elif isinstance(kind, Conic):
        start, end, locations = conic_transform(
            spec.start_point, locations, kind.angle, size.width, size.height
        )
    else:
        raise TypeError(f"Unsupported gradient kind: {kind!r}")

    return RenderParams(
        layer_type=kind.layer_type,
        locations=_as_float_tuple(locations),
        start_point=start,
        end_point=end,
    )
