from __future__ import annotations
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Union


class LayerType(StrEnum):
    """Gradient types understood by the rendering primitive."""
    AXIAL = "axial"
    RADIAL = "radial"
    CONIC = "conic"


@dataclass(frozen=True)
class Axial:
    """A linear gradient going from the start point to the end point."""
    layer_type: ClassVar[LayerType] = LayerType.AXIAL


@dataclass(frozen=True)
class Radial:
    """
    A circular gradient centred on the start point with the end point on its
    circumference.

    ``factor`` controls the flattening. 1 gives a regular circular gradient;
    smaller values move the apparent origin away from the start point and
    compress the stops, which gives a less curved gradient when the start
    point sits on an edge of the view.
    """
    factor: float = 1.0
    layer_type: ClassVar[LayerType] = LayerType.RADIAL


@dataclass(frozen=True)
class Conic:
    """
    A conic gradient around the start point, beginning at ``angle`` (radians).
    The end point is ignored.

    Stop locations are adjusted so the sweep looks evenly circular on a
    rectangular view, but the colours between two stops are still
    interpolated by the primitive. Use many stops for a correct-looking
    conic gradient on a non-square view.
    """
    angle: float = 0.0
    layer_type: ClassVar[LayerType] = LayerType.CONIC


GradientKind = Union[Axial, Radial, Conic]
