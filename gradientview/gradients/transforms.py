"""
Per-kind geometry for the two-point rendering primitive.

The primitive interpolates linearly between normalized stop locations along
an axis, around an ellipse or around a cone. These functions convert the
intuitive description of a gradient into the start point, end point and
locations that make the primitive's output look right on a ``width`` by
``height`` viewport.
"""
from __future__ import annotations
from typing import Optional, Tuple

import numpy as np

from ..types.geometry_types import Point

TAU = 2.0 * np.pi

Locations = Optional[np.ndarray]
TransformResult = Tuple[Point, Point, Locations]


def axial_transform(start_point: Point, end_point: Point, locations: Locations) -> TransformResult:
    """Linear gradients are what the primitive draws natively."""
    return start_point, end_point, locations


def radial_transform(
    start_point: Point,
    end_point: Point,
    locations: Locations,
    factor: float,
    width: float,
    height: float,
) -> TransformResult:
    """
    Circular gradient centred on ``start_point`` passing through ``end_point``.

    The radius is measured in pixels so the circle stays round on a
    non-square viewport. A ``factor`` below 1 pushes the centre away from the
    end point by ``1 / factor`` and compresses the stops towards the end by
    the same proportion, so the stops stay where they appear with factor 1
    while the curvature flattens.
    """
    dx = (end_point.x - start_point.x) * width
    dy = (end_point.y - start_point.y) * height
    r = np.sqrt(dx * dx + dy * dy)

    # end + (start - end) / factor, rearranged so factor == 1 returns start exactly;
    # other factors can differ from that form in the last few ulps
    stretch = 1.0 / factor - 1.0
    start_x = start_point.x + (start_point.x - end_point.x) * stretch
    start_y = start_point.y + (start_point.y - end_point.y) * stretch
    end_x = start_x + r / width / factor
    end_y = start_y + r / height / factor

    if locations is not None:
        locations = locations * factor + (1.0 - factor)

    return Point(float(start_x), float(start_y)), Point(float(end_x), float(end_y)), locations


def _projected_angle(angle, width: float, height: float):
    """Angle of the unit-circle direction ``angle`` once squashed to a width:height ellipse."""
    return np.arctan2(np.sin(angle) / height, np.cos(angle) / width)


def conic_transform(
    start_point: Point,
    locations: Locations,
    angle: float,
    width: float,
    height: float,
) -> TransformResult:
    """
    Conic gradient around ``start_point`` starting at ``angle``.

    Equal angular steps on a circle are not equal steps once the viewport
    stretches the circle into an ellipse, so each location is replaced by the
    fraction of a turn its direction covers after projection, measured from
    the projected start angle and wrapped into [0, 1).

    The returned end point only anchors the sweep's starting direction.
    """
    if locations is not None:
        # Project the start angle in the same pass; location 0 then maps to exactly 0
        a = angle + np.concatenate(([0.0], locations)) * TAU
        projected = _projected_angle(a, width, height)
        b = projected[1:] - projected[0]
        c = b / TAU
        locations = c - np.floor(c)

    end_point = Point(
        float(start_point.x + np.cos(angle) / width),
        float(start_point.y + np.sin(angle) / height),
    )
    return start_point, end_point, locations
