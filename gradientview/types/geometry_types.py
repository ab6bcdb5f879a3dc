from __future__ import annotations
from typing import NamedTuple, Sequence, Tuple, Union
import numpy as np


class Point(NamedTuple):
    """A point in relative viewport coordinates (0, 0 top left, 1, 1 bottom right)."""
    x: float
    y: float


class Size(NamedTuple):
    width: float
    height: float


PointInput = Union[Point, Tuple[float, float], Sequence[float], np.ndarray]
SizeInput = Union[Size, Tuple[float, float], Sequence[float]]


def as_point(value: PointInput) -> Point:
    """Coerce a 2-sequence into a Point of floats."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


def as_size(value: SizeInput) -> Size:
    if isinstance(value, Size):
        return value
    width, height = value
    return Size(float(width), float(height))
