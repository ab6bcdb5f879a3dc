from __future__ import annotations
from typing import Tuple, Union
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorElement = Union[Scalar, ScalarVector]
ColorValue = Union[ColorElement, ndarray]
RGBATuple = Tuple[float, float, float, float]
