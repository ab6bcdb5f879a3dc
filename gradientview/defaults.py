from .types.geometry_types import Point
from .types.gradient_kind import Axial
from .colors.appearance import Appearance

DEFAULT_START_POINT = Point(0.5, 0.0)
DEFAULT_END_POINT = Point(0.5, 1.0)
DEFAULT_KIND = Axial()
DEFAULT_APPEARANCE = Appearance.LIGHT
