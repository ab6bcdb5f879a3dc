from ..colors.appearance import Appearance
from ..colors.color_base import ColorBase
from ..colors.dynamic import DynamicColor
from ..colors.rgb import ColorRGBAINT, ColorRGBINT, ColorUnitRGB, ColorUnitRGBA
from ..types.color_types import ColorElement, RGBATuple
from typing import Optional, Sequence, Tuple
import re
import numpy as np


HEX_COLOR = re.compile(r"#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})")

ColorInput = ColorElement | ColorBase | DynamicColor | np.ndarray | str


def validate_and_return_1d_array(arr: np.ndarray) -> np.ndarray:
    if arr.ndim != 1:
        raise ValueError("Input array must be 1-dimensional.")
    return arr


def parse_hex_color(text: str) -> ColorBase:
    """Parse ``#rrggbb`` or ``#rrggbbaa`` into an integer RGB(A) color."""
    if not HEX_COLOR.fullmatch(text):
        raise ValueError(f"Color isn't in hex format: {text}")
    channels = tuple(int(text[i:i + 2], 16) for i in range(1, len(text), 2))
    if len(channels) == 4:
        return ColorRGBAINT(channels)
    return ColorRGBINT(channels)


def _tuple_to_color(values: Tuple) -> ColorBase:
    # Bare tuples are unit floats unless any channel is an int above 1.
    is_int = all(isinstance(v, (int, np.integer)) for v in values) and any(v > 1 for v in values)
    if len(values) == 3:
        return ColorRGBINT(values) if is_int else ColorUnitRGB(values)
    if len(values) == 4:
        return ColorRGBAINT(values) if is_int else ColorUnitRGBA(values)
    raise ValueError(f"Expected 3 or 4 channels, got {len(values)}")


def normalize_color_input(color_input: ColorInput, appearance: Appearance = Appearance.LIGHT) -> ColorBase:
    if isinstance(color_input, DynamicColor):
        return color_input.resolve(appearance)
    elif isinstance(color_input, ColorBase):
        return color_input
    elif isinstance(color_input, str):
        return parse_hex_color(color_input)
    elif isinstance(color_input, np.ndarray):
        return _tuple_to_color(tuple(validate_and_return_1d_array(color_input).tolist()))
    elif isinstance(color_input, (tuple, list)):
        return _tuple_to_color(tuple(color_input))
    else:
        raise TypeError("Unsupported color input type.")


def resolve_colors(colors: Optional[Sequence[ColorInput]], appearance: Appearance = Appearance.LIGHT) -> Optional[Tuple[RGBATuple, ...]]:
    """Resolve colours to unit RGBA tuples for the given appearance. None stays None."""
    if colors is None:
        return None
    return tuple(normalize_color_input(c, appearance).to_unit_rgba() for c in colors)
