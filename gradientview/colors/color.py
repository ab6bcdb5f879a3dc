from __future__ import annotations
from .color_base import ColorBase
from .rgb import rgb_tuple_to_class
from ..types.format_type import FormatType

unified_tuple_to_class: dict[tuple[str, FormatType], type[ColorBase]] = {**rgb_tuple_to_class}
