from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .appearance import Appearance
from .color_base import ColorBase


@dataclass(frozen=True)
class DynamicColor:
    """
    An abstract colour reference with a variant per appearance.

    ``dark`` falls back to ``light`` when not given, so a DynamicColor built
    from a single colour behaves like that colour.
    """
    light: ColorBase
    dark: Optional[ColorBase] = None

    def resolve(self, appearance: Appearance) -> ColorBase:
        if appearance == Appearance.DARK and self.dark is not None:
            return self.dark
        return self.light
