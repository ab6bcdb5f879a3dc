"""
Explicit host for a gradient: holds the spec, the viewport size and the
appearance, and keeps the primitive's state (a GradientLayer) current.

Nothing is observed. Callers report what changed:

- ``update(...)`` for spec fields and ``layout(...)`` for size changes, both
  of which recompute the geometry;
- ``set_appearance(...)``, which only re-resolves the colours.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple
import warnings

from .colors.appearance import Appearance
from .defaults import DEFAULT_APPEARANCE
from .gradients.gradient_transform import GradientSpec, RenderParams, transform
from .gradients.validation import validate_stops
from .normalizers.color_normalizer import resolve_colors
from .types.color_types import RGBATuple
from .types.geometry_types import Point, Size, SizeInput, as_size
from .types.gradient_kind import Axial, LayerType
from .utils import value_or_default


@dataclass(frozen=True)
class GradientLayer:
    """Everything the rendering primitive is configured with."""
    layer_type: LayerType
    colors: Optional[Tuple[RGBATuple, ...]]
    locations: Optional[Tuple[float, ...]]
    start_point: Point
    end_point: Point


class GradientView:
    def __init__(
        self,
        spec: Optional[GradientSpec] = None,
        size: Optional[SizeInput] = None,
        appearance: Appearance = DEFAULT_APPEARANCE,
    ) -> None:
        self._spec = value_or_default(spec, GradientSpec())
        self._size = None if size is None else as_size(size)
        self._appearance = Appearance(appearance)
        # Spec, colours and geometry the layer was last configured from
        self._layer_spec: Optional[GradientSpec] = None
        self._colors: Optional[Tuple[RGBATuple, ...]] = None
        self._params: Optional[RenderParams] = None
        self.configure()

    @property
    def spec(self) -> GradientSpec:
        return self._spec

    @property
    def size(self) -> Optional[Size]:
        return self._size

    @property
    def appearance(self) -> Appearance:
        return self._appearance

    @property
    def layer(self) -> Optional[GradientLayer]:
        """Current primitive state, or None until the geometry has been configured once."""
        if self._params is None:
            return None
        return GradientLayer(
            layer_type=self._params.layer_type,
            colors=self._colors,
            locations=self._params.locations,
            start_point=self._params.start_point,
            end_point=self._params.end_point,
        )

    def update(self, **changes) -> None:
        """
        Change spec fields (colors, locations, start_point, end_point, kind) and reconfigure.

        If the new spec is rejected the view keeps its previous spec and layer.
        """
        self._apply(replace(self._spec, **changes), self._size)

    def layout(self, width: float, height: float) -> None:
        self._apply(self._spec, Size(float(width), float(height)))

    def set_appearance(self, appearance: Appearance) -> None:
        """Re-resolve the colours for ``appearance``. The geometry is left alone."""
        appearance = Appearance(appearance)
        if self._layer_spec is not None:
            self._colors = resolve_colors(self._layer_spec.colors, appearance)
        self._appearance = appearance

    def configure(self) -> None:
        """
        Recompute the layer for the current spec and size.

        Radial and conic gradients need a positive size; until layout provides
        one the previous layer is kept and a RuntimeWarning is issued.
        """
        self._apply(self._spec, self._size)

    def _apply(self, spec: GradientSpec, size: Optional[Size]) -> None:
        if not isinstance(spec.kind, Axial) and not self._is_usable(size):
            # Colours are still checked so a bad update fails now, not at layout
            validate_stops(spec.colors, spec.locations)
            resolve_colors(spec.colors, self._appearance)
            warnings.warn(
                f"Deferring {spec.kind.layer_type} gradient until the view has a positive size (got {size})",
                RuntimeWarning,
                stacklevel=3,
            )
            self._spec, self._size = spec, size
            return

        params = transform(spec, size)
        colors = resolve_colors(spec.colors, self._appearance)

        self._spec, self._size = spec, size
        self._layer_spec, self._colors, self._params = spec, colors, params

    @staticmethod
    def _is_usable(size: Optional[Size]) -> bool:
        return size is not None and size.width > 0 and size.height > 0
