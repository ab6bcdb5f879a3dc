from __future__ import annotations
from typing import Optional, Sequence

import numpy as np

from ..errors import (
    DegenerateFactorError,
    DegenerateViewportError,
    GradientSpecError,
    InsufficientStopsError,
    StopCountMismatchError,
)
from ..types.geometry_types import Size
from ..types.gradient_kind import Axial, Conic, GradientKind, Radial


def validate_stops(colors: Optional[Sequence], locations: Optional[Sequence[float]]) -> None:
    """Reject colour/location combinations that cannot form a gradient."""
    if colors is None:
        return
    if len(colors) < 2:
        raise InsufficientStopsError(f"At least 2 colors are required, got {len(colors)}")
    if locations is not None and len(locations) != len(colors):
        raise StopCountMismatchError(
            f"Got {len(locations)} locations for {len(colors)} colors"
        )


def validate_kind(kind: GradientKind, viewport_size: Optional[Size]) -> None:
    """Reject kind parameters and viewport sizes that would give non-finite geometry."""
    if isinstance(kind, Axial):
        return
    if not isinstance(kind, (Radial, Conic)):
        raise TypeError(f"Unsupported gradient kind: {kind!r}")

    if isinstance(kind, Radial) and not (kind.factor > 0 and np.isfinite(kind.factor)):
        raise DegenerateFactorError(f"Radial factor must be positive and finite, got {kind.factor}")
    if isinstance(kind, Conic) and not np.isfinite(kind.angle):
        raise GradientSpecError(f"Conic angle must be finite, got {kind.angle}")

    if viewport_size is None:
        raise DegenerateViewportError(f"A viewport size is required for {kind.layer_type} gradients")
    width, height = viewport_size
    if not (width > 0 and height > 0 and np.isfinite(width) and np.isfinite(height)):
        raise DegenerateViewportError(
            f"Width and height must be positive and finite, got {width}x{height}"
        )
