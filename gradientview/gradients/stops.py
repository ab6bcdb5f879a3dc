from __future__ import annotations
from typing import Optional, Sequence

import numpy as np


def default_locations(count: int) -> np.ndarray:
    """
    Evenly distribute ``count`` stop locations over [0, 1].

    Location ``i`` is ``i / (count - 1)``, so the first stop is 0 and the last
    is 1. With fewer than two stops there is nothing to distribute: 0 stops
    give an empty array and 1 stop gives ``[0.0]``.
    """
    if count < 2:
        return np.zeros(max(count, 0), dtype=np.float64)
    return np.arange(count, dtype=np.float64) / (count - 1)


def resolve_locations(
    colors: Optional[Sequence],
    locations: Optional[Sequence[float]],
) -> Optional[np.ndarray]:
    """
    Explicit locations win and are used as given (no ordering or range checks).
    Otherwise they are derived from the colour count, unless there are no
    colours at all, in which case there are no locations either.
    """
    if locations is not None:
        return np.asarray(locations, dtype=np.float64)
    if colors is None:
        return None
    return default_locations(len(colors))
