from .presets import (
    AXIAL_SAMPLE,
    CONIC_SAMPLE,
    RADIAL_FACTOR_SAMPLE,
    RADIAL_SAMPLE,
    SAMPLES,
    stripe_colors,
    stripe_locations,
)

__all__ = [
    "AXIAL_SAMPLE",
    "RADIAL_SAMPLE",
    "RADIAL_FACTOR_SAMPLE",
    "CONIC_SAMPLE",
    "SAMPLES",
    "stripe_colors",
    "stripe_locations",
]
