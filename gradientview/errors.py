"""Configuration errors raised before any gradient geometry is computed."""


class GradientSpecError(ValueError):
    """Base class for gradient descriptions that cannot be rendered."""


class InsufficientStopsError(GradientSpecError):
    """Fewer than two colours were given."""


class StopCountMismatchError(GradientSpecError):
    """Explicit locations do not match the number of colours."""


class DegenerateFactorError(GradientSpecError):
    """A radial flattening factor that is not strictly positive."""


class DegenerateViewportError(GradientSpecError):
    """A missing, zero or negative viewport dimension for a kind that needs one."""
