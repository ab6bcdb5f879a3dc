from .default import value_or_default
from .dimension import get_dimension

__all__ = ["value_or_default", "get_dimension"]
