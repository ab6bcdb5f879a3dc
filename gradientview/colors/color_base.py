from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast, Self
from ..types.format_type import FormatType, format_classes, max_channel
from ..types.color_types import ColorValue, Scalar, ScalarVector, RGBATuple
from ..utils import get_dimension
from abc import ABC
from numpy import ndarray


def _rescale(value: ScalarVector, from_format: FormatType, to_format: FormatType) -> ScalarVector:
    """Rescale channel values between INT, FLOAT and PERCENTAGE formats."""
    if from_format == to_format:
        return value
    from_max = max_channel[from_format]
    to_max = max_channel[to_format]
    if to_format == FormatType.INT:
        return tuple(int(round(v / from_max * to_max)) for v in value)
    return tuple(float(v / from_max * to_max) for v in value)


class ColorBase:
    __slots__ = ("_value", "_is_frozen")  # prevents adding new attributes

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[str]
    maxima:     ClassVar[ScalarVector]
    null_value: ClassVar[ScalarVector]
    format_type: ClassVar[FormatType]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue | ColorBase) -> None:
        maxima_dim = get_dimension(self.maxima)

        if self.num_channels != maxima_dim:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped maxima")

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            value = self._from_color(value)

        # ---- Handle array input ----
        if isinstance(value, ndarray):
            if value.ndim != 1:
                raise ValueError(f"{self.mode} expects a 1-dimensional array, got shape {value.shape}")
            value = tuple(value.tolist())

        value_dim = get_dimension(value)
        if maxima_dim != value_dim:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped value")

        # clamp, then enforce the format's type
        cast_type = format_classes[self.format_type]
        value = tuple(
            cast_type(max(0, min(v, m))) for v, m in zip(cast(Tuple[Any, ...], value), self.maxima)
        )

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    def _from_color(self, color: ColorBase) -> ScalarVector:
        """Bring another color to this class's format and channel count."""
        value = _rescale(cast(ScalarVector, color.value), color.format_type, self.format_type)
        if color.num_channels == self.num_channels:
            return value
        if color.num_channels == 3 and self.num_channels == 4:
            return value + (self.maxima[-1],)
        if color.num_channels == 4 and self.num_channels == 3:
            return value[:3]
        raise ValueError(f"Cannot build {self.mode} from {color.mode}")

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.endswith('a')

    def to_format(self, format_type: FormatType) -> ColorBase:
        """Return the same color expressed in another format."""
        from .color import unified_tuple_to_class
        cls = unified_tuple_to_class[(self.mode, FormatType(format_type))]
        return cls(self)

    def to_unit_rgba(self) -> RGBATuple:
        """Unit float RGBA tuple, the form the rendering primitive consumes."""
        value = _rescale(self.value, self.format_type, FormatType.FLOAT)
        if not self.has_alpha:
            value = value + (1.0,)
        return cast(RGBATuple, tuple(float(v) for v in value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (self.mode, self.format_type, self.value) == (other.mode, other.format_type, other.value)

    def __hash__(self) -> int:
        return hash((self.mode, self.format_type, self.value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    maxima: ClassVar[ScalarVector]
    mode: ClassVar[str]
    value: ScalarVector

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Scalar:
        return self.value[self.alpha_index]

    def with_alpha(self, alpha: Scalar) -> Self:
        """Return a new instance with modified alpha channel."""
        a = max(0, min(alpha, self.maxima[self.alpha_index]))
        return self.__class__(self.value[:-1] + (a,))  # type: ignore


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
