"""Ready-made gradients, handy for previews and as usage examples."""
from typing import List, Sequence, TypeVar

from ..colors.rgb import ColorUnitRGB
from ..gradients.gradient_transform import GradientSpec
from ..types.gradient_kind import Axial, Conic, Radial

T = TypeVar("T")


def stripe_colors(first: T, second: T, count: int) -> List[T]:
    """``count`` repetitions of two hard-edged stripes: first, first, second, second."""
    return [first, first, second, second] * count


def stripe_locations(count: int) -> List[float]:
    """Locations pairing with ``stripe_colors`` so every stripe has the same width."""
    return [((n + 1) // 2) / (count * 2) for n in range(count * 4)]


def _unit_colors(values: Sequence[Sequence[float]]) -> List[ColorUnitRGB]:
    return [ColorUnitRGB(tuple(v)) for v in values]


AXIAL_SAMPLE = GradientSpec(
    colors=_unit_colors([
        (0.2394109989, 0.7730839539, 1.0),
        (0.607675281, 0.8927237161, 1.0),
        (1.0, 0.7196065661, 0.6126143348),
    ]),
    start_point=(0.5, 0.0),
    end_point=(0.5, 1.0),
    kind=Axial(),
)

RADIAL_SAMPLE = GradientSpec(
    colors=_unit_colors([
        (0.9764705896, 0.850980401, 0.5490196347),
        (0.9568627477, 0.6588235497, 0.5450980663),
        (0.3647058904, 0.06666667014, 0.9686274529),
    ]),
    locations=(0.05, 0.15, 1.0),
    start_point=(0.5, 1.0),
    end_point=(0.0, 0.0),
    kind=Radial(factor=1.0),
)

RADIAL_FACTOR_SAMPLE = GradientSpec(
    colors=stripe_colors(
        ColorUnitRGB((1.0, 1.0, 1.0)),
        ColorUnitRGB((0.8103209438, 0.9504802514, 1.0)),
        count=6,
    ),
    locations=stripe_locations(6),
    start_point=(1.0, 1.0),
    end_point=(0.0, 0.0),
    kind=Radial(factor=0.75),
)

CONIC_SAMPLE = GradientSpec(
    colors=stripe_colors(
        ColorUnitRGB((0.9098039269, 0.4784313738, 0.6431372762)),
        ColorUnitRGB((1.0, 0.7098278411, 0.8206208596)),
        count=9,
    ),
    locations=stripe_locations(9),
    start_point=(0.5, 0.7),
    kind=Conic(angle=0.6),
)

SAMPLES = {
    "axial": AXIAL_SAMPLE,
    "radial": RADIAL_SAMPLE,
    "radial_factor": RADIAL_FACTOR_SAMPLE,
    "conic": CONIC_SAMPLE,
}
