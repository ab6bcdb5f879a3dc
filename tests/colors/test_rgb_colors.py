import numpy as np
import pytest

from gradientview.colors import (
    Appearance,
    ColorPercentageRGB,
    ColorRGBAINT,
    ColorRGBINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    DynamicColor,
)
from gradientview.types import FormatType


def test_values_are_clamped():
    assert ColorRGBINT((300, -5, 10)).value == (255, 0, 10)
    assert ColorUnitRGB((1.5, 0.5, -1.0)).value == (1.0, 0.5, 0.0)


def test_values_are_typed_for_the_format():
    color = ColorUnitRGB((1, 0, 0))
    assert all(type(v) is float for v in color.value)


def test_wrong_channel_count_raises():
    with pytest.raises(ValueError):
        ColorRGBINT((255, 0))
    with pytest.raises(ValueError):
        ColorRGBINT(np.zeros((2, 3), dtype=np.uint8))


def test_colors_are_immutable():
    color = ColorRGBINT((1, 2, 3))
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)


def test_array_input():
    assert ColorRGBINT(np.array([10, 20, 30])).value == (10, 20, 30)


def test_format_conversion():
    unit = ColorRGBINT((255, 0, 51)).to_format(FormatType.FLOAT)
    assert isinstance(unit, ColorUnitRGB)
    assert np.allclose(unit.value, (1.0, 0.0, 0.2))

    back = unit.to_format("int")
    assert back == ColorRGBINT((255, 0, 51))

    percentage = ColorUnitRGB((0.5, 0.25, 1.0)).to_format(FormatType.PERCENTAGE)
    assert isinstance(percentage, ColorPercentageRGB)
    assert np.allclose(percentage.value, (50.0, 25.0, 100.0))


def test_alpha_channel_is_added_and_dropped():
    assert ColorRGBAINT(ColorRGBINT((1, 2, 3))).value == (1, 2, 3, 255)
    assert ColorRGBINT(ColorRGBAINT((1, 2, 3, 4))).value == (1, 2, 3)
    assert ColorUnitRGBA(ColorRGBINT((255, 0, 0))).value == (1.0, 0.0, 0.0, 1.0)


def test_with_alpha():
    rgba = ColorRGBAINT((255, 128, 0, 255))
    assert rgba.alpha == 255
    assert rgba.with_alpha(128).value == (255, 128, 0, 128)
    assert rgba.with_alpha(999).alpha == 255


def test_to_unit_rgba():
    assert ColorRGBINT((255, 0, 0)).to_unit_rgba() == (1.0, 0.0, 0.0, 1.0)
    assert np.allclose(ColorRGBAINT((0, 0, 255, 51)).to_unit_rgba(), (0.0, 0.0, 1.0, 0.2))


def test_equality_and_hash():
    assert ColorRGBINT((1, 2, 3)) == ColorRGBINT((1, 2, 3))
    assert ColorRGBINT((1, 2, 3)) != ColorUnitRGB((1, 0, 0))
    assert len({ColorRGBINT((1, 2, 3)), ColorRGBINT((1, 2, 3))}) == 1


def test_dynamic_color_resolves_per_appearance():
    ink = DynamicColor(light=ColorRGBINT((0, 0, 0)), dark=ColorRGBINT((255, 255, 255)))
    assert ink.resolve(Appearance.LIGHT) == ColorRGBINT((0, 0, 0))
    assert ink.resolve(Appearance.DARK) == ColorRGBINT((255, 255, 255))


def test_dynamic_color_dark_falls_back_to_light():
    accent = DynamicColor(light=ColorRGBINT((0, 122, 255)))
    assert accent.resolve(Appearance.DARK) == accent.light
