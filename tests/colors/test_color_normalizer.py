import numpy as np
import pytest

from gradientview.colors import Appearance, ColorRGBAINT, ColorRGBINT, ColorUnitRGB, ColorUnitRGBA, DynamicColor
from gradientview.normalizers import normalize_color_input, parse_hex_color, resolve_colors


def test_parse_hex_color():
    assert parse_hex_color("#ff8000") == ColorRGBINT((255, 128, 0))
    assert parse_hex_color("#FF800080") == ColorRGBAINT((255, 128, 0, 128))


@pytest.mark.parametrize("text", ["ff8000", "#ff80", "#gg0000", "#ff800"])
def test_parse_hex_color_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_hex_color(text)


def test_normalize_tuples():
    assert normalize_color_input((255, 0, 0)) == ColorRGBINT((255, 0, 0))
    assert normalize_color_input((1.0, 0.5, 0.0)) == ColorUnitRGB((1.0, 0.5, 0.0))
    assert normalize_color_input([1.0, 0.5, 0.0, 0.5]) == ColorUnitRGBA((1.0, 0.5, 0.0, 0.5))
    assert normalize_color_input((0, 128, 255, 255)) == ColorRGBAINT((0, 128, 255, 255))


def test_normalize_arrays():
    assert normalize_color_input(np.array([0.0, 1.0, 0.0])) == ColorUnitRGB((0.0, 1.0, 0.0))
    with pytest.raises(ValueError):
        normalize_color_input(np.zeros((2, 3)))


def test_normalize_passes_colors_through():
    color = ColorRGBINT((1, 2, 3))
    assert normalize_color_input(color) is color


def test_normalize_resolves_dynamic_colors():
    ink = DynamicColor(light=ColorRGBINT((0, 0, 0)), dark=ColorRGBINT((255, 255, 255)))
    assert normalize_color_input(ink, Appearance.DARK) == ColorRGBINT((255, 255, 255))
    assert normalize_color_input(ink) == ColorRGBINT((0, 0, 0))


def test_normalize_rejects_unsupported_types():
    with pytest.raises(TypeError):
        normalize_color_input(object())
    with pytest.raises(ValueError):
        normalize_color_input((1, 2))


def test_resolve_colors():
    ink = DynamicColor(light=ColorRGBINT((0, 0, 0)), dark=ColorRGBINT((255, 255, 255)))
    colors = ["#ff0000", ink, (0.0, 0.0, 1.0, 0.5)]
    assert resolve_colors(colors, Appearance.LIGHT) == (
        (1.0, 0.0, 0.0, 1.0),
        (0.0, 0.0, 0.0, 1.0),
        (0.0, 0.0, 1.0, 0.5),
    )
    assert resolve_colors(colors, Appearance.DARK)[1] == (1.0, 1.0, 1.0, 1.0)


def test_resolve_colors_none():
    assert resolve_colors(None) is None
