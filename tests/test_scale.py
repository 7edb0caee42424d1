"""Tests for tonal scale generation."""

from __future__ import annotations

import logging

from themestudio.themes.colors import is_valid_color
from themestudio.themes.constants import DEFAULT_COLOR_SCALE, SHADE_KEYS
from themestudio.themes.scale import generate_color_scale


def test_scale_has_all_shades_in_order() -> None:
    scale = generate_color_scale("#3B82F6")
    assert tuple(scale) == SHADE_KEYS
    assert all(is_valid_color(value) for value in scale.values())


def test_shade_500_reproduces_base_color() -> None:
    assert generate_color_scale("#3B82F6")["500"] == "hsl(217 91% 60%)"
    assert generate_color_scale("hsl(0, 100%, 50%)")["500"] == "hsl(0 100% 50%)"


def test_light_and_dark_shades_are_clamped() -> None:
    scale = generate_color_scale("#3B82F6")
    assert scale["50"] == "hsl(217 61% 95%)"
    assert scale["600"] == "hsl(217 96% 50%)"
    assert scale["900"] == "hsl(217 100% 20%)"


def test_shade_400_steps_toward_middle_lightness() -> None:
    # light base moves darker
    assert generate_color_scale("#3B82F6")["400"] == "hsl(217 91% 55%)"
    # dark base moves lighter
    assert generate_color_scale("#1e3a8a")["400"] == "hsl(224 64% 38%)"


def test_invalid_base_falls_back_to_default_scale(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="themestudio.themes.scale"):
        scale = generate_color_scale("not-a-color")
    assert scale == DEFAULT_COLOR_SCALE
    assert scale is not DEFAULT_COLOR_SCALE
    assert "not-a-color" in caplog.text


def test_keyword_without_value_falls_back() -> None:
    assert generate_color_scale("currentColor") == DEFAULT_COLOR_SCALE
