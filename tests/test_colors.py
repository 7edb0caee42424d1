"""Tests for color literal validation and conversion."""

from __future__ import annotations

import pytest

from themestudio.themes.colors import (
    color_to_hsl_variable,
    hex_to_hsl,
    hsl_to_string,
    is_valid_color,
    rgb_to_hsl,
    to_hex,
)
from themestudio.themes.models import InvalidColorError, ThemeValidationError


class TestIsValidColor:
    """Tests for is_valid_color."""

    @pytest.mark.parametrize(
        "value",
        [
            "#fff",
            "#3B82F6",
            "rgb(59, 130, 246)",
            "RGB(0,0,0)",
            "rgba(0, 0, 0, 0.5)",
            "rgba(0,0,0,1)",
            "hsl(217, 91%, 60%)",
            "hsl(217 91% 60%)",
            "hsl(217 91% 60% / .5)",
            "hsla(217, 91%, 60%, .25)",
            "red",
            "Transparent",
            "currentColor",
            "inherit",
        ],
    )
    def test_accepts_supported_syntaxes(self, value):
        assert is_valid_color(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "#12",
            "#12345",
            "#ggg",
            "rgb(0, 0)",
            "rgba(0, 0, 0, 2)",
            "blue-ish",
            "var(--color-primary-500)",
        ],
    )
    def test_rejects_malformed_literals(self, value):
        assert is_valid_color(value) is False

    @pytest.mark.parametrize("value", ["rgb(999, 0, 0)", "rgb(0, 256, 0)", "hsl(400, 50%, 50%)", "hsl(0, 101%, 50%)"])
    def test_rejects_out_of_range_channels(self, value):
        """Channel values outside their numeric range are invalid."""
        assert is_valid_color(value) is False

    @pytest.mark.parametrize("value", [None, 42, ["#fff"], {"500": "#fff"}])
    def test_rejects_non_strings(self, value):
        assert is_valid_color(value) is False


def test_hex_to_hsl_matches_reference_values() -> None:
    h, s, l = hex_to_hsl("#3B82F6")
    assert h == pytest.approx(217.2, abs=0.05)
    assert s == pytest.approx(91.2, abs=0.05)
    assert l == pytest.approx(59.8, abs=0.05)


def test_hex_to_hsl_grayscale_has_no_hue() -> None:
    assert hex_to_hsl("#808080") == (0.0, 0.0, pytest.approx(50.2, abs=0.05))


def test_hex_to_hsl_rejects_non_hex() -> None:
    with pytest.raises(InvalidColorError):
        hex_to_hsl("rgb(0, 0, 0)")


def test_rgb_to_hsl_agrees_with_hex() -> None:
    assert rgb_to_hsl(59, 130, 246) == hex_to_hsl("#3b82f6")


def test_hsl_to_string_rounds_half_up() -> None:
    assert hsl_to_string(217.5, 90.5, 59.49) == "218 91% 59%"


class TestColorToHslVariable:
    """Tests for color_to_hsl_variable."""

    @pytest.mark.parametrize(
        ("color", "expected"),
        [
            ("#3B82F6", "217 91% 60%"),
            ("#abc", "210 25% 73%"),
            ("#ffffff", "0 0% 100%"),
            ("rgb(59, 130, 246)", "217 91% 60%"),
            ("hsl(217, 91%, 60%)", "217 91% 60%"),
            ("hsl(217 91% 60%)", "217 91% 60%"),
            ("white", "0 0% 100%"),
            ("Black", "0 0% 0%"),
        ],
    )
    def test_converts_to_triplet(self, color, expected):
        assert color_to_hsl_variable(color) == expected

    def test_alpha_is_appended(self):
        assert color_to_hsl_variable("rgba(0, 0, 0, 0.5)") == "0 0% 0% / 0.5"
        assert color_to_hsl_variable("hsla(10, 20%, 30%, 0.4)") == "10 20% 30% / 0.4"

    def test_transparent_becomes_zero_alpha(self):
        assert color_to_hsl_variable("transparent") == "0 0% 0% / 0"

    @pytest.mark.parametrize("keyword", ["currentColor", "inherit", "initial", "unset"])
    def test_keywords_pass_through(self, keyword):
        assert color_to_hsl_variable(keyword) == keyword

    def test_invalid_color_raises(self):
        with pytest.raises(InvalidColorError) as excinfo:
            color_to_hsl_variable("not-a-color")
        assert isinstance(excinfo.value, ThemeValidationError)


class TestToHex:
    """Tests for to_hex."""

    def test_expands_and_lowercases_hex(self):
        assert to_hex("#ABC") == "#aabbcc"

    def test_converts_functional_forms(self):
        assert to_hex("rgb(59, 130, 246)") == "#3b82f6"
        assert to_hex("rgba(1, 2, 3, 0.5)") == "#010203"
        assert to_hex("hsl(0, 100%, 50%)") == "#ff0000"
        assert to_hex("hsl(120 100% 25%)") == "#008000"

    def test_named_color(self):
        assert to_hex("Navy") == "#000080"

    @pytest.mark.parametrize("value", ["inherit", "transparent", "nope", ""])
    def test_returns_none_without_fixed_value(self, value):
        assert to_hex(value) is None
