"""Tests for flattening themes into style variables and stylesheets."""

from __future__ import annotations

import logging

from themestudio.themes.compiler import (
    compile_theme_stylesheet,
    generate_css_string,
    generate_css_variables,
)
from themestudio.themes.constants import DEFAULT_THEME, default_theme
from themestudio.ui.theme import build_stylesheet, hsl_variable_to_qss, resolve_roles


def _expected_count(theme: dict) -> int:
    typography = theme["typography"]
    return (
        sum(len(shades) for shades in theme["colors"].values())
        + sum(len(typography.get(key, {})) for key in ("fontFamily", "fontSize", "fontWeight"))
        + len(theme["spacing"])
        + len(theme["borderRadius"])
        + len(theme["shadows"])
    )


def test_default_theme_variable_count() -> None:
    variables = generate_css_variables(DEFAULT_THEME)
    assert len(variables) == _expected_count(DEFAULT_THEME) == 55


def test_default_theme_variable_values() -> None:
    variables = generate_css_variables(DEFAULT_THEME)
    assert variables["--color-primary-500"] == "217 91% 60%"
    assert variables["--font-sans"] == "Inter, system-ui, sans-serif"
    assert variables["--font-mono"] == "JetBrains Mono, monospace"
    assert variables["--text-base"] == "1rem"
    assert variables["--font-weight-bold"] == "700"
    assert variables["--spacing-4"] == "1rem"
    assert variables["--radius-full"] == "9999px"
    assert variables["--shadow-sm"] == "0 1px 2px 0 rgb(0 0 0 / 0.05)"


def test_colors_come_first() -> None:
    names = list(generate_css_variables(DEFAULT_THEME))
    assert all(name.startswith("--color-") for name in names[:20])
    assert not any(name.startswith("--color-") for name in names[20:])


def test_optional_typography_groups() -> None:
    theme = default_theme()
    theme["typography"]["lineHeight"] = {"normal": 1.5}
    theme["typography"]["letterSpacing"] = {"wide": "0.025em"}
    variables = generate_css_variables(theme)
    assert variables["--line-height-normal"] == "1.5"
    assert variables["--letter-spacing-wide"] == "0.025em"


def test_bad_color_leaf_is_skipped(caplog) -> None:
    theme = default_theme()
    theme["colors"]["primary"]["500"] = "not-a-color"
    with caplog.at_level(logging.WARNING, logger="themestudio.themes.compiler"):
        variables = generate_css_variables(theme)
    assert "--color-primary-500" not in variables
    assert variables["--color-primary-600"] == "221 83% 53%"
    assert len(variables) == 54
    assert "primary-500" in caplog.text


def test_missing_sections_produce_nothing() -> None:
    assert generate_css_variables({"name": "bare"}) == {}


def test_css_string_is_root_block() -> None:
    css = generate_css_string({"name": "x", "spacing": {"1": "0.25rem", "2": "0.5rem"}})
    assert css == ":root {\n  --spacing-1: 0.25rem;\n  --spacing-2: 0.5rem;\n}"


class TestStylesheet:
    """Tests for the Qt stylesheet builder."""

    def test_hsl_variable_to_qss(self):
        assert hsl_variable_to_qss("217 91% 60%") == "hsl(217, 91%, 60%)"
        assert hsl_variable_to_qss("0 0% 0% / 0.5") == "hsla(0, 0%, 0%, 128)"
        assert hsl_variable_to_qss("currentColor") is None

    def test_roles_fall_back_without_variables(self):
        roles = resolve_roles({})
        assert roles["accent"] == "#3b82f6"
        assert roles["text_base"] == "16px"
        assert roles["body"] == '"Inter", system-ui, sans-serif'

    def test_roles_convert_rem_to_px(self):
        roles = resolve_roles({"--text-base": "1.125rem", "--radius-md": "0.375rem"})
        assert roles["text_base"] == "18px"
        assert roles["radius"] == "6px"

    def test_compiled_stylesheet_uses_theme_colors(self):
        theme = default_theme()
        theme["colors"]["primary"]["500"] = "#ff0000"
        qss = compile_theme_stylesheet(theme)
        assert "background-color: hsl(0, 100%, 50%);" in qss
        assert "QPushButton[primary=\"true\"]" in qss

    def test_extra_stylesheet_is_appended(self):
        qss = build_stylesheet({}, extra_stylesheet="QLabel { color: red; }")
        assert qss.rstrip().endswith("QLabel { color: red; }")
