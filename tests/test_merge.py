"""Tests for merging partial themes over the default."""

from __future__ import annotations

from themestudio.themes.constants import DEFAULT_THEME
from themestudio.themes.merge import merge_with_default_theme, overlay_theme


def test_empty_partial_yields_default_theme() -> None:
    merged = merge_with_default_theme({})
    assert merged == DEFAULT_THEME
    assert merged is not DEFAULT_THEME


def test_shade_override_keeps_sibling_shades() -> None:
    merged = merge_with_default_theme(
        {"name": "Ocean", "colors": {"primary": {"500": "#0ea5e9"}}}
    )
    assert merged["name"] == "Ocean"
    assert merged["colors"]["primary"]["500"] == "#0ea5e9"
    assert merged["colors"]["primary"]["50"] == DEFAULT_THEME["colors"]["primary"]["50"]
    assert merged["colors"]["secondary"] == DEFAULT_THEME["colors"]["secondary"]


def test_new_family_and_typography_group_are_added() -> None:
    merged = merge_with_default_theme(
        {
            "colors": {"brand": {"500": "#ff0000"}},
            "typography": {
                "fontSize": {"base": "1.125rem"},
                "lineHeight": {"normal": "1.5"},
            },
        }
    )
    assert merged["colors"]["brand"] == {"500": "#ff0000"}
    assert merged["typography"]["fontSize"]["base"] == "1.125rem"
    assert merged["typography"]["fontSize"]["xs"] == "0.75rem"
    assert merged["typography"]["lineHeight"] == {"normal": "1.5"}
    assert merged["typography"]["fontFamily"] == DEFAULT_THEME["typography"]["fontFamily"]


def test_token_maps_merge_by_key() -> None:
    merged = merge_with_default_theme({"spacing": {"16": "4rem"}, "borderRadius": {"md": "4px"}})
    assert merged["spacing"]["16"] == "4rem"
    assert merged["spacing"]["4"] == "1rem"
    assert merged["borderRadius"]["md"] == "4px"
    assert merged["borderRadius"]["full"] == "9999px"


def test_extra_keys_are_kept() -> None:
    merged = merge_with_default_theme({"meta": {"author": "someone"}})
    assert merged["meta"] == {"author": "someone"}


def test_merge_does_not_alias_inputs_or_defaults() -> None:
    partial = {"colors": {"primary": {"500": "#0ea5e9"}}}
    merged = merge_with_default_theme(partial)
    merged["colors"]["primary"]["500"] = "#000000"
    merged["colors"]["secondary"]["50"] = "#000000"
    assert partial["colors"]["primary"]["500"] == "#0ea5e9"
    assert DEFAULT_THEME["colors"]["secondary"]["50"] == "#f8fafc"


def test_overlay_replaces_top_level_keys_of_current() -> None:
    current = merge_with_default_theme({"name": "A", "colors": {"brand": {"500": "#ff0000"}}})
    overlaid = overlay_theme(current, {"name": "B"})
    assert overlaid["name"] == "B"
    assert overlaid["colors"]["brand"] == {"500": "#ff0000"}
