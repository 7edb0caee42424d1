"""Merging partial themes over the default theme."""

from __future__ import annotations

import copy
from typing import Any, Mapping

from themestudio.themes.constants import DEFAULT_THEME, STRUCTURAL_KEYS


def merge_with_default_theme(partial: Mapping[str, Any]) -> dict[str, Any]:
    """Return a fresh theme with ``partial`` layered over the default.

    Every key of the default survives. Within each structural key the
    partial's entries replace the default's entries of the same name; when
    both sides hold a mapping (a color family, a typography group) those are
    merged one more level so sibling shades and tokens are kept.
    """
    merged = copy.deepcopy(DEFAULT_THEME)
    for key, value in partial.items():
        if key in STRUCTURAL_KEYS:
            continue
        merged[key] = copy.deepcopy(value)

    for key in STRUCTURAL_KEYS:
        override = partial.get(key)
        if not isinstance(override, Mapping):
            continue
        base = merged.get(key)
        if not isinstance(base, dict):
            merged[key] = copy.deepcopy(dict(override))
            continue
        merged[key] = _merge_level(base, override)
    return merged


def overlay_theme(current: Mapping[str, Any], partial: Mapping[str, Any]) -> dict[str, Any]:
    """Shallow-overlay ``partial`` on ``current`` and complete it with defaults."""
    combined = dict(current)
    combined.update(partial)
    return merge_with_default_theme(combined)


def _merge_level(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for name, value in override.items():
        existing = result.get(name)
        if isinstance(existing, dict) and isinstance(value, Mapping):
            group = dict(existing)
            group.update(copy.deepcopy(dict(value)))
            result[name] = group
        else:
            result[name] = copy.deepcopy(value)
    return result
