"""Detection and conversion of the simple flat theme format.

The simple format lets a caller give one value per color role, e.g.::

    {"colors": {"primary": "#3B82F6"},
     "typography": {"fontFamily": {"primary": "Inter, sans-serif"}}}

which is expanded into the canonical nested shape with generated scales.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Mapping

from themestudio.themes.colors import is_valid_color
from themestudio.themes.constants import SIMPLE_THEME_NAME, SPECIAL_COLOR_KEYS, default_theme
from themestudio.themes.loader import validate_theme_structure
from themestudio.themes.merge import merge_with_default_theme
from themestudio.themes.models import FormatDecision, ThemeFormat, ThemeValidationError
from themestudio.themes.scale import generate_color_scale

logger = logging.getLogger(__name__)

_SCALED_FAMILIES: tuple[str, ...] = ("primary", "secondary")
_SIMPLE_COLOR_MARKERS: tuple[str, ...] = ("accent", "background", "primaryDark")
_SIMPLE_FONT_MARKERS: tuple[str, ...] = ("primary", "heading")
_FALLBACK_FONT_STACK: tuple[str, ...] = ("Inter", "system-ui", "sans-serif")


def is_simple_json_format(data: Any) -> bool:
    """Return True if ``data`` carries any flat, single-value theme field."""
    if not isinstance(data, Mapping):
        return False

    colors = data.get("colors")
    if isinstance(colors, Mapping):
        if any(isinstance(colors.get(key), str) and colors.get(key) for key in _SCALED_FAMILIES):
            return True
        if any(colors.get(key) for key in _SIMPLE_COLOR_MARKERS):
            return True

    typography = data.get("typography")
    if isinstance(typography, Mapping):
        families = typography.get("fontFamily")
        if isinstance(families, Mapping) and any(
            families.get(key) for key in _SIMPLE_FONT_MARKERS
        ):
            return True
    return False


def detect_format(data: Any) -> FormatDecision:
    """Route a decoded payload to the canonical or simple normalizer.

    Canonical validation is tried first. Only a payload that fails it and
    carries a simple-format discriminator is treated as simple; anything
    else stays canonical so its validation errors reach the caller.
    """
    validation = validate_theme_structure(data)
    if validation.is_valid:
        return FormatDecision(ThemeFormat.CANONICAL, validation)
    if is_simple_json_format(data):
        return FormatDecision(ThemeFormat.SIMPLE, validation)
    return FormatDecision(ThemeFormat.CANONICAL, validation)


def normalize_theme(data: Any) -> dict[str, Any]:
    """Turn a decoded payload of either format into a complete theme.

    Raises ThemeValidationError with the canonical issues when the payload
    is neither a valid canonical theme nor a simple one.
    """
    decision = detect_format(data)
    if decision.format is ThemeFormat.SIMPLE:
        logger.info("Detected simple theme format, converting")
        return convert_simple_json_to_theme(data)
    validation = decision.validation
    if not validation.is_valid or validation.theme is None:
        joined = "; ".join(issue.message for issue in validation.errors)
        raise ThemeValidationError(f"Invalid theme: {joined}", validation.errors)
    return merge_with_default_theme(validation.theme)


def convert_simple_json_to_theme(data: Mapping[str, Any]) -> dict[str, Any]:
    """Expand a simple-format payload into a complete canonical theme."""
    converted = default_theme()
    for key, value in data.items():
        if key not in converted:
            converted[key] = copy.deepcopy(value)
    converted["name"] = data.get("name") or SIMPLE_THEME_NAME

    colors = data.get("colors")
    if isinstance(colors, Mapping):
        converted["colors"] = _convert_colors(converted["colors"], colors)

    typography = data.get("typography")
    if isinstance(typography, Mapping):
        converted["typography"] = _convert_typography(converted["typography"], typography)

    for key in ("spacing", "borderRadius", "shadows"):
        value = data.get(key)
        if isinstance(value, Mapping):
            merged = dict(converted.get(key) or {})
            merged.update(copy.deepcopy(dict(value)))
            converted[key] = merged

    logger.debug("Converted simple theme %r", converted["name"])
    return converted


def parse_font_family(value: Any) -> list[str]:
    """Turn a comma separated font stack into a list."""
    if isinstance(value, list):
        return [str(font) for font in value]
    if isinstance(value, str):
        return [font.strip() for font in value.split(",") if font.strip()]
    return list(_FALLBACK_FONT_STACK)


def _convert_colors(base: dict[str, Any], colors: Mapping[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for family, value in colors.items():
        if family in SPECIAL_COLOR_KEYS:
            continue
        if isinstance(value, str) and family in _SCALED_FAMILIES:
            result[family] = generate_color_scale(value)
        elif isinstance(value, Mapping):
            shades = dict(result.get(family) or {})
            for shade, color in value.items():
                if is_valid_color(color):
                    shades[str(shade)] = color
                else:
                    logger.warning("Dropping invalid color colors.%s.%s: %r", family, shade, color)
            result[family] = shades

    special = [key for key in SPECIAL_COLOR_KEYS if isinstance(colors.get(key), str) and colors[key]]
    if not special:
        return result

    if "neutral" not in result:
        source = special[0]
        result["neutral"] = generate_color_scale(colors[source])
        ignored = [key for key in special[1:] if key != "accent"]
        if ignored:
            logger.warning(
                "neutral scale generated from colors.%s; ignoring %s",
                source,
                ", ".join(f"colors.{key}" for key in ignored),
            )
    if "accent" in special:
        result["accent"] = generate_color_scale(colors["accent"])
    return result


def _convert_typography(base: dict[str, Any], typography: Mapping[str, Any]) -> dict[str, Any]:
    result = dict(base)

    families = typography.get("fontFamily")
    if isinstance(families, Mapping):
        font_family = dict(result.get("fontFamily") or {})
        for key, value in families.items():
            if value:
                font_family[key] = parse_font_family(value)
        if families.get("primary") and not families.get("sans"):
            font_family["sans"] = parse_font_family(families["primary"])
        elif families.get("heading") and not families.get("sans") and not families.get("primary"):
            font_family["sans"] = parse_font_family(families["heading"])
        result["fontFamily"] = font_family

    weights = typography.get("fontWeight")
    if isinstance(weights, Mapping):
        font_weight = dict(result.get("fontWeight") or {})
        for key, value in weights.items():
            font_weight[key] = _parse_weight(value)
        result["fontWeight"] = font_weight

    for key in ("fontSize", "lineHeight", "letterSpacing"):
        value = typography.get(key)
        if isinstance(value, Mapping):
            group = dict(result.get(key) or {})
            group.update(copy.deepcopy(dict(value)))
            result[key] = group
    return result


def _parse_weight(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            return value
    return value
