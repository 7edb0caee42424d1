"""Tonal scale synthesis from a single base color."""

from __future__ import annotations

import logging

from themestudio.themes.colors import hex_to_hsl, hsl_to_string, to_hex
from themestudio.themes.constants import DEFAULT_COLOR_SCALE
from themestudio.themes.models import ThemeValidationError

logger = logging.getLogger(__name__)

_SATURATION_RANGE = (10.0, 100.0)
_LIGHTNESS_RANGE = (5.0, 95.0)

# shade -> (lightness delta, saturation delta); shade 400 and 500 are special-cased.
_SHADE_ADJUSTMENTS: tuple[tuple[str, float, float], ...] = (
    ("50", 40, -30),
    ("100", 30, -20),
    ("200", 20, -10),
    ("300", 10, 0),
    ("400", 5, 0),
    ("500", 0, 0),
    ("600", -10, 5),
    ("700", -20, 10),
    ("800", -30, 15),
    ("900", -40, 20),
)


def generate_color_scale(base_color: str) -> dict[str, str]:
    """Derive a 10-shade ``hsl(...)`` family from ``base_color``.

    Shade 500 reproduces the base color. Input that cannot be resolved to a
    concrete color falls back to the default blue scale.
    """
    hex_color = to_hex(base_color) if isinstance(base_color, str) else None
    if hex_color is None:
        logger.warning("Invalid color: %r, using default scale", base_color)
        return dict(DEFAULT_COLOR_SCALE)

    try:
        h, s, l = hex_to_hsl(hex_color)
    except ThemeValidationError as exc:
        logger.warning("Failed to generate color scale for %r: %s", base_color, exc)
        return dict(DEFAULT_COLOR_SCALE)

    scale: dict[str, str] = {}
    for shade, lightness_delta, saturation_delta in _SHADE_ADJUSTMENTS:
        if shade == "500":
            scale[shade] = f"hsl({hsl_to_string(h, s, l)})"
            continue
        if shade == "400":
            # step toward the middle of the lightness range
            lightness_delta = -5 if l > 50 else 5
        shade_s = _clamp(s + saturation_delta, *_SATURATION_RANGE)
        shade_l = _clamp(l + lightness_delta, *_LIGHTNESS_RANGE)
        scale[shade] = f"hsl({hsl_to_string(h, shade_s, shade_l)})"
    return scale


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
