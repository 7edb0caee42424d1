"""Theme framework constants."""

from __future__ import annotations

import copy
from typing import Any

DEFAULT_THEME_NAME = "Default Theme"
SIMPLE_THEME_NAME = "Custom Theme"

STRUCTURAL_KEYS: tuple[str, ...] = (
    "colors",
    "typography",
    "spacing",
    "borderRadius",
    "shadows",
)

SHADE_KEYS: tuple[str, ...] = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900")

# Flat color keys understood in the simple format, in precedence order.
SPECIAL_COLOR_KEYS: tuple[str, ...] = (
    "primaryDark",
    "secondaryMedium",
    "accent",
    "background",
    "foreground",
    "muted",
    "mutedForeground",
    "border",
    "input",
    "ring",
    "destructive",
    "destructiveForeground",
)

TRANSITION_PROPERTIES: tuple[str, ...] = (
    "background-color",
    "border-color",
    "color",
    "fill",
    "stroke",
    "box-shadow",
    "border-radius",
    "font-size",
    "font-weight",
    "line-height",
    "letter-spacing",
)
TRANSITION_EASING = "cubic-bezier(0.4, 0, 0.2, 1)"

DEFAULT_ANIMATION_DURATION_MS = 300
DEFAULT_DEBOUNCE_DELAY_MS = 300

# Named colors with a fixed sRGB value. Keywords map to None.
NAMED_COLORS: dict[str, str | None] = {
    "transparent": None,
    "currentcolor": None,
    "inherit": None,
    "initial": None,
    "unset": None,
    "black": "#000000",
    "white": "#ffffff",
    "red": "#ff0000",
    "green": "#008000",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "orange": "#ffa500",
    "purple": "#800080",
    "gray": "#808080",
    "grey": "#808080",
    "brown": "#a52a2a",
    "pink": "#ffc0cb",
    "cyan": "#00ffff",
    "magenta": "#ff00ff",
    "lime": "#00ff00",
    "navy": "#000080",
    "maroon": "#800000",
    "olive": "#808000",
    "teal": "#008080",
    "silver": "#c0c0c0",
    "aqua": "#00ffff",
    "fuchsia": "#ff00ff",
}

DEFAULT_COLOR_SCALE: dict[str, str] = {
    "50": "#eff6ff",
    "100": "#dbeafe",
    "200": "#bfdbfe",
    "300": "#93c5fd",
    "400": "#60a5fa",
    "500": "#3b82f6",
    "600": "#2563eb",
    "700": "#1d4ed8",
    "800": "#1e40af",
    "900": "#1e3a8a",
}

DEFAULT_THEME: dict[str, Any] = {
    "name": DEFAULT_THEME_NAME,
    "colors": {
        "primary": dict(DEFAULT_COLOR_SCALE),
        "secondary": {
            "50": "#f8fafc",
            "100": "#f1f5f9",
            "200": "#e2e8f0",
            "300": "#cbd5e1",
            "400": "#94a3b8",
            "500": "#64748b",
            "600": "#475569",
            "700": "#334155",
            "800": "#1e293b",
            "900": "#0f172a",
        },
    },
    "typography": {
        "fontFamily": {
            "sans": ["Inter", "system-ui", "sans-serif"],
            "mono": ["JetBrains Mono", "monospace"],
        },
        "fontSize": {
            "xs": "0.75rem",
            "sm": "0.875rem",
            "base": "1rem",
            "lg": "1.125rem",
            "xl": "1.25rem",
            "2xl": "1.5rem",
            "3xl": "1.875rem",
            "4xl": "2.25rem",
        },
        "fontWeight": {
            "normal": 400,
            "medium": 500,
            "semibold": 600,
            "bold": 700,
        },
    },
    "spacing": {
        "0": "0",
        "1": "0.25rem",
        "2": "0.5rem",
        "3": "0.75rem",
        "4": "1rem",
        "5": "1.25rem",
        "6": "1.5rem",
        "8": "2rem",
        "10": "2.5rem",
        "12": "3rem",
    },
    "borderRadius": {
        "none": "0",
        "sm": "0.125rem",
        "md": "0.375rem",
        "lg": "0.5rem",
        "xl": "0.75rem",
        "2xl": "1rem",
        "full": "9999px",
    },
    "shadows": {
        "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
        "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
        "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
        "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    },
}


def default_theme() -> dict[str, Any]:
    """Return a fresh copy of the default theme."""
    return copy.deepcopy(DEFAULT_THEME)
