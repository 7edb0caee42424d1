"""Theme compilation helpers."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from themestudio.themes.colors import color_to_hsl_variable
from themestudio.themes.models import ThemeValidationError
from themestudio.ui.theme import build_stylesheet

logger = logging.getLogger(__name__)

# typography group -> variable prefix
_TYPOGRAPHY_PREFIXES: tuple[tuple[str, str], ...] = (
    ("fontSize", "--text"),
    ("fontWeight", "--font-weight"),
    ("lineHeight", "--line-height"),
    ("letterSpacing", "--letter-spacing"),
)

_TOKEN_PREFIXES: tuple[tuple[str, str], ...] = (
    ("spacing", "--spacing"),
    ("borderRadius", "--radius"),
    ("shadows", "--shadow"),
)


def generate_css_variables(theme: Mapping[str, Any]) -> dict[str, str]:
    """Flatten a theme into style-variable assignments.

    A color leaf that cannot be converted is logged and left out; the rest
    of the theme still compiles.
    """
    variables: dict[str, str] = {}

    colors = theme.get("colors")
    if isinstance(colors, Mapping):
        for family, shades in colors.items():
            if not isinstance(shades, Mapping):
                continue
            for shade, color in shades.items():
                try:
                    variables[f"--color-{family}-{shade}"] = color_to_hsl_variable(color)
                except (ThemeValidationError, TypeError, AttributeError):
                    logger.warning("Failed to convert color %s-%s: %r", family, shade, color)

    typography = theme.get("typography")
    if isinstance(typography, Mapping):
        families = typography.get("fontFamily")
        if isinstance(families, Mapping):
            for name, stack in families.items():
                if isinstance(stack, (list, tuple)):
                    variables[f"--font-{name}"] = ", ".join(str(font) for font in stack)
                else:
                    variables[f"--font-{name}"] = str(stack)
        for key, prefix in _TYPOGRAPHY_PREFIXES:
            _add_token_group(variables, typography.get(key), prefix)

    for key, prefix in _TOKEN_PREFIXES:
        _add_token_group(variables, theme.get(key), prefix)

    return variables


def generate_css_string(theme: Mapping[str, Any]) -> str:
    """Render the theme's variables as a ``:root`` declaration block."""
    variables = generate_css_variables(theme)
    rules = "\n".join(f"  {name}: {value};" for name, value in variables.items())
    return f":root {{\n{rules}\n}}"


def compile_theme_stylesheet(theme: Mapping[str, Any]) -> str:
    """Compile a theme into a Qt application stylesheet."""
    return build_stylesheet(generate_css_variables(theme))


def _add_token_group(variables: dict[str, str], group: Any, prefix: str) -> None:
    if not isinstance(group, Mapping):
        return
    for name, value in group.items():
        variables[f"{prefix}-{name}"] = str(value)
