"""Theme engine exports."""

from themestudio.themes.constants import DEFAULT_THEME, DEFAULT_THEME_NAME
from themestudio.themes.models import (
    InvalidColorError,
    ThemeState,
    ThemeUpdateOptions,
    ThemeValidationError,
    ValidationIssue,
)
from themestudio.themes.service import DebouncedThemeUpdater, ThemeManager

__all__ = [
    "DEFAULT_THEME",
    "DEFAULT_THEME_NAME",
    "DebouncedThemeUpdater",
    "InvalidColorError",
    "ThemeManager",
    "ThemeState",
    "ThemeUpdateOptions",
    "ThemeValidationError",
    "ValidationIssue",
]
