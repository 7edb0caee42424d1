"""Qt application stylesheet rendered from theme style variables."""

from __future__ import annotations

import re
from typing import Mapping

# Stylesheet roles are resolved from theme variables, with a fallback color
# used when the variable is absent or has no Qt representation.
ROLE_VARIABLES: dict[str, tuple[str, str]] = {
    "canvas": ("--color-secondary-50", "#f8fafc"),
    "surface_0": ("--color-secondary-50", "#f8fafc"),
    "surface_1": ("--color-secondary-100", "#f1f5f9"),
    "surface_2": ("--color-secondary-200", "#e2e8f0"),
    "line_soft": ("--color-secondary-200", "#e2e8f0"),
    "line_strong": ("--color-secondary-300", "#cbd5e1"),
    "text_primary": ("--color-secondary-900", "#0f172a"),
    "text_muted": ("--color-secondary-600", "#475569"),
    "text_dim": ("--color-secondary-400", "#94a3b8"),
    "accent": ("--color-primary-500", "#3b82f6"),
    "accent_hover": ("--color-primary-400", "#60a5fa"),
    "accent_press": ("--color-primary-600", "#2563eb"),
    "accent_subtle": ("--color-primary-100", "#dbeafe"),
    "focus_ring": ("--color-primary-300", "#93c5fd"),
}

FONT_VARIABLES: dict[str, tuple[str, str]] = {
    "body": ("--font-sans", "Inter, system-ui, sans-serif"),
    "mono": ("--font-mono", "JetBrains Mono, monospace"),
}

METRIC_VARIABLES: dict[str, tuple[str, str]] = {
    "text_base": ("--text-base", "16px"),
    "text_sm": ("--text-sm", "14px"),
    "radius": ("--radius-md", "6px"),
    "radius_lg": ("--radius-lg", "8px"),
    "spacing": ("--spacing-2", "8px"),
}

_HSL_VARIABLE_RE = re.compile(r"^(\d{1,3})\s+(\d{1,3})%\s+(\d{1,3})%(?:\s*/\s*([\d.]+))?$")
_LENGTH_RE = re.compile(r"^\s*(-?\d*\.?\d+)\s*(rem|em|px)?\s*$")
_REM_PX = 16


def hsl_variable_to_qss(value: str) -> str | None:
    """Render an ``"H S% L%"`` variable as a Qt style sheet color."""
    match = _HSL_VARIABLE_RE.match(value.strip())
    if match is None:
        return None
    h, s, l, alpha = match.groups()
    if alpha is None:
        return f"hsl({h}, {s}%, {l}%)"
    alpha_value = max(0.0, min(1.0, float(alpha)))
    return f"hsla({h}, {s}%, {l}%, {int(round(alpha_value * 255))})"


def resolve_roles(variables: Mapping[str, str]) -> dict[str, str]:
    """Map stylesheet roles to Qt-compatible values."""
    roles: dict[str, str] = {}
    for role, (name, fallback) in ROLE_VARIABLES.items():
        value = variables.get(name)
        roles[role] = (hsl_variable_to_qss(value) if value else None) or fallback
    for role, (name, fallback) in FONT_VARIABLES.items():
        value = variables.get(name)
        roles[role] = _quote_font_stack(value or fallback)
    for role, (name, fallback) in METRIC_VARIABLES.items():
        roles[role] = _to_px(variables.get(name)) or fallback
    return roles


def build_stylesheet(
    variables: Mapping[str, str] | None = None,
    *,
    extra_stylesheet: str = "",
) -> str:
    """Build the application stylesheet from style variables."""
    t = resolve_roles(variables or {})
    stylesheet = "\n".join(
        [
            _base_styles(t),
            _menu_styles(t),
            _form_styles(t),
            _button_styles(t),
            _scrollbar_styles(t),
        ]
    )
    extra = extra_stylesheet.strip()
    if extra:
        stylesheet = f"{stylesheet}\n\n{extra}\n"
    return stylesheet


def _to_px(value: str | None) -> str | None:
    if not value:
        return None
    match = _LENGTH_RE.match(value)
    if match is None:
        return None
    number, unit = match.groups()
    amount = float(number)
    if unit in ("rem", "em"):
        amount *= _REM_PX
    return f"{int(round(amount))}px"


def _quote_font_stack(stack: str) -> str:
    generic = {"serif", "sans-serif", "monospace", "cursive", "fantasy", "system-ui"}
    fonts = []
    for font in (part.strip().strip("\"'") for part in stack.split(",")):
        if not font:
            continue
        fonts.append(font if font in generic else f'"{font}"')
    return ", ".join(fonts)


def _base_styles(t: Mapping[str, str]) -> str:
    return f"""
QWidget {{
    background-color: {t["surface_0"]};
    color: {t["text_primary"]};
    font-family: {t["body"]};
    font-size: {t["text_base"]};
}}

QMainWindow {{
    background-color: {t["canvas"]};
}}

QLabel {{
    color: {t["text_primary"]};
    background-color: transparent;
}}

QLabel[muted="true"] {{
    color: {t["text_muted"]};
    font-size: {t["text_sm"]};
}}
"""


def _menu_styles(t: Mapping[str, str]) -> str:
    return f"""
QMenuBar {{
    background-color: {t["canvas"]};
    color: {t["text_muted"]};
    border-bottom: 1px solid {t["line_soft"]};
}}

QMenuBar::item:selected {{
    background-color: {t["surface_2"]};
    color: {t["text_primary"]};
}}

QMenu {{
    background-color: {t["surface_0"]};
    border: 1px solid {t["line_soft"]};
    padding: 4px;
}}

QMenu::item {{
    padding: 6px 22px 6px 10px;
    border-radius: {t["radius"]};
}}

QMenu::item:selected {{
    background-color: {t["surface_2"]};
}}
"""


def _form_styles(t: Mapping[str, str]) -> str:
    return f"""
QLineEdit, QPlainTextEdit, QTextEdit, QComboBox, QSpinBox {{
    background-color: {t["surface_0"]};
    border: 1px solid {t["line_soft"]};
    border-radius: {t["radius"]};
    padding: {t["spacing"]};
    selection-background-color: {t["accent_subtle"]};
    color: {t["text_primary"]};
}}

QPlainTextEdit {{
    font-family: {t["mono"]};
}}

QLineEdit:focus, QPlainTextEdit:focus, QTextEdit:focus, QComboBox:focus, QSpinBox:focus {{
    border: 1px solid {t["focus_ring"]};
}}

QCheckBox::indicator:checked {{
    background-color: {t["accent"]};
    border-color: {t["accent"]};
}}
"""


def _button_styles(t: Mapping[str, str]) -> str:
    return f"""
QPushButton {{
    background-color: {t["surface_1"]};
    color: {t["text_primary"]};
    border: 1px solid {t["line_soft"]};
    border-radius: {t["radius"]};
    padding: 6px 14px;
}}

QPushButton:hover {{
    background-color: {t["surface_2"]};
}}

QPushButton:focus {{
    border: 1px solid {t["focus_ring"]};
}}

QPushButton:disabled {{
    color: {t["text_dim"]};
    border-color: {t["line_soft"]};
}}

QPushButton[primary="true"] {{
    background-color: {t["accent"]};
    color: {t["canvas"]};
    border: 1px solid {t["accent"]};
    border-radius: {t["radius_lg"]};
}}

QPushButton[primary="true"]:hover {{
    background-color: {t["accent_hover"]};
}}

QPushButton[primary="true"]:pressed {{
    background-color: {t["accent_press"]};
}}
"""


def _scrollbar_styles(t: Mapping[str, str]) -> str:
    return f"""
QScrollBar:vertical {{
    background: transparent;
    width: 8px;
    margin: 2px;
}}

QScrollBar::handle:vertical {{
    background: {t["line_soft"]};
    min-height: 24px;
    border-radius: 4px;
}}

QScrollBar::handle:vertical:hover {{
    background: {t["line_strong"]};
}}

QScrollBar:horizontal {{
    background: transparent;
    height: 8px;
    margin: 2px;
}}

QScrollBar::handle:horizontal {{
    background: {t["line_soft"]};
    min-width: 24px;
    border-radius: 4px;
}}

QScrollBar::handle:horizontal:hover {{
    background: {t["line_strong"]};
}}
"""
