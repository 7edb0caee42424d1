"""Color literal validation and conversion."""

from __future__ import annotations

import colorsys
import math
import re
from typing import NamedTuple

from themestudio.themes.constants import NAMED_COLORS
from themestudio.themes.models import InvalidColorError

_ALPHA = r"(0|1|1\.0+|0?\.\d+)"

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_COLOR_RE = re.compile(
    r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$", re.IGNORECASE
)
_RGBA_COLOR_RE = re.compile(
    rf"^rgba\(\s*(\d{{1,3}})\s*,\s*(\d{{1,3}})\s*,\s*(\d{{1,3}})\s*,\s*{_ALPHA}\s*\)$",
    re.IGNORECASE,
)
_HSL_COLOR_RE = re.compile(
    r"^hsl\(\s*(\d{1,3})\s*,\s*(\d{1,3})%\s*,\s*(\d{1,3})%\s*\)$", re.IGNORECASE
)
# CSS Color 4 space-separated form, as emitted by the scale generator.
_HSL_SPACE_COLOR_RE = re.compile(
    rf"^hsl\(\s*(\d{{1,3}})\s+(\d{{1,3}})%\s+(\d{{1,3}})%\s*(?:/\s*{_ALPHA}\s*)?\)$",
    re.IGNORECASE,
)
_HSLA_COLOR_RE = re.compile(
    rf"^hsla\(\s*(\d{{1,3}})\s*,\s*(\d{{1,3}})%\s*,\s*(\d{{1,3}})%\s*,\s*{_ALPHA}\s*\)$",
    re.IGNORECASE,
)

_TRANSPARENT_VARIABLE = "0 0% 0% / 0"


class HSL(NamedTuple):
    """Hue in degrees, saturation and lightness in percent."""

    h: float
    s: float
    l: float


class _ParsedColor(NamedTuple):
    kind: str
    channels: tuple[int, int, int]
    alpha: str | None
    raw: tuple[str, str, str]


def is_valid_color(value: object) -> bool:
    """Return True if ``value`` is a supported color literal."""
    if not value or not isinstance(value, str):
        return False
    cleaned = value.strip()
    if _HEX_COLOR_RE.match(cleaned):
        return True
    if _parse_functional(cleaned) is not None:
        return True
    return _is_named_color(cleaned)


def hsl_to_string(h: float, s: float, l: float) -> str:
    return f"{_round_half_up(h)} {_round_half_up(s)}% {_round_half_up(l)}%"


def hex_to_hsl(hex_color: str) -> HSL:
    """Convert ``#rgb``/``#rrggbb`` to HSL."""
    cleaned = hex_color.strip()
    if not _HEX_COLOR_RE.match(cleaned):
        raise InvalidColorError(f"Invalid hex color: {hex_color!r}")
    digits = _expand_hex(cleaned)
    r = int(digits[0:2], 16) / 255
    g = int(digits[2:4], 16) / 255
    b = int(digits[4:6], 16) / 255

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2
    if max_c == min_c:
        return HSL(0.0, 0.0, lightness * 100)

    diff = max_c - min_c
    if lightness > 0.5:
        saturation = diff / (2 - max_c - min_c)
    else:
        saturation = diff / (max_c + min_c)

    if max_c == r:
        hue = ((g - b) / diff + (6 if g < b else 0)) / 6
    elif max_c == g:
        hue = ((b - r) / diff + 2) / 6
    else:
        hue = ((r - g) / diff + 4) / 6

    return HSL(hue * 360, saturation * 100, lightness * 100)


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    return hex_to_hsl("#" + "".join(f"{channel:02x}" for channel in (r, g, b)))


def color_to_hsl_variable(color: str) -> str:
    """Convert a color literal to the ``"H S% L%"`` style-variable form.

    Colors with alpha become ``"H S% L% / A"``. Keywords without a fixed
    value (``currentColor``, ``inherit``, ``initial``, ``unset``) are
    returned unchanged.
    """
    if not is_valid_color(color):
        raise InvalidColorError(f"Invalid color: {color}")
    cleaned = color.strip()

    if _HEX_COLOR_RE.match(cleaned):
        h, s, l = hex_to_hsl(cleaned)
        return hsl_to_string(h, s, l)

    parsed = _parse_functional(cleaned)
    if parsed is not None:
        if parsed.kind == "hsl":
            h_raw, s_raw, l_raw = parsed.raw
            value = f"{h_raw} {s_raw}% {l_raw}%"
        else:
            value = hsl_to_string(*rgb_to_hsl(*parsed.channels))
        if parsed.alpha is not None:
            value = f"{value} / {parsed.alpha}"
        return value

    hex_value = NAMED_COLORS.get(cleaned.lower())
    if hex_value is not None:
        return hsl_to_string(*hex_to_hsl(hex_value))
    if cleaned.lower() == "transparent":
        return _TRANSPARENT_VARIABLE
    return cleaned


def to_hex(color: str) -> str | None:
    """Normalize a color literal to ``#rrggbb``; alpha is dropped.

    Returns None for invalid input and for keywords without a fixed value.
    """
    if not is_valid_color(color):
        return None
    cleaned = color.strip()
    if _HEX_COLOR_RE.match(cleaned):
        return "#" + _expand_hex(cleaned).lower()

    parsed = _parse_functional(cleaned)
    if parsed is None:
        return NAMED_COLORS.get(cleaned.lower())
    if parsed.kind == "rgb":
        r, g, b = parsed.channels
    else:
        h, s, l = parsed.channels
        # colorsys uses HLS ordering with all components in 0..1
        r_f, g_f, b_f = colorsys.hls_to_rgb((h % 360) / 360, l / 100, s / 100)
        r, g, b = (_round_half_up(channel * 255) for channel in (r_f, g_f, b_f))
    return f"#{r:02x}{g:02x}{b:02x}"


def _parse_functional(value: str) -> _ParsedColor | None:
    for kind, pattern in (
        ("rgb", _RGB_COLOR_RE),
        ("rgb", _RGBA_COLOR_RE),
        ("hsl", _HSL_COLOR_RE),
        ("hsl", _HSL_SPACE_COLOR_RE),
        ("hsl", _HSLA_COLOR_RE),
    ):
        match = pattern.match(value)
        if match is None:
            continue
        groups = match.groups()
        raw = (groups[0], groups[1], groups[2])
        alpha = groups[3] if len(groups) > 3 else None
        channels = (int(raw[0]), int(raw[1]), int(raw[2]))
        if not _channels_in_range(kind, channels):
            return None
        return _ParsedColor(kind=kind, channels=channels, alpha=alpha, raw=raw)
    return None


def _channels_in_range(kind: str, channels: tuple[int, int, int]) -> bool:
    if kind == "rgb":
        return all(0 <= channel <= 255 for channel in channels)
    h, s, l = channels
    return 0 <= h <= 360 and 0 <= s <= 100 and 0 <= l <= 100


def _is_named_color(value: str) -> bool:
    return value.lower() in NAMED_COLORS


def _expand_hex(hex_color: str) -> str:
    digits = hex_color[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return digits


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
