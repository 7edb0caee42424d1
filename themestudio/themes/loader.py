"""Theme payload parsing and validation."""

from __future__ import annotations

import copy
import json
from typing import Any, Mapping

from themestudio.errors import ErrorCode
from themestudio.themes.colors import is_valid_color
from themestudio.themes.models import (
    ParseResult,
    ThemeValidationError,
    ValidationIssue,
    ValidationResult,
)

_MAX_THEME_BYTES = 256 * 1024

_STRING_MAP_KEYS: tuple[str, ...] = ("spacing", "borderRadius", "shadows")
_TYPOGRAPHY_STRING_KEYS: tuple[str, ...] = ("fontSize", "letterSpacing")
_TYPOGRAPHY_SCALAR_KEYS: tuple[str, ...] = ("fontWeight", "lineHeight")

_MISSING = object()


def parse_theme(text: str) -> ParseResult:
    """Decode theme JSON text and validate it as a canonical theme."""
    try:
        data = _decode_json(text)
    except ThemeValidationError as exc:
        return ParseResult(success=False, errors=exc.issues)

    result = validate_theme_structure(data)
    if result.is_valid:
        return ParseResult(success=True, data=result.theme, original_data=data)
    return ParseResult(success=False, errors=result.errors, original_data=data)


def load_theme(text: str) -> dict[str, Any]:
    """Decode and validate theme JSON text, raising on any problem."""
    result = parse_theme(text)
    if not result.success or result.data is None:
        joined = "; ".join(issue.message for issue in result.errors)
        raise ThemeValidationError(f"Invalid theme: {joined}", result.errors)
    return result.data


def decode_theme_json(text: str) -> Any:
    """Decode theme JSON text without validating its structure."""
    return _decode_json(text)


def validate_theme_structure(data: Any) -> ValidationResult:
    """Validate ``data`` against the canonical theme schema.

    The schema is open: keys it does not know about pass through unchanged.
    """
    issues: list[ValidationIssue] = []
    if not isinstance(data, Mapping):
        _type_issue(issues, (), "object", data)
        return ValidationResult(is_valid=False, errors=tuple(issues))

    _check_name(issues, data.get("name", _MISSING))

    colors = data.get("colors", _MISSING)
    if colors is not _MISSING:
        _check_colors(issues, colors)

    typography = data.get("typography", _MISSING)
    if typography is not _MISSING:
        _check_typography(issues, typography)

    for key in _STRING_MAP_KEYS:
        value = data.get(key, _MISSING)
        if value is not _MISSING:
            _check_value_map(issues, (key,), value, _is_string, "string")

    if issues:
        return ValidationResult(is_valid=False, errors=tuple(issues))
    return ValidationResult(is_valid=True, theme=copy.deepcopy(dict(data)))


def readable_message(path: tuple[str, ...], code: str, **context: Any) -> str:
    """Build the user-facing message for one violated constraint."""
    location = ".".join(path) or "theme"
    if code == ErrorCode.INVALID_TYPE.value:
        return f"{location}: Expected {context['expected']} but got {context['received']}"
    if code == ErrorCode.TOO_SMALL.value:
        return f"{location}: Value is too small (minimum: {context['minimum']})"
    if code == ErrorCode.CUSTOM.value:
        return f"{location}: {context['message']}"
    if code == ErrorCode.INVALID_STRING.value:
        return f"{location}: Invalid string format"
    return f"{location}: {context.get('message') or 'Invalid value'}"


def _decode_json(text: str) -> Any:
    if not isinstance(text, str):
        raise _json_error(f"Expected JSON text, got {type(text).__name__}")
    if len(text.encode("utf-8")) > _MAX_THEME_BYTES:
        raise _json_error(f"Theme JSON exceeds max size ({_MAX_THEME_BYTES} bytes)")
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise _json_error(f"JSON parsing error: {exc}") from exc


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Unexpected token {name}")


def _json_error(message: str) -> ThemeValidationError:
    issue = ValidationIssue(path=(), message=message, code=ErrorCode.INVALID_JSON.value)
    return ThemeValidationError(message, [issue])


def _check_name(issues: list[ValidationIssue], name: Any) -> None:
    path = ("name",)
    if not isinstance(name, str):
        _type_issue(issues, path, "string", name)
        return
    if len(name.strip()) < 1:
        code = ErrorCode.TOO_SMALL.value
        issues.append(ValidationIssue(path, readable_message(path, code, minimum=1), code))
        return
    if any(ch in name for ch in ("\n", "\r", "\t")):
        code = ErrorCode.INVALID_STRING.value
        issues.append(ValidationIssue(path, readable_message(path, code), code))


def _check_colors(issues: list[ValidationIssue], colors: Any) -> None:
    if not isinstance(colors, Mapping):
        _type_issue(issues, ("colors",), "object", colors)
        return
    for family, shades in colors.items():
        family_path = ("colors", str(family))
        if not isinstance(shades, Mapping):
            _type_issue(issues, family_path, "object", shades)
            continue
        for shade, value in shades.items():
            shade_path = (*family_path, str(shade))
            if not isinstance(value, str):
                _type_issue(issues, shade_path, "string", value)
            elif not is_valid_color(value):
                code = ErrorCode.CUSTOM.value
                message = readable_message(shade_path, code, message="Invalid color format")
                issues.append(ValidationIssue(shade_path, message, code))


def _check_typography(issues: list[ValidationIssue], typography: Any) -> None:
    if not isinstance(typography, Mapping):
        _type_issue(issues, ("typography",), "object", typography)
        return

    families = typography.get("fontFamily", _MISSING)
    if families is not _MISSING:
        _check_font_families(issues, families)
    for key in _TYPOGRAPHY_STRING_KEYS:
        value = typography.get(key, _MISSING)
        if value is not _MISSING:
            _check_value_map(issues, ("typography", key), value, _is_string, "string")
    for key in _TYPOGRAPHY_SCALAR_KEYS:
        value = typography.get(key, _MISSING)
        if value is not _MISSING:
            _check_value_map(
                issues, ("typography", key), value, _is_string_or_number, "string | number"
            )


def _check_font_families(issues: list[ValidationIssue], families: Any) -> None:
    path = ("typography", "fontFamily")
    if not isinstance(families, Mapping):
        _type_issue(issues, path, "object", families)
        return
    for name, stack in families.items():
        stack_path = (*path, str(name))
        if not isinstance(stack, list):
            _type_issue(issues, stack_path, "array", stack)
            continue
        for index, font in enumerate(stack):
            if not isinstance(font, str):
                _type_issue(issues, (*stack_path, str(index)), "string", font)


def _check_value_map(
    issues: list[ValidationIssue],
    path: tuple[str, ...],
    value: Any,
    accepts,
    expected: str,
) -> None:
    if not isinstance(value, Mapping):
        _type_issue(issues, path, "object", value)
        return
    for key, item in value.items():
        if not accepts(item):
            _type_issue(issues, (*path, str(key)), expected, item)


def _type_issue(
    issues: list[ValidationIssue],
    path: tuple[str, ...],
    expected: str,
    value: Any,
) -> None:
    code = ErrorCode.INVALID_TYPE.value
    message = readable_message(path, code, expected=expected, received=_json_type_name(value))
    issues.append(ValidationIssue(path, message, code))


def _json_type_name(value: Any) -> str:
    if value is _MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_string_or_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))
