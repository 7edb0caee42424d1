"""Error codes and error handling utilities for ThemeStudio."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for theme operations.

    Values are the wire codes reported in ``ValidationIssue.code``.
    """

    # Input errors
    INVALID_JSON = "invalid_json"

    # Schema errors
    INVALID_TYPE = "invalid_type"
    TOO_SMALL = "too_small"
    CUSTOM = "custom"
    INVALID_STRING = "invalid_string"

    # Apply errors
    SURFACE_FAILED = "surface_failed"

    # File errors
    READ_FAILED = "read_failed"
    WRITE_FAILED = "write_failed"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_JSON: "The theme is not valid JSON. Check for missing quotes, commas or braces.",
    ErrorCode.INVALID_TYPE: "A theme field has the wrong type.",
    ErrorCode.TOO_SMALL: "A required theme field is empty.",
    ErrorCode.CUSTOM: "A color value is not a recognized color format.",
    ErrorCode.INVALID_STRING: "A theme field contains characters that are not allowed.",
    ErrorCode.SURFACE_FAILED: "The theme could not be applied. The previous theme is still active.",
    ErrorCode.READ_FAILED: "Check that the theme file exists and is readable.",
    ErrorCode.WRITE_FAILED: "Check that the output directory exists and is writable.",
}


@dataclass
class ThemeStudioError(Exception):
    """Base exception for ThemeStudio with error code and context."""

    code: ErrorCode
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def error_code_for(code: str) -> ErrorCode | None:
    """Map a wire code such as ``"invalid_type"`` back to its ErrorCode."""
    try:
        return ErrorCode(code)
    except ValueError:
        return None


def format_error_for_user(error: ThemeStudioError | Exception) -> str:
    """Format an error for display to the user with actionable suggestions."""
    if isinstance(error, ThemeStudioError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        return "".join(parts)

    issues = getattr(error, "issues", None)
    if issues:
        lines = [issue.message for issue in issues]
        code = error_code_for(issues[0].code)
        suggestion = ERROR_MESSAGES.get(code) if code is not None else None
        if suggestion:
            lines.append("")
            lines.append(suggestion)
        return "\n".join(lines)

    return f"{type(error).__name__}: {error}"
