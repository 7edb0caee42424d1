"""Theme framework models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence


class ThemeValidationError(ValueError):
    """Raised when a theme payload fails validation."""

    def __init__(self, message: str, issues: Sequence[ValidationIssue] = ()) -> None:
        super().__init__(message)
        self.issues: tuple[ValidationIssue, ...] = tuple(issues)


class InvalidColorError(ThemeValidationError):
    """Raised when a color literal cannot be converted."""


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """One violated constraint, located by its path inside the theme."""

    path: tuple[str, ...]
    message: str
    code: str

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {"path": list(self.path), "message": self.message, "code": self.code}


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating a canonical theme structure."""

    is_valid: bool
    theme: dict[str, Any] | None = None
    errors: tuple[ValidationIssue, ...] = ()


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing and validating theme JSON text."""

    success: bool
    data: dict[str, Any] | None = None
    errors: tuple[ValidationIssue, ...] = ()
    original_data: Any = None


class ThemeFormat(Enum):
    """Shape of an incoming theme payload."""

    CANONICAL = "canonical"
    SIMPLE = "simple"


@dataclass(frozen=True, slots=True)
class FormatDecision:
    """Which normalizer a payload is routed to, with its canonical validation."""

    format: ThemeFormat
    validation: ValidationResult


@dataclass(frozen=True, slots=True)
class ThemeUpdateOptions:
    """Per-call apply options."""

    animate: bool = True
    animation_duration: int = 300
    rollback_on_error: bool = True

    @classmethod
    def from_settings(cls, settings) -> ThemeUpdateOptions:
        if settings is None:
            return cls()
        return cls(
            animate=settings.animate,
            animation_duration=settings.animation_duration_ms,
        )


@dataclass(frozen=True, slots=True)
class ThemeState:
    """Snapshot of the live theme owned by a ThemeManager.

    ``is_valid`` is False only together with at least one entry in ``errors``.
    ``issues`` carries the structured form of ``errors`` when available.
    """

    current_theme: dict[str, Any]
    previous_theme: dict[str, Any] | None = None
    is_valid: bool = True
    errors: tuple[str, ...] = ()
    is_transitioning: bool = False
    issues: tuple[ValidationIssue, ...] = field(default=())
