"""Runtime theme apply service."""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import replace
from typing import Any, Callable, Mapping, Sequence

from PySide6.QtCore import QObject, QTimer, Signal

from themestudio.errors import ErrorCode
from themestudio.themes.colors import is_valid_color
from themestudio.themes.compiler import generate_css_variables
from themestudio.themes.constants import (
    DEFAULT_DEBOUNCE_DELAY_MS,
    TRANSITION_EASING,
    TRANSITION_PROPERTIES,
    default_theme,
)
from themestudio.themes.formats import normalize_theme
from themestudio.themes.loader import decode_theme_json, readable_message
from themestudio.themes.merge import overlay_theme
from themestudio.themes.models import (
    ThemeState,
    ThemeUpdateOptions,
    ThemeValidationError,
    ValidationIssue,
)
from themestudio.ui.surface import MemorySurface, StyleSurface

logger = logging.getLogger(__name__)

StateListener = Callable[[ThemeState], None]


def transition_rule(duration_ms: int) -> str:
    return ", ".join(f"{prop} {duration_ms}ms {TRANSITION_EASING}" for prop in TRANSITION_PROPERTIES)


class ThemeManager(QObject):
    """Apply themes to a style surface and track the live theme state.

    One manager serves one surface. Every successful update replaces the
    current theme with a fresh snapshot; the theme that was current just
    before is kept for a single-level ``rollback``.
    """

    state_changed = Signal(object)

    def __init__(
        self,
        surface: StyleSurface | None = None,
        settings=None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._surface = surface if surface is not None else MemorySurface()
        self._settings = settings
        self._defaults = ThemeUpdateOptions.from_settings(settings)
        self._state = ThemeState(current_theme=default_theme())
        self._listeners: list[StateListener] = []
        self._variable_cache: dict[str, str] = {}
        self._generation = 0
        self._transition_timers: set[QTimer] = set()
        self._debouncers: list[DebouncedThemeUpdater] = []
        self._write_variables(self._state.current_theme)

    @property
    def surface(self) -> StyleSurface:
        return self._surface

    @property
    def default_options(self) -> ThemeUpdateOptions:
        return self._defaults

    # -- observers --

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` for state changes; returns its disposer."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def get_state(self) -> ThemeState:
        previous = self._state.previous_theme
        return replace(
            self._state,
            current_theme=copy.deepcopy(self._state.current_theme),
            previous_theme=copy.deepcopy(previous) if previous is not None else None,
        )

    # -- updates --

    def update_theme_from_json(
        self, text: str, options: ThemeUpdateOptions | None = None
    ) -> bool:
        """Parse, normalize and apply theme JSON text.

        Returns False, leaving the current theme in place, when the text is
        not JSON or fails canonical validation.
        """
        try:
            theme = normalize_theme(decode_theme_json(text))
        except ThemeValidationError as exc:
            logger.info("Rejected theme update with %d error(s)", len(exc.issues))
            self._reject(exc.issues)
            return False
        return self._commit(theme, self._resolve(options))

    def update_theme(
        self, theme: Mapping[str, Any], options: ThemeUpdateOptions | None = None
    ) -> bool:
        """Overlay a trusted partial theme on the current one and apply it."""
        if not isinstance(theme, Mapping):
            code = ErrorCode.INVALID_TYPE.value
            message = readable_message(
                (), code, expected="object", received=type(theme).__name__
            )
            self._reject([ValidationIssue((), message, code)])
            return False
        merged = overlay_theme(self._state.current_theme, theme)
        return self._commit(merged, self._resolve(options))

    def update_color(
        self,
        family: str,
        shade: str,
        color: str,
        options: ThemeUpdateOptions | None = None,
    ) -> bool:
        if not is_valid_color(color):
            path = ("colors", family, shade)
            code = ErrorCode.CUSTOM.value
            message = readable_message(path, code, message="Invalid color format")
            self._reject([ValidationIssue(path, message, code)])
            return False
        colors = copy.deepcopy(self._state.current_theme.get("colors") or {})
        colors.setdefault(family, {})[shade] = color
        return self.update_theme({"colors": colors}, options)

    def update_typography(
        self, typography: Mapping[str, Any], options: ThemeUpdateOptions | None = None
    ) -> bool:
        merged = copy.deepcopy(self._state.current_theme.get("typography") or {})
        merged.update(copy.deepcopy(dict(typography)))
        return self.update_theme({"typography": merged}, options)

    def update_spacing(
        self, spacing: Mapping[str, Any], options: ThemeUpdateOptions | None = None
    ) -> bool:
        merged = dict(self._state.current_theme.get("spacing") or {})
        for key, value in spacing.items():
            if value is not None:
                merged[key] = value
        return self.update_theme({"spacing": merged}, options)

    def rollback(self, options: ThemeUpdateOptions | None = None) -> bool:
        """Restore the theme that was current before the last change."""
        target = self._state.previous_theme
        if target is None:
            return False
        return self._transition_to(target, None, self._resolve(options))

    def reset_to_default(self, options: ThemeUpdateOptions | None = None) -> bool:
        """Overlay the default theme; extra top-level keys of the current theme survive."""
        return self.update_theme(default_theme(), options)

    def create_debounced_updater(self, delay: int | None = None) -> DebouncedThemeUpdater:
        if delay is None:
            delay = (
                self._settings.debounce_delay_ms
                if self._settings is not None
                else DEFAULT_DEBOUNCE_DELAY_MS
            )
        updater = DebouncedThemeUpdater(self, delay)
        self._debouncers.append(updater)
        return updater

    @property
    def debounced_updaters(self) -> tuple[DebouncedThemeUpdater, ...]:
        return tuple(self._debouncers)

    def _release_debounced_updater(self, updater: DebouncedThemeUpdater) -> None:
        if updater in self._debouncers:
            self._debouncers.remove(updater)

    # -- reading --

    def export_theme(self) -> str:
        return json.dumps(self._state.current_theme, indent=2, ensure_ascii=False)

    def get_css_variable(self, name: str) -> str:
        return self._surface.get_variable(name).strip()

    def get_all_css_variables(self) -> dict[str, str]:
        return {name: self.get_css_variable(name) for name in self._variable_cache}

    def cleanup(self) -> None:
        """Drop subscribers, stop pending timers and remove the transition rule."""
        self._listeners.clear()
        self._generation += 1
        for timer in list(self._transition_timers):
            timer.stop()
            timer.deleteLater()
        self._transition_timers.clear()
        for updater in self._debouncers:
            updater.cancel()
        self._debouncers.clear()
        self._surface.clear_transition()
        self._state = replace(self._state, is_transitioning=False)

    # -- internals --

    def _resolve(self, options: ThemeUpdateOptions | None) -> ThemeUpdateOptions:
        return options if options is not None else self._defaults

    def _commit(self, theme: dict[str, Any], options: ThemeUpdateOptions) -> bool:
        return self._transition_to(theme, self._state.current_theme, options)

    def _transition_to(
        self,
        theme: dict[str, Any],
        previous: dict[str, Any] | None,
        options: ThemeUpdateOptions,
    ) -> bool:
        self._generation += 1
        generation = self._generation
        try:
            self._write_variables(theme, options=options)
        except Exception as exc:
            logger.exception("Could not apply theme %r", theme.get("name"))
            self._recover_from_surface_failure(theme, options, exc)
            return False

        self._state = ThemeState(
            current_theme=theme,
            previous_theme=previous,
            is_valid=True,
            errors=(),
            is_transitioning=options.animate,
        )
        if options.animate:
            self._schedule_transition_end(options.animation_duration, generation)
        logger.info("Applied theme %r", theme.get("name"))
        self._notify()
        return True

    def _write_variables(
        self, theme: Mapping[str, Any], options: ThemeUpdateOptions | None = None
    ) -> None:
        variables = generate_css_variables(theme)
        if options is not None and options.animate:
            self._surface.install_transition(transition_rule(options.animation_duration))
        else:
            self._surface.clear_transition()

        written = 0
        for name, value in variables.items():
            if self._variable_cache.get(name) != value:
                self._surface.set_variable(name, value)
                self._variable_cache[name] = value
                written += 1
        stale = [name for name in self._variable_cache if name not in variables]
        for name in stale:
            self._surface.remove_variable(name)
            del self._variable_cache[name]
        self._surface.commit()
        logger.debug("Wrote %d variable(s), removed %d", written, len(stale))

    def _recover_from_surface_failure(
        self, theme: dict[str, Any], options: ThemeUpdateOptions, exc: Exception
    ) -> None:
        message = f"Could not apply theme: {exc}"
        issue = ValidationIssue((), message, ErrorCode.SURFACE_FAILED.value)
        # the surface may hold a partial write
        self._variable_cache.clear()
        if options.rollback_on_error:
            try:
                self._write_variables(self._state.current_theme)
            except Exception:
                logger.exception("Could not restore the previous theme")
            self._state = replace(
                self._state,
                is_valid=False,
                errors=(message,),
                issues=(issue,),
                is_transitioning=False,
            )
        else:
            self._state = ThemeState(
                current_theme=theme,
                previous_theme=self._state.current_theme,
                is_valid=False,
                errors=(message,),
                is_transitioning=False,
                issues=(issue,),
            )
        self._notify()

    def _schedule_transition_end(self, duration_ms: int, generation: int) -> None:
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._finish_transition(timer, generation))
        self._transition_timers.add(timer)
        timer.start(duration_ms)

    def _finish_transition(self, timer: QTimer, generation: int) -> None:
        self._transition_timers.discard(timer)
        timer.deleteLater()
        if generation != self._generation:
            return
        self._surface.clear_transition()
        self._state = replace(self._state, is_transitioning=False)
        self._notify()

    def _reject(self, issues: Sequence[ValidationIssue]) -> None:
        issues = tuple(issues)
        errors = tuple(issue.message for issue in issues) or ("Unknown error",)
        self._state = replace(self._state, is_valid=False, errors=errors, issues=issues)
        self._notify()

    def _notify(self) -> None:
        state = self.get_state()
        for listener in list(self._listeners):
            listener(state)
        self.state_changed.emit(state)


class DebouncedThemeUpdater(QObject):
    """Coalesces bursts of JSON updates into one trailing update."""

    def __init__(self, manager: ThemeManager, delay_ms: int) -> None:
        super().__init__(manager)
        self._manager = manager
        self._pending: tuple[str, ThemeUpdateOptions | None] | None = None
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(max(0, int(delay_ms)))
        self._timer.timeout.connect(self._fire)

    @property
    def delay(self) -> int:
        return self._timer.interval()

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def __call__(self, text: str, options: ThemeUpdateOptions | None = None) -> None:
        self._pending = (text, options)
        self._timer.start()

    def flush(self) -> bool | None:
        """Run the pending update now; None when nothing is pending."""
        self._timer.stop()
        return self._fire()

    def cancel(self) -> None:
        self._timer.stop()
        self._pending = None

    def close(self) -> None:
        """Cancel any pending update and detach from the manager."""
        self.cancel()
        self._manager._release_debounced_updater(self)
        self.deleteLater()

    def _fire(self) -> bool | None:
        if self._pending is None:
            return None
        text, options = self._pending
        self._pending = None
        return self._manager.update_theme_from_json(text, options)


def create_debounced_theme_updater(
    manager: ThemeManager, delay: int = DEFAULT_DEBOUNCE_DELAY_MS
) -> DebouncedThemeUpdater:
    return manager.create_debounced_updater(delay)


def watch_css_property(
    manager: ThemeManager,
    name: str,
    callback: Callable[[str, str], None],
) -> Callable[[], None]:
    """Call ``callback(old, new)`` whenever the applied value of ``name`` changes."""
    old_value = manager.get_css_variable(name)

    def on_state(_state: ThemeState) -> None:
        nonlocal old_value
        new_value = manager.get_css_variable(name)
        if new_value != old_value:
            callback(old_value, new_value)
            old_value = new_value

    return manager.subscribe(on_state)
