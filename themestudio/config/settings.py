"""Application settings via QSettings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from PySide6.QtCore import QSettings

from themestudio.themes.constants import DEFAULT_ANIMATION_DURATION_MS, DEFAULT_DEBOUNCE_DELAY_MS

_MAX_DELAY_MS = 5000
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class AppSettings:
    """Wraps QSettings for persistent configuration.

    Pass ``path`` to keep settings in an INI file instead of the platform
    store (used by the CLI ``--settings`` flag and tests).
    """

    def __init__(self, path: Path | str | None = None) -> None:
        if path is None:
            self._qs = QSettings("ThemeStudio", "ThemeStudio")
        else:
            self._qs = QSettings(str(path), QSettings.Format.IniFormat)

    # -- transitions --

    @property
    def animate(self) -> bool:
        return self._qs.value("transitions/animate", True, type=bool)

    @animate.setter
    def animate(self, value: bool) -> None:
        self._qs.setValue("transitions/animate", bool(value))

    @property
    def animation_duration_ms(self) -> int:
        raw = self._qs.value(
            "transitions/duration_ms", DEFAULT_ANIMATION_DURATION_MS, type=int
        )
        return _clamp_delay(raw, DEFAULT_ANIMATION_DURATION_MS)

    @animation_duration_ms.setter
    def animation_duration_ms(self, value: int) -> None:
        self._qs.setValue(
            "transitions/duration_ms", _clamp_delay(value, DEFAULT_ANIMATION_DURATION_MS)
        )

    # -- editor input --

    @property
    def debounce_delay_ms(self) -> int:
        raw = self._qs.value("editor/debounce_ms", DEFAULT_DEBOUNCE_DELAY_MS, type=int)
        return _clamp_delay(raw, DEFAULT_DEBOUNCE_DELAY_MS)

    @debounce_delay_ms.setter
    def debounce_delay_ms(self, value: int) -> None:
        self._qs.setValue("editor/debounce_ms", _clamp_delay(value, DEFAULT_DEBOUNCE_DELAY_MS))

    # -- logging --

    @property
    def log_level(self) -> str:
        raw = self._qs.value("logging/level", "INFO", type=str)
        level = (raw or "").strip().upper()
        if level in _LOG_LEVELS:
            return level
        return "INFO"

    @log_level.setter
    def log_level(self, value: str) -> None:
        level = (value or "").strip().upper()
        if level not in _LOG_LEVELS:
            level = "INFO"
        self._qs.setValue("logging/level", level)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    # -- helpers --

    def sync(self) -> None:
        self._qs.sync()

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "themestudio"


def _clamp_delay(value: object, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return max(0, min(_MAX_DELAY_MS, number))
