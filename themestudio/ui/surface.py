"""Style surfaces that receive compiled theme variables."""

from __future__ import annotations

from typing import Protocol

from PySide6.QtWidgets import QApplication

from themestudio.ui.theme import build_stylesheet


class StyleSurface(Protocol):
    """Root scope of a rendering surface that holds style variables."""

    def set_variable(self, name: str, value: str) -> None: ...

    def remove_variable(self, name: str) -> None: ...

    def get_variable(self, name: str) -> str: ...

    def install_transition(self, rule: str) -> None: ...

    def clear_transition(self) -> None: ...

    def commit(self) -> None: ...


class MemorySurface:
    """Dictionary-backed surface for headless use and tests."""

    def __init__(self) -> None:
        self.variables: dict[str, str] = {}
        self.transition_rule: str | None = None
        self.write_count = 0
        self.commit_count = 0

    def set_variable(self, name: str, value: str) -> None:
        self.variables[name] = value
        self.write_count += 1

    def remove_variable(self, name: str) -> None:
        self.variables.pop(name, None)

    def get_variable(self, name: str) -> str:
        return self.variables.get(name, "")

    def install_transition(self, rule: str) -> None:
        self.transition_rule = rule

    def clear_transition(self) -> None:
        self.transition_rule = None

    def commit(self) -> None:
        self.commit_count += 1


class QtApplicationSurface:
    """Renders variables into the QApplication stylesheet.

    Qt style sheets cannot animate, so a transition rule is only recorded.
    """

    def __init__(self, app: QApplication, *, extra_stylesheet: str = "") -> None:
        self._app = app
        self._extra_stylesheet = extra_stylesheet
        self._variables: dict[str, str] = {}
        self._transition_rule: str | None = None
        self._dirty = False

    @property
    def transition_rule(self) -> str | None:
        return self._transition_rule

    def set_variable(self, name: str, value: str) -> None:
        self._variables[name] = value
        self._dirty = True

    def remove_variable(self, name: str) -> None:
        if self._variables.pop(name, None) is not None:
            self._dirty = True

    def get_variable(self, name: str) -> str:
        return self._variables.get(name, "")

    def install_transition(self, rule: str) -> None:
        self._transition_rule = rule

    def clear_transition(self) -> None:
        self._transition_rule = None

    def commit(self) -> None:
        if not self._dirty:
            return
        self._app.setStyleSheet(
            build_stylesheet(self._variables, extra_stylesheet=self._extra_stylesheet)
        )
        self._dirty = False
