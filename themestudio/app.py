"""Command line bootstrap."""

from __future__ import annotations

import argparse
import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import Any, Callable, Sequence

from themestudio import __version__
from themestudio.config.settings import AppSettings
from themestudio.errors import ErrorCode, ThemeStudioError, format_error_for_user
from themestudio.themes.compiler import (
    compile_theme_stylesheet,
    generate_css_string,
    generate_css_variables,
)
from themestudio.themes.formats import normalize_theme
from themestudio.themes.loader import decode_theme_json
from themestudio.themes.models import ThemeValidationError

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_INVALID_THEME = 2


def _configure_logger(settings: AppSettings, verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger("themestudio")
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG if verbose else settings.log_level_number)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    log_dir = settings.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "themestudio.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(formatter)
    logger.addHandler(console)
    logger.propagate = False
    return logger


def _render_vars(theme: dict[str, Any]) -> str:
    return "\n".join(f"{name}: {value}" for name, value in generate_css_variables(theme).items())


def _render_json(theme: dict[str, Any]) -> str:
    return json.dumps(theme, indent=2, ensure_ascii=False)


_RENDERERS: dict[str, Callable[[dict[str, Any]], str]] = {
    "css": generate_css_string,
    "qss": compile_theme_stylesheet,
    "json": _render_json,
    "vars": _render_vars,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="themestudio",
        description="Normalize a theme JSON file and compile it to style variables.",
    )
    parser.add_argument("input", type=Path, help="theme JSON file, or - for stdin")
    parser.add_argument(
        "--format",
        choices=sorted(_RENDERERS),
        default="css",
        help="output format (default: css)",
    )
    parser.add_argument("--output", "-o", type=Path, help="write to this file instead of stdout")
    parser.add_argument("--settings", type=Path, help="INI settings file to use")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(path: Path) -> str:
    try:
        if str(path) == "-":
            return sys.stdin.read()
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ThemeStudioError(
            ErrorCode.READ_FAILED,
            f"Could not read {path}: {exc.strerror or exc}",
            details={"path": str(path)},
        ) from exc


def _write_output(path: Path, rendered: str) -> None:
    try:
        path.write_text(rendered + "\n", encoding="utf-8")
    except OSError as exc:
        raise ThemeStudioError(
            ErrorCode.WRITE_FAILED,
            f"Could not write {path}: {exc.strerror or exc}",
            details={"path": str(path)},
        ) from exc


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit code."""
    args = build_parser().parse_args(argv)
    settings = AppSettings(args.settings)
    logger = _configure_logger(settings, args.verbose)

    try:
        text = _read_input(args.input)
        theme = normalize_theme(decode_theme_json(text))
        rendered = _RENDERERS[args.format](theme)
        if args.output is None:
            sys.stdout.write(rendered + "\n")
        else:
            _write_output(args.output, rendered)
            logger.info("Wrote %s theme %r to %s", args.format, theme.get("name"), args.output)
    except ThemeValidationError as exc:
        logger.info("Theme %s rejected with %d error(s)", args.input, len(exc.issues))
        print(format_error_for_user(exc), file=sys.stderr)
        return EXIT_INVALID_THEME
    except ThemeStudioError as exc:
        logger.error("%s (%s)", exc.message, exc.code.value)
        print(format_error_for_user(exc), file=sys.stderr)
        return EXIT_IO_ERROR
    return EXIT_OK
