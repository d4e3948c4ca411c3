"""Command-line theme checker."""

from __future__ import annotations

import argparse
import logging
from logging.handlers import RotatingFileHandler
import sys

from themekit.config.settings import AppSettings
from themekit.errors import ThemeError
from themekit.runtime_paths import is_frozen, package_root
from themekit.themes.store import ThemeData


def _configure_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("themekit")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = RotatingFileHandler(
        settings.log_dir / "themekit.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="themekit",
        description="Load a theme file and report its views and elements.",
    )
    parser.add_argument("theme", help="path to a theme XML file")
    parser.add_argument("--view", help="only report this view")
    return parser


def run_app(argv: list[str] | None = None) -> int:
    """Check one theme file; returns the process exit code."""
    args = _build_parser().parse_args(argv)
    settings = AppSettings()
    logger = _configure_logger(settings)
    logger.info("check mode frozen=%s package_root=%s", is_frozen(), package_root())

    warnings: list[str] = []

    def collect(message: str) -> None:
        warnings.append(message)
        logger.warning(message)

    theme = ThemeData()
    try:
        theme.load_file(args.theme, warn=collect)
    except ThemeError as exc:
        logger.error("theme check failed: %s", exc.to_dict())
        print(exc, file=sys.stderr)
        return 1

    for message in warnings:
        print(f"warning: {message}", file=sys.stderr)

    print(f"{theme.path}: version {theme.version:g}, {len(theme.views)} views")
    names = [args.view] if args.view else theme.view_names()
    for name in names:
        view = theme.views.get(name)
        if view is None:
            print(f"  {name}: no such view", file=sys.stderr)
            return 1
        print(f"  {name}:")
        for element_name, element in view.elements.items():
            marker = " (extra)" if element.extra else ""
            props = ", ".join(sorted(element.properties))
            print(f"    {element.element_type} {element_name}{marker}: {props}")
    return 0
