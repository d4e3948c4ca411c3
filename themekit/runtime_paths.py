"""Runtime path helpers: home directory, theme-relative paths, bundled files."""

from __future__ import annotations

import os
from pathlib import Path
import re
import sys

_SEPARATOR_RE = re.compile(r"[\\/]")


def is_frozen() -> bool:
    """Return True when running from a PyInstaller bundle."""
    return bool(getattr(sys, "frozen", False))


def package_root() -> Path:
    """Return the root path that contains the `themekit` package resources."""
    if is_frozen():
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            candidate = Path(meipass) / "themekit"
            if candidate.exists():
                return candidate
            return Path(meipass)
    return Path(__file__).resolve().parent


def builtin_themes_root() -> Path:
    """Resolve the bundled theme directory across source/frozen layouts."""
    return package_root() / "themes" / "builtin"


def default_theme_path() -> Path:
    return builtin_themes_root() / "default.xml"


def home_path() -> str:
    """Return the user's home directory, preferring $HOME when it is set."""
    home = os.environ.get("HOME")
    if home:
        return home
    drive = os.environ.get("HOMEDRIVE", "")
    homepath = os.environ.get("HOMEPATH", "")
    if drive or homepath:
        return drive + homepath
    return str(Path.home())


def resolve_theme_path(raw: str | None, theme_file: str | Path) -> str | None:
    """Expand a path token found inside a theme file.

    ``~/x`` expands to the home directory and ``./x`` to the directory that
    holds the theme file. Anything else is returned unchanged. Only a first
    path component that is exactly ``~`` or ``.`` triggers expansion, so
    ``~music/a.png`` or ``.hidden/a.png`` are left alone.
    """
    if not raw:
        return raw

    first = _SEPARATOR_RE.split(raw, maxsplit=1)[0]
    remainder = raw[1:].lstrip("\\/")
    if first == "~":
        base = Path(home_path())
    elif first == ".":
        base = Path(theme_file).parent
    else:
        return raw

    if not remainder:
        return base.as_posix()
    return (base / remainder).as_posix()
