"""Application settings via QSettings."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings


class AppSettings:
    """Wraps QSettings for persistent theme configuration."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("ThemeKit", "ThemeKit")

    # -- theme --

    @property
    def theme_path(self) -> str:
        raw = self._qs.value("theme/path", "", type=str)
        return (raw or "").strip()

    @theme_path.setter
    def theme_path(self, value: str) -> None:
        self._qs.setValue("theme/path", (value or "").strip())

    @property
    def theme_last_known_good_path(self) -> str:
        raw = self._qs.value("theme/last_known_good_path", "", type=str)
        return (raw or "").strip()

    @theme_last_known_good_path.setter
    def theme_last_known_good_path(self, value: str) -> None:
        self._qs.setValue("theme/last_known_good_path", (value or "").strip())

    # -- audio --

    @property
    def sounds_enabled(self) -> bool:
        return bool(self._qs.value("audio/sounds_enabled", True, type=bool))

    @sounds_enabled.setter
    def sounds_enabled(self, value: bool) -> None:
        self._qs.setValue("audio/sounds_enabled", bool(value))

    # -- helpers --

    def sync(self) -> None:
        self._qs.sync()

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def log_dir(self) -> Path:
        path = self.app_data_dir / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "themekit"
