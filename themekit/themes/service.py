"""Runtime theme loading, fallback and persistence service."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from PySide6.QtCore import QObject, Signal

from themekit.errors import ThemeError
from themekit.runtime_paths import default_theme_path
from themekit.themes.binding import ExtrasRenderer
from themekit.themes.sounds import SoundCache, SoundFactory
from themekit.themes.store import ThemeData

if TYPE_CHECKING:
    from themekit.config.settings import AppSettings

logger = logging.getLogger(__name__)


class ThemeService(QObject):
    """Load theme files, keep the last good one and persist the selection."""

    theme_changed = Signal(str)

    def __init__(
        self,
        settings: AppSettings,
        *,
        sound_factory: SoundFactory | None = None,
        warn: Callable[[str], None] | None = None,
        default_path: Path | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings
        self._warn = warn
        self._default_path = default_path or default_theme_path()
        self._theme = ThemeData()
        self._sounds = SoundCache(
            self._theme,
            sound_factory,
            enabled=settings.sounds_enabled,
        )
        self._extras = ExtrasRenderer(self._theme)

    @property
    def theme(self) -> ThemeData:
        return self._theme

    @property
    def sounds(self) -> SoundCache:
        return self._sounds

    @property
    def extras(self) -> ExtrasRenderer:
        return self._extras

    @property
    def active_theme_path(self) -> str:
        return str(self._theme.path) if self._theme.path else ""

    def load_theme(self, path: str | Path, *, persist: bool = True) -> tuple[bool, str]:
        """Load ``path``; on failure the current theme stays active."""
        try:
            self._theme.load_file(path, warn=self._warn)
        except ThemeError as exc:
            logger.warning("theme load failed: %s", exc)
            return False, str(exc)

        self._sounds.clear()
        self._extras.clear()
        loaded = str(self._theme.path)
        if persist:
            self._settings.theme_path = loaded
        self._settings.theme_last_known_good_path = loaded
        self.theme_changed.emit(loaded)
        return True, f"Loaded theme: {loaded} ({len(self._theme.views)} views)"

    def apply_startup_theme(self) -> tuple[bool, str]:
        """Try the requested, last known good and bundled themes in turn."""
        candidates = [
            self._settings.theme_path,
            self._settings.theme_last_known_good_path,
            str(self._default_path),
        ]
        seen: set[str] = set()
        failures: list[str] = []

        for candidate in candidates:
            if not candidate or candidate in seen:
                continue
            seen.add(candidate)
            ok, message = self.load_theme(candidate, persist=True)
            if ok:
                return True, message
            failures.append(message)
        logger.error("no usable theme found: %s", " | ".join(failures))
        return False, "No valid theme file found; running without a theme."

    def play_sound(self, name: str) -> bool:
        return self._sounds.play(name)

    def set_sounds_enabled(self, enabled: bool) -> None:
        self._settings.sounds_enabled = enabled
        self._sounds.enabled = enabled
