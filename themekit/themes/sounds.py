"""Sound cues declared by ``sound`` theme elements."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from themekit.themes.constants import PropertyType
from themekit.themes.store import ThemeData

logger = logging.getLogger(__name__)


class Playable(Protocol):
    def play(self) -> None: ...


SoundFactory = Callable[[str], Playable]


def qt_sound_factory(path: str) -> Playable:
    """Create a QSoundEffect for a local file."""
    from PySide6.QtCore import QUrl
    from PySide6.QtMultimedia import QSoundEffect

    effect = QSoundEffect()
    effect.setSource(QUrl.fromLocalFile(path))
    return effect


class SoundCache:
    """Plays cues by element name, creating each sound object only once."""

    def __init__(
        self,
        theme: ThemeData,
        factory: SoundFactory | None = None,
        *,
        enabled: bool = True,
    ) -> None:
        self._theme = theme
        self._factory = factory or qt_sound_factory
        self._sounds: dict[str, Playable] = {}
        self.enabled = enabled

    def sound_path(self, name: str) -> str | None:
        """Return the resolved path of the ``sound`` element called ``name``."""
        for view in self._theme.views.values():
            element = view.elements.get(name)
            if element is None or element.element_type != "sound":
                continue
            if element.has("path"):
                return element.get("path", PropertyType.PATH)  # type: ignore[return-value]
        return None

    def get(self, name: str) -> Playable | None:
        sound = self._sounds.get(name)
        if sound is not None:
            return sound
        path = self.sound_path(name)
        if not path:
            return None
        sound = self._factory(path)
        self._sounds[name] = sound
        return sound

    def play(self, name: str) -> bool:
        """Play cue ``name``; returns False when it is unknown or sound is off."""
        if not self.enabled:
            return False
        sound = self.get(name)
        if sound is None:
            logger.info("no sound cue named %r in theme %s", name, self._theme.path)
            return False
        sound.play()
        return True

    def clear(self) -> None:
        """Drop cached sounds; call after the theme is reloaded."""
        self._sounds.clear()

    def __len__(self) -> int:
        return len(self._sounds)
