"""Loaded theme state and the typed property query surface."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from themekit.errors import ElementNotFoundError, ViewNotFoundError
from themekit.themes.constants import PropertyType
from themekit.themes.loader import load_theme_document
from themekit.themes.models import ParsedTheme, RawValue, ThemeElement, ThemeView


class ThemeData:
    """Holds the views of the most recently loaded theme file.

    A failed ``load_file`` leaves the previously loaded views and version in
    place. Instances are safe to read from several threads once loaded, but
    a reload must not overlap with readers.
    """

    def __init__(self) -> None:
        self._path: Path | None = None
        self._version: float = 0.0
        self._views: dict[str, ThemeView] = {}

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def version(self) -> float:
        return self._version

    @property
    def views(self) -> dict[str, ThemeView]:
        return self._views

    @property
    def is_loaded(self) -> bool:
        return self._path is not None

    def load_file(
        self,
        path: str | Path,
        *,
        warn: Callable[[str], None] | None = None,
    ) -> None:
        """Load ``path``, replacing the current theme only if parsing succeeds.

        Raises ``ThemeError`` on any validation failure.
        """
        self.replace(load_theme_document(path, warn=warn))

    def replace(self, parsed: ParsedTheme) -> None:
        self._path = parsed.source_path
        self._version = parsed.version
        self._views = parsed.views

    def view_names(self) -> list[str]:
        return list(self._views)

    def get_view(self, view: str) -> ThemeView:
        try:
            return self._views[view]
        except KeyError:
            raise ViewNotFoundError(f"theme has no view {view!r}") from None

    def get_element(self, view: str, element: str) -> ThemeElement:
        elements = self.get_view(view).elements
        try:
            return elements[element]
        except KeyError:
            raise ElementNotFoundError(
                f"view {view!r} has no element {element!r}"
            ) from None

    def find_element(self, view: str, element: str) -> ThemeElement | None:
        """Like ``get_element`` but returns None when either name is unknown."""
        found = self._views.get(view)
        if found is None:
            return None
        return found.elements.get(element)

    def get(self, view: str, element: str, prop: str, kind: PropertyType) -> RawValue:
        """Return property ``prop`` of ``element`` in ``view`` as a ``kind`` value.

        Raises ``ViewNotFoundError``, ``ElementNotFoundError``,
        ``PropertyNotFoundError`` or ``PropertyTypeError``.
        """
        return self.get_element(view, element).get(prop, kind)

    def extras(self, view: str) -> tuple[tuple[str, ThemeElement], ...]:
        """Return the cached ``(name, element)`` pairs flagged ``extra`` in ``view``."""
        return self.get_view(view).extras()
