"""Theme framework exports."""

from themekit.errors import ThemeError, ThemeErrorCode
from themekit.themes.constants import (
    CURRENT_THEME_VERSION,
    ELEMENT_SCHEMAS,
    MINIMUM_THEME_VERSION,
    PropertyFlags,
    PropertyType,
)
from themekit.themes.loader import load_theme_document
from themekit.themes.models import Pair, ParsedTheme, PropertyValue, ThemeElement, ThemeView
from themekit.themes.store import ThemeData

__all__ = [
    "CURRENT_THEME_VERSION",
    "ELEMENT_SCHEMAS",
    "MINIMUM_THEME_VERSION",
    "Pair",
    "ParsedTheme",
    "PropertyFlags",
    "PropertyType",
    "PropertyValue",
    "ThemeData",
    "ThemeElement",
    "ThemeError",
    "ThemeErrorCode",
    "ThemeView",
    "load_theme_document",
]
