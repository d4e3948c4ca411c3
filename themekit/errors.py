"""Error codes and exception types for theme loading and lookup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ThemeErrorCode(Enum):
    """Standardized causes for a failed theme load."""

    # Document errors
    MISSING_FILE = auto()
    XML_SYNTAX = auto()
    MISSING_ROOT = auto()
    MISSING_VERSION = auto()
    VERSION_TOO_OLD = auto()

    # Structure errors
    VIEW_MISSING_NAME = auto()
    UNKNOWN_ELEMENT = auto()
    ELEMENT_MISSING_NAME = auto()
    UNKNOWN_PROPERTY = auto()

    # Value errors
    INVALID_PAIR = auto()
    INVALID_COLOR = auto()
    EMPTY_COLOR = auto()


ERROR_MESSAGES: dict[ThemeErrorCode, str] = {
    ThemeErrorCode.MISSING_FILE: "Missing file!",
    ThemeErrorCode.XML_SYNTAX: "XML parsing error.",
    ThemeErrorCode.MISSING_ROOT: "Missing <theme> tag!",
    ThemeErrorCode.MISSING_VERSION: "<version> tag missing!",
    ThemeErrorCode.VERSION_TOO_OLD: "Theme version is too old.",
    ThemeErrorCode.VIEW_MISSING_NAME: 'View missing "name" attribute!',
    ThemeErrorCode.UNKNOWN_ELEMENT: "Unknown element type.",
    ThemeErrorCode.ELEMENT_MISSING_NAME: 'Element missing "name" attribute!',
    ThemeErrorCode.UNKNOWN_PROPERTY: "Unknown property type.",
    ThemeErrorCode.INVALID_PAIR: "Invalid normalized pair.",
    ThemeErrorCode.INVALID_COLOR: "Invalid color.",
    ThemeErrorCode.EMPTY_COLOR: "Empty color",
}


@dataclass(eq=False)
class ThemeError(ValueError):
    """Raised when a theme document cannot be loaded.

    The rendered message is always prefixed with the theme file path so a
    failure can be reported to the user without extra context.
    """

    code: ThemeErrorCode
    message: str = ""
    path: Path | None = None

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f'Error loading theme from "{self.path}":\n   {self.message}'

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
        }


class ThemeLookupError(KeyError):
    """Raised when a typed property lookup cannot find its target."""

    def __str__(self) -> str:
        # KeyError repr-quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class ViewNotFoundError(ThemeLookupError):
    """The requested view is not part of the loaded theme."""


class ElementNotFoundError(ThemeLookupError):
    """The requested element is not part of the view."""


class PropertyNotFoundError(ThemeLookupError):
    """The element does not define the requested property."""


class PropertyTypeError(TypeError):
    """The stored property value does not have the requested type."""
