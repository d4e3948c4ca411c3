"""Theme framework constants and the element schema table."""

from __future__ import annotations

from enum import Enum, IntFlag
from types import MappingProxyType
from typing import Mapping

MINIMUM_THEME_VERSION = 3
CURRENT_THEME_VERSION = 3

ROOT_TAG = "theme"
VERSION_TAG = "version"
VIEW_TAG = "view"
NAME_ATTRIBUTE = "name"
EXTRA_ATTRIBUTE = "extra"


class PropertyType(Enum):
    """Closed set of value kinds a theme property may hold."""

    PAIR = "pair"
    PATH = "path"
    TEXT = "text"
    COLOR = "color"
    SCALAR = "scalar"
    BOOLEAN = "boolean"


class PropertyFlags(IntFlag):
    """Bitmask selecting which property kinds to apply onto a widget."""

    NONE = 0
    PATH = 1
    POSITION = 2
    SIZE = 4
    ORIGIN = 8
    COLOR = 16
    FONT_PATH = 32
    FONT_SIZE = 64
    TILING = 128
    SOUND = 256
    CENTER = 512
    TEXT = 1024
    ALL = 2047


def _schema(**properties: PropertyType) -> Mapping[str, PropertyType]:
    return MappingProxyType(dict(properties))


ELEMENT_SCHEMAS: Mapping[str, Mapping[str, PropertyType]] = MappingProxyType({
    "image": _schema(
        pos=PropertyType.PAIR,
        size=PropertyType.PAIR,
        origin=PropertyType.PAIR,
        path=PropertyType.PATH,
        tile=PropertyType.BOOLEAN,
    ),
    "text": _schema(
        pos=PropertyType.PAIR,
        size=PropertyType.PAIR,
        text=PropertyType.TEXT,
        color=PropertyType.COLOR,
        fontPath=PropertyType.PATH,
        fontSize=PropertyType.SCALAR,
        center=PropertyType.BOOLEAN,
    ),
    "textlist": _schema(
        pos=PropertyType.PAIR,
        size=PropertyType.PAIR,
        selectorColor=PropertyType.COLOR,
        selectedColor=PropertyType.COLOR,
        primaryColor=PropertyType.COLOR,
        secondaryColor=PropertyType.COLOR,
        fontPath=PropertyType.PATH,
        fontSize=PropertyType.SCALAR,
    ),
    "sound": _schema(
        path=PropertyType.PATH,
    ),
})

# Which flag gates each property name when applying onto widgets.
PROPERTY_FLAGS: Mapping[str, PropertyFlags] = MappingProxyType({
    "pos": PropertyFlags.POSITION,
    "size": PropertyFlags.SIZE,
    "origin": PropertyFlags.ORIGIN,
    "path": PropertyFlags.PATH,
    "tile": PropertyFlags.TILING,
    "text": PropertyFlags.TEXT,
    "color": PropertyFlags.COLOR,
    "selectorColor": PropertyFlags.COLOR,
    "selectedColor": PropertyFlags.COLOR,
    "primaryColor": PropertyFlags.COLOR,
    "secondaryColor": PropertyFlags.COLOR,
    "fontPath": PropertyFlags.FONT_PATH,
    "fontSize": PropertyFlags.FONT_SIZE,
    "center": PropertyFlags.CENTER,
})


def element_schema(element_type: str) -> Mapping[str, PropertyType] | None:
    """Return the property table for an element type, or None if unknown."""
    return ELEMENT_SCHEMAS.get(element_type)
