"""Theme document parsing and validation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Mapping
from xml.etree import ElementTree

from themekit.errors import ThemeError, ThemeErrorCode
from themekit.themes.coders import decode_value, parse_bool, parse_float
from themekit.themes.constants import (
    CURRENT_THEME_VERSION,
    EXTRA_ATTRIBUTE,
    MINIMUM_THEME_VERSION,
    NAME_ATTRIBUTE,
    ROOT_TAG,
    VERSION_TAG,
    VIEW_TAG,
    PropertyType,
    element_schema,
)
from themekit.themes.models import ParsedTheme, ThemeElement, ThemeView

logger = logging.getLogger(__name__)

# <include> is not supported; unknown children of <theme> are ignored.


def load_theme_document(
    path: str | Path,
    *,
    warn: Callable[[str], None] | None = None,
) -> ParsedTheme:
    """Parse and validate a theme file without touching any loaded state.

    ``warn`` receives non-fatal diagnostics (currently: path properties that
    point at missing files). It defaults to this module's logger.
    """
    theme_path = Path(path)
    sink = warn or logger.warning

    if not theme_path.exists():
        raise ThemeError(ThemeErrorCode.MISSING_FILE, "Missing file!", path=theme_path)

    try:
        tree = ElementTree.parse(theme_path)
    except ElementTree.ParseError as exc:
        raise ThemeError(
            ThemeErrorCode.XML_SYNTAX,
            f"XML parsing error: \n    {exc}",
            path=theme_path,
        ) from exc
    except OSError as exc:
        raise ThemeError(
            ThemeErrorCode.MISSING_FILE,
            f"Unable to read file: {exc}",
            path=theme_path,
        ) from exc

    root = tree.getroot()
    if root.tag != ROOT_TAG:
        raise ThemeError(ThemeErrorCode.MISSING_ROOT, "Missing <theme> tag!", path=theme_path)

    version = _parse_version(root, theme_path)

    views: dict[str, ThemeView] = {}
    for node in root.findall(VIEW_TAG):
        name = node.get(NAME_ATTRIBUTE)
        if name is None:
            raise ThemeError(
                ThemeErrorCode.VIEW_MISSING_NAME,
                'View missing "name" attribute!',
                path=theme_path,
            )
        view = _parse_view(node, theme_path, sink)
        if view.elements:
            views[name] = view
        else:
            logger.debug("dropping empty view %r in %s", name, theme_path)

    return ParsedTheme(source_path=theme_path, version=version, views=views)


def _parse_version(root: ElementTree.Element, theme_path: Path) -> float:
    node = root.find(VERSION_TAG)
    if node is None or not (node.text or "").strip():
        raise ThemeError(
            ThemeErrorCode.MISSING_VERSION,
            "<version> tag missing!\n   It's either out of date or you need to add "
            f"<version>{CURRENT_THEME_VERSION}</version> inside your <theme> tag.",
            path=theme_path,
        )
    version = parse_float(node.text)
    if version < MINIMUM_THEME_VERSION:
        raise ThemeError(
            ThemeErrorCode.VERSION_TOO_OLD,
            f"Theme is version {version:g}. "
            f"Minimum supported version is {MINIMUM_THEME_VERSION}.",
            path=theme_path,
        )
    return version


def _parse_view(
    root: ElementTree.Element,
    theme_path: Path,
    warn: Callable[[str], None],
) -> ThemeView:
    view = ThemeView()
    for node in root:
        name = node.get(NAME_ATTRIBUTE)
        if name is None:
            raise ThemeError(
                ThemeErrorCode.ELEMENT_MISSING_NAME,
                f'Element of type "{node.tag}" missing "name" attribute!',
                path=theme_path,
            )
        schema = element_schema(node.tag)
        if schema is None:
            raise ThemeError(
                ThemeErrorCode.UNKNOWN_ELEMENT,
                f'Unknown element of type "{node.tag}"!',
                path=theme_path,
            )
        view.elements[name] = _parse_element(node, schema, theme_path, warn)
    return view


def _parse_element(
    root: ElementTree.Element,
    schema: Mapping[str, PropertyType],
    theme_path: Path,
    warn: Callable[[str], None],
) -> ThemeElement:
    element = ThemeElement(
        element_type=root.tag,
        extra=parse_bool(root.get(EXTRA_ATTRIBUTE), default=False),
    )
    for node in root:
        kind = schema.get(node.tag)
        if kind is None:
            raise ThemeError(
                ThemeErrorCode.UNKNOWN_PROPERTY,
                f'Unknown property type "{node.tag}" (for element of type {root.tag}).',
                path=theme_path,
            )
        element.properties[node.tag] = decode_value(kind, node.text, theme_path, warn)
    return element
