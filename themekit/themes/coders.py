"""Decoders turning raw property text into typed values."""

from __future__ import annotations

import logging
import os
from pathlib import Path
import re
from typing import Callable, Mapping

from themekit.errors import ThemeError, ThemeErrorCode
from themekit.runtime_paths import resolve_theme_path
from themekit.themes.constants import PropertyType
from themekit.themes.models import Pair, PropertyValue

logger = logging.getLogger(__name__)

WarningSink = Callable[[str], None]
Decoder = Callable[[str | None, Path, WarningSink], PropertyValue]

_FLOAT_PREFIX_RE = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)
_HEX_RE = re.compile(r"[0-9a-fA-F]+")
_TRUE_PREFIXES = frozenset("1tTyY")


def parse_float(text: str | None, default: float = 0.0) -> float:
    """Parse the longest numeric prefix of ``text``; ``default`` if there is none."""
    if not text:
        return default
    match = _FLOAT_PREFIX_RE.match(text)
    if match is None:
        return default
    return float(match.group(0))


def parse_bool(text: str | None, default: bool = False) -> bool:
    """Return True for text starting with 1, t, T, y or Y."""
    if not text:
        return default
    return text[0] in _TRUE_PREFIXES


def decode_pair(text: str | None, theme_path: Path, warn: WarningSink) -> PropertyValue:
    raw = text or ""
    divider = raw.find(" ")
    if divider < 0:
        raise ThemeError(
            ThemeErrorCode.INVALID_PAIR,
            f'invalid normalized pair ("{raw}")',
            path=theme_path,
        )
    pair = Pair(parse_float(raw[:divider]), parse_float(raw[divider:]))
    return PropertyValue(PropertyType.PAIR, pair)


def decode_text(text: str | None, theme_path: Path, warn: WarningSink) -> PropertyValue:
    return PropertyValue(PropertyType.TEXT, text or "")


def decode_path(text: str | None, theme_path: Path, warn: WarningSink) -> PropertyValue:
    raw = text or ""
    resolved = resolve_theme_path(raw, theme_path) or ""
    if not os.path.exists(resolved):
        warn(
            f'theme "{theme_path}" - could not find file "{raw}" '
            f'(resolved to "{resolved}")'
        )
    return PropertyValue(PropertyType.PATH, resolved)


def decode_color(text: str | None, theme_path: Path, warn: WarningSink) -> PropertyValue:
    return PropertyValue(PropertyType.COLOR, parse_hex_color(text, theme_path))


def parse_hex_color(text: str | None, theme_path: Path | None = None) -> int:
    """Decode ``RRGGBB`` or ``RRGGBBAA`` into packed RGBA; RGB gets full alpha."""
    if not text:
        raise ThemeError(ThemeErrorCode.EMPTY_COLOR, "Empty color", path=theme_path)
    if len(text) not in (6, 8):
        raise ThemeError(
            ThemeErrorCode.INVALID_COLOR,
            f'Invalid color (bad length, "{text}" - must be 6 or 8)',
            path=theme_path,
        )
    if not _HEX_RE.fullmatch(text):
        raise ThemeError(
            ThemeErrorCode.INVALID_COLOR,
            f'Invalid color ("{text}" is not hexadecimal)',
            path=theme_path,
        )
    value = int(text, 16)
    if len(text) == 6:
        value = (value << 8) | 0xFF
    return value


def decode_scalar(text: str | None, theme_path: Path, warn: WarningSink) -> PropertyValue:
    return PropertyValue(PropertyType.SCALAR, parse_float(text))


def decode_bool(text: str | None, theme_path: Path, warn: WarningSink) -> PropertyValue:
    return PropertyValue(PropertyType.BOOLEAN, parse_bool(text))


DECODERS: Mapping[PropertyType, Decoder] = {
    PropertyType.PAIR: decode_pair,
    PropertyType.PATH: decode_path,
    PropertyType.TEXT: decode_text,
    PropertyType.COLOR: decode_color,
    PropertyType.SCALAR: decode_scalar,
    PropertyType.BOOLEAN: decode_bool,
}


def decode_value(
    kind: PropertyType,
    text: str | None,
    theme_path: Path,
    warn: WarningSink | None = None,
) -> PropertyValue:
    """Decode ``text`` as a ``kind`` value, reporting missing files to ``warn``."""
    return DECODERS[kind](text, theme_path, warn or logger.warning)
