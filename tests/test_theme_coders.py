"""Tests for property value decoders."""

from __future__ import annotations

from pathlib import Path

import pytest

from themekit.errors import PropertyTypeError, ThemeError, ThemeErrorCode
from themekit.themes.coders import (
    decode_value,
    parse_bool,
    parse_float,
    parse_hex_color,
)
from themekit.themes.constants import PropertyType
from themekit.themes.models import Pair, PropertyValue


def _decode(kind: PropertyType, text: str | None, theme_path: Path, warnings=None) -> PropertyValue:
    sink = warnings.append if warnings is not None else (lambda _msg: None)
    return decode_value(kind, text, theme_path, sink)


def test_pair_decodes_two_floats(tmp_path: Path) -> None:
    value = _decode(PropertyType.PAIR, "0.5 0.25", tmp_path / "theme.xml")
    assert value.kind is PropertyType.PAIR
    assert value.as_pair() == Pair(0.5, 0.25)


def test_pair_without_space_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ThemeError) as info:
        _decode(PropertyType.PAIR, "0.5,0.25", tmp_path / "theme.xml")
    assert info.value.code is ThemeErrorCode.INVALID_PAIR
    assert "invalid normalized pair" in str(info.value)
    assert str(tmp_path / "theme.xml") in str(info.value)


def test_pair_tokens_parse_permissively(tmp_path: Path) -> None:
    value = _decode(PropertyType.PAIR, "abc 2.5px", tmp_path / "theme.xml")
    assert value.as_pair() == Pair(0.0, 2.5)


def test_parse_float_prefix_rules() -> None:
    assert parse_float("1.5em") == 1.5
    assert parse_float("  -2") == -2.0
    assert parse_float(".25") == 0.25
    assert parse_float("1e2") == 100.0
    assert parse_float("x1") == 0.0
    assert parse_float("") == 0.0
    assert parse_float(None, default=-1.0) == -1.0


@pytest.mark.parametrize("text", ["true", "True", "1", "yes", "Y"])
def test_parse_bool_true_tokens(text: str) -> None:
    assert parse_bool(text) is True


@pytest.mark.parametrize("text", ["false", "0", "no", "off", ""])
def test_parse_bool_false_tokens(text: str) -> None:
    assert parse_bool(text) is False


def test_parse_bool_missing_uses_default() -> None:
    assert parse_bool(None) is False
    assert parse_bool(None, default=True) is True


def test_rgb_color_gets_full_alpha() -> None:
    assert parse_hex_color("112233") == 0x112233FF
    assert parse_hex_color("abcdef") & 0xFF == 0xFF


def test_rgba_color_is_kept_as_is() -> None:
    assert parse_hex_color("11223344") == 0x11223344


@pytest.mark.parametrize("text", ["1", "12345", "1234567", "123456789", "#112233"])
def test_color_with_bad_length_is_rejected(text: str) -> None:
    with pytest.raises(ThemeError) as info:
        parse_hex_color(text)
    assert info.value.code is ThemeErrorCode.INVALID_COLOR
    assert "must be 6 or 8" in str(info.value)


@pytest.mark.parametrize("text", ["zz2233", "FFFFF\n", " FFFFF", "FFFFF ", "12_456", "+12345"])
def test_color_with_non_hex_digits_is_rejected(text: str) -> None:
    with pytest.raises(ThemeError) as info:
        parse_hex_color(text)
    assert info.value.code is ThemeErrorCode.INVALID_COLOR


def test_empty_color_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ThemeError) as info:
        _decode(PropertyType.COLOR, None, tmp_path / "theme.xml")
    assert info.value.code is ThemeErrorCode.EMPTY_COLOR


def test_text_is_kept_verbatim(tmp_path: Path) -> None:
    value = _decode(PropertyType.TEXT, "  Hello  ", tmp_path / "theme.xml")
    assert value.as_text() == "  Hello  "


def test_scalar_and_boolean(tmp_path: Path) -> None:
    theme_path = tmp_path / "theme.xml"
    assert _decode(PropertyType.SCALAR, "0.045", theme_path).as_scalar() == pytest.approx(0.045)
    assert _decode(PropertyType.BOOLEAN, "true", theme_path).as_bool() is True
    assert _decode(PropertyType.BOOLEAN, None, theme_path).as_bool() is False


def test_existing_path_resolves_without_warning(tmp_path: Path) -> None:
    (tmp_path / "logo.png").write_bytes(b"png")
    warnings: list[str] = []
    value = _decode(PropertyType.PATH, "./logo.png", tmp_path / "theme.xml", warnings)
    assert value.as_path() == (tmp_path / "logo.png").as_posix()
    assert warnings == []


def test_missing_path_warns_but_still_decodes(tmp_path: Path) -> None:
    warnings: list[str] = []
    value = _decode(PropertyType.PATH, "./missing.png", tmp_path / "theme.xml", warnings)
    assert value.as_path().endswith("missing.png")
    assert len(warnings) == 1
    assert "./missing.png" in warnings[0]
    assert "theme.xml" in warnings[0]
    assert value.as_path() in warnings[0]


def test_accessor_rejects_wrong_kind() -> None:
    value = PropertyValue(PropertyType.COLOR, 0x112233FF)
    with pytest.raises(PropertyTypeError):
        value.as_scalar()
    with pytest.raises(PropertyTypeError):
        value.as_path()


def test_property_value_checks_payload_type() -> None:
    with pytest.raises(PropertyTypeError):
        PropertyValue(PropertyType.PAIR, "0.5 0.5")
    with pytest.raises(PropertyTypeError):
        PropertyValue(PropertyType.COLOR, True)
