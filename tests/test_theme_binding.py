"""Tests for applying theme elements onto PySide6 widgets."""

from __future__ import annotations

from pathlib import Path

import pytest
from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPalette, QTransform
from PySide6.QtWidgets import QLabel, QListWidget

from themekit.themes import binding
from themekit.themes.binding import (
    ExtrasRenderer,
    apply_to_image,
    apply_to_text,
    apply_to_text_list,
    to_qcolor,
)
from themekit.themes.constants import PropertyFlags
from themekit.themes.store import ThemeData

CANVAS = QSize(200, 100)


@pytest.fixture
def theme(qapp, write_theme, tmp_path: Path) -> ThemeData:
    image = QImage(4, 4, QImage.Format.Format_ARGB32)
    image.fill(QColor(255, 0, 0))
    assert image.save(str(tmp_path / "red.png"))

    data = ThemeData()
    data.load_file(
        write_theme(
            "<theme><version>3</version><view name=\"basic\">"
            '<image name="logo"><pos>0.5 0.5</pos><size>0.1 0.2</size>'
            "<origin>0.5 0.5</origin><path>./red.png</path><tile>false</tile></image>"
            '<image name="block" extra="true"><pos>0 0</pos><size>0.25 0.5</size>'
            "<path>./red.png</path></image>"
            '<text name="title"><pos>0.1 0.1</pos><size>0.5 0.2</size><text>Hello</text>'
            "<color>00FF00</color><fontSize>0.2</fontSize><center>true</center></text>"
            '<text name="caption" extra="true"><pos>0.5 0.5</pos><text>extra</text></text>'
            '<textlist name="list"><pos>0 0</pos><size>1 1</size>'
            "<selectorColor>FF000080</selectorColor><selectedColor>FFFFFF</selectedColor>"
            "<primaryColor>0000FF</primaryColor><secondaryColor>808080</secondaryColor>"
            "</textlist>"
            "</view></theme>"
        )
    )
    return data


def test_to_qcolor_unpacks_rgba() -> None:
    color = to_qcolor(0x11223344)
    assert (color.red(), color.green(), color.blue(), color.alpha()) == (0x11, 0x22, 0x33, 0x44)


def test_apply_to_image_sets_geometry_and_pixmap(theme: ThemeData) -> None:
    label = QLabel()
    assert apply_to_image(theme, "basic", "logo", label, PropertyFlags.ALL, CANVAS)
    assert label.size() == QSize(20, 20)
    # origin 0.5 0.5 centres the label on its position
    assert (label.x(), label.y()) == (90, 40)
    assert not label.pixmap().isNull()
    assert label.hasScaledContents() is True


def test_apply_respects_property_mask(theme: ThemeData) -> None:
    label = QLabel()
    label.resize(7, 7)
    apply_to_image(theme, "basic", "logo", label, PropertyFlags.POSITION, CANVAS)
    assert label.size() == QSize(7, 7)
    assert label.pixmap().isNull()


def test_apply_to_text(theme: ThemeData) -> None:
    label = QLabel()
    assert apply_to_text(theme, "basic", "title", label, PropertyFlags.ALL, CANVAS)
    assert label.text() == "Hello"
    assert label.palette().color(QPalette.ColorRole.WindowText) == QColor(0, 255, 0)
    assert label.alignment() & Qt.AlignmentFlag.AlignHCenter
    assert label.font().pixelSize() == 20
    assert (label.x(), label.y()) == (20, 10)


def test_apply_to_text_list(theme: ThemeData) -> None:
    widget = QListWidget()
    assert apply_to_text_list(theme, "basic", "list", widget, PropertyFlags.ALL, CANVAS)
    palette = widget.palette()
    assert palette.color(QPalette.ColorRole.Text) == QColor(0, 0, 255)
    assert palette.color(QPalette.ColorRole.Highlight) == QColor(255, 0, 0, 128)
    assert widget.property("secondaryColor") == QColor(128, 128, 128)
    assert widget.size() == CANVAS


def test_apply_to_missing_or_mismatched_element(theme: ThemeData) -> None:
    label = QLabel()
    assert apply_to_image(theme, "basic", "nope", label, PropertyFlags.ALL, CANVAS) is False
    assert apply_to_image(theme, "nope", "logo", label, PropertyFlags.ALL, CANVAS) is False
    assert apply_to_text(theme, "basic", "logo", label, PropertyFlags.ALL, CANVAS) is False


def test_render_extras_draws_image_and_text(theme: ThemeData) -> None:
    image = QImage(CANVAS, QImage.Format.Format_ARGB32)
    image.fill(QColor(0, 0, 0, 0))
    renderer = ExtrasRenderer(theme)

    painter = QPainter(image)
    try:
        drawn = renderer.render("basic", painter, QTransform(), CANVAS)
    finally:
        painter.end()

    assert drawn == 2
    assert image.pixelColor(10, 10) == QColor(255, 0, 0)
    assert image.pixelColor(60, 20).alpha() == 0


def test_render_extras_applies_transform(theme: ThemeData) -> None:
    image = QImage(CANVAS, QImage.Format.Format_ARGB32)
    image.fill(QColor(0, 0, 0, 0))
    renderer = ExtrasRenderer(theme)

    painter = QPainter(image)
    try:
        renderer.render("basic", painter, QTransform.fromTranslate(100, 0), CANVAS)
    finally:
        painter.end()

    assert image.pixelColor(10, 10).alpha() == 0
    assert image.pixelColor(110, 10) == QColor(255, 0, 0)


def test_render_extras_of_unknown_view_draws_nothing(theme: ThemeData) -> None:
    image = QImage(CANVAS, QImage.Format.Format_ARGB32)
    painter = QPainter(image)
    try:
        assert ExtrasRenderer(theme).render("nope", painter, QTransform(), CANVAS) == 0
    finally:
        painter.end()


def test_renderer_clear_resets_font_cache(theme: ThemeData, tmp_path: Path) -> None:
    missing = str(tmp_path / "missing.ttf")
    assert binding.font_family(missing) is None
    assert missing in binding._font_families

    ExtrasRenderer(theme).clear()

    assert binding._font_families == {}
    assert binding._font_ids == []
