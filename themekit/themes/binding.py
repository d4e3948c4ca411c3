"""Apply loaded theme properties onto live PySide6 widgets."""

from __future__ import annotations

import logging

from PySide6.QtCore import QPointF, QRectF, QSize, QSizeF, Qt
from PySide6.QtGui import QColor, QFont, QFontDatabase, QPainter, QPalette, QPixmap, QTransform
from PySide6.QtWidgets import QLabel, QListWidget, QWidget

from themekit.themes.constants import PROPERTY_FLAGS, PropertyFlags, PropertyType
from themekit.themes.models import ThemeElement
from themekit.themes.store import ThemeData

logger = logging.getLogger(__name__)

_font_families: dict[str, str | None] = {}
_font_ids: list[int] = []


def to_qcolor(rgba: int) -> QColor:
    """Convert a packed 0xRRGGBBAA value into a QColor."""
    return QColor((rgba >> 24) & 0xFF, (rgba >> 16) & 0xFF, (rgba >> 8) & 0xFF, rgba & 0xFF)


def font_family(path: str) -> str | None:
    """Register a font file with Qt once and return its first family name."""
    if path in _font_families:
        return _font_families[path]
    family = None
    font_id = QFontDatabase.addApplicationFont(path)
    if font_id < 0:
        logger.warning("could not load font %s", path)
    else:
        _font_ids.append(font_id)
        families = QFontDatabase.applicationFontFamilies(font_id)
        family = families[0] if families else None
    _font_families[path] = family
    return family


def clear_fonts() -> None:
    """Unregister every font file added by ``font_family``."""
    for font_id in _font_ids:
        QFontDatabase.removeApplicationFont(font_id)
    _font_ids.clear()
    _font_families.clear()


def _wants(element: ThemeElement, name: str, properties: PropertyFlags) -> bool:
    return element.has(name) and bool(PROPERTY_FLAGS[name] & properties)


def _lookup(
    theme: ThemeData,
    view: str,
    element: str,
    element_type: str,
) -> ThemeElement | None:
    found = theme.find_element(view, element)
    if found is None:
        return None
    if found.element_type != element_type:
        logger.warning(
            "element %r in view %r is a %s, expected %s",
            element,
            view,
            found.element_type,
            element_type,
        )
        return None
    return found


def _scaled(element: ThemeElement, name: str, canvas: QSize) -> QPointF:
    pair = element.get(name, PropertyType.PAIR)
    return QPointF(pair.x * canvas.width(), pair.y * canvas.height())  # type: ignore[union-attr]


def _apply_geometry(
    element: ThemeElement,
    widget: QWidget,
    properties: PropertyFlags,
    canvas: QSize,
) -> None:
    if _wants(element, "size", properties):
        size = _scaled(element, "size", canvas)
        widget.resize(round(size.x()), round(size.y()))
    if _wants(element, "pos", properties):
        pos = _scaled(element, "pos", canvas)
        if _wants(element, "origin", properties):
            origin = element.get("origin", PropertyType.PAIR)
            pos -= QPointF(origin.x * widget.width(), origin.y * widget.height())  # type: ignore[union-attr]
        widget.move(round(pos.x()), round(pos.y()))


def _font(element: ThemeElement, base: QFont, properties: PropertyFlags, canvas: QSize) -> QFont:
    font = QFont(base)
    if _wants(element, "fontPath", properties):
        family = font_family(element.get("fontPath", PropertyType.PATH))  # type: ignore[arg-type]
        if family:
            font.setFamily(family)
    if _wants(element, "fontSize", properties):
        size = element.get("fontSize", PropertyType.SCALAR)
        font.setPixelSize(max(1, round(size * canvas.height())))  # type: ignore[operator]
    return font


def apply_to_image(
    theme: ThemeData,
    view: str,
    element: str,
    label: QLabel,
    properties: PropertyFlags,
    canvas: QSize,
) -> bool:
    """Apply an ``image`` element onto ``label``; returns False if it is absent."""
    found = _lookup(theme, view, element, "image")
    if found is None:
        return False
    if _wants(found, "path", properties):
        pixmap = QPixmap(found.get("path", PropertyType.PATH))
        if not pixmap.isNull():
            label.setPixmap(pixmap)
    if _wants(found, "tile", properties):
        label.setScaledContents(not found.get("tile", PropertyType.BOOLEAN))
    _apply_geometry(found, label, properties, canvas)
    return True


def apply_to_text(
    theme: ThemeData,
    view: str,
    element: str,
    label: QLabel,
    properties: PropertyFlags,
    canvas: QSize,
) -> bool:
    """Apply a ``text`` element onto ``label``; returns False if it is absent."""
    found = _lookup(theme, view, element, "text")
    if found is None:
        return False
    if _wants(found, "text", properties):
        label.setText(found.get("text", PropertyType.TEXT))  # type: ignore[arg-type]
    if _wants(found, "color", properties):
        palette = label.palette()
        palette.setColor(QPalette.ColorRole.WindowText, to_qcolor(found.get("color", PropertyType.COLOR)))  # type: ignore[arg-type]
        label.setPalette(palette)
    if _wants(found, "center", properties):
        horizontal = (
            Qt.AlignmentFlag.AlignHCenter
            if found.get("center", PropertyType.BOOLEAN)
            else Qt.AlignmentFlag.AlignLeft
        )
        label.setAlignment(horizontal | Qt.AlignmentFlag.AlignVCenter)
    label.setFont(_font(found, label.font(), properties, canvas))
    _apply_geometry(found, label, properties, canvas)
    return True


_LIST_COLOR_ROLES = {
    "primaryColor": QPalette.ColorRole.Text,
    "selectedColor": QPalette.ColorRole.HighlightedText,
    "selectorColor": QPalette.ColorRole.Highlight,
}


def apply_to_text_list(
    theme: ThemeData,
    view: str,
    element: str,
    widget: QListWidget,
    properties: PropertyFlags,
    canvas: QSize,
) -> bool:
    """Apply a ``textlist`` element onto ``widget``.

    ``secondaryColor`` has no palette role; it is stored as the
    ``secondaryColor`` dynamic property for delegates to read.
    """
    found = _lookup(theme, view, element, "textlist")
    if found is None:
        return False
    palette = widget.palette()
    for name, role in _LIST_COLOR_ROLES.items():
        if _wants(found, name, properties):
            palette.setColor(role, to_qcolor(found.get(name, PropertyType.COLOR)))  # type: ignore[arg-type]
    widget.setPalette(palette)
    if _wants(found, "secondaryColor", properties):
        widget.setProperty(
            "secondaryColor",
            to_qcolor(found.get("secondaryColor", PropertyType.COLOR)),  # type: ignore[arg-type]
        )
    widget.setFont(_font(found, widget.font(), properties, canvas))
    _apply_geometry(found, widget, properties, canvas)
    return True


class ExtrasRenderer:
    """Paints the extra elements of a view, caching pixmaps per path."""

    def __init__(self, theme: ThemeData) -> None:
        self._theme = theme
        self._pixmaps: dict[str, QPixmap] = {}

    def clear(self) -> None:
        self._pixmaps.clear()
        clear_fonts()

    def pixmap(self, path: str) -> QPixmap:
        pixmap = self._pixmaps.get(path)
        if pixmap is None:
            pixmap = QPixmap(path)
            self._pixmaps[path] = pixmap
        return pixmap

    def render(
        self,
        view: str,
        painter: QPainter,
        transform: QTransform,
        canvas: QSize,
    ) -> int:
        """Draw every extra element of ``view``; returns how many were drawn."""
        found = self._theme.views.get(view)
        if found is None:
            return 0
        drawn = 0
        painter.save()
        try:
            painter.setTransform(transform)
            for _name, element in found.extras():
                if element.element_type == "image":
                    drawn += self._draw_image(element, painter, canvas)
                elif element.element_type == "text":
                    drawn += self._draw_text(element, painter, canvas)
        finally:
            painter.restore()
        return drawn

    def _rect(self, element: ThemeElement, canvas: QSize, natural: QSizeF) -> QRectF:
        size = natural
        if element.has("size"):
            scaled = _scaled(element, "size", canvas)
            size = QSizeF(scaled.x(), scaled.y())
        pos = _scaled(element, "pos", canvas) if element.has("pos") else QPointF(0, 0)
        if element.has("origin"):
            origin = element.get("origin", PropertyType.PAIR)
            pos -= QPointF(origin.x * size.width(), origin.y * size.height())  # type: ignore[union-attr]
        return QRectF(pos, size)

    def _draw_image(self, element: ThemeElement, painter: QPainter, canvas: QSize) -> int:
        if not element.has("path"):
            return 0
        pixmap = self.pixmap(element.get("path", PropertyType.PATH))  # type: ignore[arg-type]
        if pixmap.isNull():
            return 0
        rect = self._rect(element, canvas, QSizeF(pixmap.size()))
        if element.has("tile") and element.get("tile", PropertyType.BOOLEAN):
            painter.drawTiledPixmap(rect, pixmap)
        else:
            painter.drawPixmap(rect, pixmap, QRectF(pixmap.rect()))
        return 1

    def _draw_text(self, element: ThemeElement, painter: QPainter, canvas: QSize) -> int:
        if not element.has("text"):
            return 0
        rect = self._rect(element, canvas, QSizeF(canvas))
        painter.setFont(_font(element, painter.font(), PropertyFlags.ALL, canvas))
        if element.has("color"):
            painter.setPen(to_qcolor(element.get("color", PropertyType.COLOR)))  # type: ignore[arg-type]
        centered = element.has("center") and element.get("center", PropertyType.BOOLEAN)
        alignment = Qt.AlignmentFlag.AlignHCenter if centered else Qt.AlignmentFlag.AlignLeft
        painter.drawText(
            rect,
            int(alignment | Qt.AlignmentFlag.AlignVCenter),
            element.get("text", PropertyType.TEXT),  # type: ignore[arg-type]
        )
        return 1
