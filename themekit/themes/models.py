"""Theme framework models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple, Union

from themekit.errors import PropertyNotFoundError, PropertyTypeError
from themekit.themes.constants import PropertyType


class Pair(NamedTuple):
    """Two floats, usually a normalized position or size."""

    x: float
    y: float


RawValue = Union[Pair, str, int, float, bool]

_PYTHON_TYPES: dict[PropertyType, type | tuple[type, ...]] = {
    PropertyType.PAIR: Pair,
    PropertyType.PATH: str,
    PropertyType.TEXT: str,
    PropertyType.COLOR: int,
    PropertyType.SCALAR: float,
    PropertyType.BOOLEAN: bool,
}


@dataclass(frozen=True, slots=True)
class PropertyValue:
    """A decoded property value tagged with its property type."""

    kind: PropertyType
    value: RawValue

    def __post_init__(self) -> None:
        expected = _PYTHON_TYPES[self.kind]
        # bool is an int subclass; a COLOR must not hold one.
        if not isinstance(self.value, expected) or (
            self.kind is PropertyType.COLOR and isinstance(self.value, bool)
        ):
            raise PropertyTypeError(
                f"{self.kind.value} value cannot hold {type(self.value).__name__}"
            )

    def expect(self, kind: PropertyType) -> RawValue:
        if self.kind is not kind:
            raise PropertyTypeError(
                f"property holds a {self.kind.value} value, not {kind.value}"
            )
        return self.value

    def as_pair(self) -> Pair:
        return self.expect(PropertyType.PAIR)  # type: ignore[return-value]

    def as_path(self) -> str:
        return self.expect(PropertyType.PATH)  # type: ignore[return-value]

    def as_text(self) -> str:
        return self.expect(PropertyType.TEXT)  # type: ignore[return-value]

    def as_color(self) -> int:
        return self.expect(PropertyType.COLOR)  # type: ignore[return-value]

    def as_scalar(self) -> float:
        return self.expect(PropertyType.SCALAR)  # type: ignore[return-value]

    def as_bool(self) -> bool:
        return self.expect(PropertyType.BOOLEAN)  # type: ignore[return-value]


@dataclass(slots=True)
class ThemeElement:
    """A named node of a view with its decoded properties."""

    element_type: str
    extra: bool = False
    properties: dict[str, PropertyValue] = field(default_factory=dict)

    def has(self, name: str) -> bool:
        return name in self.properties

    def get(self, name: str, kind: PropertyType | None = None) -> RawValue:
        try:
            value = self.properties[name]
        except KeyError:
            raise PropertyNotFoundError(
                f"{self.element_type} element has no {name!r} property"
            ) from None
        if kind is None:
            return value.value
        return value.expect(kind)


@dataclass(slots=True)
class ThemeView:
    """Elements of one screen layout, keyed by element name."""

    elements: dict[str, ThemeElement] = field(default_factory=dict)
    _extras: tuple[tuple[str, ThemeElement], ...] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def extras(self) -> tuple[tuple[str, ThemeElement], ...]:
        """Return ``(name, element)`` for every extra element, in document order.

        Computed on first use; views are never mutated after a load so the
        result stays valid until the theme is reloaded.
        """
        if self._extras is None:
            self._extras = tuple(
                (name, element) for name, element in self.elements.items() if element.extra
            )
        return self._extras


@dataclass(frozen=True, slots=True)
class ParsedTheme:
    """Result of parsing a theme document, committed as one unit."""

    source_path: Path
    version: float
    views: dict[str, ThemeView]
