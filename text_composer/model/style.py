"""Style: a partial style specification built from an ordered list of parts."""
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Tuple

from text_composer.composer.paragraph_resolver import resolve_paragraph
from text_composer.model.attributes import CHARACTER_ATTRIBUTE_KEYS, AttributeKey, Attributes
from text_composer.model.paragraph import ParagraphAttributes
from text_composer.model.style_parts import PartKind, StylePart
from text_composer.utils.logger import get_logger

LOGGER = get_logger(__name__)


class Style:
    """Ordered collection of style parts.

    A kind that appears more than once resolves to its last value; extra
    attribute maps are folded key by key. A kind that never appears is
    inherited from whatever style this one is merged over.
    """

    __slots__ = ("_parts",)

    def __init__(self, *parts: StylePart) -> None:
        for part in parts:
            if not isinstance(part, StylePart):
                raise TypeError(f"Style expects StylePart values, got {type(part).__name__}")
        self._parts: Tuple[StylePart, ...] = tuple(parts)

    @classmethod
    def of(cls, **values: Any) -> "Style":
        """Build a style from keyword arguments named after the part kinds."""
        parts = []
        for name, value in values.items():
            try:
                kind = PartKind(name)
            except ValueError:
                raise ValueError(f"Unknown style part: {name!r}") from None
            parts.append(StylePart(kind, value))
        return cls(*parts)

    @property
    def parts(self) -> Tuple[StylePart, ...]:
        return self._parts

    def derive(self, *parts: StylePart) -> "Style":
        """Return a new style with ``parts`` layered over this one."""
        return Style(*self._parts, *parts)

    def merged(self, override: Optional["Style"]) -> "Style":
        """Return this style with every part ``override`` sets replaced."""
        if override is None or not override.parts:
            return self
        if not self._parts:
            return override
        return Style._from_values(_fold(self._parts + override.parts))

    # ------------------------------------------------------------------
    # Folded accessors
    def values(self) -> Dict[PartKind, Any]:
        return _fold(self._parts)

    def value(self, kind: PartKind, default: Any = None) -> Any:
        return self.values().get(kind, default)

    def has(self, kind: PartKind) -> bool:
        return kind in self.values()

    def extra_attributes(self) -> Attributes:
        return dict(self.values().get(PartKind.EXTRA_ATTRIBUTES, {}))

    def paragraph_parts(self) -> Dict[PartKind, Any]:
        return {kind: value for kind, value in self.values().items() if kind.is_paragraph}

    def inherited_paragraph(self) -> Optional[ParagraphAttributes]:
        """Return a paragraph object supplied through the extra attributes, if any."""
        paragraph = self.extra_attributes().get(AttributeKey.PARAGRAPH_STYLE)
        if isinstance(paragraph, ParagraphAttributes):
            return paragraph
        return None

    def sets_paragraph(self) -> bool:
        return bool(self.paragraph_parts()) or self.inherited_paragraph() is not None

    # ------------------------------------------------------------------
    # Baking
    def character_attributes(self) -> Attributes:
        """Bake every non-paragraph part into its attribute key."""
        values = self.values()
        attributes: Attributes = {
            key: value
            for key, value in values.get(PartKind.EXTRA_ATTRIBUTES, {}).items()
            if key is not AttributeKey.PARAGRAPH_STYLE
        }
        for kind, value in values.items():
            key = CHARACTER_ATTRIBUTE_KEYS.get(kind)
            if key is None:
                continue
            if kind is PartKind.TRACKING:
                value = value.kerning(values.get(PartKind.FONT))
                if value is None:
                    LOGGER.debug("Skipping adobe tracking without a sized font")
                    continue
            elif kind is PartKind.LIGATURES:
                value = value.value
            attributes[key] = value
        return attributes

    def attributes(self) -> Attributes:
        """Bake the whole style; a paragraph object is present only if one is set."""
        attributes = self.character_attributes()
        paragraph = resolve_paragraph(None, self)
        if paragraph is not None:
            attributes[AttributeKey.PARAGRAPH_STYLE] = paragraph
        return attributes

    # ------------------------------------------------------------------
    @classmethod
    def _from_values(cls, values: Dict[PartKind, Any]) -> "Style":
        return cls(*(StylePart(kind, value) for kind, value in values.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        return self.values() == other.values()

    def __bool__(self) -> bool:
        return bool(self._parts)

    def __repr__(self) -> str:
        inner = ", ".join(f"{part.kind.value}={part.value!r}" for part in self._parts)
        return f"Style({inner})"


def merge(base: Optional[Style], override: Optional[Style]) -> Style:
    """Return ``base`` with every part explicitly set in ``override`` replaced."""
    return (base or Style()).merged(override)


def _fold(parts: Iterable[StylePart]) -> Dict[PartKind, Any]:
    values: Dict[PartKind, Any] = {}
    for part in parts:
        if part.kind is PartKind.EXTRA_ATTRIBUTES:
            extras = dict(values.get(PartKind.EXTRA_ATTRIBUTES, {}))
            extras.update(part.value)
            values[PartKind.EXTRA_ATTRIBUTES] = extras
        else:
            values[part.kind] = part.value
    return values
