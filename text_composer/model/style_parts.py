"""Style parts: the closed set of independently assignable style attributes."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class TextAlignment(Enum):
    """Horizontal alignment of a paragraph or tab stop."""

    NATURAL = "natural"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFIED = "justified"


class LineBreakMode(Enum):
    """How a consumer should break or truncate lines that do not fit."""

    BY_WORD_WRAPPING = "word_wrapping"
    BY_CHAR_WRAPPING = "char_wrapping"
    BY_CLIPPING = "clipping"
    BY_TRUNCATING_HEAD = "truncating_head"
    BY_TRUNCATING_TAIL = "truncating_tail"
    BY_TRUNCATING_MIDDLE = "truncating_middle"


class WritingDirection(Enum):
    """Base writing direction of a paragraph."""

    NATURAL = "natural"
    LEFT_TO_RIGHT = "left_to_right"
    RIGHT_TO_LEFT = "right_to_left"


class Ligatures(Enum):
    """Ligature mode; the value is the integer a text container expects."""

    DISABLED = 0
    DEFAULT = 1


_WORD = re.compile(r"\S+")


class TextTransform(Enum):
    """Case transformation applied to text content while composing."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    CAPITALIZED = "capitalized"

    def apply(self, text: str) -> str:
        if self is TextTransform.UPPERCASE:
            return text.upper()
        if self is TextTransform.LOWERCASE:
            return text.lower()
        return _WORD.sub(lambda match: match.group(0).capitalize(), text)


@dataclass(frozen=True, slots=True)
class Font:
    """Minimal font description; any object with a ``size`` attribute works too."""

    name: str
    size: float


@dataclass(frozen=True, slots=True)
class Tracking:
    """Letter spacing, either in points or in Adobe units (1/1000 em)."""

    value: float
    unit: str = "point"

    def __post_init__(self) -> None:
        if self.unit not in ("point", "adobe"):
            raise ValueError(f"Unknown tracking unit: {self.unit!r}")

    @classmethod
    def point(cls, value: float) -> "Tracking":
        return cls(value, "point")

    @classmethod
    def adobe(cls, value: float) -> "Tracking":
        return cls(value, "adobe")

    def kerning(self, font: Any = None) -> Optional[float]:
        """Return the kern in points, or None when adobe tracking has no sized font."""
        if self.unit == "point":
            return float(self.value)
        size = getattr(font, "size", None)
        if not isinstance(size, (int, float)):
            return None
        return float(self.value) * float(size) / 1000.0


class PartKind(Enum):
    """Every kind of style part. Values double as ``Style.of`` keyword names."""

    COLOR = "color"
    BACKGROUND_COLOR = "background_color"
    FONT = "font"
    BASELINE_OFFSET = "baseline_offset"
    TRACKING = "tracking"
    LINK = "link"
    LIGATURES = "ligatures"
    TRANSFORM = "transform"
    EXTRA_ATTRIBUTES = "extra_attributes"

    PARAGRAPH_SPACING_BEFORE = "paragraph_spacing_before"
    PARAGRAPH_SPACING_AFTER = "paragraph_spacing_after"
    ALIGNMENT = "alignment"
    FIRST_LINE_HEAD_INDENT = "first_line_head_indent"
    HEAD_INDENT = "head_indent"
    TAIL_INDENT = "tail_indent"
    LINE_BREAK_MODE = "line_break_mode"
    MINIMUM_LINE_HEIGHT = "minimum_line_height"
    MAXIMUM_LINE_HEIGHT = "maximum_line_height"
    LINE_HEIGHT_MULTIPLE = "line_height_multiple"
    LINE_SPACING = "line_spacing"
    BASE_WRITING_DIRECTION = "base_writing_direction"
    HYPHENATION_FACTOR = "hyphenation_factor"

    @property
    def is_paragraph(self) -> bool:
        return self in PARAGRAPH_KINDS


PARAGRAPH_KINDS = frozenset(
    {
        PartKind.PARAGRAPH_SPACING_BEFORE,
        PartKind.PARAGRAPH_SPACING_AFTER,
        PartKind.ALIGNMENT,
        PartKind.FIRST_LINE_HEAD_INDENT,
        PartKind.HEAD_INDENT,
        PartKind.TAIL_INDENT,
        PartKind.LINE_BREAK_MODE,
        PartKind.MINIMUM_LINE_HEIGHT,
        PartKind.MAXIMUM_LINE_HEIGHT,
        PartKind.LINE_HEIGHT_MULTIPLE,
        PartKind.LINE_SPACING,
        PartKind.BASE_WRITING_DIRECTION,
        PartKind.HYPHENATION_FACTOR,
    }
)

# Payload types checked on construction; kinds not listed are opaque.
_ENUM_PAYLOADS = {
    PartKind.LIGATURES: Ligatures,
    PartKind.TRANSFORM: TextTransform,
    PartKind.ALIGNMENT: TextAlignment,
    PartKind.LINE_BREAK_MODE: LineBreakMode,
    PartKind.BASE_WRITING_DIRECTION: WritingDirection,
}
_NUMERIC_KINDS = frozenset(
    {PartKind.BASELINE_OFFSET} | (PARAGRAPH_KINDS - set(_ENUM_PAYLOADS))
)


@dataclass(frozen=True, slots=True)
class StylePart:
    """A single explicitly set style attribute."""

    kind: PartKind
    value: Any

    def __post_init__(self) -> None:
        enum_type = _ENUM_PAYLOADS.get(self.kind)
        if enum_type is not None and not isinstance(self.value, enum_type):
            raise ValueError(f"{self.kind.value} expects {enum_type.__name__}, got {self.value!r}")
        if self.kind in _NUMERIC_KINDS and (
            isinstance(self.value, bool)
            or not isinstance(self.value, (int, float))
            or not math.isfinite(self.value)
        ):
            raise ValueError(f"{self.kind.value} expects a finite number, got {self.value!r}")
        if self.kind is PartKind.TRACKING and not isinstance(self.value, Tracking):
            raise ValueError(f"tracking expects Tracking, got {self.value!r}")
        if self.kind is PartKind.EXTRA_ATTRIBUTES:
            if not isinstance(self.value, Mapping):
                raise ValueError(f"extra_attributes expects a mapping, got {self.value!r}")
            object.__setattr__(self, "value", dict(self.value))

    def __hash__(self) -> int:
        if self.kind is PartKind.EXTRA_ATTRIBUTES:
            return hash((self.kind, tuple(self.value)))
        return hash((self.kind, self.value))

    @property
    def is_paragraph(self) -> bool:
        return self.kind.is_paragraph

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def color(cls, value: Any) -> "StylePart":
        return cls(PartKind.COLOR, value)

    @classmethod
    def background_color(cls, value: Any) -> "StylePart":
        return cls(PartKind.BACKGROUND_COLOR, value)

    @classmethod
    def font(cls, value: Any) -> "StylePart":
        return cls(PartKind.FONT, value)

    @classmethod
    def baseline_offset(cls, value: float) -> "StylePart":
        return cls(PartKind.BASELINE_OFFSET, value)

    @classmethod
    def tracking(cls, value: Tracking) -> "StylePart":
        return cls(PartKind.TRACKING, value)

    @classmethod
    def link(cls, value: Any) -> "StylePart":
        return cls(PartKind.LINK, value)

    @classmethod
    def ligatures(cls, value: Ligatures) -> "StylePart":
        return cls(PartKind.LIGATURES, value)

    @classmethod
    def transform(cls, value: TextTransform) -> "StylePart":
        return cls(PartKind.TRANSFORM, value)

    @classmethod
    def extra_attributes(cls, value: Mapping[Any, Any]) -> "StylePart":
        return cls(PartKind.EXTRA_ATTRIBUTES, value)

    @classmethod
    def paragraph_spacing_before(cls, value: float) -> "StylePart":
        return cls(PartKind.PARAGRAPH_SPACING_BEFORE, value)

    @classmethod
    def paragraph_spacing_after(cls, value: float) -> "StylePart":
        return cls(PartKind.PARAGRAPH_SPACING_AFTER, value)

    @classmethod
    def alignment(cls, value: TextAlignment) -> "StylePart":
        return cls(PartKind.ALIGNMENT, value)

    @classmethod
    def first_line_head_indent(cls, value: float) -> "StylePart":
        return cls(PartKind.FIRST_LINE_HEAD_INDENT, value)

    @classmethod
    def head_indent(cls, value: float) -> "StylePart":
        return cls(PartKind.HEAD_INDENT, value)

    @classmethod
    def tail_indent(cls, value: float) -> "StylePart":
        return cls(PartKind.TAIL_INDENT, value)

    @classmethod
    def line_break_mode(cls, value: LineBreakMode) -> "StylePart":
        return cls(PartKind.LINE_BREAK_MODE, value)

    @classmethod
    def minimum_line_height(cls, value: float) -> "StylePart":
        return cls(PartKind.MINIMUM_LINE_HEIGHT, value)

    @classmethod
    def maximum_line_height(cls, value: float) -> "StylePart":
        return cls(PartKind.MAXIMUM_LINE_HEIGHT, value)

    @classmethod
    def line_height_multiple(cls, value: float) -> "StylePart":
        return cls(PartKind.LINE_HEIGHT_MULTIPLE, value)

    @classmethod
    def line_spacing(cls, value: float) -> "StylePart":
        return cls(PartKind.LINE_SPACING, value)

    @classmethod
    def base_writing_direction(cls, value: WritingDirection) -> "StylePart":
        return cls(PartKind.BASE_WRITING_DIRECTION, value)

    @classmethod
    def hyphenation_factor(cls, value: float) -> "StylePart":
        return cls(PartKind.HYPHENATION_FACTOR, value)
