"""Paragraph-scoped attributes and tab stops."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping

from text_composer.model.style_parts import LineBreakMode, PartKind, TextAlignment, WritingDirection


@dataclass(frozen=True, slots=True)
class TabStop:
    """Resolved horizontal position a tab character advances to, in points."""

    location: float
    alignment: TextAlignment = TextAlignment.NATURAL


# Paragraph part kind -> ParagraphAttributes field name.
PARAGRAPH_FIELDS = {
    PartKind.PARAGRAPH_SPACING_BEFORE: "paragraph_spacing_before",
    PartKind.PARAGRAPH_SPACING_AFTER: "paragraph_spacing_after",
    PartKind.ALIGNMENT: "alignment",
    PartKind.FIRST_LINE_HEAD_INDENT: "first_line_head_indent",
    PartKind.HEAD_INDENT: "head_indent",
    PartKind.TAIL_INDENT: "tail_indent",
    PartKind.LINE_BREAK_MODE: "line_break_mode",
    PartKind.MINIMUM_LINE_HEIGHT: "minimum_line_height",
    PartKind.MAXIMUM_LINE_HEIGHT: "maximum_line_height",
    PartKind.LINE_HEIGHT_MULTIPLE: "line_height_multiple",
    PartKind.LINE_SPACING: "line_spacing",
    PartKind.BASE_WRITING_DIRECTION: "base_writing_direction",
    PartKind.HYPHENATION_FACTOR: "hyphenation_factor",
}


@dataclass(slots=True)
class ParagraphAttributes:
    """Attributes that apply to a whole paragraph rather than to characters.

    Instances are mutable so the resolvers can build them up, but an instance
    that has been placed into a buffer is never mutated again: every change
    goes through :meth:`copy` first.
    """

    alignment: TextAlignment = TextAlignment.NATURAL
    first_line_head_indent: float = 0.0
    head_indent: float = 0.0
    tail_indent: float = 0.0
    paragraph_spacing_before: float = 0.0
    paragraph_spacing_after: float = 0.0
    line_break_mode: LineBreakMode = LineBreakMode.BY_WORD_WRAPPING
    minimum_line_height: float = 0.0
    maximum_line_height: float = 0.0
    line_height_multiple: float = 0.0
    line_spacing: float = 0.0
    base_writing_direction: WritingDirection = WritingDirection.NATURAL
    hyphenation_factor: float = 0.0
    tab_stops: List[TabStop] = field(default_factory=list)

    def copy(self) -> "ParagraphAttributes":
        """Return an independent clone; the tab-stop list is not shared."""
        clone = ParagraphAttributes(**{f.name: getattr(self, f.name) for f in fields(self)})
        clone.tab_stops = list(self.tab_stops)
        return clone

    def apply(self, kind: PartKind, value: Any) -> None:
        try:
            name = PARAGRAPH_FIELDS[kind]
        except KeyError:
            raise ValueError(f"{kind.value} is not a paragraph part") from None
        setattr(self, name, float(value) if isinstance(value, (int, float)) else value)

    def changes_from(self, reference: "ParagraphAttributes") -> Dict[str, Any]:
        """Return the fields whose values differ from ``reference``."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) != getattr(reference, f.name)
        }

    def update(self, changes: Mapping[str, Any]) -> None:
        for name, value in changes.items():
            if name == "tab_stops":
                value = list(value)
            setattr(self, name, value)

    def add_tab_stop(self, stop: TabStop) -> None:
        """Insert a tab stop keeping the list ordered by location."""
        index = len(self.tab_stops)
        while index > 0 and self.tab_stops[index - 1].location > stop.location:
            index -= 1
        self.tab_stops.insert(index, stop)
