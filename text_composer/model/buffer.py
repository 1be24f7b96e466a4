"""Composed buffer: concatenated content with ranged attribute maps."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from text_composer.model.attributes import AttributeName, Attributes
from text_composer.model.paragraph import ParagraphAttributes

OBJECT_REPLACEMENT_CHARACTER = "\ufffc"
TAB_CHARACTER = "\t"
PARAGRAPH_SEPARATOR = "\n"


@dataclass(slots=True)
class StyledRun:
    """Half-open character range ``[start, end)`` sharing one attribute map."""

    start: int
    end: int
    attributes: Attributes = field(default_factory=dict)

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class ParagraphRange:
    """Physical paragraph; ``content_end`` excludes the terminating newline."""

    start: int
    content_end: int
    end: int

    @property
    def has_content(self) -> bool:
        return self.content_end > self.start


class ComposedBuffer:
    """Formatted text produced by the composer and refined by the tab resolver."""

    def __init__(
        self,
        base_attributes: Optional[Attributes] = None,
        base_paragraph: Optional[ParagraphAttributes] = None,
    ) -> None:
        self.base_attributes: Attributes = dict(base_attributes or {})
        self.base_paragraph = base_paragraph
        self._chunks: List[str] = []
        self._text: Optional[str] = ""
        self._runs: List[StyledRun] = []

    # ------------------------------------------------------------------
    # Building
    def append(self, content: str, attributes: Attributes) -> Optional[StyledRun]:
        """Append ``content`` tagged with a copy of ``attributes``."""
        if not content:
            return None
        start = len(self)
        self._chunks.append(content)
        self._text = None
        run = StyledRun(start, start + len(content), dict(attributes))
        self._runs.append(run)
        return run

    # ------------------------------------------------------------------
    # Queries
    @property
    def text(self) -> str:
        if self._text is None:
            self._text = "".join(self._chunks)
        return self._text

    @property
    def runs(self) -> Tuple[StyledRun, ...]:
        return tuple(self._runs)

    def __len__(self) -> int:
        return self._runs[-1].end if self._runs else 0

    def attributes_at(self, index: int) -> Attributes:
        return dict(self._run_at(index).attributes)

    def attribute_at(self, key: AttributeName, index: int, default: Any = None) -> Any:
        return self._run_at(index).attributes.get(key, default)

    def runs_between(self, start: int, end: int) -> List[StyledRun]:
        """Return the runs overlapping ``[start, end)``."""
        return [run for run in self._runs if run.start < end and run.end > start]

    def paragraph_ranges(self) -> List[ParagraphRange]:
        """Split the buffer at newlines; each newline belongs to the paragraph it ends."""
        ranges: List[ParagraphRange] = []
        text = self.text
        start = 0
        while start < len(text):
            newline = text.find(PARAGRAPH_SEPARATOR, start)
            if newline == -1:
                ranges.append(ParagraphRange(start, len(text), len(text)))
                break
            ranges.append(ParagraphRange(start, newline, newline + 1))
            start = newline + 1
        return ranges

    # ------------------------------------------------------------------
    # Mutation
    def set_attribute(self, start: int, end: int, key: AttributeName, value: Any) -> None:
        for run in self._isolate(start, end):
            attributes = dict(run.attributes)
            attributes[key] = value
            run.attributes = attributes

    def remove_attribute(self, start: int, end: int, key: AttributeName) -> None:
        for run in self._isolate(start, end):
            if key in run.attributes:
                attributes = dict(run.attributes)
                del attributes[key]
                run.attributes = attributes

    # ------------------------------------------------------------------
    def _run_at(self, index: int) -> StyledRun:
        if index < 0:
            index += len(self)
        for run in self._runs:
            if run.start <= index < run.end:
                return run
        raise IndexError(f"Index {index} out of range for buffer of length {len(self)}")

    def _isolate(self, start: int, end: int) -> List[StyledRun]:
        """Split runs at ``start`` and ``end`` and return the runs inside the range."""
        if start >= end:
            return []
        self._split_at(start)
        self._split_at(end)
        return [run for run in self._runs if run.start >= start and run.end <= end]

    def _split_at(self, index: int) -> None:
        for position, run in enumerate(self._runs):
            if run.start < index < run.end:
                tail = StyledRun(index, run.end, dict(run.attributes))
                run.end = index
                self._runs.insert(position + 1, tail)
                return

    def __repr__(self) -> str:
        return f"ComposedBuffer({self.text!r}, runs={len(self._runs)})"
