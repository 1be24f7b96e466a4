"""Turn tab placeholders into paragraph tab stops and head indents."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from text_composer.composer.measurement import ApproximateMeasurer, MeasurementError, Measurer
from text_composer.composer.paragraph_resolver import paragraph_attributes_for, unify_paragraphs
from text_composer.model.attributes import AttributeKey, Attributes
from text_composer.model.buffer import ComposedBuffer, ParagraphRange
from text_composer.model.fragments import HeadIndent, Spacer, TabMode
from text_composer.model.paragraph import ParagraphAttributes, TabStop
from text_composer.utils.logger import get_logger

LOGGER = get_logger(__name__)

FALLBACK_WIDTH = 0.0


@dataclass(slots=True)
class TabPlacement:
    """A tab placeholder and the width of the content leading up to it."""

    index: int
    mode: TabMode
    preceding_width: float


class TabResolver:
    """Resolve tab placeholders paragraph by paragraph.

    The first pass measures the content between consecutive tabs, the second
    converts each tab into geometry: a ``Spacer`` becomes a tab stop a fixed
    distance past the preceding content, a ``HeadIndent`` moves the
    paragraph's head indent to where the tab lands. Positions are measured
    from the paragraph's leading edge.
    """

    def __init__(self, measurer: Optional[Measurer] = None, *, fallback_width: float = FALLBACK_WIDTH) -> None:
        self._measurer = measurer or ApproximateMeasurer()
        self._fallback_width = fallback_width

    # ------------------------------------------------------------------
    # Public API
    def resolve(self, buffer: ComposedBuffer) -> ComposedBuffer:
        """Rewrite ``buffer`` in place and return it."""
        unify_paragraphs(buffer)
        for paragraph_range in buffer.paragraph_ranges():
            placements = self._measure_paragraph(buffer, paragraph_range)
            if placements:
                self._apply_placements(buffer, paragraph_range, placements)
        return buffer

    # ------------------------------------------------------------------
    # Pass 1: measurement
    def _measure_paragraph(self, buffer: ComposedBuffer, paragraph_range: ParagraphRange) -> List[TabPlacement]:
        placements: List[TabPlacement] = []
        segment_start = paragraph_range.start
        for run in buffer.runs_between(paragraph_range.start, paragraph_range.content_end):
            mode = run.attributes.get(AttributeKey.TAB)
            if mode is None:
                continue
            for index in range(run.start, run.end):
                width = self._measure_span(buffer, segment_start, index)
                placements.append(TabPlacement(index, mode, width))
                segment_start = index + 1
        return placements

    def _measure_span(self, buffer: ComposedBuffer, start: int, end: int) -> float:
        text = buffer.text
        total = 0.0
        for run in buffer.runs_between(start, end):
            piece = text[max(run.start, start) : min(run.end, end)]
            if piece:
                total += self._measure(piece, run.attributes)
        return total

    def _measure(self, content: str, attributes: Attributes) -> float:
        try:
            width = self._measurer(content, attributes)
        except MeasurementError as exc:
            LOGGER.warning("Using fallback width %.1f: %s", self._fallback_width, exc)
            return self._fallback_width
        if width is None:
            LOGGER.warning("No width for %r; using fallback width %.1f", content, self._fallback_width)
            return self._fallback_width
        return float(width)

    # ------------------------------------------------------------------
    # Pass 2: geometry
    def _apply_placements(
        self, buffer: ComposedBuffer, paragraph_range: ParagraphRange, placements: List[TabPlacement]
    ) -> None:
        position = 0.0
        stops: List[TabStop] = []
        head_indent: Optional[float] = None
        for placement in placements:
            position += placement.preceding_width
            if isinstance(placement.mode, Spacer):
                position += placement.mode.width
                stops.append(TabStop(position))
            elif isinstance(placement.mode, HeadIndent):
                position += placement.mode.indent
                head_indent = position

        current = paragraph_attributes_for(buffer, paragraph_range)
        paragraph = current.copy() if current is not None else ParagraphAttributes()
        for stop in stops:
            paragraph.add_tab_stop(stop)
        if head_indent is not None:
            paragraph.head_indent = head_indent

        buffer.set_attribute(paragraph_range.start, paragraph_range.end, AttributeKey.PARAGRAPH_STYLE, paragraph)
        for placement in placements:
            buffer.remove_attribute(placement.index, placement.index + 1, AttributeKey.TAB)
        LOGGER.debug(
            "Placed %d tab stop(s) in paragraph at %d (head indent: %s)",
            len(stops),
            paragraph_range.start,
            head_indent,
        )


def resolve_tabs(buffer: ComposedBuffer, measurer: Optional[Measurer] = None) -> ComposedBuffer:
    """Convenience wrapper around :meth:`TabResolver.resolve`."""
    return TabResolver(measurer).resolve(buffer)
