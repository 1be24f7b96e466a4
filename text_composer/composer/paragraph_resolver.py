"""Resolve paragraph-scoped attributes without mutating shared instances."""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from text_composer.model.attributes import AttributeKey
from text_composer.model.paragraph import ParagraphAttributes
from text_composer.utils.logger import get_logger

if TYPE_CHECKING:
    from text_composer.model.buffer import ComposedBuffer, ParagraphRange
    from text_composer.model.style import Style

LOGGER = get_logger(__name__)


def resolve_paragraph(
    inherited: Optional[ParagraphAttributes], style: "Style"
) -> Optional[ParagraphAttributes]:
    """Return the paragraph attributes ``style`` produces on top of ``inherited``.

    A paragraph object passed through the style's extra attributes replaces
    ``inherited`` as the starting point. Without typed paragraph parts the
    starting object is returned as-is (same identity, possibly None);
    otherwise a clone carries the changes and the input is left untouched.
    """
    source = style.inherited_paragraph() or inherited
    parts = style.paragraph_parts()
    if not parts:
        return source
    paragraph = source.copy() if source is not None else ParagraphAttributes()
    for kind, value in parts.items():
        paragraph.apply(kind, value)
    return paragraph


def unify_paragraphs(buffer: "ComposedBuffer") -> int:
    """Apply exactly one paragraph object across every physical paragraph.

    When fragments in one paragraph carry different paragraph objects, the
    first is copied and each later one contributes the fields it changed
    relative to the buffer's base paragraph. Returns the number of paragraphs
    whose objects had to be merged.
    """
    merged_count = 0
    reference = buffer.base_paragraph or ParagraphAttributes()
    for paragraph_range in buffer.paragraph_ranges():
        distinct = _distinct_paragraphs(buffer, paragraph_range)
        if not distinct:
            continue
        if len(distinct) == 1:
            unified = distinct[0]
        else:
            unified = distinct[0].copy()
            for other in distinct[1:]:
                unified.update(other.changes_from(reference))
            merged_count += 1
        if any(
            run.attributes.get(AttributeKey.PARAGRAPH_STYLE) is not unified
            for run in buffer.runs_between(paragraph_range.start, paragraph_range.end)
        ):
            buffer.set_attribute(
                paragraph_range.start, paragraph_range.end, AttributeKey.PARAGRAPH_STYLE, unified
            )
    if merged_count:
        LOGGER.debug("Merged paragraph attributes in %d paragraph(s)", merged_count)
    return merged_count


def paragraph_attributes_for(
    buffer: "ComposedBuffer", paragraph_range: "ParagraphRange"
) -> Optional[ParagraphAttributes]:
    """Return the paragraph object found on the first character of a paragraph."""
    if paragraph_range.end <= paragraph_range.start:
        return None
    return buffer.attribute_at(AttributeKey.PARAGRAPH_STYLE, paragraph_range.start)


def _distinct_paragraphs(
    buffer: "ComposedBuffer", paragraph_range: "ParagraphRange"
) -> List[ParagraphAttributes]:
    # Content characters decide; the terminator only counts for empty paragraphs.
    end = paragraph_range.content_end if paragraph_range.has_content else paragraph_range.end
    distinct: List[ParagraphAttributes] = []
    for run in buffer.runs_between(paragraph_range.start, end):
        paragraph = run.attributes.get(AttributeKey.PARAGRAPH_STYLE)
        if paragraph is not None and not any(paragraph is seen for seen in distinct):
            distinct.append(paragraph)
    return distinct
