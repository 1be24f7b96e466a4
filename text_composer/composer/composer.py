"""Compose fragments and a base style into one formatted buffer."""
from __future__ import annotations

from typing import Any, Iterable, Optional, Union

from text_composer.composer.paragraph_resolver import resolve_paragraph
from text_composer.model.attributes import AttributeKey, Attributes
from text_composer.model.buffer import OBJECT_REPLACEMENT_CHARACTER, TAB_CHARACTER, ComposedBuffer
from text_composer.model.fragments import Fragment, ObjectFragment, TabFragment, TextFragment, as_fragment
from text_composer.model.paragraph import ParagraphAttributes
from text_composer.model.style import Style, merge
from text_composer.model.style_model import StylesCatalog
from text_composer.model.style_parts import PartKind
from text_composer.utils.logger import get_logger

LOGGER = get_logger(__name__)

Separator = Union[str, Fragment]


class Composer:
    """Build a :class:`ComposedBuffer` from fragments without measuring anything."""

    def __init__(self, styles: Optional[StylesCatalog] = None) -> None:
        self._styles = styles

    # ------------------------------------------------------------------
    # Public API
    def compose(
        self,
        fragments: Iterable[Any],
        base_style: Optional[Style] = None,
        *,
        separator: Optional[Separator] = None,
    ) -> ComposedBuffer:
        """Append every fragment in order, each styled over ``base_style``.

        Separators go between consecutive fragments and only ever see the base
        style, so per-fragment overrides never bleed into them.
        """
        base_style = base_style or Style()
        base_paragraph = resolve_paragraph(None, base_style)
        buffer = ComposedBuffer(base_style.character_attributes(), base_paragraph)
        separator_fragment = as_fragment(separator) if separator is not None else None

        count = 0
        for fragment in fragments:
            fragment = as_fragment(fragment)
            if count and separator_fragment is not None:
                self._append_fragment(buffer, separator_fragment, base_style, base_paragraph, use_catalog=False)
            self._append_fragment(buffer, fragment, base_style, base_paragraph)
            count += 1

        LOGGER.debug("Composed %d fragment(s) into %d character(s)", count, len(buffer))
        return buffer

    # ------------------------------------------------------------------
    # Fragment handling
    def _append_fragment(
        self,
        buffer: ComposedBuffer,
        fragment: Fragment,
        base_style: Style,
        base_paragraph: Optional[ParagraphAttributes],
        *,
        use_catalog: bool = True,
    ) -> None:
        override = self._override_style(fragment, use_catalog)
        effective = merge(base_style, override)
        attributes = effective.character_attributes()
        if override.inherited_paragraph() is not None:
            # A supplied paragraph object still carries the base style's typed parts.
            paragraph = resolve_paragraph(None, effective)
        else:
            paragraph = resolve_paragraph(base_paragraph, override)
        if paragraph is not None:
            attributes[AttributeKey.PARAGRAPH_STYLE] = paragraph

        content = self._render(fragment, effective, attributes)
        buffer.append(content, attributes)

    def _override_style(self, fragment: Fragment, use_catalog: bool) -> Style:
        style = Style()
        if use_catalog and fragment.style_name is not None:
            if self._styles is None:
                raise KeyError(f"Unknown style: {fragment.style_name!r}")
            style = self._styles.style_for(fragment.style_name)
        return style.merged(fragment.style)

    def _render(self, fragment: Fragment, style: Style, attributes: Attributes) -> str:
        if isinstance(fragment, TextFragment):
            transform = style.value(PartKind.TRANSFORM)
            return transform.apply(fragment.text) if transform is not None else fragment.text
        if isinstance(fragment, ObjectFragment):
            attributes[AttributeKey.ATTACHMENT] = fragment.attachment
            return OBJECT_REPLACEMENT_CHARACTER
        if isinstance(fragment, TabFragment):
            attributes[AttributeKey.TAB] = fragment.mode
            return TAB_CHARACTER
        raise TypeError(f"Unsupported fragment type: {type(fragment).__name__}")


def compose(
    fragments: Iterable[Any],
    base_style: Optional[Style] = None,
    *,
    separator: Optional[Separator] = None,
    styles: Optional[StylesCatalog] = None,
) -> ComposedBuffer:
    """Convenience wrapper around :meth:`Composer.compose`."""
    return Composer(styles).compose(fragments, base_style, separator=separator)
