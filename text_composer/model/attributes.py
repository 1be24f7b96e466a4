"""Attribute keys used in baked attribute maps."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Hashable, Union

from text_composer.model.style_parts import PartKind


class AttributeKey(Enum):
    """Recognized attribute keys; any other hashable key is passed through as-is."""

    FOREGROUND_COLOR = "foreground_color"
    BACKGROUND_COLOR = "background_color"
    FONT = "font"
    BASELINE_OFFSET = "baseline_offset"
    KERN = "kern"
    LINK = "link"
    LIGATURE = "ligature"
    PARAGRAPH_STYLE = "paragraph_style"
    ATTACHMENT = "attachment"
    TAB = "tab"


AttributeName = Union[AttributeKey, Hashable]
Attributes = Dict[AttributeName, Any]

# Character part kinds that bake to exactly one attribute key.
CHARACTER_ATTRIBUTE_KEYS = {
    PartKind.COLOR: AttributeKey.FOREGROUND_COLOR,
    PartKind.BACKGROUND_COLOR: AttributeKey.BACKGROUND_COLOR,
    PartKind.FONT: AttributeKey.FONT,
    PartKind.BASELINE_OFFSET: AttributeKey.BASELINE_OFFSET,
    PartKind.TRACKING: AttributeKey.KERN,
    PartKind.LINK: AttributeKey.LINK,
    PartKind.LIGATURES: AttributeKey.LIGATURE,
}
