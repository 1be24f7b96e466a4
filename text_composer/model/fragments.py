"""Fragments: the typed units of content a composition is built from."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional, Union

from text_composer.model.style import Style
from text_composer.model.style_parts import StylePart
from text_composer.utils.units import emu_to_points


def _require_distance(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value!r}")
    return float(value)


@dataclass(frozen=True, slots=True)
class Spacer:
    """Tab that leaves a fixed gap after the preceding content."""

    width: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _require_distance("Spacer width", self.width))


@dataclass(frozen=True, slots=True)
class HeadIndent:
    """Tab that indents the remaining paragraph to where the tab lands."""

    indent: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "indent", _require_distance("HeadIndent indent", self.indent))


TabMode = Union[Spacer, HeadIndent]


@dataclass(frozen=True, slots=True)
class TextFragment:
    """A run of plain text."""

    text: str
    style: Optional[Style] = None
    style_name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ObjectFragment:
    """An atomic embedded object such as an image."""

    attachment: Any
    style: Optional[Style] = None
    style_name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TabFragment:
    """An explicit tab marker resolved into paragraph tab geometry."""

    mode: TabMode
    style: Optional[Style] = None
    style_name: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.mode, (Spacer, HeadIndent)):
            raise ValueError(f"Unsupported tab mode: {self.mode!r}")


Fragment = Union[TextFragment, ObjectFragment, TabFragment]


class Tab:
    """Shorthand constructors for tab fragments."""

    @staticmethod
    def spacer(width: float, style: Optional[Style] = None) -> TabFragment:
        return TabFragment(Spacer(width), style=style)

    @staticmethod
    def head_indent(indent: float, style: Optional[Style] = None) -> TabFragment:
        return TabFragment(HeadIndent(indent), style=style)


@dataclass(frozen=True, slots=True)
class ImageAttachment:
    """Embedded image with its intrinsic size in English Metric Units."""

    name: str
    width_emu: Optional[int] = None
    height_emu: Optional[int] = None
    data: Optional[bytes] = None

    @property
    def width(self) -> Optional[float]:
        """Width in points, or None when the size is unknown."""
        if self.width_emu is None:
            return None
        return emu_to_points(self.width_emu)

    @property
    def height(self) -> Optional[float]:
        if self.height_emu is None:
            return None
        return emu_to_points(self.height_emu)


def styled(content: Any, *parts: StylePart, style_name: Optional[str] = None, **values: Any) -> Fragment:
    """Attach a style to a string, an attachment or an existing fragment.

    Parts and keyword values are layered over any style the fragment
    already carries.
    """
    style = Style(*parts).merged(Style.of(**values)) if values else Style(*parts)
    if isinstance(content, (TextFragment, ObjectFragment, TabFragment)):
        combined = content.style.merged(style) if content.style is not None else style
        return type(content)(
            _content_value(content), style=combined, style_name=style_name or content.style_name
        )
    if isinstance(content, str):
        return TextFragment(content, style=style, style_name=style_name)
    if isinstance(content, (Spacer, HeadIndent)):
        return TabFragment(content, style=style, style_name=style_name)
    return ObjectFragment(content, style=style, style_name=style_name)


def as_fragment(value: Any) -> Fragment:
    """Coerce a composition input into a fragment."""
    if isinstance(value, (TextFragment, ObjectFragment, TabFragment)):
        return value
    if isinstance(value, str):
        return TextFragment(value)
    if isinstance(value, (Spacer, HeadIndent)):
        return TabFragment(value)
    if isinstance(value, ImageAttachment):
        return ObjectFragment(value)
    raise TypeError(f"Cannot compose value of type {type(value).__name__}")


def _content_value(fragment: Fragment) -> Any:
    if isinstance(fragment, TextFragment):
        return fragment.text
    if isinstance(fragment, ObjectFragment):
        return fragment.attachment
    return fragment.mode
