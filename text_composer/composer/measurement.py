"""Width measurement contract used by the tab resolver."""
from __future__ import annotations

from typing import Callable, Mapping, Optional

from text_composer.model.attributes import AttributeKey
from text_composer.model.buffer import OBJECT_REPLACEMENT_CHARACTER

DEFAULT_FONT_SIZE_PT = 11.0
AVERAGE_WIDTH_FACTOR = 0.5  # Approximation for Latin alphabets

Measurer = Callable[[str, Mapping[object, object]], Optional[float]]


class MeasurementError(RuntimeError):
    """Raised by a measurer when content has no determinable width."""


class ApproximateMeasurer:
    """Estimate widths from font size alone, without any font metrics.

    Text is measured as ``len(text) * font_size * width_factor``. Attachments
    report their own ``width`` in points; one without a width cannot be
    measured.
    """

    def __init__(
        self,
        default_font_size: float = DEFAULT_FONT_SIZE_PT,
        width_factor: float = AVERAGE_WIDTH_FACTOR,
    ) -> None:
        self.default_font_size = default_font_size
        self.width_factor = width_factor

    def __call__(self, content: str, attributes: Mapping[object, object]) -> float:
        attachment = attributes.get(AttributeKey.ATTACHMENT)
        if attachment is not None and content == OBJECT_REPLACEMENT_CHARACTER:
            return self._measure_attachment(attachment)
        return self._estimate_text_width(content, self._font_size(attributes))

    def _font_size(self, attributes: Mapping[object, object]) -> float:
        size = getattr(attributes.get(AttributeKey.FONT), "size", None)
        if isinstance(size, (int, float)) and size > 0:
            return float(size)
        return self.default_font_size

    def _estimate_text_width(self, text: str, font_size: float) -> float:
        if not text:
            return 0.0
        return len(text) * font_size * self.width_factor

    @staticmethod
    def _measure_attachment(attachment: object) -> float:
        width = getattr(attachment, "width", None)
        if isinstance(width, (int, float)):
            return float(width)
        raise MeasurementError(f"Attachment {attachment!r} has no intrinsic width")
