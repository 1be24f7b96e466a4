"""
Integration tests for the complete composition pipeline.

Covers composing, tab resolution and debug dumps through ``compose_text``.
"""

import json
import tempfile
import unittest
from pathlib import Path

from text_composer.composer.styles_resolver import StylesResolver
from text_composer.main import compose_text
from text_composer.model.attributes import AttributeKey
from text_composer.model.fragments import ImageAttachment, Tab, TextFragment, styled
from text_composer.model.style import Style
from text_composer.model.style_model import StyleDefinition
from text_composer.model.style_parts import Font, TextAlignment


class IntegrationTest(unittest.TestCase):
    """End-to-end behaviour of ``compose_text``."""

    def test_paragraphs_resolve_independently(self) -> None:
        buffer = compose_text(
            [styled(" lineSpacing ", line_spacing=1.8), styled(" headIndent ", head_indent=10)],
            Style.of(first_line_head_indent=5),
            separator="\n",
        )
        first = buffer.attribute_at(AttributeKey.PARAGRAPH_STYLE, 0)
        second = buffer.attribute_at(AttributeKey.PARAGRAPH_STYLE, len(buffer) - 1)

        self.assertEqual((first.first_line_head_indent, first.line_spacing, first.head_indent), (5, 1.8, 0))
        self.assertEqual((second.first_line_head_indent, second.line_spacing, second.head_indent), (5, 0, 10))

    def test_default_measurer_places_tab_stops(self) -> None:
        font = Font("Helvetica", 10)
        buffer = compose_text(["Name", Tab.spacer(20), "Value"], Style.of(font=font))
        paragraph = buffer.attribute_at(AttributeKey.PARAGRAPH_STYLE, 0)
        # 4 characters at 10pt with the 0.5 average width factor.
        self.assertEqual([stop.location for stop in paragraph.tab_stops], [40.0])

    def test_named_styles_and_objects(self) -> None:
        catalog = StylesResolver(
            [StyleDefinition("caption", Style.of(alignment=TextAlignment.CENTER, color="gray"))]
        ).resolve()
        image = ImageAttachment("logo", width_emu=914400)
        buffer = compose_text(
            [image, Tab.head_indent(8), TextFragment("Logo", style_name="caption")],
            styles=catalog,
        )
        paragraph = buffer.attribute_at(AttributeKey.PARAGRAPH_STYLE, 0)
        self.assertEqual(paragraph.head_indent, 80.0)
        self.assertEqual(paragraph.alignment, TextAlignment.CENTER)
        self.assertEqual(buffer.attribute_at(AttributeKey.FOREGROUND_COLOR, len(buffer) - 1), "gray")

    def test_debug_dump_written(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            buffer = compose_text(
                [styled("A", color="red"), Tab.spacer(5), ImageAttachment("img", width_emu=12700, data=b"xyz")],
                debug_dir=Path(tmp),
            )
            payload = json.loads((Path(tmp) / "composed_buffer.json").read_text(encoding="utf-8"))

        self.assertEqual(payload["text"], buffer.text)
        self.assertEqual(len(payload["runs"]), len(buffer.runs))
        first_run = payload["runs"][0]["attributes"]
        self.assertEqual(first_run["foreground_color"], "red")
        self.assertEqual(first_run["paragraph_style"]["tab_stops"][0]["location"], 10.5)
        self.assertEqual(payload["runs"][-1]["attributes"]["attachment"]["data"], "<3 bytes>")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
