"""Unit tests for style parts, merging and baking."""
import unittest

from text_composer.model.attributes import AttributeKey
from text_composer.model.paragraph import ParagraphAttributes
from text_composer.model.style import Style, merge
from text_composer.model.style_parts import (
    Font,
    Ligatures,
    LineBreakMode,
    PartKind,
    StylePart,
    TextAlignment,
    TextTransform,
    Tracking,
    WritingDirection,
)


def full_style() -> Style:
    return Style(
        StylePart.color("black"),
        StylePart.background_color("white"),
        StylePart.font(Font("Helvetica", 12)),
        StylePart.baseline_offset(1),
        StylePart.tracking(Tracking.point(1)),
        StylePart.link("http://example.com/"),
        StylePart.ligatures(Ligatures.DEFAULT),
        StylePart.transform(TextTransform.LOWERCASE),
        StylePart.extra_attributes({"shared": "base", "base-only": True}),
        StylePart.paragraph_spacing_before(1),
        StylePart.paragraph_spacing_after(1),
        StylePart.alignment(TextAlignment.LEFT),
        StylePart.first_line_head_indent(1),
        StylePart.head_indent(1),
        StylePart.tail_indent(1),
        StylePart.line_break_mode(LineBreakMode.BY_WORD_WRAPPING),
        StylePart.minimum_line_height(1),
        StylePart.maximum_line_height(1),
        StylePart.line_height_multiple(1),
        StylePart.line_spacing(1),
        StylePart.base_writing_direction(WritingDirection.RIGHT_TO_LEFT),
        StylePart.hyphenation_factor(1),
    )


OVERRIDES = [
    StylePart.color("red"),
    StylePart.background_color("blue"),
    StylePart.font(Font("Avenir-Book", 28)),
    StylePart.baseline_offset(10),
    StylePart.tracking(Tracking.point(10)),
    StylePart.link("http://thebestwords.com/"),
    StylePart.ligatures(Ligatures.DISABLED),
    StylePart.transform(TextTransform.UPPERCASE),
    StylePart.paragraph_spacing_before(10),
    StylePart.paragraph_spacing_after(10),
    StylePart.alignment(TextAlignment.CENTER),
    StylePart.first_line_head_indent(10),
    StylePart.head_indent(10),
    StylePart.tail_indent(10),
    StylePart.line_break_mode(LineBreakMode.BY_CLIPPING),
    StylePart.minimum_line_height(10),
    StylePart.maximum_line_height(10),
    StylePart.line_height_multiple(10),
    StylePart.line_spacing(10),
    StylePart.base_writing_direction(WritingDirection.LEFT_TO_RIGHT),
    StylePart.hyphenation_factor(10),
]


class StyleMergeTest(unittest.TestCase):
    """Override wins for every kind it sets; everything else comes from the base."""

    def test_override_replaces_only_the_parts_it_sets(self) -> None:
        base = full_style()
        base_values = base.values()
        for part in OVERRIDES:
            with self.subTest(kind=part.kind):
                merged = merge(base, Style(part)).values()
                self.assertEqual(merged[part.kind], part.value)
                for kind, value in base_values.items():
                    if kind is not part.kind:
                        self.assertEqual(merged[kind], value)

    def test_unset_base_parts_stay_absent(self) -> None:
        merged = merge(Style.of(color="black"), Style.of(head_indent=4))
        self.assertEqual(merged.value(PartKind.COLOR), "black")
        self.assertEqual(merged.value(PartKind.HEAD_INDENT), 4)
        self.assertFalse(merged.has(PartKind.FONT))

    def test_extra_attributes_merge_key_wise(self) -> None:
        base = Style(StylePart.extra_attributes({"a": 1, "b": 2}))
        override = Style(StylePart.extra_attributes({"b": 3, "c": 4}))
        self.assertEqual(merge(base, override).extra_attributes(), {"a": 1, "b": 3, "c": 4})

    def test_last_part_of_a_kind_wins_within_one_style(self) -> None:
        style = Style(StylePart.color("red"), StylePart.color("green"))
        self.assertEqual(style.value(PartKind.COLOR), "green")
        self.assertEqual(style, Style.of(color="green"))

    def test_merge_with_missing_sides(self) -> None:
        style = Style.of(color="red")
        self.assertIs(merge(style, None), style)
        self.assertEqual(merge(None, style), style)
        self.assertEqual(merge(None, None), Style())

    def test_non_conflicting_merges_are_associative(self) -> None:
        a = Style.of(color="red")
        b = Style.of(head_indent=2)
        c = Style.of(line_spacing=1.5)
        self.assertEqual(merge(merge(a, b), c), merge(a, merge(b, c)))

    def test_derive_appends_parts(self) -> None:
        derived = Style.of(color="red").derive(StylePart.color("blue"), StylePart.head_indent(3))
        self.assertEqual(derived.value(PartKind.COLOR), "blue")
        self.assertEqual(derived.value(PartKind.HEAD_INDENT), 3)


class StyleBakeTest(unittest.TestCase):
    """Baking styles into attribute maps."""

    def test_empty_style_bakes_to_empty_attributes(self) -> None:
        self.assertEqual(Style().attributes(), {})
        self.assertFalse(Style().sets_paragraph())

    def test_character_parts_map_to_one_key_each(self) -> None:
        font = Font("Avenir-Book", 28)
        style = Style(
            StylePart.color("red"),
            StylePart.background_color("blue"),
            StylePart.font(font),
            StylePart.baseline_offset(10),
            StylePart.tracking(Tracking.point(10)),
            StylePart.link("http://thebestwords.com/"),
            StylePart.ligatures(Ligatures.DISABLED),
        )
        self.assertEqual(
            style.attributes(),
            {
                AttributeKey.FOREGROUND_COLOR: "red",
                AttributeKey.BACKGROUND_COLOR: "blue",
                AttributeKey.FONT: font,
                AttributeKey.BASELINE_OFFSET: 10,
                AttributeKey.KERN: 10.0,
                AttributeKey.LINK: "http://thebestwords.com/",
                AttributeKey.LIGATURE: 0,
            },
        )

    def test_paragraph_parts_fold_into_one_object(self) -> None:
        attributes = Style.of(head_indent=10, alignment=TextAlignment.CENTER).attributes()
        paragraph = attributes[AttributeKey.PARAGRAPH_STYLE]
        self.assertIsInstance(paragraph, ParagraphAttributes)
        self.assertEqual(paragraph.head_indent, 10)
        self.assertEqual(paragraph.alignment, TextAlignment.CENTER)
        self.assertEqual(paragraph.tail_indent, 0)
        self.assertEqual(len(attributes), 1)

    def test_baking_twice_gives_equal_attributes(self) -> None:
        style = full_style()
        first = style.attributes()
        second = style.attributes()
        self.assertEqual(first, second)
        self.assertIsNot(first[AttributeKey.PARAGRAPH_STYLE], second[AttributeKey.PARAGRAPH_STYLE])

    def test_typed_parts_win_over_extra_attributes(self) -> None:
        style = Style(
            StylePart.color("red"),
            StylePart.extra_attributes({AttributeKey.FOREGROUND_COLOR: "green", "custom": 1}),
        )
        attributes = style.attributes()
        self.assertEqual(attributes[AttributeKey.FOREGROUND_COLOR], "red")
        self.assertEqual(attributes["custom"], 1)

    def test_adobe_tracking_uses_font_size(self) -> None:
        style = Style(StylePart.font(Font("Helvetica", 20)), StylePart.tracking(Tracking.adobe(100)))
        self.assertAlmostEqual(style.attributes()[AttributeKey.KERN], 2.0)

    def test_adobe_tracking_without_font_bakes_no_kern(self) -> None:
        style = Style(StylePart.tracking(Tracking.adobe(100)))
        self.assertNotIn(AttributeKey.KERN, style.attributes())

    def test_capitalized_transform_works_per_word(self) -> None:
        self.assertEqual(TextTransform.CAPITALIZED.apply("don't stop"), "Don't Stop")
        self.assertEqual(TextTransform.CAPITALIZED.apply("two  spaces\nkept"), "Two  Spaces\nKept")

    def test_transform_is_not_an_attribute(self) -> None:
        self.assertEqual(Style(StylePart.transform(TextTransform.UPPERCASE)).attributes(), {})

    def test_paragraph_object_in_extras_is_paragraph_scoped(self) -> None:
        initial = ParagraphAttributes(head_indent=3)
        style = Style(StylePart.extra_attributes({AttributeKey.PARAGRAPH_STYLE: initial}))
        self.assertTrue(style.sets_paragraph())
        self.assertEqual(style.character_attributes(), {})
        self.assertIs(style.attributes()[AttributeKey.PARAGRAPH_STYLE], initial)


class StylePartValidationTest(unittest.TestCase):
    """Invalid payloads are reported, never coerced."""

    def test_numeric_kinds_reject_other_values(self) -> None:
        with self.assertRaises(ValueError):
            StylePart.head_indent("10")
        with self.assertRaises(ValueError):
            StylePart.line_spacing(True)

    def test_numeric_kinds_reject_non_finite_values(self) -> None:
        for value in (float("nan"), float("inf"), float("-inf")):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    StylePart.head_indent(value)
                with self.assertRaises(ValueError):
                    StylePart.baseline_offset(value)

    def test_enum_kinds_require_their_enum(self) -> None:
        with self.assertRaises(ValueError):
            StylePart(PartKind.ALIGNMENT, "center")

    def test_unknown_keyword_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Style.of(colour="red")

    def test_style_rejects_non_parts(self) -> None:
        with self.assertRaises(TypeError):
            Style("red")  # type: ignore[arg-type]

    def test_unknown_tracking_unit(self) -> None:
        with self.assertRaises(ValueError):
            Tracking(1, "em")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
