from __future__ import annotations

import json
import unittest

from tw_group.categories import Category
from tw_group.errors import ConfigError
from tw_group.formatter import format_class_string, format_classes
from tw_group.gate import TOO_FEW_TOKENS
from tw_group.grouping import Group
from tw_group.options import OutputFormat, RenderOptions
from tw_group.render import quote, render

TWO = (Group(Category.LAYOUT, ("flex",)), Group(Category.SPACING, ("p-4",)))

BUTTON = "mt-4 flex items-center px-6 py-3 bg-white border rounded-lg shadow-sm"


class TestRender(unittest.TestCase):
    def test_clsx(self) -> None:
        self.assertEqual(
            render(TWO, RenderOptions()),
            'clsx(\n  // Layout\n  "flex",\n  // Spacing\n  "p-4"\n)',
        )

    def test_clsx_without_comments(self) -> None:
        self.assertEqual(
            render(TWO, RenderOptions(include_comments=False)),
            'clsx(\n  "flex",\n  "p-4"\n)',
        )

    def test_array(self) -> None:
        self.assertEqual(
            render(TWO, RenderOptions(format=OutputFormat.ARRAY)),
            '[\n  // Layout\n  "flex",\n  // Spacing\n  "p-4"\n]',
        )

    def test_template(self) -> None:
        self.assertEqual(
            render(TWO, RenderOptions(format=OutputFormat.TEMPLATE)),
            "`\n  // Layout\n  flex\n  // Spacing\n  p-4\n`",
        )

    def test_template_escapes_interpolation(self) -> None:
        grouping = (Group(Category.STATES, ("before:content-['${x}']", "after:content-['`\\']")),)
        self.assertEqual(
            render(grouping, RenderOptions(format=OutputFormat.TEMPLATE, include_comments=False)),
            "`\n  before:content-['\\${x}'] after:content-['\\`\\\\']\n`",
        )

    def test_mapping(self) -> None:
        text = render(TWO, RenderOptions(format=OutputFormat.MAPPING))
        self.assertNotIn("//", text)
        self.assertEqual(list(json.loads(text).items()), [("layout", ["flex"]), ("spacing", ["p-4"])])

    def test_indent_and_base_indent(self) -> None:
        opts = RenderOptions(indent="    ", base_indent="  ", callee="cn")
        self.assertEqual(
            render(TWO, opts),
            'cn(\n      // Layout\n      "flex",\n      // Spacing\n      "p-4"\n  )',
        )

    def test_quote_escapes(self) -> None:
        self.assertEqual(quote('content-["x"]'), '"content-[\\"x\\"]"')

    def test_rendering_is_reproducible(self) -> None:
        for fmt in OutputFormat:
            opts = RenderOptions(format=fmt)
            self.assertEqual(render(TWO, opts), render(TWO, opts))

    def test_unknown_format_is_rejected(self) -> None:
        with self.assertRaises(ConfigError):
            render(TWO, RenderOptions(format="xml"))  # type: ignore[arg-type]


class TestFormat(unittest.TestCase):
    def test_button_clsx(self) -> None:
        result = format_classes(BUTTON)
        self.assertTrue(result.changed)
        self.assertIsNone(result.reason)
        self.assertEqual(
            result.text,
            "clsx(\n"
            "  // Spacing\n"
            '  "mt-4 px-6 py-3",\n'
            "  // Layout\n"
            '  "flex items-center",\n'
            "  // Background\n"
            '  "bg-white",\n'
            "  // Border\n"
            '  "border rounded-lg",\n'
            "  // Effects\n"
            '  "shadow-sm"\n'
            ")",
        )

    def test_too_few_tokens_returns_input_verbatim(self) -> None:
        result = format_classes("flex items-center gap-2")
        self.assertFalse(result.changed)
        self.assertEqual(result.reason, TOO_FEW_TOKENS)
        self.assertEqual(result.text, "flex items-center gap-2")

    def test_idempotent_for_every_format(self) -> None:
        samples = [
            BUTTON,
            "w-full h-32 p-4 bg-blue-500 text-white rounded-lg shadow-md hover:shadow-lg",
            "flex items-center gap-2",
            "flex items-center gap-2 justify-between",
        ]
        for fmt in OutputFormat:
            for comments in (True, False):
                opts = RenderOptions(format=fmt, include_comments=comments)
                for s in samples:
                    once = format_class_string(s, opts)
                    self.assertEqual(format_class_string(once, opts), once, (fmt, s))

    def test_invalid_options_raise(self) -> None:
        with self.assertRaises(ConfigError):
            format_classes(BUTTON, RenderOptions(min_tokens=0))
        with self.assertRaises(ConfigError):
            format_classes(BUTTON, RenderOptions(format="clsx"))  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
