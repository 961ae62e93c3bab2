from __future__ import annotations

import unittest
from collections import Counter

from tw_group.categories import Category
from tw_group.gate import MULTILINE, SINGLE_CATEGORY, TOO_FEW_TOKENS, gate_reason, should_group
from tw_group.grouping import flatten, group, grouping_to_dict, tokenize
from tw_group.options import RenderOptions

SAMPLES = [
    "mt-4 flex items-center justify-between px-6 py-3 bg-white border rounded-lg shadow-sm hover:shadow-md dark:bg-gray-800 text-sm font-medium",
    "mt-1 block w-full rounded-md border-gray-300 shadow-sm focus:border-indigo-500 focus:ring-indigo-500 sm:text-sm px-3 py-2",
    "  text-sm   flex\tmt-2 text-sm  ",
    "a b a c mystery flex",
    "",
]


class TestGroup(unittest.TestCase):
    def test_tokenize_normalizes_whitespace(self) -> None:
        self.assertEqual(tokenize("  flex \n\t mt-2  "), ["flex", "mt-2"])
        self.assertEqual(tokenize("   "), [])

    def test_category_order_is_first_occurrence(self) -> None:
        grouping = group("text-sm flex mt-2 text-sm")
        self.assertEqual([g.category for g in grouping], [Category.TEXT, Category.LAYOUT, Category.SPACING])
        self.assertEqual(grouping[0].tokens, ("text-sm", "text-sm"))

    def test_button_example(self) -> None:
        grouping = group("mt-4 flex items-center px-6 py-3 bg-white border rounded-lg shadow-sm")
        self.assertEqual(
            list(grouping_to_dict(grouping).items()),
            [
                ("spacing", ["mt-4", "px-6", "py-3"]),
                ("layout", ["flex", "items-center"]),
                ("background", ["bg-white"]),
                ("border", ["border", "rounded-lg"]),
                ("effects", ["shadow-sm"]),
            ],
        )

    def test_tokens_are_conserved(self) -> None:
        for s in SAMPLES:
            grouping = group(s)
            self.assertEqual(Counter(flatten(grouping)), Counter(tokenize(s)), s)
            self.assertTrue(all(g.tokens for g in grouping), "empty bucket materialized")
            self.assertEqual(len({g.category for g in grouping}), len(grouping))

    def test_order_within_bucket_is_source_order(self) -> None:
        grouping = group("pb-2 flex pt-1 mx-auto")
        self.assertEqual(grouping[0].tokens, ("pb-2", "pt-1", "mx-auto"))

    def test_empty_input(self) -> None:
        self.assertEqual(group(""), ())


class TestGate(unittest.TestCase):
    def test_threshold_boundary(self) -> None:
        opts = RenderOptions(min_tokens=4)
        self.assertFalse(should_group("flex items-center gap-2", opts))
        self.assertEqual(gate_reason("flex items-center gap-2", opts), TOO_FEW_TOKENS)
        self.assertTrue(should_group("flex items-center gap-2 p-4", opts))

    def test_custom_threshold(self) -> None:
        opts = RenderOptions(min_tokens=2)
        self.assertTrue(should_group("flex p-4", opts))
        self.assertFalse(should_group("flex", opts))

    def test_multiline_is_treated_as_grouped(self) -> None:
        self.assertEqual(gate_reason("flex items-center\np-4 mt-2", RenderOptions()), MULTILINE)

    def test_single_category_is_noop(self) -> None:
        self.assertEqual(gate_reason("flex items-center gap-2 justify-between", RenderOptions()), SINGLE_CATEGORY)

    def test_go(self) -> None:
        self.assertIsNone(gate_reason("mt-4 flex items-center px-6", RenderOptions()))


if __name__ == "__main__":
    unittest.main()
