import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import parenpp
from parenpp import prettyprint
from parenpp.core.renderer import TreeRenderer
from parenpp.parsers.tree_parser import parse


class TestPrettyPrint(unittest.TestCase):
    def test_inline_cases_are_unchanged(self):
        for text in ["Foo", "Foo()", "Foo[]", "Foo{}", "Foo(A, B)", '["a", "b"]']:
            with self.subTest(text=text):
                self.assertEqual(prettyprint(text), text)

    def test_unbalanced_falls_back(self):
        self.assertEqual(prettyprint("Foo("), "Foo(")
        self.assertEqual(prettyprint('("",""]'), '("",""]')

    def test_mismatched_closer_returns_input(self):
        self.assertEqual(prettyprint('("","")]', 80), '("","")]')

    def test_empty_text(self):
        self.assertEqual(prettyprint(""), "")

    def test_split_outer_only(self):
        self.assertEqual(
            prettyprint("Foo(Bar(Baz()), Baq())", 16),
            "Foo(\n"
            "    Bar(Baz()),\n"
            "    Baq()\n"
            ")",
        )

    def test_split_nested(self):
        self.assertEqual(
            prettyprint("Foo(Bar(Baz()), Baq())", 12),
            "Foo(\n"
            "    Bar(\n"
            "        Baz(\n"
            "        )\n"
            "    ),\n"
            "    Baq()\n"
            ")",
        )

    def test_filler_breaks_following_container(self):
        filler = "-" * 80
        self.assertEqual(
            prettyprint(filler + '("a", "b")', 80),
            filler + '(\n'
            '    "a",\n'
            '    "b"\n'
            ')',
        )

    def test_quoted_delimiters_stay_inline(self):
        text = 'Call(msg="a(b", other=\'],\', raw=`{`)'
        self.assertEqual(
            prettyprint(text, 20),
            "Call(\n"
            '    msg="a(b",\n'
            "    other='],',\n"
            "    raw=`{`\n"
            ")",
        )

    def test_long_leaf_is_never_split(self):
        text = "Foo(" + "x" * 30 + ")"
        self.assertEqual(prettyprint(text, 10), "Foo(\n    " + "x" * 30 + "\n)")

    def test_roots_render_back_to_back(self):
        self.assertEqual(prettyprint("Foo() Bar()"), "Foo() Bar()")
        self.assertEqual(
            prettyprint("Foo(a) Bar(b)", 8),
            "Foo(a) Bar(\n    b\n)",
        )

    def test_second_root_measures_from_current_column(self):
        self.assertEqual(
            prettyprint("Foo(a, b) Bar(c, d)", 12),
            "Foo(a, b) Bar(\n"
            "    c,\n"
            "    d\n"
            ")",
        )

    def test_deep_nesting_falls_back(self):
        text = "(" * 5000 + ")" * 5000
        self.assertEqual(prettyprint(text), text)

    def test_format_alias(self):
        self.assertIs(parenpp.format, prettyprint)
        self.assertEqual(parenpp.format("Foo(A, B)", 5), "Foo(\n    A,\n    B\n)")


class TestTreeRenderer(unittest.TestCase):
    def test_render_inline_ignores_width(self):
        renderer = TreeRenderer(column_width=1)
        renderer.render_inline(parse("Foo(Bar(1, 2), [x])")[0])
        self.assertEqual(renderer.buffer.getvalue(), "Foo(Bar(1, 2), [x])")

    def test_indented_strips_prefix_below_top_level(self):
        renderer = TreeRenderer(column_width=6)
        self.assertEqual(renderer.render(parse("  A(b,   c)")), "  A(\n    b,\n    c\n)")


if __name__ == '__main__':
    unittest.main()
