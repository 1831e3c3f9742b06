#!/usr/bin/env python3
"""
Parenpp RENDERER
----------------
Turns parsed trees back into text, bounded by a column width.

Each node is printed on one line when the length estimator says it fits in
what remains of the current line. Otherwise its children go one per line,
indented one level deeper, and the closing bracket returns to the node's own
level. Leaves are never split, however long they are.
"""

from typing import Iterable

from parenpp.core.buffer import OutputBuffer
from parenpp.core.layout import fits_inline
from parenpp.models import Tree

INDENT = " " * 4


class TreeRenderer:
    """
    Renders a forest into a single OutputBuffer.
    """

    def __init__(self, column_width: int = 80, buffer: OutputBuffer = None):
        self.column_width = column_width
        self.buffer = buffer if buffer is not None else OutputBuffer()

    def render(self, trees: Iterable[Tree]) -> str:
        """Renders every root back to back and returns the accumulated text."""
        for tree in trees:
            self.render_indented(tree)
        return self.buffer.getvalue()

    def render_inline(self, tree: Tree) -> None:
        """Prints `tree` on the current line, regardless of width."""
        self.buffer.write(tree.prefix)
        self._render_body_inline(tree)

    def render_indented(self, tree: Tree, level: int = 0) -> None:
        buffer = self.buffer
        remaining = self.column_width - buffer.current_line_length

        # Below the top level the indentation already provides the spacing.
        buffer.write(tree.prefix if level == 0 else tree.prefix.lstrip())

        if fits_inline(tree, remaining):
            self._render_body_inline(tree)
            return

        if tree.is_leaf:
            buffer.write(tree.suffix)
            return

        buffer.write(tree.delimiter.opening)
        for child in tree.children:
            buffer.newline()
            buffer.write(INDENT * (level + 1))
            self.render_indented(child, level + 1)
        buffer.newline()
        buffer.write(INDENT * level)
        buffer.write(tree.delimiter.closing)
        buffer.write(tree.suffix)

    def _render_body_inline(self, tree: Tree) -> None:
        # The caller has already written the prefix (possibly stripped).
        buffer = self.buffer
        if tree.delimiter is not None:
            buffer.write(tree.delimiter.opening)
            for child in tree.children:
                self.render_inline(child)
            buffer.write(tree.delimiter.closing)
        buffer.write(tree.suffix)
