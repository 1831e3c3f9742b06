#!/usr/bin/env python3
"""
Parenpp TREE PARSER
-------------------
Recursive descent over a "comma separated paren tree", i.e. the output of a
well-structured toString such as `Class(a=1, b="text", c=Struct(x=4))`.

Grammar (informal):
    forest := node*
    node   := literal (open node* literal? close)? ","?

No grammar of the host language is assumed. Structure comes only from (), []
and {} plus commas, and every scan goes through QuotedText so that quoted
delimiters stay literal.

A single failure anywhere (for instance an unclosed bracket) abandons the
whole line: `parse` then returns an empty forest.
"""

import logging
from typing import List, Optional

from parenpp.models import OPENERS, Delimiter, Forest, Tree
from parenpp.parsers.cursor import QuotedText

logger = logging.getLogger("parenpp.parsers.tree_parser")


class TreeParser:
    """
    Parses one line of text into a forest of Tree nodes.
    """

    def __init__(self, text: str):
        self.text = text
        self.cursor = QuotedText(text)

    def parse(self) -> Forest:
        """Parses the whole text. Returns () if any node fails to parse."""
        trees: List[Tree] = []

        while True:
            tree = self.parse_node()
            if tree is None:
                logger.debug(f"Parse abandoned at offset {self.cursor.offset} of {len(self.text)}")
                return ()
            trees.append(tree)
            if self.cursor.empty:
                return tuple(trees)

    def parse_node(self, terminators: str = ",") -> Optional[Tree]:
        """
        Parses one node and moves the cursor past it.

        `terminators` is "," at top level, or "," plus the closer of the
        enclosing container. None means either that there was nothing to
        emit (an empty leaf) or that parsing failed further down; callers
        treat both alike.
        """
        cursor = self.cursor
        paren_start = cursor.find_among(OPENERS)
        terminator = cursor.find_among(terminators)

        if len(cursor.text_until(terminator)) < len(cursor.text_until(paren_start)):
            prefix = cursor.text_until(terminator)
            # Leave the cursor on the terminator: a closer belongs to the parent.
            self.cursor = terminator.anchored()
            return self._leaf(prefix)

        prefix = cursor.text_until(paren_start)

        if paren_start.empty:
            self.cursor = paren_start.anchored()
            return self._leaf(prefix)

        delimiter = Delimiter.from_opening(paren_start.front)
        self.cursor = paren_start
        self.cursor.advance()
        children: List[Tree] = []

        while True:
            cursor = self.cursor
            if cursor.empty:
                logger.debug(f"Unclosed '{delimiter.opening}' after prefix {prefix!r}")
                return None

            if cursor.front == delimiter.closing:
                # Only quoted text (or nothing) is left before the closer.
                literal = cursor.text_until(cursor)
                if literal:
                    children.append(Tree(literal))
                cursor.advance()
                return self._parse_suffix(Tree(prefix, delimiter, tuple(children)))

            child = self.parse_node(delimiter.closing_with_comma)
            if child is None:
                return None
            children.append(child)

    def _leaf(self, prefix: str) -> Optional[Tree]:
        if not prefix:
            return None
        return self._parse_suffix(Tree(prefix))

    def _parse_suffix(self, tree: Tree) -> Tree:
        cursor = self.cursor
        if not cursor.empty and cursor.front == ",":
            cursor.advance()
            return tree.with_suffix(",")
        return tree


def parse(text: str) -> Forest:
    """Parses `text` into a forest; () when the text has no usable structure."""
    return TreeParser(text).parse()
