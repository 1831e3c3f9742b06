#!/usr/bin/env python3
"""
PARENPP CORE MODELS
-------------------
Defines the data structures shared by the Parser and the Renderer.

A parsed line is a forest of Tree nodes. Nodes are built bottom-up in a single
pass and never mutated afterwards, so they are frozen dataclasses.

Author: Parenpp Team
Date: 2026-10-17
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Delimiter(Enum):
    """The three bracket pairs recognised as structure."""
    PAREN = "()"
    SQUARE_BRACKET = "[]"
    CURLY_BRACKET = "{}"

    @property
    def opening(self) -> str:
        return self.value[0]

    @property
    def closing(self) -> str:
        return self.value[1]

    @property
    def closing_with_comma(self) -> str:
        """Terminators that end a child of this container."""
        return "," + self.value[1]

    @classmethod
    def from_opening(cls, char: str) -> "Delimiter":
        return _BY_OPENING[char]


_BY_OPENING = {kind.opening: kind for kind in Delimiter}

OPENERS = "".join(_BY_OPENING)


@dataclass(frozen=True, slots=True)
class Tree:
    """
    One segment of the input.

    prefix:    literal text before the delimiters (the whole text of a leaf)
    delimiter: bracket kind, or None for a leaf
    children:  child nodes, only ever non-empty when delimiter is set
    suffix:    "" or "," when a comma followed this node
    """
    prefix: str
    delimiter: Optional[Delimiter] = None
    children: Tuple["Tree", ...] = ()
    suffix: str = ""

    def __post_init__(self):
        if self.children and self.delimiter is None:
            raise ValueError("a Tree without delimiter cannot have children")
        if self.suffix not in ("", ","):
            raise ValueError(f"invalid Tree suffix: {self.suffix!r}")

    @property
    def is_leaf(self) -> bool:
        return self.delimiter is None

    def with_suffix(self, suffix: str) -> "Tree":
        return Tree(self.prefix, self.delimiter, self.children, suffix)


Forest = Tuple[Tree, ...]
