#!/usr/bin/env python3
"""
Parenpp ENGINE
--------------
The single entry point: text in, width-bounded indented text out.

`prettyprint` assumes its input is the output of a well-structured toString,
e.g. `Class(field1=1, field2="text", field3=Struct(a=4, b=5))`. Anything that
does not parse as a comma separated paren tree comes back unchanged.

Author: Parenpp Team
Date: 2026-10-17
"""

import logging

from parenpp.core.renderer import TreeRenderer
from parenpp.parsers.tree_parser import parse

logger = logging.getLogger("parenpp.core.engine")

DEFAULT_WIDTH = 80


def prettyprint(text: str, column_width: int = DEFAULT_WIDTH) -> str:
    """
    Returns a pretty-printed, multiline, indented version of `text`.

    Args:
        text: A single line, such as `Foo(Bar(Baz()), Baq())`.
        column_width: Columns available per output line.

    Returns:
        The rendered text, or `text` itself when it cannot be parsed.
    """
    try:
        trees = parse(text)
        if not trees:
            logger.debug("No paren tree found, returning input unchanged")
            return text
        return TreeRenderer(column_width).render(trees)
    except RecursionError:
        logger.warning(f"Nesting too deep to format ({len(text)} chars), returning input unchanged")
        return text


format = prettyprint
