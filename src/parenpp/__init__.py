"""
Parenpp: pretty-print single-line paren trees.

    >>> from parenpp import prettyprint
    >>> print(prettyprint("Foo(Bar(Baz()), Baq())", 16))
    Foo(
        Bar(Baz()),
        Baq()
    )
"""

__version__ = "0.1.0"

from parenpp.core.engine import DEFAULT_WIDTH, format, prettyprint
from parenpp.models import Delimiter, Tree
from parenpp.parsers.tree_parser import parse

__all__ = ["DEFAULT_WIDTH", "Delimiter", "Tree", "format", "parse", "prettyprint", "__version__"]
