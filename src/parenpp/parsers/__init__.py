from parenpp.parsers.cursor import QuotedText
from parenpp.parsers.tree_parser import TreeParser, parse

__all__ = ["QuotedText", "TreeParser", "parse"]
