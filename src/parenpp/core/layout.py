"""
Parenpp LENGTH ESTIMATOR
------------------------
Decides whether a tree can be printed on what is left of the current line.

The estimate sums prefixes, suffixes and two characters per bracket pair. It
ignores spacing between siblings beyond what their own prefixes carry, and the
renderer relies on exactly this figure.
"""

from parenpp.models import Tree


def remaining_width(tree: Tree, budget: int) -> int:
    """
    Returns how much of `budget` is left after printing `tree` inline.
    Once the result goes negative it stops being accurate.
    """
    budget -= len(tree.prefix)
    budget -= len(tree.suffix)
    if not tree.is_leaf:
        budget -= 2
    if budget >= 0:
        for child in tree.children:
            budget = remaining_width(child, budget)
            if budget < 0:
                break
    return budget


def fits_inline(tree: Tree, budget: int) -> bool:
    return remaining_width(tree, budget) >= 0
