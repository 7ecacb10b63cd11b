"""snailfish.arithmetic
======================

Addition, magnitude and the sequential sum over a batch of numbers. These are
the operations the CLI and the pairwise search are built from.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .constants import LEFT_WEIGHT, RIGHT_WEIGHT
from .errors import EmptyInputError
from .parser import parse_lines, parse_number
from .reducer import ReductionStats, make_regular
from .types import Leaf, Pair, Tree, Value


def add(left: Tree, right: Tree) -> Pair:
    """Return the unreduced sum ``[left,right]``.

    Both operands become children of the new pair. Callers that need an
    operand again afterwards must pass a copy.
    """

    return Pair(left, right)


def add_and_reduce(left: Tree, right: Tree, stats: Optional[ReductionStats] = None) -> Tree:
    """Add two numbers and reduce the result to normal form."""

    return make_regular(add(left, right), stats)


def magnitude(tree: Tree) -> Value:
    """Weighted fold ``3 * left + 2 * right`` down to the regular numbers."""

    if isinstance(tree, Leaf):
        return tree.value
    return LEFT_WEIGHT * magnitude(tree.left) + RIGHT_WEIGHT * magnitude(tree.right)


def sum_numbers(trees: Iterable[Tree], stats: Optional[ReductionStats] = None) -> Tree:
    """Left-fold ``trees`` with addition, reducing after every step.

    The trees are consumed: they end up inside the returned sum.

    Raises
    ------
    EmptyInputError
        If ``trees`` is empty.
    """

    total: Optional[Tree] = None
    for tree in trees:
        total = tree if total is None else add_and_reduce(total, tree, stats)
    if total is None:
        raise EmptyInputError("sum needs at least one number")
    # A single input number has not been through a reduction yet.
    return make_regular(total, stats)


def sum_lines(text: str, stats: Optional[ReductionStats] = None) -> Tree:
    """Parse one number per line of ``text`` and return their reduced sum."""

    return sum_numbers(parse_lines(text), stats)


def regularize(text: str) -> str:
    """Parse a single literal, reduce it and render the normal form."""

    return str(make_regular(parse_number(text)))


__all__ = [
    "add",
    "add_and_reduce",
    "magnitude",
    "sum_numbers",
    "sum_lines",
    "regularize",
]
