"""snailfish.types
=================

Foundational type aliases and data structures for snailfish numbers. A
snailfish number is either a regular number (:class:`Leaf`) or an ordered
pair of two snailfish numbers (:class:`Pair`). Every module imports the tree
representation from here so that there is exactly one canonical definition.

The module intentionally stays definitions-only: the rewrite rules live in
:mod:`snailfish.reducer` and structural helpers in :mod:`snailfish.tree_utils`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Value = int


@dataclass
class Leaf:
    """Regular number.

    ``value`` is non-negative. It is at most 9 in a reduced tree but may
    exceed 9 between reduction steps. The dataclass is mutable so that an
    exploding pair can deliver its carry into a distant leaf in place.
    """

    value: Value

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class Pair:
    """Ordered pair owning its two children exclusively.

    Children are never shared between pairs; use
    :func:`snailfish.tree_utils.deepcopy_tree` before reusing a tree as an
    operand of more than one addition.
    """

    left: "Tree"
    right: "Tree"

    def __str__(self) -> str:
        return f"[{self.left},{self.right}]"


Tree = Union[Leaf, Pair]


__all__ = ["Value", "Leaf", "Pair", "Tree"]
