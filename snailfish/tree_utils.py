from __future__ import annotations

from typing import Iterator, List

from .constants import EXPLODE_DEPTH, SPLIT_THRESHOLD
from .types import Leaf, Pair, Tree, Value

# ---------------------------------------------------------------------------
# Structural helpers
# ---------------------------------------------------------------------------
def deepcopy_tree(tree: Tree) -> Tree:
    """Return a structural copy of ``tree``.

    Parameters
    ----------
    tree:
        Tree to duplicate.

    Returns
    -------
    Tree
        Fresh tree sharing no nodes with ``tree``, safe for in-place
        reduction by callers.

    Notes
    -----
    ``copy.deepcopy`` would work but walks the memo dictionary for every
    node. An explicit recursion over the two node types is transparent and
    noticeably faster in the pairwise search, which copies every operand
    once per ordered pair.
    """

    if isinstance(tree, Leaf):
        return Leaf(tree.value)
    return Pair(deepcopy_tree(tree.left), deepcopy_tree(tree.right))


def depth(tree: Tree) -> int:
    """Return the deepest pair nesting in ``tree`` (a bare leaf has depth 0)."""

    if isinstance(tree, Leaf):
        return 0
    return 1 + max(depth(tree.left), depth(tree.right))


def iter_leaves(tree: Tree) -> Iterator[Leaf]:
    """Yield the leaves of ``tree`` in tree order, left to right."""

    stack: List[Tree] = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            yield node
            continue
        stack.append(node.right)
        stack.append(node.left)


def leaf_values(tree: Tree) -> List[Value]:
    """Flatten ``tree`` into the list of its regular numbers."""

    return [leaf.value for leaf in iter_leaves(tree)]


def is_regular(tree: Tree) -> bool:
    """Check that ``tree`` contains nothing left to explode or split.

    A pair nested inside :data:`EXPLODE_DEPTH` pairs means the tree still has
    an explodable node, which is the same as its overall depth exceeding
    :data:`EXPLODE_DEPTH`.
    """

    if depth(tree) > EXPLODE_DEPTH:
        return False
    return all(value <= SPLIT_THRESHOLD for value in leaf_values(tree))


__all__ = [
    "deepcopy_tree",
    "depth",
    "iter_leaves",
    "leaf_values",
    "is_regular",
]
