"""snailfish.reducer
===================

Reduction of snailfish numbers to normal form. Two rewrite rules compete and
are applied one at a time, always restarting from the root:

1. explode the leftmost pair nested inside :data:`EXPLODE_DEPTH` pairs;
2. otherwise split the leftmost regular number above :data:`SPLIT_THRESHOLD`;
3. otherwise stop, the number is regular.

Explosion is the non-local rule. The exploding pair is replaced by ``0`` and
its two values travel to the nearest regular numbers on either side, which can
sit in a completely different subtree. The recursive search reports the
values still in flight to its caller as a :class:`Shockwave`; every ancestor
that receives one delivers what it can into its other child and passes the
rest upward. Values that reach the root undelivered have no neighbour on that
side and are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import EXPLODE_DEPTH, SPLIT_THRESHOLD
from .errors import InternalInvariantError
from .types import Leaf, Pair, Tree, Value


@dataclass(frozen=True)
class Shockwave:
    """Carries of one explosion that still need a destination.

    ``left`` travels to the nearest regular number on the left of the
    explosion and ``right`` to the nearest one on the right. ``None`` marks a
    carry that has already been delivered. The four combinations are the four
    propagation states: both pending straight after the explosion, only one
    side pending, or fully handled.
    """

    left: Optional[Value]
    right: Optional[Value]

    @property
    def handled(self) -> bool:
        return self.left is None and self.right is None


@dataclass
class ReductionStats:
    """Counters describing one call to :func:`make_regular`."""

    explodes: int = 0
    splits: int = 0

    @property
    def steps(self) -> int:
        return self.explodes + self.splits


# -----------------------------------------------------------------------------
# Carry delivery
# -----------------------------------------------------------------------------
def add_to_leftmost(tree: Tree, value: Value) -> None:
    """Add ``value`` to the first regular number of ``tree``."""

    while isinstance(tree, Pair):
        tree = tree.left
    tree.value += value


def add_to_rightmost(tree: Tree, value: Value) -> None:
    """Add ``value`` to the last regular number of ``tree``."""

    while isinstance(tree, Pair):
        tree = tree.right
    tree.value += value


# -----------------------------------------------------------------------------
# Explode
# -----------------------------------------------------------------------------
def _exploding_values(pair: Pair) -> Tuple[Value, Value]:
    if isinstance(pair.left, Leaf) and isinstance(pair.right, Leaf):
        return pair.left.value, pair.right.value
    raise InternalInvariantError(
        f"pair {pair} nested {EXPLODE_DEPTH} deep does not hold two regular numbers"
    )


def _explode_child(pair: Pair, side: str, child_depth: int) -> Optional[Shockwave]:
    child = getattr(pair, side)
    if isinstance(child, Leaf):
        return None
    if child_depth >= EXPLODE_DEPTH:
        left_value, right_value = _exploding_values(child)
        setattr(pair, side, Leaf(0))
        return Shockwave(left_value, right_value)
    return try_explode(child, child_depth)


def try_explode(pair: Pair, depth: int = 0) -> Optional[Shockwave]:
    """Explode the leftmost explodable pair below ``pair``.

    Parameters
    ----------
    pair:
        Subtree to search; it sits inside ``depth`` pairs.
    depth:
        Nesting depth of ``pair`` itself (the root is at depth 0).

    Returns
    -------
    Shockwave | None
        ``None`` when nothing below ``pair`` could explode. Otherwise the
        carries that could not be delivered inside ``pair`` and must continue
        upward.

    Raises
    ------
    InternalInvariantError
        If the first pair found at :data:`EXPLODE_DEPTH` has a pair child.
    """

    wave = _explode_child(pair, "left", depth + 1)
    if wave is not None:
        # Coming up from the left child: the right sibling holds the nearest
        # regular number to the right.
        if wave.right is not None:
            add_to_leftmost(pair.right, wave.right)
        return Shockwave(wave.left, None)

    wave = _explode_child(pair, "right", depth + 1)
    if wave is not None:
        if wave.left is not None:
            add_to_rightmost(pair.left, wave.left)
        return Shockwave(None, wave.right)
    return None


# -----------------------------------------------------------------------------
# Split
# -----------------------------------------------------------------------------
def split_value(value: Value) -> Tuple[Value, Value]:
    """Return the halves of ``value`` rounded down and up."""

    half = value // 2
    return half, value - half


def _split_leaf(leaf: Leaf) -> Pair:
    low, high = split_value(leaf.value)
    return Pair(Leaf(low), Leaf(high))


def try_split(pair: Pair) -> bool:
    """Split the leftmost regular number above the threshold below ``pair``."""

    for side in ("left", "right"):
        child = getattr(pair, side)
        if isinstance(child, Leaf):
            if child.value > SPLIT_THRESHOLD:
                setattr(pair, side, _split_leaf(child))
                return True
        elif try_split(child):
            return True
    return False


# -----------------------------------------------------------------------------
# Fixed point
# -----------------------------------------------------------------------------
def make_regular(tree: Tree, stats: Optional[ReductionStats] = None) -> Tree:
    """Reduce ``tree`` in place until it is regular and return its root.

    The returned root is ``tree`` itself except when ``tree`` is a bare leaf
    that has to split, in which case a new pair is returned.
    """

    if isinstance(tree, Leaf):
        if tree.value <= SPLIT_THRESHOLD:
            return tree
        tree = _split_leaf(tree)
        if stats is not None:
            stats.splits += 1

    while True:
        if try_explode(tree) is not None:
            if stats is not None:
                stats.explodes += 1
            continue
        if try_split(tree):
            if stats is not None:
                stats.splits += 1
            continue
        return tree


__all__ = [
    "Shockwave",
    "ReductionStats",
    "add_to_leftmost",
    "add_to_rightmost",
    "try_explode",
    "split_value",
    "try_split",
    "make_regular",
]
