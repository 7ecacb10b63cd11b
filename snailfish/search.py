"""snailfish.search
==================

Search for the largest magnitude obtainable by adding two numbers of a batch.

Every ordered pair ``(i, j)`` with ``i != j`` is evaluated, both directions
included, because snailfish addition is not commutative. The evaluations are
independent of each other: each one works on fresh copies of its operands, so
rows of the magnitude matrix can be farmed out to worker processes and the
results combined with a single ``max`` in any order.
"""

from __future__ import annotations

import multiprocessing
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .arithmetic import add_and_reduce, magnitude
from .errors import EmptyInputError
from .parser import parse_lines
from .tree_utils import deepcopy_tree
from .types import Tree, Value

# Marks the diagonal, which is never a valid pair. Magnitudes are never negative.
NO_PAIR = -1


# -----------------------------------------------------------------------------
# Configs
# -----------------------------------------------------------------------------
@dataclass
class PairSearchConfig:
    """Configuration knobs for the pairwise search.

    ``max_workers`` of 1 evaluates everything in the calling process; 0 or a
    negative value uses one worker per CPU. ``chunk_size`` is the number of
    matrix rows handed to a worker at once (0 means one row per task).
    """

    max_workers: int = 1
    chunk_size: int = 0

    def __post_init__(self) -> None:
        if self.max_workers <= 0:
            self.max_workers = multiprocessing.cpu_count()
        if self.chunk_size <= 0:
            self.chunk_size = 1


@dataclass
class PairSearchResult:
    magnitude: Value
    left_index: int
    right_index: int
    matrix: np.ndarray


# -----------------------------------------------------------------------------
# Evaluation
# -----------------------------------------------------------------------------
def pair_magnitude(left: Tree, right: Tree) -> Value:
    """Magnitude of the reduced sum of copies of ``left`` and ``right``."""

    return magnitude(add_and_reduce(deepcopy_tree(left), deepcopy_tree(right)))


def _row_magnitudes(trees: Sequence[Tree], rows: range) -> List[Tuple[int, List[Value]]]:
    """Worker function: evaluate every pair whose left operand is in ``rows``."""

    results: List[Tuple[int, List[Value]]] = []
    for i in rows:
        row = [NO_PAIR] * len(trees)
        for j, right in enumerate(trees):
            if i != j:
                row[j] = pair_magnitude(trees[i], right)
        results.append((i, row))
    return results


def _row_chunks(count: int, chunk_size: int) -> List[range]:
    return [range(start, min(start + chunk_size, count)) for start in range(0, count, chunk_size)]


def pairwise_magnitudes(trees: Sequence[Tree], config: Optional[PairSearchConfig] = None) -> np.ndarray:
    """Return the matrix of magnitudes of ``trees[i] + trees[j]``.

    The diagonal holds :data:`NO_PAIR`. ``trees`` is never modified.

    Raises
    ------
    EmptyInputError
        If fewer than two trees are given.
    """

    cfg = config or PairSearchConfig()
    count = len(trees)
    if count < 2:
        raise EmptyInputError(f"pairwise search needs at least two numbers, got {count}")

    matrix = np.full((count, count), NO_PAIR, dtype=np.int64)
    chunks = _row_chunks(count, cfg.chunk_size)
    if cfg.max_workers == 1:
        for rows in chunks:
            for i, row in _row_magnitudes(trees, rows):
                matrix[i] = row
        return matrix

    trees = list(trees)
    with ProcessPoolExecutor(max_workers=cfg.max_workers) as executor:
        futures = [executor.submit(_row_magnitudes, trees, rows) for rows in chunks]
        for future in as_completed(futures):
            # Worker errors propagate; every row is needed for the maximum.
            for i, row in future.result():
                matrix[i] = row
    return matrix


def best_pair(trees: Sequence[Tree], config: Optional[PairSearchConfig] = None) -> PairSearchResult:
    """Find the ordered pair with the largest magnitude.

    Ties resolve to the first pair in row-major order.
    """

    matrix = pairwise_magnitudes(trees, config)
    i, j = np.unravel_index(int(np.argmax(matrix)), matrix.shape)
    return PairSearchResult(
        magnitude=int(matrix[i, j]),
        left_index=int(i),
        right_index=int(j),
        matrix=matrix,
    )


def max_pairwise_magnitude(trees: Sequence[Tree], config: Optional[PairSearchConfig] = None) -> Value:
    """Largest magnitude over all ordered pairs of distinct ``trees``."""

    return best_pair(trees, config).magnitude


def max_pairwise_lines(text: str, config: Optional[PairSearchConfig] = None) -> PairSearchResult:
    """Parse one number per line of ``text`` and search all ordered pairs."""

    return best_pair(parse_lines(text), config)


__all__ = [
    "NO_PAIR",
    "PairSearchConfig",
    "PairSearchResult",
    "pair_magnitude",
    "pairwise_magnitudes",
    "best_pair",
    "max_pairwise_magnitude",
    "max_pairwise_lines",
]
