"""Public package interface for snailfish number arithmetic."""

from .arithmetic import add, add_and_reduce, magnitude, regularize, sum_lines, sum_numbers
from .cli import main
from .errors import EmptyInputError, InternalInvariantError, ParseError
from .parser import parse_lines, parse_number
from .reducer import make_regular
from .search import PairSearchConfig, best_pair, max_pairwise_lines, max_pairwise_magnitude
from .types import Leaf, Pair, Tree

__all__ = [
    "Leaf",
    "Pair",
    "Tree",
    "ParseError",
    "EmptyInputError",
    "InternalInvariantError",
    "parse_number",
    "parse_lines",
    "make_regular",
    "add",
    "add_and_reduce",
    "magnitude",
    "sum_numbers",
    "sum_lines",
    "regularize",
    "PairSearchConfig",
    "best_pair",
    "max_pairwise_magnitude",
    "max_pairwise_lines",
    "main",
]
