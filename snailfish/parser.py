"""snailfish.parser
==================

Recursive-descent parser for snailfish number literals::

    Number := Digits | "[" Number "," Number "]"

Parsing is a single left-to-right pass with no backtracking. Whitespace is
not allowed inside a literal; :func:`parse_number` strips it from around the
literal only.
"""

from __future__ import annotations

from typing import List, Tuple

from .errors import ParseError
from .types import Leaf, Pair, Tree

_DIGITS = frozenset("0123456789")


def _parse_at(text: str, pos: int) -> Tuple[Tree, int]:
    if pos >= len(text):
        raise ParseError(text[pos:], "expected a number or '['")
    if text[pos] == "[":
        left, pos = _parse_at(text, pos + 1)
        if pos >= len(text) or text[pos] != ",":
            raise ParseError(text[pos:], "expected ',' after left operand")
        right, pos = _parse_at(text, pos + 1)
        if pos >= len(text) or text[pos] != "]":
            raise ParseError(text[pos:], "expected ']' to close pair")
        return Pair(left, right), pos + 1

    end = pos
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    if end == pos:
        raise ParseError(text[pos:], "expected a number or '['")
    return Leaf(int(text[pos:end])), end


def parse_prefix(text: str) -> Tuple[Tree, str]:
    """Parse one number from the start of ``text``.

    Returns
    -------
    tuple[Tree, str]
        The parsed tree and the unconsumed remainder of ``text``.
    """

    tree, pos = _parse_at(text, 0)
    return tree, text[pos:]


def parse_number(line: str) -> Tree:
    """Parse a whole line into a tree, rejecting trailing characters."""

    tree, rest = parse_prefix(line.strip())
    if rest:
        raise ParseError(rest, "trailing characters after number")
    return tree


def parse_lines(text: str) -> List[Tree]:
    """Parse one number per line of ``text``.

    Blank lines at the very start and end of ``text`` are ignored; a blank
    line anywhere else is a parse error. The first malformed line aborts the
    whole batch and the raised :class:`ParseError` carries its 1-based line
    number.
    """

    lines = text.splitlines()
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    stop = len(lines)
    while stop > start and not lines[stop - 1].strip():
        stop -= 1

    trees: List[Tree] = []
    for line_no in range(start + 1, stop + 1):
        try:
            trees.append(parse_number(lines[line_no - 1]))
        except ParseError as exc:
            raise exc.at_line(line_no) from exc
    return trees


__all__ = ["parse_prefix", "parse_number", "parse_lines"]
