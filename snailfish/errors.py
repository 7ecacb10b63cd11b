"""snailfish.errors
==================

Exception types raised by the parser, the reducer and the batch operations.
"""

from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """A line is not a well-formed snailfish number literal.

    Parameters
    ----------
    fragment:
        The unconsumed input at the point of failure.
    expected:
        Human readable description of what the parser was looking for.
    line_no:
        1-based line number when the literal came from multi-line input.
    """

    def __init__(self, fragment: str, expected: str, line_no: Optional[int] = None) -> None:
        self.fragment = fragment
        self.expected = expected
        self.line_no = line_no
        where = f"line {line_no}: " if line_no is not None else ""
        super().__init__(f"{where}{expected}, found {fragment!r}")

    def at_line(self, line_no: int) -> "ParseError":
        """Return a copy of the error annotated with ``line_no``."""

        return ParseError(self.fragment, self.expected, line_no)


class EmptyInputError(ValueError):
    """A batch operation received fewer numbers than it needs."""


class InternalInvariantError(AssertionError):
    """The reducer reached a state that valid reduction can never produce."""


__all__ = ["ParseError", "EmptyInputError", "InternalInvariantError"]
