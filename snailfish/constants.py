"""snailfish.constants
=====================

Global constants used across the package. Keeping them here avoids import
cycles between modules and makes the reduction thresholds easy to find.
"""

from __future__ import annotations

# A pair nested inside this many pairs explodes.
EXPLODE_DEPTH = 4
# A regular number above this value splits.
SPLIT_THRESHOLD = 9

LEFT_WEIGHT = 3
RIGHT_WEIGHT = 2

PARSE_FAIL_LOG = "parse_failures.jsonl"

__all__ = [
    "EXPLODE_DEPTH",
    "SPLIT_THRESHOLD",
    "LEFT_WEIGHT",
    "RIGHT_WEIGHT",
    "PARSE_FAIL_LOG",
]
