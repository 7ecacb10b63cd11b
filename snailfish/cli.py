"""snailfish.cli
================

Command-line entry point: read a file of snailfish numbers, one per line, and
report either the magnitude of their sum, the best pairwise magnitude, or each
number in reduced form.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import Any, Dict, List

from .arithmetic import magnitude, sum_numbers
from .constants import PARSE_FAIL_LOG
from .errors import EmptyInputError, ParseError
from .logging_utils import log_parse_failure
from .parser import parse_lines
from .reducer import ReductionStats, make_regular
from .search import PairSearchConfig, best_pair


def run_sum(text: str, show_stats: bool) -> Dict[str, Any]:
    stats = ReductionStats()
    trees = parse_lines(text)
    total = sum_numbers(trees, stats)
    result = magnitude(total)
    print(f"Sum of {len(trees)} numbers: {total}")
    print(f"Magnitude: {result}")
    if show_stats:
        print(f"   explodes={stats.explodes} splits={stats.splits}")
    return {
        "mode": "sum",
        "count": len(trees),
        "sum": str(total),
        "magnitude": result,
        "explodes": stats.explodes,
        "splits": stats.splits,
    }


def run_max_pair(text: str, config: PairSearchConfig) -> Dict[str, Any]:
    trees = parse_lines(text)
    pairs = len(trees) * (len(trees) - 1)
    print(f"Searching {pairs} ordered pairs with {config.max_workers} worker(s)...")
    result = best_pair(trees, config)
    print(f"Largest magnitude: {result.magnitude}")
    print(f"   line {result.left_index + 1}: {trees[result.left_index]}")
    print(f" + line {result.right_index + 1}: {trees[result.right_index]}")
    return {
        "mode": "max-pair",
        "count": len(trees),
        "pairs": pairs,
        "magnitude": result.magnitude,
        "left_index": result.left_index,
        "right_index": result.right_index,
    }


def run_reduce(text: str, show_stats: bool) -> Dict[str, Any]:
    reduced: List[str] = []
    for tree in parse_lines(text):
        stats = ReductionStats()
        tree = make_regular(tree, stats)
        reduced.append(str(tree))
        suffix = f"  # steps={stats.steps}" if show_stats else ""
        print(f"{tree}{suffix}")
    return {"mode": "reduce", "count": len(reduced), "reduced": reduced}


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and run the selected operation."""

    parser = argparse.ArgumentParser("snailfish")
    parser.add_argument("--infile", required=True, help="Text file with one snailfish number per line")
    parser.add_argument(
        "--mode",
        choices=["sum", "max-pair", "reduce"],
        default="sum",
        help="Operation to run on the input numbers",
    )
    parser.add_argument("--max-workers", type=int, default=1, help="Worker processes for max-pair (0 = all CPUs)")
    parser.add_argument("--chunk-size", type=int, default=0, help="Matrix rows per max-pair task (0 = one row)")
    parser.add_argument("--outfile", default=None, help="Write a JSON summary of the run here")
    parser.add_argument("--fail-log", default=PARSE_FAIL_LOG, help="JSONL file receiving rejected input lines")
    parser.add_argument("--stats", action="store_true", help="Print reduction step counters")
    args = parser.parse_args(argv)

    text = Path(args.infile).read_text(encoding="utf-8")
    start_time = time.time()
    try:
        if args.mode == "sum":
            summary = run_sum(text, args.stats)
        elif args.mode == "max-pair":
            config = PairSearchConfig(max_workers=args.max_workers, chunk_size=args.chunk_size)
            summary = run_max_pair(text, config)
        else:
            summary = run_reduce(text, args.stats)
    except ParseError as exc:
        log_parse_failure(args.infile, text, exc, path=args.fail_log)
        print(f"Invalid input in {args.infile}: {exc}")
        print(f"   -> Logged to {args.fail_log}; aborting.")
        return 1
    except EmptyInputError as exc:
        print(f"Not enough input in {args.infile}: {exc}")
        return 1

    summary["elapsed"] = time.time() - start_time
    print(f"Done in {summary['elapsed']:.2f}s.")
    if args.outfile:
        Path(args.outfile).write_text(json.dumps(summary, indent=2))
        print("Summary saved to", args.outfile)
    return 0


__all__ = ["main", "run_sum", "run_max_pair", "run_reduce"]
