from __future__ import annotations

import json
import multiprocessing
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from snailfish.cli import main
from snailfish.errors import EmptyInputError
from snailfish.parser import parse_lines
from snailfish.search import (
    NO_PAIR,
    PairSearchConfig,
    best_pair,
    max_pairwise_lines,
    max_pairwise_magnitude,
    pair_magnitude,
    pairwise_magnitudes,
)

EXAMPLE_HOMEWORK = """
[[[0,[5,8]],[[1,7],[9,6]]],[[4,[1,2]],[[1,4],2]]]
[[[5,[2,8]],4],[5,[[9,9],0]]]
[6,[[[6,2],[5,6]],[[7,6],[4,7]]]]
[[[6,[0,7]],[0,9]],[4,[9,[9,0]]]]
[[[7,[6,4]],[3,[1,3]]],[[[5,5],1],9]]
[[6,[[7,3],[3,2]]],[[[3,8],[5,7]],4]]
[[[[5,4],[7,7]],8],[[8,3],8]]
[[9,3],[[9,9],[6,[4,9]]]]
[[2,[[7,7],7]],[[5,8],[[9,3],[0,2]]]]
[[[[5,2],5],[8,[3,7]]],[[5,[7,5]],[4,4]]]
"""


def make_trees():
    return parse_lines(EXAMPLE_HOMEWORK)


# ---------------------------------------------------------------------------
# Pairwise search
# ---------------------------------------------------------------------------
def test_max_pairwise_magnitude_example():
    assert max_pairwise_magnitude(make_trees()) == 3993


def test_best_pair_reports_matching_cell():
    result = max_pairwise_lines(EXAMPLE_HOMEWORK)
    assert result.magnitude == 3993
    assert result.left_index != result.right_index
    assert result.matrix[result.left_index, result.right_index] == 3993


def test_known_best_pair():
    trees = make_trees()
    assert pair_magnitude(trees[8], trees[0]) == 3993


def test_search_leaves_operands_untouched():
    trees = make_trees()
    before = [str(tree) for tree in trees]
    pairwise_magnitudes(trees)
    assert [str(tree) for tree in trees] == before


def test_matrix_diagonal_and_bounds():
    trees = make_trees()
    matrix = pairwise_magnitudes(trees)
    assert matrix.shape == (10, 10)
    assert all(matrix[i, i] == NO_PAIR for i in range(10))
    best = int(matrix.max())
    for i in range(10):
        for j in range(10):
            if i != j:
                assert matrix[i, j] > 0
                assert best >= pair_magnitude(trees[i], trees[j])


def test_process_pool_matches_serial():
    trees = make_trees()
    serial = pairwise_magnitudes(trees)
    pooled = pairwise_magnitudes(trees, PairSearchConfig(max_workers=2, chunk_size=3))
    assert (serial == pooled).all()
    assert best_pair(trees, PairSearchConfig(max_workers=2)).magnitude == 3993


def test_two_numbers_evaluate_both_orders():
    trees = parse_lines("[1,1]\n[2,2]")
    matrix = pairwise_magnitudes(trees)
    assert matrix[0, 1] == 3 * (3 + 2) + 2 * (6 + 4)
    assert matrix[1, 0] == 3 * (6 + 4) + 2 * (3 + 2)
    assert max_pairwise_magnitude(trees) == 40


@pytest.mark.parametrize("text", ["", "[1,1]"])
def test_search_needs_two_numbers(text):
    with pytest.raises(EmptyInputError):
        max_pairwise_lines(text)


def test_config_defaults():
    cfg = PairSearchConfig(max_workers=0, chunk_size=-4)
    assert cfg.max_workers == multiprocessing.cpu_count()
    assert cfg.chunk_size == 1


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------
def test_cli_sum_writes_summary(tmp_path: Path, capsys):
    infile = tmp_path / "homework.txt"
    infile.write_text(EXAMPLE_HOMEWORK)
    outfile = tmp_path / "summary.json"
    assert main(["--infile", str(infile), "--outfile", str(outfile), "--stats"]) == 0
    summary = json.loads(outfile.read_text())
    assert summary["mode"] == "sum"
    assert summary["count"] == 10
    assert summary["magnitude"] == 4140
    assert "Magnitude: 4140" in capsys.readouterr().out


def test_cli_max_pair(tmp_path: Path, capsys):
    infile = tmp_path / "homework.txt"
    infile.write_text(EXAMPLE_HOMEWORK)
    outfile = tmp_path / "summary.json"
    argv = ["--infile", str(infile), "--mode", "max-pair", "--outfile", str(outfile)]
    assert main(argv) == 0
    summary = json.loads(outfile.read_text())
    assert summary["magnitude"] == 3993
    assert summary["pairs"] == 90
    assert "Largest magnitude: 3993" in capsys.readouterr().out


def test_cli_reduce(tmp_path: Path, capsys):
    infile = tmp_path / "numbers.txt"
    infile.write_text("[[[[[9,8],1],2],3],4]\n[7,[6,[5,[4,[3,2]]]]]\n")
    assert main(["--infile", str(infile), "--mode", "reduce"]) == 0
    out = capsys.readouterr().out
    assert "[[[[0,9],2],3],4]" in out
    assert "[7,[6,[5,[7,0]]]]" in out


def test_cli_logs_parse_failure(tmp_path: Path):
    infile = tmp_path / "broken.txt"
    infile.write_text("[1,1]\n[2,2\n[3,3]\n")
    fail_log = tmp_path / "failures.jsonl"
    assert main(["--infile", str(infile), "--fail-log", str(fail_log)]) == 1
    entries = [json.loads(line) for line in fail_log.read_text().splitlines()]
    assert len(entries) == 1
    assert entries[0]["line_no"] == 2
    assert entries[0]["line"] == "[2,2"
    assert "expected ']' to close pair" in entries[0]["error"]


def test_cli_max_pair_needs_two_lines(tmp_path: Path, capsys):
    infile = tmp_path / "one.txt"
    infile.write_text("[1,1]\n")
    assert main(["--infile", str(infile), "--mode", "max-pair"]) == 1
    assert "Not enough input" in capsys.readouterr().out
