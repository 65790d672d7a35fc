"""Tests for algorithms/__main__.py"""

import argparse

import pytest

from algorithms.__main__ import main, parse_edge
from algorithms.dynamic_programming import fibonacci


def run(capsys, *argv: str) -> str:
    assert main(list(argv)) == 0
    return capsys.readouterr().out.strip()


class TestParseEdge:
    def test_valid(self):
        assert parse_edge("3:4") == (3, 4)

    @pytest.mark.parametrize("text", ["34", "a:b", "1:", ":2"])
    def test_invalid(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_edge(text)


class TestSortCommand:
    def test_merge(self, capsys):
        assert run(capsys, "sort", "merge", "5", "2", "9", "1", "5", "6") == "1 2 5 5 6 9"

    def test_bubble_reverse(self, capsys):
        assert run(capsys, "sort", "bubble", "3", "1", "2", "--reverse") == "3 2 1"

    def test_long_output_on_one_line(self, capsys):
        values = [str(v) for v in range(1059, 999, -1)]
        assert main(["sort", "merge", *values]) == 0
        out = capsys.readouterr().out
        assert out.count("\n") == 1
        assert out.strip() == " ".join(str(v) for v in range(1000, 1060))

    def test_unknown_algorithm(self):
        with pytest.raises(SystemExit):
            main(["sort", "quick", "1"])


class TestSearchCommand:
    def test_linear(self, capsys):
        assert run(capsys, "search", "linear", "7", "9", "7", "1") == "1"

    def test_linear_missing(self, capsys):
        assert run(capsys, "search", "linear", "4", "9", "7", "1") == "not found"

    def test_binary_sorts_first(self, capsys):
        assert run(capsys, "search", "binary", "9", "9", "7", "1") == "2"

    def test_binary_already_sorted(self, capsys):
        assert run(capsys, "search", "binary", "7", "1", "3", "7", "9") == "2"

    def test_range(self, capsys):
        assert run(capsys, "search", "range", "5", "7", "5", "1", "5", "3") == "2 4"


class TestTraverseCommand:
    EDGES = ["--edges", "0:1", "0:2", "1:3", "1:4"]

    def test_bfs(self, capsys):
        assert run(capsys, "traverse", "bfs", *self.EDGES, "--start", "0") == "0 1 2 3 4"

    @pytest.mark.parametrize("algorithm", ["dfs", "dfs-recursive"])
    def test_dfs(self, capsys, algorithm):
        assert run(capsys, "traverse", algorithm, *self.EDGES, "--start", "0") == "0 1 3 4 2"

    def test_whole_graph(self, capsys):
        argv = ["traverse", "dfs", "--nodes", "0", "1", "2", "3", "4", "5"]
        argv += ["--edges", "0:1", "0:2", "3:4", "4:5"]
        assert run(capsys, *argv) == "0 1 2 3 4 5"

    def test_recursive_requires_start(self):
        with pytest.raises(SystemExit) as exc:
            main(["traverse", "dfs-recursive", "--edges", "0:1"])
        assert exc.value.code == 2


class TestFibonacciCommand:
    def test_default_seeds(self, capsys):
        assert run(capsys, "fibonacci", "10") == "55"

    def test_custom_seeds(self, capsys):
        assert run(capsys, "fibonacci", "4", "--start", "2", "--next", "1") == "7"

    def test_long_result_on_one_line(self, capsys):
        assert main(["fibonacci", "400"]) == 0
        out = capsys.readouterr().out
        assert out.count("\n") == 1
        assert out.strip() == str(fibonacci(400))
        assert len(out.strip()) > 80

    def test_negative(self):
        with pytest.raises(SystemExit) as exc:
            main(["fibonacci", "-1"])
        assert exc.value.code == 2
