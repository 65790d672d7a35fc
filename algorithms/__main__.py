"""
Command-line front end for the algorithm primitives.

Examples:
    python -m algorithms sort merge 5 2 9 1 5 6 --reverse
    python -m algorithms search range 5 1 3 5 5 7
    python -m algorithms traverse dfs --edges 0:1 0:2 1:3 1:4 --start 0
    python -m algorithms fibonacci 10
"""

import argparse
import logging
import operator
import sys
from collections.abc import Sequence

from rich.console import Console

from algorithms.constants import (
    DEFAULT_LOG_LEVEL,
    EDGE_SEPARATOR,
    FIBONACCI_NEXT,
    FIBONACCI_START,
    LOG_FORMAT,
    SEARCH_ALGORITHMS,
    SORT_ALGORITHMS,
    TRAVERSAL_ALGORITHMS,
)
from algorithms.dynamic_programming import fibonacci
from algorithms.graph import (
    AdjacencyGraph,
    bfs_complete,
    bfs_iterative,
    dfs_complete,
    dfs_iterative,
    dfs_recursive,
)
from algorithms.searching import binary_search, equal_range, linear_search
from algorithms.sorting import bubble_sort, is_sorted, merge_sort

logger = logging.getLogger(__name__)

console = Console(markup=False, highlight=False, soft_wrap=True)


def parse_edge(text: str) -> tuple[int, int]:
    """Parses `U:V` into an edge between integer nodes."""
    source, sep, target = text.partition(EDGE_SEPARATOR)
    if sep:
        try:
            return int(source), int(target)
        except ValueError:
            pass
    raise argparse.ArgumentTypeError(
        f"invalid edge {text!r}, expected U{EDGE_SEPARATOR}V with integer nodes"
    )


def _format(values: Sequence[object]) -> str:
    return " ".join(str(v) for v in values)


def run_sort(args: argparse.Namespace) -> None:
    values: list[int] = list(args.values)
    compare = operator.gt if args.reverse else operator.lt
    sort = merge_sort if args.algorithm == "merge" else bubble_sort
    logger.debug(f"Sorting {len(values)} values with {sort.__name__}")
    sort(values, compare)
    console.print(_format(values))


def run_search(args: argparse.Namespace) -> None:
    values: list[int] = list(args.values)

    if args.algorithm == "linear":
        index = linear_search(values, args.value)
        console.print(str(index) if index != len(values) else "not found")
        return

    if not is_sorted(values):
        merge_sort(values)
        logger.debug(f"Sorted input: {values}")
    if args.algorithm == "binary":
        index = binary_search(values, args.value)
        console.print(str(index) if index != len(values) else "not found")
    else:
        lower, upper = equal_range(values, args.value)
        console.print(f"{lower} {upper}")


def run_traverse(args: argparse.Namespace) -> None:
    graph = AdjacencyGraph.from_edges(args.edges, args.nodes)
    logger.debug(f"Graph: {graph}")
    order: list[int] = []

    if args.start is None:
        traverse = bfs_complete if args.algorithm == "bfs" else dfs_complete
        traverse(graph, order.append)
    else:
        traverse = {
            "bfs": bfs_iterative,
            "dfs": dfs_iterative,
            "dfs-recursive": dfs_recursive,
        }[args.algorithm]
        traverse(graph, args.start, order.append)

    console.print(_format(order))


def run_fibonacci(args: argparse.Namespace) -> None:
    console.print(str(fibonacci(args.n, args.start, args.next)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algorithms", description="Run textbook algorithm primitives"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    sort = commands.add_parser("sort", help="Sort integers")
    sort.add_argument("algorithm", choices=SORT_ALGORITHMS)
    sort.add_argument("values", nargs="+", type=int)
    sort.add_argument(
        "--reverse", action="store_true", help="Sort in non-increasing order"
    )
    sort.set_defaults(run=run_sort)

    search = commands.add_parser(
        "search", help="Find a value (binary and range sort the values first)"
    )
    search.add_argument("algorithm", choices=SEARCH_ALGORITHMS)
    search.add_argument("value", type=int)
    search.add_argument("values", nargs="*", type=int)
    search.set_defaults(run=run_search)

    traverse = commands.add_parser("traverse", help="Traverse a directed graph")
    traverse.add_argument("algorithm", choices=TRAVERSAL_ALGORITHMS)
    traverse.add_argument(
        "--edges",
        nargs="*",
        type=parse_edge,
        default=[],
        help=f"Edges as U{EDGE_SEPARATOR}V",
    )
    traverse.add_argument(
        "--nodes",
        nargs="*",
        type=int,
        default=[],
        help="Nodes enumerated before the edge endpoints (isolated nodes)",
    )
    traverse.add_argument(
        "--start", type=int, help="Start node (whole graph when omitted)"
    )
    traverse.set_defaults(run=run_traverse)

    fib = commands.add_parser("fibonacci", help="n-th term of a Fibonacci recurrence")
    fib.add_argument("n", type=int)
    fib.add_argument("--start", type=int, default=FIBONACCI_START, help="Term 0")
    fib.add_argument("--next", type=int, default=FIBONACCI_NEXT, help="Term 1")
    fib.set_defaults(run=run_fibonacci)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=DEFAULT_LOG_LEVEL, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "traverse" and args.algorithm == "dfs-recursive" and args.start is None:
        parser.error("dfs-recursive requires --start")

    try:
        args.run(args)
    except ValueError as e:
        logger.error(str(e))
        parser.error(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
