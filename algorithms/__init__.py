"""
Textbook algorithm primitives with no domain-specific dependencies.

Modules:
    sorting             - Bubble sort and merge sort, in place and stable
    searching           - Linear search, binary search and equal-range
    graph               - Breadth-first and depth-first traversals
    dynamic_programming - Generalized Fibonacci recurrence
    types               - Ordering, visitor, Graph and Addable contracts

Example Usage:
    >>> from algorithms import AdjacencyGraph, merge_sort, equal_range, bfs_iterative
    >>> values = [5, 2, 9, 1, 5, 6]
    >>> merge_sort(values)
    >>> equal_range(values, 5)
    (2, 4)
    >>> g = AdjacencyGraph.from_edges([(0, 1), (0, 2), (1, 3), (1, 4)])
    >>> order = []
    >>> bfs_iterative(g, 0, order.append)
    >>> order
    [0, 1, 2, 3, 4]
"""

from algorithms.sorting import bubble_sort, is_sorted, merge_sort

from algorithms.searching import (
    binary_search,
    equal_range,
    linear_search,
    linear_search_if,
    lower_bound,
    upper_bound,
)

from algorithms.graph import (
    AdjacencyGraph,
    bfs_complete,
    bfs_iterative,
    breadth_first,
    breadth_first_complete,
    depth_first,
    depth_first_complete,
    dfs_complete,
    dfs_iterative,
    dfs_recursive,
)

from algorithms.dynamic_programming import fibonacci

from algorithms.types import Addable, Compare, Graph, Predicate, Visitor

__all__ = [
    # Sorting
    "bubble_sort",
    "merge_sort",
    "is_sorted",
    # Searching
    "linear_search",
    "linear_search_if",
    "binary_search",
    "lower_bound",
    "upper_bound",
    "equal_range",
    # Graph
    "AdjacencyGraph",
    "breadth_first",
    "breadth_first_complete",
    "bfs_iterative",
    "bfs_complete",
    "depth_first",
    "depth_first_complete",
    "dfs_recursive",
    "dfs_iterative",
    "dfs_complete",
    # Dynamic programming
    "fibonacci",
    # Contracts
    "Addable",
    "Compare",
    "Graph",
    "Predicate",
    "Visitor",
]
