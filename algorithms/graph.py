"""
Breadth-first and depth-first traversals over any `Graph`.

A graph is anything with `get_neighbors(node)` and `get_all_nodes()` (see
`algorithms.types.Graph`). Nodes must be hashable. Each traversal call owns a
fresh visited set, so every node is produced at most once per call.

Callbacks (visit(node) fired once per node, in traversal order):
    bfs_iterative(graph, start, visit)  - Level order from start
    bfs_complete(graph, visit)          - Level order, every component
    dfs_recursive(graph, start, visit)  - Pre-order, native recursion
    dfs_iterative(graph, start, visit)  - Pre-order, explicit stack
    dfs_complete(graph, visit)          - Pre-order, every component

Generators (same orders, produced lazily):
    breadth_first(graph, start)
    breadth_first_complete(graph)
    depth_first(graph, start)
    depth_first_complete(graph)

Whole-graph variants start a new component at each node of
`get_all_nodes()` not reached yet, in enumeration order.

Note: `dfs_recursive` recurses once per edge on the current path. Deep graphs
can exceed the interpreter recursion limit; prefer `dfs_iterative` for them.
"""

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic

from algorithms.types import Graph, N, Visitor

logger = logging.getLogger(__name__)


# =============================================================================
# Adjacency list graph
# =============================================================================


class AdjacencyGraph(Generic[N]):
    """
    Directed graph stored as an insertion-ordered adjacency list.

    Nodes are enumerated in the order they were first added and neighbors in
    the order their edges were added. A node that was never added has no
    neighbors.

    Example:
        >>> g = AdjacencyGraph.from_edges([(0, 1), (0, 2), (1, 3)])
        >>> list(g.get_neighbors(0))
        [1, 2]
        >>> list(g.get_all_nodes())
        [0, 1, 2, 3]
    """

    def __init__(self) -> None:
        self._adjacency: dict[N, list[N]] = {}

    @classmethod
    def from_edges(
        cls, edges: Iterable[tuple[N, N]], nodes: Iterable[N] = ()
    ) -> "AdjacencyGraph[N]":
        """Builds a graph from `nodes` (enumerated first) then `edges`."""
        graph: AdjacencyGraph[N] = cls()
        for node in nodes:
            graph.add_node(node)
        for source, target in edges:
            graph.add_edge(source, target)
        return graph

    def add_node(self, node: N) -> None:
        if node not in self._adjacency:
            self._adjacency[node] = []

    def add_edge(self, source: N, target: N) -> None:
        """Adds the edge source -> target, registering both endpoints."""
        self.add_node(source)
        self.add_node(target)
        self._adjacency[source].append(target)

    def get_neighbors(self, node: N) -> tuple[N, ...]:
        return tuple(self._adjacency.get(node, ()))

    def get_all_nodes(self) -> tuple[N, ...]:
        return tuple(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._adjacency!r})"


# =============================================================================
# Breadth-first
# =============================================================================


def _breadth_first_from(graph: Graph[N], start: N, visited: set[N]) -> Iterator[N]:
    # Marking happens on enqueue so two parents cannot enqueue the same child
    visited.add(start)
    queue = deque([start])
    while queue:
        node = queue.popleft()
        yield node
        for neighbor in graph.get_neighbors(node):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)


def breadth_first(graph: Graph[N], start: N) -> Iterator[N]:
    """Yields the nodes reachable from `start` in level order, `start` first."""
    return _breadth_first_from(graph, start, set())


def breadth_first_complete(graph: Graph[N]) -> Iterator[N]:
    """Yields every node once, one level-order sweep per component."""
    visited: set[N] = set()
    for node in graph.get_all_nodes():
        if node in visited:
            continue
        logger.debug(f"Breadth-first component from {node!r}")
        yield from _breadth_first_from(graph, node, visited)


def bfs_iterative(graph: Graph[N], start: N, visit: Visitor[N]) -> None:
    """Calls `visit` on each node reachable from `start`, in level order."""
    for node in breadth_first(graph, start):
        visit(node)


def bfs_complete(graph: Graph[N], visit: Visitor[N]) -> None:
    """Calls `visit` on every node of `graph`, component by component in level order."""
    for node in breadth_first_complete(graph):
        visit(node)


# =============================================================================
# Depth-first
# =============================================================================


def _depth_first_from(graph: Graph[N], start: N, visited: set[N]) -> Iterator[N]:
    # A node may sit on the stack several times; only its first pop counts
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        yield node
        # Reversed so the first neighbor is popped first, as in the recursive order
        neighbors = list(graph.get_neighbors(node))
        stack.extend(n for n in reversed(neighbors) if n not in visited)


def depth_first(graph: Graph[N], start: N) -> Iterator[N]:
    """Yields the nodes reachable from `start` in depth-first pre-order."""
    return _depth_first_from(graph, start, set())


def depth_first_complete(graph: Graph[N]) -> Iterator[N]:
    """Yields every node once, one depth-first pre-order per component."""
    visited: set[N] = set()
    for node in graph.get_all_nodes():
        if node in visited:
            continue
        logger.debug(f"Depth-first component from {node!r}")
        yield from _depth_first_from(graph, node, visited)


def dfs_recursive(graph: Graph[N], start: N, visit: Visitor[N]) -> None:
    """
    Calls `visit` on each node reachable from `start`, in depth-first pre-order.

    Uses one Python frame per node on the current path.
    """
    visited: set[N] = set()

    def explore(node: N) -> None:
        if node in visited:
            return
        visited.add(node)
        visit(node)
        for neighbor in graph.get_neighbors(node):
            explore(neighbor)

    explore(start)


def dfs_iterative(graph: Graph[N], start: N, visit: Visitor[N]) -> None:
    """Same visitation order as `dfs_recursive`, driven by an explicit stack."""
    for node in depth_first(graph, start):
        visit(node)


def dfs_complete(graph: Graph[N], visit: Visitor[N]) -> None:
    """Calls `visit` on every node of `graph`, component by component in pre-order."""
    for node in depth_first_complete(graph):
        visit(node)


__all__ = [
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
]
