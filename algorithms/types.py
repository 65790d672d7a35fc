"""
Capability contracts shared by the algorithm modules.

Types:
    Compare  - Strict-weak ordering predicate, `compare(a, b)` means a precedes b
    Predicate - One-argument test used by `linear_search_if`
    Visitor  - Callback receiving each visited node
    Graph    - Protocol for anything exposing neighbors and the full node set
    Addable  - Protocol for values closed under `+`
"""

from collections.abc import Callable, Hashable, Iterable
from typing import Protocol, Self, TypeVar, runtime_checkable

T = TypeVar("T")

# Node identities key the visited set, so they must be hashable
N = TypeVar("N", bound=Hashable)

type Compare[T] = Callable[[T, T], bool]
type Predicate[T] = Callable[[T], bool]
type Visitor[N] = Callable[[N], object]


@runtime_checkable
class Graph(Protocol[N]):
    """
    Structural contract consumed by the traversals.

    The caller's object is the graph: nothing is copied. Both methods must be
    pure and repeatable for the duration of a traversal, otherwise the
    visitation order is not well defined.
    """

    def get_neighbors(self, node: N) -> Iterable[N]:
        """Outgoing neighbors of `node`, in the order they should be explored."""
        ...

    def get_all_nodes(self) -> Iterable[N]:
        """Every node of the graph. Must be finite."""
        ...


@runtime_checkable
class Addable(Protocol):
    """Values supporting `a + b` with a result of the same kind."""

    def __add__(self, other: Self, /) -> Self: ...


A = TypeVar("A", bound=Addable)


__all__ = [
    "T",
    "N",
    "A",
    "Compare",
    "Predicate",
    "Visitor",
    "Graph",
    "Addable",
]
