"""Data models for the import graph."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from import_audit.models import Edge


@dataclass(frozen=True)
class EdgeSet:
    """All edges of one scan, in the order they were built."""
    edges: tuple[Edge, ...] = ()

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    @property
    def duplicated_edges(self) -> tuple[Edge, ...]:
        return tuple(e for e in self.edges if e.is_duplicated)


@dataclass
class DependencyGraph:
    """Node arena: identifiers stored once, adjacency held as index lists.

    Node identity is exact string equality on the identifier.
    """
    nodes: list[str] = field(default_factory=list)
    index: dict[str, int] = field(default_factory=dict)  # identifier -> node index
    forward: list[list[int]] = field(default_factory=list)  # node -> [targets], edge order

    def add_node(self, identifier: str) -> int:
        idx = self.index.get(identifier)
        if idx is None:
            idx = len(self.nodes)
            self.nodes.append(identifier)
            self.index[identifier] = idx
            self.forward.append([])
        return idx

    def add_edge(self, source: str, target: str) -> None:
        src = self.add_node(source)
        tgt = self.add_node(target)
        if tgt not in self.forward[src]:
            self.forward[src].append(tgt)

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> DependencyGraph:
        graph = cls()
        for edge in edges:
            graph.add_edge(edge.from_file, edge.to)
        return graph

    def __len__(self) -> int:
        return len(self.nodes)
