"""Circular import detection.

Cyclic files are found with Tarjan's strongly-connected-components algorithm,
run once over the whole graph. Every file in a component with more than one
node, or in a single-node component that imports itself, is reported with the
shortest cycle through it as the witness tree.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from import_audit.analysis.graph_models import DependencyGraph
from import_audit.models import CircularDependencyReport, Edge

logger = logging.getLogger(__name__)


def strongly_connected_components(graph: DependencyGraph) -> list[list[int]]:
    """Tarjan's algorithm, iterative so long import chains cannot exhaust the stack."""
    count = len(graph)
    index_of = [-1] * count
    lowlink = [0] * count
    on_stack = [False] * count
    stack: list[int] = []
    components: list[list[int]] = []
    counter = 0

    for start in range(count):
        if index_of[start] != -1:
            continue

        work: list[tuple[int, int]] = [(start, 0)]
        while work:
            node, pos = work[-1]
            if pos == 0:
                index_of[node] = lowlink[node] = counter
                counter += 1
                stack.append(node)
                on_stack[node] = True

            neighbours = graph.forward[node]
            if pos < len(neighbours):
                work[-1] = (node, pos + 1)
                target = neighbours[pos]
                if index_of[target] == -1:
                    work.append((target, 0))
                elif on_stack[target]:
                    lowlink[node] = min(lowlink[node], index_of[target])
                continue

            work.pop()
            if work:
                parent = work[-1][0]
                lowlink[parent] = min(lowlink[parent], lowlink[node])

            if lowlink[node] == index_of[node]:
                component: list[int] = []
                while True:
                    member = stack.pop()
                    on_stack[member] = False
                    component.append(member)
                    if member == node:
                        break
                components.append(component)

    return components


def _is_cyclic(graph: DependencyGraph, component: list[int]) -> bool:
    if len(component) > 1:
        return True
    node = component[0]
    return node in graph.forward[node]


def _witness_cycle(graph: DependencyGraph, start: int, members: set[int]) -> list[int]:
    """Shortest path start -> ... -> start inside the component (BFS)."""
    if start in graph.forward[start]:
        return [start, start]

    parent: dict[int, int] = {}
    queue: deque[int] = deque()
    for target in graph.forward[start]:
        if target in members and target not in parent:
            parent[target] = start
            queue.append(target)

    while queue:
        current = queue.popleft()
        for target in graph.forward[current]:
            if target == start:
                chain = [current]
                while chain[-1] != start:
                    chain.append(parent[chain[-1]])
                chain.reverse()
                return chain + [start]
            if target in members and target not in parent:
                parent[target] = current
                queue.append(target)

    # Unreachable for a genuine component member
    raise ValueError(f"node {graph.nodes[start]!r} is not on a cycle")


def find_cycles(edges: Iterable[Edge]) -> list[CircularDependencyReport]:
    """Report each file that takes part in an import cycle.

    Reports come in the order the files first appear as an edge origin.
    """
    edges = list(edges)
    graph = DependencyGraph.from_edges(edges)

    component_of: dict[int, set[int]] = {}
    for component in strongly_connected_components(graph):
        if _is_cyclic(graph, component):
            members = set(component)
            for node in component:
                component_of[node] = members

    reports: list[CircularDependencyReport] = []
    reported: set[int] = set()
    for edge in edges:
        node = graph.index[edge.from_file]
        if node in reported or node not in component_of:
            continue
        reported.add(node)
        path = _witness_cycle(graph, node, component_of[node])
        reports.append(CircularDependencyReport(
            file=edge.from_file,
            tree=tuple(graph.nodes[i] for i in path),
        ))

    logger.info("found %d file(s) in import cycles", len(reports))
    return reports
