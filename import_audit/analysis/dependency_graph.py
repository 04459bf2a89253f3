"""Edge list builder: turns per-file imports into a flat, duplicate-flagged edge set."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from import_audit.analysis.graph_models import EdgeSet
from import_audit.models import Edge, ImportRecord

logger = logging.getLogger(__name__)

PerFileImports = (
    Mapping[str, Sequence[ImportRecord]]
    | Iterable[tuple[str, Sequence[ImportRecord]]]
)


class GraphBuilder:
    """Build an EdgeSet from the imports of each scanned file."""

    def build(self, per_file_imports: PerFileImports, ignore_no_imports: bool = False) -> EdgeSet:
        if isinstance(per_file_imports, Mapping):
            per_file_imports = per_file_imports.items()

        edges: list[Edge] = []
        seen: set[tuple[str, str]] = set()

        for file_id, imports in per_file_imports:
            if ignore_no_imports and not imports:
                continue
            for record in imports:
                key = (file_id, record.path)
                edges.append(Edge(
                    from_file=file_id,
                    to=record.path,
                    elements=tuple(record.elements),
                    is_duplicated=key in seen,
                ))
                seen.add(key)

        edge_set = EdgeSet(edges=tuple(edges))
        logger.info(
            "built %d edge(s), %d duplicated", len(edge_set), len(edge_set.duplicated_edges),
        )
        return edge_set
