"""Scan pipeline orchestrator: discover -> extract -> build edges -> find cycles."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from import_audit.analysis import GraphBuilder, find_cycles
from import_audit.config import load_alias_mapping
from import_audit.extractor import AliasResolver, PathResolver, TsImportExtractor
from import_audit.models import ImportRecord, ScanConfig, ScanResult
from import_audit.scanner import discover_files

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def run_discovery(config: ScanConfig, progress: ProgressCallback | None = None) -> list[Path]:
    """Stage 1: List the source files to scan."""
    if progress:
        progress("Discovering", 0, 1)
    files = discover_files(config.source_dir, config.include_pattern, config.exclude_pattern)
    if progress:
        progress("Discovering", 1, 1)
    logger.info("discovered %d file(s) under %s", len(files), config.source_dir)
    return files


def run_scan(config: ScanConfig, progress: ProgressCallback | None = None) -> ScanResult:
    """Run the full scan and return edges, duplicates and cycles."""
    # Stage 1: Discover (fails fast on a bad root)
    files = run_discovery(config, progress)

    alias_mapping: dict[str, str] = {}
    if config.tsconfig_path is not None:
        alias_mapping = load_alias_mapping(config.tsconfig_path)

    resolver = PathResolver(config.source_dir, AliasResolver(alias_mapping))
    extractor = TsImportExtractor(resolver, ignore_node_modules=config.ignore_node_modules)

    # Stage 2: Extract, one file at a time in discovery order
    per_file: list[tuple[str, list[ImportRecord]]] = []
    for i, file_path in enumerate(files):
        if progress:
            progress("Extracting", i, len(files))
        try:
            imports = extractor.extract(file_path)
        except OSError as e:
            logger.warning("cannot read %s, skipping it: %s", file_path, e)
            if progress:
                progress(f"Extract error ({file_path.name}): {e}", i, len(files))
            imports = []
        per_file.append((resolver.to_identifier(file_path), imports))

    if progress:
        progress("Extracting", len(files), len(files))

    # Stage 3: Edges
    if progress:
        progress("Building graph", 0, 1)
    edge_set = GraphBuilder().build(per_file, ignore_no_imports=config.ignore_no_imports)
    if progress:
        progress("Building graph", 1, 1)

    # Stage 4: Cycles
    if progress:
        progress("Finding cycles", 0, 1)
    cycles = find_cycles(edge_set)
    if progress:
        progress("Finding cycles", 1, 1)

    return ScanResult(
        source_dir=Path(config.source_dir),
        files_scanned=len(files),
        edges=edge_set.edges,
        duplicated_edges=edge_set.duplicated_edges,
        circular_dependencies=tuple(cycles),
    )
