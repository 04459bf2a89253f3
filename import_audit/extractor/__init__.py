"""Import extraction stage."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from import_audit.extractor.alias import AliasResolver
from import_audit.extractor.resolver import PathResolver
from import_audit.extractor.ts_extractor import TsImportExtractor
from import_audit.models import ImportRecord


def extract_imports(
    file_path: Path,
    alias_mapping: Mapping[str, str],
    project_root: Path | str,
    ignore_node_modules: bool = False,
    *,
    source: str | None = None,
) -> list[ImportRecord]:
    """Extract and resolve the imports of a single file.

    Args:
        file_path: The file to read.
        alias_mapping: Specifier prefix -> root-relative replacement.
        project_root: Root that resolved identifiers are made relative to.
        ignore_node_modules: Drop imports that do not resolve to a project file.
        source: Pre-read file content to avoid a disk read.
    """
    resolver = PathResolver(project_root, AliasResolver(alias_mapping))
    extractor = TsImportExtractor(resolver, ignore_node_modules=ignore_node_modules)
    return extractor.extract(file_path, source=source)


__all__ = [
    "AliasResolver",
    "PathResolver",
    "TsImportExtractor",
    "extract_imports",
]
