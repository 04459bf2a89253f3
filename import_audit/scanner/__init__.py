"""File discovery stage."""

from __future__ import annotations

from pathlib import Path

from import_audit.scanner.base import Pattern, SourceScanner


def discover_files(
    root: Path | str,
    include_pattern: Pattern,
    exclude_pattern: Pattern | None = None,
) -> list[Path]:
    """Recursively list source files under ``root``.

    Order follows directory enumeration, not sorted.
    """
    return SourceScanner(include_pattern, exclude_pattern).scan_directory(root)


__all__ = [
    "SourceScanner",
    "discover_files",
]
