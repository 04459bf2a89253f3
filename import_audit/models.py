"""Data models for the import-audit pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_INCLUDE_PATTERN = r"\.ts$"
DEFAULT_EXCLUDE_PATTERN = r"\.spec\.ts$"


class ScanError(Exception):
    """The scan cannot start: bad root directory or unreadable config."""


@dataclass(frozen=True)
class ImportRecord:
    """One import statement found in a source file."""
    elements: tuple[str, ...]
    path: str

    @property
    def is_internal(self) -> bool:
        return self.path.startswith("/")


@dataclass(frozen=True)
class Edge:
    """Import relationship between two nodes."""
    from_file: str
    to: str
    elements: tuple[str, ...] = ()
    is_duplicated: bool = False

    def to_dict(self) -> dict:
        return {
            "elements": list(self.elements),
            "to": self.to,
            "from": self.from_file,
        }


@dataclass(frozen=True)
class CircularDependencyReport:
    """A file taking part in an import cycle, with one witness path."""
    file: str
    tree: tuple[str, ...]

    def to_dict(self) -> dict:
        return {"file": self.file, "tree": list(self.tree)}


@dataclass
class ScanResult:
    """Result of a full scan."""
    source_dir: Path
    files_scanned: int
    edges: tuple[Edge, ...] = ()
    duplicated_edges: tuple[Edge, ...] = ()
    circular_dependencies: tuple[CircularDependencyReport, ...] = ()

    @property
    def has_problems(self) -> bool:
        return bool(self.duplicated_edges or self.circular_dependencies)


@dataclass
class ScanConfig:
    """Configuration for a scan."""
    source_dir: Path = field(default_factory=lambda: Path("."))
    include_pattern: str = DEFAULT_INCLUDE_PATTERN
    exclude_pattern: str | None = DEFAULT_EXCLUDE_PATTERN
    tsconfig_path: Path | None = None
    ignore_no_imports: bool = True
    ignore_node_modules: bool = True
