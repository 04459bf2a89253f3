"""Recursive source file discovery."""

from __future__ import annotations

import os
import re
from pathlib import Path

from import_audit.models import ScanError

Pattern = str | re.Pattern[str]


def _compile(pattern: Pattern | None) -> re.Pattern[str] | None:
    if pattern is None or isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except (re.error, TypeError) as e:
        raise ScanError(f"Invalid file pattern {pattern!r}: {e}") from e


class SourceScanner:
    """Lists files whose name matches the include pattern and not the exclude one.

    Patterns apply to file names only. Directories are always descended into,
    so a directory cannot be excluded by name.
    """

    def __init__(self, include_pattern: Pattern, exclude_pattern: Pattern | None = None):
        self.include_pattern = _compile(include_pattern)
        self.exclude_pattern = _compile(exclude_pattern)

    def scan_directory(self, directory: Path | str) -> list[Path]:
        root = os.path.normpath(os.path.abspath(directory))
        if not os.path.isdir(root):
            raise ScanError(f"Source directory does not exist: {directory}")
        return self._scan(root)

    def _scan(self, directory: str) -> list[Path]:
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            raise ScanError(f"Cannot read directory {directory}: {e}") from e

        files: list[Path] = []
        subdirs: list[str] = []
        for entry in entries:
            # Symlinks are neither files nor directories here
            if entry.is_file(follow_symlinks=False):
                if self._matches(entry.name):
                    files.append(Path(os.path.normpath(entry.path)))
            elif entry.is_dir(follow_symlinks=False):
                subdirs.append(entry.path)

        for subdir in subdirs:
            files.extend(self._scan(subdir))
        return files

    def _matches(self, name: str) -> bool:
        if not self.include_pattern.search(name):
            return False
        if self.exclude_pattern is not None and self.exclude_pattern.search(name):
            return False
        return True
