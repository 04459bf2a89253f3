"""Turn raw import specifiers into graph node identifiers."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from import_audit.extractor.alias import AliasResolver

logger = logging.getLogger(__name__)

TS_SUFFIX = ".ts"


class PathResolver:
    """Resolves specifiers against the project root and alias mapping.

    A specifier that resolves to a file on disk becomes a root-relative
    identifier such as ``/feature/widget``. Anything else keeps its raw
    text, which is how package imports are told apart from project files.
    """

    def __init__(self, project_root: Path | str, aliases: AliasResolver | None = None):
        self.project_root = os.path.normpath(os.path.abspath(project_root))
        self.aliases = aliases or AliasResolver()

    def resolve(self, raw_path: str, origin_file: Path | str) -> str:
        rewritten = self.aliases.resolve(raw_path)
        if rewritten is not None:
            # Alias targets are project-root relative
            candidate = os.path.normpath(f"{self.project_root}/{rewritten}")
        else:
            origin_dir = os.path.dirname(os.path.abspath(origin_file))
            candidate = os.path.normpath(f"{origin_dir}/{raw_path}")

        # No relative retry for a failed alias target
        if not (os.path.isfile(candidate) or os.path.isfile(candidate + TS_SUFFIX)):
            logger.debug("unresolved import %r in %s", raw_path, origin_file)
            return raw_path

        return self.to_identifier(candidate)

    def to_identifier(self, path: Path | str) -> str:
        """Strip the ``.ts`` suffix and the project root from a path."""
        identifier = os.path.normpath(str(path))
        if identifier.endswith(TS_SUFFIX):
            identifier = identifier[: -len(TS_SUFFIX)]
        root = self.project_root.rstrip(os.sep)
        if identifier.startswith(root + os.sep):
            identifier = identifier[len(root):]
        return identifier.replace(os.sep, "/")
