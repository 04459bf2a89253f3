"""TypeScript import extractor using regex patterns."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from import_audit.extractor.resolver import PathResolver
from import_audit.models import ImportRecord

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"[\r\n]")

# import { a, b } from "./x";   import Foo from "@app/foo";
_STATIC_IMPORT_RE = re.compile(
    r"""\bimport\s+([^;]*?)\s*\bfrom\s*['"]\s*([^'";]*?)\s*['"]\s*;""",
)

# import("./x").then(m => m.Member), as used for lazy-loaded routes; a member
# chain such as m.Routes.Child binds its last name
_LAZY_IMPORT_RE = re.compile(
    r"""\bimport\(\s*['"`]\s*([^'"`]+?)\s*['"`]\s*\)\s*"""
    r"""\.then\(\s*\(?\s*([\w$]+)\s*\)?\s*=>\s*\2\s*\.\s*(?:[\w$]+\s*\.\s*)*([\w$]+)\s*\)""",
)


class TsImportExtractor:
    """Finds static and lazy import statements in a TypeScript file."""

    def __init__(self, resolver: PathResolver, ignore_node_modules: bool = False):
        self.resolver = resolver
        self.ignore_node_modules = ignore_node_modules

    def extract(self, file_path: Path, *, source: str | None = None) -> list[ImportRecord]:
        if source is None:
            source = file_path.read_text(encoding="utf-8", errors="replace")
        content = _LINE_BREAK_RE.sub(" ", source)

        raw_imports = self.parse(content)
        records = [
            ImportRecord(elements=elements, path=self.resolver.resolve(raw_path, file_path))
            for elements, raw_path in raw_imports
        ]
        if self.ignore_node_modules:
            records = [r for r in records if r.is_internal]

        logger.debug("%s: %d import(s), %d kept", file_path, len(raw_imports), len(records))
        return records

    @staticmethod
    def parse(content: str) -> list[tuple[tuple[str, ...], str]]:
        """Return ``(elements, raw specifier)`` pairs, static imports first."""
        found: list[tuple[tuple[str, ...], str]] = []

        for m in _STATIC_IMPORT_RE.finditer(content):
            bindings = m.group(1).replace("{", "").replace("}", "")
            elements = tuple(part.strip() for part in bindings.split(","))
            found.append((elements, m.group(2)))

        for m in _LAZY_IMPORT_RE.finditer(content):
            found.append(((m.group(3).strip(),), m.group(1)))

        return found
