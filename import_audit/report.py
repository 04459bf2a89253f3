"""Text and JSON renderings of a scan result."""

from __future__ import annotations

import json
from typing import Callable

from import_audit.models import ScanResult

CYCLE_SEPARATOR = "============================"
WARNING_PREFIX = "!!WARNING!!"


def render_summary(result: ScanResult) -> str:
    return f"You have {len(result.edges)} edges between your files."


def render_duplicates(result: ScanResult) -> list[str]:
    edges = result.duplicated_edges
    if not edges:
        return []
    lines = [
        "",
        f"{WARNING_PREFIX} You have {len(edges)} duplicated imports in your files:",
    ]
    for i, edge in enumerate(edges, 1):
        lines.append(
            f'{i}. Importing "{{ {",".join(edge.elements)} }}" '
            f'from "{edge.to}" in "{edge.from_file}" file.'
        )
    lines.append("")
    return lines


def render_cycles(result: ScanResult) -> list[str]:
    reports = result.circular_dependencies
    if not reports:
        return []
    lines = [
        "",
        f"{WARNING_PREFIX} You have {len(reports)} circular deps. in your project:",
    ]
    for i, report in enumerate(reports, 1):
        lines.append("")
        lines.append(f'{i}. Imported in "{report.file}" file; ')
        lines.extend(report.tree)
        lines.append(CYCLE_SEPARATOR)
    lines.append("")
    return lines


def render_text(result: ScanResult, style: Callable[[str], str] | None = None) -> str:
    """Join the summary, duplicate and cycle sections.

    ``style`` is applied to each ``!!WARNING!!`` heading, e.g. to colour it.
    """
    lines = [render_summary(result)]
    lines.extend(render_duplicates(result))
    lines.extend(render_cycles(result))
    if style is not None:
        lines = [style(line) if line.startswith(WARNING_PREFIX) else line for line in lines]
    return "\n".join(lines)


def render_json(result: ScanResult) -> str:
    data = {
        "source_directory": str(result.source_dir),
        "files_scanned": result.files_scanned,
        "edges": len(result.edges),
        "duplicated": [edge.to_dict() for edge in result.duplicated_edges],
        "circular": [report.to_dict() for report in result.circular_dependencies],
    }
    return json.dumps(data, indent=2)
