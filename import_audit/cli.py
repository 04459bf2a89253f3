"""Click CLI: scan a TypeScript tree for duplicated and circular imports."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

import click

from import_audit import __version__
from import_audit.config import load_scan_config
from import_audit.models import ScanConfig, ScanError
from import_audit.pipeline import run_scan
from import_audit.report import render_json, render_text

EXIT_CLEAN = 0
EXIT_PROBLEMS = 1
EXIT_CANNOT_START = 2


class ScanAbort(click.ClickException):
    """Scan could not start."""
    exit_code = EXIT_CANNOT_START


def _highlight(line: str) -> str:
    return click.style(line, fg="yellow", bold=True)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """import-audit: Find duplicated and circular imports in a TypeScript project."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("source_dir", type=click.Path(exists=True, file_okay=False, path_type=Path), required=False)
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="JSON or YAML scan config file")
@click.option("--tsconfig", "tsconfig_path", type=click.Path(path_type=Path), help="tsconfig.json with path aliases")
@click.option("--include", "include_pattern", help="Regex a file name must match")
@click.option("--exclude", "exclude_pattern", help="Regex a file name must not match")
@click.option("--ignore-no-imports/--keep-empty", default=None, help="Skip files without imports")
@click.option("--ignore-external/--include-external", default=None,
              help="Drop imports that do not resolve to a project file")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text", help="Report format")
def scan(
    source_dir: Path | None,
    config_path: Path | None,
    tsconfig_path: Path | None,
    include_pattern: str | None,
    exclude_pattern: str | None,
    ignore_no_imports: bool | None,
    ignore_external: bool | None,
    output_format: str,
):
    """Scan a directory and report duplicated and circular imports."""
    try:
        config = load_scan_config(config_path) if config_path else ScanConfig()
    except ScanError as e:
        raise ScanAbort(str(e))

    overrides = {
        "source_dir": source_dir,
        "tsconfig_path": tsconfig_path,
        "include_pattern": include_pattern,
        "exclude_pattern": exclude_pattern,
        "ignore_no_imports": ignore_no_imports,
        "ignore_node_modules": ignore_external,
    }
    config = dataclasses.replace(config, **{k: v for k, v in overrides.items() if v is not None})

    try:
        result = run_scan(config)
    except ScanError as e:
        raise ScanAbort(str(e))

    if output_format == "json":
        click.echo(render_json(result))
    else:
        click.echo(render_text(result, style=_highlight))

    click.get_current_context().exit(EXIT_PROBLEMS if result.has_problems else EXIT_CLEAN)


if __name__ == "__main__":
    cli()
