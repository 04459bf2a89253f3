"""Tests for the click CLI."""

import json
from pathlib import Path

from click.testing import CliRunner

from import_audit import __version__
from import_audit.cli import EXIT_CANNOT_START, EXIT_CLEAN, EXIT_PROBLEMS, cli

FIXTURES = Path(__file__).parent / "fixtures"
PROJECT = FIXTURES / "project"


def _invoke(*args):
    return CliRunner().invoke(cli, list(args))


def test_help():
    result = _invoke("--help")
    assert result.exit_code == 0
    assert "scan" in result.output


def test_version():
    result = _invoke("--version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_scan_with_config_reports_problems():
    result = _invoke("scan", "--config", str(PROJECT / "scan.json"))
    assert result.exit_code == EXIT_PROBLEMS
    assert "You have 10 edges between your files." in result.output
    assert "!!WARNING!! You have 1 duplicated imports in your files:" in result.output
    assert (
        '1. Importing "{ createWidget }" from "/src/app/widget" in "/src/app/app.module" file.'
        in result.output
    )
    assert "!!WARNING!! You have 5 circular deps. in your project:" in result.output
    assert '"/src/core/util" file; \n/src/core/util\n/src/core/util\n====' in result.output


def test_scan_options_override_config():
    result = _invoke(
        "scan", str(PROJECT),
        "--config", str(PROJECT / "scan.json"),
        "--include-external",
    )
    assert result.exit_code == EXIT_PROBLEMS
    assert "You have 15 edges between your files." in result.output


def test_scan_json_format():
    result = _invoke(
        "scan", str(PROJECT),
        "--tsconfig", str(PROJECT / "tsconfig.json"),
        "--format", "json",
    )
    assert result.exit_code == EXIT_PROBLEMS
    data = json.loads(result.output)
    assert data["edges"] == 10
    assert data["files_scanned"] == 7
    assert data["duplicated"] == [
        {"elements": ["createWidget"], "to": "/src/app/widget", "from": "/src/app/app.module"},
    ]
    assert {c["file"] for c in data["circular"]} >= {"/src/core/util", "/src/core/logger"}


def test_clean_scan_exit_code(tmp_path):
    (tmp_path / "a.ts").write_text('import { B } from "./b";\n')
    (tmp_path / "b.ts").write_text("export const B = 1;\n")
    result = _invoke("scan", str(tmp_path))
    assert result.exit_code == EXIT_CLEAN
    assert "You have 1 edges between your files." in result.output
    assert "WARNING" not in result.output


def test_exclude_option(tmp_path):
    (tmp_path / "a.ts").write_text('import { A } from "./a";\n')
    result = _invoke("scan", str(tmp_path), "--exclude", r"^a\.ts$")
    assert result.exit_code == EXIT_CLEAN
    assert "You have 0 edges" in result.output


def test_missing_source_dir(tmp_path):
    result = _invoke("scan", str(tmp_path / "missing"))
    assert result.exit_code == EXIT_CANNOT_START


def test_bad_pattern_cannot_start(tmp_path):
    result = _invoke("scan", str(tmp_path), "--include", "(")
    assert result.exit_code == EXIT_CANNOT_START
    assert "Invalid file pattern" in result.output


def test_malformed_config_cannot_start(tmp_path):
    config = tmp_path / "scan.json"
    config.write_text("{")
    result = _invoke("scan", "--config", str(config))
    assert result.exit_code == EXIT_CANNOT_START


def test_non_string_pattern_in_config_cannot_start(tmp_path):
    config = tmp_path / "scan.json"
    config.write_text(json.dumps({"projectSourceDir": ".", "includePattern": 5}))
    result = _invoke("scan", "--config", str(config))
    assert result.exit_code == EXIT_CANNOT_START
    assert "include_pattern" in result.output


def test_malformed_tsconfig_shape_is_not_fatal(tmp_path):
    (tmp_path / "a.ts").write_text('import { B } from "./b";\nimport { C } from "@a/c";\n')
    (tmp_path / "b.ts").write_text("export const B = 1;\n")
    tsconfig = tmp_path / "tsconfig.json"
    tsconfig.write_text(json.dumps({"compilerOptions": {"paths": {"@a/*": [None]}}}))
    result = _invoke("scan", str(tmp_path), "--tsconfig", str(tsconfig))
    assert result.exit_code == EXIT_CLEAN
    assert "You have 1 edges between your files." in result.output
