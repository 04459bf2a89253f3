"""Tests for the file discovery layer."""

import re
from pathlib import Path

import pytest

from import_audit.models import ScanError
from import_audit.scanner import SourceScanner, discover_files

FIXTURES = Path(__file__).parent / "fixtures"
PROJECT = FIXTURES / "project"


def _touch(root: Path, *names: str) -> None:
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")


def test_discover_fixture_project():
    files = discover_files(PROJECT, r"\.ts$", r"\.spec\.ts$")
    names = sorted(p.name for p in files)

    assert names == [
        "app.module.ts",
        "constants.ts",
        "feature.module.ts",
        "logger.ts",
        "main.ts",
        "util.ts",
        "widget.ts",
    ]
    assert all(p.is_absolute() for p in files)


def test_spec_file_excluded(tmp_path):
    _touch(tmp_path, "widget.ts", "widget.spec.ts")
    files = discover_files(tmp_path, r"\.ts$", r"\.spec\.ts$")
    assert [p.name for p in files] == ["widget.ts"]


def test_exclude_pattern_does_not_apply_to_directories(tmp_path):
    _touch(tmp_path, "node_modules/lib/index.ts", "node_modules.ts")
    files = discover_files(tmp_path, r"\.ts$", r"node_modules")
    assert [p.name for p in files] == ["index.ts"]


def test_directory_files_listed_before_subdirectories(tmp_path):
    _touch(tmp_path, "a/deep.ts", "top.ts")
    files = discover_files(tmp_path, r"\.ts$")
    assert [p.name for p in files] == ["top.ts", "deep.ts"]


def test_no_exclude_pattern(tmp_path):
    _touch(tmp_path, "one.ts", "one.spec.ts", "readme.md")
    files = discover_files(tmp_path, r"\.ts$", None)
    assert sorted(p.name for p in files) == ["one.spec.ts", "one.ts"]


def test_compiled_patterns_accepted(tmp_path):
    _touch(tmp_path, "x.ts", "y.js")
    scanner = SourceScanner(re.compile(r"\.js$"), re.compile(r"^x"))
    assert [p.name for p in scanner.scan_directory(tmp_path)] == ["y.js"]


def test_missing_root_is_fatal(tmp_path):
    with pytest.raises(ScanError):
        discover_files(tmp_path / "missing", r"\.ts$")


def test_file_as_root_is_fatal(tmp_path):
    _touch(tmp_path, "single.ts")
    with pytest.raises(ScanError):
        discover_files(tmp_path / "single.ts", r"\.ts$")


def test_invalid_pattern_is_fatal(tmp_path):
    with pytest.raises(ScanError):
        discover_files(tmp_path, r"(unclosed")


def test_non_string_pattern_is_fatal(tmp_path):
    with pytest.raises(ScanError, match="Invalid file pattern"):
        discover_files(tmp_path, 5)


def test_discovery_is_repeatable():
    first = discover_files(PROJECT, r"\.ts$", r"\.spec\.ts$")
    second = discover_files(PROJECT, r"\.ts$", r"\.spec\.ts$")
    assert first == second
