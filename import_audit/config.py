"""Scan configuration and tsconfig alias loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from import_audit.models import ScanConfig, ScanError

logger = logging.getLogger(__name__)

# Config file key -> ScanConfig field
_CONFIG_KEYS = {
    "projectSourceDir": "source_dir",
    "source_dir": "source_dir",
    "includePattern": "include_pattern",
    "include_pattern": "include_pattern",
    "excludePattern": "exclude_pattern",
    "exclude_pattern": "exclude_pattern",
    "tsConfigPath": "tsconfig_path",
    "tsconfig_path": "tsconfig_path",
    "ignoreNoImports": "ignore_no_imports",
    "ignore_no_imports": "ignore_no_imports",
    "ignoreNodeModules": "ignore_node_modules",
    "ignore_node_modules": "ignore_node_modules",
}

_PATH_FIELDS = ("source_dir", "tsconfig_path")

_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "source_dir": (str, Path),
    "include_pattern": (str,),
    "exclude_pattern": (str,),
    "tsconfig_path": (str, Path),
    "ignore_no_imports": (bool,),
    "ignore_node_modules": (bool,),
}


def load_scan_config(filepath: Path) -> ScanConfig:
    """Load a ScanConfig from a JSON or YAML file.

    Relative paths in the file are taken relative to the file's directory.
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            if filepath.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ScanError(f"Cannot read config file {filepath}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ScanError(f"Config file {filepath} must contain a mapping")

    return config_from_dict(data, base_dir=filepath.parent)


def config_from_dict(data: dict[str, Any], base_dir: Path | None = None) -> ScanConfig:
    values: dict[str, Any] = {}
    for key, value in data.items():
        field_name = _CONFIG_KEYS.get(key)
        if field_name is None:
            logger.debug("ignoring unknown config key %r", key)
            continue
        values[field_name] = value

    for field_name, value in values.items():
        expected = _FIELD_TYPES[field_name]
        if value is not None and not isinstance(value, expected):
            raise ScanError(
                f"Config value for {field_name!r} must be {expected[0].__name__}, got {type(value).__name__}"
            )

    for field_name in _PATH_FIELDS:
        if values.get(field_name) is None:
            continue
        path = Path(values[field_name])
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        values[field_name] = path

    return ScanConfig(**values)


def load_alias_mapping(tsconfig_path: Path | str) -> dict[str, str]:
    """Build a prefix -> replacement mapping from ``compilerOptions.paths``.

    ``"@app/*": ["src/app/*"]`` becomes ``{"@app/": "src/app/"}``. A missing
    or malformed file only produces a warning and an empty mapping.
    """
    mapping: dict[str, str] = {}
    try:
        with open(tsconfig_path, "r", encoding="utf-8") as f:
            tsconfig = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("tsconfig failed to load: %s", e)
        return mapping

    compiler_options = tsconfig.get("compilerOptions") if isinstance(tsconfig, dict) else None
    if compiler_options is None:
        return mapping
    if not isinstance(compiler_options, dict):
        logger.warning("tsconfig compilerOptions is not an object, ignoring it")
        return mapping

    paths = compiler_options.get("paths") or {}
    if not isinstance(paths, dict):
        logger.warning("tsconfig compilerOptions.paths is not an object, ignoring it")
        return mapping

    for alias, replacements in paths.items():
        if not replacements:
            continue
        if isinstance(replacements, str):
            replacements = [replacements]
        if not isinstance(replacements, list) or not isinstance(replacements[0], str):
            logger.warning("tsconfig path alias %r has no string target, skipping it", alias)
            continue
        pattern = _strip_wildcard(alias)
        mapping[pattern] = _strip_wildcard(replacements[0])

    logger.debug("loaded %d alias(es) from %s", len(mapping), tsconfig_path)
    return mapping


def _strip_wildcard(value: str) -> str:
    return value[:-1] if value.endswith("*") else value
