#!/usr/bin/env python3
"""
config.py
-------------------
Loading of ``quire.config.yaml``.

Example:

    theme: ./style.scss            # or a list of locators
    workspace: .quire/build        # defaults to the config directory
    entry:
      - intro.md
      - path: chapters/one.md
        title: Chapter One
        theme: my-theme-package
        vars:
          color: red
    toc:
      title: Contents
      theme: https://example.com/toc.css

Relative paths are resolved against the directory holding the config
file, which is also the context directory for theme locators.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Third party ---
import yaml

# --- Local imports ---
from quire.core.exceptions import ConfigError, ValidationError
from quire.core.paths import DEFAULT_TOC_OUTPUT
from quire.core.validators import DataValidator


@dataclass
class EntryConfig:
    """One item of the config's ``entry`` list."""

    path: str
    title: Optional[str] = None
    theme: List[str] = field(default_factory=list)
    vars: Dict[str, Any] = field(default_factory=dict)


@dataclass
class TocConfig:
    """Table of contents settings."""

    title: Optional[str] = None
    theme: List[str] = field(default_factory=list)
    output: str = DEFAULT_TOC_OUTPUT


@dataclass
class BuildConfig:
    """
    Validated build configuration.

    Attributes:
        context_dir: Directory of the config file; base for relative paths
        workspace_dir: Absolute build workspace
        theme: Top-level theme locators
        entries: Document entries in build order
        toc: Table of contents settings, None when disabled
    """

    context_dir: Path
    workspace_dir: Path
    theme: List[str] = field(default_factory=list)
    entries: List[EntryConfig] = field(default_factory=list)
    toc: Optional[TocConfig] = None


def _parse_entry(raw: Any) -> EntryConfig:
    if isinstance(raw, str):
        raw = {"path": raw}
    if not isinstance(raw, dict):
        raise ValidationError(
            f"Entry must be a path or a mapping, got {type(raw).__name__}"
        )
    DataValidator.validate_required_fields(raw, ["path"])
    if not isinstance(raw["path"], str):
        raise ValidationError("Field 'path' must be a string")
    return EntryConfig(
        path=raw["path"],
        title=DataValidator.normalize_string(raw.get("title")),
        theme=DataValidator.normalize_locators(raw.get("theme")),
        vars=DataValidator.normalize_vars(raw.get("vars")),
    )


def _parse_toc(raw: Any) -> Optional[TocConfig]:
    if raw is None:
        return None
    if isinstance(raw, dict):
        return TocConfig(
            title=DataValidator.normalize_string(raw.get("title")),
            theme=DataValidator.normalize_locators(raw.get("theme")),
            output=DataValidator.normalize_string(raw.get("output")) or DEFAULT_TOC_OUTPUT,
        )
    return TocConfig() if DataValidator.normalize_bool(raw) else None


def parse_config(data: Dict[str, Any], context_dir: Path) -> BuildConfig:
    """
    Build a BuildConfig from an already loaded mapping.

    Raises:
        ValidationError: If a field has the wrong shape
    """
    context_dir = Path(context_dir).resolve()

    raw_entries = data.get("entry") or []
    if not isinstance(raw_entries, list):
        raw_entries = [raw_entries]

    workspace = DataValidator.normalize_string(data.get("workspace"))
    workspace_dir = (context_dir / workspace).resolve() if workspace else context_dir

    return BuildConfig(
        context_dir=context_dir,
        workspace_dir=workspace_dir,
        theme=DataValidator.normalize_locators(data.get("theme")),
        entries=[_parse_entry(raw) for raw in raw_entries],
        toc=_parse_toc(data.get("toc")),
    )


def load_config(path: Path) -> BuildConfig:
    """
    Load and validate a YAML config file.

    Raises:
        ConfigError: If the file is missing, is not YAML, or is not a mapping
        ValidationError: If a field has the wrong shape
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config must be a mapping at top level, got {type(data).__name__}"
        )
    return parse_config(data, path.parent)
