#!/usr/bin/env python3
"""
pkg.py
-------------------
Package root resolution and manifest reading.

A package theme is a directory with a ``package.json`` manifest. Locators
are resolved the way Node resolves a package's manifest:

- path-like locators (``./theme``, ``../theme``, ``/abs/theme``) point at
  the package directory relative to the context directory;
- bare names (``my-theme``, ``@scope/theme``) are looked up in
  ``node_modules`` of the context directory and each of its ancestors.

Functions:
    resolve_pkg: Locator + base directory -> package root or None
    read_manifest: Load a package.json as a dictionary, or None if absent
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional

# --- Local imports ---
from quire.core.paths import MANIFEST_FILENAME, NODE_MODULES_DIR


PackageResolver = Callable[[str, str], Optional[str]]
"""Signature of a package resolver: (locator, context_dir) -> package root."""


def _is_path_like(locator: str) -> bool:
    return (
        locator.startswith(("./", "../", ".\\", "..\\"))
        or locator in (".", "..")
        or os.path.isabs(locator)
    )


def resolve_pkg(locator: str, context_dir: str) -> Optional[str]:
    """
    Resolve ``locator`` to an installed or local package root.

    Args:
        locator: Package name or path
        context_dir: Directory the lookup starts from

    Returns:
        Absolute package root directory, or None if no manifest is found
    """
    if not locator:
        return None

    base = Path(context_dir).resolve()
    if _is_path_like(locator):
        candidate = (base / locator).resolve()
        if (candidate / MANIFEST_FILENAME).is_file():
            return str(candidate)
        return None

    for directory in (base, *base.parents):
        candidate = directory / NODE_MODULES_DIR / locator
        if (candidate / MANIFEST_FILENAME).is_file():
            return str(candidate.resolve())
    return None


def read_manifest(package_root: str | Path) -> Optional[Dict[str, Any]]:
    """
    Load ``package.json`` from a package root.

    Returns:
        Parsed manifest, or None if the directory has no manifest

    Raises:
        json.JSONDecodeError: If the manifest exists but is not valid JSON
    """
    manifest_path = Path(package_root) / MANIFEST_FILENAME
    if not manifest_path.is_file():
        return None
    with open(manifest_path, "r", encoding="utf-8") as f:
        return json.load(f)
