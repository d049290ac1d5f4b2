#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for Quire builds.

Workspace layout produced by a build:
    WORKSPACE/
    ├── <relative/path/of/file/themes>   # mirrors the context directory
    └── themes/
        └── packages/
            └── <package-name>/          # full copy of each package theme

Logs default to ``.quire/logs`` under the current working directory.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


# ----- Configuration -----
CONFIG_FILENAME = "quire.config.yaml"
"""Default configuration file looked up in the working directory."""

# ----- Workspace -----
THEMES_DIR = Path("themes")
PACKAGES_DIR = THEMES_DIR / "packages"
"""Workspace-relative directory holding copied package themes."""

DEFAULT_TOC_OUTPUT = "index.html"
"""Output file name of the table of contents inside the workspace."""

# ----- Packages -----
MANIFEST_FILENAME = "package.json"
NODE_MODULES_DIR = "node_modules"

# ----- Logs -----
LOG_DIR = Path(".quire") / "logs"
