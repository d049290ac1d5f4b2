#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem primitives used when materializing themes.

Functions:
    ensure_dir: Create a directory (and parents) if missing
    copy_file: Copy a single file, creating the destination's parent
    copy_tree_contents: Copy a directory's visible contents into another
    write_text: Write text to a file, creating the parent directory

None of these catch errors: a missing source or a permission problem
surfaces to the caller as the original OSError.

Usage:
    from quire.utils.fs import copy_tree_contents, ensure_dir

    ensure_dir(workspace / "themes" / "packages" / "my-theme")
    copy_tree_contents(package_root, workspace / "themes" / "packages" / "my-theme")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import shutil
from pathlib import Path


def ensure_dir(directory: str | Path) -> Path:
    """Create ``directory`` and its parents if they do not exist."""
    path = Path(directory)
    path.mkdir(parents=True, exist_ok=True)
    return path


def copy_file(source: str | Path, destination: str | Path) -> Path:
    """
    Copy a file verbatim.

    Args:
        source: File to copy
        destination: Target file path

    Returns:
        The destination path

    Raises:
        FileNotFoundError: If source does not exist or is not a regular file.
    """
    src = Path(source)
    if not src.is_file():
        raise FileNotFoundError(f"File not found or not a regular file: {src}")
    dst = Path(destination)
    ensure_dir(dst.parent)
    shutil.copyfile(src, dst)
    return dst


def copy_tree_contents(source: str | Path, destination: str | Path) -> Path:
    """
    Recursively copy the contents of ``source`` into ``destination``.

    Hidden entries (names starting with a dot) at any level are skipped.
    Existing files in ``destination`` are overwritten, existing
    directories are merged.

    Raises:
        FileNotFoundError: If source is not a directory.
    """
    src = Path(source)
    if not src.is_dir():
        raise FileNotFoundError(f"Directory not found: {src}")
    dst = ensure_dir(destination)
    # Dot entries are skipped at every depth, not only at the package root
    shutil.copytree(src, dst, ignore=shutil.ignore_patterns(".*"), dirs_exist_ok=True)
    return dst


def write_text(path: str | Path, content: str) -> Path:
    """Write ``content`` to ``path`` as UTF-8, creating the parent directory."""
    target = Path(path)
    ensure_dir(target.parent)
    target.write_text(content, encoding="utf-8")
    return target

