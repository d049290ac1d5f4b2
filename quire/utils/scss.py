#!/usr/bin/env python3
"""
scss.py
----------------
Sass to CSS transpilation.

Wraps libsass so the theme layer only sees a pure function from a source
path to CSS text. Any compile error propagates unchanged.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Callable

# --- Third party ---
import sass


Transpiler = Callable[[str], str]
"""Signature of a transpiler: source path -> CSS text."""

SASS_SUFFIX = ".scss"
CSS_SUFFIX = ".css"


def transpile_sass(source: str | Path) -> str:
    """
    Compile a ``.scss`` file to CSS.

    Imports are resolved relative to the source file's directory.

    Raises:
        sass.CompileError: If the source cannot be compiled
    """
    path = Path(source)
    return sass.compile(
        filename=str(path),
        include_paths=[str(path.parent)],
        output_style="expanded",
    )


def is_sass(path: str) -> bool:
    return path.endswith(SASS_SUFFIX)


def to_css_path(path: str) -> str:
    """Rewrite a trailing ``.scss`` suffix to ``.css``."""
    if is_sass(path):
        return path[: -len(SASS_SUFFIX)] + CSS_SUFFIX
    return path
