"""
Utilities package for Quire.

- fs: Filesystem primitives used during materialization
- md: Markdown front-matter parsing
- pkg: Package root resolution and manifest reading
- scss: Sass transpilation

Import commonly-used utilities directly from this package:
    from quire.utils import split_frontmatter, resolve_pkg
"""

from .fs import copy_file, copy_tree_contents, ensure_dir, write_text
from .md import parse_frontmatter, read_metadata, split_frontmatter
from .pkg import read_manifest, resolve_pkg

__all__ = [
    "copy_file",
    "copy_tree_contents",
    "ensure_dir",
    "write_text",
    "parse_frontmatter",
    "read_metadata",
    "split_frontmatter",
    "read_manifest",
    "resolve_pkg",
]
