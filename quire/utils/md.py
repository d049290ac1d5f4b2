#!/usr/bin/env python3
"""
md.py
-------------------
Markdown front-matter utilities.

Documents may carry their own theme in YAML front-matter:

    ---
    title: Chapter One
    theme: ./chapter.css
    ---

This module splits the front-matter from the body and parses it into a
plain dictionary. Turning the ``theme`` value into Theme objects is the
builder's job.
"""
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Dict, List

# --- Third party ---
import yaml

# --- Local imports ---
from quire.core.exceptions import EntryParseError


def split_frontmatter(content: str) -> tuple[str, List[str]]:
    """
    Split markdown content into YAML frontmatter and body.

    Args:
        content: Full markdown file content

    Returns:
        Tuple of (frontmatter_text, body_lines). frontmatter_text is empty
        when the document has no front-matter block.

    Examples:
        >>> fm, body = split_frontmatter("---\\ntitle: A\\n---\\n\\nBody text")
        >>> fm
        'title: A'
        >>> body
        ['Body text']
    """
    lines = content.splitlines()

    if not lines or lines[0].strip() != "---":
        return "", lines

    frontmatter_end = None
    for i, line in enumerate(lines[1:], 1):
        if line.strip() == "---":
            frontmatter_end = i
            break

    if frontmatter_end is None:
        return "", lines

    frontmatter_lines = lines[1:frontmatter_end]
    body_lines = lines[frontmatter_end + 1 :]

    while body_lines and body_lines[0].strip() == "":
        body_lines.pop(0)

    return "\n".join(frontmatter_lines), body_lines


def parse_frontmatter(content: str) -> Dict[str, Any]:
    """
    Parse the YAML front-matter of a markdown string.

    Returns:
        Front-matter mapping, or an empty dict if there is none

    Raises:
        EntryParseError: If the front-matter is not valid YAML or not a mapping
    """
    frontmatter, _ = split_frontmatter(content)
    if not frontmatter.strip():
        return {}
    try:
        data = yaml.safe_load(frontmatter)
    except yaml.YAMLError as e:
        raise EntryParseError(f"Invalid YAML front-matter: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise EntryParseError(
            f"Front-matter must be a mapping, got {type(data).__name__}"
        )
    return data


def read_metadata(path: Path) -> Dict[str, Any]:
    """
    Read the front-matter of a markdown file.

    Non-markdown inputs (e.g. plain HTML) have no front-matter and yield
    an empty dict.

    Raises:
        FileNotFoundError: If the file does not exist
        EntryParseError: If the front-matter is malformed
    """
    path = Path(path)
    if path.suffix.lower() not in (".md", ".markdown"):
        if not path.exists():
            raise FileNotFoundError(f"Document not found: {path}")
        return {}
    try:
        return parse_frontmatter(path.read_text(encoding="utf-8"))
    except EntryParseError as e:
        raise EntryParseError(f"{path}: {e}") from e
