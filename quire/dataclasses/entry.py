#!/usr/bin/env python3
"""
entry.py
-------------------
Document units of a build.

A ManuscriptEntry is one output document: a Markdown chapter, a
standalone input file, or the generated table of contents. Each entry
owns its resolved theme list. Themes selected through the entry's own
``theme`` field record the entry's ``key`` so the materializer can find
the entry again when it needs to split off a per-entry theme clone.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from quire.themes.base import Theme


@dataclass
class ManuscriptEntry:
    """
    One document of a build.

    Attributes:
        target: Absolute output path inside the workspace
        source: Absolute source path (None for the table of contents)
        title: Document title from config or front-matter
        vars: Style-override variables declared for this entry
        theme: Resolved theme list, in stylesheet link order
    """

    target: Path
    source: Optional[Path] = None
    title: Optional[str] = None
    vars: Dict[str, Any] = field(default_factory=dict)
    theme: List["Theme"] = field(default_factory=list)

    @property
    def key(self) -> str:
        """Identifier used by themes to refer back to this entry."""
        return str(self.target)

    @property
    def output_dir(self) -> Path:
        return self.target.parent

    def replace_theme(self, original: "Theme", replacement: "Theme") -> bool:
        """
        Swap ``original`` for ``replacement`` in this entry's theme list.

        The list is copied first so other holders of the old list are not
        affected. Matching is by identity, not by location.

        Returns:
            True if ``original`` was found and replaced
        """
        themes = list(self.theme)
        for i, theme in enumerate(themes):
            if theme is original:
                themes[i] = replacement
                self.theme = themes
                return True
        return False

    def stylesheets(self) -> List[str]:
        """Stylesheet references relative to the entry's output directory."""
        paths: List[str] = []
        for theme in self.theme:
            paths.extend(theme.locate_theme_path(str(self.output_dir)))
        return paths
