#!/usr/bin/env python3
"""
metadata.py
-------------------
Per-document metadata relevant to theming.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from quire.themes.base import Theme


@dataclass
class DocumentMetadata:
    """
    Title and themes declared in a document's front-matter.

    Attributes:
        title: Document title, if declared
        theme: Parsed themes, empty when the document declares none
    """

    title: Optional[str] = None
    theme: List["Theme"] = field(default_factory=list)

    @property
    def has_theme(self) -> bool:
        return len(self.theme) != 0
