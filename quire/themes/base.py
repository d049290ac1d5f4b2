#!/usr/bin/env python3
"""
base.py
-------------------
Base class shared by every theme variant.

A theme is identified by its ``location``: the absolute origin path or
the URI it was parsed from. Two theme objects with the same location are
the same theme as far as the registry is concerned.

Variants:
    UriTheme: Remote stylesheet, referenced by URL and never copied
    FileTheme: Local stylesheet file (CSS or Sass)
    PackageTheme: Directory with a package.json manifest

Entries that select a theme through their own ``theme`` field are
recorded in ``entries`` by key. The key is looked up in the manager's
entry index when the theme is materialized; the theme never holds the
entry object itself.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Mapping, Optional

if TYPE_CHECKING:
    from quire.core.logging_manager import QuireLogger
    from quire.dataclasses.entry import ManuscriptEntry
    from quire.utils.scss import Transpiler


URL_PATTERN = re.compile(r"^https?://")


def is_url(value: str) -> bool:
    """Check whether ``value`` is an http(s) URL."""
    return bool(URL_PATTERN.match(value))


class Theme(ABC):
    """
    Abstract theme.

    Attributes:
        name: Display identifier
        location: Absolute origin path or URI; identity key for deduplication
        entries: Keys of the entries that selected this theme directly
    """

    kind: str = ""

    def __init__(self, name: str, location: str) -> None:
        self.name = name
        self.location = location
        self.entries: List[str] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, location={self.location!r})"

    def add_entry(self, key: str) -> None:
        """Record that the entry identified by ``key`` selected this theme."""
        self.entries.append(key)

    @abstractmethod
    def locate_theme_path(self, from_dir: str) -> List[str]:
        """
        Stylesheet references for a document whose output lives in ``from_dir``.

        Returns:
            Relative paths for materialized themes, literal URLs for remote ones
        """

    @abstractmethod
    def copy_theme(
        self,
        entries: Optional[Mapping[str, "ManuscriptEntry"]] = None,
        transpile: Optional["Transpiler"] = None,
        logger: Optional["QuireLogger"] = None,
    ) -> bool:
        """
        Materialize the theme into the workspace.

        Args:
            entries: Entry index used to resolve ``self.entries``
            transpile: Sass transpiler (source path -> CSS text)
            logger: Optional logger

        Returns:
            True if anything was written to the workspace
        """
