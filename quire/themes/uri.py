#!/usr/bin/env python3
"""
uri.py
-------------------
Themes referenced by an http(s) URL.

The stylesheet is linked by its URL in generated output. Nothing is
downloaded and nothing is written to the workspace.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import posixpath
from typing import TYPE_CHECKING, List, Mapping, Optional
from urllib.parse import urlsplit

# --- Local imports ---
from quire.themes.base import Theme, is_url

if TYPE_CHECKING:
    from quire.core.logging_manager import QuireLogger
    from quire.dataclasses.entry import ManuscriptEntry
    from quire.utils.scss import Transpiler


class UriTheme(Theme):
    """Remote stylesheet; ``location`` is the URL itself."""

    kind = "uri"

    def locate_theme_path(self, from_dir: str) -> List[str]:
        return [self.location]

    def copy_theme(
        self,
        entries: Optional[Mapping[str, "ManuscriptEntry"]] = None,
        transpile: Optional["Transpiler"] = None,
        logger: Optional["QuireLogger"] = None,
    ) -> bool:
        return False

    @classmethod
    def parse(cls, locator: str) -> Optional["UriTheme"]:
        """
        Create a UriTheme if ``locator`` is an http(s) URL.

        The name is the final path segment, e.g. ``theme.css`` for
        ``https://example.com/css/theme.css``.
        """
        if not is_url(locator):
            return None
        path = urlsplit(locator).path.rstrip("/")
        name = posixpath.basename(path) or posixpath.basename(locator.rstrip("/"))
        return cls(name, locator)
