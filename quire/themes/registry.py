#!/usr/bin/env python3
"""
registry.py
-------------------
Ordered, location-deduplicated set of the themes used by a build.

Themes are registered as documents are resolved. A theme whose location
is already registered is ignored, so the first instance parsed for a
location is the one that gets materialized. ``ThemeManager.register`` hands
documents that registered instance. Iteration follows insertion
order, which keeps stylesheet ordering in generated output stable.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Dict, Iterable, Iterator, List, Optional

# --- Local imports ---
from quire.themes.base import Theme


class ThemeRegistry:
    """
    Insertion-ordered set of themes keyed by ``location``.

    Only adding and reading are supported; themes are never removed
    during a build.
    """

    def __init__(self) -> None:
        self._themes: List[Theme] = []
        self._by_location: Dict[str, Theme] = {}

    def add_used_theme(self, theme: Optional[Theme]) -> bool:
        """
        Register ``theme`` unless its location is already present.

        Returns:
            True if the theme was added
        """
        if theme is None or theme.location in self._by_location:
            return False
        self._themes.append(theme)
        self._by_location[theme.location] = theme
        return True

    def add_themes(self, themes: Iterable[Theme]) -> None:
        for theme in themes:
            self.add_used_theme(theme)

    def get(self, location: str) -> Optional[Theme]:
        return self._by_location.get(location)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Theme):
            return item.location in self._by_location
        return item in self._by_location

    def __iter__(self) -> Iterator[Theme]:
        return iter(list(self._themes))

    def __len__(self) -> int:
        return len(self._themes)

    def __repr__(self) -> str:
        return f"ThemeRegistry({[t.location for t in self._themes]!r})"
