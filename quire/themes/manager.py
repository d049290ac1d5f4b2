#!/usr/bin/env python3
"""
manager.py
-------------------
Theme parsing and per-document theme selection.

There are four sources of themes, and each document gets its themes from
exactly one of them. If more than one is given, the order of priority is:

    1. the entry's own ``theme`` field in the config
    2. the ``theme`` field in the document's front-matter
    3. ``--theme`` on the command line
    4. the top-level ``theme`` field in the config

Sources are never merged: the first non-empty one wins. Whatever list is
selected is registered in the manager's ThemeRegistry; once every document
is resolved, ``copy_themes`` materializes the registry into the workspace.

Locators are parsed in a fixed order, first match wins:

    URL (http/https) -> package (manifest found) -> file (always matches)

Usage:
    manager = ThemeManager(workspace_dir)
    manager.set_config_theme(["./style.scss"], context_dir)
    themes = manager.resolve_entry_theme(metadata, entry_config, context_dir, entry)
    manager.copy_themes()
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from typing import Any, Dict, List, Optional, Sequence, Union

# --- Local imports ---
from quire.core.logging_manager import QuireLogger, safe_logger
from quire.dataclasses.entry import ManuscriptEntry
from quire.dataclasses.metadata import DocumentMetadata
from quire.themes.base import Theme
from quire.themes.file import FileTheme
from quire.themes.package import PackageTheme
from quire.themes.registry import ThemeRegistry
from quire.themes.uri import UriTheme
from quire.utils.pkg import PackageResolver, resolve_pkg
from quire.utils.scss import Transpiler, transpile_sass


Locators = Union[str, Sequence[str], None]


def parse_theme(
    locator: Optional[str],
    context_dir: str,
    workspace_dir: str,
    vars: Optional[Dict[str, Any]] = None,
    resolve_package: PackageResolver = resolve_pkg,
) -> Optional[Theme]:
    """
    Parse a single locator into a theme.

    Args:
        locator: URL, package reference or file path
        context_dir: Directory relative locators are resolved against
        workspace_dir: Build workspace the theme will be copied into
        vars: Style-override variables of the selecting entry
        resolve_package: Package root resolver

    Returns:
        The parsed theme, or None for an empty locator

    Raises:
        InvalidStyleFileError: If the locator is a package without a style
    """
    if not isinstance(locator, str) or locator == "":
        return None

    return (
        UriTheme.parse(locator)
        or PackageTheme.parse(locator, context_dir, workspace_dir, vars, resolve_package)
        or FileTheme.parse(locator, context_dir, workspace_dir, vars)
    )


def parse_themes(
    locators: Locators,
    context_dir: str,
    workspace_dir: str,
    vars: Optional[Dict[str, Any]] = None,
    entry: Optional[ManuscriptEntry] = None,
    resolve_package: PackageResolver = resolve_pkg,
) -> List[Theme]:
    """
    Parse one locator or a list of locators.

    Empty locators are dropped. When ``entry`` is given, every parsed
    theme records the entry's key.
    """
    if locators is None:
        return []
    if isinstance(locators, str):
        locators = [locators]

    themes: List[Theme] = []
    for locator in locators:
        theme = parse_theme(locator, context_dir, workspace_dir, vars, resolve_package)
        if theme is None:
            continue
        if entry is not None:
            theme.add_entry(entry.key)
        themes.append(theme)
    return themes


class ThemeManager:
    """
    Selects each document's themes and tracks every theme used in a build.

    Attributes:
        workspace_dir: Absolute build workspace
        registry: Every theme selected so far, deduplicated by location
        entries: Index of entries that selected a theme directly, by key
        transpile: Sass transpiler used when copying ``.scss`` themes
        resolve_package: Package root resolver used when parsing
        logger: Optional logger
    """

    def __init__(
        self,
        workspace_dir: Union[str, os.PathLike],
        transpile: Optional[Transpiler] = None,
        resolve_package: Optional[PackageResolver] = None,
        logger: Optional[QuireLogger] = None,
    ) -> None:
        self.workspace_dir = os.path.abspath(workspace_dir)
        self.registry = ThemeRegistry()
        self.entries: Dict[str, ManuscriptEntry] = {}
        self.transpile: Transpiler = transpile or transpile_sass
        self.resolve_package: PackageResolver = resolve_package or resolve_pkg
        self.logger = logger
        self._cli_themes: List[Theme] = []
        self._config_themes: List[Theme] = []

    # ----- Parsing -----
    def parse_themes(
        self,
        locators: Locators,
        context_dir: Union[str, os.PathLike],
        vars: Optional[Dict[str, Any]] = None,
        entry: Optional[ManuscriptEntry] = None,
    ) -> List[Theme]:
        """Parse locators against this manager's workspace and resolver."""
        themes = parse_themes(
            locators,
            os.path.abspath(context_dir),
            self.workspace_dir,
            vars,
            entry,
            self.resolve_package,
        )
        for theme in themes:
            safe_logger(self.logger).log_debug(
                "Parsed theme",
                {"kind": theme.kind, "name": theme.name, "location": theme.location},
            )
        return themes

    # ----- Root themes -----
    @property
    def cli_themes(self) -> List[Theme]:
        return list(self._cli_themes)

    @property
    def config_themes(self) -> List[Theme]:
        return list(self._config_themes)

    def set_config_theme(
        self, locators: Locators, context_dir: Union[str, os.PathLike]
    ) -> List[Theme]:
        """Add themes from the config's top-level ``theme`` field."""
        themes = self.parse_themes(locators, context_dir)
        self._config_themes.extend(themes)
        return themes

    def set_cli_theme(
        self, locators: Locators, cwd: Optional[Union[str, os.PathLike]] = None
    ) -> List[Theme]:
        """
        Add themes given with ``--theme``.

        Resolved against the working directory; ``vars`` cannot be given
        on the command line.
        """
        themes = self.parse_themes(locators, cwd or os.getcwd())
        self._cli_themes.extend(themes)
        return themes

    def register(self, themes: Sequence[Theme]) -> List[Theme]:
        """
        Register ``themes`` and return the registered instance for each.

        A theme whose location is already registered is replaced by the
        registered object, so every document links the instance that gets
        materialized. Entry back-references of a replaced package theme
        are moved onto the registered one.
        """
        registered: List[Theme] = []
        for theme in themes:
            self.registry.add_used_theme(theme)
            canonical = self.registry.get(theme.location) or theme
            if canonical is not theme:
                for key in theme.entries:
                    if key not in canonical.entries:
                        canonical.add_entry(key)
            registered.append(canonical)
        return registered

    def root_theme(self) -> List[Theme]:
        """CLI themes if any, else config themes, else nothing."""
        if self._cli_themes:
            themes = self._cli_themes
        elif self._config_themes:
            themes = self._config_themes
        else:
            themes = []
        return self.register(themes)

    # ----- Per-document selection -----
    def resolve_entry_theme(
        self,
        metadata: DocumentMetadata,
        entry_theme: Locators,
        context_dir: Union[str, os.PathLike],
        manuscript_entry: ManuscriptEntry,
    ) -> List[Theme]:
        """
        Themes for a config entry.

        Args:
            metadata: Front-matter metadata of the entry's document
            entry_theme: The entry's own ``theme`` field
            context_dir: Directory the entry's locators are relative to
            manuscript_entry: The entry; its ``vars`` are applied and its
                key is recorded on themes it selects directly

        Returns:
            Entry themes, else metadata themes, else the root theme
        """
        entry_themes = self.parse_themes(
            entry_theme, context_dir, manuscript_entry.vars, manuscript_entry
        )
        if entry_themes:
            self.entries[manuscript_entry.key] = manuscript_entry
            themes = entry_themes
        elif metadata.has_theme:
            themes = list(metadata.theme)
        else:
            themes = self.root_theme()
        return self.register(themes)

    def toc_theme(
        self,
        entry_theme: Locators,
        context_dir: Union[str, os.PathLike],
    ) -> List[Theme]:
        """Themes for the table of contents; front-matter is not consulted."""
        entry_themes = self.parse_themes(entry_theme, context_dir)
        themes = entry_themes if entry_themes else self.root_theme()
        return self.register(themes)

    def single_input_theme(self, metadata: DocumentMetadata) -> List[Theme]:
        """Themes for a standalone input file, which has no config entry."""
        themes = list(metadata.theme) if metadata.has_theme else self.root_theme()
        return self.register(themes)

    # ----- Materialization -----
    def copy_themes(self) -> int:
        """
        Copy every registered theme into the workspace, in registration order.

        Returns:
            Number of themes that wrote to the workspace
        """
        copied = 0
        for theme in self.registry:
            if theme.copy_theme(self.entries, self.transpile, self.logger):
                copied += 1
                safe_logger(self.logger).log_operation(
                    "copy_theme",
                    {"kind": theme.kind, "name": theme.name, "location": theme.location},
                )
        return copied
