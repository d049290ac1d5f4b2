#!/usr/bin/env python3
"""
theme_builder.py
-------------------
Resolve and materialize the themes of a whole build.

Drives a ThemeManager through one build:

1. Register the config's and the command line's root themes
2. Resolve every config entry (front-matter is read for metadata themes)
3. Resolve the table of contents, if enabled
4. Or, for a standalone input file, resolve that file alone
5. Copy every registered theme into the workspace
6. Compute each document's stylesheet list

All resolution happens before any file is copied. The first failure
aborts the build.

Usage:
    builder = ThemeBuilder(config=load_config(path), cli_themes=["extra.css"])
    stats = builder.build()
    for key, sheets in builder.stylesheets.items():
        print(key, sheets)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Dict, List, Optional, Sequence

# --- Local imports ---
from quire.builders.base import BaseBuilder
from quire.core.cli import ThemeBuildStats
from quire.core.config import BuildConfig, EntryConfig, TocConfig
from quire.core.exceptions import QuireError, ThemeBuildError, ValidationError
from quire.core.logging_manager import QuireLogger
from quire.dataclasses.entry import ManuscriptEntry
from quire.dataclasses.metadata import DocumentMetadata
from quire.themes.manager import ThemeManager
from quire.utils.md import read_metadata
from quire.utils.pkg import PackageResolver
from quire.utils.scss import Transpiler


OUTPUT_SUFFIX = ".html"


class ThemeBuilder(BaseBuilder):
    """
    Theme build driver.

    Either ``config`` or ``input_file`` must be given. With both, the input
    file is built standalone and the config only contributes root themes
    and the workspace.

    Attributes:
        config: Loaded build configuration
        input_file: Standalone document to build instead of config entries
        workspace_dir: Build workspace
        cli_themes: Locators given on the command line
        cwd: Directory command-line locators are relative to
        manager: ThemeManager used for the build
        entries: Resolved documents in build order
        stylesheets: Stylesheet references per document key, after build()
    """

    def __init__(
        self,
        config: Optional[BuildConfig] = None,
        input_file: Optional[Path] = None,
        workspace_dir: Optional[Path] = None,
        cli_themes: Optional[Sequence[str]] = None,
        cwd: Optional[Path] = None,
        transpile: Optional[Transpiler] = None,
        resolve_package: Optional[PackageResolver] = None,
        logger: Optional[QuireLogger] = None,
    ) -> None:
        super().__init__(logger)
        if config is None and input_file is None:
            raise ThemeBuildError("Either a config or an input file is required")

        self.config = config
        self.input_file = Path(input_file).resolve() if input_file else None
        self.workspace_dir = self._select_workspace(workspace_dir)
        self.cli_themes: List[str] = list(cli_themes or [])
        self.cwd = Path(cwd) if cwd else Path.cwd()
        self.manager = ThemeManager(
            self.workspace_dir,
            transpile=transpile,
            resolve_package=resolve_package,
            logger=logger,
        )
        self.entries: List[ManuscriptEntry] = []
        self.stylesheets: Dict[str, List[str]] = {}

    def _select_workspace(self, workspace_dir: Optional[Path]) -> Path:
        if workspace_dir is not None:
            return Path(workspace_dir).resolve()
        if self.config is not None:
            return self.config.workspace_dir
        if self.input_file is not None:
            return self.input_file.parent
        raise ThemeBuildError("Either a config or an input file is required")

    # ----- Resolution -----
    def _target_for(self, source: Path, base_dir: Path) -> Path:
        try:
            relative = source.relative_to(base_dir)
        except ValueError:
            relative = Path(source.name)
        return (self.workspace_dir / relative).with_suffix(OUTPUT_SUFFIX)

    def _read_metadata(self, source: Path) -> DocumentMetadata:
        """Front-matter title and themes, themes relative to the document."""
        data = read_metadata(source)
        themes = self.manager.parse_themes(data.get("theme"), source.parent)
        title = data.get("title")
        return DocumentMetadata(title=str(title) if title else None, theme=themes)

    def _resolve_entry(self, config: BuildConfig, entry_config: EntryConfig) -> ManuscriptEntry:
        source = (config.context_dir / entry_config.path).resolve()
        metadata = self._read_metadata(source)
        entry = ManuscriptEntry(
            target=self._target_for(source, config.context_dir),
            source=source,
            title=entry_config.title or metadata.title,
            vars=dict(entry_config.vars),
        )
        entry.theme = self.manager.resolve_entry_theme(
            metadata, entry_config.theme, config.context_dir, entry
        )
        self._log_debug(
            "Resolved entry themes",
            {"entry": entry.key, "themes": [t.location for t in entry.theme]},
        )
        return entry

    def _resolve_toc(self, config: BuildConfig, toc_config: TocConfig) -> ManuscriptEntry:
        entry = ManuscriptEntry(
            target=self.workspace_dir / toc_config.output,
            title=toc_config.title,
        )
        entry.theme = self.manager.toc_theme(toc_config.theme, config.context_dir)
        return entry

    def _resolve_single_input(self, input_file: Path) -> ManuscriptEntry:
        metadata = self._read_metadata(input_file)
        entry = ManuscriptEntry(
            target=self._target_for(input_file, input_file.parent),
            source=input_file,
            title=metadata.title,
        )
        entry.theme = self.manager.single_input_theme(metadata)
        return entry

    def resolve(self) -> List[ManuscriptEntry]:
        """Select the themes of every document and register them."""
        if self.config is not None:
            self.manager.set_config_theme(self.config.theme, self.config.context_dir)
        if self.cli_themes:
            self.manager.set_cli_theme(self.cli_themes, self.cwd)

        if self.input_file is not None:
            self.entries = [self._resolve_single_input(self.input_file)]
        elif self.config is not None:
            self.entries = [self._resolve_entry(self.config, e) for e in self.config.entries]
            if self.config.toc is not None:
                self.entries.append(self._resolve_toc(self.config, self.config.toc))
        self._check_targets()

        for entry in self.entries:
            if not entry.theme:
                self._log_warning("No theme selected for document", {"entry": entry.key})
        self._log_info(
            "Resolved document themes",
            {"documents": len(self.entries), "themes": len(self.manager.registry)},
        )
        return self.entries

    def _check_targets(self) -> None:
        """
        Reject two documents writing to the same output path.

        Raises:
            ValidationError: If a target is shared, e.g. an ``index.md``
                entry and the default table of contents
        """
        seen: Dict[str, ManuscriptEntry] = {}
        for entry in self.entries:
            other = seen.get(entry.key)
            if other is not None:
                raise ValidationError(
                    f"Output path collision: {entry.target} is produced by both "
                    f"{other.source or 'the table of contents'} and "
                    f"{entry.source or 'the table of contents'}"
                )
            seen[entry.key] = entry

    # ----- Build -----
    def _count_clones(self, before: Dict[str, list]) -> int:
        clones = 0
        for key, themes in before.items():
            after = self.manager.entries[key].theme
            clones += sum(1 for old, new in zip(themes, after) if old is not new)
        return clones

    def build(self) -> ThemeBuildStats:
        """
        Resolve, materialize, and compute stylesheet lists.

        Returns:
            ThemeBuildStats for the build

        Raises:
            ThemeBuildError: If a theme cannot be resolved or copied
        """
        stats = ThemeBuildStats()
        self._log_operation(
            "theme_build_start",
            {
                "workspace": str(self.workspace_dir),
                "input": str(self.input_file) if self.input_file else None,
                "cli_themes": self.cli_themes,
            },
        )

        try:
            self.resolve()
            stats.entries_resolved = len(self.entries)
            stats.themes_registered = len(self.manager.registry)

            before = {key: list(e.theme) for key, e in self.manager.entries.items()}
            stats.themes_materialized = self.manager.copy_themes()
            stats.themes_cloned = self._count_clones(before)

            self.stylesheets = {e.key: e.stylesheets() for e in self.entries}
        except QuireError as e:
            stats.errors += 1
            self._log_error(e, {"operation": "theme_build"})
            if isinstance(e, ThemeBuildError):
                raise
            raise ThemeBuildError(f"Theme build failed: {e}") from e
        except (OSError, ValueError) as e:
            stats.errors += 1
            self._log_error(e, {"operation": "theme_build"})
            raise ThemeBuildError(f"Failed to materialize themes: {e}") from e

        self._log_operation("theme_build_complete", {"stats": stats.summary()})
        return stats
