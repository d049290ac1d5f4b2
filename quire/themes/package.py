#!/usr/bin/env python3
"""
package.py
-------------------
Themes distributed as packages (installed under node_modules or local).

A package theme is a directory with a ``package.json`` manifest. The
style file(s) to link are taken from the manifest, in priority order:

1. ``vivliostyle.theme.style``
2. ``style``
3. ``main``

A manifest that declares none of them is an error, not a fallback to
another theme kind. The whole package directory is copied into
``<workspace>/themes/packages/<name>``.

Entries that select a package theme and declare ``vars`` get their own
clone of the theme when it is materialized, so per-entry customization
never leaks into the shared object. The clone currently carries the same
style list as the original; ``vars`` are not substituted.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Union

# --- Local imports ---
from quire.core.exceptions import InvalidStyleFileError
from quire.core.logging_manager import safe_logger
from quire.core.paths import PACKAGES_DIR
from quire.themes.base import Theme
from quire.utils.fs import copy_tree_contents
from quire.utils.pkg import PackageResolver, read_manifest, resolve_pkg
from quire.utils.scss import to_css_path

if TYPE_CHECKING:
    from quire.core.logging_manager import QuireLogger
    from quire.dataclasses.entry import ManuscriptEntry
    from quire.utils.scss import Transpiler


@dataclass
class ParsedStyle:
    """Style declaration read from a package manifest."""

    name: str
    style: Union[str, List[str]]
    scripts: Optional[Any] = None


def _theme_section(manifest: Dict[str, Any]) -> Dict[str, Any]:
    vendor = manifest.get("vivliostyle")
    if not isinstance(vendor, dict):
        return {}
    theme = vendor.get("theme")
    return theme if isinstance(theme, dict) else {}


def _first_declared(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


class PackageTheme(Theme):
    """
    Package directory with a manifest.

    Attributes:
        destination: Workspace directory the package is copied into
        styles: Style files relative to the package root (never empty)
        scripts: Theme scripts declared in the manifest, carried as metadata
    """

    kind = "package"

    def __init__(
        self,
        name: str,
        location: str,
        destination: str,
        style: Union[str, List[str]],
        scripts: Optional[Any] = None,
    ) -> None:
        super().__init__(name, location)
        self.destination = destination
        self.styles: List[str] = list(style) if isinstance(style, (list, tuple)) else [style]
        self.scripts = scripts

    def locate_theme_path(self, from_dir: str) -> List[str]:
        return [
            os.path.relpath(os.path.join(self.destination, to_css_path(style)), from_dir)
            for style in self.styles
        ]

    def clone_for_entry(self, key: str) -> "PackageTheme":
        """Copy of this theme scoped to the single entry ``key``."""
        clone = PackageTheme(
            self.name, self.location, self.destination, list(self.styles), self.scripts
        )
        clone.entries = [key]
        return clone

    def copy_theme(
        self,
        entries: Optional[Mapping[str, "ManuscriptEntry"]] = None,
        transpile: Optional["Transpiler"] = None,
        logger: Optional["QuireLogger"] = None,
    ) -> bool:
        """
        Copy the package into the workspace and split off per-entry clones.

        Every referencing entry with non-empty ``vars`` gets a clone that
        replaces this theme in the entry's own theme list.

        Raises:
            FileNotFoundError: If the package root does not exist
        """
        copy_tree_contents(self.location, self.destination)
        safe_logger(logger).log_debug(
            "Copied package theme",
            {"package": self.name, "source": self.location, "destination": self.destination},
        )

        index = entries or {}
        for key in self.entries:
            entry = index.get(key)
            if entry is None or not entry.vars:
                continue
            clone = self.clone_for_entry(key)
            if entry.replace_theme(self, clone):
                safe_logger(logger).log_debug(
                    "Cloned package theme for entry",
                    {"package": self.name, "entry": key, "vars": entry.vars},
                )
        return True

    @classmethod
    def parse(
        cls,
        locator: str,
        context_dir: str,
        workspace_dir: str,
        vars: Optional[Dict[str, Any]] = None,
        resolve_package: PackageResolver = resolve_pkg,
    ) -> Optional["PackageTheme"]:
        """
        Create a PackageTheme if ``locator`` names a package.

        Returns:
            PackageTheme, or None if no manifest was found

        Raises:
            InvalidStyleFileError: If the manifest declares no style
        """
        if not locator:
            return None
        pkg_root = resolve_package(locator, context_dir)
        if pkg_root is not None and pkg_root.endswith(".css"):
            return None

        location = pkg_root or os.path.abspath(os.path.join(context_dir, locator))
        style = cls.parse_style_locator(location, locator)
        if style is None:
            return None

        destination = os.path.abspath(
            os.path.join(workspace_dir, str(PACKAGES_DIR), style.name)
        )
        return cls(style.name, location, destination, style.style, style.scripts)

    @staticmethod
    def parse_style_locator(pkg_root: str, locator: str) -> Optional[ParsedStyle]:
        """
        Read the style declaration from the manifest in ``pkg_root``.

        Returns:
            ParsedStyle, or None if ``pkg_root`` has no manifest

        Raises:
            InvalidStyleFileError: If none of the style fields is declared
        """
        manifest = read_manifest(pkg_root)
        if manifest is None:
            return None

        theme_section = _theme_section(manifest)
        maybe_style = _first_declared(
            theme_section.get("style"), manifest.get("style"), manifest.get("main")
        )
        if not maybe_style:
            raise InvalidStyleFileError(
                f"invalid style file: {maybe_style} while parsing {locator}",
                locator=locator,
                package_root=pkg_root,
            )

        name = manifest.get("name") or os.path.basename(os.path.normpath(pkg_root))
        return ParsedStyle(name=name, style=maybe_style, scripts=theme_section.get("scripts"))
