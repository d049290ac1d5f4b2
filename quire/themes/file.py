#!/usr/bin/env python3
"""
file.py
-------------------
Themes backed by a single local stylesheet file.

The file is copied into the workspace at the same path it has relative
to its context directory. Sass sources (``.scss``) are transpiled on the
way and land in the workspace with a ``.css`` suffix.

Parsing never fails: any locator that is neither a URL nor a package
becomes a file theme, whether or not the file exists. A missing file is
only noticed when the theme is copied.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

# --- Local imports ---
from quire.core.logging_manager import safe_logger
from quire.themes.base import Theme
from quire.utils.fs import copy_file, ensure_dir, write_text
from quire.utils.scss import is_sass, to_css_path, transpile_sass

if TYPE_CHECKING:
    from quire.core.logging_manager import QuireLogger
    from quire.dataclasses.entry import ManuscriptEntry
    from quire.utils.scss import Transpiler


class FileTheme(Theme):
    """
    Local CSS or Sass file.

    Attributes:
        destination: Absolute path of the copy inside the workspace
    """

    kind = "file"

    def __init__(self, name: str, location: str, destination: str) -> None:
        super().__init__(name, location)
        self.destination = destination

    def locate_theme_path(self, from_dir: str) -> List[str]:
        return [os.path.relpath(self.destination, from_dir)]

    def copy_theme(
        self,
        entries: Optional[Mapping[str, "ManuscriptEntry"]] = None,
        transpile: Optional["Transpiler"] = None,
        logger: Optional["QuireLogger"] = None,
    ) -> bool:
        """
        Copy (or transpile) the file into the workspace.

        Does nothing when the file already lives at its destination.
        For Sass sources the destination suffix is rewritten to ``.css``
        before writing.

        Raises:
            FileNotFoundError: If the source file does not exist
        """
        if self.location == self.destination:
            return False

        ensure_dir(os.path.dirname(self.destination))
        if is_sass(self.location):
            self.destination = to_css_path(self.destination)
            css = (transpile or transpile_sass)(self.location)
            write_text(self.destination, css)
            safe_logger(logger).log_debug(
                "Transpiled file theme",
                {"source": self.location, "destination": self.destination},
            )
        else:
            copy_file(self.location, self.destination)
            safe_logger(logger).log_debug(
                "Copied file theme",
                {"source": self.location, "destination": self.destination},
            )
        return True

    @classmethod
    def parse(
        cls,
        locator: str,
        context_dir: str,
        workspace_dir: str,
        vars: Optional[Dict[str, Any]] = None,
    ) -> "FileTheme":
        """
        Create a FileTheme for ``locator`` relative to ``context_dir``.

        ``vars`` is accepted for a uniform parser signature and ignored.
        """
        name = os.path.basename(locator)
        style_path = os.path.abspath(os.path.join(context_dir, locator))
        source_rel_path = os.path.relpath(style_path, context_dir)
        destination = os.path.abspath(os.path.join(workspace_dir, source_rel_path))
        return cls(name, style_path, destination)
