"""
Quire
=====

Theme resolution and materialization for document builds.

Themes (stylesheets or styled packages) can be given in the config file,
on the command line, in a document's front-matter, or per config entry.
Quire decides which themes apply to each document, deduplicates them
across the build, and copies or transpiles them into the workspace.

Main Components:
    - themes: Theme variants, registry, and per-document selection
    - builders: Build driver tying config, documents, and themes together
    - core: Logging, config, validation, paths, exceptions
    - dataclasses: Document entries and metadata
    - utils: Filesystem, front-matter, package and Sass helpers
    - pipeline: Command-line interface

Primary Interfaces:
    - quire.pipeline.cli: ``quire`` command
    - quire.themes.ThemeManager: Theme selection and materialization
    - quire.builders.ThemeBuilder: Whole-build driver

Example Usage:
    >>> from quire import ThemeBuilder, load_config
    >>> builder = ThemeBuilder(config=load_config(Path("quire.config.yaml")))
    >>> stats = builder.build()
    >>> builder.stylesheets
"""

__version__ = "0.3.0"

from quire.builders.theme_builder import ThemeBuilder
from quire.core.config import load_config
from quire.themes.manager import ThemeManager

__all__ = [
    "ThemeBuilder",
    "ThemeManager",
    "load_config",
]
