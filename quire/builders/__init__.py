"""
Builders package for Quire.

- BaseBuilder: logger-aware base class
- ThemeBuilder: resolves every document's themes and materializes them
"""

from quire.builders.base import BaseBuilder
from quire.builders.theme_builder import ThemeBuilder

__all__ = ["BaseBuilder", "ThemeBuilder"]
