"""
Themes package for Quire.

- Theme: base class shared by all variants
- UriTheme, FileTheme, PackageTheme: the three theme variants
- ThemeRegistry: location-deduplicated set of themes used in a build
- ThemeManager: per-document theme selection and materialization
"""

from quire.themes.base import Theme, is_url
from quire.themes.file import FileTheme
from quire.themes.manager import ThemeManager, parse_theme, parse_themes
from quire.themes.package import PackageTheme, ParsedStyle
from quire.themes.registry import ThemeRegistry
from quire.themes.uri import UriTheme

__all__ = [
    "Theme",
    "is_url",
    "UriTheme",
    "FileTheme",
    "PackageTheme",
    "ParsedStyle",
    "ThemeRegistry",
    "ThemeManager",
    "parse_theme",
    "parse_themes",
]
