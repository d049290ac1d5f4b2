"""
test_theme_registry.py
----------------------
Unit tests for quire.themes.registry.ThemeRegistry.
"""
from quire.themes.file import FileTheme
from quire.themes.registry import ThemeRegistry
from quire.themes.uri import UriTheme


def _file_theme(location: str) -> FileTheme:
    return FileTheme(location.rsplit("/", 1)[-1], location, "/ws" + location)


class TestThemeRegistry:
    """Test location-keyed deduplication and ordering."""

    def test_same_location_registered_once(self):
        registry = ThemeRegistry()
        first = _file_theme("/ctx/style.css")
        second = _file_theme("/ctx/style.css")

        assert registry.add_used_theme(first) is True
        assert registry.add_used_theme(second) is False
        assert len(registry) == 1
        assert list(registry)[0] is first

    def test_none_is_ignored(self):
        registry = ThemeRegistry()
        assert registry.add_used_theme(None) is False
        assert len(registry) == 0

    def test_insertion_order_preserved(self):
        registry = ThemeRegistry()
        themes = [
            UriTheme("b.css", "https://example.com/b.css"),
            _file_theme("/ctx/a.css"),
            UriTheme("c.css", "https://example.com/c.css"),
        ]
        registry.add_themes(themes)
        assert [t.location for t in registry] == [t.location for t in themes]

    def test_add_themes_deduplicates_within_list(self):
        registry = ThemeRegistry()
        registry.add_themes([_file_theme("/ctx/a.css"), _file_theme("/ctx/a.css")])
        assert len(registry) == 1

    def test_repeated_registration_is_idempotent(self):
        registry = ThemeRegistry()
        for _ in range(5):
            registry.add_themes([_file_theme("/ctx/a.css"), _file_theme("/ctx/b.css")])
        assert len(registry) == 2

    def test_contains_by_theme_and_location(self):
        registry = ThemeRegistry()
        registry.add_used_theme(_file_theme("/ctx/a.css"))
        assert "/ctx/a.css" in registry
        assert _file_theme("/ctx/a.css") in registry
        assert "/ctx/b.css" not in registry

    def test_get(self):
        registry = ThemeRegistry()
        theme = _file_theme("/ctx/a.css")
        registry.add_used_theme(theme)
        assert registry.get("/ctx/a.css") is theme
        assert registry.get("/ctx/zzz.css") is None

    def test_no_sequence_mutation_api(self):
        registry = ThemeRegistry()
        assert not hasattr(registry, "append")
        assert not hasattr(registry, "remove")
        assert not hasattr(registry, "__setitem__")
