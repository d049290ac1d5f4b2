"""
test_manuscript_entry.py
------------------------
Unit tests for ManuscriptEntry and DocumentMetadata.
"""
from pathlib import Path

from quire.dataclasses.entry import ManuscriptEntry
from quire.dataclasses.metadata import DocumentMetadata
from quire.themes.uri import UriTheme


def uri(name: str) -> UriTheme:
    return UriTheme(name, f"https://example.com/{name}")


class TestReplaceTheme:
    def test_replaces_by_identity(self):
        a, b, replacement = uri("a.css"), uri("b.css"), uri("b.css")
        entry = ManuscriptEntry(target=Path("/ws/doc.html"), theme=[a, b])

        assert entry.replace_theme(b, replacement) is True
        assert entry.theme[0] is a
        assert entry.theme[1] is replacement

    def test_equal_location_is_not_enough(self):
        original = uri("a.css")
        entry = ManuscriptEntry(target=Path("/ws/doc.html"), theme=[original])

        assert entry.replace_theme(uri("a.css"), uri("c.css")) is False
        assert entry.theme == [original]

    def test_list_is_copied(self):
        a = uri("a.css")
        shared = [a]
        entry = ManuscriptEntry(target=Path("/ws/doc.html"), theme=shared)

        entry.replace_theme(a, uri("b.css"))

        assert shared == [a]


class TestStylesheets:
    def test_order_follows_theme_list(self):
        entry = ManuscriptEntry(target=Path("/ws/doc.html"), theme=[uri("b.css"), uri("a.css")])
        assert entry.stylesheets() == [
            "https://example.com/b.css",
            "https://example.com/a.css",
        ]

    def test_key_and_output_dir(self):
        entry = ManuscriptEntry(target=Path("/ws/ch/one.html"))
        assert entry.key == str(Path("/ws/ch/one.html"))
        assert entry.output_dir == Path("/ws/ch")


class TestDocumentMetadata:
    def test_has_theme(self):
        assert not DocumentMetadata().has_theme
        assert DocumentMetadata(theme=[uri("a.css")]).has_theme
