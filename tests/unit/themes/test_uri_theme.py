"""
test_uri_theme.py
-----------------
Unit tests for quire.themes.uri.UriTheme.
"""
import pytest

from quire.themes.base import is_url
from quire.themes.uri import UriTheme


class TestIsUrl:
    """Test the URL pattern."""

    @pytest.mark.parametrize(
        "value",
        ["http://example.com/a.css", "https://cdn.example.com/themes/theme.css"],
    )
    def test_http_and_https_match(self, value):
        assert is_url(value)

    @pytest.mark.parametrize(
        "value",
        ["ftp://example.com/a.css", "./https://a.css", "style.css", "my-theme", ""],
    )
    def test_other_schemes_and_paths_do_not_match(self, value):
        assert not is_url(value)


class TestUriThemeParse:
    """Test UriTheme.parse."""

    def test_location_is_locator_verbatim(self):
        locator = "https://example.com/css/theme.css?v=2"
        theme = UriTheme.parse(locator)
        assert isinstance(theme, UriTheme)
        assert theme.location == locator

    def test_name_is_final_path_segment(self):
        theme = UriTheme.parse("https://example.com/css/theme.css")
        assert theme.name == "theme.css"

    def test_name_falls_back_to_host(self):
        theme = UriTheme.parse("https://example.com/")
        assert theme.name == "example.com"

    def test_non_url_returns_none(self):
        assert UriTheme.parse("./theme.css") is None

    def test_kind(self):
        assert UriTheme.parse("http://example.com/a.css").kind == "uri"


class TestUriThemeBehavior:
    """Test copy and path location."""

    def test_copy_theme_writes_nothing(self, tmp_dir):
        theme = UriTheme.parse("https://example.com/a.css")
        assert theme.copy_theme() is False
        assert list(tmp_dir.iterdir()) == []

    def test_locate_theme_path_returns_url(self, tmp_dir):
        theme = UriTheme.parse("https://example.com/a.css")
        assert theme.locate_theme_path(str(tmp_dir / "deep" / "dir")) == [
            "https://example.com/a.css"
        ]
