"""
test_pkg_resolution.py
----------------------
Unit tests for quire.utils.pkg.
"""
import json

import pytest

from quire.utils.pkg import read_manifest, resolve_pkg


class TestResolvePkg:
    def test_node_modules(self, context_dir, make_package):
        root = make_package(context_dir / "node_modules" / "theme", {"name": "theme"})
        assert resolve_pkg("theme", str(context_dir)) == str(root)

    def test_scoped_package(self, context_dir, make_package):
        root = make_package(context_dir / "node_modules" / "@org" / "theme", {"name": "@org/theme"})
        assert resolve_pkg("@org/theme", str(context_dir)) == str(root)

    def test_ancestor_lookup(self, tmp_dir, make_package):
        root = make_package(tmp_dir / "node_modules" / "theme", {"name": "theme"})
        nested = tmp_dir / "a" / "b"
        nested.mkdir(parents=True)
        assert resolve_pkg("theme", str(nested)) == str(root)

    def test_relative_path(self, context_dir, make_package):
        root = make_package(context_dir / "themes" / "mine", {"name": "mine"})
        assert resolve_pkg("./themes/mine", str(context_dir)) == str(root)

    def test_relative_path_without_manifest(self, context_dir):
        (context_dir / "themes").mkdir()
        assert resolve_pkg("./themes", str(context_dir)) is None

    def test_bare_name_does_not_match_local_dir(self, context_dir, make_package):
        make_package(context_dir / "mine", {"name": "mine"})
        assert resolve_pkg("mine", str(context_dir)) is None

    def test_empty_locator(self, context_dir):
        assert resolve_pkg("", str(context_dir)) is None


class TestReadManifest:
    def test_reads_json(self, tmp_dir, make_package):
        root = make_package(tmp_dir / "p", {"name": "p", "style": "a.css"})
        assert read_manifest(root) == {"name": "p", "style": "a.css"}

    def test_missing(self, tmp_dir):
        assert read_manifest(tmp_dir) is None

    def test_invalid_json(self, tmp_dir):
        (tmp_dir / "package.json").write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            read_manifest(tmp_dir)
