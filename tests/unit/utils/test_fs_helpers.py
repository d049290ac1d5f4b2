"""
test_fs_helpers.py
------------------
Unit tests for quire.utils.fs.
"""
import pytest

from quire.utils.fs import copy_file, copy_tree_contents, ensure_dir, write_text


class TestEnsureDir:
    def test_creates_nested(self, tmp_dir):
        path = ensure_dir(tmp_dir / "a" / "b")
        assert path.is_dir()

    def test_existing_is_fine(self, tmp_dir):
        assert ensure_dir(tmp_dir) == tmp_dir


class TestCopyFile:
    def test_copies_and_creates_parent(self, tmp_dir):
        (tmp_dir / "src.css").write_text("a {}")
        copy_file(tmp_dir / "src.css", tmp_dir / "out" / "dst.css")
        assert (tmp_dir / "out" / "dst.css").read_text() == "a {}"

    def test_missing_source(self, tmp_dir):
        with pytest.raises(FileNotFoundError):
            copy_file(tmp_dir / "nope.css", tmp_dir / "dst.css")


class TestCopyTreeContents:
    def test_merges_into_existing(self, tmp_dir):
        src = tmp_dir / "src"
        (src / "sub").mkdir(parents=True)
        (src / "a.css").write_text("new")
        (src / "sub" / "b.css").write_text("b")
        dst = tmp_dir / "dst"
        dst.mkdir()
        (dst / "a.css").write_text("old")
        (dst / "keep.txt").write_text("keep")

        copy_tree_contents(src, dst)

        assert (dst / "a.css").read_text() == "new"
        assert (dst / "sub" / "b.css").read_text() == "b"
        assert (dst / "keep.txt").exists()

    def test_skips_hidden(self, tmp_dir):
        src = tmp_dir / "src"
        (src / ".git").mkdir(parents=True)
        (src / ".git" / "HEAD").write_text("ref")
        (src / "a.css").write_text("a")

        copy_tree_contents(src, tmp_dir / "dst")

        assert not (tmp_dir / "dst" / ".git").exists()
        assert (tmp_dir / "dst" / "a.css").exists()

    def test_missing_source(self, tmp_dir):
        with pytest.raises(FileNotFoundError):
            copy_tree_contents(tmp_dir / "nope", tmp_dir / "dst")


class TestWriteText:
    def test_writes_utf8(self, tmp_dir):
        write_text(tmp_dir / "x" / "a.css", "content: 'é';")
        assert (tmp_dir / "x" / "a.css").read_text(encoding="utf-8") == "content: 'é';"
