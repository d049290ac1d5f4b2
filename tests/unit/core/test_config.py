"""
test_config.py
--------------
Unit tests for quire.core.config.
"""
import pytest

from quire.core.config import BuildConfig, EntryConfig, TocConfig, load_config
from quire.core.exceptions import ConfigError, ValidationError


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    """Test YAML loading and normalization."""

    def test_minimal_config(self, context_dir):
        config = load_config(_write(context_dir / "quire.config.yaml", "theme: ./style.scss\n"))
        assert isinstance(config, BuildConfig)
        assert config.theme == ["./style.scss"]
        assert config.context_dir == context_dir
        assert config.workspace_dir == context_dir
        assert config.entries == []
        assert config.toc is None

    def test_full_config(self, context_dir):
        path = _write(
            context_dir / "quire.config.yaml",
            """
theme:
  - base.css
  - https://example.com/print.css
workspace: build
entry:
  - intro.md
  - path: chapters/one.md
    title: Chapter One
    theme: my-pkg
    vars:
      color: red
toc:
  title: Contents
  theme: toc.css
""",
        )
        config = load_config(path)

        assert config.theme == ["base.css", "https://example.com/print.css"]
        assert config.workspace_dir == context_dir / "build"
        assert config.entries == [
            EntryConfig(path="intro.md"),
            EntryConfig(
                path="chapters/one.md",
                title="Chapter One",
                theme=["my-pkg"],
                vars={"color": "red"},
            ),
        ]
        assert config.toc == TocConfig(title="Contents", theme=["toc.css"])

    def test_single_entry_string(self, context_dir):
        config = load_config(_write(context_dir / "q.yaml", "entry: doc.md\n"))
        assert config.entries == [EntryConfig(path="doc.md")]

    def test_toc_true(self, context_dir):
        config = load_config(_write(context_dir / "q.yaml", "toc: true\n"))
        assert config.toc == TocConfig()
        assert config.toc.output == "index.html"

    def test_toc_false(self, context_dir):
        assert load_config(_write(context_dir / "q.yaml", "toc: false\n")).toc is None

    def test_empty_file(self, context_dir):
        config = load_config(_write(context_dir / "q.yaml", ""))
        assert config.theme == []


class TestLoadConfigErrors:
    """Test config failures."""

    def test_missing_file(self, context_dir):
        with pytest.raises(ConfigError, match="not found"):
            load_config(context_dir / "missing.yaml")

    def test_invalid_yaml(self, context_dir):
        with pytest.raises(ConfigError, match="Invalid YAML") as exc_info:
            load_config(_write(context_dir / "q.yaml", "theme: [unclosed\n"))
        assert exc_info.value.__cause__ is not None

    def test_top_level_list(self, context_dir):
        with pytest.raises(ConfigError, match="mapping"):
            load_config(_write(context_dir / "q.yaml", "- a\n- b\n"))

    def test_non_string_theme(self, context_dir):
        with pytest.raises(ValidationError, match="theme"):
            load_config(_write(context_dir / "q.yaml", "theme: [1, 2]\n"))

    def test_vars_must_be_mapping(self, context_dir):
        with pytest.raises(ValidationError, match="vars"):
            load_config(
                _write(context_dir / "q.yaml", "entry:\n  - path: a.md\n    vars: [red]\n")
            )

    def test_entry_requires_path(self, context_dir):
        with pytest.raises(ValidationError, match="path"):
            load_config(_write(context_dir / "q.yaml", "entry:\n  - title: No path\n"))
