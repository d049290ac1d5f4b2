"""
conftest.py
-----------
Shared pytest fixtures for Quire tests.

Provides fixtures for:
- Context and workspace directories
- Stylesheet and package theme factories
- A stub Sass transpiler, so tests do not depend on libsass output
"""
import json
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def context_dir(tmp_dir):
    """Directory that relative locators are resolved against."""
    path = tmp_dir / "project"
    path.mkdir()
    return path


@pytest.fixture
def workspace_dir(tmp_dir):
    """Build workspace, separate from the context directory."""
    path = tmp_dir / "workspace"
    path.mkdir()
    return path


# ----- Transpiler -----

@pytest.fixture
def fake_transpile():
    """Stub transpiler recording the sources it was called with."""
    calls = []

    def transpile(source):
        calls.append(source)
        return f"/* compiled from {Path(source).name} */\nbody {{ color: red; }}\n"

    transpile.calls = calls
    return transpile


# ----- Factories -----

@pytest.fixture
def make_package():
    """Factory creating a package directory with a package.json manifest."""

    def _make(root: Path, manifest: dict, files=None) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        (root / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
        for name, content in (files or {}).items():
            target = root / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def make_document():
    """Factory creating a markdown document with optional front-matter."""

    def _make(path: Path, frontmatter: str = "", body: str = "# Title\n") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        content = f"---\n{frontmatter}\n---\n\n{body}" if frontmatter else body
        path.write_text(content, encoding="utf-8")
        return path

    return _make
