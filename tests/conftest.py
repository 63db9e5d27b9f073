"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from context_mesh.config import Config


def write_doc(root: Path, relative: str, scopes: list[str], body: str = "Some content.") -> Path:
    """Write a markdown document declaring the given scopes."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    scope_lines = "\n".join(f"- {scope}" for scope in scopes)
    path.write_text(f"# {path.stem}\n\n## Scope\n{scope_lines}\n\n## Notes\n{body}\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer environment variables out of the tests."""
    for name in ("CONTEXT_HUB", "CONTEXT_LOCAL", "CONTEXT_FORMAT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def hub_root(tmp_path: Path) -> Path:
    """Create a hub context directory with categorised documents."""
    hub = tmp_path / "context-hub" / "context"
    write_doc(hub, "architecture/api.md", ["api/*"])
    write_doc(hub, "decisions/auth-tokens.md", ["api/auth", "security"])
    write_doc(hub, "playbooks/release.md", ["ops/release"])
    return hub


@pytest.fixture
def local_root(tmp_path: Path) -> Path:
    """Create a local context directory with project documents."""
    local = tmp_path / "project" / "context"
    write_doc(local, "decisions/session-length.md", ["api/auth"])
    write_doc(local, "notes.md", ["*"])
    write_doc(local, "constraints/db.md", ["storage/db"])
    return local


@pytest.fixture
def config() -> Config:
    """Provide a test configuration."""
    return Config()


@pytest.fixture
def make_doc():
    """Expose write_doc to tests that build their own roots."""
    return write_doc
