"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from pswitch.adapters.mock import MockAdapter
from pswitch.adapters.registry import AdapterRegistry
from pswitch.adapters.shell.filesystem import FilesystemAdapter
from pswitch.core.models.settings import Settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own p settings out of the tests."""
    for var in ("P_CONFIG", "P_LOG_LEVEL", "P_LOG_FILE", "P_LOG_FILE_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def projects_root(tmp_path: Path) -> Path:
    """An empty projects directory."""
    root = tmp_path / "projects"
    root.mkdir()
    return root


@pytest.fixture
def make_repo():
    """Create ``root/relpath`` with a ``.git`` directory inside."""

    def _make(root: Path, relpath: str) -> Path:
        project = root / relpath
        (project / ".git").mkdir(parents=True)
        return project

    return _make


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a settings file and return its path."""

    def _write(content: str, name: str = "p.conf") -> Path:
        path = tmp_path / "config" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def shell_mock() -> MockAdapter:
    return MockAdapter(adapter_name="shell")


@pytest.fixture
def git_mock() -> MockAdapter:
    return MockAdapter(adapter_name="git")


@pytest.fixture
def registry(shell_mock: MockAdapter, git_mock: MockAdapter) -> AdapterRegistry:
    """Real filesystem writes, recorded launches and git calls."""
    reg = AdapterRegistry()
    reg.register(shell_mock)
    reg.register(git_mock)
    reg.register(FilesystemAdapter())
    return reg


@pytest.fixture
def flat_settings(projects_root: Path) -> Settings:
    return Settings(projects_dir=projects_root)


@pytest.fixture
def git_settings(projects_root: Path) -> Settings:
    return Settings(projects_dir=projects_root, git=True)
