"""
Tests for the adapter protocol, registry, mock, shell, filesystem and git adapters.
"""

import shutil
import sys
from pathlib import Path

import pytest

from pswitch.adapters.base import ExecutionContext
from pswitch.adapters.mock import MockAdapter
from pswitch.adapters.registry import AdapterRegistry, default_registry
from pswitch.adapters.shell.command import ShellCommandAdapter
from pswitch.adapters.shell.filesystem import FilesystemAdapter
from pswitch.adapters.vcs.git import GitAdapter
from pswitch.core.models.action import Action, Receipt

# ── Mock Adapter Tests ───────────────────────────────────────────────


class TestMockAdapter:
    def test_default_success(self):
        mock = MockAdapter(adapter_name="test-mock")
        ctx = ExecutionContext(action=Action(id="op-1", adapter="test-mock"))
        receipt = mock.execute(ctx)
        assert receipt.ok
        assert mock.call_count == 1

    def test_fail_on(self):
        mock = MockAdapter()
        mock.fail_on("op-fail", error="Intentional failure")
        receipt = mock.execute(ExecutionContext(action=Action(id="op-fail", adapter="mock")))
        assert receipt.failed
        assert receipt.error == "Intentional failure"

    def test_launched(self):
        mock = MockAdapter(adapter_name="shell")
        mock.execute(ExecutionContext(action=Action(id="a", adapter="shell", params={"argv": ["vim"]})))
        mock.execute(ExecutionContext(action=Action(id="b", adapter="shell")))
        assert mock.launched == [["vim"]]
        assert mock.call_count == 2


# ── Registry Tests ──────────────────────────────────────────────────


class TestAdapterRegistry:
    def test_register_routes_by_name(self, tmp_path: Path):
        registry = AdapterRegistry()
        mock = MockAdapter(adapter_name="test")
        registry.register(mock)
        receipt = registry.execute_action(Action(id="x", adapter="test"), working_dir=str(tmp_path))
        assert receipt.ok
        assert mock.call_count == 1

    def test_register_replaces(self):
        registry = AdapterRegistry()
        first, second = MockAdapter(adapter_name="shell"), MockAdapter(adapter_name="shell")
        registry.register(first)
        registry.register(second)
        registry.execute_action(Action(id="x", adapter="shell"))
        assert first.call_count == 0
        assert second.call_count == 1

    def test_missing_adapter_fails(self):
        receipt = AdapterRegistry().execute_action(Action(id="x", adapter="nope"))
        assert receipt.failed
        assert "No adapter registered" in receipt.error

    def test_validation_failure(self):
        registry = AdapterRegistry()
        registry.register(ShellCommandAdapter())
        receipt = registry.execute_action(Action(id="x", adapter="shell", params={}))
        assert receipt.failed
        assert "Validation failed" in receipt.error

    def test_dry_run_skips(self, tmp_path: Path):
        registry = AdapterRegistry()
        mock = MockAdapter(adapter_name="shell")
        registry.register(mock)
        receipt = registry.execute_action(
            Action(id="x", adapter="shell", params={"argv": ["vim"]}),
            working_dir=str(tmp_path),
            dry_run=True,
        )
        assert receipt.status == "skipped"
        assert mock.call_count == 0

    def test_working_dir_passed_through(self, tmp_path: Path):
        registry = AdapterRegistry()
        mock = MockAdapter(adapter_name="shell")
        registry.register(mock)
        registry.execute_action(Action(id="x", adapter="shell"), working_dir=str(tmp_path))
        assert mock.calls[0].working_dir == str(tmp_path)

    def test_default_registry(self, tmp_path: Path):
        registry = default_registry()
        receipt = registry.execute_action(
            Action(id="x", adapter="filesystem", params={"operation": "mkdir", "path": "made"}),
            working_dir=str(tmp_path),
        )
        assert receipt.ok
        assert (tmp_path / "made").is_dir()
        for name in ("git", "shell"):
            receipt = registry.execute_action(Action(id="y", adapter=name))
            assert receipt.error.startswith("Validation failed")


# ── Shell Command Adapter Tests ─────────────────────────────────────


def _run(adapter, tmp_path: Path, **params) -> Receipt:
    ctx = ExecutionContext(
        action=Action(id="t", adapter=adapter.name, params=params),
        working_dir=str(tmp_path),
    )
    valid, msg = adapter.validate(ctx)
    assert valid, msg
    return adapter.execute(ctx)


class TestShellCommandAdapter:
    def test_success(self, tmp_path: Path):
        receipt = _run(ShellCommandAdapter(), tmp_path, argv=[sys.executable, "-c", "pass"])
        assert receipt.ok
        assert receipt.return_code == 0
        assert receipt.metadata["argv"][0] == sys.executable

    def test_runs_in_working_dir(self, tmp_path: Path):
        script = "import os; open('cwd.txt', 'w').write(os.getcwd())"
        receipt = _run(ShellCommandAdapter(), tmp_path, argv=[sys.executable, "-c", script])
        assert receipt.ok
        assert Path((tmp_path / "cwd.txt").read_text()).resolve() == tmp_path.resolve()

    def test_non_zero_exit(self, tmp_path: Path):
        receipt = _run(
            ShellCommandAdapter(),
            tmp_path,
            argv=[sys.executable, "-c", "import sys; sys.exit(3)"],
        )
        assert receipt.failed
        assert receipt.return_code == 3
        assert "exited with code 3" in receipt.error

    def test_command_not_found(self, tmp_path: Path):
        receipt = _run(ShellCommandAdapter(), tmp_path, argv=["definitely-not-a-command-xyz"])
        assert receipt.failed
        assert "Command not found" in receipt.error

    def test_validate_missing_argv(self, tmp_path: Path):
        ctx = ExecutionContext(action=Action(id="t", adapter="shell"), working_dir=str(tmp_path))
        valid, msg = ShellCommandAdapter().validate(ctx)
        assert not valid
        assert "argv" in msg

    def test_validate_missing_working_dir(self, tmp_path: Path):
        ctx = ExecutionContext(
            action=Action(id="t", adapter="shell", params={"argv": ["vim"]}),
            working_dir=str(tmp_path / "gone"),
        )
        valid, msg = ShellCommandAdapter().validate(ctx)
        assert not valid
        assert "does not exist" in msg


# ── Filesystem Adapter Tests ────────────────────────────────────────


class TestFilesystemAdapter:
    def test_mkdir(self, tmp_path: Path):
        receipt = _run(FilesystemAdapter(), tmp_path, operation="mkdir", path="new")
        assert receipt.ok
        assert (tmp_path / "new").is_dir()

    def test_mkdir_existing_fails(self, tmp_path: Path):
        (tmp_path / "taken").mkdir()
        receipt = _run(FilesystemAdapter(), tmp_path, operation="mkdir", path="taken")
        assert receipt.failed

    def test_touch(self, tmp_path: Path):
        receipt = _run(FilesystemAdapter(), tmp_path, operation="touch", path="readme.md")
        assert receipt.ok
        assert (tmp_path / "readme.md").read_text() == ""

    def test_touch_absolute(self, tmp_path: Path):
        target = tmp_path / "abs.md"
        receipt = _run(FilesystemAdapter(), tmp_path / "..", operation="touch", path=str(target))
        assert receipt.ok
        assert target.exists()

    def test_touch_in_missing_dir_fails(self, tmp_path: Path):
        receipt = _run(FilesystemAdapter(), tmp_path, operation="touch", path="no/such/file")
        assert receipt.failed

    def test_unknown_operation(self, tmp_path: Path):
        ctx = ExecutionContext(
            action=Action(id="t", adapter="filesystem", params={"operation": "rm", "path": "x"}),
        )
        valid, msg = FilesystemAdapter().validate(ctx)
        assert not valid
        assert "Unknown operation" in msg


# ── Git Adapter Tests ───────────────────────────────────────────────


class TestGitAdapter:
    def test_validate_requires_operation(self):
        ctx = ExecutionContext(action=Action(id="t", adapter="git"))
        valid, _ = GitAdapter().validate(ctx)
        assert not valid

    def test_validate_rejects_unknown(self):
        ctx = ExecutionContext(action=Action(id="t", adapter="git", params={"operation": "push"}))
        valid, msg = GitAdapter().validate(ctx)
        assert not valid
        assert "Unknown operation" in msg

    @pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
    def test_init(self, tmp_path: Path):
        receipt = _run(GitAdapter(), tmp_path, operation="init")
        assert receipt.ok
        assert (tmp_path / ".git").is_dir()

    def test_git_missing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(shutil, "which", lambda name: None)
        receipt = _run(GitAdapter(), tmp_path, operation="init")
        assert receipt.failed
        assert "not found" in receipt.error
