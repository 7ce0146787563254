"""Tests for git hook installation and the pre-commit runner."""

import os
import stat
import subprocess
import sys
from pathlib import Path

import pytest

from commitguard.hooks.installer import HOOK_SCRIPTS, install_hooks, uninstall_hooks
from commitguard.hooks.runner import RunnerError, log_path, run_precommit


@pytest.fixture
def repo(tmp_git_repo: Path) -> Path:
    return tmp_git_repo


class TestInstaller:
    def test_installs_both_hooks(self, repo: Path):
        ok, messages = install_hooks(repo)
        assert ok
        for name in ("pre-commit", "commit-msg"):
            hook = repo / ".git" / "hooks" / name
            assert hook.read_text() == HOOK_SCRIPTS[name]
        assert len(messages) == 2

    @pytest.mark.skipif(os.name == "nt", reason="no exec bit on Windows")
    def test_hooks_executable(self, repo: Path):
        install_hooks(repo)
        mode = (repo / ".git" / "hooks" / "pre-commit").stat().st_mode
        assert mode & stat.S_IXUSR

    def test_commit_msg_hook_passes_file(self, repo: Path):
        install_hooks(repo)
        assert 'check-message "$1"' in (repo / ".git" / "hooks" / "commit-msg").read_text()

    def test_reinstall_is_noop(self, repo: Path):
        install_hooks(repo)
        ok, messages = install_hooks(repo)
        assert ok
        assert all("already installed" in m for m in messages)

    def test_foreign_hook_blocks(self, repo: Path):
        hooks_dir = repo / ".git" / "hooks"
        hooks_dir.mkdir(exist_ok=True)
        (hooks_dir / "pre-commit").write_text("#!/bin/sh\necho existing\n")
        ok, messages = install_hooks(repo)
        assert not ok
        assert (hooks_dir / "pre-commit").read_text() == "#!/bin/sh\necho existing\n"
        # the other hook is still installed
        assert (hooks_dir / "commit-msg").exists()
        assert any("--force" in m for m in messages)

    def test_force_overwrites(self, repo: Path):
        hooks_dir = repo / ".git" / "hooks"
        hooks_dir.mkdir(exist_ok=True)
        (hooks_dir / "pre-commit").write_text("#!/bin/sh\necho existing\n")
        ok, _ = install_hooks(repo, force=True)
        assert ok
        assert "commitguard scan" in (hooks_dir / "pre-commit").read_text()

    def test_not_a_repo(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
        ok, messages = install_hooks(tmp_path)
        assert not ok
        assert "Not a git repository" in messages[0]
        ok, messages = uninstall_hooks(tmp_path)
        assert not ok
        assert "Not a git repository" in messages[0]

    def test_linked_worktree(self, repo: Path, tmp_path_factory):
        worktree = tmp_path_factory.mktemp("linked") / "tree"
        subprocess.run(
            ["git", "worktree", "add", "-q", str(worktree)],
            cwd=repo, capture_output=True, check=True,
        )
        assert (worktree / ".git").is_file()
        ok, _ = install_hooks(worktree)
        assert ok
        assert (repo / ".git" / "hooks" / "pre-commit").exists()
        ok, _ = uninstall_hooks(worktree)
        assert ok
        assert not (repo / ".git" / "hooks" / "pre-commit").exists()

    def test_uninstall(self, repo: Path):
        install_hooks(repo)
        ok, _ = uninstall_hooks(repo)
        assert ok
        assert not (repo / ".git" / "hooks" / "pre-commit").exists()
        assert not (repo / ".git" / "hooks" / "commit-msg").exists()

    def test_uninstall_leaves_foreign_hook(self, repo: Path):
        hooks_dir = repo / ".git" / "hooks"
        hooks_dir.mkdir(exist_ok=True)
        (hooks_dir / "commit-msg").write_text("#!/bin/sh\nexit 0\n")
        ok, messages = uninstall_hooks(repo)
        assert not ok
        assert (hooks_dir / "commit-msg").exists()
        assert any("not installed by commitguard" in m for m in messages)


class TestRunner:
    def _command(self, code: str):
        return (sys.executable, "-c", code)

    def test_passes_exit_code_through(self, tmp_path: Path):
        code = "print('check one...Passed'); print('check two...Failed'); raise SystemExit(3)"
        lines = []
        rc = run_precommit(tmp_path, command=self._command(code), echo=lines.append)
        assert rc == 3
        assert lines == ["check one...Passed", "check two...Failed"]

    def test_writes_log(self, tmp_path: Path):
        rc = run_precommit(tmp_path, command=self._command("print('all good')"))
        assert rc == 0
        log = log_path(tmp_path)
        assert log == tmp_path / "artifacts" / "pre-commit.log"
        text = log.read_text()
        assert "Timestamp: " in text
        assert "all good" in text
        assert text.rstrip().endswith("Exit code: 0")

    def test_log_overwritten_each_run(self, tmp_path: Path):
        run_precommit(tmp_path, command=self._command("print('first')"))
        run_precommit(tmp_path, command=self._command("print('second')"))
        text = log_path(tmp_path).read_text()
        assert "first" not in text
        assert "second" in text

    def test_missing_executable(self, tmp_path: Path):
        with pytest.raises(RunnerError, match="not installed"):
            run_precommit(tmp_path, command=("commitguard-no-such-binary",))
        assert "Could not start" in log_path(tmp_path).read_text()
