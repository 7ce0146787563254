"""Git subprocess wrapper — staged files, commit messages, repo layout.

Every call is read-only; nothing here mutates the index or the work tree.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Optional


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(args: list[str], cwd: Path, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitError(f"git {args[0]} failed: {stderr or f'exit code {result.returncode}'}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def get_git_dir(cwd: Optional[Path] = None) -> Path:
    """Return the .git directory, honouring ``$GIT_DIR`` like git itself."""
    cwd = cwd or Path.cwd()
    env_dir = os.environ.get("GIT_DIR")
    if env_dir:
        return Path(env_dir)
    out = _run_git(["rev-parse", "--git-dir"], cwd=cwd)
    git_dir = Path(out.strip())
    return git_dir if git_dir.is_absolute() else cwd / git_dir


def get_staged_files(repo_root: Path) -> list[str]:
    """Return staged paths that were added, copied or modified (no deletions)."""
    output = _run_git(
        ["diff", "--cached", "--name-only", "--diff-filter=ACM", "--no-color"],
        cwd=repo_root,
    )
    return [line for line in output.splitlines() if line.strip()]


def get_last_commit_message(cwd: Path) -> str:
    """Return the message of HEAD. Raises GitError in a repository without commits."""
    return _run_git(["log", "-1", "--pretty=%B"], cwd=cwd)


def get_hooks_dir(cwd: Path) -> Path:
    """Return the hooks directory, following worktrees and ``core.hooksPath``."""
    out = _run_git(["rev-parse", "--git-path", "hooks"], cwd=cwd)
    hooks_dir = Path(out.strip())
    return hooks_dir if hooks_dir.is_absolute() else cwd / hooks_dir
