"""Git interface layer."""

from commitguard.git.adapter import (
    GitError,
    get_git_dir,
    get_hooks_dir,
    get_last_commit_message,
    get_repo_root,
    get_staged_files,
)

__all__ = [
    "GitError",
    "get_git_dir",
    "get_hooks_dir",
    "get_last_commit_message",
    "get_repo_root",
    "get_staged_files",
]
