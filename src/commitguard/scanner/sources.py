"""Source enumeration — staged files and the commit message.

Every failure here degrades to "nothing to scan" rather than aborting: a
missing file, an unreadable file or a broken git call simply yields no input.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from commitguard.git.adapter import (
    GitError,
    get_git_dir,
    get_last_commit_message,
    get_staged_files,
)
from commitguard.scanner.filters import is_excluded_path

logger = logging.getLogger(__name__)

BINARY_SNIFF_BYTES = 8192
COMMIT_MSG_FILENAME = "COMMIT_EDITMSG"


@dataclass(frozen=True)
class StagedSource:
    """A staged path and either its text or the reason it was skipped."""

    path: str
    text: Optional[str] = None
    skip_reason: Optional[str] = None  # excluded | missing | unreadable | binary | empty

    @property
    def skipped(self) -> bool:
        return self.skip_reason is not None


def list_staged_paths(repo_root: Path) -> List[str]:
    """Return staged A/C/M paths, or an empty list if git cannot be queried."""
    try:
        return get_staged_files(repo_root)
    except GitError as exc:
        logger.debug("Treating staged set as empty: %s", exc)
        return []


def is_binary(sample: bytes) -> bool:
    """Null bytes mark a file as binary, as ``grep -I`` does."""
    return b"\x00" in sample


def load_staged_source(
    path: str,
    repo_root: Path,
    ignore_globs: Sequence[str] = (),
) -> StagedSource:
    """Resolve one staged path into scannable text or a skip reason."""
    if is_excluded_path(path, ignore_globs):
        return StagedSource(path, skip_reason="excluded")

    full_path = repo_root / path
    if not full_path.is_file():
        return StagedSource(path, skip_reason="missing")

    try:
        data = full_path.read_bytes()
    except OSError as exc:
        logger.debug("Skipping %s: %s", path, exc)
        return StagedSource(path, skip_reason="unreadable")

    if is_binary(data[:BINARY_SNIFF_BYTES]):
        return StagedSource(path, skip_reason="binary")

    text = data.decode("utf-8", errors="replace")
    if not text.strip("\n"):
        return StagedSource(path, skip_reason="empty")
    return StagedSource(path, text=text)


def _read_piped(stdin: Optional[TextIO]) -> str:
    if stdin is None:
        return ""
    try:
        if stdin.isatty():
            return ""
        return stdin.read()
    except (OSError, ValueError) as exc:
        logger.debug("Could not read piped stdin: %s", exc)
        return ""


def _read_file(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.debug("Could not read %s: %s", path, exc)
        return None


def _pending_message_file(cwd: Path) -> Path:
    env_dir = os.environ.get("GIT_DIR")
    if env_dir:
        return Path(env_dir) / COMMIT_MSG_FILENAME
    try:
        return get_git_dir(cwd) / COMMIT_MSG_FILENAME
    except GitError:
        return cwd / ".git" / COMMIT_MSG_FILENAME


def read_commit_message(
    message_file: Optional[str],
    cwd: Path,
    stdin: Optional[TextIO] = None,
) -> str:
    """Obtain the commit message to scan.

    Priority: explicit *message_file*, then piped *stdin*, then the pending
    ``COMMIT_EDITMSG``, then the message of the latest commit. Returns an empty
    string when nothing is obtainable.
    """
    if message_file:
        explicit = Path(message_file)
        if not explicit.is_absolute():
            explicit = cwd / explicit
        text = _read_file(explicit) if explicit.is_file() else None
        if text is not None:
            return text
        logger.warning("Commit message file %s not found; falling back", message_file)

    piped = _read_piped(stdin)
    if piped.strip():
        return piped

    pending = _pending_message_file(cwd)
    if pending.is_file():
        text = _read_file(pending)
        if text is not None:
            return text

    try:
        return get_last_commit_message(cwd)
    except GitError as exc:
        logger.debug("No commit message available: %s", exc)
        return ""
