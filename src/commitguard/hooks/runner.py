"""Run every pre-commit hook and keep a log an agent or reviewer can read.

Output is streamed to the console and appended to ``artifacts/pre-commit.log``;
the pre-commit exit code is returned unchanged. Git state is never touched.
"""

from __future__ import annotations

import logging
import subprocess
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)

ARTIFACTS_DIR = "artifacts"
LOG_FILENAME = "pre-commit.log"
_RULE = "-" * 60

DEFAULT_COMMAND = ("pre-commit", "run", "--all-files")


class RunnerError(Exception):
    """Raised when the pre-commit executable cannot be started."""


def log_path(repo_root: Path) -> Path:
    return repo_root / ARTIFACTS_DIR / LOG_FILENAME


def run_precommit(
    repo_root: Path,
    *,
    command: Sequence[str] = DEFAULT_COMMAND,
    echo: Optional[Callable[[str], None]] = None,
) -> int:
    """Run *command* in *repo_root*, tee its output to the log, return its exit code."""
    target = log_path(repo_root)
    target.parent.mkdir(parents=True, exist_ok=True)
    started = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")

    with open(target, "w", encoding="utf-8") as log:
        log.write(f"{_RULE}\n")
        log.write(f"Timestamp: {started}\n")
        log.write(f"Command: {' '.join(command)}\n")
        try:
            proc = subprocess.Popen(
                list(command),
                cwd=repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError as exc:
            log.write(f"Could not start {command[0]}: {exc}\n")
            raise RunnerError(f"{command[0]} is not installed or not on PATH") from exc

        assert proc.stdout is not None
        for line in proc.stdout:
            log.write(line)
            if echo is not None:
                echo(line.rstrip("\n"))
        returncode = proc.wait()

        log.write(f"{_RULE}\n")
        log.write(f"Exit code: {returncode}\n")

    logger.debug("%s exited with %d; log at %s", command[0], returncode, target)
    return returncode
