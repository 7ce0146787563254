"""Git hook installer — commitguard install / uninstall.

Two hooks are managed: ``pre-commit`` runs the staged-file scan and
``commit-msg`` checks the message file git passes as ``$1``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Tuple

from commitguard.git.adapter import GitError, get_hooks_dir

_HOOK_MARKER = "# commitguard-hook"

HOOK_SCRIPTS: Dict[str, str] = {
    "pre-commit": f"""\
#!/bin/sh
{_HOOK_MARKER}
# Installed by commitguard. To uninstall: commitguard uninstall

exec commitguard scan
""",
    "commit-msg": f"""\
#!/bin/sh
{_HOOK_MARKER}
# Installed by commitguard. To uninstall: commitguard uninstall

exec commitguard check-message "$1"
""",
}


def _hooks_dir(repo_root: Path) -> Optional[Path]:
    try:
        return get_hooks_dir(repo_root)
    except GitError:
        return None


def _is_ours(hook_path: Path) -> bool:
    content = hook_path.read_text(encoding="utf-8", errors="replace")
    return _HOOK_MARKER in content


def install_hooks(repo_root: Path, *, force: bool = False) -> Tuple[bool, List[str]]:
    """Install every commitguard hook.

    Returns (success, messages). A foreign hook blocks installation of that
    hook unless *force* is set; the other hooks are still installed.
    """
    hooks_dir = _hooks_dir(repo_root)
    if hooks_dir is None:
        return False, [f"Not a git repository: {repo_root}"]

    hooks_dir.mkdir(parents=True, exist_ok=True)
    ok = True
    messages: List[str] = []

    for name, script in HOOK_SCRIPTS.items():
        hook_path = hooks_dir / name
        if hook_path.exists():
            if _is_ours(hook_path) and not force:
                messages.append(f"{name} hook is already installed.")
                continue
            if not force:
                ok = False
                messages.append(
                    f"A {name} hook already exists at {hook_path}. "
                    "Use --force to overwrite, or call commitguard from it manually."
                )
                continue

        hook_path.write_text(script, encoding="utf-8")
        try:
            hook_path.chmod(0o755)
        except OSError:
            pass  # Windows doesn't need chmod
        messages.append(f"Installed {name} hook at {hook_path}")

    return ok, messages


def uninstall_hooks(repo_root: Path) -> Tuple[bool, List[str]]:
    """Remove commitguard hooks, leaving hooks written by anything else alone."""
    hooks_dir = _hooks_dir(repo_root)
    if hooks_dir is None:
        return False, [f"Not a git repository: {repo_root}"]

    ok = True
    messages: List[str] = []

    for name in HOOK_SCRIPTS:
        hook_path = hooks_dir / name
        if not hook_path.exists():
            messages.append(f"No {name} hook found, nothing to remove.")
            continue
        if not _is_ours(hook_path):
            ok = False
            messages.append(f"{name} hook exists but was not installed by commitguard.")
            continue
        hook_path.unlink()
        messages.append(f"Removed {name} hook from {hook_path}")

    return ok, messages
