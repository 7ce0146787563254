"""commitguard CLI — Typer application with scan, check-message, install, init, and precommit commands."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from commitguard import __version__

app = typer.Typer(
    name="commitguard",
    help="Keep secrets out of staged files and commit messages.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _detect_ci() -> bool:
    """Auto-detect CI environment."""
    return os.environ.get("CI", "").lower() in ("true", "1", "yes")


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from commitguard.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _repo_root_or_cwd() -> Path:
    """Scans tolerate a missing repository and fall back to the working directory."""
    from commitguard.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError:
        return Path.cwd()


def _prepare(repo_root: Path, config: Optional[str], format: Optional[str], ci: bool):
    """Load config, apply CLI and CI overrides, and build the rule registry."""
    from commitguard.config.loader import ConfigError, load_config
    from commitguard.config.schema import OUTPUT_FORMATS
    from commitguard.rules.registry import build_registry

    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    ci_mode = ci or _detect_ci()
    if ci_mode:
        if cfg.output.format == "terminal" and format is None:
            cfg.output.format = "json"
        cfg.output.redact = True

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {escape(format)}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]

    try:
        registry = build_registry(cfg, repo_root)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    return cfg, registry, ci_mode


# ── scan ──────────────────────────────────────────────────────────────────────


@app.command()
def scan(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .commitguard.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    ci: bool = typer.Option(False, "--ci", help="Enable CI mode (JSON output, full redaction)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show which staged files would be checked"),
) -> None:
    """Scan staged files for secrets."""
    from commitguard.config.loader import ConfigError
    from commitguard.log import configure_logging
    from commitguard.output import json_report, terminal
    from commitguard.scanner.engine import ScanError, scan_files
    from commitguard.scanner.sources import list_staged_paths, load_staged_source

    configure_logging(verbose=verbose, debug=debug)
    repo_root = _repo_root_or_cwd()
    cfg, registry, ci_mode = _prepare(repo_root, config, format, ci)

    if verbose or debug:
        console.print(f"[dim]File rules loaded: {len(registry.file_rules())}[/dim]")
        console.print(f"[dim]Repo root: {repo_root}[/dim]")
        console.print(f"[dim]CI mode: {ci_mode}[/dim]")

    paths = list_staged_paths(repo_root)

    if dry_run:
        checkable = [
            p for p in paths
            if not load_staged_source(p, repo_root, cfg.ignore.paths).skipped
        ]
        console.print(f"[bold]Dry run — {len(checkable)} file(s) would be checked:[/bold]")
        for p in checkable:
            console.print(f"  {p}", markup=False)
        raise typer.Exit(code=0)

    on_finding = None
    if cfg.output.format == "terminal":
        on_finding = terminal.FindingPrinter(console, cfg)

    try:
        result = scan_files(paths, cfg, registry, repo_root, on_finding=on_finding)
    except (ScanError, ConfigError) as exc:
        console.print(f"[bold red]Scanner error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if cfg.output.format == "terminal":
        terminal.render_scan(result, console, show_summary=cfg.output.show_summary)
        if ci_mode and result.findings:
            _emit_ci_annotations(result, cfg)
    else:
        print(json_report.render_scan(result, cfg))

    raise typer.Exit(code=1 if result.blocked else 0)


def _emit_ci_annotations(result, cfg) -> None:
    """Emit GitHub Actions annotations; values are never included."""
    if cfg.ci.annotation_format != "github":
        return
    for f in result.findings:
        print(f"::error file={f.file},line={f.line_no}::Potential secret ({f.rule_id}) [REDACTED]")


# ── check-message ─────────────────────────────────────────────────────────────


@app.command("check-message")
def check_message(
    message_file: Optional[str] = typer.Argument(
        None, help="Commit message file (defaults to .git/COMMIT_EDITMSG, then the last commit)"
    ),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .commitguard.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    ci: bool = typer.Option(False, "--ci", help="Enable CI mode (JSON output, full redaction)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Check a commit message for IPs, credentials and high-entropy strings."""
    from commitguard.log import configure_logging
    from commitguard.output import json_report, terminal
    from commitguard.scanner.message import scan_message
    from commitguard.scanner.sources import read_commit_message

    configure_logging(verbose=verbose, debug=debug)
    repo_root = _repo_root_or_cwd()
    cfg, registry, _ = _prepare(repo_root, config, format, ci)

    text = read_commit_message(message_file, Path.cwd(), sys.stdin)
    result = scan_message(text, cfg, registry)

    if cfg.output.format == "terminal":
        terminal.render_message(result, console, full_redaction=cfg.output.redact)
    else:
        print(json_report.render_message(result, cfg))

    raise typer.Exit(code=1 if result.blocked else 0)


# ── install ───────────────────────────────────────────────────────────────────


@app.command()
def install(
    force: bool = typer.Option(False, "--force", help="Overwrite existing hooks"),
) -> None:
    """Install commitguard as pre-commit and commit-msg git hooks."""
    from commitguard.hooks.installer import install_hooks

    repo_root = _resolve_repo_root()
    success, messages = install_hooks(repo_root, force=force)
    _print_hook_messages(success, messages)


# ── uninstall ─────────────────────────────────────────────────────────────────


@app.command()
def uninstall() -> None:
    """Remove commitguard git hooks."""
    from commitguard.hooks.installer import uninstall_hooks

    repo_root = _resolve_repo_root()
    success, messages = uninstall_hooks(repo_root)
    _print_hook_messages(success, messages)


def _print_hook_messages(success: bool, messages: list[str]) -> None:
    mark = "[green]✓[/green]" if success else "[red]✗[/red]"
    for msg in messages:
        console.print(f"{mark} {escape(msg)}")
    if not success:
        raise typer.Exit(code=1)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .commitguard.toml in the repo root."""
    from commitguard.config.defaults import DEFAULT_TOML
    from commitguard.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── precommit ─────────────────────────────────────────────────────────────────


@app.command()
def precommit() -> None:
    """Run all pre-commit hooks, logging output to artifacts/pre-commit.log."""
    from commitguard.hooks.runner import RunnerError, log_path, run_precommit

    repo_root = _repo_root_or_cwd()
    console.print("Running pre-commit checks...")
    console.print(f"Log file: {log_path(repo_root)}")
    console.print(f"Repository: {repo_root}")

    try:
        returncode = run_precommit(repo_root, echo=typer.echo)
    except RunnerError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    console.print()
    if returncode != 0:
        console.print("[bold red]❌ pre-commit failed[/bold red]")
        console.print("Review and remediate failures in:")
        console.print(f"  {log_path(repo_root)}")
    else:
        console.print("[bold green]✅ pre-commit passed successfully[/bold green]")
    raise typer.Exit(code=returncode)


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"commitguard {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """commitguard — keep secrets out of staged files and commit messages."""
