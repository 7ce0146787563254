"""Rich terminal reporter — colour, icons, remediation hints."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from commitguard.config.schema import CommitGuardConfig
from commitguard.findings.models import Finding, MessageScanResult, ScanResult
from commitguard.findings.redactor import REDACTED, redact

_MESSAGE_GUIDANCE = (
    "[yellow]Commit messages are permanent in git history.[/yellow]",
    "[yellow]Never include:[/yellow]",
    "  - Passwords or credentials",
    "  - IP addresses (especially private/internal IPs)",
    "  - API keys or tokens",
    "  - Any sensitive information",
    "",
    "[yellow]Use generic descriptions instead:[/yellow]",
    "  - 'Remove credentials' instead of 'Remove password xyz123'",
    "  - 'Update config' instead of 'Update 192.168.1.100 config'",
    "  - 'Fix authentication' instead of 'Fix login with user:pass'",
)


class FindingPrinter:
    """Streams each reported finding as soon as the engine classifies it."""

    def __init__(self, console: Console, config: CommitGuardConfig) -> None:
        self._console = console
        self._scan = config.scan
        self._full_redaction = config.output.redact

    def __call__(self, finding: Finding) -> None:
        pattern = redact(finding.candidate.text, self._scan.max_pattern_chars, full=self._full_redaction)
        context = redact(finding.candidate.line, self._scan.max_context_chars, full=self._full_redaction)
        self._console.print(
            Text(f"✗ Potential secret found in {finding.file}:{finding.line_no}", style="red")
        )
        self._console.print(Text.assemble(("  Pattern: ", "yellow"), f"{pattern}..."))
        self._console.print(Text.assemble(("  Context: ", "yellow"), f"{context}..."))
        self._console.print()


def render_scan(result: ScanResult, console: Console, *, show_summary: bool = True) -> None:
    """Print the end-of-run verdict for a staged-file scan."""
    if result.staged_files == 0:
        console.print("[green]✓ No staged files to check[/green]")
        return

    if result.blocked:
        console.print(
            f"[bold red]❌ Found {result.total_findings} potential secret(s) in staged files[/bold red]"
        )
        console.print(
            "[yellow]If these are false positives, add an \\[allowlist] pattern to .commitguard.toml[/yellow]"
        )
        console.print("[yellow]Or use example placeholders like: YOUR_API_KEY_HERE[/yellow]")
    elif result.files_checked > 0:
        console.print(
            f"[green]✓ Checked {result.files_checked} file(s) - no secrets detected[/green]"
        )
    else:
        console.print("[green]✓ No staged files needed checking[/green]")

    if show_summary:
        _print_summary(console, result)


def _print_summary(console: Console, result: ScanResult) -> None:
    console.print(f"[dim]Staged files:[/dim]   {result.staged_files}")
    console.print(f"[dim]Files checked:[/dim]  {result.files_checked}")
    console.print(f"[dim]Skipped:[/dim]        {len(result.skipped_files)}")
    console.print(f"[dim]Findings:[/dim]       {result.total_findings}")


def render_message(
    result: MessageScanResult, console: Console, *, full_redaction: bool = False
) -> None:
    """Print warnings, blocking issues and guidance for a commit-message scan."""
    if not result.scanned:
        return

    if result.emails:
        console.print("[yellow]⚠ Warning: Email addresses found in commit message:[/yellow]")
        shown = [REDACTED] * len(result.emails) if full_redaction else list(result.emails)
        console.print(Text("  " + ", ".join(shown)))
        console.print("[yellow]  Ensure these are not sensitive accounts[/yellow]")
        console.print()

    if not result.blocked:
        console.print("[green]✓ Commit message is safe[/green]")
        return

    console.print("[bold red]❌ Commit message contains sensitive information![/bold red]")
    console.print()
    console.print("[red]Issues found:[/red]")
    for issue in result.issues:
        text = issue.title if full_redaction else issue.description
        console.print(Text.assemble(("  ✗ ", "red"), text))
    console.print()
    for line in _MESSAGE_GUIDANCE:
        console.print(line)
    console.print()
