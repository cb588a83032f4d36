"""Display and formatting service for check results"""
from typing import Optional

from rich.console import Console
from rich.text import Text

from git_healthcheck.constants import SECTION_SYMBOL, SEVERITY_COLORS, SEVERITY_SYMBOLS, STAGE_TITLES
from git_healthcheck.exceptions import FatalCheckError
from git_healthcheck.logging_config import get_logger
from git_healthcheck.models.check import Finding, HealthReport, Stage, StageResult

console = Console()
logger = get_logger(__name__)


def format_finding(finding: Finding) -> Text:
    """Render a finding as its symbol and message, colored by severity."""
    symbol = SEVERITY_SYMBOLS[finding.severity]
    return Text(f"{symbol} {finding.message}", style=SEVERITY_COLORS[finding.severity])


class DisplayService:
    """Prints stage headers, findings and the final summary."""

    def __init__(self, output: Optional[Console] = None):
        self.console = output or console

    def display_header(self, stage: Stage) -> None:
        self.console.print(Text(f"{SECTION_SYMBOL} {STAGE_TITLES[stage]}:", style="bold"))

    def display_result(self, result: StageResult) -> None:
        for finding in result.findings:
            self.console.print(format_finding(finding))
            for line in finding.details:
                self.console.print(Text(f"    {line}", style="dim"))

    def display_summary(self, report: HealthReport) -> None:
        self.console.print()
        if report.errors:
            self.console.print(Text(f"❌ {report.errors} problem(s) found", style="bold red"))
        elif report.warnings:
            self.console.print(Text(
                f"⚠️  Safe to push with {report.warnings} warning(s)", style="bold yellow"
            ))
        else:
            self.console.print(Text("✅ Safe to push", style="bold green"))

    def display_fatal(self, error: FatalCheckError) -> None:
        """Report an aborted run with the command that failed."""
        self.console.print()
        self.console.print(Text(f"❌ {error.stage} failed", style="bold red"))
        if error.command:
            self.console.print(Text(f"    command: {error.command}", style="red"))
        if error.message:
            for line in error.message.splitlines():
                self.console.print(Text(f"    {line}", style="dim"))
        self.console.print(Text("Aborting health check.", style="red"))
