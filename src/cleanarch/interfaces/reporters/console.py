"""Console reporter: ValidationResult → rich table."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.table import Table

from cleanarch.domain.model.enums import ViolationRule
from cleanarch.interfaces.reporters._base import BaseReporter

if TYPE_CHECKING:
    from cleanarch.domain.model.validation_result import ValidationResult


class ConsoleReporter(BaseReporter):
    """Rich formatted output: violations table plus summary."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        force_terminal: bool | None = None,
        width: int | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            force_terminal: Force color codes (None = autodetect)
            width: Console width (None = autodetect)
        """
        super().__init__(output)
        self._console = Console(file=self._output, force_terminal=force_terminal, width=width)

    def report(self, result: ValidationResult) -> None:
        """Render validation result."""
        console = self._console

        console.print()
        console.rule("[bold]CLEAN ARCHITECTURE[/bold]")
        console.print()

        if result.violations:
            console.print(self._violations_table(result))
            console.print()

        stats = result.stats
        console.print(
            f"[bold]Files:[/bold] {stats.files_checked} checked, {stats.files_skipped} skipped  "
            f"[bold]Imports:[/bold] {stats.imports_checked} checked, "
            f"{stats.imports_ignored} ignored"
        )

        if result.passed:
            console.print("[bold green]PASSED[/bold green]")
        else:
            console.print(f"[bold red]FAILED[/bold red] ({result.violation_count} violations)")

    def _violations_table(self, result: ValidationResult) -> Table:
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("File", style="cyan")
        table.add_column("Layer")
        table.add_column("Import", style="yellow")
        table.add_column("Layer")
        table.add_column("Rule", style="dim")

        for violation in result.violations:
            rule = (
                "layer order"
                if violation.rule is ViolationRule.LAYER_ORDER
                else f"cross-module ({violation.imported.module or '?'})"
            )
            table.add_row(
                violation.importer_path,
                str(violation.importer),
                violation.imported_path,
                str(violation.imported),
                rule,
            )

        return table
