"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cleanarch.interfaces.reporters._base import BaseReporter

if TYPE_CHECKING:
    from cleanarch.domain.model.validation_result import ValidationResult
    from cleanarch.domain.model.violation import ImportViolation


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    One line per violation, then a summary and the verdict.
    """

    def report(self, result: ValidationResult) -> None:
        """Report validation result as plain text.

        Args:
            result: Complete validation result
        """
        if result.violations:
            self._report_violations(result.violations)

        self._report_summary(result)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_violations(self, violations: tuple[ImportViolation, ...]) -> None:
        for i, violation in enumerate(violations, start=1):
            self._write(f"{i}. [{violation.rule.value}] {violation.message}")
        self._write()

    def _report_summary(self, result: ValidationResult) -> None:
        stats = result.stats
        self._write(
            f"Files: {stats.files_checked} checked, {stats.files_skipped} skipped; "
            f"imports: {stats.imports_checked} checked, {stats.imports_ignored} ignored"
        )
        if result.passed:
            self._write("Uncle Bob is happy.")
        else:
            self._write(f"Uncle Bob is not happy: {result.violation_count} violation(s).")
