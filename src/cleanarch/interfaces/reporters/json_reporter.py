"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

from cleanarch.interfaces.reporters._base import BaseReporter

if TYPE_CHECKING:
    from cleanarch.domain.model.layer_metadata import LayerMetadata
    from cleanarch.domain.model.validation_result import ValidationResult
    from cleanarch.domain.model.violation import ImportViolation


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs validation results as JSON for CI/CD integration.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        super().__init__(output)
        self._indent = indent

    def report(self, result: ValidationResult) -> None:
        """Report validation result as JSON.

        Args:
            result: Complete validation result
        """
        json.dump(result_to_dict(result), self._output, indent=self._indent)
        self._output.write("\n")


def result_to_dict(result: ValidationResult) -> dict[str, object]:
    """Convert ValidationResult to JSON-serializable dict."""
    return {
        "passed": result.passed,
        "summary": {
            "violation_count": result.violation_count,
            "files_checked": result.stats.files_checked,
            "files_skipped": result.stats.files_skipped,
            "imports_checked": result.stats.imports_checked,
            "imports_ignored": result.stats.imports_ignored,
        },
        "violations": [_violation_to_dict(v) for v in result.violations],
    }


def _metadata_to_dict(metadata: LayerMetadata) -> dict[str, object]:
    return {
        "module": metadata.module,
        "layer": metadata.layer.value if metadata.layer is not None else None,
    }


def _violation_to_dict(violation: ImportViolation) -> dict[str, object]:
    return {
        "rule": violation.rule.value,
        "message": violation.message,
        "importer": {
            "path": violation.importer_path,
            **_metadata_to_dict(violation.importer),
        },
        "imported": {
            "path": violation.imported_path,
            **_metadata_to_dict(violation.imported),
        },
    }
