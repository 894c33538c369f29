"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from cleanarch.domain.model.validation_result import ValidationResult


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Concrete reporters must implement the report() method.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: ValidationResult) -> None:
                self._output.write(f"{result.violation_count}\\n")
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    @abstractmethod
    def report(self, result: ValidationResult) -> None:
        """Report validation result.

        Args:
            result: Complete validation result
        """
