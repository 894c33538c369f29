"""Validation result aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field

from cleanarch.domain.model.validation_stats import ValidationStats
from cleanarch.domain.model.violation import ImportViolation


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of one validation run.

    Violations keep discovery order, then import declaration order.

    Attributes:
        violations: All violations found
        stats: Run statistics
    """

    violations: tuple[ImportViolation, ...] = ()
    stats: ValidationStats = field(default_factory=ValidationStats.empty)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.violations, tuple):
            raise TypeError(f"violations must be tuple, got {type(self.violations).__name__}")

    @property
    def passed(self) -> bool:
        """No violations found."""
        return len(self.violations) == 0

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)

    @classmethod
    def empty(cls) -> ValidationResult:
        """Create empty result (passed, no violations)."""
        return cls()
