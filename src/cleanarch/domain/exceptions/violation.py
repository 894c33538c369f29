"""Architecture violation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cleanarch.domain.exceptions.base import CleanArchError

if TYPE_CHECKING:
    from cleanarch.domain.model.violation import ImportViolation


class ArchitectureViolationError(CleanArchError):
    """Layer rules violated.

    Raised only by assert_clean_architecture(). Validators return
    violations as data.

    Attributes:
        violations: All found violations
    """

    def __init__(self, violations: tuple[ImportViolation, ...]) -> None:
        if not violations:
            raise ValueError("ArchitectureViolationError requires at least one violation")

        self.violations = violations

        msg_parts = [f"Found {len(violations)} architecture violation(s):"]
        for v in violations:
            msg_parts.append(f"  {v}")

        super().__init__("\n".join(msg_parts))
