"""Validation run statistics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationStats:
    """Counters from one validation run.

    Attributes:
        files_checked: Files whose imports were checked
        files_skipped: Files skipped as unclassifiable
        imports_checked: Imports run through the layer rules
        imports_ignored: Imports matching an ignored substring
    """

    files_checked: int
    files_skipped: int
    imports_checked: int
    imports_ignored: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.files_checked < 0:
            raise ValueError(f"files_checked must be >= 0, got {self.files_checked}")
        if self.files_skipped < 0:
            raise ValueError(f"files_skipped must be >= 0, got {self.files_skipped}")
        if self.imports_checked < 0:
            raise ValueError(f"imports_checked must be >= 0, got {self.imports_checked}")
        if self.imports_ignored < 0:
            raise ValueError(f"imports_ignored must be >= 0, got {self.imports_ignored}")

    @property
    def files_total(self) -> int:
        """Files seen by the run."""
        return self.files_checked + self.files_skipped

    @classmethod
    def empty(cls) -> ValidationStats:
        """Create empty stats."""
        return cls(files_checked=0, files_skipped=0, imports_checked=0, imports_ignored=0)
