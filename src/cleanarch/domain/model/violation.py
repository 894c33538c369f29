"""Import violation value object."""

from __future__ import annotations

from dataclasses import dataclass

from cleanarch.domain.model.enums import ViolationRule
from cleanarch.domain.model.layer_metadata import LayerMetadata


@dataclass(frozen=True, slots=True)
class ImportViolation:
    """One import that breaks the layer policy.

    Immutable value object with FAIL-FIRST validation.
    Reported as data, never raised.

    Attributes:
        importer_path: File containing the import
        imported_path: Import path as declared (slash-delimited)
        importer: Metadata of the importing file
        imported: Metadata of the import target
        rule: Which rule fired
    """

    importer_path: str
    imported_path: str
    importer: LayerMetadata
    imported: LayerMetadata
    rule: ViolationRule

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.importer_path:
            raise ValueError("importer_path must not be empty")
        if not self.imported_path:
            raise ValueError("imported_path must not be empty")
        if not self.importer.is_classified:
            raise ValueError("importer must be classified")
        if self.imported.layer is None:
            raise ValueError("imported layer must be set")
        if not isinstance(self.rule, ViolationRule):
            raise TypeError(f"rule must be ViolationRule, got {type(self.rule).__name__}")

    @property
    def message(self) -> str:
        """Human-readable violation message."""
        if self.rule is ViolationRule.LAYER_ORDER:
            return (
                f"you cannot import {self.imported.layer} layer ({self.imported_path}) "
                f"to {self.importer.layer} layer ({self.importer_path})"
            )
        return (
            f"trying to import {self.imported.layer} layer ({self.imported_path}) "
            f"to {self.importer.layer} layer ({self.importer_path}) "
            f"between {self.imported.module or '?'} and {self.importer.module} modules, "
            "you can only import interfaces layer to infrastructure layer"
        )

    def __str__(self) -> str:
        return self.message
