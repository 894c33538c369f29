"""Discovered source file."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceFile:
    """Source file with its declared imports.

    Attributes:
        path: File path as a slash-delimited string
        imports: Import paths in declaration order (slash-delimited)
    """

    path: str
    imports: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise ValueError("path must not be empty")
        if not isinstance(self.imports, tuple):
            raise TypeError(f"imports must be tuple, got {type(self.imports).__name__}")
        for imp in self.imports:
            if not imp:
                raise ValueError(f"import path must not be empty in {self.path}")
