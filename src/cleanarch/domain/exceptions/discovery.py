"""Source discovery exceptions.

Fatal for the whole run: no partial violation list is returned.
"""

from __future__ import annotations

from cleanarch.domain.exceptions.base import CleanArchError


class DiscoveryError(CleanArchError):
    """Source tree cannot be walked.

    Attributes:
        path: Path that failed
        reason: Why discovery failed
    """

    def __init__(self, path: str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if not path:
            raise ValueError("path must be non-empty string")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(self._format())

    def _format(self) -> str:
        return f"Cannot discover sources in {self.path}: {self.reason}"


class ParsingError(DiscoveryError):
    """Source file imports cannot be extracted.

    Attributes:
        path: File that failed to parse
        reason: Why parsing failed
    """

    def _format(self) -> str:
        return f"Failed to parse {self.path}: {self.reason}"
