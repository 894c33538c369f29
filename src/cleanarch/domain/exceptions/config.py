"""Configuration exceptions."""

from __future__ import annotations

from cleanarch.domain.exceptions.base import CleanArchError


class ConfigError(CleanArchError):
    """Invalid configuration file.

    Attributes:
        source: Where the configuration came from
        reason: Why it is invalid
    """

    def __init__(self, source: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not source:
            raise ValueError("source must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.source = source
        self.reason = reason
        super().__init__(f"Invalid configuration in {source}: {reason}")
