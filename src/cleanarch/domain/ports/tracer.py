"""Tracer protocol for diagnostic output.

Observational only: tracing never changes validation outcome.
"""

from __future__ import annotations

from typing import Protocol


class TracerProtocol(Protocol):
    """Contract for diagnostic sinks.

    Injected into Validator at construction. Receives per-file and
    per-import classification detail.

    Example:
        class PrintTracer:
            def trace(self, event: str, **fields: object) -> None:
                print(event, fields)
    """

    def trace(self, event: str, **fields: object) -> None:
        """Record one diagnostic event.

        Args:
            event: Event name (e.g. "file.metadata")
            **fields: Event details
        """
        ...


class NullTracer:
    """Tracer that discards everything. Default sink."""

    def trace(self, event: str, **fields: object) -> None:
        """Discard event."""
