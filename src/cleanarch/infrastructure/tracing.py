"""structlog-backed tracer.

Implements TracerProtocol: every trace event becomes a DEBUG log entry
on the "cleanarch" logger.
"""

from __future__ import annotations

from typing import Any

import structlog

LOGGER_NAME = "cleanarch"


class StructlogTracer:
    """Tracer writing classification detail to structlog.

    Output routing and level are decided by configure_logging().
    """

    def __init__(self, logger: Any | None = None) -> None:
        """Initialize tracer.

        Args:
            logger: structlog logger (default: structlog.get_logger("cleanarch"))
        """
        self._logger = logger if logger is not None else structlog.get_logger(LOGGER_NAME)

    def trace(self, event: str, **fields: object) -> None:
        """Emit event at DEBUG level."""
        self._logger.debug(event, **fields)
