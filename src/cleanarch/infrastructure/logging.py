"""Log routing for the cleanarch command.

stdout carries only the report, so every log line goes to stderr.
The "cleanarch" logger receives StructlogTracer events at DEBUG; they
are shown only with --debug, all other loggers stay at WARNING.
--log-json swaps the console renderer for one JSON object per line,
which keeps traces machine-readable next to a --format json report.
"""

from __future__ import annotations

import logging
import sys

import structlog

from cleanarch.infrastructure.tracing import LOGGER_NAME

_PRE_CHAIN: tuple[structlog.types.Processor, ...] = (
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route structlog and stdlib logging to stderr.

    Replaces any handlers already on the root logger, so calling it
    again (one CLI invocation after another) does not duplicate output.

    Args:
        verbose: Show classification trace events (DEBUG on "cleanarch")
        log_json: Render JSON lines instead of console output
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_PRE_CHAIN),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
