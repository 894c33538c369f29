"""Reporters for validation results.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders with rich.
"""

from cleanarch.interfaces.reporters._base import BaseReporter
from cleanarch.interfaces.reporters.console import ConsoleReporter
from cleanarch.interfaces.reporters.json_reporter import JSONReporter
from cleanarch.interfaces.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
