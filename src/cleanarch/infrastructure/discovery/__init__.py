"""Source discovery adapters."""

from cleanarch.infrastructure.discovery.python_sources import (
    DEFAULT_EXCLUDED_DIRS,
    PythonSourceDiscovery,
    is_test_file,
)

__all__ = [
    "DEFAULT_EXCLUDED_DIRS",
    "PythonSourceDiscovery",
    "is_test_file",
]
