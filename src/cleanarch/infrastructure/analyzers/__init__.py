"""AST analyzers for Python sources."""

from cleanarch.infrastructure.analyzers.base import (
    compute_module_name,
    module_to_path,
    resolve_relative_import,
)
from cleanarch.infrastructure.analyzers.import_analyzer import ImportAnalyzer

__all__ = [
    "ImportAnalyzer",
    "compute_module_name",
    "module_to_path",
    "resolve_relative_import",
]
