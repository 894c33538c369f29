"""cleanarch - clean architecture layer checker for Python source trees."""

__version__ = "0.1.0"

from collections.abc import Mapping

from cleanarch.application.classifier import classify
from cleanarch.application.services.validator import Validator
from cleanarch.domain.model import (
    ImportViolation,
    Layer,
    LayerMetadata,
    SourceFile,
    ValidationResult,
    ValidatorConfig,
    ViolationRule,
    default_aliases,
)
from cleanarch.domain.ports.tracer import TracerProtocol
from cleanarch.infrastructure.discovery.python_sources import PythonSourceDiscovery


def new_validator(
    aliases: Mapping[str, Layer] | None = None,
    *,
    tracer: TracerProtocol | None = None,
) -> Validator:
    """Create a Validator wired to Python source discovery.

    Args:
        aliases: Path segment → layer (default: default_aliases())
        tracer: Diagnostic sink (default: no-op)

    Returns:
        Validator ready for validate(root)
    """
    return Validator(
        default_aliases() if aliases is None else aliases,
        discovery=PythonSourceDiscovery(),
        tracer=tracer,
    )


__all__ = [
    "ImportViolation",
    "Layer",
    "LayerMetadata",
    "PythonSourceDiscovery",
    "SourceFile",
    "ValidationResult",
    "Validator",
    "ValidatorConfig",
    "ViolationRule",
    "__version__",
    "classify",
    "default_aliases",
    "new_validator",
]
