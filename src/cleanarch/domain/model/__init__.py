"""Domain model: layers, metadata, violations, results."""

from cleanarch.domain.model.configuration import (
    DEFAULT_LAYER_ALIASES,
    ValidatorConfig,
    build_alias_table,
    default_aliases,
    freeze_aliases,
)
from cleanarch.domain.model.enums import ViolationRule
from cleanarch.domain.model.layer import LAYER_ORDER, Layer, layer_order
from cleanarch.domain.model.layer_metadata import LayerMetadata
from cleanarch.domain.model.source_file import SourceFile
from cleanarch.domain.model.validation_result import ValidationResult
from cleanarch.domain.model.validation_stats import ValidationStats
from cleanarch.domain.model.violation import ImportViolation

__all__ = [
    # Layers
    "Layer",
    "LAYER_ORDER",
    "layer_order",
    "LayerMetadata",
    # Configuration
    "DEFAULT_LAYER_ALIASES",
    "ValidatorConfig",
    "build_alias_table",
    "default_aliases",
    "freeze_aliases",
    # Input
    "SourceFile",
    # Results
    "ImportViolation",
    "ViolationRule",
    "ValidationResult",
    "ValidationStats",
]
