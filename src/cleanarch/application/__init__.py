"""Application layer: classification, layer rules, validator service."""

from cleanarch.application.classifier import classify
from cleanarch.application.rules import check_import, is_allowed, violated_rule
from cleanarch.application.services import Validator

__all__ = [
    "Validator",
    "check_import",
    "classify",
    "is_allowed",
    "violated_rule",
]
