"""Layer rules for import validation."""

from cleanarch.application.rules.layer_rules import check_import, is_allowed, violated_rule

__all__ = [
    "check_import",
    "is_allowed",
    "violated_rule",
]
