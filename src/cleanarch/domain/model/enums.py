"""Domain enumerations."""

from enum import Enum


class ViolationRule(Enum):
    """Rule an illegal import breached."""

    LAYER_ORDER = "layer_order"  # same module, imported layer ranks higher
    CROSS_MODULE = "cross_module"  # other module, not interfaces -> infrastructure
