"""Software layers and their dependency order."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class Layer(Enum):
    """Architectural layer.

    Closed set. Order weights live in LAYER_ORDER.
    """

    DOMAIN = "domain"
    APPLICATION = "application"
    INTERFACES = "interfaces"
    INFRASTRUCTURE = "infrastructure"

    def __str__(self) -> str:
        return self.value


# Lower weight = more foundational. Within one module a file may only
# import its own layer or a lower one.
LAYER_ORDER: MappingProxyType[Layer, int] = MappingProxyType(
    {
        Layer.DOMAIN: 1,
        Layer.APPLICATION: 2,
        Layer.INTERFACES: 3,
        Layer.INFRASTRUCTURE: 4,
    }
)


def layer_order(layer: Layer) -> int:
    """Return order weight of layer.

    Raises:
        TypeError: If layer is not a Layer (FAIL-FIRST)
    """
    if not isinstance(layer, Layer):
        raise TypeError(f"layer must be Layer, got {type(layer).__name__}")
    return LAYER_ORDER[layer]
